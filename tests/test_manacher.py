import random

from algolib.manacher import manacher


def test_small_example():
    assert manacher("aba") == [1, 2, 1]


def test_empty():
    assert manacher("") == []


def test_radii_are_maximal_palindromes():
    rnd = random.Random(4)
    for _ in range(50):
        s = "".join(rnd.choice("ab") for _ in range(rnd.randint(1, 30)))
        radii = manacher(s)
        assert len(radii) == len(s)
        for i, r in enumerate(radii):
            assert r >= 1
            piece = s[i - r + 1 : i + r]
            assert piece == piece[::-1]
            if i - r >= 0 and i + r < len(s):
                assert s[i - r] != s[i + r]


def test_works_on_lists():
    seq = [1, 2, 3, 2, 1]
    assert manacher(seq)[2] == 3