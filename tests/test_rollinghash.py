import pytest

from algolib.rollinghash import RollingHash, lcp

BASE = 1000003


def test_single_character_hash_is_its_code():
    rh = RollingHash("abc", BASE)
    assert rh.get(0, 1) == ord("a")
    assert rh.get(2, 3) == ord("c")


def test_equal_substrings_have_equal_hashes():
    rh = RollingHash("abcabcx", BASE)
    assert rh.get(0, 3) == rh.get(3, 6)
    assert rh.get(0, 3) != rh.get(1, 4)
    assert rh.get(2, 2) == 0


def test_same_text_in_two_hashes():
    a = RollingHash("xxhello", BASE)
    b = RollingHash("hello", BASE)
    assert a.get(2, 7) == b.get(0, 5)


def test_default_base_consistent_between_instances():
    a = RollingHash("banana")
    b = RollingHash("ana")
    assert a.get(1, 4) == b.get(0, 3)
    assert a.get(3, 6) == b.get(0, 3)


def test_connect_concatenates():
    rh = RollingHash("abcdefg", BASE)
    assert rh.connect(rh.get(0, 2), rh.get(2, 5), 3) == rh.get(0, 5)


def test_len_and_bounds():
    rh = RollingHash("abcd", BASE)
    assert len(rh) == 4
    with pytest.raises(IndexError):
        rh.get(2, 5)
    with pytest.raises(IndexError):
        rh.get(3, 2)


def test_integer_sequence_input():
    rh = RollingHash([5, 6, 5, 6], BASE)
    assert rh.get(0, 2) == rh.get(2, 4)


def test_lcp():
    a = RollingHash("abcde", BASE)
    b = RollingHash("abxde", BASE)
    assert lcp(a, 0, 5, b, 0, 5) == 2
    assert lcp(a, 3, 5, b, 3, 5) == 2
    assert lcp(a, 0, 5, a, 0, 3) == 3
    assert lcp(a, 0, 0, b, 0, 5) == 0


def test_lcp_rejects_reversed_range():
    a = RollingHash("abc", BASE)
    with pytest.raises(ValueError):
        lcp(a, 2, 1, a, 0, 1)