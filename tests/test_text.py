import pytest

from algobox.text import MODULUS, count_substrings, length_after_transformations


def test_count_substrings_distinct_letters():
    s = "abcdef"
    assert count_substrings(s) == len(s)


def test_count_substrings_empty():
    assert count_substrings("") == len("")


@pytest.mark.parametrize("size", [1, 2, 3, 7, 12])
def test_count_substrings_repeated_letter(size):
    s = "a" * size
    assert count_substrings(s) == size * (size + 1) // 2


def test_count_substrings_known_value():
    assert count_substrings("abba") == 6


@pytest.mark.parametrize("s", ["racecar", "abacdfgdcaba", "xyzzyx", "banana"])
def test_count_substrings_at_least_length(s):
    assert count_substrings(s) >= len(s)


def test_count_substrings_reverse_invariant():
    s = "abacdfgdcaba"
    assert count_substrings(s) == count_substrings(s[::-1])


def test_length_zero_steps_is_length():
    s = "hello"
    assert length_after_transformations(s, 0) == len(s)


def test_length_known_examples():
    assert length_after_transformations("abcyy", 2) == 7
    assert length_after_transformations("azbk", 1) == 5


def test_length_no_wrap_keeps_length():
    s = "aaaa"
    assert length_after_transformations(s, 25) == len(s)


def test_length_non_decreasing():
    s = "qz"
    lengths = [length_after_transformations(s, t) for t in range(60)]
    assert lengths == sorted(lengths)


def test_length_reduced_modulo():
    result = length_after_transformations("z" * 50, 5000)
    assert 0 <= result < MODULUS


def test_length_rejects_other_characters():
    with pytest.raises(ValueError):
        length_after_transformations("aB", 1)


def test_length_rejects_negative_steps():
    with pytest.raises(ValueError):
        length_after_transformations("abc", -1)