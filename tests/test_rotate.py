import pytest

from codedrills.rotate import rotate


def test_source_example():
    assert rotate("abcdefghi", 3) == "defghiabc"


@pytest.mark.parametrize(
    "text, m",
    [("abcd", 2), ("abcdef", 3), ("abcdef", 2), ("xyzxyzxyzxyz", 4), ("ab", 1)],
)
def test_length_multiple_of_shift_is_left_rotation(text, m):
    assert rotate(text, m) == text[m:] + text[:m]


@pytest.mark.parametrize("text, m", [("abcde", 2), ("hello world", 3), ("abc", 1)])
def test_result_is_a_permutation(text, m):
    result = rotate(text, m)
    assert sorted(result) == sorted(text)
    assert len(result) == len(text)


def test_zero_shift_leaves_text():
    assert rotate("abc", 0) == "abc"


@pytest.mark.parametrize("text, m", [("abc", 3), ("abc", 5), ("", 0), ("abc", -1)])
def test_invalid_shift_raises(text, m):
    with pytest.raises(ValueError):
        rotate(text, m)