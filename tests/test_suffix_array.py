import pytest

from algokit.suffix_array import suffix_array


def test_banana():
    assert suffix_array("banana") == [5, 3, 1, 0, 4, 2]


def test_empty_text():
    assert suffix_array("") == []


@pytest.mark.parametrize(
    "text",
    ["a", "aaaa", "abracadabra", "mississippi", "abababaaoiwhnefiewhfef", "zyxwv"],
)
def test_is_sorted_permutation_of_suffixes(text):
    result = suffix_array(text)
    assert sorted(result) == list(range(len(text)))
    suffixes = [text[i:] for i in result]
    assert all(a < b for a, b in zip(suffixes, suffixes[1:]))


def test_bytes_input():
    data = b"abcab"
    result = suffix_array(data)
    suffixes = [data[i:] for i in result]
    assert suffixes == sorted(suffixes)
    assert len(result) == len(data)


def test_shorter_suffix_comes_first_when_prefix():
    result = suffix_array("aaa")
    assert [len("aaa") - i for i in result] == [1, 2, 3]