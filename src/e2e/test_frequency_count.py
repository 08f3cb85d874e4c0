from collections import Counter
import pytest
from anagram.frequency import count


def test_empty_string_gives_empty_map():
    assert count("") == {}


def test_counts_repeated_letters():
    assert count("aab") == {"a": 2, "b": 1}


@pytest.mark.parametrize("s", ["cats", "mississippi", "16080142", "a b"])
def test_counts_sum_to_length_and_are_positive(s):
    freq = count(s)
    assert sum(freq.values()) == len(s)
    assert all(n > 0 for n in freq.values())
    assert set(freq) == set(s)


def test_result_is_fresh_map():
    first = count("tea")
    first["z"] += 5
    assert "z" not in count("tea")
    assert isinstance(count("tea"), Counter)
