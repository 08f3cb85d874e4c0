import pytest
from anagram.frequency import count
from anagram.match import formable


@pytest.mark.parametrize("s", ["", "a", "cats", "letter", "16080142"])
def test_every_string_is_formable_from_itself(s):
    assert formable(s, s)


@pytest.mark.parametrize("q", ["", "x", "anything"])
def test_empty_candidate_is_always_formable(q):
    assert formable("", q)


def test_subset_is_formable_but_not_the_reverse():
    big, small = "listen", "lint"
    assert formable(small, big)
    assert not formable(big, small)


def test_multiplicity_matters():
    assert formable("tee", "tree")
    assert not formable("teee", "tree")
    assert not formable("cass", "cats")


def test_missing_letter_is_not_formable():
    assert not formable("dog", "cats")


def test_accepts_prebuilt_frequency_maps():
    assert formable(count("tac"), count("cats"))
    assert formable("tac", count("cats"))
    assert not formable(count("dog"), "cats")
