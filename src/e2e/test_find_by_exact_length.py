from anagram.match import find_by_exact_length


def test_only_formable_words_of_that_length():
    # bat / rat need letters that "cat" does not have
    assert find_by_exact_length(["cat", "dog", "bat", "rat"], "cat", 3) == ["cat"]


def test_order_is_preserved():
    words = ["rat", "tar", "art", "star", "at"]
    assert find_by_exact_length(words, "start", 3) == ["rat", "tar", "art"]


def test_parametric_on_length():
    words = ["stare", "tears", "rates", "tea", "star"]
    assert find_by_exact_length(words, "treasure", 5) == ["stare", "tears", "rates"]
    assert find_by_exact_length(words, "treasure", 4) == ["star"]
    assert find_by_exact_length(words, "treasure", 9) == []
