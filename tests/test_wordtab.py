import pytest

from isofdf.wordtab import find, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_blank_text_gives_no_words():
    assert split_words(" \t \t") == []
    assert split_words("") == []


def test_split_xpm_header():
    assert split_words("16 7 2 1") == ["16", "7", "2", "1"]


def test_find_returns_offset_of_first_match():
    prefix = "xyz "
    text = prefix + "needle and needle"
    assert find(text, "needle", len(text)) == len(prefix)


def test_find_missing_gives_minus_one():
    assert find("abcdef", "zz", 6) == -1


def test_find_needle_longer_than_limit():
    assert find("abc", "abc", 2) == -1
    assert find("abc", "abc", 3) == 0


def test_find_rejects_empty_needle():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_part():
    head = '"/*" '
    text = head + "/* comment"
    assert find_unquoted(text, "/*", len(text)) == len(head)
    assert find(text, "/*", len(text)) == 1


def test_find_unquoted_without_quotes_matches_find():
    text = "int a; // note"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_only_quoted_match():
    text = 'x "//" y'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_limit_and_empty_needle():
    assert find_unquoted("abc", "abc", 1) == -1
    with pytest.raises(ValueError):
        find_unquoted("abc", "", 3)