import pytest

from ftlib.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# strchr / strrchr

def test_strchr_finds_first_occurrence():
    s = "hello world"
    i = strchr(s, "o")
    assert s[i] == "o"
    assert "o" not in s[:i]


def test_strrchr_finds_last_occurrence():
    s = "hello world"
    i = strrchr(s, "o")
    assert s[i] == "o"
    assert "o" not in s[i + 1 :]


def test_strchr_and_strrchr_differ_with_repeats():
    s = "abcabc"
    assert strchr(s, "b") < strrchr(s, "b")


@pytest.mark.parametrize("func", [strchr, strrchr])
def test_missing_character_gives_none(func):
    assert func("hello", "z") is None
    assert func("", "a") is None


@pytest.mark.parametrize("func", [strchr, strrchr])
def test_nul_search_gives_end(func):
    s = "hello"
    assert func(s, "\0") == len(s)
    assert func(s, 0) == len(s)
    assert func(s, 256) == len(s)


def test_strchr_integer_code_is_masked():
    s = "hello"
    assert strchr(s, ord("l")) == strchr(s, "l")
    assert strchr(s, 256 + ord("l")) == strchr(s, "l")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "he")


# strncmp

def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_at_mismatch():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_shorter_string_counts_terminator():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "a", -1)


# strnstr

def test_strnstr_finds_needle():
    haystack = "lorem ipsum dolor"
    i = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[i:].startswith("ipsum")


def test_strnstr_respects_length():
    haystack = "lorem ipsum dolor"
    start = haystack.find("ipsum")
    assert strnstr(haystack, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle_and_long_needle():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "abcd", 10) is None
    assert strnstr("abc", "x", 3) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


# strlcpy / strlcat

def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)


def test_strlcat_truncates():
    dst, total = strlcat("ab", "cdef", 4)
    assert dst == "abc"
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dst():
    assert strlcat("abc", "de", 2) == ("abc", len("de") + 2)


# substr

def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_clips_length():
    s = "hello"
    assert substr(s, 2, 100) == s[2:]


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 50, 3) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


# strjoin

def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo") and joined.endswith("bar")
    assert len(joined) == len("foo") + len("bar")


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "bar")


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xyhi thereyx", "xy") == "hi there"


def test_strtrim_keeps_interior():
    assert strtrim("--a-b--", "-") == "a-b"


def test_strtrim_everything_in_set():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_changes_nothing():
    assert strtrim("  a  ", "") == "  a  "


# split

def test_split_drops_empty_pieces():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_nul_separator_keeps_whole_string():
    assert split("hello", "\0") == ["hello"]


def test_split_words_hold_no_separator():
    words = split(",one,,two,three,", ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert ",".join(words) == "one,two,three"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


# strmapi / striteri

def test_strmapi_uses_function():
    assert strmapi("abc", lambda i, ch: ch.upper()) == "ABC"


def test_strmapi_passes_index():
    s = "xxxx"
    result = strmapi(s, lambda i, ch: str(i))
    assert len(result) == len(s)
    assert result == "".join(str(i) for i in range(len(s)))


def test_striteri_changes_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_on_bytearray():
    data = bytearray(b"abc")
    striteri(data, lambda i, b: b - 32)
    assert data == bytearray(b"ABC")


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, ch: ch)