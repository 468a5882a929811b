import pytest

from fractol.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "Mandelbrot", "Julia set"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strchr_finds_first_occurrence():
    text = "banana"
    index = strchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[:index]


def test_strchr_terminator_is_end():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None


def test_strchr_accepts_byte_value():
    assert strchr("abc", ord("b")) == "abc".index("b")


def test_strrchr_finds_last_occurrence():
    text = "banana"
    index = strrchr(text, "a")
    assert text[index] == "a"
    assert "a" not in text[index + 1:]


def test_strrchr_terminator_and_missing():
    assert strrchr("hello", "\0") == len("hello")
    assert strrchr("hello", "q") is None


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_difference_of_code_points():
    assert strncmp("a", "c", 1) == ord("a") - ord("c")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_prefix_argument_style():
    # A user argument that is a prefix of the full name matches.
    assert strncmp("Mandelbrot", "Mand", len("Mand")) == 0


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:index + len("ipsum")] == "ipsum"


def test_strnstr_needle_crossing_length():
    haystack = "lorem ipsum dolor"
    start = haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(haystack, "ipsum", start + len("ipsum")) == start


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


def test_strdup_equal_copy():
    assert strdup("fractal") == "fractal"


def test_substr_basic():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hi", 10, 3) == ""


def test_substr_start_at_end():
    assert substr("hi", len("hi"), 3) == ""


def test_substr_none():
    assert substr(None, 0, 1) is None


def test_strjoin():
    assert strjoin("frac", "tol") == "frac" + "tol"
    assert strjoin(None, None) == ""
    assert strjoin("only", None) == "only"


def test_strtrim_both_ends():
    assert strtrim("xxabcxx", "x") == "abc"


def test_strtrim_nothing_to_trim():
    assert strtrim("abc", "") == "abc"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""


def test_strtrim_single_character_remainder_is_empty():
    assert strtrim("xax", "x") == ""


def test_strtrim_none():
    assert strtrim(None, "x") is None
    assert strtrim("abc", None) is None


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_no_separator():
    assert split("word", ",") == ["word"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_none():
    assert split(None, " ") is None


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_none():
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 else None)
    assert "".join(chars) == "aBcD"


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_fits():
    copied, length = strlcpy("hello", 10)
    assert copied == "hello"
    assert length == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_appends_within_size():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_fits_fully():
    result, total = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("abcd")


def test_strlcat_size_smaller_than_dst():
    result, total = strlcat("abcdef", "xy", 3)
    assert result == "abcdef"
    assert total == 3 + len("xy")


def test_strlcat_no_room_for_more():
    result, total = strlcat("abc", "xy", len("abc") + 1)
    assert result == "abc"
    assert total == len("abc") + len("xy")


def test_strlcat_zero_size():
    assert strlcat("abc", "xy", 0) == ("abc", len("xy"))


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)