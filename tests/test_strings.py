import pytest

from wireframe.strings import (
    split,
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  10  20 -3 ", " ") == ["10", "20", "-3"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_split_accepts_byte_code():
    assert split("a,b,,c", ord(",")) == split("a,b,,c", ",")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_worked_example():
    text = "abcbc"
    index = strchr(text, "c")
    assert text[index:] == "cbc"


def test_strrchr_worked_example():
    text = "abcbc"
    index = strrchr(text, "c")
    assert text[index:] == "c"


def test_strchr_missing_and_nul():
    text = "hello"
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None
    assert strchr(text, "\0") == len(text)
    assert strrchr(text, 0) == len(text)


def test_strchr_before_strrchr():
    text = "mississippi"
    assert strchr(text, "s") <= strrchr(text, "s")
    assert text[strchr(text, "s")] == "s"
    assert text[strrchr(text, "s")] == "s"


def test_strjoin():
    assert strjoin("Hello, ", "World") == "Hello, World"
    assert strjoin(None, "World") is None


def test_strlcpy_truncates_and_reports_source_length():
    src = "a potentially long string"
    copied, total = strlcpy(src, 5)
    assert total == len(src)
    assert len(copied) == 4
    assert src.startswith(copied)


def test_strlcpy_zero_and_large_size():
    assert strlcpy("abc", 0) == ("", 3)
    assert strlcpy("abc", 64) == ("abc", 3)


def test_strlcat_full_copy():
    dest, src = "Hello, ", "World"
    result, total = strlcat(dest, src, 100)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_truncated_fits_buffer():
    dest, src = "This is ", "a potentially long string"
    size = 16
    result, total = strlcat(dest, src, size)
    assert len(result) == size - 1
    assert (dest + src).startswith(result)
    assert total == len(dest) + len(src)
    assert total > size


def test_strlcat_dest_already_full():
    dest, src = "abcdef", "xyz"
    result, total = strlcat(dest, src, 3)
    assert result == dest
    assert total == len(src) + 3


def test_strlcat_zero_size():
    assert strlcat("abc", "de", 0) == ("abc", 2)


def test_strncmp_sign_and_bounds():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("b", "a", 1) > 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_orders_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 7) == -strncmp("apricot", "apple", 7)


def test_strnstr():
    haystack = "Foo Bar Baz"
    assert strnstr(haystack, "", 0) == 0
    index = strnstr(haystack, "Bar", len(haystack))
    assert haystack[index:index + 3] == "Bar"
    assert strnstr(haystack, "Bar", index + 2) is None
    assert strnstr(haystack, "Bar", index + 3) == index
    assert strnstr(haystack, "Qux", len(haystack)) is None


def test_strtrim():
    assert strtrim("xxhello worldxx", "x") == "hello world"
    assert strtrim("abcba", "ab") == "c"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr():
    text = "wireframe"
    assert substr(text, 4, 5) == "frame"
    assert substr(text, 4, 100) == "frame"
    assert substr(text, len(text), 3) == ""
    assert substr(None, 0, 1) is None


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_edits_in_place():
    chars = list("hello")

    def capitalise_even(index, seq):
        if index % 2 == 0:
            seq[index] = seq[index].upper()

    result = striteri(chars, capitalise_even)
    assert result is chars
    assert "".join(chars) == "HeLlO"


def test_striteri_without_function_leaves_input():
    chars = list("abc")
    assert striteri(chars, None) == ["a", "b", "c"]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)
    with pytest.raises(ValueError):
        strnstr("abc", "b", -1)