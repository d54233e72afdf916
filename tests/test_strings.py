import pytest

from ftkit.strings import (
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


# strlen

@pytest.mark.parametrize("s", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_length_without_nul(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("ab\0cd") == strlen("ab")
    assert strlen(b"ab\0cd") == strlen(b"ab")


def test_strlen_empty_bytes():
    assert strlen(b"") == 0


def test_strlen_none_raises():
    with pytest.raises(TypeError):
        strlen(None)


# strlcpy

def test_strlcpy_copies_whole_string():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", 10) == len(b"hello")
    assert dst[:len(b"hello") + 1] == b"hello\0"


def test_strlcpy_truncates_and_terminates():
    dst = bytearray(b"xxxxxx")
    assert strlcpy(dst, b"hello", 3) == len(b"hello")
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"xxx"


def test_strlcpy_size_zero_leaves_destination():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"hello", 0) == len(b"hello")
    assert dst == bytearray(b"keep")


def test_strlcpy_destination_too_small():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hello", 10)


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy(bytearray(4), b"a", -1)


# strlcat

def test_strlcat_appends():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cd", 10) == len(b"ab") + len(b"cd")
    assert dst[:5] == b"abcd\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cd", 4) == len(b"ab") + len(b"cd")
    assert dst[:4] == b"abc\0"


def test_strlcat_size_below_destination_length():
    dst = bytearray(b"abc\0" + bytes(6))
    before = bytes(dst)
    assert strlcat(dst, b"xyz", 2) == 2 + len(b"xyz")
    assert bytes(dst) == before


def test_strlcat_overflowing_buffer_raises():
    with pytest.raises(ValueError):
        strlcat(bytearray(b"ab\0"), b"cd", 10)


# strchr / strrchr

def test_strchr_finds_first():
    s = "hello"
    idx = strchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[:idx]


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_integer_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strrchr_finds_last():
    s = "hello"
    idx = strrchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[idx + 1:]


def test_strrchr_first_character_and_missing():
    assert strrchr("hello", "h") == 0
    assert strrchr("hello", "z") is None
    assert strrchr("", "\0") == 0


def test_strchr_bad_char_raises():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


# strncmp

def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_prefix():
    assert strncmp("abc", "abcd", 3) == 0
    assert strncmp("abc", "abcd", 4) == -ord("d")


def test_strncmp_beyond_both_ends():
    assert strncmp("abc", "abc", 100) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

def test_strnstr_found():
    big, little = "Foo Bar Baz", "Bar"
    idx = strnstr(big, little, len(big))
    assert big[idx:idx + len(little)] == little


def test_strnstr_limited_length():
    assert strnstr("Foo Bar Baz", "Bar", 4) is None
    assert strnstr("Foo Bar Baz", "Bar", 6) is None


def test_strnstr_empty_little():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


# strdup

def test_strdup_equal():
    assert strdup("hello") == "hello"


def test_strdup_none():
    with pytest.raises(TypeError):
        strdup(None)


# substr

def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamps_length():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""


def test_substr_none():
    assert substr(None, 0, 1) is None


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


# strjoin

def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


def test_strjoin_none():
    assert strjoin(None, "a") is None
    assert strjoin("a", None) is None


# strtrim

def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_all_removed():
    assert strtrim("xyxy", "xy") == ""


def test_strtrim_empty_set():
    assert strtrim(" hi ", "") == " hi "


def test_strtrim_none():
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


# split

def test_split_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("aaa", "a") == []


def test_split_nul_separator_gives_whole():
    assert split("hello world", "\0") == ["hello world"]


def test_split_words_contain_no_separator():
    words = split(",a,,bc,d,", ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert ",".join(words) == "a,bc,d"


def test_split_none():
    assert split(None, " ") is None


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


# strmapi

def test_strmapi_upper():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"


def test_strmapi_passes_index():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_none():
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


# striteri

def test_striteri_modifies_bytes():
    buf = bytearray(b"abc")
    striteri(buf, lambda i, b: b ^ 0x20)
    assert buf == bytearray(b"ABC")


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\0cd")
    striteri(buf, lambda i, b: b ^ 0x20)
    assert buf == bytearray(b"AB\0cd")


def test_striteri_none_result_keeps_item():
    seen = []
    buf = ["a", "b"]
    striteri(buf, lambda i, c: seen.append((i, c)))
    assert buf == ["a", "b"]
    assert seen == [(0, "a"), (1, "b")]


def test_striteri_none_func_leaves_buffer():
    buf = bytearray(b"abc")
    striteri(buf, None)
    assert buf == bytearray(b"abc")