import pytest

from pyftls.text import (
    strchr,
    strjoin,
    strmap,
    strmapi,
    striter,
    striteri,
    strnstr,
    strrchr,
    strsplit,
    strstr,
    strsub,
    strtrim,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "c"), ("xyz", "x")])
def test_strchr_finds_first(s, c):
    idx = strchr(s, c)
    assert s[idx] == c
    assert c not in s[:idx]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("hello", "\0") == len("hello")


def test_strchr_stops_at_nul():
    assert strchr("ab\0cd", "c") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_strrchr_finds_last(s, c):
    idx = strrchr(s, c)
    assert s[idx] == c
    assert c not in s[idx + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strstr():
    hay = "the quick brown fox"
    idx = strstr(hay, "brown")
    assert hay[idx:idx + len("brown")] == "brown"
    assert strstr(hay, "") == 0
    assert strstr(hay, "cat") is None


def test_strnstr_limits_match():
    hay = "lorem ipsum dolor"
    idx = strnstr(hay, "ipsum", len(hay))
    assert hay[idx:idx + len("ipsum")] == "ipsum"
    assert strnstr(hay, "ipsum", idx + len("ipsum") - 1) is None
    assert strnstr(hay, "ipsum", idx + len("ipsum")) == idx
    assert strnstr(hay, "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strsub():
    s = "programming"
    assert strsub(s, 3, 4) == s[3:7]
    assert strsub(s, 0, 2) is not None and len(strsub(s, 0, 2)) == 2
    assert strsub(s, 0, 0) is None
    assert strsub(None, 0, 3) is None


def test_strsub_out_of_range():
    with pytest.raises(IndexError):
        strsub("abc", 2, 5)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) == ""


def test_strtrim():
    assert strtrim("  \t hello world \n ") == "hello world"
    assert strtrim(" \n\t ") == ""
    assert strtrim("abc") == "abc"
    assert strtrim(None) is None


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\rabc\r") == "\rabc\r"


def test_strsplit():
    assert strsplit("*hello*world**", "*") == ["hello", "world"]
    assert strsplit("****", "*") == []
    assert strsplit("", "*") == []
    assert strsplit(None, "*") is None


def test_strsplit_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert strsplit(" ".join(words), " ") == words


def test_strmap():
    assert strmap("abc", str.upper) == "ABC"
    assert strmap(None, str.upper) is None
    assert strmap("", str.upper) == ""


def test_strmapi_uses_offsets():
    s = "abcdef"
    result = strmapi(s, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCdEf"
    assert strmapi(None, lambda i, ch: ch) is None


def test_striter_visits_each_char():
    seen = []
    striter("hey", seen.append)
    assert seen == ["h", "e", "y"]


def test_striteri_passes_offsets():
    seen = []
    striteri("hey", lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("hey"))


def test_striter_none_does_nothing():
    seen = []
    striter(None, seen.append)
    striteri(None, lambda i, ch: seen.append(ch))
    assert seen == []