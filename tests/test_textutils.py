import pytest

from pipex.textutils import (
    atoi,
    env_lookup,
    itoa,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_pieces():
    assert split("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_only_separators():
    assert split(":::", ":") == []


def test_split_join_round_trip():
    words = ["grep", "-v", "foo"]
    assert split(" ".join(words), " ") == words


def test_env_lookup_skips_key_and_equals():
    env = ["HOME=/home/user", "PATH=/usr/bin:/bin"]
    assert env_lookup(env, "PATH") == "/usr/bin:/bin"


def test_env_lookup_missing():
    assert env_lookup(["HOME=/home/user"], "PATH") is None


def test_env_lookup_first_prefix_wins():
    env = ["PATH=/first", "PATH=/second"]
    assert env_lookup(env, "PATH") == "/first"


def test_env_lookup_empty_word():
    with pytest.raises(ValueError):
        env_lookup(["A=b"], "")


def test_atoi_whitespace_and_sign():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_sign_without_digit():
    assert atoi("-x12") == 0
    assert atoi("+") == 0


def test_atoi_no_digits():
    assert atoi("abc") == 0


def test_itoa_atoi_round_trip():
    for n in (0, 7, -7, 2147483647, -2147483648):
        assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_strtrim():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("abc", "abc") == ""
    assert strtrim("  a  ", "") == "  a  "


def test_substr_within_and_past_end():
    s = "pipeline"
    assert substr(s, 0, 4) == "pipe"
    assert substr(s, 4, 100) == "line"
    assert substr(s, 100, 3) == ""
    assert substr(s, 2, 0) == ""


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_found_and_bounded():
    hay = "hello world"
    idx = strnstr(hay, "world", len(hay))
    assert hay[idx:idx + 5] == "world"
    assert strnstr(hay, "world", len(hay) - 1) is None


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strncmp_equal_and_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0


def test_strchr_and_strrchr():
    s = "a/b/c"
    first = strchr(s, "/")
    last = strrchr(s, "/")
    assert s[first] == "/" and "/" not in s[:first]
    assert s[last] == "/" and "/" not in s[last + 1:]
    assert first < last


def test_strchr_nul_and_missing():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")