import pytest

from cmdgames.strfuncs import (
    str_casecmp,
    str_casencmp,
    str_cat,
    str_chr,
    str_cmp,
    str_cpy,
    str_len,
    str_lower,
    str_ncat,
    str_ncmp,
    str_ncpy,
    str_rchr,
    str_rev,
    str_rstr,
    str_str,
    str_upper,
)

SAMPLES = ["", "a", "hello", "Hello World", "abcabc", "Tongji 123!"]
PAIRS = [
    ("abc", "abd"),
    ("abc", "abc"),
    ("ab", "abc"),
    ("Hello", "hello"),
    ("zeta", "Alpha"),
    ("", "x"),
]


def _sign(n):
    return (n > 0) - (n < 0)


@pytest.mark.parametrize("s", SAMPLES)
def test_len_matches_number_of_characters(s):
    assert str_len(s) == len(s)


def test_len_of_null_is_zero():
    assert str_len(None) == 0


@pytest.mark.parametrize("a,b", PAIRS)
def test_cat_joins_both_parts(a, b):
    result = str_cat(a, b)
    assert result.startswith(a)
    assert result.endswith(b)
    assert str_len(result) == str_len(a) + str_len(b)


def test_cat_null_handling():
    assert str_cat(None, "abc") is None
    assert str_cat("abc", None) == "abc"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_ncat_appends_at_most_n(n):
    a, b = "head", "tail"
    result = str_ncat(a, b, n)
    assert result.startswith(a)
    appended = result[len(a):]
    assert appended == b[: len(appended)]
    assert len(appended) == min(n, len(b))


def test_ncat_negative_appends_nothing():
    assert str_ncat("head", "tail", -3) == "head"


def test_cpy_replaces_contents():
    assert str_cpy("old content", "new") == "new"
    assert str_cpy("old", None) == ""
    assert str_cpy(None, "new") is None


@pytest.mark.parametrize("n", [0, 2, 4, 20])
def test_ncpy_overwrites_prefix_and_keeps_rest(n):
    target, source = "abcdefgh", "WXYZ"
    result = str_ncpy(target, source, n)
    copied = min(n, len(source))
    assert result[:copied] == source[:copied]
    assert result[copied:] == target[copied:]
    assert len(result) == len(target)


@pytest.mark.parametrize("a,b", PAIRS)
def test_cmp_is_antisymmetric_and_ordered(a, b):
    assert str_cmp(a, b) == -str_cmp(b, a)
    assert _sign(str_cmp(a, b)) == _sign((a > b) - (a < b))


@pytest.mark.parametrize("s", SAMPLES)
def test_cmp_equal_strings(s):
    assert str_cmp(s, s) == 0


def test_cmp_null_handling():
    assert str_cmp(None, None) == 0
    assert str_cmp(None, "a") == -1
    assert str_cmp("a", None) == 1
    assert str_casecmp(None, "a") == -1
    assert str_ncmp("a", None, 3) == 1
    assert str_casencmp(None, None, 3) == 0


@pytest.mark.parametrize("s", SAMPLES)
def test_casecmp_ignores_case(s):
    assert str_casecmp(s, str_upper(s)) == 0
    assert str_casecmp(str_lower(s), str_upper(s)) == 0


def test_casecmp_uses_lowercase_codes():
    assert str_casecmp("A", "[") == str_cmp("a", "[")
    assert str_casecmp("Zeta", "alpha") == str_cmp("zeta", "alpha")


def test_ncmp_stops_after_length():
    assert str_ncmp("abcX", "abcY", 3) == 0
    assert str_ncmp("abcX", "abcY", 4) == str_cmp("abcX", "abcY")


def test_ncmp_nonpositive_length_compares_whole():
    assert str_ncmp("abcX", "abcY", 0) == str_cmp("abcX", "abcY")
    assert str_casencmp("abcX", "ABCY", -1) == str_casecmp("abcX", "ABCY")


def test_casencmp_ignores_case_within_length():
    assert str_casencmp("HELLOworld", "helloWORLD", 5) == 0
    assert str_casencmp("HELLOa", "hellob", 6) == str_cmp("a", "b")


def test_upper_and_lower():
    assert str_upper("Hello, World!") == "HELLO, WORLD!"
    assert str_lower("HELLO, WORLD!") == str_lower("hello, world!")


@pytest.mark.parametrize("s", SAMPLES)
def test_upper_lower_round_trip(s):
    assert str_upper(str_lower(s)) == str_upper(s)
    assert len(str_upper(s)) == len(s)


def test_case_conversion_leaves_non_ascii():
    assert str_upper("ä") == "ä"
    assert str_lower("Ä") == "Ä"


def test_chr_pinned():
    assert str_chr("hello", "l") == 3


@pytest.mark.parametrize("s,ch", [("hello", "l"), ("abcabc", "c"), ("abc", "z"), ("", "a")])
def test_chr_and_rchr_invariants(s, ch):
    first, last = str_chr(s, ch), str_rchr(s, ch)
    if ch in s:
        assert s[first - 1] == ch and ch not in s[: first - 1]
        assert s[last - 1] == ch and ch not in s[last:]
        assert first <= last
    else:
        assert first == 0 and last == 0


@pytest.mark.parametrize(
    "s,sub", [("abcabc", "bc"), ("hello world", "o"), ("aaaa", "aa"), ("abc", "abcd"), ("abc", "x")]
)
def test_str_and_rstr_invariants(s, sub):
    first, last = str_str(s, sub), str_rstr(s, sub)
    if sub in s:
        assert s[first - 1 : first - 1 + len(sub)] == sub
        assert s[last - 1 : last - 1 + len(sub)] == sub
        assert sub not in s[: first - 2 + len(sub)]
        assert sub not in s[last:]
    else:
        assert first == 0 and last == 0


def test_empty_substring_is_not_found():
    assert str_str("abc", "") == 0
    assert str_rstr("abc", "") == 0
    assert str_str(None, "a") == 0


def test_rev_pinned():
    assert str_rev("abc") == "cba"


@pytest.mark.parametrize("s", SAMPLES)
def test_rev_is_involution(s):
    assert str_rev(str_rev(s)) == s
    assert str_len(str_rev(s)) == str_len(s)


def test_rev_null():
    assert str_rev(None) is None