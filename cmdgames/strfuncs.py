"""Classic C-style string routines with 1-based search results.

The functions follow the conventions of the C string library family:
comparisons return the difference between the first pair of differing
character codes, searches return a 1-based position (0 when absent), and
``None`` stands in for a null string where the C routines accept one.
Python strings are immutable, so the routines that modified their first
argument in place return the new string instead.
"""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "str_len",
    "str_cat",
    "str_ncat",
    "str_cpy",
    "str_ncpy",
    "str_cmp",
    "str_casecmp",
    "str_ncmp",
    "str_casencmp",
    "str_upper",
    "str_lower",
    "str_chr",
    "str_str",
    "str_rchr",
    "str_rstr",
    "str_rev",
]

_TERMINATOR = "\0"


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def _ascii_upper(ch: str) -> str:
    return chr(ord(ch) - 32) if "a" <= ch <= "z" else ch


def _first_difference(s1: str, s2: str, fold_case: bool) -> int:
    """Return the code difference at the first mismatch, 0 if none."""
    for a, b in zip_longest(s1, s2, fillvalue=_TERMINATOR):
        if fold_case:
            a, b = _ascii_lower(a), _ascii_lower(b)
        if a != b:
            return ord(a) - ord(b)
    return 0


def _compare(s1: str | None, s2: str | None, length: int | None, fold_case: bool) -> int:
    if s1 is None and s2 is None:
        return 0
    if s1 is None:
        return -1
    if s2 is None:
        return 1
    # A non-positive limit never triggers the stop condition, so the whole
    # strings are compared.
    if length is not None and length > 0:
        s1, s2 = s1[:length], s2[:length]
    return _first_difference(s1, s2, fold_case)


def str_len(s: str | None) -> int:
    """Length of ``s``; a null string has length 0."""
    return 0 if s is None else len(s)


def str_cat(s1: str | None, s2: str | None) -> str | None:
    """Append ``s2`` to ``s1``."""
    if s1 is None:
        return None
    if s2 is None:
        return s1
    return s1 + s2


def str_ncat(s1: str | None, s2: str | None, length: int) -> str | None:
    """Append at most ``length`` leading characters of ``s2`` to ``s1``."""
    if s1 is None:
        return None
    if s2 is None:
        return s1
    return s1 + s2[: max(length, 0)]


def str_cpy(s1: str | None, s2: str | None) -> str | None:
    """Replace the contents of ``s1`` by ``s2``; a null ``s2`` gives ``""``."""
    if s1 is None:
        return None
    return "" if s2 is None else s2


def str_ncpy(s1: str | None, s2: str | None, length: int) -> str | None:
    """Overwrite the start of ``s1`` with at most ``length`` characters of ``s2``.

    No terminator is copied, so the remainder of ``s1`` is kept.
    """
    if s1 is None:
        return None
    if s2 is None:
        return s1
    head = s2[: max(length, 0)]
    return head + s1[len(head):]


def str_cmp(s1: str | None, s2: str | None) -> int:
    """Case-sensitive comparison; 0 or the first code difference."""
    return _compare(s1, s2, None, fold_case=False)


def str_casecmp(s1: str | None, s2: str | None) -> int:
    """Comparison ignoring the case of ASCII letters."""
    return _compare(s1, s2, None, fold_case=True)


def str_ncmp(s1: str | None, s2: str | None, length: int) -> int:
    """Case-sensitive comparison of at most ``length`` characters."""
    return _compare(s1, s2, length, fold_case=False)


def str_casencmp(s1: str | None, s2: str | None, length: int) -> int:
    """Case-insensitive comparison of at most ``length`` characters."""
    return _compare(s1, s2, length, fold_case=True)


def str_upper(s: str | None) -> str | None:
    """Convert ASCII lowercase letters to uppercase, leaving others unchanged."""
    if s is None:
        return None
    return "".join(_ascii_upper(ch) for ch in s)


def str_lower(s: str | None) -> str | None:
    """Convert ASCII uppercase letters to lowercase, leaving others unchanged."""
    if s is None:
        return None
    return "".join(_ascii_lower(ch) for ch in s)


def str_chr(s: str | None, ch: str) -> int:
    """1-based position of the first ``ch`` in ``s``, or 0."""
    if not s:
        return 0
    return s.find(ch) + 1 if ch else 0


def str_str(s: str | None, sub: str | None) -> int:
    """1-based position of the first occurrence of ``sub`` in ``s``, or 0."""
    if not s or not sub:
        return 0
    return s.find(sub) + 1


def str_rchr(s: str | None, ch: str) -> int:
    """1-based position of the last ``ch`` in ``s``, or 0."""
    if not s:
        return 0
    return s.rfind(ch) + 1 if ch else 0


def str_rstr(s: str | None, sub: str | None) -> int:
    """1-based position of the last occurrence of ``sub`` in ``s``, or 0."""
    if not s or not sub:
        return 0
    return s.rfind(sub) + 1


def str_rev(s: str | None) -> str | None:
    """Reverse ``s``."""
    if s is None:
        return None
    return s[::-1]