"""String helpers for command-line style option handling."""

from __future__ import annotations


def _fold(ch: str) -> str:
    """Lower-case an ASCII upper-case letter; leave anything else alone."""
    return ch.lower() if "A" <= ch <= "Z" else ch


def str_ncmp(s1: str, s2: str, n: int) -> int:
    """Compare ``s2`` against the abbreviation pattern ``s1``.

    The first ``n`` characters of ``s1`` are mandatory and the rest optional;
    the comparison is case-insensitive. Returns 0 on a match, a negative or
    positive number otherwise.
    """
    if n <= 0:
        raise ValueError("mandatory length must be positive")
    if len(s1) < n:
        raise ValueError("pattern is shorter than its mandatory part")
    n2 = len(s2)
    if n2 == 0:
        return -1
    for i, ch1 in enumerate(s1):
        if i == n2:
            return 1 if i < n else 0
        diff = ord(_fold(ch1)) - ord(_fold(s2[i]))
        if diff:
            return diff
    return len(s1) - n2


def str_get_tok(text: str, pos: int = 0, delim: str = " ") -> tuple[str, int | None]:
    """Return the next token at or after ``pos`` and the index just past it.

    Leading delimiters are skipped. The index is ``None`` when the token runs
    to the end of the text; an empty token with ``None`` means nothing was found.
    """
    begin = pos
    while begin < len(text) and text[begin] == delim:
        begin += 1
    if begin >= len(text):
        return "", None
    end = text.find(delim, begin)
    if end == -1:
        return text[begin:], None
    return text[begin:end], end


def split_tokens(text: str, delim: str = " ") -> list[str]:
    """Split ``text`` into its non-empty tokens separated by ``delim``."""
    return [token for token in text.split(delim) if token]


def str_to_int(text: str) -> int:
    """Parse an optionally negative decimal integer made only of ASCII digits."""
    digits = text[1:] if text.startswith("-") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError(f"not an integer: {text!r}")
    value = int(digits)
    return -value if text.startswith("-") else value


def _is_ascii_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_valid_var_name(text: str) -> bool:
    """Tell whether ``text`` matches ``[A-Za-z_][A-Za-z0-9_]*``."""
    if not text:
        return False
    first, rest = text[0], text[1:]
    if not (_is_ascii_alpha(first) or first == "_"):
        return False
    return all(_is_ascii_alpha(ch) or "0" <= ch <= "9" or ch == "_" for ch in rest)