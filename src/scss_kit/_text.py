"""Quote- and parenthesis-aware scanning helpers shared by the parser and rewriter."""

from __future__ import annotations

_QUOTES = ("'", '"')


def find_closing_paren(text: str, start: int) -> int | None:
    """Return the index of the ``)`` closing a paren opened just before *start*.

    Parentheses inside a quoted string are ignored; a quote is closed only
    by the same quote character when it is not preceded by a backslash.
    Returns None when the parentheses never balance.
    """
    depth = 1
    quote: str | None = None
    for i in range(start, len(text)):
        ch = text[i]
        if quote:
            if ch == quote and text[i - 1] != "\\":
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return None


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split *text* on *sep* outside of parentheses and quotes.

    Each part is stripped. Empty parts between separators are kept, a
    trailing empty part is dropped.
    """
    parts: list[str] = []
    buf: list[str] = []
    depth = 0
    quote: str | None = None

    for i, ch in enumerate(text):
        if quote:
            buf.append(ch)
            if ch == quote and (i == 0 or text[i - 1] != "\\"):
                quote = None
            continue
        if ch in _QUOTES:
            quote = ch
            buf.append(ch)
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == sep and depth == 0:
            parts.append("".join(buf).strip())
            buf = []
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        parts.append(tail)
    return parts
