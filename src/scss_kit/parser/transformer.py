"""Lark Transformer that converts an SCSS parse tree into block-tree nodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from scss_kit._text import split_top_level
from scss_kit.parser.errors import ParseError
from scss_kit.parser.nodes import AtRule, Declaration, Node, RuleBlock, Stylesheet

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_AT_NAME_RE = re.compile(r"@([\w-]+)")
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


class _Prelude:
    """Raw text in front of a ``{`` or ``;``, with its starting line."""

    def __init__(self, text: str, line: int | None):
        self.text = text
        self.line = line


def _join_chunks(tokens: list[Token]) -> str:
    # Chunks are split by ignored comments; keep one space where one was.
    text = ""
    for tok in tokens:
        part = str(tok)
        if text and not text[-1].isspace() and not part[0].isspace():
            text += " "
        text += part
    return text.strip()


def _at_rule(prelude: _Prelude, children: tuple[Node, ...]) -> AtRule:
    match = _AT_NAME_RE.match(prelude.text)
    name = match.group(1) if match else ""
    params_start = match.end() if match else 1
    return AtRule(
        name=name,
        params=prelude.text[params_start:].strip(),
        children=children,
        line=prelude.line,
    )


def _statement(prelude: _Prelude) -> Node | None:
    """Classify a statement as an at-rule or a declaration."""
    text = prelude.text
    if text.startswith("@"):
        return _at_rule(prelude, ())
    prop, colon, value = text.partition(":")
    prop = prop.strip()
    if not colon or not prop:
        return None
    value = value.strip()
    important = False
    match = _IMPORTANT_RE.search(value)
    if match:
        important = True
        value = value[: match.start()].strip()
    return Declaration(prop=prop, value=value, important=important, line=prelude.line)


class ScssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a Stylesheet of block nodes."""

    def prelude(self, items: list[Token]) -> _Prelude:
        return _Prelude(_join_chunks(items), items[0].line)

    def statement(self, items: list[_Prelude]) -> Node | None:
        return _statement(items[0])

    def open_statement(self, items: list[_Prelude]) -> Node | None:
        return _statement(items[0])

    def block(self, items: list[object]) -> Node | None:
        prelude: _Prelude | None = None
        if items and isinstance(items[0], _Prelude):
            prelude = items[0]
            items = items[1:]
        children = tuple(item for item in items if item is not None)

        if prelude is None or not prelude.text:
            return RuleBlock(selector="", children=children)
        if prelude.text.startswith("@"):
            return _at_rule(prelude, children)
        if prelude.text.endswith(":"):
            # Nested property block (``font: { family: x; }``); not tracked.
            return None
        selectors = tuple(s for s in split_top_level(prelude.text) if s)
        return RuleBlock(
            selector=prelude.text,
            selectors=selectors,
            children=children,
            line=prelude.line,
        )

    def start(self, items: list[object]) -> Stylesheet:
        return Stylesheet(children=tuple(item for item in items if item is not None))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_scss(source: str) -> Stylesheet:
    """Parse SCSS source text into a Stylesheet block tree.

    Raises ParseError when the source has unbalanced braces, an unclosed
    string or comment, or anything else the grammar rejects.
    """
    try:
        tree = _parser().parse(source)
        return ScssTransformer().transform(tree)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
