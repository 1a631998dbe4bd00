"""Scan SCSS for ``resp()`` markers and emit rule records.

Two strategies are available. ``TreeScanner`` parses the source into a
block tree and is used by default. ``LineScanner`` tracks blocks line by
line and is only used when the tree parse fails; it does not handle
selectors split over several lines, single-line rule blocks, or several
blocks closing and opening on one line.
"""

from __future__ import annotations

import itertools
import logging
import re
from pathlib import Path
from typing import Iterator, Protocol, Sequence

from scss_kit._text import split_top_level
from scss_kit.autofill.rewriter import CallToken, rewrite_calls
from scss_kit.autofill.selectors import ROOT_SELECTORS, SelectorStack, combine_selectors
from scss_kit.model.rule import RuleRecord
from scss_kit.parser import AtRule, Declaration, RuleBlock, parse_scss
from scss_kit.parser.nodes import Node

logger = logging.getLogger(__name__)

# property: value;  with an optional trailing /* ... */ or // comment
_DECL_RE = re.compile(r"^\s*([a-zA-Z-]+)\s*:\s*(.+?);\s*(?:/\*.*\*/\s*)?(?://.*)?$")
_TRAILING_BLOCK_COMMENT_RE = re.compile(r"\s*/\*.*\*/\s*$")
_TRAILING_LINE_COMMENT_RE = re.compile(r"\s*//.*$")
_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)


def _with_important(value: str, important: bool) -> str:
    return f"{value} !important" if important else value


class Scanner(Protocol):
    """A strategy turning SCSS source into rule records."""

    name: str

    def scan(
        self, source: str, token: CallToken, order: Iterator[int]
    ) -> list[RuleRecord]: ...


class TreeScanner:
    """Walk the parsed block tree, carrying the resolved parent selectors.

    At-rules and bare ``{}`` blocks are transparent: their children keep the
    surrounding selectors. Declarations outside any rule block are ignored.
    """

    name = "tree"

    def scan(
        self, source: str, token: CallToken, order: Iterator[int]
    ) -> list[RuleRecord]:
        stylesheet = parse_scss(source)
        records: list[RuleRecord] = []
        self._walk(stylesheet.children, ROOT_SELECTORS, token, order, records)
        return records

    def _walk(
        self,
        nodes: Sequence[Node],
        parents: tuple[str, ...],
        token: CallToken,
        order: Iterator[int],
        records: list[RuleRecord],
    ) -> None:
        for node in nodes:
            if isinstance(node, RuleBlock):
                selectors = parents
                if node.selectors:
                    selectors = combine_selectors(parents, node.selectors)
                self._walk(node.children, selectors, token, order, records)
            elif isinstance(node, AtRule):
                self._walk(node.children, parents, token, order, records)
            elif isinstance(node, Declaration) and parents != ROOT_SELECTORS:
                result = rewrite_calls(node.value, token)
                if not result.changed:
                    continue
                value = _with_important(result.value, node.important)
                for selector in parents:
                    records.append(RuleRecord(selector, node.prop, value, next(order)))


class LineScanner:
    """Best-effort scanner over raw lines.

    Every ``}`` on a line closes one block. Text before a ``{`` opens a
    selector block unless it is empty, an at-rule, or contains a ``:``.
    """

    name = "line"

    def scan(
        self, source: str, token: CallToken, order: Iterator[int]
    ) -> list[RuleRecord]:
        stack = SelectorStack()
        records: list[RuleRecord] = []

        for line in source.splitlines():
            for _ in range(line.count("}")):
                stack.pop()

            open_idx = line.find("{")
            if open_idx != -1:
                before = line[:open_idx].strip()
                if before and not before.startswith("@") and ":" not in before:
                    stack.push(split_top_level(before))

            if not stack:
                continue

            match = _DECL_RE.match(line)
            if match is None:
                continue

            prop = match.group(1)
            value = match.group(2).strip()
            value = _TRAILING_BLOCK_COMMENT_RE.sub("", value).strip()
            value = _TRAILING_LINE_COMMENT_RE.sub("", value).strip()

            important = False
            if _IMPORTANT_RE.search(value):
                important = True
                value = _IMPORTANT_RE.sub("", value).strip()

            result = rewrite_calls(value, token)
            if not result.changed:
                continue

            final = _with_important(result.value, important)
            for selector in stack.current:
                records.append(RuleRecord(selector, prop, final, next(order)))

        return records


PRIMARY = TreeScanner()
FALLBACK = LineScanner()


def scan_source(
    source: str,
    token: CallToken,
    order: Iterator[int] | None = None,
    *,
    origin: str = "<string>",
) -> list[RuleRecord]:
    """Scan *source* with the tree scanner, falling back to the line scanner."""
    if order is None:
        order = itertools.count()
    try:
        return PRIMARY.scan(source, token, order)
    except Exception as exc:
        # Any tree-side failure degrades to the line scanner for this source only.
        logger.debug(
            "tree scan failed for %s (%s: %s); using line scanner",
            origin,
            type(exc).__name__,
            exc,
        )
        return FALLBACK.scan(source, token, order)


def scan_file(
    path: Path, token: CallToken, order: Iterator[int] | None = None
) -> list[RuleRecord]:
    """Read *path* and return its rule records in discovery order."""
    source = path.read_text(encoding="utf-8-sig")
    return scan_source(source, token, order, origin=str(path))
