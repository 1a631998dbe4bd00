"""Block tree produced by the SCSS parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A ``property: value`` statement. ``value`` excludes ``!important``."""

    prop: str
    value: str
    important: bool = False
    line: int | None = None


@dataclass(frozen=True)
class AtRule:
    """An ``@name params`` statement or block (``@media``, ``@include``, ...)."""

    name: str
    params: str = ""
    children: tuple[Node, ...] = ()
    line: int | None = None


@dataclass(frozen=True)
class RuleBlock:
    """A selector block. ``selectors`` is empty for a bare ``{ ... }`` block."""

    selector: str
    selectors: tuple[str, ...] = ()
    children: tuple[Node, ...] = ()
    line: int | None = None


Node = Union[Declaration, AtRule, RuleBlock]


@dataclass(frozen=True)
class Stylesheet:
    """Top-level nodes of one SCSS source, in source order."""

    children: tuple[Node, ...] = field(default_factory=tuple)
