"""Rule record: one declaration destined for the autofill stylesheet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleRecord:
    """A rewritten declaration found while scanning SCSS.

    ``order`` increases monotonically in discovery order and decides which
    record wins when two share the same selector and property.
    """

    selector: str
    property: str
    value: str
    order: int
