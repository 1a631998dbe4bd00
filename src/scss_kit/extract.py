"""Find hard-coded px sizes that are candidates for ``resp()`` conversion.

Informational only: the result is a JSON report, no SCSS is written.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scss_kit.config import KitConfig

SIZING_PROPERTIES = frozenset(
    {
        "font-size",
        "margin",
        "margin-top",
        "margin-right",
        "margin-bottom",
        "margin-left",
        "padding",
        "padding-top",
        "padding-right",
        "padding-bottom",
        "padding-left",
        "gap",
        "row-gap",
        "column-gap",
        "width",
        "height",
        "top",
        "right",
        "bottom",
        "left",
        "border-radius",
    }
)

_SELECTOR_RE = re.compile(r"^\s*([^@][^{]+)\{\s*$")
_CLOSE_RE = re.compile(r"^\s*}\s*$")
_PROP_RE = re.compile(r"^\s*([a-zA-Z-]+)\s*:\s*([^;]+);")
_PX_RE = re.compile(r"(-?\d+(?:\.\d+)?)px")


def guess_type(prop: str) -> str:
    """Best-guess sizing type for a property."""
    if prop == "font-size":
        return "body"
    if "gap" in prop:
        return "card-gap"
    return "element-gap"


@dataclass(frozen=True)
class PxCandidate:
    selector: str
    property: str
    type: str
    desktop: str | list[str]
    important: bool
    file: str
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "selector": self.selector,
            "property": self.property,
            "type": self.type,
            "desktop": self.desktop,
            "mobile": None,
            "important": self.important,
            "source": {"file": self.file, "line": self.line},
        }


def extract_px_candidates(kit: KitConfig, path: Path) -> dict[str, Any]:
    """Scan one file for px values on sizing properties.

    Only the innermost single-line ``selector {`` is tracked; any line that
    is just ``}`` resets it.
    """
    abs_path = kit.resolve(path)
    rel = kit.relative(abs_path)
    candidates: list[PxCandidate] = []
    selector: str | None = None

    lines = abs_path.read_text(encoding="utf-8-sig").splitlines()
    for lineno, line in enumerate(lines, start=1):
        sel_match = _SELECTOR_RE.match(line)
        if sel_match:
            selector = sel_match.group(1).strip()
            continue
        if _CLOSE_RE.match(line):
            selector = None
            continue
        if selector is None:
            continue

        prop_match = _PROP_RE.match(line)
        if prop_match is None:
            continue
        prop, value = prop_match.group(1), prop_match.group(2)
        if prop not in SIZING_PROPERTIES:
            continue

        px = [f"{m.group(1)}px" for m in _PX_RE.finditer(value)]
        if not px:
            continue

        candidates.append(
            PxCandidate(
                selector=selector,
                property=prop,
                type=guess_type(prop),
                desktop=px[0] if len(px) == 1 else px,
                important="!important" in value,
                file=rel,
                line=lineno,
            )
        )

    return {"file": rel, "rules": [c.to_dict() for c in candidates]}
