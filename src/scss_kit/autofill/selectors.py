"""Selector composition for nested SCSS rule blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

# Parent list used for rules at the top of a file.
ROOT_SELECTORS: tuple[str, ...] = ("",)


def combine_selectors(
    parents: Sequence[str], children: Iterable[str]
) -> tuple[str, ...]:
    """Resolve *children* against every parent, parent-major.

    ``&`` in a child is replaced by the parent; a child without ``&`` becomes
    a descendant of the parent. An empty parent (file top level) leaves the
    child unchanged.
    """
    child_list = [c.strip() for c in children]
    out: list[str] = []
    for parent in parents:
        for child in child_list:
            if not parent:
                out.append(child)
            elif "&" in child:
                out.append(child.replace("&", parent))
            else:
                out.append(f"{parent} {child}")
    return tuple(out)


@dataclass(frozen=True)
class SelectorFrame:
    """Fully resolved selectors of one open rule block."""

    full_selectors: tuple[str, ...]


class SelectorStack:
    """Stack of open rule blocks, used when walking raw SCSS lines."""

    def __init__(self) -> None:
        self._frames: list[SelectorFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    @property
    def current(self) -> tuple[str, ...]:
        """Selectors of the innermost open block, or ROOT_SELECTORS."""
        if not self._frames:
            return ROOT_SELECTORS
        return self._frames[-1].full_selectors

    def push(self, children: Sequence[str]) -> SelectorFrame | None:
        """Open a block for *children*; a block without selector text opens nothing."""
        children = [c for c in (c.strip() for c in children) if c]
        if not children:
            return None
        frame = SelectorFrame(combine_selectors(self.current, children))
        self._frames.append(frame)
        return frame

    def pop(self) -> SelectorFrame | None:
        # Unbalanced closing braces are tolerated.
        if not self._frames:
            return None
        return self._frames.pop()
