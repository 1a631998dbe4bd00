"""Marker-gated file writes.

``plan_write`` decides what to write and where without touching the disk;
``apply_write`` is the only place that performs the write.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MARKER = "Generated by scss-kit"


class WriteMode(Enum):
    CREATED = "created"
    OVERWRITTEN = "overwritten"
    UNCHANGED = "unchanged"
    CONFLICT = "conflict_new_file"


@dataclass(frozen=True)
class WritePlan:
    """Where *content* goes for a requested *target*, and why."""

    target: Path
    path: Path
    content: str
    mode: WriteMode

    @property
    def conflict(self) -> bool:
        return self.mode is WriteMode.CONFLICT


def conflict_path(target: Path) -> Path:
    return target.with_name(target.name + ".new")


def plan_write(
    target: Path, content: str, existing: str | None, marker: str = MARKER
) -> WritePlan:
    """Decide how *content* is written to *target*.

    *existing* is the current text of *target*, or None when it does not
    exist. A file without *marker* is owned by someone else, so the
    content is redirected to ``<target>.new``.
    """
    if existing is None:
        return WritePlan(target, target, content, WriteMode.CREATED)
    if marker in existing:
        mode = WriteMode.UNCHANGED if existing == content else WriteMode.OVERWRITTEN
        return WritePlan(target, target, content, mode)
    return WritePlan(target, conflict_path(target), content, WriteMode.CONFLICT)


def apply_write(plan: WritePlan) -> WritePlan:
    """Perform *plan*. Unchanged targets are left untouched."""
    if plan.mode is WriteMode.UNCHANGED:
        return plan
    plan.path.parent.mkdir(parents=True, exist_ok=True)
    plan.path.write_text(plan.content, encoding="utf-8")
    return plan


def write_safely(target: Path, content: str, marker: str = MARKER) -> WritePlan:
    """Read *target* if present, plan the write and apply it."""
    existing = target.read_text(encoding="utf-8") if target.exists() else None
    return apply_write(plan_write(target, content, existing, marker))
