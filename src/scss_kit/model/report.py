"""Structured results of autofill generation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scss_kit.writer import WritePlan

if TYPE_CHECKING:
    from scss_kit.config import KitConfig


@dataclass(frozen=True)
class GenerateReport:
    """Outcome of scanning some SCSS and writing one autofill stylesheet."""

    output: Path
    scanned_files: int
    rules: int
    write: WritePlan
    target: Path | None = None

    def to_dict(self, kit: KitConfig) -> dict[str, Any]:
        data: dict[str, Any] = {
            "output": kit.relative(self.output),
            "scannedFiles": self.scanned_files,
            "rules": self.rules,
            "written": kit.relative(self.write.path),
            "mode": self.write.mode.value,
        }
        if self.target is not None:
            data["target"] = kit.relative(self.target)
        return data


@dataclass(frozen=True)
class EntryResult:
    """Per-entry result of a batch run; failures carry a reason instead of a report."""

    entry: str
    report: GenerateReport | None = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.report is not None

    def to_dict(self, kit: KitConfig) -> dict[str, Any]:
        if self.report is None:
            return {"entry": self.entry, "ok": False, "reason": self.reason}
        return {
            "entry": self.entry,
            "ok": True,
            "rules": self.report.rules,
            "output": kit.relative(self.report.output),
            "written": kit.relative(self.report.write.path),
            "mode": self.report.write.mode.value,
        }


@dataclass
class EntriesReport:
    results: list[EntryResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)

    def to_dict(self, kit: KitConfig) -> dict[str, Any]:
        return {"ok": self.ok, "entries": [r.to_dict(kit) for r in self.results]}
