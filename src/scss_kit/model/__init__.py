"""scss-kit model layer -- public type re-exports."""

from scss_kit.model.report import EntriesReport, EntryResult, GenerateReport
from scss_kit.model.rule import RuleRecord

__all__ = [
    "EntriesReport",
    "EntryResult",
    "GenerateReport",
    "RuleRecord",
]
