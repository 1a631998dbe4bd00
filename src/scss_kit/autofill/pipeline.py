"""Autofill pipeline: discover SCSS, scan, render and write the overrides."""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Iterable, Sequence

from scss_kit.autofill.generator import render_autofill_scss
from scss_kit.autofill.rewriter import CallToken
from scss_kit.autofill.scanner import scan_file
from scss_kit.config import KitConfig
from scss_kit.errors import ConfigurationError, SourceNotFoundError
from scss_kit.model.report import EntriesReport, EntryResult, GenerateReport
from scss_kit.model.rule import RuleRecord
from scss_kit.writer import write_safely

logger = logging.getLogger(__name__)

SKIP_DIRS = frozenset({"node_modules", ".git"})


def discover_scss_files(
    directories: Iterable[Path], exclude: Iterable[Path] = ()
) -> list[Path]:
    """List ``.scss`` files under *directories*, sorted by name at each level.

    Missing directories are skipped, as are ``node_modules`` and ``.git``.
    """
    excluded = {p.resolve() for p in exclude}
    found: list[Path] = []

    def walk(directory: Path) -> None:
        for child in sorted(directory.iterdir()):
            if child.is_dir():
                if child.name not in SKIP_DIRS:
                    walk(child)
            elif child.is_file() and child.name.endswith(".scss"):
                if child.resolve() not in excluded:
                    found.append(child)

    for directory in directories:
        if directory.is_dir():
            walk(directory)
    return found


def collect_rules(files: Sequence[Path], token: CallToken) -> list[RuleRecord]:
    """Scan *files* one at a time; ``order`` keeps counting across files."""
    order = itertools.count()
    records: list[RuleRecord] = []
    for path in files:
        found = scan_file(path, token, order)
        logger.debug("%s: %d rule(s)", path, len(found))
        records.extend(found)
    return records


def run(
    kit: KitConfig,
    targets: Sequence[Path] | None = None,
    output: Path | None = None,
) -> GenerateReport:
    """Generate one autofill stylesheet.

    Without *targets* every configured scan directory is scanned. Explicit
    target files must exist. *output* defaults to ``autofill.output``, and
    is never scanned itself.
    """
    autofill = kit.autofill()
    output = kit.resolve(output) if output is not None else autofill.output_path

    if targets is None:
        files = discover_scss_files(autofill.scan_dirs, exclude=[output])
    else:
        files = []
        for target in targets:
            path = kit.resolve(target)
            if path.is_dir():
                files.extend(discover_scss_files([path], exclude=[output]))
            elif path.is_file():
                files.append(path)
            else:
                raise SourceNotFoundError(path, f"file not found: {target}")

    records = collect_rules(files, autofill.token)
    content = render_autofill_scss(autofill, records)
    plan = write_safely(output, content)
    logger.info("%s %s (%d rule(s))", plan.mode.value, kit.relative(plan.path), len(records))

    return GenerateReport(
        output=output,
        scanned_files=len(files),
        rules=len(records),
        write=plan,
        target=files[0] if targets is not None and len(files) == 1 else None,
    )


def generate_all(kit: KitConfig) -> GenerateReport:
    """Regenerate ``autofill.output`` from all scan directories."""
    return run(kit)


def generate_for_entry(
    kit: KitConfig, entry: Path, output: Path | None = None
) -> GenerateReport:
    """Regenerate the per-entry stylesheet for one entry file."""
    path = kit.resolve(entry)
    if not path.is_file():
        raise SourceNotFoundError(path, f"file not found: {entry}")
    if output is None:
        output = kit.entry_output_path(path)
    return run(kit, [path], output)


def generate_entries(kit: KitConfig) -> EntriesReport:
    """Regenerate every entry in ``autofill.entries``.

    A missing entry file fails that entry only; the others still run.
    """
    entries = kit.autofill().entries
    if not entries:
        raise ConfigurationError(
            "missing autofill.entries in scss-kit.config.json "
            "(expected array of entry scss paths)"
        )

    report = EntriesReport()
    for entry in entries:
        try:
            result = generate_for_entry(kit, Path(entry))
        except SourceNotFoundError:
            report.results.append(EntryResult(entry=entry, reason="file not found"))
            continue
        report.results.append(EntryResult(entry=kit.relative(kit.resolve(entry)), report=result))
    return report
