"""CLI commands: scss-kit responsive generate / entries / extract."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from scss_kit.autofill.pipeline import generate_all, generate_entries, generate_for_entry
from scss_kit.cli.common import emit, fail, load_kit
from scss_kit.errors import ScssKitError
from scss_kit.extract import extract_px_candidates

EXTRACT_REPORT = Path("scss-kit") / "responsive-extract.json"


@click.group()
def responsive() -> None:
    """Responsive autofill: rewrite resp() markers into mobile overrides."""


@responsive.command("generate")
@click.argument("target", required=False)
@click.argument("output", required=False)
@click.pass_obj
def generate_cmd(root: Path, target: str | None, output: str | None) -> None:
    """Generate overrides for all scan dirs, or for one TARGET entry file.

    OUTPUT overrides the per-entry output path.

    \b
    The reported "mode" is one of:
      created            the output did not exist
      overwritten        a generated output was replaced
      unchanged          a generated output already had this content
      conflict_new_file  the output is hand-written; wrote <output>.new
    """
    action = "responsive:generate"
    kit = load_kit(root, action)
    try:
        if target:
            report = generate_for_entry(
                kit, Path(target), Path(output) if output else None
            )
        else:
            report = generate_all(kit)
    except ScssKitError as exc:
        fail(action, str(exc))
    emit({"action": action, "ok": True, **report.to_dict(kit)})


@responsive.command("entries")
@click.pass_obj
def entries_cmd(root: Path) -> None:
    """Generate per-entry overrides for every autofill.entries file."""
    action = "responsive:generate:entries"
    kit = load_kit(root, action)
    try:
        report = generate_entries(kit)
    except ScssKitError as exc:
        fail(action, str(exc))
    emit({"action": action, **report.to_dict(kit)})
    sys.exit(0 if report.ok else 1)


@responsive.command("extract")
@click.argument("file")
@click.pass_obj
def extract_cmd(root: Path, file: str) -> None:
    """Report px values in FILE that could become resp() calls."""
    action = "responsive:extract"
    kit = load_kit(root, action)
    if not kit.resolve(file).is_file():
        fail(action, f"file not found: {file}")

    extracted = extract_px_candidates(kit, Path(file))
    out_path = kit.resolve(EXTRACT_REPORT)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps(extracted, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    emit(
        {
            "action": action,
            "ok": True,
            "written": kit.relative(out_path),
            "count": len(extracted["rules"]),
        }
    )
