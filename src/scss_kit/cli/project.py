"""CLI commands: init, generate, doctor, create."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scss_kit.cli.common import emit, fail, load_kit
from scss_kit.errors import ScssKitError
from scss_kit.project import create_kit, doctor as run_doctor, init_project
from scss_kit.responsive import write_responsive_helper


@click.command()
@click.pass_obj
def init(root: Path) -> None:
    """Write the responsive helper and the autofill placeholder."""
    kit = load_kit(root, "init")
    try:
        result = init_project(kit)
    except ScssKitError as exc:
        fail("init", str(exc))
    emit({"action": "init", **result})


@click.command()
@click.pass_obj
def generate(root: Path) -> None:
    """Regenerate _responsive.scss from the coefficient tables."""
    kit = load_kit(root, "generate")
    try:
        plan = write_responsive_helper(kit)
    except ScssKitError as exc:
        fail("generate", str(exc))
    emit({"action": "generate", "written": kit.relative(plan.path), "mode": plan.mode.value})


@click.command()
@click.pass_obj
def doctor(root: Path) -> None:
    """Check the project setup; exits 1 when anything is missing."""
    kit = load_kit(root, "doctor")
    issues = run_doctor(kit)
    ok = not issues
    emit({"action": "doctor", "ok": ok, "issues": issues})
    sys.exit(0 if ok else 1)


@click.command()
@click.argument("directory", default=".")
@click.option("--force", is_flag=True, help="Overwrite an existing scss-kit.config.json")
@click.pass_obj
def create(root: Path, directory: str, force: bool) -> None:
    """Bootstrap scss-kit in DIRECTORY: starter config, then init."""
    target = root / directory
    try:
        result = create_kit(target, force=force)
    except ScssKitError as exc:
        fail("create", str(exc))
    emit({"action": "create", "directory": str(target), **result})
