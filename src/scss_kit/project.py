"""Project bootstrap: init, doctor and the starter-kit ``create`` flow."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from scss_kit.autofill.generator import render_autofill_scss
from scss_kit.config import CONFIG_NAME, KitConfig, default_config_data
from scss_kit.errors import ScssKitError
from scss_kit.responsive import write_responsive_helper
from scss_kit.writer import WritePlan, write_safely

logger = logging.getLogger(__name__)


def _plan_dict(kit: KitConfig, plan: WritePlan) -> dict[str, Any]:
    return {"written": kit.relative(plan.path), "mode": plan.mode.value}


def init_project(kit: KitConfig) -> dict[str, Any]:
    """Create the SCSS dir, the responsive helper and the autofill placeholder.

    Both files are marker-gated, so hand-written files are never replaced.
    """
    kit.scss_src_dir.mkdir(parents=True, exist_ok=True)
    helper = write_responsive_helper(kit)

    try:
        autofill = kit.autofill()
    except ScssKitError as exc:
        autofill_result: dict[str, Any] = {"ok": False, "reason": str(exc)}
    else:
        placeholder = write_safely(autofill.output_path, render_autofill_scss(autofill, []))
        autofill_result = _plan_dict(kit, placeholder)

    return {"generated": _plan_dict(kit, helper), "autofillGenerated": autofill_result}


def doctor(kit: KitConfig) -> list[str]:
    """Return human-readable problems with the project setup."""
    issues: list[str] = []
    if not kit.responsive_helper_path.exists():
        issues.append(f"missing {kit.relative(kit.responsive_helper_path)}")

    try:
        autofill = kit.autofill()
    except ScssKitError as exc:
        issues.append(str(exc))
    else:
        if not autofill.output_path.exists():
            issues.append(f"missing {kit.relative(autofill.output_path)}")
    return issues


def create_kit(target_dir: Path, force: bool = False) -> dict[str, Any]:
    """Write a starter ``scss-kit.config.json`` into *target_dir* and init it."""
    target_dir.mkdir(parents=True, exist_ok=True)
    config_path = target_dir / CONFIG_NAME

    if config_path.exists() and not force:
        logger.info("%s already exists; use --force to overwrite", CONFIG_NAME)
        config_written = False
    else:
        config_path.write_text(
            json.dumps(default_config_data(), indent=2) + "\n", encoding="utf-8"
        )
        logger.info("wrote %s", CONFIG_NAME)
        config_written = True

    kit = KitConfig.load(target_dir)
    return {"config": CONFIG_NAME, "configWritten": config_written, "init": init_project(kit)}
