"""Helpers shared by the CLI commands: JSON output and config loading."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, NoReturn

import click

from scss_kit.config import KitConfig
from scss_kit.errors import ConfigurationError


def emit(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def fail(action: str, reason: str) -> NoReturn:
    emit({"action": action, "ok": False, "reason": reason})
    sys.exit(1)


def load_kit(root: Path, action: str) -> KitConfig:
    try:
        return KitConfig.load(root)
    except ConfigurationError as exc:
        fail(action, str(exc))
