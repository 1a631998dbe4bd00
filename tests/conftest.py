"""Shared fixtures: a throwaway theme project with scss-kit.config.json."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from scss_kit.config import CONFIG_NAME, KitConfig, default_config_data


def write_config(root: Path, **sections: Any) -> Path:
    """Write a default config into *root*, replacing the given top-level sections."""
    data = default_config_data()
    for name, value in sections.items():
        if isinstance(value, dict) and isinstance(data.get(name), dict):
            data[name] = {**data[name], **value}
        else:
            data[name] = value
    path = root / CONFIG_NAME
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def kit_root(tmp_path: Path) -> Path:
    """Project root with the default config and an empty src/styles dir."""
    write_config(tmp_path)
    (tmp_path / "src" / "styles").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def kit(kit_root: Path) -> KitConfig:
    return KitConfig.load(kit_root)


@pytest.fixture
def write_scss(kit_root: Path) -> Callable[[str, str], Path]:
    """Write an SCSS file relative to src/styles and return its path."""

    def _write(name: str, text: str) -> Path:
        path = kit_root / "src" / "styles" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def configure(kit_root: Path) -> Callable[..., KitConfig]:
    """Rewrite the project config with section overrides and reload it."""

    def _configure(**sections: Any) -> KitConfig:
        write_config(kit_root, **sections)
        return KitConfig.load(kit_root)

    return _configure
