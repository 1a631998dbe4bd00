"""Regenerate autofill overrides when SCSS sources change.

Editing a partial regenerates every configured entry. Editing an entry
regenerates only that entry; an empty entry first gets the ``@use`` /
``@include`` boilerplate and is added to ``autofill.entries``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from scss_kit.autofill.generator import MIXIN_NAME
from scss_kit.autofill.pipeline import generate_entries, generate_for_entry
from scss_kit.config import KitConfig
from scss_kit.errors import ScssKitError, SourceNotFoundError
from scss_kit.model.report import EntriesReport, GenerateReport
from scss_kit.watch.base import DEFAULT_INTERVAL, ChangeHandler, WatchLoop

logger = logging.getLogger(__name__)

GENERATED_PREFIX = "_responsive-autofill"
GENERATED_SUFFIX = ".generated.scss"


def is_generated(path: Path) -> bool:
    return path.name.startswith(GENERATED_PREFIX) and path.name.endswith(GENERATED_SUFFIX)


def is_partial(path: Path) -> bool:
    return path.name.startswith("_")


def entry_boilerplate(namespace: str, entry_base: str, eol: str = "\n") -> str:
    lines = [
        f'@use "./responsive" as {namespace};',
        f'@use "./{GENERATED_PREFIX}.{entry_base}.generated" as auto;',
        "",
        "// Keep this include last so the generated mobile overrides win.",
        f"@include auto.{MIXIN_NAME}();",
    ]
    return eol.join(lines) + eol


def ensure_entry_boilerplate(path: Path, namespace: str) -> bool:
    """Fill an empty entry file with boilerplate. Returns True if it was written."""
    if not path.is_file():
        return False
    raw = path.read_bytes().decode("utf-8")
    if raw.strip():
        return False
    eol = "\r\n" if "\r\n" in raw else "\n"
    path.write_text(entry_boilerplate(namespace, path.stem, eol), encoding="utf-8", newline="")
    return True


def register_entry(kit: KitConfig, entry: Path) -> bool:
    """Append *entry* to ``autofill.entries`` if it lives in the SCSS source dir.

    The config is left alone when it has no entries list.
    """
    entry = kit.resolve(entry)
    if not entry.resolve().is_relative_to(kit.scss_src_dir.resolve()):
        return False

    data = json.loads(kit.config_path.read_text(encoding="utf-8"))
    entries = data.get("autofill", {}).get("entries")
    if not isinstance(entries, list):
        return False

    rel = kit.relative(entry)
    if rel in entries:
        return False
    entries.append(rel)
    kit.config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return True


def handle_change(
    kit: KitConfig, changed: Path
) -> GenerateReport | EntriesReport | None:
    """React to one changed path; returns None for ignored paths."""
    path = kit.resolve(changed)
    if is_generated(path) or not path.name.endswith(".scss"):
        return None

    if is_partial(path):
        return generate_entries(kit)

    if ensure_entry_boilerplate(path, kit.autofill().namespace):
        logger.info("added boilerplate to %s", kit.relative(path))
        if register_entry(kit, path):
            logger.info("registered entry %s", kit.relative(path))
            kit = KitConfig.load(kit.root)
    return generate_for_entry(kit, path)


class ResponsiveWatcher(WatchLoop):
    """Watch the SCSS source dir and run ``handle_change`` for each edit."""

    def __init__(self, root: Path, *, interval: float = DEFAULT_INTERVAL) -> None:
        super().__init__(interval)
        self.root = root
        self.handler = ChangeHandler(
            self.on_change,
            patterns=["*.scss"],
            ignore_patterns=[f"{GENERATED_PREFIX}*{GENERATED_SUFFIX}"],
        )

    def on_change(self, path: Path) -> None:
        try:
            handle_change(KitConfig.load(self.root), path)
        except (ScssKitError, OSError) as exc:
            logger.error("regenerate failed for %s: %s", path, exc)

    def run(self) -> None:
        kit = KitConfig.load(self.root)
        if not kit.scss_src_dir.is_dir():
            raise SourceNotFoundError(
                kit.scss_src_dir, f"SCSS source dir not found: {kit.scss_src_rel}"
            )
        self.schedule(self.handler, kit.scss_src_dir)
        logger.info("watching %s", kit.scss_src_rel)
        super().run()
