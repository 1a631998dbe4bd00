"""Safe CSS sync: compile SCSS to a scratch dir and copy managed files to assets.

The external ``sass --watch`` compiler writes into ``src/.sass-out``. This
loop copies each changed ``.css`` into the assets dir, stamped with a
``scss-kit:managed`` comment. Asset files without that comment are never
overwritten, and nothing is written outside the assets dir.
"""

from __future__ import annotations

import logging
import re
import signal
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

from scss_kit.config import KitConfig, to_posix
from scss_kit.errors import PathEscapeError, ScssKitError
from scss_kit.watch.base import DEFAULT_INTERVAL, ChangeHandler, WatchLoop

logger = logging.getLogger(__name__)

MANAGED_MARKER = "scss-kit:managed"

_CHARSET_RE = re.compile(r'^@charset\s+".*";\s*$')
_NEWLINE_RE = re.compile(r"\r?\n")


class SyncStatus(Enum):
    WROTE = "wrote"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    BLOCKED = "blocked"
    STALE = "stale"


@dataclass(frozen=True)
class SyncLayout:
    """Directories involved in one sync loop."""

    root: Path
    styles_dir: Path
    out_dir: Path
    assets_dir: Path

    @classmethod
    def from_kit(cls, kit: KitConfig) -> SyncLayout:
        return cls(
            root=kit.root,
            styles_dir=kit.scss_src_dir,
            out_dir=kit.scss_src_dir.parent / ".sass-out",
            assets_dir=kit.css_out_dir,
        )

    def rel(self, path: Path) -> str:
        try:
            return to_posix(path.resolve().relative_to(self.root.resolve()))
        except ValueError:
            return to_posix(path)


def with_marker(css_text: str, source_rel: str) -> str:
    """Prepend the managed marker, keeping a leading ``@charset`` first."""
    marker = f"/* {MANAGED_MARKER} source={source_rel} */"
    lines = _NEWLINE_RE.split(css_text)
    if lines and _CHARSET_RE.match(lines[0].strip()):
        if len(lines) > 1 and MANAGED_MARKER in lines[1]:
            return css_text
        lines.insert(1, marker)
        return "\n".join(lines)
    if css_text.startswith(marker):
        return css_text
    return marker + "\n" + css_text


def asset_target(layout: SyncLayout, compiled: Path) -> Path:
    """Map a compiled file to its assets path, refusing to leave the assets dir."""
    assets_root = layout.assets_dir.resolve()
    try:
        rel = compiled.relative_to(layout.out_dir)
    except ValueError:
        raise PathEscapeError(compiled, assets_root) from None
    target = layout.assets_dir / rel
    resolved = target.resolve()
    if resolved == assets_root or not resolved.is_relative_to(assets_root):
        raise PathEscapeError(resolved, assets_root)
    return target


def sync_one(layout: SyncLayout, compiled: Path) -> SyncStatus:
    """Copy one compiled CSS file into the assets dir if that is safe."""
    try:
        target = asset_target(layout, compiled)
    except PathEscapeError as exc:
        logger.error("BLOCKED write outside %s: %s", layout.rel(exc.root), layout.rel(exc.path))
        return SyncStatus.BLOCKED

    rel = compiled.relative_to(layout.out_dir)
    source = (layout.styles_dir / rel).with_suffix(".scss")
    source_rel = layout.rel(source)
    target_rel = layout.rel(target)
    if not source.exists():
        logger.warning("skipped stale output: %s (missing %s)", layout.rel(compiled), source_rel)
        return SyncStatus.STALE

    next_text = with_marker(compiled.read_text(encoding="utf-8"), source_rel)

    if not target.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(next_text, encoding="utf-8")
        logger.info("wrote %s", target_rel)
        return SyncStatus.WROTE

    existing = target.read_text(encoding="utf-8")
    if MANAGED_MARKER not in existing:
        logger.error(
            "BLOCKED overwrite: %s\n"
            "  Reason: existing CSS has no '%s' marker.\n"
            "  Fix: rename/delete the existing file, or add a marker comment to confirm it's managed.\n"
            "  Example (keep @charset first if present): /* %s source=%s */",
            target_rel,
            MANAGED_MARKER,
            MANAGED_MARKER,
            source_rel,
        )
        return SyncStatus.BLOCKED
    if existing == next_text:
        return SyncStatus.UNCHANGED

    target.write_text(next_text, encoding="utf-8")
    logger.info("updated %s", target_rel)
    return SyncStatus.UPDATED


class CssSyncWatcher(WatchLoop):
    """Run the sass compiler and sync its output until either side stops."""

    def __init__(
        self,
        layout: SyncLayout,
        *,
        interval: float = DEFAULT_INTERVAL,
        sass_command: Sequence[str] = ("sass",),
    ) -> None:
        super().__init__(interval)
        self.layout = layout
        self.sass_command = list(sass_command)
        self.handler = ChangeHandler(self.on_change, patterns=["*.css"])
        self._process: subprocess.Popen[bytes] | None = None

    def compiler_args(self) -> list[str]:
        return [
            *self.sass_command,
            "--watch",
            f"{self.layout.rel(self.layout.styles_dir)}:{self.layout.rel(self.layout.out_dir)}",
            "--style=expanded",
            "--no-source-map",
        ]

    def start_compiler(self) -> subprocess.Popen[bytes]:
        logger.info("starting sass watch (safe mode)")
        return subprocess.Popen(self.compiler_args(), cwd=self.layout.root)

    def on_change(self, path: Path) -> None:
        try:
            sync_one(self.layout, path)
        except (ScssKitError, OSError) as exc:
            logger.error("sync failed: %s", exc)

    def should_stop(self) -> bool:
        return self._process is not None and self._process.poll() is not None

    def run(self) -> int:  # type: ignore[override]
        """Block until stopped; return the compiler's exit code if it exited first."""
        self.layout.out_dir.mkdir(parents=True, exist_ok=True)
        self.schedule(self.handler, self.layout.out_dir)
        # Observe before the compiler starts so its first writes are seen.
        self.start()
        try:
            process = self.start_compiler()
        except OSError:
            self.stop()
            self.observer.join()
            raise
        self._process = process
        try:
            self.wait()
        finally:
            exit_code = process.poll()
            if exit_code is None:
                _interrupt(process)
        return exit_code if exit_code is not None else 0


def _interrupt(process: subprocess.Popen[bytes], timeout: float = 5.0) -> None:
    """Forward SIGINT to the compiler, killing it if it does not exit in time."""
    try:
        process.send_signal(signal.SIGINT)
    except ProcessLookupError:
        return
    try:
        process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()
