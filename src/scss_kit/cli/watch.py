"""CLI commands: scss-kit watch css / responsive."""

from __future__ import annotations

import logging
import shlex
import signal
import sys
from pathlib import Path

import click

from scss_kit.cli.common import emit, fail, load_kit
from scss_kit.errors import ScssKitError
from scss_kit.model.report import EntriesReport
from scss_kit.watch import CssSyncWatcher, ResponsiveWatcher, SyncLayout, handle_change
from scss_kit.watch.base import DEFAULT_INTERVAL, WatchLoop


def _stop_on_signals(watcher: WatchLoop) -> None:
    def _handler(signum: int, frame: object) -> None:
        watcher.stop()

    signal.signal(signal.SIGINT, _handler)
    signal.signal(signal.SIGTERM, _handler)


@click.group()
def watch() -> None:
    """Long-running watch loops."""


@watch.command("css")
@click.option("--interval", default=DEFAULT_INTERVAL, show_default=True, type=float, help="Poll interval in seconds")
@click.option("--sass", "sass_command", default="sass", show_default=True, help="Sass compiler command")
@click.pass_obj
def css(root: Path, interval: float, sass_command: str) -> None:
    """Compile with sass --watch and sync managed CSS into assets."""
    kit = load_kit(root, "css:watch")
    logging.getLogger("scss_kit").setLevel(logging.INFO)
    watcher = CssSyncWatcher(
        SyncLayout.from_kit(kit),
        interval=interval,
        sass_command=shlex.split(sass_command),
    )
    _stop_on_signals(watcher)
    sys.exit(watcher.run())


@watch.command("responsive")
@click.argument("path", required=False)
@click.option("--interval", default=DEFAULT_INTERVAL, show_default=True, type=float, help="Poll interval in seconds")
@click.pass_obj
def responsive_watch(root: Path, path: str | None, interval: float) -> None:
    """Regenerate autofill overrides for PATH, or poll the SCSS dir when omitted."""
    action = "responsive:watch"
    kit = load_kit(root, action)

    if path is None:
        logging.getLogger("scss_kit").setLevel(logging.INFO)
        watcher = ResponsiveWatcher(kit.root, interval=interval)
        _stop_on_signals(watcher)
        try:
            watcher.run()
        except ScssKitError as exc:
            fail(action, str(exc))
        return

    try:
        result = handle_change(kit, Path(path))
    except ScssKitError as exc:
        fail(action, str(exc))

    if result is None:
        emit({"action": action, "ok": True, "ignored": path})
        return
    if isinstance(result, EntriesReport):
        emit({"action": action, **result.to_dict(kit)})
        sys.exit(0 if result.ok else 1)
    emit({"action": action, "ok": True, **result.to_dict(kit)})
