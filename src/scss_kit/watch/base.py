"""Watchdog plumbing shared by the watch loops.

``ChangeHandler`` filters file events by pattern and hands each changed
path to a callback. ``WatchLoop`` owns one polling observer and blocks
until it is stopped.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Sequence

from watchdog.events import FileSystemEvent, PatternMatchingEventHandler
from watchdog.observers.polling import PollingObserver

DEFAULT_INTERVAL = 0.5


class ChangeHandler(PatternMatchingEventHandler):
    """Report created, modified and moved-in files that match *patterns*."""

    def __init__(
        self,
        callback: Callable[[Path], None],
        patterns: Sequence[str],
        ignore_patterns: Sequence[str] = (),
    ) -> None:
        super().__init__(
            patterns=list(patterns),
            ignore_patterns=list(ignore_patterns),
            ignore_directories=True,
        )
        self.callback = callback

    def _changed(self, raw_path: str | bytes) -> None:
        self.callback(Path(os.fsdecode(raw_path)))

    def on_created(self, event: FileSystemEvent) -> None:
        self._changed(event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._changed(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._changed(event.dest_path)


class WatchLoop:
    """One polling observer with a start/stop lifecycle.

    Subclasses schedule their handlers before ``run`` and may override
    ``should_stop`` to end the loop from outside the observer.
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        self.interval = interval
        self.observer = PollingObserver(timeout=interval)

    def schedule(self, handler: ChangeHandler, directory: Path) -> None:
        self.observer.schedule(handler, str(directory), recursive=True)

    def should_stop(self) -> bool:
        return False

    @property
    def stopped(self) -> bool:
        return self.observer.stopped_event.is_set()

    def stop(self) -> None:
        self.observer.stop()

    def start(self) -> None:
        self.observer.start()

    def wait(self) -> None:
        """Block until ``stop`` is called or ``should_stop`` returns True."""
        try:
            while not self.stopped:
                self.observer.join(self.interval)
                if self.should_stop():
                    break
        finally:
            self.stop()
            self.observer.join()

    def run(self) -> None:
        self.start()
        self.wait()
