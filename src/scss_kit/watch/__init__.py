"""Long-running watch loops: compiled CSS sync and autofill regeneration."""

from scss_kit.watch.base import ChangeHandler, WatchLoop
from scss_kit.watch.css_sync import CssSyncWatcher, SyncLayout, SyncStatus, sync_one
from scss_kit.watch.responsive import ResponsiveWatcher, handle_change

__all__ = [
    "ChangeHandler",
    "CssSyncWatcher",
    "ResponsiveWatcher",
    "SyncLayout",
    "SyncStatus",
    "WatchLoop",
    "handle_change",
    "sync_one",
]
