"""
Settings File Monitor
=====================

Watches the settings file and notifies a callback whenever it is created,
modified, moved into place or deleted, so configured folder pairs can be
rebuilt while a session is running.
"""

from collections.abc import Callable
from pathlib import Path
from threading import Lock, Timer, current_thread

from loguru import logger
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class FileMonitorError(Exception):
    """Base exception for file monitor errors."""


class SettingsFileHandler(FileSystemEventHandler):
    """
    Forwards events for a single file to a callback, with debouncing.

    The callback runs once the file has been quiet for ``debounce_time``
    seconds, so a save that truncates and then writes the file is reloaded
    after the final write.
    """

    def __init__(self, settings_file: Path, callback: Callable[[], None], debounce_time: float = 0.1):
        """
        Initialize the event handler.

        Args:
            settings_file: The file to react to
            callback: Called with no arguments when the file changes
            debounce_time: Quiet period in seconds before the callback runs; 0 calls it at once
        """
        super().__init__()
        self.settings_file = Path(settings_file).resolve()
        self.callback = callback
        self.debounce_time = debounce_time
        self._timer: Timer | None = None
        self._event_lock = Lock()

    def _is_settings_file(self, path: str | bytes) -> bool:
        if isinstance(path, bytes):
            path = path.decode()
        return bool(path) and Path(path).resolve() == self.settings_file

    def _should_process_event(self, event: FileSystemEvent) -> bool:
        if event.is_directory:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(self._is_settings_file(path) for path in paths)

    def _handle_event(self, event: FileSystemEvent) -> None:
        if not self._should_process_event(event):
            return
        logger.debug(f"Settings file {event.event_type}: {self.settings_file}")
        if self.debounce_time <= 0:
            self._reload()
            return
        with self._event_lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = Timer(self.debounce_time, self._reload)
            self._timer.daemon = True
            self._timer.start()

    def _reload(self) -> None:
        with self._event_lock:
            if self._timer is current_thread():
                self._timer = None
        logger.info(f"Reloading settings from {self.settings_file}")
        try:
            self.callback()
        except Exception as error:
            logger.error(f"Error reloading settings: {error}")

    def cancel(self) -> None:
        """Drop a pending reload."""
        with self._event_lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle_event(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._handle_event(event)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._handle_event(event)

    def on_moved(self, event: FileSystemEvent) -> None:
        self._handle_event(event)


class SettingsFileMonitor:
    """Runs a watchdog observer on the directory holding the settings file."""

    def __init__(self, settings_file: str | Path, on_change: Callable[[], None], debounce_time: float = 0.1) -> None:
        self.settings_file = Path(settings_file).resolve()
        self.handler = SettingsFileHandler(self.settings_file, on_change, debounce_time)
        self.observer = Observer()
        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    def start(self) -> None:
        """Start monitoring."""
        if self._is_running:
            logger.warning("Monitor is already running")
            return
        watch_dir = self.settings_file.parent
        if not watch_dir.is_dir():
            raise FileMonitorError(f"Watch path does not exist: {watch_dir}")
        self.observer.schedule(self.handler, str(watch_dir), recursive=False)
        self.observer.start()
        self._is_running = True
        logger.info(f"Started monitoring {self.settings_file}")

    def stop(self) -> None:
        """Stop monitoring."""
        if not self._is_running:
            return
        self.observer.stop()
        self.observer.join()
        self.handler.cancel()
        # An observer thread cannot be restarted
        self.observer = Observer()
        self._is_running = False
        logger.info(f"Stopped monitoring {self.settings_file}")

    def __enter__(self) -> "SettingsFileMonitor":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
