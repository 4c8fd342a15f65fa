"""Swaywsr manager - the core daemon class."""

import asyncio
import contextlib
import signal
import sys

from .config import Configuration
from .config_loader import ConfigLoader
from .constants import EVENT_STREAM_MAX_RETRIES
from .events import dispatch_event
from .ipc import EventStream, SwayConnection
from .logging_setup import get_logger
from .models import IpcError, ShutdownEvent, SwayEvent, SwaywsrError
from .updater import update_tree

__all__ = ["Swaywsr", "get_event_stream_with_retry"]


async def get_event_stream_with_retry(max_retry: int = EVENT_STREAM_MAX_RETRIES, delay: float = 1.0) -> EventStream | None:
    """Obtain a subscribed event stream, retrying if it fails.

    Returns None once the retry count is exhausted.

    Args:
        max_retry: Maximum number of retries
        delay: Seconds between two attempts
    """
    log = get_logger("ipc")
    for attempt in range(max_retry + 1):
        try:
            return await EventStream.open(logger=log)
        except (OSError, IpcError) as e:  # noqa: PERF203
            log.warning("Failed to open event stream (attempt %d): %s", attempt + 1, e)
            if attempt < max_retry:
                await asyncio.sleep(delay)
    return None


class Swaywsr:
    """Main app object."""

    stopped = False
    event_stream: EventStream | None = None
    config: Configuration

    def __init__(self, loader: ConfigLoader, connection: SwayConnection | None = None) -> None:
        self.log = get_logger()
        self.loader = loader
        self.connection = connection or SwayConnection(get_logger("ipc"))
        self.config = Configuration()
        self.update_lock = asyncio.Lock()
        self.tasks: set[asyncio.Task] = set()
        signal.signal(signal.SIGTERM, lambda *_: sys.exit(0))

    async def initialize(self) -> None:
        """Load the configuration."""
        self.config = await self.loader.load()
        self.log.info(
            "Configuration loaded: %d icons, %d aliases, options %s",
            len(self.config.icons),
            len(self.config.aliases),
            dict(self.config.options),
        )

    def install_signal_handlers(self) -> None:
        """Reload the configuration on SIGHUP."""
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGHUP, self._schedule_reload)

    def _schedule_reload(self) -> None:
        task = asyncio.create_task(self.reload())
        self.tasks.add(task)
        task.add_done_callback(self.tasks.discard)

    async def reload(self) -> None:
        """Re-read the configuration file and refresh every workspace name."""
        try:
            config = await self.loader.load()
        except SwaywsrError:
            self.log.error("Reload failed, keeping the previous configuration")
            return
        except (OSError, UnicodeDecodeError):
            self.log.exception("Reload failed, keeping the previous configuration")
            return
        self.config = config
        self.log.info("Configuration reloaded")
        await self.update()

    async def update(self) -> None:
        """Run a full update, logging transport errors."""
        async with self.update_lock:
            try:
                await update_tree(self.connection, self.config, self.log)
            except (IpcError, OSError):
                self.log.exception("Workspaces update failed")

    async def handle_event(self, event: SwayEvent) -> None:
        """Process one event, logging transport errors."""
        self.log.debug("event %s", event.change)
        async with self.update_lock:
            try:
                await dispatch_event(event, self.connection, self.config, self.log)
            except (IpcError, OSError):
                self.log.exception("Failed to handle %s event", event.change)

    async def _reconnect(self) -> bool:
        """Replace a broken event stream. Returns False if sway is gone."""
        if self.event_stream is not None:
            with contextlib.suppress(OSError):
                await self.event_stream.close()
        self.event_stream = await get_event_stream_with_retry()
        if self.event_stream is None:
            return False
        # events were missed meanwhile
        await self.update()
        return True

    async def read_events_loop(self) -> None:
        """Consume the event stream and react to each event, one at a time."""
        while not self.stopped and self.event_stream is not None:
            try:
                event = await self.event_stream.read_event()
            except (IpcError, OSError) as e:
                self.log.warning("Event stream lost (%s), reconnecting...", e)
                if not await self._reconnect():
                    self.log.critical("Reader starved")
                    return
                continue
            if event is None:
                continue
            if isinstance(event, ShutdownEvent):
                self.log.info("sway is shutting down (%s)", event.change)
                self.stopped = True
                return
            await self.handle_event(event)

    async def run(self) -> None:
        """Name the workspaces once, then follow the events."""
        await self.update()
        await self.read_events_loop()

    async def close(self) -> None:
        """Release the event stream."""
        self.stopped = True
        if self.event_stream is not None:
            with contextlib.suppress(OSError):
                await self.event_stream.close()
            self.event_stream = None
