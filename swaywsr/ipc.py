"""Interact with sway using its IPC socket."""

__all__ = [
    "EventStream",
    "SwayConnection",
    "get_socket_path",
    "pack_message",
    "parse_event",
    "read_message",
    "sway_request",
]

import asyncio
import contextlib
import json
import os
import struct
from collections.abc import Callable, Iterable
from logging import Logger
from typing import Any, Self, cast

from .constants import IPC_HEADER_FORMAT, IPC_MAGIC, IPC_MAX_RETRIES, IPC_RETRY_DELAY_MULTIPLIER, SUBSCRIBED_EVENTS
from .logging_setup import get_logger
from .models import (
    IpcError,
    JSONResponse,
    MessageType,
    SceneNode,
    ShutdownEvent,
    SwayEvent,
    WindowChange,
    WindowEvent,
    WorkspaceChange,
    WorkspaceEvent,
)

log: Logger | None = None

HEADER_SIZE = struct.calcsize(IPC_HEADER_FORMAT)


def get_socket_path() -> str:
    """Return the sway IPC socket path, from the environment."""
    path = os.environ.get("SWAYSOCK") or os.environ.get("I3SOCK")
    if not path:
        msg = "SWAYSOCK is not set, is sway running?"
        raise IpcError(msg)
    return path


def pack_message(message_type: int, payload: str = "") -> bytes:
    """Frame `payload` as an IPC message of type `message_type`."""
    data = payload.encode("utf-8")
    return struct.pack(IPC_HEADER_FORMAT, IPC_MAGIC, len(data), message_type) + data


async def read_message(reader: asyncio.StreamReader) -> tuple[int, JSONResponse]:
    """Read one message (reply or event) and return (message type, decoded payload)."""
    try:
        header = await reader.readexactly(HEADER_SIZE)
        magic, length, message_type = struct.unpack(IPC_HEADER_FORMAT, header)
        if magic != IPC_MAGIC:
            msg = f"Invalid IPC magic: {magic!r}"
            raise IpcError(msg)
        payload = await reader.readexactly(length)
    except asyncio.IncompleteReadError as e:
        msg = "IPC connection closed"
        raise IpcError(msg) from e
    try:
        return message_type, json.loads(payload.decode("utf-8", errors="replace"))
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON payload for message type {message_type}"
        raise IpcError(msg) from e


async def _open_connection(logger: Logger) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    path = get_socket_path()
    try:
        return await asyncio.open_unix_connection(path)
    except (FileNotFoundError, ConnectionRefusedError) as e:
        logger.critical("sway socket not found! is it running ?")
        msg = f"Can't connect to {path}"
        raise IpcError(msg) from e


def retry_on_reset(func: Callable) -> Callable:
    """Retry on reset wrapper."""

    async def wrapper(*args, logger: Logger | None = None, **kwargs) -> Any:  # noqa: ANN401
        logger = cast("Logger", logger or log)
        exc = None
        for count in range(IPC_MAX_RETRIES):
            try:
                return await func(*args, **kwargs, logger=logger)
            except ConnectionResetError as e:  # noqa: PERF203
                exc = e
                logger.warning("ipc connection problem, retrying...")
                await asyncio.sleep(IPC_RETRY_DELAY_MULTIPLIER * count)
        logger.error("ipc connection failed.")
        raise ConnectionResetError from exc

    return wrapper


@retry_on_reset
async def sway_request(message_type: MessageType, payload: str = "", logger: Logger | None = None) -> JSONResponse:
    """Send one request on a fresh connection and return the decoded reply."""
    logger = cast("Logger", logger or log)
    logger.debug("%s %s", message_type.name, payload)
    reader, writer = await _open_connection(logger)
    try:
        writer.write(pack_message(message_type, payload))
        await writer.drain()
        reply_type, reply = await read_message(reader)
    finally:
        writer.close()
        await writer.wait_closed()
    if reply_type != message_type:
        msg = f"Unexpected reply type {reply_type} for {message_type.name}"
        raise IpcError(msg)
    return reply


class SwayConnection:
    """Request / reply side of the IPC: tree queries and commands."""

    def __init__(self, logger: Logger | None = None) -> None:
        self.log = cast("Logger", logger or log)

    async def get_tree(self) -> SceneNode:
        """Return the current scene tree."""
        tree = await sway_request(MessageType.GET_TREE, logger=self.log)
        if not isinstance(tree, dict):
            msg = "get_tree did not return an object"
            raise IpcError(msg)
        return SceneNode.from_json(tree)

    async def run_command(self, command: str) -> bool:
        """Run a sway command. Returns success value.

        Failures are logged, one line per failed command.
        """
        results = await sway_request(MessageType.RUN_COMMAND, command, logger=self.log)
        success = True
        for result in cast("list[dict[str, Any]]", results):
            if result.get("success"):
                continue
            success = False
            self.log.error("FAILED %s: %s", command, result.get("error"))
        return success


def parse_event(message_type: int, payload: JSONResponse) -> SwayEvent | None:
    """Turn a raw event into a `WindowEvent`, `WorkspaceEvent` or `ShutdownEvent`.

    Returns None for event types which are not handled.
    """
    if not isinstance(payload, dict):
        return None
    data = cast("dict[str, Any]", payload)
    if message_type == MessageType.EVENT_WINDOW:
        container = data.get("container")
        return WindowEvent(
            change=WindowChange(data.get("change")),
            container=SceneNode.from_json(container) if container else None,
        )
    if message_type == MessageType.EVENT_WORKSPACE:
        current = data.get("current")
        old = data.get("old")
        return WorkspaceEvent(
            change=WorkspaceChange(data.get("change")),
            current=SceneNode.from_json(current) if current else None,
            old=SceneNode.from_json(old) if old else None,
        )
    if message_type == MessageType.EVENT_SHUTDOWN:
        return ShutdownEvent(change=str(data.get("change", "exit")))
    return None


class EventStream:
    """A connection subscribed to sway events."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter, logger: Logger) -> None:
        self.reader = reader
        self.writer = writer
        self.log = logger

    @classmethod
    async def open(cls, events: Iterable[str] = SUBSCRIBED_EVENTS, logger: Logger | None = None) -> Self:
        """Connect and subscribe to `events`."""
        logger = cast("Logger", logger or log)
        reader, writer = await _open_connection(logger)
        stream = cls(reader, writer, logger)
        try:
            writer.write(pack_message(MessageType.SUBSCRIBE, json.dumps(list(events))))
            await writer.drain()
            reply_type, reply = await read_message(reader)
        except (IpcError, OSError):
            with contextlib.suppress(OSError):
                await stream.close()
            raise
        if reply_type != MessageType.SUBSCRIBE or not isinstance(reply, dict) or not reply.get("success"):
            await stream.close()
            msg = f"Subscription refused: {reply}"
            raise IpcError(msg)
        return stream

    async def read_event(self) -> SwayEvent | None:
        """Wait for the next event.

        Raises:
            IpcError: the connection was closed
        """
        message_type, payload = await read_message(self.reader)
        event = parse_event(message_type, payload)
        if event is None:
            self.log.debug("Ignoring message type %#x", message_type)
        return event

    async def close(self) -> None:
        """Close the connection."""
        self.writer.close()
        await self.writer.wait_closed()


def init() -> None:
    """Initialize logging."""
    global log  # noqa: PLW0603
    log = get_logger("ipc")
