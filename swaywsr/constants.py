"""Shared constants for swaywsr."""

import os
from pathlib import Path

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_ICON_SET",
    "DEFAULT_SEPARATOR",
    "EVENT_STREAM_MAX_RETRIES",
    "IPC_HEADER_FORMAT",
    "IPC_MAGIC",
    "IPC_MAX_RETRIES",
    "IPC_RETRY_DELAY_MULTIPLIER",
    "SUBSCRIBED_EVENTS",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "swaywsr" / "config.toml"

DEFAULT_SEPARATOR = " | "
DEFAULT_ICON_SET = "none"

# i3/sway IPC framing: magic string, then payload length and message type (native u32)
IPC_MAGIC = b"i3-ipc"
IPC_HEADER_FORMAT = f"={len(IPC_MAGIC)}sII"

SUBSCRIBED_EVENTS = ("window", "workspace", "shutdown")

# IPC retry settings
IPC_MAX_RETRIES = 3
IPC_RETRY_DELAY_MULTIPLIER = 0.5
EVENT_STREAM_MAX_RETRIES = 10
