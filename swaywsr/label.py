"""Compose workspace names from window display strings."""

import re
from collections.abc import Iterable

from .config import Configuration
from .constants import DEFAULT_SEPARATOR

__all__ = ["compose_name", "compose_suffix", "index_prefix", "remove_duplicates"]


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Keep the first occurrence of each item, in order."""
    return list(dict.fromkeys(items))


def compose_suffix(classes: Iterable[str], separator: str = DEFAULT_SEPARATOR, dedupe: bool = False) -> str:
    """Join the display strings, with a leading space unless there are none."""
    if dedupe:
        classes = remove_duplicates(classes)
    joined = separator.join(classes)
    return f" {joined}" if joined else ""


def index_prefix(name: str) -> str:
    """Return the leading token of a workspace name (eg: "3" for "3 foo | bar").

    The token is taken literally: a name starting with a space has an empty prefix.
    """
    return re.split(r"\s+", name, maxsplit=1)[0]


def compose_name(name: str, classes: Iterable[str], config: Configuration) -> str:
    """Return the new name of a workspace currently called `name`."""
    suffix = compose_suffix(classes, config.separator, config.get_option("remove_duplicates"))
    return index_prefix(name) + suffix
