"""Configuration file loading utilities.

Reads the TOML file into the four tables of a `Configuration`:

    [icons]         # class = "glyph"
    [aliases]       # class = "displayed name"
    [general]       # separator, default_icon
    [options]       # no_names, focused_only, remove_duplicates
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
import aiofiles.os

from .config import Configuration, coerce_to_bool
from .constants import CONFIG_FILE, DEFAULT_ICON_SET
from .icons import ICON_SETS, get_icons
from .models import SwaywsrError
from .validation import GENERAL_SCHEMA, OPTIONS_SCHEMA, ConfigItems, ConfigValidator

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading a configuration file and turning it into a `Configuration`.

    Supports:
    - an explicit file (missing file is fatal)
    - the default location (missing file means an empty configuration)
    - a built-in icon set, extended by the `[icons]` section
    - options forced from the command line
    """

    def __init__(
        self,
        log: logging.Logger,
        config_filename: str = "",
        icon_set: str = DEFAULT_ICON_SET,
        forced_options: dict[str, bool] | None = None,
    ) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
            config_filename: Optional path to the config file
            icon_set: Name of the built-in icon set to start from
            forced_options: Options set from the command line, they win over the file
        """
        self.log = log
        self.config_filename = config_filename
        self.icon_set = icon_set
        self.forced_options = forced_options or {}
        self.errors: list[str] = []

    async def load(self) -> Configuration:
        """Load the configuration file.

        Raises:
            SwaywsrError: If an explicit config file is not found, the icon set is unknown
                or the file has syntax errors.
        """
        self.errors = []
        if self.icon_set not in ICON_SETS:
            self.log.critical("Unknown icon set %r, valid choices: %s", self.icon_set, ", ".join(ICON_SETS))
            raise SwaywsrError
        raw = await self._open_config()
        return self.build(raw)

    async def _open_config(self) -> dict[str, Any]:
        """Read the configured file, or the default one if it exists."""
        if self.config_filename:
            fname = Path(os.path.expandvars(self.config_filename)).expanduser()
            if not await aiofiles.os.path.exists(fname):
                self.log.critical("Config file not found: %s", fname)
                raise SwaywsrError
        else:
            fname = CONFIG_FILE
            if not await aiofiles.os.path.exists(fname):
                self.log.info("No configuration found at %s, using defaults", fname)
                return {}
        return await self._load_config_file(fname)

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML file.

        Raises:
            SwaywsrError: If the file has syntax errors
        """
        self.log.info("Loading %s", fname)
        async with aiofiles.open(fname, encoding="utf-8") as f:
            content = await f.read()
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            self.log.critical("Problem reading %s: %s", fname, e)
            raise SwaywsrError from e

    def build(self, raw: dict[str, Any]) -> Configuration:
        """Validate the raw sections and assemble the `Configuration`.

        Invalid entries are logged and dropped, they never abort the loading.
        """
        icons = get_icons(self.icon_set)
        icons.update(self._string_mapping(raw, "icons"))
        aliases = self._string_mapping(raw, "aliases")
        general = {key: str(value) for key, value in self._section(raw, "general", GENERAL_SCHEMA).items()}
        options = {key: coerce_to_bool(value) for key, value in self._section(raw, "options", OPTIONS_SCHEMA).items()}
        options.update(self.forced_options)
        return Configuration(icons=icons, aliases=aliases, general=general, options=options)

    def _get_table(self, raw: dict[str, Any], name: str) -> dict[str, Any]:
        table = raw.get(name, {})
        if not isinstance(table, dict):
            self._report(f"[{name}] Expected a section, got {type(table).__name__}")
            return {}
        return table

    def _string_mapping(self, raw: dict[str, Any], name: str) -> dict[str, str]:
        """Return a class -> string section, without its invalid entries."""
        table = self._get_table(raw, name)
        for error in ConfigValidator(table, name, self.log).validate_mapping():
            self._report(error)
        return {key: value for key, value in table.items() if isinstance(value, str)}

    def _section(self, raw: dict[str, Any], name: str, schema: ConfigItems) -> dict[str, Any]:
        """Return the known and well typed keys of a schema-driven section."""
        table = self._get_table(raw, name)
        validator = ConfigValidator(table, name, self.log)
        self.errors.extend(validator.warn_unknown_keys(schema))
        for error in validator.validate(schema):
            self._report(error)
        return {key: value for key, value in table.items() if key in schema.names and key not in validator.invalid_keys}

    def _report(self, error: str) -> None:
        self.log.error(error)
        self.errors.append(error)
