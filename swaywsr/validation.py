"""Configuration validation with schema definitions.

Each TOML section is described by a `ConfigItems` schema. `ConfigValidator`
reports type errors and unknown keys (with a "did you mean" suggestion), and
returns the subset of the section which can safely be used.
"""

import difflib
import logging
from dataclasses import dataclass
from typing import Any

from .config import BOOL_STRINGS

__all__ = [
    "GENERAL_SCHEMA",
    "OPTIONS_SCHEMA",
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
]


@dataclass
class ConfigField:
    """Describes an expected configuration field.

    Attributes:
        name: The configuration key name
        field_type: Expected type (str or bool)
    """

    name: str
    field_type: type = str


class ConfigItems(list):
    """A list of ConfigField items, the schema of one section."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)

    @property
    def names(self) -> list[str]:
        """Known key names."""
        return [prop.name for prop in self]


GENERAL_SCHEMA = ConfigItems(
    ConfigField("separator", str),
    ConfigField("default_icon", str),
)

OPTIONS_SCHEMA = ConfigItems(
    ConfigField("no_names", bool),
    ConfigField("focused_only", bool),
    ConfigField("remove_duplicates", bool),
)


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def format_config_error(section: str, key: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        section: Section name
        key: Key that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error
    """
    msg = f"[{section}] Config error for '{key}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates one configuration section."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The section content
            section: Name of the section, for error messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.section = section
        self.log = logger
        self.invalid_keys: set[str] = set()

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate the section against `schema`.

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []
        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                continue
            error = self._check_type(field_def, value)
            if error:
                self.invalid_keys.add(field_def.name)
                errors.append(error)
        return errors

    def validate_mapping(self) -> list[str]:
        """Validate a free-form section where every value must be a string."""
        return [
            format_config_error(self.section, key, f"Expected str, got {type(value).__name__}", f'Use "{key}" = "value"')
            for key, value in self.config.items()
            if not isinstance(value, str)
        ]

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        if field_def.field_type is bool:
            if isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_STRINGS):
                return None
            return format_config_error(
                self.section,
                field_def.name,
                f"Expected bool, got {type(value).__name__}",
                "Use true/false (without quotes)",
            )
        if isinstance(value, field_def.field_type):
            return None
        return format_config_error(
            self.section,
            field_def.name,
            f"Expected {field_def.field_type.__name__}, got {type(value).__name__}",
            f'Use {field_def.name} = "value"',
        )

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown configuration keys.

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = schema.names
        for key in self.config:
            if key in known_keys:
                continue
            similar = _find_similar_key(key, known_keys)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"
            self.log.warning(msg)
            warnings.append(msg)
        return warnings
