"""Configuration value passed to every renaming entry point."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .constants import DEFAULT_SEPARATOR

__all__ = ["BOOL_FALSE_STRINGS", "BOOL_STRINGS", "BOOL_TRUE_STRINGS", "Configuration", "coerce_to_bool"]

ConfigValueType = float | bool | str | list | dict

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})
BOOL_STRINGS = BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


def _frozen(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Configuration:
    """The four lookup tables driving the naming.

    Attributes:
        icons: window class -> icon glyph
        aliases: window class -> name displayed instead of the class
        general: free-form settings (`separator`, `default_icon`)
        options: boolean switches (`no_names`, `focused_only`, `remove_duplicates`)

    Missing keys are not errors, lookups fall back to defaults.
    """

    icons: Mapping[str, str] = field(default_factory=dict)
    aliases: Mapping[str, str] = field(default_factory=dict)
    general: Mapping[str, str] = field(default_factory=dict)
    options: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only views, so one update never sees the tables change
        for name in ("icons", "aliases", "general", "options"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def get_option(self, key: str) -> bool:
        """Return the boolean option `key`, False when unset."""
        return coerce_to_bool(self.options.get(key), False)

    @property
    def separator(self) -> str:
        """String placed between two window names."""
        return self.general.get("separator", DEFAULT_SEPARATOR)

    @property
    def default_icon(self) -> str | None:
        """Icon used for classes without a dedicated one."""
        return self.general.get("default_icon")

    def with_options(self, **options: bool) -> "Configuration":
        """Return a copy with `options` overriding the current ones."""
        return Configuration(
            icons=self.icons,
            aliases=self.aliases,
            general=self.general,
            options={**self.options, **options},
        )
