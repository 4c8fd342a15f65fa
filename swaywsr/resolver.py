"""Resolve the text displayed for one window."""

from .config import Configuration
from .models import MissingInformation, SceneNode

__all__ = ["get_class", "get_class_key"]


def get_class_key(node: SceneNode) -> str:
    """Return the key used for icon & alias lookups.

    Wayland clients are identified by their `app_id`, X11 ones by the class of
    their window properties.

    Raises:
        MissingInformation: the node has neither
    """
    if node.app_id is not None:
        return node.app_id
    if node.window_properties is not None and node.window_properties.class_ is not None:
        return node.window_properties.class_
    raise MissingInformation(node)


def get_class(node: SceneNode, config: Configuration) -> str:
    """Return the display string of a window node.

    Combines the icon (class icon, else `default_icon`) with the alias (else the
    class itself). With `no_names`, only the icon is kept, unless there is none.

    Raises:
        MissingInformation: the node has neither an app_id nor a window class
    """
    class_key = get_class_key(node)
    label = config.aliases.get(class_key, class_key)
    icon = config.icons.get(class_key, config.default_icon)

    if icon is None:
        return label
    if config.get_option("no_names"):
        return icon
    return f"{icon} {label}"
