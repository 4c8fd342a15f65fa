"""Built-in icon sets, keyed by window class / app_id.

Glyphs of the "awesome" set are Font Awesome code points, they need a Font
Awesome font in the bar configuration to render.
"""

__all__ = ["ICON_SETS", "get_icons"]

_TERMINAL = "\uf120"
_CODE = "\uf121"
_BROWSER = "\uf268"
_FIREFOX = "\uf269"
_FOLDER = "\uf07b"
_ENVELOPE = "\uf0e0"
_PLAY = "\uf04b"
_IMAGE = "\uf03e"
_FILE_TEXT = "\uf15c"
_FILE_PDF = "\uf1c1"
_COMMENT = "\uf075"
_KEY = "\uf084"
_VOLUME = "\uf028"
_MUSIC = "\uf001"
_GAMEPAD = "\uf11b"

AWESOME: dict[str, str] = {
    "Alacritty": _TERMINAL,
    "alacritty": _TERMINAL,
    "kitty": _TERMINAL,
    "foot": _TERMINAL,
    "footclient": _TERMINAL,
    "termite": _TERMINAL,
    "URxvt": _TERMINAL,
    "org.wezfurlong.wezterm": _TERMINAL,
    "gnome-terminal-server": _TERMINAL,
    "Code": _CODE,
    "code": _CODE,
    "code-oss": _CODE,
    "Emacs": _CODE,
    "emacs": _CODE,
    "jetbrains-idea": _CODE,
    "Firefox": _FIREFOX,
    "firefox": _FIREFOX,
    "firefox-esr": _FIREFOX,
    "Chromium": _BROWSER,
    "chromium": _BROWSER,
    "Google-chrome": _BROWSER,
    "google-chrome": _BROWSER,
    "org.gnome.Nautilus": _FOLDER,
    "Thunar": _FOLDER,
    "thunar": _FOLDER,
    "pcmanfm": _FOLDER,
    "Thunderbird": _ENVELOPE,
    "thunderbird": _ENVELOPE,
    "mpv": _PLAY,
    "vlc": _PLAY,
    "Gimp": _IMAGE,
    "gimp": _IMAGE,
    "imv": _IMAGE,
    "libreoffice-writer": _FILE_TEXT,
    "org.pwmt.zathura": _FILE_PDF,
    "Evince": _FILE_PDF,
    "Slack": _COMMENT,
    "discord": _COMMENT,
    "TelegramDesktop": _COMMENT,
    "org.telegram.desktop": _COMMENT,
    "KeePassXC": _KEY,
    "org.keepassxc.KeePassXC": _KEY,
    "pavucontrol": _VOLUME,
    "Spotify": _MUSIC,
    "spotify": _MUSIC,
    "Steam": _GAMEPAD,
    "steam": _GAMEPAD,
}

ICON_SETS: dict[str, dict[str, str]] = {
    "none": {},
    "awesome": AWESOME,
}


def get_icons(name: str) -> dict[str, str]:
    """Return a copy of the icon set called `name`.

    Raises:
        KeyError: unknown icon set
    """
    return dict(ICON_SETS[name])
