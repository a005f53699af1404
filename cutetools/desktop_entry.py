"""Freedesktop ``.desktop`` entries: building, reading and icon discovery."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from cutetools.recent import PathArg

GROUP = "Desktop Entry"

# Key name in the file for each text field, in the order they are written.
_TEXT_KEYS = (
    ("name", "Name"),
    ("exec", "Exec"),
    ("try_exec", "TryExec"),
    ("icon", "Icon"),
    ("type", "Type"),
    ("version", "Version"),
    ("generic_name", "GenericName"),
    ("categories", "Categories"),
    ("comment", "Comment"),
    ("mime_types", "MimeType"),
    ("keywords", "Keywords"),
    ("startup_wm_class", "StartupWMClass"),
)

_FLAG_KEYS = (
    ("terminal", "Terminal"),
    ("no_display", "NoDisplay"),
    ("startup_notify", "StartupNotify"),
)


@dataclass
class DesktopEntry:
    """The fields of a ``[Desktop Entry]`` group."""

    name: str = ""
    exec: str = ""
    try_exec: str = ""
    icon: str = ""
    type: str = ""
    version: str = ""
    generic_name: str = ""
    categories: str = ""
    comment: str = ""
    mime_types: str = ""
    keywords: str = ""
    startup_wm_class: str = ""
    terminal: bool = False
    no_display: bool = False
    startup_notify: bool = False

    def render(self) -> str:
        """The entry as file text; empty text fields are left out."""
        lines = [f"[{GROUP}]"]
        for attr, key in _TEXT_KEYS:
            value = getattr(self, attr)
            if value:
                lines.append(f"{key}={value}")
        for attr, key in _FLAG_KEYS:
            lines.append(f"{key}={'true' if getattr(self, attr) else 'false'}")
        return "\n".join(lines) + "\n"


def _to_bool(value: str) -> bool:
    return value.strip().lower() not in ("", "0", "false")


def _read_group(text: str, group: str) -> dict[str, str]:
    values: dict[str, str] = {}
    current = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("#", ";")):
            continue
        if line.startswith("[") and line.endswith("]"):
            current = line[1:-1].strip()
            continue
        if current != group or "=" not in line:
            continue
        key, _, value = line.partition("=")
        values[key.strip()] = value.strip()
    return values


def parse_desktop_entry(text: str) -> DesktopEntry:
    """Read the ``[Desktop Entry]`` group of ``text``; missing keys keep defaults."""
    values = _read_group(text, GROUP)
    entry = DesktopEntry()
    for attr, key in _TEXT_KEYS:
        if key in values:
            setattr(entry, attr, values[key])
    for attr, key in _FLAG_KEYS:
        if key in values:
            setattr(entry, attr, _to_bool(values[key]))
    return entry


def load_desktop_entry(path: PathArg) -> DesktopEntry:
    """Parse the desktop file at ``path``."""
    return parse_desktop_entry(Path(path).read_bytes().decode("utf-8", errors="replace"))


def default_application_dirs() -> list[str]:
    """Directories where desktop files are usually installed, without duplicates."""
    home = Path.home()
    data_home = os.environ.get("XDG_DATA_HOME") or str(home / ".local" / "share")
    data_dirs = os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share"
    candidates = [
        "/usr/share/applications",
        str(home / ".local" / "share" / "applications"),
        str(Path(data_home) / "applications"),
    ]
    candidates += [str(Path(d) / "applications") for d in data_dirs.split(":") if d]
    candidates.append(str(Path(data_home) / "applications"))
    return list(dict.fromkeys(candidates))


def search_icons(paths: Iterable[PathArg] | None = None) -> list[str]:
    """Distinct icon names named by the desktop files in ``paths``, in order found."""
    directories = default_application_dirs() if paths is None else [str(p) for p in paths]
    icons: dict[str, None] = {}
    for directory in dict.fromkeys(directories):
        folder = Path(directory)
        if not folder.is_dir():
            continue
        for file in sorted(folder.glob("*.desktop")):
            if not file.is_file():
                continue
            try:
                icon = load_desktop_entry(file).icon
            except OSError:
                continue
            if icon:
                icons.setdefault(icon, None)
    return list(icons)