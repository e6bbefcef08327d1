"""Application preferences and their persistent storage."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Callable, List, Optional, Union

from platformdirs import user_config_dir

from geantcad.theme import Theme, ThemeManager

APP_NAME = "GeantCAD"
ORGANIZATION = "GeantCAD"

ANTIALIASING_CHOICES = (0, 2, 4, 8)
BACKGROUND_CHOICES = (
    "gradient_dark",
    "gradient_light",
    "solid_black",
    "solid_gray",
    "solid_white",
)


def default_thread_count() -> int:
    """Return the number of threads the machine runs well in parallel."""
    return os.cpu_count() or 1


def default_settings_path() -> Path:
    """Return the per-user file the preferences are kept in."""
    return Path(user_config_dir(APP_NAME, ORGANIZATION)) / f"{APP_NAME}.conf"


def _clamp(value, low, high):
    return max(low, min(high, value))


# (section, key, attribute name) for every stored setting.
_LAYOUT = (
    ("appearance", "theme", "theme_index"),
    ("appearance", "fontFamily", "font_family"),
    ("appearance", "fontSize", "font_size"),
    ("appearance", "animations", "animations"),
    ("viewport", "antialiasing", "antialiasing"),
    ("viewport", "background", "background"),
    ("viewport", "showAxes", "show_axes"),
    ("viewport", "showViewCube", "show_view_cube"),
    ("viewport", "cameraSpeed", "camera_speed"),
    ("viewport", "zoomSpeed", "zoom_speed"),
    ("grid", "enabled", "grid_enabled"),
    ("grid", "spacing", "grid_spacing"),
    ("grid", "subdivisions", "grid_subdivisions"),
    ("grid", "snapToGrid", "snap_to_grid"),
    ("geant4", "path", "geant4_path"),
    ("geant4", "rootPath", "root_path"),
    ("geant4", "autoCompile", "auto_compile"),
    ("geant4", "numThreads", "num_threads"),
)


@dataclass
class Preferences:
    """User settings; numeric values are clamped to their allowed ranges."""

    # Appearance
    theme_index: int = 0
    font_family: str = "Segoe UI"
    font_size: int = 13
    animations: bool = True
    # Viewport
    antialiasing: int = 4
    background: str = "gradient_dark"
    show_axes: bool = True
    show_view_cube: bool = True
    camera_speed: float = 1.0
    zoom_speed: float = 1.0
    # Grid
    grid_enabled: bool = False
    grid_spacing: float = 10.0
    grid_subdivisions: int = 5
    snap_to_grid: bool = False
    # Geant4
    geant4_path: str = ""
    root_path: str = ""
    auto_compile: bool = False
    num_threads: int = field(default_factory=default_thread_count)

    def __post_init__(self) -> None:
        if self.theme_index not in tuple(int(t) for t in Theme):
            raise ValueError(f"unknown theme index: {self.theme_index}")
        if self.antialiasing not in ANTIALIASING_CHOICES:
            raise ValueError(f"unsupported anti-aliasing level: {self.antialiasing}")
        if self.background not in BACKGROUND_CHOICES:
            raise ValueError(f"unknown background: {self.background}")
        self.font_size = _clamp(int(self.font_size), 8, 24)
        self.camera_speed = _clamp(float(self.camera_speed), 0.1, 10.0)
        self.zoom_speed = _clamp(float(self.zoom_speed), 0.1, 10.0)
        self.grid_spacing = _clamp(float(self.grid_spacing), 1.0, 1000.0)
        self.grid_subdivisions = _clamp(int(self.grid_subdivisions), 1, 10)
        self.num_threads = _clamp(int(self.num_threads), 1, default_thread_count() * 2)

    def selected_theme(self) -> Theme:
        """Return the theme chosen by these preferences."""
        return Theme(self.theme_index)


class PreferencesStore:
    """Reads and writes preferences in an INI-style settings file."""

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path) if path is not None else default_settings_path()
        self.settings_changed: List[Callable[[Preferences], None]] = []

    def load(self) -> Preferences:
        """Return the stored preferences; missing or unusable values keep their defaults."""
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str
        parser.read(self.path, encoding="utf-8")

        defaults = Preferences()
        kinds = {f.name: type(getattr(defaults, f.name)) for f in fields(Preferences)}
        values = {}
        for section, key, name in _LAYOUT:
            if not parser.has_option(section, key):
                continue
            kind = kinds[name]
            try:
                if kind is bool:
                    value = parser.getboolean(section, key)
                elif kind is int:
                    value = int(parser.get(section, key))
                elif kind is float:
                    value = float(parser.get(section, key))
                else:
                    value = parser.get(section, key)
            except ValueError:
                continue
            values[name] = value

        # A choice that is not offered is ignored, as a combo box would.
        if values.get("antialiasing", 4) not in ANTIALIASING_CHOICES:
            values.pop("antialiasing")
        if values.get("background", "gradient_dark") not in BACKGROUND_CHOICES:
            values.pop("background")
        if values.get("theme_index", 0) not in tuple(int(t) for t in Theme):
            values.pop("theme_index")
        return Preferences(**values)

    def save(self, preferences: Preferences, theme_manager: Optional[ThemeManager] = None) -> None:
        """Write ``preferences``, apply their theme and notify listeners."""
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str
        for section, key, name in _LAYOUT:
            if not parser.has_section(section):
                parser.add_section(section)
            value = getattr(preferences, name)
            parser.set(section, key, str(value).lower() if isinstance(value, bool) else str(value))

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            parser.write(handle)

        if theme_manager is not None:
            theme_manager.apply_theme(preferences.selected_theme())
        for listener in self.settings_changed:
            listener(preferences)