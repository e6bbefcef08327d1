"""Keyboard and mouse shortcut reference, with text filtering."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Shortcut:
    """One entry of the shortcut reference."""

    category: str
    action: str
    shortcut: str
    description: str

    def matches(self, text: str) -> bool:
        """Return True if ``text`` occurs in any field, ignoring case; empty text matches."""
        if not text:
            return True
        needle = text.lower()
        return any(needle in value.lower() for value in astuple(self))


_DEFAULT_SHORTCUTS = (
    # File operations
    Shortcut("File", "New Project", "Ctrl+N", "Create a new project"),
    Shortcut("File", "Open Project", "Ctrl+O", "Open an existing project"),
    Shortcut("File", "Save", "Ctrl+S", "Save current project"),
    Shortcut("File", "Save As", "Ctrl+Shift+S", "Save project with new name"),
    Shortcut("File", "Quit", "Ctrl+Q", "Exit application"),
    # Edit operations
    Shortcut("Edit", "Undo", "Ctrl+Z", "Undo last action"),
    Shortcut("Edit", "Redo", "Ctrl+Y", "Redo undone action"),
    Shortcut("Edit", "Delete", "Delete", "Delete selected object"),
    Shortcut("Edit", "Duplicate", "Ctrl+D", "Duplicate selected object"),
    # Tools
    Shortcut("Tools", "Select", "S", "Selection mode"),
    Shortcut("Tools", "Move", "W", "Move/translate mode"),
    Shortcut("Tools", "Rotate", "E", "Rotation mode"),
    Shortcut("Tools", "Scale", "T", "Scale mode"),
    # Axis constraints (during Move/Rotate/Scale)
    Shortcut("Constraint", "X Axis", "X", "Constrain to X axis"),
    Shortcut("Constraint", "Y Axis", "Y", "Constrain to Y axis"),
    Shortcut("Constraint", "Z Axis", "Z", "Constrain to Z axis"),
    # View controls
    Shortcut("View", "Frame Selected", "F", "Frame selected object in view"),
    Shortcut("View", "Reset View", "Home", "Reset camera to default"),
    # Mouse controls
    Shortcut("Mouse", "Select Object", "Left Click", "Select object under cursor"),
    Shortcut("Mouse", "Context Menu", "Right Click", "Show context menu"),
    Shortcut("Mouse", "Orbit Camera", "Middle Drag", "Rotate camera around target"),
    Shortcut("Mouse", "Pan Camera", "Shift+Middle", "Pan the view"),
    Shortcut("Mouse", "Zoom", "Scroll Wheel", "Zoom in/out"),
    Shortcut("Mouse", "Transform", "Left Drag", "Drag selected object (in W/E/T mode)"),
    # General
    Shortcut("General", "Show Shortcuts", "Ctrl+/", "Show this dialog"),
    Shortcut("General", "Preferences", "Ctrl+,", "Open preferences"),
)


def default_shortcuts() -> List[Shortcut]:
    """Return the application's shortcut reference, in display order."""
    return list(_DEFAULT_SHORTCUTS)


def filter_shortcuts(shortcuts: Iterable[Shortcut], text: str) -> List[Shortcut]:
    """Return the shortcuts whose fields contain ``text``, keeping their order."""
    return [shortcut for shortcut in shortcuts if shortcut.matches(text)]