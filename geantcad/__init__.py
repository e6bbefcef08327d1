"""Toolkit-independent parts of a Geant4 geometry editor: themes, measurements,
shortcuts, preferences and a material catalogue."""

__version__ = "0.2.0"

__all__ = [
    "theme",
    "measurement",
    "shortcuts",
    "preferences",
    "material_catalog",
]