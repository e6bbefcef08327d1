"""Catalogue of NIST materials and chemical elements offered by the material editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

NIST_MATERIALS: Tuple[str, ...] = (
    "G4_AIR", "G4_WATER", "G4_Galactic",
    "G4_Al", "G4_Si", "G4_Fe", "G4_Cu", "G4_Pb", "G4_Ti",
    "G4_STAINLESS-STEEL", "G4_BRASS", "G4_BRONZE",
    "G4_GLASS_PLATE", "G4_Pyrex_Glass",
    "G4_POLYSTYRENE", "G4_POLYETHYLENE", "G4_PLEXIGLASS",
    "G4_CARBON_DIOXIDE", "G4_Ar", "G4_He", "G4_N", "G4_O",
    "G4_CESIUM_IODIDE", "G4_SODIUM_IODIDE",
    "G4_BGO", "G4_LYSO", "G4_PbWO4",
    "G4_CONCRETE", "G4_BONE_COMPACT_ICRU",
    "G4_MUSCLE_SKELETAL_ICRP", "G4_TISSUE_SOFT_ICRP",
)

# Defaults of the custom material form.
DEFAULT_DENSITY = 1.0  # g/cm3
DEFAULT_TEMPERATURE = 293.15  # K
DEFAULT_PRESSURE = 1.0  # atm
DEFAULT_ATOMIC_NUMBER = 6
DEFAULT_ATOMIC_MASS = 12.011  # g/mol

DENSITY_RANGE = (0.0001, 30.0)
TEMPERATURE_RANGE = (0.0, 10000.0)
PRESSURE_RANGE = (0.0, 1000.0)
ATOMIC_NUMBER_RANGE = (1, 118)
ATOMIC_MASS_RANGE = (1.0, 300.0)


@dataclass(frozen=True)
class ElementInfo:
    """A chemical element that can be added to a compound."""

    name: str
    symbol: str
    z: int
    a: float

    def label(self) -> str:
        """Return the text under which the element is offered."""
        return f"{self.name} ({self.symbol}) - Z={self.z}"


ELEMENTS: Tuple[ElementInfo, ...] = (
    ElementInfo("Hydrogen", "H", 1, 1.008),
    ElementInfo("Helium", "He", 2, 4.003),
    ElementInfo("Carbon", "C", 6, 12.011),
    ElementInfo("Nitrogen", "N", 7, 14.007),
    ElementInfo("Oxygen", "O", 8, 15.999),
    ElementInfo("Fluorine", "F", 9, 18.998),
    ElementInfo("Sodium", "Na", 11, 22.990),
    ElementInfo("Aluminum", "Al", 13, 26.982),
    ElementInfo("Silicon", "Si", 14, 28.086),
    ElementInfo("Phosphorus", "P", 15, 30.974),
    ElementInfo("Sulfur", "S", 16, 32.065),
    ElementInfo("Chlorine", "Cl", 17, 35.453),
    ElementInfo("Argon", "Ar", 18, 39.948),
    ElementInfo("Potassium", "K", 19, 39.098),
    ElementInfo("Calcium", "Ca", 20, 40.078),
    ElementInfo("Iron", "Fe", 26, 55.845),
    ElementInfo("Copper", "Cu", 29, 63.546),
    ElementInfo("Zinc", "Zn", 30, 65.380),
    ElementInfo("Germanium", "Ge", 32, 72.630),
    ElementInfo("Bromine", "Br", 35, 79.904),
    ElementInfo("Yttrium", "Y", 39, 88.906),
    ElementInfo("Iodine", "I", 53, 126.904),
    ElementInfo("Cesium", "Cs", 55, 132.905),
    ElementInfo("Barium", "Ba", 56, 137.327),
    ElementInfo("Lutetium", "Lu", 71, 174.967),
    ElementInfo("Tungsten", "W", 74, 183.840),
    ElementInfo("Lead", "Pb", 82, 207.200),
    ElementInfo("Bismuth", "Bi", 83, 208.980),
)

_BY_SYMBOL: Dict[str, ElementInfo] = {element.symbol: element for element in ELEMENTS}


def find_element(symbol: str) -> ElementInfo:
    """Return the catalogued element with ``symbol``; raise KeyError if there is none."""
    try:
        return _BY_SYMBOL[symbol]
    except KeyError:
        raise KeyError(f"unknown element symbol: {symbol!r}") from None


def nist_material_info(name: str) -> str:
    """Return a short note about a NIST material, or an empty string."""
    if name == "G4_AIR":
        return "Standard air at STP. Density: 0.00120 g/cm³"
    if name == "G4_WATER":
        return "Liquid water (H2O). Density: 1.00 g/cm³"
    if name == "G4_Galactic":
        return "Galactic vacuum. Extremely low density."
    if name.startswith("G4_") and len(name) <= 5:
        return "Pure element. Check NIST database for properties."
    if name == "G4_STAINLESS-STEEL":
        return "Stainless steel. Density: ~8.0 g/cm³"
    if "IODIDE" in name:
        return "Scintillator crystal. Common for radiation detection."
    return ""


def color_style(red: int, green: int, blue: int) -> str:
    """Return the style sheet that paints a colour swatch in the given colour."""
    for channel in (red, green, blue):
        if not 0 <= int(channel) <= 255:
            raise ValueError(f"colour channel out of range 0-255: {channel}")
    return f"background-color: rgb({int(red)}, {int(green)}, {int(blue)});"


def validate_custom_material(name: str, is_compound: bool, element_count: int) -> str:
    """Check a custom material form and return its trimmed name.

    Raises ValueError with the message shown to the user when the form is incomplete.
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("Please enter a material name.")
    if is_compound and element_count == 0:
        raise ValueError("Please add at least one element to the compound.")
    return trimmed