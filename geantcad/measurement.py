"""Interactive distance, angle and point measurements in the 3D viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

Point = Tuple[float, float, float]

_IDLE_INSTRUCTION = "Select a measurement mode"

_INSTRUCTIONS = {
    "DISTANCE": "Click on two points to measure distance",
    "ANGLE": "Click on three points to measure angle (vertex is second point)",
    "POINT_POSITION": "Click on a point to get its coordinates",
}

_REQUIRED_POINTS = {
    "DISTANCE": 2,
    "ANGLE": 3,
    "POINT_POSITION": 1,
}

_ICONS = {
    "DISTANCE": "📏",
    "ANGLE": "📐",
    "POINT_POSITION": "📍",
}


class MeasureMode(Enum):
    """Kinds of measurement the tool can take."""

    NONE = 0
    DISTANCE = 1  # point-to-point distance
    ANGLE = 2  # three-point angle
    POINT_POSITION = 3  # single point coordinates
    EDGE_LENGTH = 4  # edge length measurement
    AREA = 5  # surface area

    @property
    def required_points(self) -> Optional[int]:
        """Number of points that complete a measurement, or None if unsupported."""
        return _REQUIRED_POINTS.get(self.name)

    @property
    def instruction(self) -> str:
        """Hint shown to the user while this mode is active."""
        return _INSTRUCTIONS.get(self.name, _IDLE_INSTRUCTION)

    @property
    def icon(self) -> str:
        """Symbol used in the measurement list."""
        return _ICONS.get(self.name, "•")


def _as_point(point: Sequence[float]) -> Point:
    x, y, z = point
    return (float(x), float(y), float(z))


def _sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _length(v: Point) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def _normalized(v: Point) -> Point:
    length = _length(v)
    if length == 0.0:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)


def calculate_distance(p1: Sequence[float], p2: Sequence[float]) -> float:
    """Return the distance between two points."""
    return _length(_sub(_as_point(p2), _as_point(p1)))


def calculate_angle(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> float:
    """Return the angle in degrees at vertex ``p2`` between ``p1`` and ``p3``."""
    vertex = _as_point(p2)
    v1 = _normalized(_sub(_as_point(p1), vertex))
    v2 = _normalized(_sub(_as_point(p3), vertex))
    dot = v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]
    dot = max(-1.0, min(1.0, dot))
    return math.degrees(math.acos(dot))


@dataclass
class Measurement:
    """A completed measurement."""

    id: int
    mode: MeasureMode
    points: List[Point]
    value: float = 0.0
    unit: str = ""
    description: str = ""
    visible: bool = True

    def list_text(self) -> str:
        """Return the text shown for this measurement in the saved list."""
        text = f"{self.mode.icon} {self.description}"
        if not self.visible:
            text += " (hidden)"
        return text


def _build_measurement(measurement_id: int, mode: MeasureMode, points: List[Point]) -> Measurement:
    measurement = Measurement(id=measurement_id, mode=mode, points=list(points))
    if mode is MeasureMode.DISTANCE:
        measurement.value = calculate_distance(points[0], points[1])
        measurement.unit = "mm"
        measurement.description = f"Distance: {measurement.value:.2f} mm"
    elif mode is MeasureMode.ANGLE:
        measurement.value = calculate_angle(points[0], points[1], points[2])
        measurement.unit = "°"
        measurement.description = f"Angle: {measurement.value:.2f}°"
    elif mode is MeasureMode.POINT_POSITION:
        x, y, z = points[0]
        measurement.value = 0.0
        measurement.unit = "mm"
        measurement.description = f"Point: ({x:.2f}, {y:.2f}, {z:.2f}) mm"
    return measurement


class MeasurementTool:
    """Collects picked points, turns them into measurements and keeps the list."""

    def __init__(self) -> None:
        self.current_mode = MeasureMode.NONE
        self.pending_points: List[Point] = []
        self.measurements: List[Measurement] = []
        self.instruction = _IDLE_INSTRUCTION
        self.status = ""
        self._next_id = 1
        self.mode_changed: List[Callable[[MeasureMode], None]] = []
        self.measurement_added: List[Callable[[Measurement], None]] = []
        self.measurement_removed: List[Callable[[int], None]] = []
        self.measurements_cleared: List[Callable[[], None]] = []

    def set_mode(self, mode: MeasureMode) -> None:
        """Switch to ``mode``; choosing the active mode again switches it off."""
        self.pending_points.clear()
        self.status = ""
        if self.current_mode is mode:
            self.current_mode = MeasureMode.NONE
            self.instruction = _IDLE_INSTRUCTION
        else:
            self.current_mode = mode
            self.instruction = mode.instruction
        for callback in self.mode_changed:
            callback(self.current_mode)

    def add_point(self, point: Sequence[float]) -> Optional[Measurement]:
        """Add a picked point; return the measurement it completes, if any."""
        if self.current_mode is MeasureMode.NONE:
            return None
        picked = _as_point(point)
        self.pending_points.append(picked)

        required = self.current_mode.required_points
        if required is None:
            return None

        x, y, z = picked
        self.status = (
            f"Point {len(self.pending_points)}/{required}: ({x:.1f}, {y:.1f}, {z:.1f})"
        )
        if len(self.pending_points) >= required:
            return self._finish_measurement()
        return None

    def _finish_measurement(self) -> Measurement:
        measurement = _build_measurement(self._next_id, self.current_mode, self.pending_points)
        self._next_id += 1
        self.measurements.append(measurement)
        self.pending_points.clear()
        self.status = measurement.description
        for callback in self.measurement_added:
            callback(measurement)
        return measurement

    def cancel_current_measurement(self) -> None:
        """Drop the points picked so far."""
        self.pending_points.clear()
        self.status = ""

    def remove_measurement(self, measurement_id: int) -> None:
        """Remove the measurement with the given id."""
        self.measurements = [m for m in self.measurements if m.id != measurement_id]
        for callback in self.measurement_removed:
            callback(measurement_id)

    def clear_all_measurements(self) -> None:
        """Remove every saved measurement."""
        self.measurements.clear()
        for callback in self.measurements_cleared:
            callback()

    def toggle_measurement_visibility(self, measurement_id: int) -> None:
        """Show a hidden measurement or hide a shown one."""
        for measurement in self.measurements:
            if measurement.id == measurement_id:
                measurement.visible = not measurement.visible
                break

    def list_entries(self) -> List[Tuple[int, str]]:
        """Return ``(id, text)`` for each saved measurement, in order."""
        return [(m.id, m.list_text()) for m in self.measurements]