import math

import pytest

from geantcad.measurement import (
    MeasureMode,
    Measurement,
    MeasurementTool,
    calculate_angle,
    calculate_distance,
)


def test_distance_of_three_four_triangle():
    assert calculate_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)


def test_distance_is_symmetric_and_zero_for_same_point():
    a, b = (1.5, -2.0, 7.0), (-3.0, 4.0, 0.5)
    assert calculate_distance(a, b) == pytest.approx(calculate_distance(b, a))
    assert calculate_distance(a, a) == 0.0


def test_right_angle():
    assert calculate_angle((1, 0, 0), (0, 0, 0), (0, 1, 0)) == pytest.approx(90.0)


def test_straight_angle_and_zero_angle():
    assert calculate_angle((-1, 0, 0), (0, 0, 0), (5, 0, 0)) == pytest.approx(180.0)
    assert calculate_angle((2, 0, 0), (0, 0, 0), (7, 0, 0)) == pytest.approx(0.0)


def test_angle_symmetric_in_outer_points():
    p1, p2, p3 = (1, 2, 3), (0, -1, 2), (4, 0, -1)
    assert calculate_angle(p1, p2, p3) == pytest.approx(calculate_angle(p3, p2, p1))


def test_set_mode_sets_instruction_and_toggles_off():
    tool = MeasurementTool()
    seen = []
    tool.mode_changed.append(seen.append)
    tool.set_mode(MeasureMode.DISTANCE)
    assert tool.current_mode is MeasureMode.DISTANCE
    assert tool.instruction == "Click on two points to measure distance"
    tool.set_mode(MeasureMode.DISTANCE)
    assert tool.current_mode is MeasureMode.NONE
    assert tool.instruction == "Select a measurement mode"
    assert seen == [MeasureMode.DISTANCE, MeasureMode.NONE]


def test_switching_mode_clears_pending_points():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.ANGLE)
    tool.add_point((1, 1, 1))
    tool.set_mode(MeasureMode.DISTANCE)
    assert tool.pending_points == []
    assert tool.instruction == "Click on two points to measure distance"


def test_add_point_ignored_without_mode():
    tool = MeasurementTool()
    assert tool.add_point((1, 2, 3)) is None
    assert tool.pending_points == []
    assert tool.measurements == []


def test_distance_measurement_completes_after_two_points():
    tool = MeasurementTool()
    added = []
    tool.measurement_added.append(added.append)
    tool.set_mode(MeasureMode.DISTANCE)
    assert tool.add_point((0, 0, 0)) is None
    assert tool.status.startswith("Point 1/2: ")
    m = tool.add_point((3, 4, 0))
    assert m is not None and m.mode is MeasureMode.DISTANCE
    assert m.value == pytest.approx(calculate_distance((0, 0, 0), (3, 4, 0)))
    assert m.unit == "mm"
    assert m.description == f"Distance: {m.value:.2f} mm"
    assert tool.status == m.description
    assert tool.pending_points == []
    assert added == [m]
    assert tool.current_mode is MeasureMode.DISTANCE


def test_angle_measurement_uses_degree_unit():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.ANGLE)
    tool.add_point((1, 0, 0))
    tool.add_point((0, 0, 0))
    m = tool.add_point((0, 1, 0))
    assert m.unit == "°"
    assert m.description.startswith("Angle: ")
    assert m.description.endswith("°")
    assert len(m.points) == 3


def test_point_measurement_describes_coordinates():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.POINT_POSITION)
    m = tool.add_point((1, 2, 3))
    assert m.value == 0.0
    assert m.points == [(1.0, 2.0, 3.0)]
    assert m.description.startswith("Point: (")
    assert m.description.endswith(") mm")


def test_unsupported_mode_keeps_point_but_does_not_finish():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.AREA)
    assert tool.add_point((1, 1, 1)) is None
    assert len(tool.pending_points) == 1
    assert tool.measurements == []


def test_ids_increase_and_list_entries_follow_order():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.POINT_POSITION)
    first = tool.add_point((0, 0, 0))
    second = tool.add_point((1, 1, 1))
    assert second.id == first.id + 1
    entries = tool.list_entries()
    assert [e[0] for e in entries] == [first.id, second.id]
    assert entries[0][1] == "📍 " + first.description


def test_cancel_clears_pending_points():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.DISTANCE)
    tool.add_point((5, 5, 5))
    tool.cancel_current_measurement()
    assert tool.pending_points == []
    assert tool.status == ""


def test_remove_measurement():
    tool = MeasurementTool()
    removed = []
    tool.measurement_removed.append(removed.append)
    tool.set_mode(MeasureMode.POINT_POSITION)
    a = tool.add_point((0, 0, 0))
    b = tool.add_point((1, 0, 0))
    tool.remove_measurement(a.id)
    assert [m.id for m in tool.measurements] == [b.id]
    assert removed == [a.id]


def test_clear_all_measurements():
    tool = MeasurementTool()
    cleared = []
    tool.measurements_cleared.append(lambda: cleared.append(True))
    tool.set_mode(MeasureMode.POINT_POSITION)
    tool.add_point((0, 0, 0))
    tool.clear_all_measurements()
    assert tool.measurements == []
    assert tool.list_entries() == []
    assert cleared == [True]


def test_toggle_visibility_marks_hidden():
    tool = MeasurementTool()
    tool.set_mode(MeasureMode.DISTANCE)
    tool.add_point((0, 0, 0))
    m = tool.add_point((0, 0, 2))
    tool.toggle_measurement_visibility(m.id)
    assert m.visible is False
    assert tool.list_entries()[0][1].endswith(" (hidden)")
    tool.toggle_measurement_visibility(m.id)
    assert m.visible is True
    assert tool.list_entries()[0][1] == "📏 " + m.description


def test_list_text_uses_bullet_for_other_modes():
    m = Measurement(id=1, mode=MeasureMode.EDGE_LENGTH, points=[], description="edge")
    assert m.list_text() == "• edge"


def test_angle_with_degenerate_vector_is_finite():
    value = calculate_angle((0, 0, 0), (0, 0, 0), (1, 0, 0))
    assert math.isfinite(value)
    assert 0.0 <= value <= 180.0