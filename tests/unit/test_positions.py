import numpy as np
import pytest

from nctrace.program.parser import Program, parse_lines, parse_string
from nctrace.program.positions import AxisState, PositionRow, PositionTracker, trace_to_array


def test_carry_forward_two_lines():
    rows = PositionTracker().track(parse_lines(["X1.0", "Y2.0"]))
    assert rows == [
        PositionRow(0, 1.0, None, None),
        PositionRow(1, 1.0, 2.0, None),
    ]


def test_repeated_axis_last_wins():
    rows = PositionTracker().track(parse_lines(["X5.0 X7.0"]))
    assert rows[0].x == 7.0


def test_unknown_axes_are_not_zero():
    rows = PositionTracker().track(parse_lines(["G90", "Z-1"]))
    assert rows[0] == PositionRow(0, None, None, None)
    assert rows[1].z == -1.0
    assert not rows[1].is_known("x")
    assert rows[1].is_known("Z")


def test_non_axis_codes_do_not_move():
    rows = PositionTracker().track(parse_lines(["X1 Y1 Z1", "I5 J6 K7 F100 R3"]))
    assert rows[1].as_tuple() == (1, 1.0, 1.0, 1.0)


def test_trace_length_and_known_axes_never_revert(sample_program_path):
    program = parse_string(sample_program_path.read_text())
    rows = PositionTracker().track(program)
    assert len(rows) == len(program)
    for axis in ("x", "y", "z"):
        seen = False
        for row in rows:
            if seen:
                assert row.is_known(axis)
            seen = seen or row.is_known(axis)


def test_rows_are_independent_snapshots():
    tracker = PositionTracker()
    rows = tracker.track(parse_lines(["X1", "X2", "X3"]))
    assert [row.x for row in rows] == [1.0, 2.0, 3.0]
    assert tracker.state == AxisState(3.0, None, None)


def test_track_resets_between_programs():
    tracker = PositionTracker()
    tracker.track(parse_lines(["X1 Y1 Z1"]))
    rows = tracker.track(parse_lines(["X2"]))
    assert rows == [PositionRow(0, 2.0, None, None)]


def test_iter_rows_continues_across_chunks():
    tracker = PositionTracker()
    program = parse_lines(["X1", "Y2", "Z3", "X4"])
    first = list(tracker.iter_rows(program.lines[:2]))
    second = list(tracker.iter_rows(program.lines[2:]))
    assert [r.index for r in first + second] == [0, 1, 2, 3]
    assert second[-1] == PositionRow(3, 4.0, 2.0, 3.0)


def test_explicit_seed():
    tracker = PositionTracker(seed=AxisState(0.0, 0.0, 50.0))
    rows = tracker.track(parse_lines(["X10", "Z5"]))
    assert rows[0] == PositionRow(0, 10.0, 0.0, 50.0)
    assert rows[1] == PositionRow(1, 10.0, 0.0, 5.0)


def test_seeded_from_first_line_matches_default():
    program = parse_lines(["X1 Z2", "Y3", "X4"])
    seeded = PositionTracker.seeded_from_first_line(program)
    assert seeded.seed == AxisState(1.0, None, 2.0)
    assert seeded.track(program) == PositionTracker().track(program)


def test_seeded_from_first_line_empty_program():
    tracker = PositionTracker.seeded_from_first_line(Program())
    assert tracker.track(Program()) == []


def test_trace_to_array_uses_nan_for_unknown():
    rows = PositionTracker().track(parse_lines(["X1.5", "Y-2"]))
    array = trace_to_array(rows)
    assert array.shape == (2, 4)
    np.testing.assert_array_equal(array[:, 0], [0.0, 1.0])
    assert array[0, 1] == pytest.approx(1.5)
    assert np.isnan(array[0, 2])
    assert np.isnan(array[:, 3]).all()
    assert array[1, 2] == pytest.approx(-2.0)


def test_trace_to_array_empty():
    assert trace_to_array([]).shape == (0, 4)


@pytest.mark.parametrize("axis", ["w", "a", ""])
def test_is_known_rejects_unknown_axis(axis):
    row = PositionRow(0, 1.0, None, None)
    with pytest.raises(ValueError, match="Unknown axis"):
        row.is_known(axis)
