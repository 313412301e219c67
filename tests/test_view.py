import pytest

from fdfview.parsing import parse_map
from fdfview.view import (
    ISO_ANGLE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Bounds,
    ViewState,
    measure_bounds,
    project,
)


def _flat_grid(columns, rows, height=0):
    return parse_map([" ".join([str(height)] * columns)] * rows)


def test_reset_restores_initial_view():
    state = ViewState(center=False, scale=False, iso=True)
    state.reset()
    assert (state.center, state.scale, state.iso) == (True, True, False)
    assert ViewState().center is True and ViewState().scale is True


def test_zoom_round_trip():
    state = ViewState(zoom=1.0)
    state.zoom_in()
    assert state.zoom > 1.0
    state.zoom_out()
    assert state.zoom == pytest.approx(1.0)


@pytest.mark.parametrize("zoom", [0.2, 0.1])
def test_zoom_out_has_floor(zoom):
    state = ViewState(zoom=zoom)
    state.zoom_out()
    assert state.zoom == zoom


def test_depth_round_trip():
    state = ViewState(depth=0.3)
    state.depth_inc()
    assert state.depth == pytest.approx(0.3 + 0.08)
    state.depth_dec()
    assert state.depth == pytest.approx(0.3)


def test_horizontal_moves_cancel():
    state = ViewState(bounds=Bounds(dx=4, dy=2))
    state.move_right()
    once = state.x_move
    state.move_right()
    assert state.x_move == pytest.approx(2 * once)
    state.move_left()
    state.move_left()
    assert state.x_move == pytest.approx(0.0)


def test_vertical_moves_cancel():
    state = ViewState(bounds=Bounds(dx=3, dy=5))
    state.move_down()
    assert state.y_move > 0
    state.move_up()
    assert state.y_move == pytest.approx(0.0)


def test_step_grows_with_aspect():
    wide = ViewState(bounds=Bounds(dx=10, dy=1))
    narrow = ViewState(bounds=Bounds(dx=1, dy=10))
    wide.move_right()
    narrow.move_right()
    assert wide.x_move > narrow.x_move


def test_switch_iso_toggles():
    state = ViewState(center=False)
    state.switch_iso()
    assert state.iso is True
    assert state.center is True
    assert state.x_rot == ISO_ANGLE and state.y_rot == ISO_ANGLE
    state.switch_iso()
    assert state.iso is False


def test_center_requests():
    state = ViewState(center=False, scale=False)
    state.move_center()
    assert state.center is True and state.scale is False
    state = ViewState(center=False, scale=False)
    state.center_scale()
    assert state.center is True and state.scale is True


def test_measure_bounds_of_grid():
    columns, rows = 5, 3
    bounds = measure_bounds(_flat_grid(columns, rows))
    assert (bounds.x_min, bounds.x_max) == (0, columns - 1)
    assert (bounds.y_min, bounds.y_max) == (0, rows - 1)
    assert bounds.dx == columns - 1 and bounds.dy == rows - 1


def test_measure_bounds_single_point_spans_are_one():
    bounds = measure_bounds(_flat_grid(1, 1))
    assert bounds.dx == 1 and bounds.dy == 1


def test_measure_bounds_empty():
    with pytest.raises(ValueError):
        measure_bounds([])


def test_project_leaves_input_untouched():
    grid = parse_map(["0 5", "3 1"])
    before = [[(p.x, p.y, p.z) for p in row] for row in grid]
    project(grid, ViewState())
    assert [[(p.x, p.y, p.z) for p in row] for row in grid] == before


def test_project_centres_on_window():
    state = ViewState()
    result = project(_flat_grid(7, 4), state)
    bounds = measure_bounds(result)
    assert (bounds.x_min + bounds.x_max) / 2 == pytest.approx(WINDOW_WIDTH / 2)
    assert (bounds.y_min + bounds.y_max) / 2 == pytest.approx(WINDOW_HEIGHT / 2)
    assert state.bounds == bounds


def test_project_scales_wide_map_to_width():
    state = ViewState()
    project(_flat_grid(11, 2), state)
    assert state.depth == 0.3
    assert state.zoom * measure_bounds(_flat_grid(11, 2)).dx == pytest.approx(WINDOW_WIDTH - 100)


def test_project_applies_offsets_without_centering():
    grid = parse_map(["1 2", "3 4"])
    state = ViewState(zoom=1.0, depth=1.0, x_move=5.0, y_move=7.0, center=False, scale=False)
    result = project(grid, state)
    for original_row, row in zip(grid, result):
        for original, point in zip(original_row, row):
            assert point.x == original.x + 5.0
            assert point.y == original.y + 7.0
            assert point.z == original.z


def test_project_depth_scales_heights():
    grid = parse_map(["10 -20"])
    state = ViewState(zoom=1.0, depth=0.5, center=False, scale=False)
    result = project(grid, state)
    assert [p.z for p in result[0]] == [10 * 0.5, -20 * 0.5]


def test_iso_origin_maps_to_height():
    grid = parse_map(["6 0", "0 0"])
    state = ViewState(zoom=1.0, depth=1.0, center=False, scale=False)
    state.switch_iso()
    state.center = False
    result = project(grid, state)
    assert result[0][0].x == pytest.approx(0.0)
    assert result[0][0].y == pytest.approx(-6.0)


def test_iso_diagonal_shares_x():
    grid = _flat_grid(3, 3)
    state = ViewState(zoom=1.0, depth=1.0, center=False, scale=False)
    state.switch_iso()
    state.center = False
    result = project(grid, state)
    diagonal = [result[i][i].x for i in range(3)]
    assert diagonal == pytest.approx([diagonal[0]] * 3)