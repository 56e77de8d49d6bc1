import pytest

from tourkit.tree_layout import Rect
from tourkit.viewport import CanvasView, View

SIZE = (800.0, 600.0)
ORIGIN = (0.0, 0.0)


def test_initial_content_view():
    view = View((400.0, 300.0), (400.0, 300.0), (10.0, 20.0))
    assert view.content_center == (10.0 + 200.0, 20.0 + 150.0)
    assert view.content_size == (400.0, 300.0)
    assert view.ui_center == view.content_center


def test_effective_zoom_matches_zoom_when_sizes_equal():
    view = View(SIZE, SIZE, ORIGIN)
    assert view.effective_zoom() == pytest.approx(view.zoom)


def test_effective_zoom_scales_with_window():
    view = View((400.0, 300.0), (800.0, 600.0))
    assert view.effective_zoom() == pytest.approx(view.zoom * 400.0 / 800.0)


def test_max_offset_zero_when_everything_visible():
    view = View(SIZE, SIZE, ORIGIN)
    assert view.max_offset() == (0.0, 0.0)


def test_max_offset_non_negative_after_zoom_in():
    view = View(SIZE, SIZE, ORIGIN)
    view.set_zoom(1, (400, 300))
    x, y = view.max_offset()
    assert x >= 0.0 and y >= 0.0
    assert x > 0.0


def test_set_zoom_in_and_out():
    view = View(SIZE, SIZE, ORIGIN)
    view.set_zoom(1, (0, 0))
    assert view.zoom == pytest.approx(1.1)
    view.set_zoom(-1, (0, 0))
    assert view.zoom == pytest.approx(1.1 * 0.9)


def test_set_zoom_respects_limits():
    view = View(SIZE, SIZE, ORIGIN, max_zoom=1.05)
    view.set_zoom(1, (100, 100))
    assert view.zoom == 1.0
    low = View(SIZE, SIZE, ORIGIN, min_zoom=0.95)
    low.set_zoom(-1, (100, 100))
    assert low.zoom == 1.0


def test_set_zoom_updates_content_size():
    view = View(SIZE, SIZE, ORIGIN)
    view.set_zoom(1, (200, 150))
    zoom = view.effective_zoom()
    assert view.content_size[0] == pytest.approx(view.view_size[0] / zoom)
    assert view.content_size[1] == pytest.approx(view.view_size[1] / zoom)


def test_map_pixel_to_coords_center_and_corner():
    view = View(SIZE, SIZE, ORIGIN)
    assert view.map_pixel_to_coords((400.0, 300.0)) == pytest.approx(view.content_center)
    cx, cy = view.content_center
    w, h = view.content_size
    assert view.map_pixel_to_coords((0.0, 0.0)) == pytest.approx((cx - w / 2, cy - h / 2))


def test_pan_moves_offset_opposite_to_drag():
    view = View(SIZE, SIZE, ORIGIN)
    view.pan((10.0, -4.0))
    assert view.view_offset == pytest.approx((-10.0, 4.0))
    assert view.content_center == pytest.approx((400.0 - 10.0, 300.0 + 4.0))


def test_pan_round_trip():
    view = View(SIZE, SIZE, ORIGIN)
    before = view.content_center
    view.pan((25.0, 13.0))
    view.pan((-25.0, -13.0))
    assert view.view_offset == pytest.approx((0.0, 0.0))
    assert view.content_center == pytest.approx(before)


def test_canvas_pan_matches_view_pan():
    plain = View(SIZE, SIZE, ORIGIN)
    canvas = CanvasView(SIZE, SIZE, ORIGIN)
    plain.pan((7.0, 3.0))
    canvas.pan((7.0, 3.0))
    assert canvas.view_offset == pytest.approx(plain.view_offset)
    assert canvas.content_center == pytest.approx(plain.content_center)


def test_fit_content_ignores_empty_bounds():
    view = View(SIZE, SIZE, ORIGIN)
    view.fit_content(Rect(0.0, 0.0, 0.0, 100.0), 50.0)
    assert view.zoom == 1.0
    assert view.view_offset == (0.0, 0.0)


def test_fit_content_centres_bounds():
    view = View(SIZE, SIZE, ORIGIN)
    bounds = Rect(0.0, 0.0, 700.0, 500.0)
    view.fit_content(bounds, 50.0)
    assert view.zoom == pytest.approx(1.0)
    assert view.content_center == pytest.approx(bounds.center)


def test_fit_content_clamps_to_max_zoom():
    view = View(SIZE, SIZE, ORIGIN, max_zoom=3.0)
    view.fit_content(Rect(10.0, 10.0, 1.0, 1.0), 0.0)
    assert view.zoom == 3.0


def test_fit_content_clamps_to_min_zoom():
    view = View(SIZE, SIZE, ORIGIN, min_zoom=0.5)
    view.fit_content(Rect(0.0, 0.0, 100000.0, 100000.0), 0.0)
    assert view.zoom == 0.5


def test_resize_updates_ui_view():
    view = View(SIZE, SIZE, ORIGIN)
    view.resize((1000.0, 500.0))
    assert view.ui_size == (1000.0, 500.0)
    assert view.ui_center == (500.0, 250.0)
    zoom = view.effective_zoom()
    assert view.content_size == pytest.approx((1000.0 / zoom, 500.0 / zoom))