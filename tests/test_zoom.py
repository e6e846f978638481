import pytest

from micaview.zoom import ZOOM_MAX, ZOOM_MIN, ZOOM_STEP, ZoomState


def test_single_step_matches_documented_step():
    state = ZoomState(10, 10)
    state.zoom_in()
    assert ZOOM_STEP == 0.1
    assert state.zoom == pytest.approx(1.1)


def test_new_state_is_one_to_one():
    state = ZoomState(64, 32)
    assert state.zoom == 1.0
    assert state.scaled_size() == (64.0, 32.0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ZoomState(-1, 10)


def test_zoom_in_then_out_round_trips():
    state = ZoomState(10, 10)
    state.zoom_in()
    assert state.zoom > 1.0
    state.zoom_out()
    assert state.zoom == pytest.approx(1.0)


def test_zoom_in_clamps_at_max():
    state = ZoomState(10, 10)
    for _ in range(500):
        state.zoom_in()
    assert state.zoom == ZOOM_MAX
    assert ZOOM_MAX == 16.0


def test_zoom_out_clamps_at_min():
    state = ZoomState(10, 10)
    for _ in range(500):
        state.zoom_out()
    assert state.zoom == ZOOM_MIN
    assert ZOOM_MIN == 0.05


def test_reset_restores_one():
    state = ZoomState(10, 10)
    state.zoom_in()
    state.zoom_in()
    assert state.reset() == 1.0
    assert state.zoom == 1.0


@pytest.mark.parametrize(
    "size,avail",
    [((200, 100), (400.0, 400.0)), ((300, 600), (150.0, 900.0)), ((50, 50), (80.0, 30.0))],
)
def test_fit_makes_image_fit_and_touch_one_edge(size, avail):
    state = ZoomState(*size)
    state.fit(*avail)
    w, h = state.scaled_size()
    assert w <= avail[0] + 1e-9
    assert h <= avail[1] + 1e-9
    assert w == pytest.approx(avail[0]) or h == pytest.approx(avail[1])


def test_fit_with_empty_area_keeps_zoom():
    state = ZoomState(100, 100)
    state.zoom_in()
    before = state.zoom
    assert state.fit(0.0, 200.0) == before
    assert state.fit(200.0, -5.0) == before


def test_fit_with_empty_image_keeps_zoom():
    state = ZoomState(0, 100)
    assert state.fit(500.0, 500.0) == 1.0


def test_fit_clamps_to_limits():
    tiny = ZoomState(100000, 100000)
    tiny.fit(10.0, 10.0)
    assert tiny.zoom == ZOOM_MIN
    huge = ZoomState(1, 1)
    huge.fit(10000.0, 10000.0)
    assert huge.zoom == ZOOM_MAX


def test_wheel_zoom_direction_and_clamp():
    state = ZoomState(10, 10)
    state.wheel_zoom(1.0)
    up = state.zoom
    assert up > 1.0
    state.wheel_zoom(-1.0)
    assert state.zoom == pytest.approx(1.0)
    state.wheel_zoom(10000.0)
    assert state.zoom == ZOOM_MAX
    state.wheel_zoom(-10000.0)
    assert state.zoom == ZOOM_MIN


def test_initial_size_capped_for_large_image():
    assert ZoomState(5000, 5000).initial_size() == (820.0, 660.0)


def test_initial_size_adds_margins_for_small_image():
    state = ZoomState(100, 50)
    w, h = state.initial_size()
    assert w - state.width == 16
    assert h - state.height == 80


def test_image_offset_centres_smaller_image():
    state = ZoomState(100, 60)
    region = (500.0, 300.0)
    ox, oy = state.image_offset(*region)
    w, h = state.scaled_size()
    assert ox * 2 + w == pytest.approx(region[0])
    assert oy * 2 + h == pytest.approx(region[1])


def test_image_offset_zero_when_image_larger():
    state = ZoomState(1000, 1000)
    assert state.image_offset(200.0, 200.0) == (0.0, 0.0)


def test_image_offset_per_axis():
    state = ZoomState(1000, 10)
    ox, oy = state.image_offset(200.0, 200.0)
    assert ox == 0.0
    assert oy > 0.0


def test_pixel_at_origin_is_zero():
    state = ZoomState(40, 30)
    assert state.pixel_at(12.0, 7.0, 12.0, 7.0) == (0, 0)


def test_pixel_at_respects_zoom():
    state = ZoomState(40, 30)
    state.wheel_zoom(10.0)  # zoom 2.0
    assert state.zoom == pytest.approx(2.0)
    assert state.pixel_at(10.0 + 2 * 5 + 1, 20.0 + 2 * 7 + 1, 10.0, 20.0) == (5, 7)


def test_pixel_at_last_pixel():
    state = ZoomState(40, 30)
    w, h = state.scaled_size()
    assert state.pixel_at(w - 0.5, h - 0.5, 0.0, 0.0) == (state.width - 1, state.height - 1)


def test_pixel_at_empty_image_raises():
    with pytest.raises(ValueError):
        ZoomState(0, 0).pixel_at(1.0, 1.0, 0.0, 0.0)