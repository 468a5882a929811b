import pytest

from fractol.events import Action, Key, MouseButton, handle_key, handle_mouse
from fractol.fractal import FractalState


def test_raw_key_codes_are_understood():
    state = FractalState()
    assert handle_key(state, 65307) is Action.CLOSE
    handle_key(state, 65361, extended=True)
    assert state.shift_x == 0.1
    before = state.iterations
    handle_key(state, 99, extended=True)
    assert state.iterations == before + 1
    handle_mouse(state, 4, 1, 1)
    assert state.zoom == 1.01


def test_escape_closes_without_change():
    state = FractalState()
    assert handle_key(state, Key.ESCAPE) is Action.CLOSE
    assert state == FractalState()


def test_escape_closes_in_extended_mode():
    assert handle_key(FractalState(), 65307, extended=True) is Action.CLOSE


@pytest.mark.parametrize("key", [Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, Key.C, 97])
def test_plain_mode_ignores_navigation(key):
    state = FractalState()
    assert handle_key(state, key) is Action.REDRAW
    assert state == FractalState()


def test_horizontal_arrows():
    state = FractalState()
    handle_key(state, Key.LEFT, extended=True)
    assert state.shift_x == 0.1
    handle_key(state, Key.RIGHT, extended=True)
    handle_key(state, Key.RIGHT, extended=True)
    assert state.shift_x == pytest.approx(-0.1)
    assert state.shift_y == 0.0


def test_vertical_arrows():
    state = FractalState()
    handle_key(state, Key.UP, extended=True)
    assert state.shift_y == -0.1
    handle_key(state, Key.DOWN, extended=True)
    assert state.shift_y == pytest.approx(0.0)


def test_c_adds_iteration():
    state = FractalState()
    before = state.iterations
    assert handle_key(state, Key.C, extended=True) is Action.REDRAW
    assert state.iterations == before + 1


def test_unknown_extended_key_redraws_unchanged():
    state = FractalState()
    assert handle_key(state, 120, extended=True) is Action.REDRAW
    assert state == FractalState()


def test_scroll_up_zooms():
    state = FractalState()
    assert handle_mouse(state, MouseButton.SCROLL_UP, 10, 10) is Action.REDRAW
    assert state.zoom == 1.01


def test_scroll_up_then_down_restores_zoom():
    state = FractalState()
    handle_mouse(state, MouseButton.SCROLL_UP, 5, 5)
    handle_mouse(state, MouseButton.SCROLL_DOWN, 5, 5)
    assert state.zoom == pytest.approx(1.0)


def test_scroll_down_shrinks_zoom():
    state = FractalState()
    handle_mouse(state, MouseButton.SCROLL_DOWN, 3, 7)
    assert state.zoom < 1.0


def test_scroll_at_zero_coordinate_does_nothing():
    state = FractalState()
    handle_mouse(state, MouseButton.SCROLL_UP, 0, 50)
    handle_mouse(state, MouseButton.SCROLL_DOWN, 50, 0)
    assert state.zoom == 1.0


def test_other_buttons_leave_zoom():
    state = FractalState()
    assert handle_mouse(state, 1, 20, 20) is Action.REDRAW
    assert state.zoom == 1.0