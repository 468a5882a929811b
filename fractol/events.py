"""Keyboard and mouse handling that changes the view."""

from __future__ import annotations

import enum

from .fractal import FractalState

SHIFT_STEP = 0.1
ZOOM_FACTOR = 1.01


class Key(enum.IntEnum):
    """Key codes understood by the viewer."""

    ESCAPE = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    C = 99


class MouseButton(enum.IntEnum):
    """Mouse buttons understood by the viewer."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


class Action(enum.Enum):
    """What the viewer must do after an event."""

    REDRAW = "redraw"
    CLOSE = "close"


def handle_key(state: FractalState, key: int, extended: bool = False) -> Action:
    """Apply a key press to ``state``.

    Escape asks to close. With ``extended`` the arrow keys move the view and
    ``c`` adds one iteration.
    """
    if key == Key.ESCAPE:
        return Action.CLOSE
    if extended:
        if key == Key.LEFT:
            state.shift_x += SHIFT_STEP
        elif key == Key.RIGHT:
            state.shift_x -= SHIFT_STEP
        elif key == Key.UP:
            state.shift_y -= SHIFT_STEP
        elif key == Key.DOWN:
            state.shift_y += SHIFT_STEP
        elif key == Key.C:
            state.iterations += 1
    return Action.REDRAW


def handle_mouse(state: FractalState, button: int, x: int, y: int) -> Action:
    """Apply a mouse button to ``state``: the wheel changes the zoom.

    Scrolling up needs a non-zero ``x`` and scrolling down a non-zero ``y``.
    """
    if button == MouseButton.SCROLL_UP and x:
        state.zoom *= ZOOM_FACTOR
    elif button == MouseButton.SCROLL_DOWN and y:
        state.zoom /= ZOOM_FACTOR
    return Action.REDRAW