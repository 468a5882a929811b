"""The interactive viewer window and the command entry points."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import numpy as np
import pygame

from .args import UsageError, parse_args, parse_bonus_args
from .events import Action, Key, handle_key, handle_mouse
from .fractal import FractalState, render

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_c: Key.C,
}


def _to_rgb(image: np.ndarray) -> np.ndarray:
    """Turn a ``(height, width)`` array of packed colours into ``(width, height, 3)`` bytes."""
    channels = np.stack(
        [(image >> 16) & 0xFF, (image >> 8) & 0xFF, image & 0xFF], axis=-1
    ).astype(np.uint8)
    return channels.transpose(1, 0, 2)


class Viewer:
    """Shows a fractal and reacts to keyboard, mouse and window events."""

    def __init__(
        self,
        state: FractalState,
        extended: bool = False,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        self.state = state
        self.extended = extended
        self.surface = surface
        self.image: Optional[np.ndarray] = None
        self.running = False

    def redraw(self) -> np.ndarray:
        """Render the current state and show it on the surface, if there is one."""
        self.image = render(self.state)
        if self.surface is not None:
            pygame.surfarray.blit_array(self.surface, _to_rgb(self.image))
            if pygame.display.get_init() and self.surface is pygame.display.get_surface():
                pygame.display.flip()
        return self.image

    def dispatch(self, event: pygame.event.Event) -> Optional[Action]:
        """Handle one event; returns what was done, or None if it was ignored."""
        if event.type == pygame.QUIT:
            action = Action.CLOSE
        elif event.type == pygame.KEYUP:
            action = handle_key(self.state, _KEYMAP.get(event.key, event.key), self.extended)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            action = handle_mouse(self.state, event.button, x, y)
        else:
            return None
        if action is Action.CLOSE:
            self.running = False
        else:
            self.redraw()
        return action

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode((self.state.width, self.state.height))
            pygame.display.set_caption(self.state.title)
            self.redraw()
            self.running = True
            while self.running:
                self.dispatch(pygame.event.wait())
        finally:
            self.surface = None
            pygame.quit()


def _start(state: FractalState, extended: bool) -> int:
    try:
        Viewer(state, extended=extended).run()
    except pygame.error:
        sys.stderr.write("error\n")
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the Mandelbrot or a Julia set named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        state = parse_args(args)
    except UsageError as error:
        sys.stderr.write(error.usage)
        return 1
    return _start(state, extended=False)


def bonus_main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the Tricorn, with arrow keys and ``c`` enabled."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        state = parse_bonus_args(args)
    except UsageError as error:
        sys.stderr.write(error.usage)
        return 1
    return _start(state, extended=True)