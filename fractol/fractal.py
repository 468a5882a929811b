"""Escape-time fractals: the iteration, the viewport mapping and rendering."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

WIDTH = 1000
HEIGHT = 1000

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

DEFAULT_ESCAPE_VALUE = 4.0
DEFAULT_ITERATIONS = 37


class FractalKind(enum.Enum):
    """The fractals that can be drawn; the value is the display name."""

    MANDELBROT = "Mandelbrot"
    JULIA = "Julia"
    TRICORN = "Tricorn"


def scale(value, new_min, new_max, old_max):
    """Map ``value`` linearly from ``[0, old_max]`` onto ``[new_min, new_max]``.

    Works on plain numbers and on numpy arrays alike.
    """
    return (new_max - new_min) * value / old_max + new_min


def mandelbrot_step(z: complex, c: complex) -> complex:
    """One iteration of ``z * z + c``."""
    return complex(
        z.real * z.real - z.imag * z.imag + c.real,
        2 * z.real * z.imag + c.imag,
    )


def tricorn_step(z: complex, c: complex) -> complex:
    """One iteration of ``conj(z) * conj(z) + c``."""
    return complex(
        z.real * z.real - z.imag * z.imag + c.real,
        -2 * z.real * z.imag + c.imag,
    )


def _escape_color(iteration: int, iterations: int) -> int:
    return int(scale(iteration, BLACK, WHITE, iterations))


@dataclass
class FractalState:
    """What to draw and how the viewport is placed."""

    kind: FractalKind = FractalKind.MANDELBROT
    julia: complex = 0j
    escape_value: float = DEFAULT_ESCAPE_VALUE
    iterations: int = DEFAULT_ITERATIONS
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    width: int = WIDTH
    height: int = HEIGHT

    @property
    def title(self) -> str:
        """The name shown for this fractal."""
        return self.kind.value

    @property
    def _step(self) -> Callable[[complex, complex], complex]:
        return tricorn_step if self.kind is FractalKind.TRICORN else mandelbrot_step

    def point(self, x: int, y: int) -> complex:
        """The point of the complex plane shown at pixel ``(x, y)``."""
        real = scale(x, -2, 2, self.width) * self.zoom + self.shift_x
        imag = scale(y, 2, -2, self.height) * self.zoom + self.shift_y
        return complex(real, imag)

    def color_at(self, x: int, y: int) -> int:
        """The RGB colour of pixel ``(x, y)``."""
        z = self.point(x, y)
        c = self.julia if self.kind is FractalKind.JULIA else z
        step = self._step
        for iteration in range(self.iterations):
            z = step(z, c)
            if z.real * z.real + z.imag * z.imag > self.escape_value:
                return _escape_color(iteration, self.iterations)
        return WHITE


def render(
    state: FractalState,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> np.ndarray:
    """Render every pixel into a ``(height, width)`` array of RGB colours.

    ``width`` and ``height`` default to the state's own size.
    """
    width = state.width if width is None else width
    height = state.height if height is None else height
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    state = dataclasses.replace(state, width=width, height=height)

    xs = scale(np.arange(width, dtype=np.float64), -2, 2, width) * state.zoom + state.shift_x
    ys = scale(np.arange(height, dtype=np.float64), 2, -2, height) * state.zoom + state.shift_y
    zr, zi = np.meshgrid(xs, ys)
    if state.kind is FractalKind.JULIA:
        cr, ci = state.julia.real, state.julia.imag
    else:
        cr, ci = zr.copy(), zi.copy()
    imag_factor = -2 if state.kind is FractalKind.TRICORN else 2

    image = np.full((height, width), WHITE, dtype=np.uint32)
    pending = np.ones((height, width), dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for iteration in range(state.iterations):
            zr, zi = zr * zr - zi * zi + cr, imag_factor * zr * zi + ci
            escaped = pending & (zr * zr + zi * zi > state.escape_value)
            image[escaped] = _escape_color(iteration, state.iterations)
            pending &= ~escaped
            if not pending.any():
                break
    return image