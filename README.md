# fractol

A small interactive fractal explorer. It draws the Mandelbrot set, a Julia
set of your choice, or the Tricorn in a 1000×1000 window. Points that escape
are shaded by how quickly they escape; points that stay bounded are white.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

Mandelbrot set:

```
fractol Mandelbrot
```

Julia set for the constant `x + y·i`:

```
fractol Julia -0.8 0.156
```

Both coordinates must be plain decimals: digits and minus signs, with a `.`
allowed only between two digits. A fractal name may be abbreviated to any
leading part of it, so `fractol Mandel` works too. Anything else prints a
usage message to standard error and exits with status 1.

Tricorn:

```
fractol-bonus Tricorn
```

If the window cannot be opened, the command prints `error` and exits with
status 1.

## Controls

| Input                 | `fractol`    | `fractol-bonus`          |
|-----------------------|--------------|--------------------------|
| Mouse wheel up        | zoom out     | zoom out                 |
| Mouse wheel down      | zoom in      | zoom in                  |
| Arrow keys            | —            | move the view by 0.1     |
| `c`                   | —            | one more iteration       |
| Escape / close window | quit         | quit                     |

Each wheel step changes the zoom by a factor of 1.01. Keys act when they are
released. The view starts with 37 iterations and an escape threshold of 4 for
`|z|²`.

## Using it as a library

The rendering core is in `fractol.fractal`:

```python
from fractol.fractal import FractalKind, FractalState, render

state = FractalState(FractalKind.MANDELBROT)
pixels = render(state, 200, 200)  # (200, 200) numpy array of 0xRRGGBB values
```

`FractalState.point(x, y)` gives the complex number shown at a pixel and
`FractalState.color_at(x, y)` the colour of a single pixel.
`mandelbrot_step` and `tricorn_step` are the single iterations, and `scale`
is the linear mapping from pixel to plane coordinates.

`fractol.events.handle_key` and `fractol.events.handle_mouse` apply input to a
state and return an `Action` (`REDRAW` or `CLOSE`). `fractol.args.parse_args`
and `fractol.args.parse_bonus_args` check a command line in the same way the
two commands do and raise `UsageError` when it is not valid.
`fractol.app.Viewer` is the pygame window that ties these together.

The package also carries small helper modules: `fractol.chars` (ASCII
classification and case conversion), `fractol.numbers` (`atoi`, `itoa`),
`fractol.output` (writing to a text stream), `fractol.strings` (searching,
slicing, trimming and splitting text), `fractol.memory` (byte-buffer
operations) and `fractol.lists` (a singly linked `LinkedList` of `Node`s).

## What it does not do

There is no colour palette choice, no zooming towards the mouse pointer and
no saving of images; the view can only be zoomed about its centre and, in
`fractol-bonus`, shifted with the arrow keys.