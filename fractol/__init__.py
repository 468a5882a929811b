"""Interactive Mandelbrot, Julia and Tricorn fractal explorer, with small text, buffer and list helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]