"""A pixel canvas that maps screen positions onto the complex plane."""

from __future__ import annotations

import numpy as np

from fractview.fractals import FractalParams


def colour_for(iterations):
    """Map a smooth escape count to a 0xRRGGBB colour; counts below 0.5 are black.

    Scalars give an int; arrays give an array of the same shape.
    """
    values = np.asarray(iterations, dtype=float)
    visible = np.isfinite(values) & (values >= 0.5)
    safe = np.where(visible, values, 0.0)
    base = 3.0 + safe * 0.15
    red = np.trunc((0.5 + 0.5 * np.cos(base)) * 255).astype(np.int64)
    green = np.trunc((0.5 + 0.5 * np.cos(base + 0.6)) * 255).astype(np.int64)
    blue = np.trunc((0.5 + 0.5 * np.cos(base + 1.0)) * 255).astype(np.int64)
    colours = np.where(visible, (red << 16) + (green << 8) + blue, 0)
    if colours.shape == ():
        return int(colours)
    return colours


class Canvas:
    """An image of ``width`` x ``height`` pixels viewing part of the plane."""

    def __init__(
        self,
        width: int = 1920,
        height: int = 1080,
        center_x: float = -0.75,
        center_y: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self.center_x = center_x
        self.center_y = center_y
        self.scale = scale
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def x_coord(self, px):
        """Real part of the point under pixel column ``px``."""
        return (px / self.width * 3.5 - 1.75) * self.scale + self.center_x

    def y_coord(self, py):
        """Imaginary part of the point under pixel row ``py``."""
        return (py / self.height * 2 - 1) * self.scale + self.center_y

    def recentre(self, center_x: float, center_y: float, scale: float) -> None:
        """Move the view to a new centre and scale."""
        self.center_x = center_x
        self.center_y = center_y
        self.scale = scale

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def put_pixel(self, x: int, y: int, colour: int) -> None:
        """Set the colour of one pixel."""
        self._check(x, y)
        self.pixels[y, x] = colour & 0xFFFFFFFF

    def pixel(self, x: int, y: int) -> int:
        """Colour of one pixel."""
        self._check(x, y)
        return int(self.pixels[y, x])

    def render(self, params: FractalParams) -> None:
        """Draw the fractal over every pixel of the canvas."""
        xs = self.x_coord(np.arange(self.width))[None, :]
        ys = self.y_coord(np.arange(self.height))[:, None]
        self.pixels[:, :] = colour_for(params.evaluate(xs, ys))