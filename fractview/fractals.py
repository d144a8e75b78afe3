"""Escape-time fractal functions with smooth iteration counts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

MAX_ITER = 1000
BAILOUT = 512
BAILOUT2 = 262144


class FractalKind(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def _flatten(x0, y0):
    xs, ys = np.broadcast_arrays(np.asarray(x0, dtype=float), np.asarray(y0, dtype=float))
    return xs.shape, xs.ravel().astype(float), ys.ravel().astype(float)


def _shaped(result: np.ndarray, shape: tuple):
    if shape == ():
        return float(result[0])
    return result.reshape(shape)


def mandelbrot(x0, y0):
    """Smooth escape count of the Mandelbrot set at ``x0 + i*y0``.

    Points inside the set give 0.0. Scalars give a float; arrays are
    broadcast together and give an array of that shape.
    """
    shape, cx, cy = _flatten(x0, y0)
    result = np.zeros(cx.size)
    with np.errstate(all="ignore"):
        z2 = cx * cx + cy * cy
        cardioid = 256.0 * z2 * z2 - 96.0 * z2 + 32.0 * cx - 3.0 < 0.0
        bulb = 16.0 * (z2 + 2.0 * cx + 1.0) - 1.0 < 0.0
        idx = np.flatnonzero(~(cardioid | bulb))
        a, b = cx[idx], cy[idx]
        x = np.zeros(idx.size)
        y = np.zeros(idx.size)
        for step in range(MAX_ITER + 1):
            mag = x * x + y * y
            escaped = ~(mag <= BAILOUT2)
            if escaped.any():
                result[idx[escaped]] = (step - 1) - np.log2(np.log2(mag[escaped])) + 4.0
                keep = ~escaped
                idx, x, y, a, b = idx[keep], x[keep], y[keep], a[keep], b[keep]
            if step == MAX_ITER or idx.size == 0:
                break
            x, y = x * x - y * y + a, (x + x) * y + b
    return _shaped(result, shape)


def julia(x0, y0, power, c):
    """Smooth escape count of ``z -> z**power + c*(1+i)`` starting at ``x0 + i*y0``.

    Points that never escape give 0.0. Scalars give a float; arrays are
    broadcast together and give an array of that shape.
    """
    shape, x, y = _flatten(x0, y0)
    power = float(power)
    c = float(c)
    result = np.zeros(x.size)
    idx = np.arange(x.size)
    with np.errstate(all="ignore"):
        log_power = np.log(power)
        r = np.hypot(x, y)
        for step in range(MAX_ITER + 1):
            escaped = ~(r * r <= BAILOUT2)
            if escaped.any():
                xe, ye = x[escaped], y[escaped]
                mag = xe * xe + ye * ye
                result[idx[escaped]] = (step - 1) - np.log(
                    np.log(mag) / np.log(BAILOUT)
                ) / log_power
                keep = ~escaped
                idx, x, y = idx[keep], x[keep], y[keep]
            if step == MAX_ITER or idx.size == 0:
                break
            r = np.hypot(x, y)
            theta = np.arctan2(y, x)
            radius = np.power(r, power)
            x, y = (
                radius * np.cos(power * theta) + c,
                radius * np.sin(power * theta) + c,
            )
    return _shaped(result, shape)


@dataclass(frozen=True)
class FractalParams:
    """Which fractal to draw and, for Julia sets, its exponent and constant."""

    kind: FractalKind = FractalKind.MANDELBROT
    power: float = 2.0
    c: float = 0.0

    def evaluate(self, x0, y0):
        """Smooth escape count of the chosen fractal at the given point(s)."""
        if self.kind is FractalKind.JULIA:
            return julia(x0, y0, self.power, self.c)
        return mandelbrot(x0, y0)