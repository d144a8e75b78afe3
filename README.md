# fractview

A small interactive viewer for the Mandelbrot set and for power Julia sets.
Every point outside the set gets a smooth colour, so there are no visible
bands between iteration counts. Clicking recentres the view, and the mouse
wheel zooms in and out around the cursor.

## Installation

```
pip install .
```

## Usage

```
fractview mandelbrot
fractview julia <power> <c>
```

- `mandelbrot` draws the Mandelbrot set.
- `julia` draws the set for `z -> z**power + c`, starting from each pixel's
  point. The same real value `c` is added to both the real part and the
  imaginary part. Both `power` and `c` are read as floating-point numbers.
  For example:

```
fractview julia 2 -0.4
```

The window is 1920 x 1080 pixels. The view starts centred on (-0.75, 0) at
scale 1. That covers real parts from -2.5 to 1.0 and imaginary parts from
-1 to 1.

If the arguments are missing or not understood, the program prints a usage
line and exits with status 1.

### Controls

| Input               | Effect                                                  |
|---------------------|---------------------------------------------------------|
| Scroll wheel up     | Recentre on the cursor and zoom in by a factor of 1.2   |
| Scroll wheel down   | Recentre on the cursor and zoom out by a factor of 1.2  |
| Any other click     | Recentre on the cursor without changing the zoom        |
| Escape              | Quit                                                    |
| Closing the window  | Quit                                                    |

Each zoom redraws the whole image. That can take a moment at full size.

## Library use

You can use the rendering code without opening a window:

```python
from fractview.canvas import Canvas, colour_for
from fractview.fractals import FractalKind, FractalParams, mandelbrot, julia

canvas = Canvas(320, 180)              # defaults: centre (-0.75, 0), scale 1.0
canvas.recentre(-0.75, 0.0, 1.0)
canvas.render(FractalParams(FractalKind.MANDELBROT))
print(hex(canvas.pixel(0, 0)))         # 0xRRGGBB colour of the top-left pixel

params = FractalParams(FractalKind.JULIA, power=2.0, c=-0.4)
value = params.evaluate(0.1, 0.2)
```

- `mandelbrot(x0, y0)` and `julia(x0, y0, power, c)` return the smoothed
  escape value. They return `0.0` for points that do not escape within
  1000 iterations, and for points in the Mandelbrot set's main cardioid and
  period-2 bulb. A single point gives a float. NumPy arrays are broadcast
  together and give an array of that shape.
- `colour_for(iterations)` maps escape values to `0xRRGGBB` integers. Values
  below 0.5 are black.
- `Canvas` holds the pixels as a `(height, width)` NumPy array of `uint32` in
  `canvas.pixels`. `x_coord` and `y_coord` map pixel positions to the plane.
  `put_pixel` and `pixel` set and read single pixels, and raise `IndexError`
  outside the canvas.
- `fractview.app.Viewer(params, width, height)` keeps two canvases. Its
  `zoom(button, x, y)` redraws into the spare canvas and swaps it in. Its
  `run()` opens the pygame window.
- `fractview.app.parse_args(argv)` turns arguments into `FractalParams`. It
  raises `UsageError` when they are wrong.

## What it does not do

The viewer only draws to the screen. It cannot save images to a file. It has
no keyboard panning, and it offers no way to change the iteration limit or
the colour palette.

## Tests

```
pip install .[test]
pytest
```