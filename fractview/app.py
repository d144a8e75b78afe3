"""Command line entry point and interactive viewer window."""

from __future__ import annotations

import os
import sys

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from fractview.canvas import Canvas  # noqa: E402
from fractview.fractals import FractalKind, FractalParams  # noqa: E402

USAGE = "Usage: fractview [mandelbrot/julia] (if julia:[power] [c])"
MOUSE_SCROLL_UP = 4
MOUSE_SCROLL_DOWN = 5
ZOOM_FACTOR = 1.2


class UsageError(Exception):
    """The command line arguments were not understood."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def parse_args(argv) -> FractalParams:
    """Turn command line arguments (without the program name) into parameters."""
    args = list(argv)
    if not args:
        raise UsageError()
    try:
        kind = FractalKind(args[0])
    except ValueError:
        raise UsageError() from None
    if kind is FractalKind.MANDELBROT:
        return FractalParams(kind)
    if len(args) != 3:
        raise UsageError()
    try:
        power = float(args[1])
        c = float(args[2])
    except ValueError:
        raise UsageError() from None
    return FractalParams(kind, power=power, c=c)


class Viewer:
    """Two canvases drawn in turn: one shown, one receiving the next view."""

    def __init__(self, params: FractalParams, width: int = 1920, height: int = 1080) -> None:
        self.params = params
        self.current = Canvas(width, height, -0.75, 0.0, 1.0)
        self.other = Canvas(width, height, -0.75, 0.0, 1.0)

    def swap(self) -> None:
        """Exchange the shown canvas and the spare one."""
        self.current, self.other = self.other, self.current

    def zoom(self, button: int, x: int, y: int) -> Canvas:
        """Recentre on the clicked pixel, zooming for wheel buttons, and redraw."""
        factor = 1.0
        if button == MOUSE_SCROLL_UP:
            factor *= ZOOM_FACTOR
        elif button == MOUSE_SCROLL_DOWN:
            factor /= ZOOM_FACTOR
        self.other.recentre(
            self.current.x_coord(x),
            self.current.y_coord(y),
            self.current.scale / factor,
        )
        self.other.render(self.params)
        self.swap()
        return self.current

    def handle_key(self, key: int) -> bool:
        """Return True when the key asks the viewer to close."""
        return key == pygame.K_ESCAPE

    def _show(self, screen) -> None:
        pixels = self.current.pixels.T
        rgb = np.stack(((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1)
        pygame.surfarray.blit_array(screen, rgb.astype(np.uint8))
        pygame.display.flip()

    def run(self) -> None:
        """Open the window and handle events until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.current.width, self.current.height))
            pygame.display.set_caption("fractview")
            self.current.render(self.params)
            self._show(screen)
            running = True
            while running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = not self.handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.zoom(event.button, *event.pos)
                    self._show(screen)
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Parse arguments and run the viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        params = parse_args(args)
    except UsageError as error:
        print(error)
        return 1
    Viewer(params).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())