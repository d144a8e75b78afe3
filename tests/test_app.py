import pygame
import pytest

from fractview.app import USAGE, UsageError, Viewer, main, parse_args
from fractview.fractals import FractalKind, FractalParams


def test_parse_mandelbrot():
    params = parse_args(["mandelbrot"])
    assert params.kind is FractalKind.MANDELBROT


def test_parse_mandelbrot_ignores_extra_arguments():
    assert parse_args(["mandelbrot", "3", "4"]).kind is FractalKind.MANDELBROT


def test_parse_julia():
    params = parse_args(["julia", "2", "0.3"])
    assert params == FractalParams(FractalKind.JULIA, power=2.0, c=0.3)


@pytest.mark.parametrize(
    "argv",
    [[], ["julia"], ["julia", "2"], ["julia", "2", "0.3", "1"], ["burning"], ["julia", "x", "1"]],
)
def test_parse_rejects(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert str(info.value) == USAGE


def test_main_prints_usage_on_error(capsys):
    assert main([]) == 1
    assert USAGE in capsys.readouterr().out


def _viewer():
    return Viewer(FractalParams(), width=14, height=8)


def test_initial_view():
    viewer = _viewer()
    assert viewer.current.center_x == -0.75
    assert viewer.current.center_y == 0.0
    assert viewer.current.scale == 1.0


def test_swap_exchanges_canvases():
    viewer = _viewer()
    first, second = viewer.current, viewer.other
    viewer.swap()
    assert viewer.current is second
    assert viewer.other is first


def test_zoom_in_recentres_and_swaps():
    viewer = _viewer()
    shown, spare = viewer.current, viewer.other
    target_x, target_y = shown.x_coord(3), shown.y_coord(5)
    result = viewer.zoom(4, 3, 5)
    assert result is spare
    assert viewer.current is spare
    assert viewer.other is shown
    assert spare.center_x == target_x
    assert spare.center_y == target_y
    assert spare.scale == pytest.approx(1.0 / 1.2)


def test_zoom_out_scales_up():
    viewer = _viewer()
    viewer.zoom(5, 7, 4)
    assert viewer.current.scale == pytest.approx(1.2)


def test_other_button_only_recentres():
    viewer = _viewer()
    target_x = viewer.current.x_coord(0)
    viewer.zoom(1, 0, 0)
    assert viewer.current.scale == 1.0
    assert viewer.current.center_x == target_x


def test_zoom_renders_new_canvas():
    viewer = _viewer()
    viewer.zoom(4, 7, 4)
    assert (viewer.current.pixels != 0).any()


def test_handle_key():
    viewer = _viewer()
    assert viewer.handle_key(pygame.K_ESCAPE) is True
    assert viewer.handle_key(pygame.K_a) is False