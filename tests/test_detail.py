"""Tests for interestingness.scoring.detail."""

import numpy as np

from interestingness.raster import new_raster
from interestingness.scoring.detail import edge_detect


def make_uniform_raster(w: int, h: int, color: tuple = (128, 128, 128, 255)) -> np.ndarray:
    """Create a raster filled with one color."""
    raster = new_raster(w, h)
    raster[...] = color
    return raster


def detect(source: np.ndarray) -> np.ndarray:
    """Run edge detection into a copy and return the detail channel."""
    output = source.copy()
    edge_detect(source, output)
    return output[..., 1]


class TestEdgeDetect:
    def test_uniform_interior_is_zero(self):
        detail = detect(make_uniform_raster(5, 5))
        assert (detail[1:-1, 1:-1] == 0).all()

    def test_uniform_border_is_luminance(self):
        # luminance(128, 128, 128) = 166.4
        detail = detect(make_uniform_raster(5, 5))
        border = np.ones((5, 5), dtype=bool)
        border[1:-1, 1:-1] = False
        assert (detail[border] == 166).all()

    def test_white_border_clamped(self):
        detail = detect(make_uniform_raster(4, 4, (255, 255, 255, 255)))
        expected = np.full((4, 4), 255, dtype=np.uint8)
        expected[1:-1, 1:-1] = 0
        np.testing.assert_array_equal(detail, expected)

    def test_bright_spot_saturates(self):
        source = make_uniform_raster(3, 3, (0, 0, 0, 255))
        source[1, 1] = (255, 255, 255, 255)
        detail = detect(source)
        assert detail[1, 1] == 255
        assert detail[0, 1] == 0  # border keeps its own (black) luminance

    def test_dark_spot_clamped_to_zero(self):
        source = make_uniform_raster(5, 5, (255, 255, 255, 255))
        source[2, 2] = (0, 0, 0, 255)
        detail = detect(source)
        assert detail[2, 2] == 0
        # each 4-neighbour sees one dark pixel: 4*331.5 - 3*331.5
        assert detail[1, 2] == 255
        assert detail[2, 1] == 255
        assert detail[2, 3] == 255
        assert detail[3, 2] == 255

    def test_small_laplacian_value(self):
        source = make_uniform_raster(3, 3, (0, 0, 0, 255))
        source[1, 1] = (0, 10, 0, 255)
        detail = detect(source)
        # 4 * 0.7152 * 10 = 28.608
        assert detail[1, 1] == 29

    def test_single_pixel(self):
        detail = detect(make_uniform_raster(1, 1, (0, 0, 100, 255)))
        # 0.5126 * 100 = 51.26
        assert detail[0, 0] == 51

    def test_thin_rasters_are_all_border(self):
        for w, h in [(2, 2), (1, 5), (5, 2)]:
            detail = detect(make_uniform_raster(w, h))
            assert detail.shape == (h, w)
            assert (detail == 166).all()

    def test_only_green_channel_written(self):
        source = make_uniform_raster(4, 4, (10, 20, 30, 40))
        output = source.copy()
        edge_detect(source, output)
        np.testing.assert_array_equal(output[..., [0, 2, 3]], source[..., [0, 2, 3]])

    def test_source_untouched(self):
        source = make_uniform_raster(4, 4)
        before = source.copy()
        edge_detect(source, new_raster(4, 4))
        np.testing.assert_array_equal(source, before)
