"""Tests for pixel classification and glyph selection."""

import pytest

from braille_view.core.cell import DisplayCell
from braille_view.core.color import Color, ColorMode
from braille_view.core.mapper import (
    BRAILLE_BLANK,
    BRAILLE_FULL,
    classify,
    cube_index,
    glyph_for,
    map_pixel,
)
from braille_view.core.pixel import Pixel


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (128, 64, 32), (255, 0, 0)])
    def test_zero_alpha_is_transparent(self, rgb: tuple[int, int, int]) -> None:
        assert classify(Pixel(*rgb, a=0)) == Color.TRANSPARENT

    @pytest.mark.parametrize("rgb, expected", [
        ((0, 0, 0), Color.BLACK),
        ((255, 0, 0), Color.RED),
        ((0, 255, 0), Color.GREEN),
        ((0, 0, 255), Color.BLUE),
        ((255, 255, 0), Color.YELLOW),
        ((0, 255, 255), Color.CYAN),
        ((255, 0, 255), Color.MAGENTA),
        ((255, 255, 255), Color.WHITE),
    ])
    def test_named_colors(self, rgb: tuple[int, int, int], expected: Color) -> None:
        assert classify(Pixel(*rgb)) == expected

    def test_partial_alpha_still_classified(self) -> None:
        assert classify(Pixel(255, 0, 0, 1)) == Color.RED

    def test_cube_index_example(self) -> None:
        color = classify(Pixel(128, 64, 32))
        assert color.mode == ColorMode.EXTENDED_256
        assert color.value == 131

    def test_one_below_saturation_is_not_named(self) -> None:
        color = classify(Pixel(0xFE, 0, 0))
        assert color.mode == ColorMode.EXTENDED_256
        # 254 / 51 rounds to 5
        assert color.value == 16 + 36 * 5

    def test_nonzero_off_channel_is_not_named(self) -> None:
        assert classify(Pixel(255, 1, 0)).mode == ColorMode.EXTENDED_256
        assert classify(Pixel(0, 0, 1)).mode == ColorMode.EXTENDED_256

    def test_idempotent(self) -> None:
        pixel = Pixel(200, 100, 50)
        assert classify(pixel) == classify(pixel)

    def test_cube_corners(self) -> None:
        assert cube_index(0, 0, 0) == 16
        assert cube_index(255, 255, 255) == 231
        assert cube_index(25, 25, 25) == 16
        assert cube_index(26, 26, 26) == 16 + 36 + 6 + 1

    def test_every_opaque_value_lands_in_cube(self) -> None:
        for c in range(256):
            color = classify(Pixel(c, c // 2, 255 - c))
            assert not color.is_transparent
            if color.mode == ColorMode.EXTENDED_256:
                assert 16 <= color.value <= 231


class TestGlyphs:
    """Tests for glyph_for() and map_pixel()."""

    def test_transparent_has_no_glyph(self) -> None:
        assert glyph_for(Color.TRANSPARENT) is None

    def test_black_is_blank_braille(self) -> None:
        assert glyph_for(Color.BLACK) == BRAILLE_BLANK == "⠀"

    def test_other_colors_are_full_braille(self) -> None:
        assert glyph_for(Color.RED) == BRAILLE_FULL == "⣿"
        assert glyph_for(Color.WHITE) == BRAILLE_FULL
        assert glyph_for(Color.from_256(131)) == BRAILLE_FULL

    def test_map_pixel(self) -> None:
        assert map_pixel(Pixel(255, 0, 0)) == DisplayCell(BRAILLE_FULL, Color.RED)
        assert map_pixel(Pixel(0, 0, 0)) == DisplayCell(BRAILLE_BLANK, Color.BLACK)
        assert map_pixel(Pixel(255, 0, 0, 0)) is None
