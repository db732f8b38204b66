import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from container_models.image import TgaImage
from extractors import TileCounts, classify_markers, marker_sums, tile_grid

from ..constants import BLACK, CYAN, GRAY, RED, WHITE
from ..helper_function import bgr_bytes


def true_colour_image(rows: list[list[tuple[int, int, int]]], alpha: int | None = None) -> TgaImage:
    return TgaImage(
        width=len(rows[0]),
        height=len(rows),
        channels=3 if alpha is None else 4,
        pixels=bgr_bytes(rows, alpha=alpha),
    )


def gray_image(rows: list[list[int]]) -> TgaImage:
    return TgaImage(width=len(rows[0]), height=len(rows), channels=1, pixels=bytes(sum(rows, [])))


class TestMarkerSums:
    def test_sums_colour_channels(self) -> None:
        image = true_colour_image([[RED, CYAN, WHITE, (1, 2, 3)]])

        assert marker_sums(image).tolist() == [255, 510, 765, 6]

    def test_ignores_alpha(self) -> None:
        image = true_colour_image([[RED, BLACK]], alpha=255)

        assert marker_sums(image).tolist() == [255, 0]

    def test_counts_gray_value_for_every_channel(self) -> None:
        image = gray_image([[85, 170, 255, 1]])

        assert marker_sums(image).tolist() == [255, 510, 765, 3]


class TestClassifyMarkers:
    def test_locates_start_and_end(self, square_level_image: TgaImage) -> None:
        markers = classify_markers(square_level_image)

        assert markers.counts == TileCounts(start=1, end=1, active=1)
        assert markers.start_index == 0
        assert markers.end_index == 2

    def test_any_channel_combination_summing_to_255_is_a_start(self) -> None:
        image = true_colour_image([[(100, 100, 55), BLACK, (0, 0, 255)]])

        markers = classify_markers(image)

        assert markers.counts.start == 2
        assert markers.start_index == 2, "the last marker is reported"

    def test_missing_markers(self) -> None:
        markers = classify_markers(true_colour_image([[BLACK, GRAY]]))

        assert markers.counts == TileCounts(start=0, end=0, active=0)
        assert markers.start_index is None
        assert markers.end_index is None

    def test_indices_are_pixel_ordinals_for_32_bit_images(self) -> None:
        image = true_colour_image([[BLACK, BLACK, BLACK], [BLACK, RED, CYAN]], alpha=255)

        markers = classify_markers(image)

        assert markers.start_index == 4
        assert markers.end_index == 5


class TestTileGrid:
    def test_black_is_empty_and_anything_else_is_a_tile(self, square_level_image: TgaImage) -> None:
        assert tile_grid(square_level_image).tolist() == [[1, 0], [1, 1]]

    def test_dark_pixels_with_zero_intensity_are_empty(self) -> None:
        # (1 + 1 + 0) // 3 == 0
        image = true_colour_image([[(1, 1, 0), (1, 1, 1)]])

        assert tile_grid(image).tolist() == [[0, 1]]

    def test_monochrome_tiles(self) -> None:
        assert tile_grid(gray_image([[0, 1], [85, 0]])).tolist() == [[0, 1], [1, 0]]

    @given(
        pixels=st.lists(
            st.tuples(*(st.integers(min_value=0, max_value=255),) * 3),
            min_size=1,
            max_size=64,
        )
    )
    def test_tiles_are_binary_and_follow_intensity(self, pixels: list[tuple[int, int, int]]) -> None:
        image = true_colour_image([pixels])

        grid = tile_grid(image)

        assert set(np.unique(grid).tolist()) <= {0, 1}
        expected = [int((red + green + blue) // 3 != 0) for red, green, blue in pixels]
        assert grid[0].tolist() == expected

    @pytest.mark.parametrize("alpha", [0, 255])
    def test_alpha_does_not_change_tiles(self, alpha: int) -> None:
        image = true_colour_image([[BLACK, WHITE]], alpha=alpha)

        assert tile_grid(image).tolist() == [[0, 1]]
