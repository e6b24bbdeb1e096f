"""Tests for the diff engine."""

import numpy as np
import pytest

from heightmapdiff.colors import RGB
from heightmapdiff.engine import diff_images
from heightmapdiff.exceptions import DimensionMismatchError
from heightmapdiff.loader import RasterImage

RAISED = RGB(0, 255, 0)
LOWERED = RGB(255, 0, 0)


def gray(rows):
    return RasterImage.from_array(np.asarray(rows, dtype=np.uint8))


def rgb(rows):
    return RasterImage.from_array(np.asarray(rows, dtype=np.uint8))


class TestClassification:

    def test_two_by_two_block(self):
        start = gray([[10, 10], [10, 10]])
        end = gray([[10, 20], [5, 10]])

        result = diff_images(start, end, RAISED, LOWERED)

        assert result.raised_count == 1
        assert result.lowered_count == 1
        assert result.unchanged_count == 2
        assert result.pixels[0, 0].tolist() == [10, 10, 10]
        assert result.pixels[0, 1].tolist() == list(RAISED)
        assert result.pixels[1, 0].tolist() == list(LOWERED)
        assert result.pixels[1, 1].tolist() == [10, 10, 10]

    def test_identical_red_passes_image_a_through(self):
        start = rgb([[[10, 1, 2], [20, 3, 4]], [[30, 5, 6], [40, 7, 8]]])
        end = rgb([[[10, 99, 99], [20, 0, 0]], [[30, 50, 60], [40, 70, 80]]])

        result = diff_images(start, end, RAISED, LOWERED)

        assert result.raised_count == 0
        assert result.lowered_count == 0
        assert result.pixels.tolist() == [
            [[10, 1, 2], [20, 3, 4]],
            [[30, 5, 6], [40, 7, 8]],
        ]

    def test_only_red_is_compared(self):
        start = rgb([[[50, 0, 0]]])
        end = rgb([[[50, 255, 255]]])
        result = diff_images(start, end, RAISED, LOWERED)
        assert result.changed_count == 0

    def test_custom_colors(self):
        result = diff_images(gray([[1, 9]]), gray([[2, 3]]), RGB(1, 2, 3), RGB(4, 5, 6))
        assert result.pixels.tolist() == [[[1, 2, 3], [4, 5, 6]]]

    def test_extremes(self):
        result = diff_images(gray([[0, 255]]), gray([[255, 0]]), RAISED, LOWERED)
        assert (result.raised_count, result.lowered_count) == (1, 1)

    def test_output_buffer_is_interleaved(self):
        result = diff_images(gray([[7, 7]]), gray([[8, 7]]), RAISED, LOWERED)
        assert result.output_buffer == bytes([0, 255, 0, 7, 7, 7])
        assert len(result.output_buffer) == 3 * result.total_pixels

    def test_inputs_untouched(self):
        start = gray([[1, 2]])
        end = gray([[3, 0]])
        diff_images(start, end, RAISED, LOWERED)
        assert start.red.tolist() == [1, 2]
        assert end.red.tolist() == [3, 0]


class TestCounters:

    def test_counts_sum_to_total(self):
        rng = np.random.default_rng(3)
        start = gray(rng.integers(0, 256, size=(17, 23)))
        end = gray(rng.integers(0, 256, size=(17, 23)))

        result = diff_images(start, end, RAISED, LOWERED)

        assert result.raised_count + result.lowered_count + result.unchanged_count == 17 * 23
        a = start.red.astype(int)
        b = end.red.astype(int)
        assert result.raised_count == int((b > a).sum())
        assert result.lowered_count == int((b < a).sum())

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            diff_images(gray(np.zeros((2, 2))), gray(np.zeros((2, 3))), RAISED, LOWERED)


class TestChunkedEvaluation:
    """Row bands give the same result as the single pass."""

    @pytest.mark.parametrize("chunk_rows", [1, 2, 5, 13, 100])
    def test_matches_single_pass(self, chunk_rows):
        rng = np.random.default_rng(11)
        start = rgb(rng.integers(0, 256, size=(13, 9, 3)))
        end = rgb(rng.integers(0, 256, size=(13, 9, 3)))

        single = diff_images(start, end, RAISED, LOWERED)
        chunked = diff_images(start, end, RAISED, LOWERED, chunk_rows=chunk_rows)

        assert np.array_equal(single.pixels, chunked.pixels)
        assert chunked.raised_count == single.raised_count
        assert chunked.lowered_count == single.lowered_count

    def test_empty_image(self):
        empty = gray(np.zeros((0, 4)))
        result = diff_images(empty, empty, RAISED, LOWERED, chunk_rows=2)
        assert result.total_pixels == 0
        assert result.pixels.shape == (0, 4, 3)
