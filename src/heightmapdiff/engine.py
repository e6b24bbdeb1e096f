"""Diff Engine - Classify every pixel as raised, lowered or unchanged.

Heightmaps encode elevation in a single band, so only the red samples are
compared. Unchanged pixels keep image A's original color; changed pixels are
painted with the raised or lowered color.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from heightmapdiff.colors import RGB
from heightmapdiff.exceptions import DimensionMismatchError
from heightmapdiff.loader import RasterImage

logger = logging.getLogger(__name__)


@dataclass
class DiffResult:
    width: int
    height: int
    pixels: np.ndarray  # Shape (height, width, 3), dtype uint8
    raised_count: int = 0
    lowered_count: int = 0

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    @property
    def changed_count(self) -> int:
        return self.raised_count + self.lowered_count

    @property
    def unchanged_count(self) -> int:
        return self.total_pixels - self.changed_count

    @property
    def output_buffer(self) -> bytes:
        """Interleaved R,G,B bytes, row-major."""
        return self.pixels.tobytes()


def _diff_span(
    a: RasterImage,
    b: RasterImage,
    start: int,
    stop: int,
    raised: np.ndarray,
    lowered: np.ndarray,
) -> Tuple[np.ndarray, int, int]:
    """Classify flat pixel indices [start, stop)."""
    red_a = a.red[start:stop]
    red_b = b.red[start:stop]

    out = np.stack(
        (a.red[start:stop], a.green[start:stop], a.blue[start:stop]), axis=-1
    ).astype(np.uint8)

    raised_mask = red_b > red_a
    lowered_mask = red_b < red_a
    out[raised_mask] = raised
    out[lowered_mask] = lowered

    return out, int(np.count_nonzero(raised_mask)), int(np.count_nonzero(lowered_mask))


def _row_spans(width: int, height: int, chunk_rows: int) -> Iterator[Tuple[int, int]]:
    for row in range(0, height, chunk_rows):
        last = min(row + chunk_rows, height)
        yield row * width, last * width


def diff_images(
    img_a: RasterImage,
    img_b: RasterImage,
    raised_color: RGB,
    lowered_color: RGB,
    chunk_rows: Optional[int] = None,
) -> DiffResult:
    """Compare two heightmaps pixel by pixel.

    Args:
        img_a: Start image; its colors are kept where nothing changed.
        img_b: End image.
        raised_color: Color for pixels whose red sample increased.
        lowered_color: Color for pixels whose red sample decreased.
        chunk_rows: If set, evaluate bands of this many rows separately and
            merge them. The result is identical to a single pass.

    Returns:
        DiffResult with the recolored pixels and change counters.

    Raises:
        DimensionMismatchError: If the images differ in width or height.
    """
    if img_a.size != img_b.size:
        raise DimensionMismatchError(
            "Input images have different dimensions: "
            f"{img_a.width}x{img_a.height} vs {img_b.width}x{img_b.height}."
        )

    width, height = img_a.size
    raised = np.array(raised_color, dtype=np.uint8)
    lowered = np.array(lowered_color, dtype=np.uint8)

    if chunk_rows and chunk_rows > 0:
        spans = list(_row_spans(width, height, chunk_rows))
    else:
        spans = [(0, width * height)]

    segments: List[np.ndarray] = []
    raised_count = 0
    lowered_count = 0
    for start, stop in spans:
        segment, n_raised, n_lowered = _diff_span(img_a, img_b, start, stop, raised, lowered)
        segments.append(segment)
        raised_count += n_raised
        lowered_count += n_lowered

    if segments:
        flat = np.concatenate(segments, axis=0)
    else:
        flat = np.empty((0, 3), dtype=np.uint8)

    logger.info(
        f"Diffed {width}x{height} in {len(spans)} span(s): "
        f"raised={raised_count}, lowered={lowered_count}"
    )

    return DiffResult(
        width=width,
        height=height,
        pixels=flat.reshape(height, width, 3),
        raised_count=raised_count,
        lowered_count=lowered_count,
    )
