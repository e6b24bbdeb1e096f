"""Image Loader Adapter - Decode heightmaps into per-channel sample arrays."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
from PIL import Image

from heightmapdiff.exceptions import DimensionMismatchError, LoadError, UnsupportedFormatError

logger = logging.getLogger(__name__)

RGB_MODE = "RGB"
GRAY_MODE = "L"
# Pillow modes that are RGB/gray in layout but not 8-bit unsigned samples.
WIDE_SAMPLE_MODES = {"I", "F", "I;16", "I;16L", "I;16B", "I;16N"}


@dataclass
class RasterImage:
    """Decoded heightmap: row-major uint8 samples, origin top-left."""
    width: int
    height: int
    red: np.ndarray    # Shape (width * height,), dtype uint8
    green: np.ndarray
    blue: np.ndarray
    path: Optional[Path] = None
    mode: str = RGB_MODE  # Source color layout, "RGB" or "L"

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_array(cls, pixels: np.ndarray, path: Optional[Path] = None) -> "RasterImage":
        """Build from an (H, W) grayscale or (H, W, 3) RGB uint8 array."""
        pixels = np.asarray(pixels)
        if pixels.dtype != np.uint8:
            raise UnsupportedFormatError(
                f"Image '{path}' doesn't use 8-bit unsigned samples ({pixels.dtype})."
            )

        if pixels.ndim == 2:
            height, width = pixels.shape
            gray = np.ascontiguousarray(pixels).reshape(-1)
            return cls(width, height, gray, gray, gray, path=path, mode=GRAY_MODE)

        if pixels.ndim == 3 and pixels.shape[2] == 3:
            height, width = pixels.shape[:2]
            flat = np.ascontiguousarray(pixels).reshape(-1, 3)
            return cls(
                width,
                height,
                flat[:, 0].copy(),
                flat[:, 1].copy(),
                flat[:, 2].copy(),
                path=path,
                mode=RGB_MODE,
            )

        raise UnsupportedFormatError(
            f"Image '{path}' is not in RGB or GRAY color space (shape {pixels.shape})."
        )


def _check_mode(img: Image.Image, path: Path) -> None:
    if img.mode in (RGB_MODE, GRAY_MODE):
        return
    if img.mode in WIDE_SAMPLE_MODES:
        raise UnsupportedFormatError(
            f"Image '{path}' doesn't use 8-bit unsigned samples (mode {img.mode})."
        )
    raise UnsupportedFormatError(
        f"Image '{path}' is not in RGB or GRAY color space (mode {img.mode})."
    )


def load_image(path: Union[str, Path]) -> RasterImage:
    """Decode a single heightmap.

    Args:
        path: Any raster format Pillow can read.

    Returns:
        RasterImage with grayscale inputs replicated into all three channels.

    Raises:
        LoadError: If the file is missing, unreadable or corrupt.
        UnsupportedFormatError: If the color space or sample depth is not
            8-bit RGB or 8-bit grayscale.
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            _check_mode(img, path)
            pixels = np.asarray(img, dtype=np.uint8)
    except (OSError, Image.DecompressionBombError) as e:
        # Missing, unidentified, truncated and oversized files.
        raise LoadError(f"Failed to load image: {path} ({e})") from e

    image = RasterImage.from_array(pixels, path=path)
    logger.info(f"Loaded {path} ({image.width}x{image.height}, {image.mode})")
    return image


def load_images(paths: Iterable[Union[str, Path]]) -> List[RasterImage]:
    """Load every path, failing as soon as one differs in size from the first."""
    images: List[RasterImage] = []
    for path in paths:
        image = load_image(path)
        if images and image.size != images[0].size:
            first = images[0]
            raise DimensionMismatchError(
                "Input images have different dimensions: "
                f"{first.width}x{first.height} vs {image.width}x{image.height}."
            )
        images.append(image)
    return images
