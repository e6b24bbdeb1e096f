"""Generate heightmap samples for testing."""
from pathlib import Path

import numpy as np
from PIL import Image


def gray_heightmap(path: Path, heights, mode: str = "L") -> Path:
    """Save a 2-D list/array of elevations as a grayscale (or RGB) image."""
    arr = np.asarray(heights, dtype=np.uint8)
    img = Image.fromarray(arr)
    if mode != "L":
        img = img.convert(mode)
    img.save(path)
    return path


def rgb_image(path: Path, pixels) -> Path:
    """Save an (H, W, 3) list/array as an RGB image."""
    Image.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
    return path


def terrain_pair(directory: Path, width: int = 64, height: int = 32):
    """Start/end pair with a raised hill in one corner and a dug pit in another.

    Returns:
        (start_path, end_path, raised_count, lowered_count)
    """
    rng = np.random.default_rng(7)
    start = rng.integers(20, 200, size=(height, width), dtype=np.uint8)
    end = start.copy()

    end[:4, :5] += 10   # 20 raised
    end[-3:, -6:] -= 10  # 18 lowered

    start_path = gray_heightmap(directory / "start.png", start)
    end_path = gray_heightmap(directory / "end.png", end)
    return start_path, end_path, 20, 18


if __name__ == "__main__":
    samples = Path(__file__).parent / "samples"
    samples.mkdir(parents=True, exist_ok=True)
    print(terrain_pair(samples))
