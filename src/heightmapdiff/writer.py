"""Output writers for the diff image and the statistics file."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from heightmapdiff.engine import DiffResult
from heightmapdiff.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

IMAGE_SUFFIX = ".png"
STATS_SUFFIX = ".txt"


def _with_suffix(base_name: str, suffix: str) -> Path:
    # Appended rather than Path.with_suffix(): base names may contain dots.
    return Path(f"{base_name}{suffix}")


def save_diff_image(result: DiffResult, base_name: str) -> Path:
    """Write the diff visualisation as ``{base_name}.png``."""
    path = _with_suffix(base_name, IMAGE_SUFFIX)
    try:
        Image.fromarray(result.pixels).save(path, format="PNG")
    except (OSError, ValueError) as e:
        raise OutputWriteError(f"Could not create file: {path} ({e})") from e
    logger.info(f"Saved diff image to {path}")
    return path


def save_stats(text: str, base_name: str) -> Path:
    """Write the summary text as ``{base_name}.txt``."""
    path = _with_suffix(base_name, STATS_SUFFIX)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Could not create file: {path} ({e})") from e
    logger.info(f"Saved statistics to {path}")
    return path
