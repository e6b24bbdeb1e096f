"""Heightmap Diff: highlight raised and lowered terrain between two heightmaps."""

from heightmapdiff.colors import RGB, parse_color
from heightmapdiff.config import DEFAULTS, RunConfig, resolve_args, str_to_bool
from heightmapdiff.engine import DiffResult, diff_images
from heightmapdiff.loader import RasterImage, load_image, load_images
from heightmapdiff.pipeline import RunOutcome, run_diff
from heightmapdiff.report import DiffReport, build_report

__version__ = "1.0.0"

__all__ = [
    "RGB",
    "parse_color",
    "DEFAULTS",
    "RunConfig",
    "resolve_args",
    "str_to_bool",
    "DiffResult",
    "diff_images",
    "RasterImage",
    "load_image",
    "load_images",
    "RunOutcome",
    "run_diff",
    "DiffReport",
    "build_report",
    "__version__",
]
