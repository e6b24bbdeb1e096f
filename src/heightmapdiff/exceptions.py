"""Heightmap diff exceptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HeightmapDiffError(Exception):
    message: str
    code: str = "heightmap_diff_error"

    def __str__(self) -> str:
        return self.message


class HelpRequested(HeightmapDiffError):
    """Usage text should be shown and the run skipped."""

    def __init__(self, message: str = "help requested") -> None:
        super().__init__(message=message, code="help")


class UsageError(HelpRequested):
    """Required positional arguments are missing."""

    def __init__(self, message: str = "two input images are required") -> None:
        HeightmapDiffError.__init__(self, message=message, code="usage")


class InvalidColorFormat(HeightmapDiffError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="invalid_color")


class LoadError(HeightmapDiffError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="load_error")


class UnsupportedFormatError(HeightmapDiffError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="unsupported_format")


class DimensionMismatchError(HeightmapDiffError):
    def __init__(self, message: str = "Input images have different dimensions.") -> None:
        super().__init__(message=message, code="dimension_mismatch")


class OutputWriteError(HeightmapDiffError):
    def __init__(self, message: str) -> None:
        super().__init__(message=message, code="output_write_error")
