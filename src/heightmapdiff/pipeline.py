"""Pipeline - Load, diff, summarise and write one heightmap comparison."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from heightmapdiff.config import RunConfig
from heightmapdiff.engine import DiffResult, diff_images
from heightmapdiff.loader import load_images
from heightmapdiff.report import DiffReport, build_report
from heightmapdiff.settings import settings
from heightmapdiff.writer import save_diff_image, save_stats

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    result: DiffResult
    report: DiffReport
    output_base: str
    image_path: Path
    stats_path: Optional[Path] = None


def run_diff(config: RunConfig, chunk_rows: Optional[int] = None) -> RunOutcome:
    """Run a full comparison described by ``config``.

    Args:
        config: Resolved run configuration.
        chunk_rows: Row band size for the diff engine; defaults to
            ``settings.chunk_rows``.

    Returns:
        RunOutcome with the diff, the report and the written paths.
    """
    if chunk_rows is None:
        chunk_rows = settings.chunk_rows

    logger.info(f"Comparing {config.input_a} -> {config.input_b}")
    img_a, img_b = load_images(config.inputs)

    result = diff_images(
        img_a,
        img_b,
        config.raised_color,
        config.lowered_color,
        chunk_rows=chunk_rows,
    )

    report = build_report(result.width, result.height, result.raised_count, result.lowered_count)

    # The default name embeds the counts, so it is only known after the diff.
    output_base = config.output_base if config.output_base is not None else report.default_output_name

    image_path = save_diff_image(result, output_base)
    stats_path = save_stats(report.text, output_base) if config.save_stats else None

    return RunOutcome(
        result=result,
        report=report,
        output_base=output_base,
        image_path=image_path,
        stats_path=stats_path,
    )
