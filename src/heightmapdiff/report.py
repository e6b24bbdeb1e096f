"""Report Builder - Summarise diff counters as text."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict


SUMMARY_TEMPLATE = (
    "Summary:\n"
    "--------\n"
    "Total tiles     : {total} \n"
    "Changed tiles   : {changed} ({changed_pct} %)\n"
    " - raised land  : {raised} ({raised_pct} %)\n"
    " - lowered land : {lowered} ({lowered_pct} %)\n"
    "Unchanged tiles : {unchanged} ({unchanged_pct} %)"
)


@dataclass
class DiffReport:
    """Change statistics for one comparison."""

    width: int = 0
    height: int = 0

    # Counts
    total_pixels: int = 0
    changed_pixels: int = 0
    raised_pixels: int = 0
    lowered_pixels: int = 0
    unchanged_pixels: int = 0

    # Percentages, already formatted to two decimals
    changed_pct: str = "0.00"
    raised_pct: str = "0.00"
    lowered_pct: str = "0.00"
    unchanged_pct: str = "0.00"

    text: str = ""
    default_output_name: str = ""

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)


def format_percent(count: int, total: int) -> str:
    """Format count/total as a percentage with two decimals.

    Python's ``{:.2f}`` rounds the exact binary value of the quotient, ties
    going to even, which matches C's ``printf("%.2f")``.
    """
    if total <= 0:
        return f"{0.0:.2f}"
    return f"{count / total * 100:.2f}"


def default_output_name(raised_count: int, lowered_count: int) -> str:
    return f"Raised-{raised_count}, lowered-{lowered_count}"


def build_report(width: int, height: int, raised_count: int, lowered_count: int) -> DiffReport:
    """Build the summary for a finished diff.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        raised_count: Pixels whose elevation increased.
        lowered_count: Pixels whose elevation decreased.

    Returns:
        DiffReport with counts, percentages, summary text and the output
        name to use when none was configured.
    """
    total = width * height
    changed = raised_count + lowered_count
    if changed > total:
        raise ValueError(f"changed pixels ({changed}) exceed total pixels ({total})")
    unchanged = total - changed

    report = DiffReport(
        width=width,
        height=height,
        total_pixels=total,
        changed_pixels=changed,
        raised_pixels=raised_count,
        lowered_pixels=lowered_count,
        unchanged_pixels=unchanged,
        changed_pct=format_percent(changed, total),
        raised_pct=format_percent(raised_count, total),
        lowered_pct=format_percent(lowered_count, total),
        unchanged_pct=format_percent(unchanged, total),
        default_output_name=default_output_name(raised_count, lowered_count),
    )

    report.text = SUMMARY_TEMPLATE.format(
        total=total,
        changed=changed,
        changed_pct=report.changed_pct,
        raised=raised_count,
        raised_pct=report.raised_pct,
        lowered=lowered_count,
        lowered_pct=report.lowered_pct,
        unchanged=unchanged,
        unchanged_pct=report.unchanged_pct,
    )
    return report
