"""Color parsing - Parse "R,G,B" / "(R,G,B)" triples."""

from __future__ import annotations

import re
from typing import NamedTuple

from heightmapdiff.exceptions import InvalidColorFormat

# Parentheses are each optional; whitespace and signs are not allowed.
COLOR_PATTERN = re.compile(r"\(?([0-9]{1,3}),([0-9]{1,3}),([0-9]{1,3})\)?")

CHANNEL_MAX = 255


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def parse_color(text: str) -> RGB:
    """Parse a color triple.

    Args:
        text: "R,G,B" or "(R,G,B)" with decimal components in 0-255.

    Returns:
        The parsed RGB value.

    Raises:
        InvalidColorFormat: If the text does not match exactly or a
            component is above 255.
    """
    match = COLOR_PATTERN.fullmatch(text or "")
    if match is None:
        raise InvalidColorFormat(f"Invalid color {text!r}: expected R,G,B or (R,G,B).")

    components = [int(part) for part in match.groups()]
    if any(value > CHANNEL_MAX for value in components):
        raise InvalidColorFormat(f"Invalid color {text!r}: values must be 0-{CHANNEL_MAX}.")

    return RGB(*components)


def format_color(color: RGB) -> str:
    return ",".join(str(c) for c in color)
