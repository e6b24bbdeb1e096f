"""Argument Resolver - Build a RunConfig from raw command-line tokens.

Positional tokens are the two input images. Everything after them is an
optional ``key=value`` pair whose key is matched case-insensitively against
a fixed alias table. Unrecognised tokens are skipped (with a warning) so a
typo never aborts a run.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from heightmapdiff.colors import RGB, parse_color
from heightmapdiff.exceptions import HelpRequested, InvalidColorFormat, UsageError

logger = logging.getLogger(__name__)

OPTION_PATTERN = re.compile(r"([A-Za-z0-9]+)=(.+)", re.DOTALL)
EXTENSION_PATTERN = re.compile(r"(.+)\.[^./\\]+", re.DOTALL)

HELP_ALIASES: Tuple[str, ...] = ("help", "-h", "--help")

# Canonical option name -> accepted keywords, in help-text order.
OPTION_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "output": ("o", "output"),
    "raised_color": ("hi", "high"),
    "lowered_color": ("lo", "low"),
    "save_stats": ("stats", "statistics"),
})

_ALIAS_LOOKUP: Mapping[str, str] = MappingProxyType({
    alias: name for name, aliases in OPTION_ALIASES.items() for alias in aliases
})

COLOR_LABELS = {
    "raised_color": "raised land",
    "lowered_color": "lowered land",
}


@dataclass(frozen=True)
class RunConfig:
    """Fully resolved settings for one comparison run."""
    input_a: str
    input_b: str
    output_base: Optional[str] = None  # None -> derived from the diff counts
    raised_color: RGB = RGB(0, 255, 0)
    lowered_color: RGB = RGB(255, 0, 0)
    save_stats: bool = True

    @property
    def inputs(self) -> Tuple[str, str]:
        return (self.input_a, self.input_b)


DEFAULTS = RunConfig(input_a="", input_b="")


def str_to_bool(value: str) -> bool:
    """Only "false" and "no" (any case) are false."""
    return value.lower() not in {"false", "no"}


def strip_extension(value: str) -> str:
    """Drop a trailing ``.ext`` from an output name, if there is one."""
    match = EXTENSION_PATTERN.fullmatch(value)
    return match.group(1) if match else value


def canonical_option(key: str) -> Optional[str]:
    return _ALIAS_LOOKUP.get(key.lower())


def is_help_token(token: str) -> bool:
    return token.lower() in HELP_ALIASES


def _parse_color_option(name: str, value: str) -> RGB:
    try:
        return parse_color(value)
    except InvalidColorFormat:
        raise InvalidColorFormat(
            f"Invalid color format for {COLOR_LABELS[name]}. "
            "Expected R,G,B or (R,G,B) with values 0-255."
        ) from None


def resolve_args(tokens: Sequence[str]) -> RunConfig:
    """Resolve command-line tokens into a RunConfig.

    Args:
        tokens: Arguments without the program name.

    Returns:
        The resolved, immutable run configuration.

    Raises:
        UsageError: If fewer than two input paths were given.
        HelpRequested: If any token is a help keyword.
        InvalidColorFormat: If a color option cannot be parsed.
    """
    tokens = list(tokens)
    if len(tokens) < 2:
        raise UsageError()

    if any(is_help_token(token) for token in tokens):
        raise HelpRequested()

    options = {
        "output": DEFAULTS.output_base,
        "raised_color": DEFAULTS.raised_color,
        "lowered_color": DEFAULTS.lowered_color,
        "save_stats": DEFAULTS.save_stats,
    }

    for token in tokens[2:]:
        match = OPTION_PATTERN.fullmatch(token)
        if match is None:
            logger.warning(f"Ignoring argument {token!r}: expected key=value")
            continue

        key, value = match.groups()
        name = canonical_option(key)
        if name is None:
            logger.warning(f"Ignoring unknown option {key!r}")
            continue

        if name == "output":
            options["output"] = strip_extension(value)
        elif name in COLOR_LABELS:
            options[name] = _parse_color_option(name, value)
        elif name == "save_stats":
            options["save_stats"] = str_to_bool(value)

    return RunConfig(
        input_a=tokens[0],
        input_b=tokens[1],
        output_base=options["output"],
        raised_color=options["raised_color"],
        lowered_color=options["lowered_color"],
        save_stats=options["save_stats"],
    )
