"""Parse, cache and serialize CSS-style color strings."""

from __future__ import annotations

from .color import (
    ColorCache,
    InvalidColorFormat,
    ParsedTuple,
    RawString,
    as_array,
    as_string,
    normalize,
    parse,
    to_string,
)
from .configurations.color_config import ColorConfig
from .configurations.configuration_constants import EvictionPolicy

__all__ = [
    "ColorCache",
    "ColorConfig",
    "EvictionPolicy",
    "InvalidColorFormat",
    "ParsedTuple",
    "RawString",
    "as_array",
    "as_string",
    "normalize",
    "parse",
    "to_string",
]
