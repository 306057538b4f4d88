"""Color parsing, caching and serialization."""

from __future__ import annotations

from .cache import ColorCache
from .convert import as_array, as_string
from .errors import InvalidColorFormat
from .named import NAMED_COLORS, NamedColorResolver, TableResolver
from .parser import normalize, parse
from .serializer import to_string
from .types import ColorInput, ColorTuple, ParsedTuple, RawString, wrap

__all__ = [
    "ColorCache",
    "ColorInput",
    "ColorTuple",
    "InvalidColorFormat",
    "NAMED_COLORS",
    "NamedColorResolver",
    "ParsedTuple",
    "RawString",
    "TableResolver",
    "as_array",
    "as_string",
    "normalize",
    "parse",
    "to_string",
    "wrap",
]
