"""Conversions between the string and tuple forms of a color."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .cache import ColorCache
from .serializer import to_string
from .types import ColorInput, ColorTuple, ParsedTuple, RawString, wrap


def as_string(color: ColorInput | str | Sequence | np.ndarray) -> str:
    """Return *color* as a string.

    Strings are returned unchanged, without validation.  Tuples are
    serialized with ``to_string``.
    """
    color = wrap(color)
    if isinstance(color, RawString):
        return color.value
    return to_string(color.value)


def as_array(color: ColorInput | str | Sequence | np.ndarray, cache: ColorCache) -> ColorTuple:
    """Return *color* as an ``(r, g, b, a)`` tuple.

    Tuples are returned unchanged.  Strings go through *cache*, so the result
    may be shared and must not be modified.

    :raises InvalidColorFormat: If a string cannot be parsed.
    """
    color = wrap(color)
    if isinstance(color, ParsedTuple):
        return color.value
    return cache.lookup(color.value)
