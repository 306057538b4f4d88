"""Color string parsing.

``parse`` accepts four textual forms and returns a normalized
``(r, g, b, a)`` tuple:

  - Hex strings: ``'#rgb'``, ``'#rgba'``, ``'#rrggbb'`` or ``'#rrggbbaa'``
  - ``'rgb(r,g,b)'``
  - ``'rgba(r,g,b,a)'``
  - Bare names such as ``'red'``, resolved through a ``NamedColorResolver``

Red, green and blue come back as ints in [0, 255] and alpha as a float in
[0, 1].
"""

from __future__ import annotations

import math
import re
from typing import Sequence

import numpy as np

from .errors import InvalidColorFormat
from .named import DEFAULT_RESOLVER, NamedColorResolver
from .types import ColorTuple

# '#' followed by 3, 4, 6 or 8 hex digits.
_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_NAMED_RE = re.compile(r"^[a-z]+$", re.IGNORECASE)


def normalize(raw: Sequence[float] | np.ndarray, out: list | None = None) -> ColorTuple | list:
    """Round and clamp a raw ``[r, g, b, a]`` quadruple.

    Red, green and blue are rounded with ``trunc(x + 0.5)`` and clamped to
    [0, 255].  Alpha is clamped to [0, 1] and left unrounded.

    :param raw: Four numbers.
    :param out: Optional list of length 4 to write the result into.
    :returns: *out* when given, otherwise a new tuple.
    :raises ValueError: If *raw* does not hold exactly four numbers.
    """
    values = np.asarray(raw, dtype=np.float64)
    if values.shape != (4,):
        raise ValueError(f"Color must have exactly 4 components, got shape {values.shape}")

    rgb = np.clip(np.trunc(values[:3] + 0.5), 0, 255)
    r, g, b = (int(c) for c in rgb)
    a = float(np.clip(values[3], 0.0, 1.0))

    if out is None:
        return (r, g, b, a)
    out[:] = [r, g, b, a]
    return out


def _parse_hex(s: str) -> ColorTuple:
    n = len(s) - 1
    d = 1 if n <= 4 else 2
    has_alpha = n in (4, 8)

    channels = [int(s[1 + i * d : 1 + (i + 1) * d], 16) for i in range(4 if has_alpha else 3)]
    if d == 1:
        channels = [v * 16 + v for v in channels]
    if not has_alpha:
        channels.append(255)

    r, g, b, a = channels
    return (r, g, b, a / 255)


def _parse_functional(s: str, prefix: str, arity: int) -> list[float]:
    fields = s[len(prefix) : -1].split(",")
    if len(fields) != arity:
        raise InvalidColorFormat(s)
    try:
        parts = [float(f) for f in fields]
    except ValueError:
        raise InvalidColorFormat(s) from None
    if not all(math.isfinite(p) for p in parts):
        raise InvalidColorFormat(s)
    return parts


def parse(s: str, resolver: NamedColorResolver | None = None) -> ColorTuple:
    """Parse a color string into an ``(r, g, b, a)`` tuple.

    :param s: The color string.  Surrounding whitespace is not stripped.
    :param resolver: Used for bare names; defaults to the built-in table.
    :raises TypeError: If *s* is not a str.
    :raises InvalidColorFormat: If *s* matches none of the accepted forms or
        names an unknown color.
    """
    if not isinstance(s, str):
        raise TypeError(f"color must be a str, got {type(s).__name__}")

    text = s
    if _NAMED_RE.fullmatch(text):
        text = (resolver if resolver is not None else DEFAULT_RESOLVER).resolve(text)

    if _HEX_RE.fullmatch(text):
        return _parse_hex(text)

    if text.startswith("rgba(") and text.endswith(")"):
        return normalize(_parse_functional(text, "rgba(", 4))

    if text.startswith("rgb(") and text.endswith(")"):
        parts = _parse_functional(text, "rgb(", 3)
        parts.append(1)
        return normalize(parts)

    raise InvalidColorFormat(s)
