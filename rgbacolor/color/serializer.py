"""Serialize color tuples to canonical ``rgba(R,G,B,A)`` strings."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

import numpy as np


def _format_number(value: float) -> str:
    """Shortest round-tripping decimal, in ECMAScript ``Number#toString`` layout.

    Plain notation is used for decimal exponents in [-7, 21), exponent
    notation (``1e-7``, ``1e+21``) outside it.  Non-finite values print as
    ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def _format_channel(value: float) -> str:
    value = float(value)
    # NaN and infinities round to 0.
    if not math.isfinite(value):
        return "0"
    if value != int(value):
        return str(int(value + 0.5))
    return _format_number(value)


def to_string(color: Sequence[float] | np.ndarray) -> str:
    """Format *color* as ``rgba(R,G,B,A)`` with no spaces.

    Fractional red, green or blue values are rounded with ``int(x + 0.5)``;
    non-finite ones become 0.  Alpha defaults to 1 when missing and is
    otherwise written unchanged.  Values are not clamped or validated and no
    sequence of numbers makes this raise.

    :param color: ``(r, g, b)`` or ``(r, g, b, a)``; lists and numpy arrays
        are accepted too.
    """
    r, g, b = (_format_channel(c) for c in color[:3])
    a = color[3] if len(color) > 3 and color[3] is not None else 1
    return f"rgba({r},{g},{b},{_format_number(float(a))})"
