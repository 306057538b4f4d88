"""Data structures for color inputs.

A color arrives either as text that still has to be parsed or as an
already-parsed ``(r, g, b, a)`` tuple.  ``RawString`` and ``ParsedTuple``
make that distinction explicit so the dispatch helpers in ``convert`` branch
on the variant instead of guessing from the payload.
"""

from __future__ import annotations

import dataclasses
from typing import Sequence, Tuple, Union

import numpy as np

ColorTuple = Tuple[int, int, int, float]


@dataclasses.dataclass(frozen=True)
class RawString:
    """A color that is still in textual form, e.g. ``'#f00'`` or ``'red'``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"RawString value must be a str, got {type(self.value).__name__}"
            )


@dataclasses.dataclass(frozen=True)
class ParsedTuple:
    """A color already in numeric form.

    :param value: ``(r, g, b)`` or ``(r, g, b, a)``.  Lists and numpy arrays
        are coerced to a tuple so the record stays hashable and immutable.
    """

    value: tuple

    def __post_init__(self) -> None:
        # frozen dataclass prevents direct assignment; use object.__setattr__
        # to coerce lists and arrays to a plain tuple.
        if not isinstance(self.value, tuple):
            object.__setattr__(self, "value", _to_tuple(self.value))


ColorInput = Union[RawString, ParsedTuple]


def _to_tuple(seq: Sequence | np.ndarray) -> tuple:
    if isinstance(seq, np.ndarray):
        return tuple(seq.tolist())
    return tuple(seq)


def wrap(color: ColorInput | str | Sequence | np.ndarray) -> ColorInput:
    """Tag a plain color value with its variant.

    :param color: A ``RawString``/``ParsedTuple`` (returned as-is), a
        ``str``, or a tuple/list/``numpy.ndarray`` of channel values.
    :raises TypeError: For any other type.
    """
    if isinstance(color, (RawString, ParsedTuple)):
        return color
    if isinstance(color, str):
        return RawString(color)
    if isinstance(color, (tuple, list, np.ndarray)):
        return ParsedTuple(_to_tuple(color))
    raise TypeError(
        f"color must be a str or a sequence of channels, got {type(color).__name__}"
    )
