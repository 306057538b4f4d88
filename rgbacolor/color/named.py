"""Named color resolution.

The parser never looks names up itself.  It hands bare words to a
``NamedColorResolver``, which returns an equivalent ``rgb(...)`` or
``rgba(...)`` string.  ``TableResolver`` is the default implementation and
is backed by a static table of common CSS names.
"""

from __future__ import annotations

from typing import Mapping, Protocol

from .errors import InvalidColorFormat

# Common CSS named colors mapped to rgb()/rgba() strings.
NAMED_COLORS: dict[str, str] = {
    "red": "rgb(255,0,0)",
    "green": "rgb(0,128,0)",
    "blue": "rgb(0,0,255)",
    "white": "rgb(255,255,255)",
    "black": "rgb(0,0,0)",
    "yellow": "rgb(255,255,0)",
    "cyan": "rgb(0,255,255)",
    "magenta": "rgb(255,0,255)",
    "orange": "rgb(255,165,0)",
    "purple": "rgb(128,0,128)",
    "pink": "rgb(255,192,203)",
    "brown": "rgb(165,42,42)",
    "gray": "rgb(128,128,128)",
    "grey": "rgb(128,128,128)",
    "silver": "rgb(192,192,192)",
    "lime": "rgb(0,255,0)",
    "navy": "rgb(0,0,128)",
    "teal": "rgb(0,128,128)",
    "maroon": "rgb(128,0,0)",
    "olive": "rgb(128,128,0)",
    "aqua": "rgb(0,255,255)",
    "fuchsia": "rgb(255,0,255)",
    "gold": "rgb(255,215,0)",
    "indigo": "rgb(75,0,130)",
    "violet": "rgb(238,130,238)",
    "coral": "rgb(255,127,80)",
    "salmon": "rgb(250,128,114)",
    "khaki": "rgb(240,230,140)",
    "crimson": "rgb(220,20,60)",
    "cornflowerblue": "rgb(100,149,237)",
    "steelblue": "rgb(70,130,180)",
    "rebeccapurple": "rgb(102,51,153)",
    "transparent": "rgba(0,0,0,0)",
}


class NamedColorResolver(Protocol):
    """Anything that can turn a color name into an ``rgb()``/``rgba()`` string."""

    def resolve(self, name: str) -> str:
        """Return the functional form of *name*.

        :raises InvalidColorFormat: If the name is unknown.
        """
        ...


class TableResolver:
    """Resolve names against ``NAMED_COLORS``, case-insensitively.

    :param table: Extra or overriding ``name -> rgb string`` entries.  Keys
        are lowercased on construction.
    """

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table: dict[str, str] = dict(NAMED_COLORS)
        if table:
            self._table.update({k.lower(): v for k, v in table.items()})

    def resolve(self, name: str) -> str:
        try:
            return self._table[name.lower()]
        except KeyError:
            raise InvalidColorFormat(
                name, f"Unknown color name: {name!r}"
            ) from None

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._table

    def names(self) -> list[str]:
        return sorted(self._table)


DEFAULT_RESOLVER = TableResolver()
