from __future__ import annotations


class InvalidColorFormat(ValueError):
    """Raised when a string is not a recognized color.

    :param color: The offending input, kept on the exception as ``.color``.
    :param message: Optional override for the default message.
    """

    def __init__(self, color: str, message: str | None = None) -> None:
        self.color = color
        if message is None:
            message = f"Unrecognized color string: {color!r}"
        super().__init__(message)
