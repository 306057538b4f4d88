from __future__ import annotations


class _NotProvided:
    """Marks a builder argument the caller left untouched.

    ``None`` is a meaningful value for several options, so a dedicated
    sentinel is used to tell "not passed" apart from "passed None".
    """

    _instance: _NotProvided | None = None

    def __new__(cls) -> _NotProvided:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NotProvided"

    def __bool__(self) -> bool:
        return False


NotProvided = _NotProvided()
