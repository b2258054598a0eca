"""Error types raised by CPE name handling.

Both concrete errors derive from :class:`CPEError`, which is a ``ValueError``
so callers that only care about "bad input" can catch the builtin.
"""

from __future__ import annotations

from typing import Any

__all__ = ["CPEError", "IllegalArgumentError", "ParseError"]


class CPEError(ValueError):
    """Base error carrying a kind tag, a message and the offending value.

    The wrapped cause, when present, is the chained ``__cause__`` set by
    ``raise ... from err`` and is exposed as :attr:`cause`.
    """

    kind = "error"

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        if self.value is None:
            return self.message
        return f"{self.message}: {self.value!r}"


class IllegalArgumentError(CPEError):
    """Raised on caller misuse (unknown attribute, wrong value shape)."""

    kind = "illegal_argument"


class ParseError(CPEError):
    """Raised when external text or an attribute string is malformed."""

    kind = "parse"
