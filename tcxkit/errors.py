"""Typed exceptions raised at the tcxkit core boundary."""

from __future__ import annotations


class DecodeError(ValueError):
    """Raised when a TCX document cannot be decoded into a Database.

    Wraps whatever went wrong underneath (malformed markup, a missing
    required field, a value that does not convert) so callers only ever
    need to catch one exception type. The original exception is chained
    as ``__cause__``.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path  # element path where decoding stopped, if known
