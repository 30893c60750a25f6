"""Exceptions raised by the filesizes library.

Hierarchy::

    FilesizeError
    ├── FilesizeParseError (also a ValueError)
    │   ├── DenominationResolutionError - unit token matches no denomination
    │   └── SizeParseError - no "<number> <unit>" found, or out of range
    ├── ByteCountError - byte count outside the unsigned 64-bit range
    └── InvalidPatternError - numeric pattern cannot format a float
"""

from __future__ import annotations


class FilesizeError(Exception):
    """Base exception for everything raised by filesizes."""


class FilesizeParseError(FilesizeError, ValueError):
    pass


class DenominationResolutionError(FilesizeParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"unresolvable denomination: {token!r}")
        self.token = token


class SizeParseError(FilesizeParseError):
    pass


class ByteCountError(FilesizeError, ValueError):
    pass


class InvalidPatternError(FilesizeError, ValueError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"invalid format pattern: {pattern!r}")
        self.pattern = pattern
