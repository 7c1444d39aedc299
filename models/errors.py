"""Exception hierarchy for the EEML model and codec."""

from __future__ import annotations


class EEMLError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(EEMLError, ValueError):
    """A field was given a value outside its allowed domain."""


class NoDataError(EEMLError):
    """An environment without data items cannot be serialized."""

    def __init__(self, message: str = "EEML requires at least one data item") -> None:
        super().__init__(message)


class EEMLParseError(EEMLError, ValueError):
    """The input text is not a usable EEML document."""
