# src/domaincloud/errors.py
from typing import Optional


class DomainCloudError(Exception):
    """Base class for all errors raised by domaincloud."""


class StreamError(DomainCloudError):
    """A read or write on an input/output stream failed."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class InputOpenError(DomainCloudError):
    """An input could not be opened for reading."""

    def __init__(self, label: str, reason: str):
        super().__init__(f"Can't open '{label}': {reason}")
        self.label = label
        self.reason = reason


class RenderError(DomainCloudError):
    """The external word cloud renderer could not be run or failed."""
