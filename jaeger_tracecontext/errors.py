"""Exceptions raised by the strict parsing and configuration helpers.

Malformed headers never escape the codec extract/inject calls; these are for
callers of the strict helpers, bad settings, and carriers that cannot be read.
"""

from __future__ import annotations


class TraceContextError(Exception):
    """
    Root of the package exceptions.

    ``details`` holds the offending values (header text, key names) and is
    appended to the message when the error is printed.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ConfigError(TraceContextError):
    """A runtime_config setter received a value the codec cannot use."""
    pass


class ValidationError(TraceContextError):
    """Wire input failed a format check."""
    pass


class MalformedTraceParentError(ValidationError):
    """Raised when a traceparent value does not match the W3C layout."""
    pass


class MalformedContextError(ValidationError):
    """Raised when a serialized Jaeger context string cannot be parsed."""
    pass


class UnsupportedCarrierError(TraceContextError):
    """Raised when a carrier cannot be adapted to a text map."""
    pass
