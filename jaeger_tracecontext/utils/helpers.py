"""Helpers for rendering and parsing trace identifiers."""

from __future__ import annotations

import string
from typing import Optional

from opentelemetry.sdk.trace.id_generator import IdGenerator, RandomIdGenerator

_HEX_DIGITS = frozenset(string.hexdigits)
_default_id_generator = RandomIdGenerator()


def is_hex(value: str) -> bool:
    """
    Check that a string is non-empty and made only of hex digits.

    ``int(value, 16)`` alone is too lenient: it accepts signs, whitespace,
    underscores and a ``0x`` prefix.
    """
    return bool(value) and all(c in _HEX_DIGITS for c in value)


def format_trace_id(trace_id: int) -> str:
    """
    Format a trace id as a hex string.

    Args:
        trace_id: 128-bit trace id

    Returns:
        32-character lowercase hex string
    """
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """
    Format a span id as a hex string.

    Args:
        span_id: 64-bit span id

    Returns:
        16-character lowercase hex string
    """
    return format(span_id, '016x')


def parse_trace_id(hex_string: str) -> int:
    """
    Parse a hex trace id.

    Raises:
        ValueError: if the string is not hex
    """
    if not is_hex(hex_string):
        raise ValueError(f"invalid trace id: {hex_string!r}")
    return int(hex_string, 16)


def parse_span_id(hex_string: str) -> int:
    """
    Parse a hex span id.

    Raises:
        ValueError: if the string is not hex
    """
    if not is_hex(hex_string):
        raise ValueError(f"invalid span id: {hex_string!r}")
    return int(hex_string, 16)


def generate_span_id(id_generator: Optional[IdGenerator] = None) -> int:
    """Mint a new random 64-bit span id using an OpenTelemetry id generator."""
    return (id_generator or _default_id_generator).generate_span_id()
