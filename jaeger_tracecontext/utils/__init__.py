"""Utility functions for the trace context codec."""

from jaeger_tracecontext.utils.helpers import (
    is_hex,
    format_trace_id,
    format_span_id,
    parse_trace_id,
    parse_span_id,
    generate_span_id,
)

__all__ = [
    "is_hex",
    "format_trace_id",
    "format_span_id",
    "parse_trace_id",
    "parse_span_id",
    "generate_span_id",
]
