"""W3C trace context primitives: traceparent layout and tracestate merging."""

from __future__ import annotations

from typing import List, Optional

from opentelemetry.sdk.trace.id_generator import IdGenerator

from jaeger_tracecontext.context.layout import (
    DELIMITER,
    MAX_TRACE_STATE_ENTRY_SIZE,
    MAX_TRACE_STATES,
    TRACEPARENT_FIELDS,
    TRACEPARENT_SIZE,
    VERSION,
)
from jaeger_tracecontext.errors import MalformedTraceParentError
from jaeger_tracecontext.tracer.span_context import SAMPLED_FLAG, SpanContext
from jaeger_tracecontext.utils.helpers import (
    format_span_id,
    format_trace_id,
    generate_span_id,
    is_hex,
    parse_span_id,
    parse_trace_id,
)

_TRACE_ID = TRACEPARENT_FIELDS["trace_id"]
_SPAN_ID = TRACEPARENT_FIELDS["span_id"]
_FLAGS = TRACEPARENT_FIELDS["flags"]


def format_traceparent(context: SpanContext) -> str:
    """
    Format a traceparent header value.

    The span id written is the context's own span id; receivers treat it as
    their parent. Trailing vendor fields are never emitted.
    """
    return DELIMITER.join((
        VERSION,
        format_trace_id(context.trace_id),
        format_span_id(context.span_id),
        "01" if context.is_sampled else "00",
    ))


def is_valid_traceparent(candidate: str) -> bool:
    """
    Check the length and delimiter positions of a traceparent value.

    Only the layout is checked; field contents are validated when parsing.
    """
    if not isinstance(candidate, str):
        return False
    if len(candidate) < TRACEPARENT_SIZE:
        return False
    if len(candidate) > TRACEPARENT_SIZE and candidate[TRACEPARENT_SIZE] != DELIMITER:
        return False
    return all(
        candidate[field.offset - 1] == DELIMITER
        for field in (_TRACE_ID, _SPAN_ID, _FLAGS)
    )


def parse_traceparent(
    header_value: str,
    id_generator: Optional[IdGenerator] = None,
) -> SpanContext:
    """
    Parse a traceparent header into a SpanContext.

    The received span id becomes ``parent_id`` and a new span id is minted
    for the local span. Only a flags value of exactly 1 marks the context
    sampled.

    Raises:
        MalformedTraceParentError: if the layout or a field is invalid
    """
    if not is_valid_traceparent(header_value):
        raise MalformedTraceParentError(
            "traceparent does not match the W3C layout",
            {"traceparent": header_value},
        )

    flags_text = _FLAGS.slice(header_value)
    try:
        trace_id = parse_trace_id(_TRACE_ID.slice(header_value))
        parent_id = parse_span_id(_SPAN_ID.slice(header_value))
    except ValueError as exc:
        raise MalformedTraceParentError(
            str(exc),
            {"traceparent": header_value},
        ) from exc
    if not is_hex(flags_text):
        raise MalformedTraceParentError(
            "traceparent flags are not hex",
            {"traceparent": header_value},
        )

    flags = SAMPLED_FLAG if int(flags_text, 16) == 1 else 0
    return SpanContext(
        trace_id=trace_id,
        span_id=generate_span_id(id_generator),
        parent_id=parent_id,
        flags=flags,
    )


def split_tracestate(header_value: Optional[str]) -> List[str]:
    """
    Split a tracestate header into its raw entries.

    A missing or blank header is an empty list. Whitespace around entries is
    trimmed and empty entries are dropped.
    """
    if not header_value:
        return []
    return [entry.strip() for entry in header_value.split(",") if entry.strip()]


def format_vendor_entry(vendor_key: str, context: SpanContext) -> str:
    return f"{vendor_key}={context.context_as_string()}"


def merge_tracestate(
    header_value: Optional[str],
    vendor_key: str,
    context: SpanContext,
) -> Optional[str]:
    """
    Put a fresh vendor entry in front of the existing tracestate entries.

    Entries starting with ``vendor_key`` (case-sensitive) are replaced; all
    other entries keep their order.

    Returns:
        New header value, or None when the existing list is full or the
        vendor entry would exceed the per-entry size limit
    """
    entries = split_tracestate(header_value)
    if len(entries) >= MAX_TRACE_STATES:
        return None

    vendor_entry = format_vendor_entry(vendor_key, context)
    if len(vendor_entry) > MAX_TRACE_STATE_ENTRY_SIZE:
        return None

    foreign = [entry for entry in entries if not entry.startswith(vendor_key)]
    return ",".join([vendor_entry] + foreign)
