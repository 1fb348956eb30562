"""HTTP client helpers for context propagation."""

from __future__ import annotations

from typing import Dict, Optional

from jaeger_tracecontext.context.codec import W3CTextMapCodec
from jaeger_tracecontext.tracer.span_context import SpanContext


def inject_headers(
    headers: Dict[str, str],
    span_context: Optional[SpanContext],
    codec: Optional[W3CTextMapCodec] = None,
) -> Dict[str, str]:
    """
    Inject traceparent/tracestate into the provided headers dict.

    Nothing is written when there is no valid span context. Returns the same
    headers mapping for convenience.
    """
    if span_context is not None and span_context.is_valid():
        (codec or W3CTextMapCodec()).inject(span_context, headers)
    return headers
