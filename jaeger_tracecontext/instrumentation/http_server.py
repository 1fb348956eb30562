"""HTTP server helpers for extracting the caller's context."""

from __future__ import annotations

from typing import Dict, Optional

from jaeger_tracecontext.context.codec import W3CTextMapCodec
from jaeger_tracecontext.tracer.span_context import SpanContext


def extract_parent_context(
    headers: Dict[str, str],
    codec: Optional[W3CTextMapCodec] = None,
) -> Optional[SpanContext]:
    """
    Parse traceparent (or the debug id header) from request headers.

    Returns None when the request carries no usable context; callers then
    start a new trace.
    """
    return (codec or W3CTextMapCodec()).extract(headers)
