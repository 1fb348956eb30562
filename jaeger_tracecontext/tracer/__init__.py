"""Span context model consumed and produced by the codecs."""

from jaeger_tracecontext.tracer.span_context import DEBUG_FLAG, SAMPLED_FLAG, SpanContext

__all__ = [
    "SpanContext",
    "SAMPLED_FLAG",
    "DEBUG_FLAG",
]
