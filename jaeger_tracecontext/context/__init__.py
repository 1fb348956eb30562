"""Trace context propagation over text map carriers."""

from jaeger_tracecontext.context.carrier import DictTextMap, TextMap, as_text_map
from jaeger_tracecontext.context.codec import Codec, W3CTextMapCodec
from jaeger_tracecontext.context.otel_propagator import JaegerTraceContextPropagator
from jaeger_tracecontext.context.propagators import (
    format_traceparent,
    is_valid_traceparent,
    merge_tracestate,
    parse_traceparent,
    split_tracestate,
)

__all__ = [
    "TextMap",
    "DictTextMap",
    "as_text_map",
    "Codec",
    "W3CTextMapCodec",
    "JaegerTraceContextPropagator",
    "format_traceparent",
    "is_valid_traceparent",
    "parse_traceparent",
    "split_tracestate",
    "merge_tracestate",
]
