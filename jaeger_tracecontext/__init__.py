"""W3C Trace Context codec with Jaeger tracestate and debug id support."""

from jaeger_tracecontext.context import (
    Codec,
    DictTextMap,
    JaegerTraceContextPropagator,
    TextMap,
    W3CTextMapCodec,
)
from jaeger_tracecontext.errors import (
    ConfigError,
    MalformedContextError,
    MalformedTraceParentError,
    TraceContextError,
    UnsupportedCarrierError,
    ValidationError,
)
from jaeger_tracecontext.tracer.span_context import SpanContext

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Codec",
    "W3CTextMapCodec",
    "JaegerTraceContextPropagator",
    "TextMap",
    "DictTextMap",
    "SpanContext",
    "TraceContextError",
    "ConfigError",
    "ValidationError",
    "MalformedTraceParentError",
    "MalformedContextError",
    "UnsupportedCarrierError",
]
