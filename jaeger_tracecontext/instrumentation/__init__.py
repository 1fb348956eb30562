"""Header helpers for HTTP clients and servers."""

from jaeger_tracecontext.instrumentation.http_client import inject_headers as inject_http_headers
from jaeger_tracecontext.instrumentation.http_server import extract_parent_context

__all__ = [
    "inject_http_headers",
    "extract_parent_context",
]
