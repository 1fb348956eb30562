"""Codecs that move a SpanContext in and out of a text map carrier."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from opentelemetry.sdk.trace.id_generator import IdGenerator, RandomIdGenerator

from jaeger_tracecontext import runtime_config
from jaeger_tracecontext.context.carrier import TextMap, as_text_map, find_last, find_last_many
from jaeger_tracecontext.context.layout import TRACEPARENT_HEADER, TRACESTATE_HEADER
from jaeger_tracecontext.context.propagators import (
    format_traceparent,
    merge_tracestate,
    parse_traceparent,
)
from jaeger_tracecontext.errors import MalformedTraceParentError
from jaeger_tracecontext.tracer.span_context import SpanContext

logger = logging.getLogger(__name__)


def _log_level() -> int:
    return logging.INFO if runtime_config.get_debug() else logging.DEBUG


class Codec(ABC):
    """
    Base class for carrier codecs.

    Public methods accept a :class:`TextMap` or a plain dict and delegate to
    the subclass hooks.
    """

    def inject(self, span_context: SpanContext, carrier: Any) -> None:
        self._inject(span_context, as_text_map(carrier))

    def extract(self, carrier: Any) -> Optional[SpanContext]:
        return self._extract(as_text_map(carrier))

    @abstractmethod
    def _inject(self, span_context: SpanContext, carrier: TextMap) -> None:
        ...

    @abstractmethod
    def _extract(self, carrier: TextMap) -> Optional[SpanContext]:
        ...


class W3CTextMapCodec(Codec):
    """
    W3C Trace Context codec with a Jaeger tracestate entry.

    Reads ``traceparent`` (falling back to the debug id header) and writes
    ``traceparent`` plus a merged ``tracestate``. Header names are matched
    ignoring case; when a key repeats, the last entry wins.
    """

    def __init__(
        self,
        vendor_key: Optional[str] = None,
        debug_id_header: Optional[str] = None,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        self.vendor_key = vendor_key or runtime_config.get_trace_state_vendor_key()
        self.debug_id_header = debug_id_header or runtime_config.get_debug_id_header()
        self.id_generator = id_generator or RandomIdGenerator()

    def _extract(self, carrier: TextMap) -> Optional[SpanContext]:
        found = find_last_many(carrier, TRACEPARENT_HEADER, self.debug_id_header)
        traceparent = found[TRACEPARENT_HEADER]
        debug_id = found[self.debug_id_header.lower()]

        if traceparent is None:
            if debug_id is not None:
                return SpanContext.with_debug_id(debug_id)
            return None

        try:
            return parse_traceparent(traceparent, self.id_generator)
        except MalformedTraceParentError as exc:
            logger.log(_log_level(), "Ignoring malformed traceparent: %s", exc)
            return None

    def _inject(self, span_context: SpanContext, carrier: TextMap) -> None:
        carrier.set(TRACEPARENT_HEADER, format_traceparent(span_context))

        existing = find_last(carrier, TRACESTATE_HEADER)
        tracestate = merge_tracestate(existing, self.vendor_key, span_context)
        if tracestate is None:
            logger.log(
                _log_level(),
                "Skipping %s entry in tracestate: limits exceeded (existing=%r)",
                self.vendor_key,
                existing,
            )
            return
        carrier.set(TRACESTATE_HEADER, tracestate)

    def __repr__(self) -> str:
        return (
            f"W3CTextMapCodec(vendor_key={self.vendor_key!r}, "
            f"debug_id_header={self.debug_id_header!r})"
        )
