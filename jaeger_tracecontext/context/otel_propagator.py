"""OpenTelemetry TextMapPropagator backed by the W3C Jaeger codec."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterator, List, Optional, Set, Tuple

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.propagators.textmap import (
    CarrierT,
    Getter,
    Setter,
    TextMapPropagator,
    default_getter,
    default_setter,
)
from opentelemetry.trace import NonRecordingSpan, TraceFlags, TraceState
from opentelemetry.trace import SpanContext as OTelSpanContext

from jaeger_tracecontext.context.carrier import find_last
from jaeger_tracecontext.context.codec import W3CTextMapCodec
from jaeger_tracecontext.context.layout import TRACEPARENT_HEADER, TRACESTATE_HEADER
from jaeger_tracecontext.tracer.span_context import SAMPLED_FLAG, SpanContext


class _OTelTextMap:
    """
    Presents an OTel carrier plus getter/setter as a TextMap.

    Without a getter the carrier is write-only and iterates as empty.
    Defaults added with :meth:`seed` are iterated before the carrier entries
    and are never written to the carrier themselves.
    """

    def __init__(self, carrier, getter: Optional[Getter] = None, setter: Optional[Setter] = None) -> None:
        self._carrier = carrier
        self._getter = getter
        self._setter = setter
        self._seeded: List[Tuple[str, str]] = []

    def seed(self, key: str, value: str) -> None:
        self._seeded.append((key, value))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        yield from self._seeded
        if self._getter is None:
            return
        for key in self._getter.keys(self._carrier):
            values = self._getter.get(self._carrier, key) or []
            if isinstance(values, str):
                values = [values]
            for value in values:
                yield key, value

    def set(self, key: str, value: str) -> None:
        self._setter.set(self._carrier, key, value)


class JaegerTraceContextPropagator(TextMapPropagator):
    """
    Propagates the current OTel span as ``traceparent`` and ``tracestate``.

    Extraction places the remote parent in the returned context as a
    non-recording span. Debug-only contexts carry no ids and are ignored.
    """

    def __init__(self, codec: Optional[W3CTextMapCodec] = None) -> None:
        self._codec = codec or W3CTextMapCodec()

    @property
    def fields(self) -> Set[str]:
        return {TRACEPARENT_HEADER, TRACESTATE_HEADER}

    def extract(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        getter: Getter[CarrierT] = default_getter,
    ) -> Context:
        if context is None:
            context = Context()

        text_map = _OTelTextMap(carrier, getter=getter)
        extracted = self._codec.extract(text_map)
        if extracted is None or extracted.is_debug_id_container_only:
            return context

        tracestate = find_last(text_map, TRACESTATE_HEADER)
        trace_state = TraceState.from_header([tracestate]) if tracestate else TraceState()

        # the remote span is our parent
        otel_context = OTelSpanContext(
            trace_id=extracted.trace_id,
            span_id=extracted.parent_id,
            is_remote=True,
            trace_flags=TraceFlags(extracted.flags & SAMPLED_FLAG),
            trace_state=trace_state,
        )
        if not otel_context.is_valid:
            return context
        return trace.set_span_in_context(NonRecordingSpan(otel_context), context)

    def inject(
        self,
        carrier: CarrierT,
        context: Optional[Context] = None,
        setter: Setter[CarrierT] = default_setter,
    ) -> None:
        otel_context = trace.get_current_span(context).get_span_context()
        if not otel_context.is_valid:
            return

        # setters cannot read; only mappings can be read back with the default getter
        getter = default_getter if isinstance(carrier, Mapping) else None
        text_map = _OTelTextMap(carrier, getter=getter, setter=setter)
        if len(otel_context.trace_state):
            # entries already in the carrier come later and win
            text_map.seed(TRACESTATE_HEADER, otel_context.trace_state.to_header())

        span_context = SpanContext(
            trace_id=otel_context.trace_id,
            span_id=otel_context.span_id,
            flags=SAMPLED_FLAG if otel_context.trace_flags.sampled else 0,
        )
        self._codec.inject(span_context, text_map)
