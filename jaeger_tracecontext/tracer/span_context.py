"""Immutable trace metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jaeger_tracecontext.errors import MalformedContextError
from jaeger_tracecontext.utils.helpers import is_hex

SAMPLED_FLAG = 0x01
DEBUG_FLAG = 0x02


@dataclass(frozen=True)
class SpanContext:
    """
    Jaeger span context as carried across process boundaries.

    Ids are unsigned integers: ``trace_id`` is 128 bit, ``span_id`` and
    ``parent_id`` are 64 bit. ``parent_id`` is 0 for a root span.
    """

    trace_id: int
    span_id: int
    parent_id: int = 0
    flags: int = 0
    debug_id: Optional[str] = None

    @classmethod
    def with_debug_id(cls, debug_id: str) -> "SpanContext":
        """Build a container that only carries a debug correlation id."""
        return cls(trace_id=0, span_id=0, parent_id=0, flags=0, debug_id=debug_id)

    @property
    def is_sampled(self) -> bool:
        return bool(self.flags & SAMPLED_FLAG)

    @property
    def is_debug(self) -> bool:
        return bool(self.flags & DEBUG_FLAG)

    @property
    def is_debug_id_container_only(self) -> bool:
        return self.trace_id == 0 and self.debug_id is not None

    def is_valid(self) -> bool:
        return bool(self.trace_id and self.span_id)

    def context_as_string(self) -> str:
        """Serialize as ``trace:span:parent:flags`` in unpadded hex."""
        return f"{self.trace_id:x}:{self.span_id:x}:{self.parent_id:x}:{self.flags:x}"

    @classmethod
    def from_string(cls, value: str) -> "SpanContext":
        """
        Parse the output of :meth:`context_as_string`.

        Raises:
            MalformedContextError: if the value is not four hex fields
        """
        if not value:
            raise MalformedContextError("Empty span context string")

        parts = value.split(":")
        if len(parts) != 4:
            raise MalformedContextError(
                "Span context string must have four fields",
                {"value": value},
            )

        limits = (32, 16, 16, 2)
        for part, limit in zip(parts, limits):
            if not is_hex(part) or len(part) > limit:
                raise MalformedContextError(
                    "Span context field is not a hex value of the expected size",
                    {"value": value, "field": part},
                )

        trace_id, span_id, parent_id, flags = (int(part, 16) for part in parts)
        return cls(trace_id=trace_id, span_id=span_id, parent_id=parent_id, flags=flags)
