"""Fixed layout of the W3C traceparent value and tracestate limits."""

from __future__ import annotations

from typing import Dict, NamedTuple

TRACEPARENT_HEADER = "traceparent"
TRACESTATE_HEADER = "tracestate"

VERSION = "00"
DELIMITER = "-"

MAX_TRACE_STATES = 32
MAX_TRACE_STATE_ENTRY_SIZE = 256


class Field(NamedTuple):
    offset: int
    width: int

    @property
    def end(self) -> int:
        return self.offset + self.width

    def slice(self, value: str) -> str:
        return value[self.offset:self.end]


def _build_fields(widths: Dict[str, int]) -> Dict[str, Field]:
    fields: Dict[str, Field] = {}
    offset = 0
    for name, width in widths.items():
        fields[name] = Field(offset, width)
        offset += width + len(DELIMITER)
    return fields


# version-traceid-spanid-flags, one delimiter between neighbours
TRACEPARENT_FIELDS = _build_fields({
    "version": len(VERSION),
    "trace_id": 32,
    "span_id": 16,
    "flags": 2,
})

TRACEPARENT_SIZE = TRACEPARENT_FIELDS["flags"].end
