"""Tests for the tracestate merge performed on inject."""

import pytest

from conftest import PARENT_ID, TRACE_ID
from jaeger_tracecontext.context.layout import MAX_TRACE_STATE_ENTRY_SIZE, MAX_TRACE_STATES
from jaeger_tracecontext.context.propagators import (
    format_vendor_entry,
    merge_tracestate,
    split_tracestate,
)
from jaeger_tracecontext.tracer.span_context import SAMPLED_FLAG, SpanContext

CONTEXT = SpanContext(trace_id=TRACE_ID, span_id=PARENT_ID, flags=SAMPLED_FLAG)
VENDOR_ENTRY = "jaeger=4bf92f3577b34da6a3ce929d0e0e4736:f067aa0ba902b7:0:1"


def test_vendor_entry_format():
    assert format_vendor_entry("jaeger", CONTEXT) == VENDOR_ENTRY


@pytest.mark.parametrize("header", [None, "", "   ", ",", " , ,"])
def test_split_missing_or_blank_is_empty(header):
    assert split_tracestate(header) == []


def test_split_trims_entries():
    assert split_tracestate(" foo=bar ,baz=qux,, ") == ["foo=bar", "baz=qux"]


def test_merge_without_existing_header():
    assert merge_tracestate(None, "jaeger", CONTEXT) == VENDOR_ENTRY


def test_merge_replaces_old_vendor_entry():
    merged = merge_tracestate("jaeger=old,foo=bar", "jaeger", CONTEXT)
    assert merged == f"{VENDOR_ENTRY},foo=bar"


def test_merge_preserves_foreign_order_and_drops_every_vendor_entry():
    merged = merge_tracestate("a=1,jaeger=x,b=2,jaeger=y,c=3", "jaeger", CONTEXT)
    assert merged.split(",") == [VENDOR_ENTRY, "a=1", "b=2", "c=3"]


def test_merge_prefix_match_is_case_sensitive():
    merged = merge_tracestate("Jaeger=keep,jaegerx=drop", "jaeger", CONTEXT)
    assert merged.split(",") == [VENDOR_ENTRY, "Jaeger=keep"]


def test_merge_skipped_when_list_is_full():
    existing = ",".join(f"k{i}=v{i}" for i in range(MAX_TRACE_STATES))
    assert merge_tracestate(existing, "jaeger", CONTEXT) is None


def test_merge_counts_stale_vendor_entry_toward_limit():
    existing = ",".join(["jaeger=old"] + [f"k{i}=v{i}" for i in range(MAX_TRACE_STATES - 1)])
    assert merge_tracestate(existing, "jaeger", CONTEXT) is None


def test_merge_below_limit_adds_entry():
    existing = ",".join(f"k{i}=v{i}" for i in range(MAX_TRACE_STATES - 1))
    merged = merge_tracestate(existing, "jaeger", CONTEXT)
    entries = merged.split(",")
    assert len(entries) == MAX_TRACE_STATES
    assert entries[0] == VENDOR_ENTRY


def test_merge_entry_size_boundary():
    serialized = CONTEXT.context_as_string()
    fits = "v" * (MAX_TRACE_STATE_ENTRY_SIZE - len(serialized) - 1)
    too_long = fits + "v"

    merged = merge_tracestate("foo=bar", fits, CONTEXT)
    assert len(merged.split(",")[0]) == MAX_TRACE_STATE_ENTRY_SIZE

    assert merge_tracestate("foo=bar", too_long, CONTEXT) is None
