import pytest
from opentelemetry.sdk.trace.id_generator import IdGenerator

from jaeger_tracecontext import runtime_config

TRACE_ID = 0x4BF92F3577B34DA6A3CE929D0E0E4736
PARENT_ID = 0x00F067AA0BA902B7
LOCAL_SPAN_ID = 0x53995C3F42CD8AD8

TRACEPARENT = "00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01"


class FixedIdGenerator(IdGenerator):
    """Deterministic ids so parsed contexts can be compared exactly."""

    def __init__(self, span_id: int = LOCAL_SPAN_ID, trace_id: int = TRACE_ID) -> None:
        self.span_id = span_id
        self.trace_id = trace_id

    def generate_span_id(self) -> int:
        return self.span_id

    def generate_trace_id(self) -> int:
        return self.trace_id


class PairsTextMap:
    """Ordered multimap carrier; keys may repeat."""

    def __init__(self, pairs=None):
        self.pairs = list(pairs or [])

    def __iter__(self):
        return iter(list(self.pairs))

    def set(self, key, value):
        self.pairs = [(k, v) for k, v in self.pairs if k.lower() != key.lower()]
        self.pairs.append((key, value))

    def get_all(self, key):
        return [v for k, v in self.pairs if k.lower() == key.lower()]


@pytest.fixture(autouse=True)
def _reset_runtime_config():
    runtime_config.reset()
    yield
    runtime_config.reset()


@pytest.fixture
def id_generator():
    return FixedIdGenerator()
