"""Carrier capability used by the text map codecs."""

from __future__ import annotations

from collections import abc
from typing import Any, Dict, Iterator, MutableMapping, Optional, Protocol, Tuple, runtime_checkable

from jaeger_tracecontext.errors import UnsupportedCarrierError


@runtime_checkable
class TextMap(Protocol):
    """
    Ordered key/value carrier.

    Codecs only need two things from a carrier: walk its entries in order and
    store a value under a key.
    """

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class DictTextMap:
    """
    Adapts a plain headers ``dict`` to :class:`TextMap`.

    Writes drop every key equal to ``key`` ignoring case before storing, so
    the dict never holds two spellings of one header.
    """

    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None) -> None:
        self.mapping: MutableMapping[str, str] = mapping if mapping is not None else {}

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self.mapping.items()))

    def set(self, key: str, value: str) -> None:
        lowered = key.lower()
        for existing in [k for k in self.mapping if k.lower() == lowered]:
            del self.mapping[existing]
        self.mapping[key] = value

    def __repr__(self) -> str:
        return f"DictTextMap({self.mapping!r})"


def as_text_map(carrier: Any) -> TextMap:
    """
    Coerce a carrier into a :class:`TextMap`.

    Mutable mappings (plain dicts, case-insensitive header dicts) are wrapped
    in :class:`DictTextMap`.

    Raises:
        UnsupportedCarrierError: if the carrier is neither a TextMap nor a
            mutable mapping
    """
    if isinstance(carrier, TextMap):
        return carrier
    if isinstance(carrier, abc.MutableMapping):
        return DictTextMap(carrier)
    raise UnsupportedCarrierError(
        "Carrier must be a TextMap or a mutable mapping",
        {"carrier_type": type(carrier).__name__},
    )


def find_last(carrier: TextMap, key: str) -> Optional[str]:
    """Return the value of the last entry whose key equals ``key`` ignoring case."""
    lowered = key.lower()
    found = None
    for entry_key, value in carrier:
        if entry_key.lower() == lowered:
            found = value
    return found


def find_last_many(carrier: TextMap, *keys: str) -> Dict[str, Optional[str]]:
    """
    Single pass version of :func:`find_last` for several keys.

    Result is keyed by the lowercased key names.
    """
    found: Dict[str, Optional[str]] = {key.lower(): None for key in keys}
    for entry_key, value in carrier:
        lowered = entry_key.lower()
        if lowered in found:
            found[lowered] = value
    return found
