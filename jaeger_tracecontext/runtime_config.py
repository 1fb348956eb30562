"""Runtime configuration state management."""

from typing import Any, Dict

from jaeger_tracecontext.errors import ConfigError

_DEFAULTS: Dict[str, Any] = {
    "trace_state_vendor_key": "jaeger",
    "debug_id_header": "jaeger-debug-id",
    "debug": False,
}

# Global runtime configuration state
_config: Dict[str, Any] = dict(_DEFAULTS)


def set_trace_state_vendor_key(value: str) -> None:
    if not value or "=" in value or "," in value:
        raise ConfigError(
            "Invalid tracestate vendor key",
            {"vendor_key": value},
        )
    _config["trace_state_vendor_key"] = value


def get_trace_state_vendor_key() -> str:
    return _config["trace_state_vendor_key"]


def set_debug_id_header(value: str) -> None:
    if not value:
        raise ConfigError("Debug id header name must not be empty")
    _config["debug_id_header"] = value


def get_debug_id_header() -> str:
    return _config["debug_id_header"]


def set_debug(value: bool) -> None:
    _config["debug"] = value


def get_debug() -> bool:
    return _config["debug"]


def reset() -> None:
    """Restore every setting to its default."""
    _config.clear()
    _config.update(_DEFAULTS)
