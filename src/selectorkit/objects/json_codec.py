"""JSON helpers: serialise objects and rebuild typed instances from JSON."""

from __future__ import annotations

import json
from typing import Any

from selectorkit.config import SelectorKitConfig

__all__ = ["get_json", "from_json"]


def _drop_callables(value: Any) -> Any:
    """Remove callable dict values and null out callable list items."""
    if isinstance(value, dict):
        return {
            key: _drop_callables(item)
            for key, item in value.items()
            if not callable(item)
        }
    if isinstance(value, (list, tuple)):
        return [None if callable(item) else _drop_callables(item) for item in value]
    return value


def _encode_object(obj: Any) -> dict[str, Any]:
    """Fallback encoder: plain objects become their non-callable attributes."""
    if not callable(obj) and hasattr(obj, "__dict__"):
        return _drop_callables(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any, config: SelectorKitConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact (no whitespace) unless ``config.json_indent`` is set.
    Keys keep their insertion order. Callable values are left out of objects
    and become ``null`` inside arrays. NaN and infinities raise ``ValueError``.
    """
    cfg = config or SelectorKitConfig()
    separators = (",", ":") if cfg.json_indent is None else None
    return json.dumps(
        _drop_callables(obj),
        indent=cfg.json_indent,
        separators=separators,
        ensure_ascii=cfg.json_ensure_ascii,
        allow_nan=False,
        default=_encode_object,
    )


def from_json(proto: type | object, json_text: str) -> Any:
    """Return a new instance of *proto* populated from *json_text*.

    *proto* is a class, or an instance whose class is used. ``__init__`` is
    not called; the parsed top-level keys become the instance attributes
    as-is (shallow, no shape validation). Slotted classes and frozen
    dataclasses are supported.
    """
    cls = proto if isinstance(proto, type) else type(proto)
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    instance = cls.__new__(cls)
    for key, value in data.items():
        object.__setattr__(instance, key, value)
    return instance
