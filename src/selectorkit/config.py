from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    json_indent: int | None = None  # None = compact output
    json_ensure_ascii: bool = False
    log_level: str = "WARNING"
