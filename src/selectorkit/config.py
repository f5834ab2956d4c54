from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorKitConfig:
    indent: int | None = None  # None keeps JSON output compact
    sort_keys: bool = False
    log_level: str = "WARNING"
