from __future__ import annotations

from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ObjkitConfig:
    strict_selectors: bool = False  # check every later part, not just neighbours
    json_indent: int | None = None
    sort_keys: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError("json_indent must be non-negative")
