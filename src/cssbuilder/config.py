from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None

    @classmethod
    def from_env(cls) -> CssBuilderConfig:
        """Build a config from ``CSSBUILDER_*`` environment variables.

        Raises ValueError naming the variable when a value is not usable.
        """
        level = os.environ.get("CSSBUILDER_LOG_LEVEL", "").strip().upper() or cls.log_level
        if level not in LOG_LEVELS:
            raise ValueError(
                f"CSSBUILDER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
            )

        raw_indent = os.environ.get("CSSBUILDER_JSON_INDENT", "").strip()
        indent: int | None = None
        if raw_indent:
            if not raw_indent.isdecimal():
                raise ValueError(
                    f"CSSBUILDER_JSON_INDENT must be a non-negative integer, got {raw_indent!r}"
                )
            indent = int(raw_indent)

        return cls(log_level=level, json_indent=indent)
