"""Environment-driven settings for the identity key CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
OUTPUT_FORMATS = {"text", "json"}


@dataclass(frozen=True)
class IdentityCliConfig:
    log_level: str
    output_format: str


def load_identity_cli_config_from_env() -> IdentityCliConfig:
    log_level = os.getenv("LINGUA_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"LINGUA_LOG_LEVEL must be one of: {' | '.join(sorted(LOG_LEVELS))}, got: {log_level!r}"
        )

    output_format = os.getenv("LINGUA_OUTPUT_FORMAT", "text").strip().lower() or "text"
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"LINGUA_OUTPUT_FORMAT must be one of: text | json, got: {output_format!r}")

    return IdentityCliConfig(log_level=log_level, output_format=output_format)
