"""
rps_duel.errors — Custom exception classes
==========================================

The round itself never raises. These exceptions belong to the edges
of the package: parsing typed moves and loading configuration.
"""

from __future__ import annotations
from typing import Any, List, Optional


class RpsDuelError(Exception):
    """Base exception for all rps_duel package errors."""
    pass


class InvalidMoveError(RpsDuelError):
    """Raised when typed input does not name a move."""

    def __init__(self, raw_input: str):
        self.raw_input = raw_input
        super().__init__(f"Not a move: {raw_input!r} (try rock, paper or scissors)")


class ConfigError(RpsDuelError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        source: Optional[str],
        validation_errors: List[str],
        raw_config: Optional[Any] = None,
    ):
        self.source = source
        self.validation_errors = validation_errors
        self.raw_config = raw_config
        super().__init__(
            f"Invalid configuration from {source or 'defaults'}: {validation_errors}"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_CONFIG",
            source=self.source,
            validation_errors=self.validation_errors,
        )


def _format_error_block(
    error_type: str,
    source: Optional[str],
    validation_errors: List[str],
) -> str:
    """Format a framed error block for the terminal."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " CONFIGURATION ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source or '(defaults and environment)'}",
    ]

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
