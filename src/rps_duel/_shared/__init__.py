# Area: Shared
"""
rps_duel._shared — Shared utilities
===================================

Logging setup used by the CLI and available to embedding applications.
"""

from .logging_config import JSONFormatter, TerminalFormatter, log_error, setup_logging

__all__ = ["JSONFormatter", "TerminalFormatter", "log_error", "setup_logging"]
