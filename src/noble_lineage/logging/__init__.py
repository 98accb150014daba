"""
Centralized logging for noble_lineage.

Modules call ``get_logger("<module>")`` once at import time and log with
%-style arguments.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
    log_file_for,
    set_console_level,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
    "log_file_for",
    "set_console_level",
]
