"""
Logging infrastructure for dialectica.

Provides structured logging and decorators for tracking graph operations.
"""

from .logger import (
    DialecticaLogger,
    get_dialectica_logger,
    initialize_logging,
    get_logger_instance,
    log_graph_operation,
)

from .decorators import (
    track_graph_operation,
    performance_monitor,
)

__all__ = [
    # Logger
    "DialecticaLogger",
    "get_dialectica_logger",
    "initialize_logging",
    "get_logger_instance",
    "log_graph_operation",
    # Decorators
    "track_graph_operation",
    "performance_monitor",
]
