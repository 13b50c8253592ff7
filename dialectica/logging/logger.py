"""
Logging infrastructure for the dialectica system.

Provides structured logging with:
- Component-specific log files (graph, evaluation, synthesis)
- Log rotation and retention
- Structured graph operation records
"""

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from dialectica.config import LogConfig, config

COMPONENTS = ("graph", "evaluation", "synthesis")


class DialecticaLogger:
    """
    Logger configuration for the dialectica system.

    Features:
    - Structured logging with a bound component
    - Component-specific log files
    - Log rotation and retention
    """

    def __init__(
        self,
        log_dir: Optional[Path] = None,
        rotation: str = "100 MB",
        retention: str = "1 month",
        level: str = "INFO",
        format_string: Optional[str] = None,
        enable_file_logging: bool = True,
        enable_console_logging: bool = True,
    ):
        """
        Initialize the dialectica logger.

        Args:
            log_dir: Directory for log files
            rotation: When to rotate log files
            retention: How long to keep old logs
            level: Default log level
            format_string: Custom format string
            enable_file_logging: Whether to log to files
            enable_console_logging: Whether to log to console
        """
        self.log_dir = log_dir or Path("logs")
        self.rotation = rotation
        self.retention = retention
        self.level = level
        self.handler_ids: list[int] = []

        self.format_string = format_string or LogConfig().format

        # Records logged through the plain loguru logger carry no component
        logger.configure(extra={"component": "system"})

        # Remove default handler
        logger.remove()

        if enable_console_logging:
            self.handler_ids.append(
                logger.add(
                    sys.stderr,
                    format=self.format_string,
                    level=level,
                    colorize=True,
                )
            )

        if enable_file_logging:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self._add_file_handlers()

        self.logger = logger.bind(component="system")

    @classmethod
    def from_config(cls, log_config: LogConfig) -> "DialecticaLogger":
        """Build a logger from a LogConfig section."""
        return cls(
            log_dir=Path(log_config.log_dir),
            rotation=log_config.rotation,
            retention=log_config.retention,
            level=log_config.level,
            format_string=log_config.format,
            enable_file_logging=log_config.enable_file_logging,
            enable_console_logging=log_config.enable_console_logging,
        )

    def _add_file_handlers(self) -> None:
        """Add file handlers for the main log, errors and each component."""
        self.handler_ids.append(
            logger.add(
                self.log_dir / "dialectica.log",
                format=self.format_string,
                level=self.level,
                rotation=self.rotation,
                retention=self.retention,
            )
        )

        for component in COMPONENTS:
            self.handler_ids.append(
                logger.add(
                    self.log_dir / f"{component}.log",
                    format=self.format_string,
                    level="DEBUG",
                    rotation=self.rotation,
                    retention=self.retention,
                    filter=lambda record, c=component: record["extra"].get("component") == c,
                )
            )

        # Error log (ERROR and above only)
        self.handler_ids.append(
            logger.add(
                self.log_dir / "errors.log",
                format=self.format_string,
                level="ERROR",
                rotation=self.rotation,
                retention=self.retention,
            )
        )

    def get_logger(self, component: str) -> Any:
        """
        Get a logger bound to a specific component.

        Args:
            component: Component name (e.g., "graph", "evaluation", "synthesis")

        Returns:
            Logger instance bound to the component
        """
        return logger.bind(component=component)

    def shutdown(self) -> None:
        """Remove every handler this instance installed."""
        for handler_id in self.handler_ids:
            logger.remove(handler_id)
        self.handler_ids = []


def get_dialectica_logger(component: str = "system") -> Any:
    """
    Get a component-specific logger.

    Args:
        component: Component name

    Returns:
        Logger instance

    Example:
        >>> log = get_dialectica_logger("graph")
        >>> log.debug("Added argument")
    """
    return logger.bind(component=component)


def log_graph_operation(logger_instance: Any, operation: str, **kwargs: Any) -> None:
    """
    Log an argument graph operation.

    Args:
        logger_instance: Logger to use
        operation: Operation type (e.g., "add_argument", "add_supports")
        **kwargs: Additional context
    """
    logger_instance.debug(
        f"Graph operation: {operation}",
        operation=operation,
        timestamp=datetime.now(timezone.utc).isoformat(),
        **kwargs,
    )


# Global logger instance
_dialectica_logger: Optional[DialecticaLogger] = None


def initialize_logging(
    log_config: Optional[LogConfig] = None, **kwargs: Any
) -> DialecticaLogger:
    """
    Initialize the dialectica logging system.

    This should be called once at application startup.

    Args:
        log_config: Logging section of the configuration (defaults to the global config)
        **kwargs: Overrides passed straight to DialecticaLogger

    Returns:
        Configured DialecticaLogger instance
    """
    global _dialectica_logger

    if _dialectica_logger is not None:
        _dialectica_logger.shutdown()

    if kwargs:
        _dialectica_logger = DialecticaLogger(**kwargs)
    else:
        if log_config is None:
            log_config = config.logging
        _dialectica_logger = DialecticaLogger.from_config(log_config)
    return _dialectica_logger


def get_logger_instance() -> Optional[DialecticaLogger]:
    """Get the global logger instance."""
    return _dialectica_logger
