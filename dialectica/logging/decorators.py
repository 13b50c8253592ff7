"""
Decorators for automatic logging of graph operations and slow calls.

These decorators enable traceability without cluttering business logic.
"""

import functools
import time
from typing import Any, Callable

from .logger import get_dialectica_logger, log_graph_operation


def track_graph_operation(operation_type: str) -> Callable:
    """
    Decorator to track argument graph mutations.

    Args:
        operation_type: Type of operation (e.g., "add_argument", "add_supports")

    Example:
        >>> @track_graph_operation("add_argument")
        ... def add_argument(self, data):
        ...     pass
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = get_dialectica_logger("graph")

            try:
                result = func(*args, **kwargs)

                log_graph_operation(
                    log,
                    operation=operation_type,
                    function=func.__name__,
                    result=str(getattr(result, "argument_id", result))[:200],
                )

                return result

            except Exception as e:
                log.debug(
                    f"Graph operation rejected: {operation_type}",
                    operation=operation_type,
                    function=func.__name__,
                    error=str(e),
                )
                raise

        return wrapper

    return decorator


def performance_monitor(threshold_ms: float = 1000.0) -> Callable:
    """
    Decorator to monitor function performance.

    Logs warning if execution exceeds threshold.

    Args:
        threshold_ms: Warning threshold in milliseconds

    Example:
        >>> @performance_monitor(threshold_ms=500)
        ... def find_paths(start_id, end_id):
        ...     pass
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = get_dialectica_logger("system")

            start_time = time.perf_counter()

            try:
                result = func(*args, **kwargs)
                elapsed_ms = (time.perf_counter() - start_time) * 1000

                if elapsed_ms > threshold_ms:
                    log.warning(
                        f"Performance threshold exceeded: {func.__name__}",
                        function=func.__name__,
                        elapsed_ms=elapsed_ms,
                        threshold_ms=threshold_ms,
                    )
                else:
                    log.debug(
                        f"Function executed: {func.__name__}",
                        function=func.__name__,
                        elapsed_ms=elapsed_ms,
                    )

                return result

            except Exception:
                elapsed_ms = (time.perf_counter() - start_time) * 1000
                log.debug(
                    f"Function failed: {func.__name__}",
                    function=func.__name__,
                    elapsed_ms=elapsed_ms,
                )
                raise

        return wrapper

    return decorator
