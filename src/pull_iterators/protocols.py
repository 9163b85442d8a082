"""Protocol definitions for dependency inversion."""

from typing import Any, Callable, Protocol

YieldFunc = Callable[[Any, Any], bool]


class Producer(Protocol):
    """Protocol for push-style sequence producers."""

    def run(self, yield_: YieldFunc) -> None:
        """Call ``yield_`` once per pair until exhausted or told to stop."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
