import logging
from typing import Protocol

from .log import get_logger


class Reporter(Protocol):
    """Where failures go. Anything with a printf-style ``errorf`` will do."""

    def errorf(self, fmt: str, *args) -> None: ...


def _format(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt


class FailureCollector:
    """Keeps every failure so a test can assert on them."""

    def __init__(self) -> None:
        self.failures: list[str] = []

    def errorf(self, fmt: str, *args) -> None:
        self.failures.append(_format(fmt, args))

    def __len__(self) -> int:
        return len(self.failures)

    def __bool__(self) -> bool:
        return bool(self.failures)

    def assert_clean(self) -> None:
        if self.failures:
            lines = "\n".join(f"  {f}" for f in self.failures)
            raise AssertionError(f"{len(self.failures)} failure(s):\n{lines}")


class LoggingReporter:
    """Sends failures to a logger and counts them."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("report")
        self.count = 0

    def errorf(self, fmt: str, *args) -> None:
        self.count += 1
        self.logger.error(fmt, *args)
