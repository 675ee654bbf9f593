"""
Environment-driven configuration for wantcheck.

Environment flags (all optional):

    WANTCHECK_SOURCE_MARKER = directory name
        Default: "src". The source-root segment of a project tree. Package
        identifiers resolve under <root>/<marker>/, and positions are made
        relative to it.

    WANTCHECK_TESTDATA = path
        Default: "testdata". Directory returned by workspace.testdata().
        Relative values resolve against the current working directory.

    WANTCHECK_LOG_LEVEL = "DEBUG" | "INFO" | "WARNING" | "ERROR"
        Default: "WARNING". Unknown names fall back to the default.

    WANTCHECK_TRACE = "0" | "1"
        Default: "0". If "1", every pipeline stage logs at DEBUG.
"""

import logging
import os
from dataclasses import dataclass

DEFAULT_MARKER = "src"
DEFAULT_TESTDATA = "testdata"


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _env_level(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    level = logging.getLevelName(val.strip().upper())
    if isinstance(level, int):
        return level
    return default


@dataclass(frozen=True)
class WantcheckConfig:
    marker: str = DEFAULT_MARKER
    testdata: str = DEFAULT_TESTDATA
    log_level: int = logging.WARNING
    trace: bool = False

    @classmethod
    def from_env(cls) -> "WantcheckConfig":
        marker = os.getenv("WANTCHECK_SOURCE_MARKER", DEFAULT_MARKER).strip().strip("/")
        if not marker:
            marker = DEFAULT_MARKER
        testdata = os.getenv("WANTCHECK_TESTDATA", DEFAULT_TESTDATA).strip() or DEFAULT_TESTDATA
        return cls(
            marker=marker,
            testdata=testdata,
            log_level=_env_level("WANTCHECK_LOG_LEVEL", logging.WARNING),
            trace=_env_bool("WANTCHECK_TRACE", False),
        )
