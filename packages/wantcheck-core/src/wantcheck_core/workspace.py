from __future__ import annotations

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Mapping

from .config import DEFAULT_MARKER, WantcheckConfig
from .log import get_logger

_logger = get_logger("workspace")


def write_files(filemap: Mapping[str, str], marker: str = DEFAULT_MARKER) -> tuple[Path, Callable[[], None]]:
    """Create a temporary project tree populated from filemap.

    filemap maps file names, relative to <root>/<marker>/, to contents.
    Returns the root and a function that deletes it. If any file cannot be
    written the partial tree is removed and the error re-raised.
    """
    root = Path(tempfile.mkdtemp(prefix="wantcheck"))

    def cleanup() -> None:
        shutil.rmtree(root, ignore_errors=True)

    try:
        for name, content in filemap.items():
            filename = root / marker / name
            filename.parent.mkdir(parents=True, exist_ok=True)
            filename.write_text(content, encoding="utf-8")
    except OSError:
        cleanup()
        raise

    _logger.debug("Wrote %d files under %s", len(filemap), root)
    return root, cleanup


@contextmanager
def materialize(filemap: Mapping[str, str], marker: str = DEFAULT_MARKER) -> Iterator[Path]:
    root, cleanup = write_files(filemap, marker)
    try:
        yield root
    finally:
        cleanup()


def testdata(config: WantcheckConfig | None = None) -> Path:
    """Absolute path of the testdata directory (WANTCHECK_TESTDATA overrides)."""
    config = config or WantcheckConfig.from_env()
    return Path(config.testdata).resolve()
