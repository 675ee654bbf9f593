import pytest
from wantcheck_core.reporting import FailureCollector
from wantcheck_core.workspace import write_files


@pytest.fixture
def project():
    """Materialize filemaps as temporary project trees, removed after the test."""
    cleanups = []

    def make(filemap):
        root, cleanup = write_files(filemap)
        cleanups.append(cleanup)
        return root

    yield make
    for cleanup in cleanups:
        cleanup()


@pytest.fixture
def collector():
    return FailureCollector()


@pytest.fixture
def reporting():
    """Build an analysis that reports fixed (line, message) pairs in every file."""

    def make(*results):
        class FixedAnalysis:
            def __init__(self, tree, filename):
                self.tree = tree
                self.filename = filename

            def run(self):
                for line, message in results:
                    yield (line, 0, message, type(self))

        return FixedAnalysis

    return make


def lines(*text: str) -> str:
    return "\n".join(text) + "\n"


@pytest.fixture
def source():
    """Join source lines so that text[0] is line 1."""
    return lines
