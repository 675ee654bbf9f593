class WantcheckError(Exception):
    """Base class for infrastructure failures."""


class LoadError(WantcheckError):
    """A package could not be resolved, read or parsed."""


class AnalysisError(WantcheckError):
    """The analysis could not be resolved or raised while running."""


class SuiteError(WantcheckError):
    """A suite file is missing or malformed."""
