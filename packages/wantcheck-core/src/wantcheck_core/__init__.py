from .analysis import analyze, load_analysis
from .errors import AnalysisError, LoadError, SuiteError, WantcheckError
from .loader import load_package
from .position import sanitize
from .reconcile import check_findings, run
from .reporting import FailureCollector, LoggingReporter, Reporter
from .workspace import materialize, testdata, write_files

__all__ = [
    "AnalysisError",
    "FailureCollector",
    "LoadError",
    "LoggingReporter",
    "Reporter",
    "SuiteError",
    "WantcheckError",
    "analyze",
    "check_findings",
    "load_analysis",
    "load_package",
    "materialize",
    "run",
    "sanitize",
    "testdata",
    "write_files",
]
