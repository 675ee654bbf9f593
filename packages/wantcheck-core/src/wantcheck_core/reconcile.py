from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .analysis import Analysis, analysis_name, analyze
from .config import DEFAULT_MARKER, WantcheckConfig
from .errors import AnalysisError, LoadError
from .expectations import extract_expectations, key_of
from .loader import Package, load_package
from .log import get_logger, trace
from .models.finding import Finding
from .position import sanitize
from .reporting import Reporter

_logger = get_logger("reconcile")


def check_findings(
    t: Reporter,
    package: Package,
    findings: Iterable[Finding],
    marker: str = DEFAULT_MARKER,
) -> None:
    """Verify findings against the 'want "..."' comments of package.

    Each expectation satisfies at most one finding. Surplus findings,
    findings whose message does not match, and expectations left over are
    reported to t, one failure each.
    """
    wants = extract_expectations(t, package, marker)

    for f in findings:
        posn = sanitize(f.position, marker)
        want = wants.pop(key_of(posn), None)
        if want is None:
            t.errorf("%s: unexpected finding: %s", posn, f.message)
            continue
        if not want.matches(f.message):
            t.errorf("%s: finding %r does not match pattern %r", posn, f.message, want.pattern.pattern)

    for key in sorted(wants):
        want = wants[key]
        t.errorf("%s: expected finding matching %r", want.position, want.pattern.pattern)


def run(
    t: Reporter,
    root: Path | str,
    analysis: Analysis,
    *pkgnames: str,
    config: WantcheckConfig | None = None,
) -> None:
    """Apply analysis to each named package and check its 'want' comments.

    Packages load from root, the top of a project tree laid out as
    <root>/<marker>/<import/path>. A package that fails to load or analyze
    is reported once and skipped; the remaining packages still run.
    """
    config = config or WantcheckConfig.from_env()
    for pkgname in pkgnames:
        trace(_logger, config, "Running %s on %s", analysis_name(analysis), pkgname)
        try:
            pkg = load_package(root, pkgname, config.marker)
        except LoadError as e:
            t.errorf("loading %s: %s", pkgname, e)
            continue

        try:
            findings = analyze(pkg, analysis)
        except AnalysisError as e:
            t.errorf("analyzing %s: %s", pkgname, e)
            continue

        check_findings(t, pkg, findings, config.marker)
        trace(_logger, config, "Checked %d findings in %s", len(findings), pkgname)
