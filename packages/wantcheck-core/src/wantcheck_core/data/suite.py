from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import TypeAdapter, ValidationError

from ..analysis import load_analysis
from ..config import WantcheckConfig
from ..errors import AnalysisError, SuiteError
from ..models.suite import SuiteCaseRec, SuiteRec
from ..reconcile import run
from ..reporting import Reporter


def _read_yaml_raw(path: Path | str) -> Any:
    p = Path(path)
    if not p.exists():
        raise SuiteError(f"File not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SuiteError(f"Unable to decode UTF-8 in {p}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SuiteError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        raise SuiteError(f"Empty YAML file: {p}")

    return data


def load_suite(path: Path | str) -> SuiteRec:
    """Read a suite file. Relative case roots resolve against the file's directory."""
    data = _read_yaml_raw(path)
    try:
        suite = TypeAdapter(SuiteRec).validate_python(data)
    except ValidationError as e:
        raise SuiteError(f"Invalid structure in {path}: {e}") from e

    base = Path(path).resolve().parent
    for case in suite.suites:
        if not Path(case.root).is_absolute():
            case.root = str(base / case.root)
    return suite


def run_suite(
    reporter_for: Callable[[SuiteCaseRec], Reporter],
    suite: SuiteRec,
    config: WantcheckConfig | None = None,
) -> None:
    """Run every case of suite, each with the reporter reporter_for returns."""
    config = config or WantcheckConfig.from_env()
    for case in suite.suites:
        t = reporter_for(case)
        try:
            analysis = load_analysis(case.analysis)
        except AnalysisError as e:
            t.errorf("%s: %s", case.name, e)
            continue
        case_config = replace(config, marker=case.marker) if case.marker else config
        run(t, case.root, analysis, *case.packages, config=case_config)
