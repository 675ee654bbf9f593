"""
Analysis runner.

An analysis is anything called as ``analysis(tree, filename)`` that returns
an object whose ``run()`` yields flake8-style ``(line, col, message, type)``
tuples. Rule classes built on ``wantcheck_lint.rules.base.BaseRule`` are the
usual case; a checker aggregating several rules works the same way.
"""

from __future__ import annotations

import ast
import importlib
from typing import Any, Iterable, Protocol

from .errors import AnalysisError
from .loader import Package
from .log import get_logger
from .models.finding import Finding

_logger = get_logger("analysis")


class Checker(Protocol):
    def run(self) -> Iterable[tuple[int, int, str, Any]]: ...


class Analysis(Protocol):
    def __call__(self, tree: ast.AST, filename: str) -> Checker: ...


def analysis_name(analysis: Any) -> str:
    return getattr(analysis, "__qualname__", None) or type(analysis).__name__


def _code_of(message: str, kind: Any) -> str:
    code = getattr(kind, "CODE", "")
    if code:
        return code
    head = message.split(" ", 1)[0]
    return head if head[:1].isalpha() and head[1:].isdigit() else ""


def analyze(package: Package, analysis: Analysis) -> list[Finding]:
    """Run analysis over every file of package, in file order."""
    name = analysis_name(analysis)
    findings: list[Finding] = []
    for file in package.files:
        try:
            results = list(analysis(file.tree, file.filename).run())
        except Exception as e:
            raise AnalysisError(f"{name} failed on {file.filename}: {e}") from e

        for result in results:
            try:
                line, _col, message, kind = result
            except (TypeError, ValueError) as e:
                raise AnalysisError(f"{name} yielded malformed result {result!r}") from e
            if not isinstance(line, int) or line < 0 or not isinstance(message, str):
                raise AnalysisError(f"{name} yielded malformed result {result!r}")
            findings.append(
                Finding(
                    position=package.position(file, line),
                    message=message,
                    code=_code_of(message, kind),
                )
            )
    _logger.debug("%s reported %d findings in %s", name, len(findings), package.name)
    return findings


def load_analysis(spec: str) -> Analysis:
    """Resolve an analysis from a ``module:attribute`` string."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise AnalysisError(f"analysis {spec!r} must look like 'package.module:Name'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise AnalysisError(f"cannot import {module_name!r}: {e}") from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise AnalysisError(f"{module_name!r} has no attribute {attr!r}") from e
    if not callable(obj):
        raise AnalysisError(f"{spec!r} is not callable")
    return obj
