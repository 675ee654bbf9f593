from dataclasses import replace

import click
from wantcheck_core.analysis import load_analysis
from wantcheck_core.config import WantcheckConfig
from wantcheck_core.errors import AnalysisError
from wantcheck_core.reconcile import run as run_packages
from wantcheck_core.reporting import FailureCollector

from .report import print_failures, print_summary


@click.command("run")
@click.argument("root", type=click.Path(path_type=str, file_okay=False, exists=True))
@click.argument("packages", nargs=-1, required=True)
@click.option(
    "--analysis",
    "analysis_spec",
    type=str,
    default="wantcheck_lint:DefaultChecker",
    show_default=True,
    help="Analysis to run, as 'package.module:Name'.",
)
@click.option(
    "--marker",
    type=str,
    default=None,
    help="Source-root directory under ROOT (defaults to WANTCHECK_SOURCE_MARKER or 'src').",
)
def run(root: str, packages: tuple[str, ...], analysis_spec: str, marker: str | None) -> None:
    """Run an analysis on PACKAGES under ROOT and check their 'want' comments."""
    try:
        analysis = load_analysis(analysis_spec)
    except AnalysisError as e:
        raise click.UsageError(str(e)) from e

    config = WantcheckConfig.from_env()
    if marker:
        config = replace(config, marker=marker)

    results = []
    for pkgname in packages:
        collector = FailureCollector()
        run_packages(collector, root, analysis, pkgname, config=config)
        print_failures(pkgname, collector)
        results.append((pkgname, collector))

    if print_summary(results):
        raise SystemExit(1)
