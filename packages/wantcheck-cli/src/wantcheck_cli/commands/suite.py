import click
from wantcheck_core.data.suite import load_suite, run_suite
from wantcheck_core.errors import SuiteError
from wantcheck_core.reporting import FailureCollector

from .report import print_failures, print_summary


@click.command("suite")
@click.argument("path", type=click.Path(path_type=str, dir_okay=False, exists=False))
def suite(path: str) -> None:
    """Run every case listed in a YAML suite file."""
    try:
        rec = load_suite(path)
    except SuiteError as e:
        raise click.ClickException(str(e)) from e

    results: list[tuple[str, FailureCollector]] = []

    def reporter_for(case):
        collector = FailureCollector()
        results.append((case.name, collector))
        return collector

    run_suite(reporter_for, rec)

    for name, collector in results:
        print_failures(name, collector)
    if print_summary(results):
        raise SystemExit(1)
