from rich.console import Console
from rich.markup import escape
from rich.table import Table
from wantcheck_core.reporting import FailureCollector

console = Console()


def print_failures(title: str, collector: FailureCollector) -> None:
    for failure in collector.failures:
        console.print(f"[red]FAIL[/red] [bold]{escape(title)}[/bold] {escape(failure)}", highlight=False, soft_wrap=True)


def print_summary(results: list[tuple[str, FailureCollector]]) -> int:
    """Print a per-package table and return the total failure count."""
    table = Table(title="wantcheck results")
    table.add_column("Package")
    table.add_column("Failures", justify="right")
    table.add_column("Status")

    total = 0
    for name, collector in results:
        total += len(collector)
        status = "[red]FAIL[/red]" if collector else "[green]ok[/green]"
        table.add_row(escape(name), str(len(collector)), status)

    console.print(table)
    return total
