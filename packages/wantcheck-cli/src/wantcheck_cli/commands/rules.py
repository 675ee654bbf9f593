import click
from rich.table import Table
from wantcheck_lint.checker import RULES

from .report import console


@click.command("rules")
def rules() -> None:
    """List the bundled reference rules."""
    table = Table(title="Bundled rules")
    table.add_column("Code")
    table.add_column("Rule")
    table.add_column("Description")
    for code, rule in RULES.items():
        table.add_row(code, rule.__name__, rule.MESSAGE)
    console.print(table)
