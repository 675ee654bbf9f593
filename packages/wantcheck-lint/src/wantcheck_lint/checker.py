from ast import AST

from .rules.base import BaseRule
from .rules.wc001_unused_variable import UnusedVariableRule
from .rules.wc002_path_from_file import PathFromFileRule
from .rules.wc003_none_comparison import NoneComparisonRule

RULES: dict[str, type[BaseRule]] = {
    rule.CODE: rule
    for rule in (
        UnusedVariableRule,
        PathFromFileRule,
        NoneComparisonRule,
    )
}


class DefaultChecker:
    def __init__(self, tree: AST, filename: str):
        self.tree = tree
        self.filename = filename

    def run(self):
        for rule in RULES.values():
            yield from rule(self.tree, self.filename).run()
