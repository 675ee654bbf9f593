import ast
from typing import Generator, Tuple, Type


class BaseRule(ast.NodeVisitor):
    CODE: str = ""
    MESSAGE: str = ""

    def __init__(self, tree: ast.AST, filename: str):
        self.tree = tree
        self.filename = filename
        self.violations: list[Tuple[int, int, str]] = []

    def run(self) -> Generator[Tuple[int, int, str, Type["BaseRule"]], None, None]:
        """Scan the AST and yield violations."""
        self.visit(self.tree)
        for lineno, col, msg in self.violations:
            yield (lineno, col, f"{self.CODE} {msg}", type(self))

    def _report(self, node: ast.AST, msg: str):
        self.violations.append((node.lineno, node.col_offset, msg))
