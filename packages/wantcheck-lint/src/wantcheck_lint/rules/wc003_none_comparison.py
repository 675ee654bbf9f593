import ast

from .base import BaseRule


class NoneComparisonRule(BaseRule):
    CODE = "WC003"
    MESSAGE = "comparison to None should use 'is' or 'is not'"

    def visit_Compare(self, node: ast.Compare):
        left = node.left
        for op, right in zip(node.ops, node.comparators):
            if isinstance(op, (ast.Eq, ast.NotEq)) and (self._is_none(left) or self._is_none(right)):
                suggestion = "is" if isinstance(op, ast.Eq) else "is not"
                self._report(node, f"comparison to None should use '{suggestion}'")
            left = right
        self.generic_visit(node)

    @staticmethod
    def _is_none(node: ast.AST) -> bool:
        return isinstance(node, ast.Constant) and node.value is None
