import ast

from .base import BaseRule


class UnusedVariableRule(BaseRule):
    CODE = "WC001"
    MESSAGE = "local variable is assigned but never used"

    def visit_FunctionDef(self, node: ast.FunctionDef):
        self._check_scope(node)
        self.generic_visit(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef):
        self._check_scope(node)
        self.generic_visit(node)

    def _check_scope(self, func: ast.FunctionDef | ast.AsyncFunctionDef):
        assigned: dict[str, ast.Name] = {}
        loaded: set[str] = set()
        exempt: set[str] = set()
        for node in self._walk_scope(func):
            if isinstance(node, (ast.Global, ast.Nonlocal)):
                exempt.update(node.names)
            elif isinstance(node, ast.Assign):
                for target in node.targets:
                    if isinstance(target, ast.Name):
                        self._bind(assigned, target)
            elif isinstance(node, (ast.AnnAssign, ast.AugAssign)) and isinstance(node.target, ast.Name):
                if isinstance(node, ast.AugAssign):
                    loaded.add(node.target.id)
                elif node.value is not None:
                    self._bind(assigned, node.target)
            elif isinstance(node, ast.Name) and isinstance(node.ctx, ast.Load):
                loaded.add(node.id)

        for name, target in assigned.items():
            if name in loaded or name in exempt or name.startswith("_"):
                continue
            self._report(target, f"unused variable {name}")

    def _walk_scope(self, func: ast.FunctionDef | ast.AsyncFunctionDef):
        # names read by nested functions and lambdas count as uses; their own
        # assignments belong to their scope
        pending: list[ast.AST] = list(func.body)
        while pending:
            node = pending.pop()
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)):
                pending.extend(n for n in ast.walk(node) if isinstance(n, ast.Name) and isinstance(n.ctx, ast.Load))
                continue
            yield node
            pending.extend(ast.iter_child_nodes(node))

    @staticmethod
    def _bind(assigned: dict[str, ast.Name], target: ast.Name):
        # report the first assignment in source order
        first = assigned.get(target.id)
        if first is None or (target.lineno, target.col_offset) < (first.lineno, first.col_offset):
            assigned[target.id] = target
