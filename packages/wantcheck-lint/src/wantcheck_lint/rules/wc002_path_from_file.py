import ast

from .base import BaseRule


class PathFromFileRule(BaseRule):
    CODE = "WC002"
    MESSAGE = "avoid using Path(__file__) or os.path.* for resource loading; use importlib.resources"

    def visit_Call(self, node: ast.Call):
        if self._is_path_file(node):
            self._report(node, "avoid using Path(__file__)")
        if self._is_os_path_call(node, "dirname") and self._single_file_arg(node):
            self._report(node, "avoid using os.path.dirname(__file__)")
        if self._is_os_path_call(node, "join") and any(self._is_file_name(arg) for arg in node.args):
            self._report(node, "avoid using os.path.join(...) with __file__")
        self.generic_visit(node)

    def visit_Attribute(self, node: ast.Attribute):
        if node.attr == "parent" and isinstance(node.value, ast.Call) and self._is_path_file(node.value):
            self._report(node, "avoid accessing Path(__file__).parent")
        self.generic_visit(node)

    @staticmethod
    def _is_file_name(node: ast.AST) -> bool:
        return isinstance(node, ast.Name) and node.id == "__file__"

    def _single_file_arg(self, node: ast.Call) -> bool:
        return len(node.args) == 1 and self._is_file_name(node.args[0])

    def _is_path_file(self, node: ast.Call) -> bool:
        return isinstance(node.func, ast.Name) and node.func.id == "Path" and self._single_file_arg(node)

    def _is_os_path_call(self, node: ast.Call, attr: str) -> bool:
        return (
            isinstance(node.func, ast.Attribute)
            and node.func.attr == attr
            and isinstance(node.func.value, ast.Attribute)
            and node.func.value.attr == "path"
            and isinstance(node.func.value.value, ast.Name)
            and node.func.value.value.id == "os"
        )
