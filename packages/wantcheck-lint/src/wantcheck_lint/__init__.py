from .checker import RULES, DefaultChecker

__all__ = ["RULES", "DefaultChecker"]
