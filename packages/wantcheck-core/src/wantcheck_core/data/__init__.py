from .suite import load_suite, run_suite

__all__ = ["load_suite", "run_suite"]
