from .expectation import Expectation
from .finding import Finding
from .position import Position
from .suite import SuiteCaseRec, SuiteRec

__all__ = ["Expectation", "Finding", "Position", "SuiteCaseRec", "SuiteRec"]
