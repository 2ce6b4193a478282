"""Analysis operations, rendering and the dispatcher."""

from .dispatcher import AnalysisDispatcher
from .operations import OPERATIONS, AnalysisOperation, OperationKind, get_operation

__all__ = [
    "OPERATIONS",
    "AnalysisDispatcher",
    "AnalysisOperation",
    "OperationKind",
    "get_operation",
]
