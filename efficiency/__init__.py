"""Pure sorting-efficiency analysis package.

This package contains deterministic, testable computations that operate on
in-memory scan and route records and return DTOs. It must not import Django or
perform any database I/O.
"""

from .engine import analyze_sorting_efficiency
from .errors import ValidationError

__all__ = ["analyze_sorting_efficiency", "ValidationError"]
