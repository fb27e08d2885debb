"""Aggregation helpers shared by the efficiency calculators and exports."""

from __future__ import annotations

from collections.abc import Iterable


def mean(values: Iterable[float]) -> float:
    """Compute an arithmetic mean.

    Args:
        values: Numeric values.

    Returns:
        The mean, or 0.0 when no values exist.
    """

    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    if count == 0:
        return 0.0
    return total / count


def safe_ratio(numerator: float, denominator: float) -> float:
    """Return `numerator / denominator`, or 0.0 when the denominator is not positive."""

    if denominator <= 0:
        return 0.0
    return numerator / denominator
