"""Relative difference between two values, in percent."""

import math

# Reported when exactly one value is below the threshold
BIG = 1.0e99


def percentage_difference(value1: float, value2: float, tolerance: float, threshold: float) -> float:
    """Calculate the percentage difference between two values.

    Args:
        value1: Value from the first file
        value2: Value from the second file
        tolerance: Relative tolerance (``1e-2`` is 1%)
        threshold: Absolute magnitude below which a value counts as zero

    Returns:
        0.0 if both values are below threshold or the difference is below
        tolerance; BIG if exactly one value is below threshold; otherwise
        ``|v1 - v2| / max(|v1|, |v2|) * 100``. Non-finite values are equal
        only to themselves (NaN to NaN) and BIG otherwise.
    """
    abs1 = abs(value1)
    abs2 = abs(value2)
    below1 = abs1 < threshold
    below2 = abs2 < threshold
    if below1 and below2:
        return 0.0
    if below1 != below2:
        return BIG

    if value1 == value2 or (math.isnan(value1) and math.isnan(value2)):
        return 0.0
    if not (math.isfinite(value1) and math.isfinite(value2)):
        return BIG

    percentage_diff = abs(value1 - value2) / max(abs1, abs2) * 100.0
    if not math.isfinite(percentage_diff):
        return BIG
    if percentage_diff < tolerance * 100.0:
        return 0.0
    return percentage_diff
