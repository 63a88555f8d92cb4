"""
Rounding helpers shared by the scoring engines.

Python's built-in ``round`` rounds halves to the nearest even number
(``round(10.5) == 10``). Readiness scores, progress and ROI percentages are
published with halves rounded up, so every engine rounds through here.
"""

import math
from typing import Union


def round_half_up(value: float, digits: int = 0) -> Union[int, float]:
    """
    Round ``value`` with halves going up.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        An int when ``digits`` is 0, otherwise a float
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
