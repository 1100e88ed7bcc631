from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like an editor does: halves always go up, never to even."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def normalize(
    value: float,
    source_min: float,
    source_max: float,
    target_min: float = 0,
    target_max: float = 10,
) -> int:
    """
    Rescale value from [source_min, source_max] onto [target_min, target_max].

    The position inside the source range is rounded to two decimals before it
    is projected onto the target range, so values that only differ by float
    noise land on the same step. Callers are responsible for clamping value
    into the source range first.
    """
    source_range = source_max - source_min
    target_range = target_max - target_min
    fraction = round_half_up((value - source_min) / source_range, 2)
    return int(round_half_up(target_min + fraction * target_range))
