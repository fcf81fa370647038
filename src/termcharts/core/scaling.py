"""Resampling and quantization of numeric series."""

from __future__ import annotations

import math
from typing import Sequence


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (``2.5 -> 3``)."""
    return math.floor(value + 0.5)


def resample(data: Sequence[float], target_length: int) -> list[float]:
    """Stretch or compress *data* to exactly *target_length* samples.

    Upsampling interpolates linearly between neighbours, so the output never
    leaves the source's [min, max] range. Downsampling averages contiguous
    buckets ``[i*n//t, (i+1)*n//t)``, which partition every source index,
    so no bucket is empty and the newest sample always lands in the last one.
    Equal lengths return an element-wise copy.
    """
    if not data or target_length <= 0:
        return []

    length = len(data)
    if length == target_length:
        return list(data)

    if length < target_length:
        # target_length >= 2 here, so the ratio is well defined.
        ratio = (length - 1) / (target_length - 1)
        result: list[float] = []
        for i in range(target_length):
            pos = i * ratio
            lower = math.floor(pos)
            upper = min(math.ceil(pos), length - 1)
            weight = pos - lower
            if lower == upper:
                result.append(data[lower])
            else:
                result.append(data[lower] * (1 - weight) + data[upper] * weight)
        return result

    result = []
    for i in range(target_length):
        start = i * length // target_length
        end = (i + 1) * length // target_length
        bucket = data[start:end]
        result.append(sum(bucket) / len(bucket))
    return result


def clamp_unit(value: float) -> float:
    """Clamp *value* to [0, 1]; anything that is not above 0 (NaN too) is 0."""
    if not value > 0:
        return 0.0
    if value >= 1:
        return 1.0
    return value


def quantize(value: float, minimum: float, maximum: float, levels: int) -> int:
    """Map *value* within [minimum, maximum] to a level index in [0, levels-1].

    A zero range is treated as 1, so a flat series lands on level 0.
    """
    span = maximum - minimum or 1
    normalized = clamp_unit((value - minimum) / span)
    return min(math.floor(normalized * levels), levels - 1)
