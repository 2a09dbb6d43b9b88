"""Speed multiplier decomposition.

ffmpeg's ``atempo`` filter only accepts factors between 0.5 and 2.0, so a
larger or smaller multiplier has to be expressed as a chain of in-range
factors whose product is the requested speed.

See http://trac.ffmpeg.org/wiki/How%20to%20speed%20up%20/%20slow%20down%20a%20video
"""

import math
from typing import List

ATEMPO_MIN = 0.5
ATEMPO_MAX = 2.0


def split_speed(speed: float) -> List[float]:
    """Split ``speed`` into atempo-sized factors.

    Values inside [0.5, 2.0] (boundaries included) come back as a single
    element. Otherwise every element but the last is exactly 2.0 or 0.5.

    Raises:
        ValueError: If speed is not a positive finite number (0 is the
            "unset" sentinel).
    """
    if not math.isfinite(speed) or speed <= 0:
        raise ValueError(f"Speed must be a positive finite number, got {speed}")

    if speed > ATEMPO_MAX:
        return _speed_up(speed)
    if speed < ATEMPO_MIN:
        return _slow_down(speed)
    return [speed]


def _speed_up(speed: float) -> List[float]:
    factors: List[float] = []
    while speed > ATEMPO_MAX:
        speed = speed / ATEMPO_MAX
        factors.append(ATEMPO_MAX)
    factors.append(speed)
    return factors


def _slow_down(speed: float) -> List[float]:
    factors: List[float] = []
    while speed < ATEMPO_MIN:
        speed = speed / ATEMPO_MIN
        factors.append(ATEMPO_MIN)
    factors.append(speed)
    return factors
