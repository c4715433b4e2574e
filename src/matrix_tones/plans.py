"""Test plans for the calibration files the tool ships."""

import math
from typing import Callable, Dict

from .directions import Direction, DirectionalTone, TestPlan, polar
from .matrix import sq_encode

HALF_POWER = math.sqrt(0.5)  # -3 dB, equal-power pan
HALF_PI = math.pi / 2


def default_plan() -> TestPlan:
    """Plan for default.wav: hand-placed amplitude/phase pairs."""
    tone = DirectionalTone.from_polar
    return TestPlan({
        Direction.CENTER: tone((HALF_POWER, 0.0), (HALF_POWER, 0.0)),
        Direction.RIGHT_FRONT: tone((0.0, 0.0), (1.0, 0.0)),
        Direction.RIGHT_MIDDLE: tone((0.1, HALF_PI), (1.0, 0.0)),
        Direction.RIGHT_REAR: tone((0.1, math.pi), (1.0, 0.0)),
        Direction.REAR_CENTER: tone((HALF_POWER, math.pi), (HALF_POWER, 0.0)),
        Direction.LEFT_REAR: tone((1.0, math.pi), (0.1, 0.0)),
        Direction.LEFT_MIDDLE: tone((1.0, math.pi), (0.1, HALF_PI)),
        Direction.LEFT_FRONT: tone((1.0, 0.0), (0.0, 0.0)),
    })


def sq_plan() -> TestPlan:
    """Plan for sq.wav: middle and rear positions run through the SQ encoder."""
    right_middle = sq_encode(0j, polar(HALF_POWER), 0j, polar(HALF_POWER))
    rear_center = sq_encode(0j, 0j, polar(HALF_POWER), polar(HALF_POWER))
    left_middle = sq_encode(polar(HALF_POWER), 0j, polar(HALF_POWER), 0j)

    # Rear center and left rear slots follow the established sq.wav layout:
    # rear center holds the left rear phase pair, left rear the encoded rear center
    sq_left_rear = DirectionalTone(
        polar(0.7) + polar(0.7, -HALF_PI),
        polar(0.7, HALF_PI) + polar(0.7, math.pi),
    )

    return TestPlan({
        Direction.CENTER: DirectionalTone(polar(HALF_POWER), polar(HALF_POWER)),
        Direction.RIGHT_FRONT: DirectionalTone(0j, polar(1.0)),
        Direction.RIGHT_MIDDLE: DirectionalTone(*right_middle),
        Direction.RIGHT_REAR: DirectionalTone(polar(0.7), polar(0.7, HALF_PI)),
        Direction.REAR_CENTER: sq_left_rear,
        Direction.LEFT_REAR: DirectionalTone(*rear_center),
        Direction.LEFT_MIDDLE: DirectionalTone(*left_middle),
        Direction.LEFT_FRONT: DirectionalTone(polar(1.0), 0j),
    })


# Output filename -> plan factory, in the order files are written
PLANS: Dict[str, Callable[[], TestPlan]] = {
    "default.wav": default_plan,
    "sq.wav": sq_plan,
}
