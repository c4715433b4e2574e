"""SQ-style quadraphonic matrix encoder."""

import cmath
import math
from typing import Tuple

# Rear channels are blended into both encoded channels at this level
REAR_BLEND = 0.7
HALF_PI = math.pi / 2


def _shifted(value: complex, phase_shift: float) -> complex:
    """Rear contribution: attenuated by REAR_BLEND and rotated by phase_shift."""
    amplitude, phase = cmath.polar(value)
    return cmath.rect(REAR_BLEND * amplitude, phase + phase_shift)


def sq_encode(
    left_front: complex,
    right_front: complex,
    left_rear: complex,
    right_rear: complex,
) -> Tuple[complex, complex]:
    """
    Encode four discrete channels into two matrixed channels.

    Front channels pass through unattenuated. Each rear channel is
    attenuated and phase shifted into both outputs:

    - left total: left rear at -90 degrees, right rear at 0 degrees
    - right total: left rear at 180 degrees, right rear at +90 degrees

    The front signal is added once more on its own side, so
    ``sq_encode(L, 0, 0, 0) == (2L, 0)``.

    Args:
        left_front: Left front tone
        right_front: Right front tone
        left_rear: Left rear tone
        right_rear: Right rear tone

    Returns:
        Tuple of (left_encoded, right_encoded)
    """
    left_total = left_front + _shifted(left_rear, -HALF_PI) + _shifted(right_rear, 0.0)
    right_total = right_front + _shifted(left_rear, math.pi) + _shifted(right_rear, HALF_PI)

    return left_front + left_total, right_front + right_total
