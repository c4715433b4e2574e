"""Speaker directions and the per-file test plan."""

import cmath
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Mapping, Tuple

from .exceptions import TestPlanError


class Direction(Enum):
    """Intended speaker direction of one tone segment.

    Declaration order is the order segments appear in every output file.
    Downstream tools identify segments purely by position.
    """
    CENTER = "center"
    RIGHT_FRONT = "right front"
    RIGHT_MIDDLE = "right middle"
    RIGHT_REAR = "right rear"
    REAR_CENTER = "rear center"
    LEFT_REAR = "left rear"
    LEFT_MIDDLE = "left middle"
    LEFT_FRONT = "left front"


DIRECTION_ORDER: Tuple[Direction, ...] = tuple(Direction)


def polar(magnitude: float, phase: float = 0.0) -> complex:
    """Complex tone value from magnitude and phase (radians)."""
    return cmath.rect(magnitude, phase)


@dataclass(frozen=True)
class DirectionalTone:
    """Steady-state tone for one direction, one complex value per encoded channel."""
    left: complex
    right: complex

    @classmethod
    def from_polar(
        cls,
        left: Tuple[float, float],
        right: Tuple[float, float],
    ) -> "DirectionalTone":
        """Build from ``(magnitude, phase)`` pairs."""
        return cls(polar(*left), polar(*right))


class TestPlan:
    """Ordered set of eight directional tones written into one file."""

    __test__ = False

    def __init__(self, tones: Mapping[Direction, DirectionalTone]):
        """
        Initialize test plan.

        Args:
            tones: One DirectionalTone for every Direction

        Raises:
            TestPlanError: If a direction is missing or a key is not a Direction
        """
        unknown = [key for key in tones if not isinstance(key, Direction)]
        if unknown:
            raise TestPlanError(f"Unknown directions in test plan: {unknown}")

        missing = [d.value for d in DIRECTION_ORDER if d not in tones]
        if missing:
            raise TestPlanError(
                f"Test plan is missing directions: {', '.join(missing)}"
            )

        self._tones: Dict[Direction, DirectionalTone] = {
            d: tones[d] for d in DIRECTION_ORDER
        }

    def __getitem__(self, direction: Direction) -> DirectionalTone:
        return self._tones[direction]

    def __iter__(self) -> Iterator[Tuple[Direction, DirectionalTone]]:
        for direction in DIRECTION_ORDER:
            yield direction, self._tones[direction]

    def __len__(self) -> int:
        return len(self._tones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TestPlan):
            return NotImplemented
        return self._tones == other._tones

    def __repr__(self) -> str:
        return f"TestPlan({', '.join(d.name for d in self._tones)})"
