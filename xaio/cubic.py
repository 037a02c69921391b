"""One-dimensional cubic Bézier easing curve used by the animation key."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_TOLERANCE = 0.00001


def bezier(a: float, b: float, m: float) -> float:
    """Evaluate a cubic Bézier coordinate with fixed end points 0 and 1 at ``m``."""
    return 3.0 * a * (1.0 - m) * (1.0 - m) * m + 3.0 * b * (1.0 - m) * m * m + m * m * m


@dataclass
class Cubic:
    """A cubic easing curve described by its control values."""

    curves: Sequence[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.curves = [float(value) for value in self.curves]

    def get_value(self, time: float) -> float:
        """Return the eased value at ``time``, extrapolating linearly outside [0, 1]."""
        curves = self.curves

        if time <= 0.0:
            gradient = 0.0
            if curves[0] > 0.0:
                gradient = curves[1] / curves[0]
            elif curves[1] == 0.0 and curves[2] > 0.0:
                gradient = curves[3] / curves[2]
            return gradient * time

        if time >= 1.0:
            gradient = 0.0
            if curves[2] < 1.0:
                gradient = (curves[3] - 1.0) / (curves[2] - 1.0)
            elif curves[2] == 1.0 and curves[0] < 1.0:
                gradient = (curves[1] - 1.0) / (curves[0] - 1.0)
            return 1.0 + gradient * (time - 1.0)

        low, high, mid = 0.0, 1.0, 0.0
        while low < high:
            mid = (low + high) / 2.0
            x = bezier(curves[0], curves[1], mid)
            if abs(time - x) < _TOLERANCE:
                return bezier(curves[1], curves[3], mid)
            if x < time:
                low = mid
            else:
                high = mid

        return bezier(curves[1], curves[3], mid)