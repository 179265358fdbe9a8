from __future__ import annotations

import math
from enum import Enum

_SQRT_3 = math.sqrt(3.0)


class Orientation(Enum):
    """Pointy-top or flat-top hexagon framing.

    The orientation selects the linear transform between axial coordinates
    and pixel space (y pointing down, unit hex size) and, through it, the
    rotation applied to every direction angle.
    """

    POINTY = "pointy"
    FLAT = "flat"

    @property
    def forward_matrix(self) -> tuple[float, float, float, float]:
        """Row-major 2x2 matrix taking axial ``(q, r)`` to pixel ``(x, y)``."""

        if self is Orientation.POINTY:
            return (_SQRT_3, _SQRT_3 / 2.0, 0.0, 1.5)
        return (1.5, 0.0, _SQRT_3 / 2.0, _SQRT_3)

    @property
    def inverse_matrix(self) -> tuple[float, float, float, float]:
        """Row-major 2x2 matrix taking pixel ``(x, y)`` back to fractional axial."""

        a, b, c, d = self.forward_matrix
        det = a * d - b * c
        return (d / det, -b / det, -c / det, a / det)

    @property
    def phase_degrees(self) -> float:
        """Angle of edge direction 0 from the +x axis, counter clockwise, y up."""

        a, _, c, _ = self.forward_matrix
        # The first matrix column is edge direction 0 in pixel space; flip y.
        return round(-math.degrees(math.atan2(c, a)), 9) + 0.0

    @property
    def phase(self) -> float:
        return math.radians(self.phase_degrees)


__all__ = ["Orientation"]
