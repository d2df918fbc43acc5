"""Noise module that maps a source module's output onto a terrace-forming curve."""

from __future__ import annotations

import bisect
from typing import Optional

from .base import Module
from .errors import InvalidParamError
from .interp import clamp_value, linear_interp


class Terrace(Module):
    """Maps the source module's output onto a terrace-forming curve.

    The curve is defined by two or more sorted, unique control points.  Between
    two neighbouring control points the output rises along a quadratic curve,
    which may be inverted.
    """

    SOURCE_MODULE_COUNT = 1

    def __init__(self, source: Optional[Module] = None) -> None:
        super().__init__()
        self._control_points: list[float] = []
        self._inverted = False
        if source is not None:
            self.set_source_module(0, source)

    @property
    def source(self) -> Module:
        """The connected source module."""
        return self.get_source_module(0)

    @source.setter
    def source(self, module: Module) -> None:
        self.set_source_module(0, module)

    @property
    def control_points(self) -> tuple[float, ...]:
        """The control points, in ascending order."""
        return tuple(self._control_points)

    @property
    def control_point_count(self) -> int:
        """Number of control points on the curve."""
        return len(self._control_points)

    @property
    def terraces_inverted(self) -> bool:
        """Whether the curve between control points is inverted."""
        return self._inverted

    def invert_terraces(self, invert: bool = True) -> None:
        """Enable or disable inversion of the curve between control points."""
        self._inverted = invert

    def add_control_point(self, value: float) -> None:
        """Insert a control point; raises InvalidParamError on a duplicate value."""
        position = bisect.bisect_left(self._control_points, value)
        if position < len(self._control_points) and self._control_points[position] == value:
            raise InvalidParamError(f"control point {value} already exists")
        self._control_points.insert(position, value)

    def clear_all_control_points(self) -> None:
        """Delete every control point."""
        self._control_points.clear()

    def make_control_points(self, control_point_count: int) -> None:
        """Replace the control points with ``control_point_count`` evenly spaced
        points from -1.0 to 1.0."""
        if control_point_count < 2:
            raise InvalidParamError(
                f"at least 2 control points are required, got {control_point_count}"
            )
        self.clear_all_control_points()
        step = 2.0 / (control_point_count - 1.0)
        current = -1.0
        for _ in range(control_point_count):
            self.add_control_point(current)
            current += step

    def get_value(self, x: float, y: float, z: float) -> float:
        source = self.get_source_module(0)
        points = self._control_points
        if len(points) < 2:
            raise InvalidParamError("a terrace needs at least 2 control points")

        source_value = source.get_value(x, y, z)

        # Index of the first control point greater than the source value.
        index = bisect.bisect_right(points, source_value)
        last = len(points) - 1
        index0 = clamp_value(index - 1, 0, last)
        index1 = clamp_value(index, 0, last)

        if index0 == index1:
            return points[index1]

        value0 = points[index0]
        value1 = points[index1]
        alpha = (source_value - value0) / (value1 - value0)
        if self._inverted:
            alpha = 1.0 - alpha
            value0, value1 = value1, value0

        alpha *= alpha
        return linear_interp(value0, value1, alpha)