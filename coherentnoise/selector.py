"""Noise module that picks between two sources according to a control module."""

from __future__ import annotations

from typing import Optional

from .base import Module
from .errors import InvalidParamError
from .interp import linear_interp, s_curve3

DEFAULT_SELECT_EDGE_FALLOFF = 0.0
DEFAULT_SELECT_LOWER_BOUND = -1.0
DEFAULT_SELECT_UPPER_BOUND = 1.0


class Select(Module):
    """Outputs the value of one of two source modules, chosen by a control module.

    Source module 0 is used when the control value lies outside the selection
    range, source module 1 when it lies inside.  Source module 2 is the
    control module.  A positive edge falloff blends the two sources smoothly
    near the bounds of the range.
    """

    SOURCE_MODULE_COUNT = 3

    def __init__(
        self,
        source0: Optional[Module] = None,
        source1: Optional[Module] = None,
        control: Optional[Module] = None,
    ) -> None:
        super().__init__()
        self._lower_bound = DEFAULT_SELECT_LOWER_BOUND
        self._upper_bound = DEFAULT_SELECT_UPPER_BOUND
        self._edge_falloff = DEFAULT_SELECT_EDGE_FALLOFF
        for index, module in enumerate((source0, source1, control)):
            if module is not None:
                self.set_source_module(index, module)

    @property
    def control_module(self) -> Module:
        """The control module; raises NoModuleError if none is connected."""
        return self.get_source_module(2)

    @control_module.setter
    def control_module(self, module: Module) -> None:
        self.set_source_module(2, module)

    @property
    def lower_bound(self) -> float:
        """Lower bound of the selection range."""
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        """Upper bound of the selection range."""
        return self._upper_bound

    @property
    def edge_falloff(self) -> float:
        """Width of the transition at either edge of the selection range."""
        return self._edge_falloff

    @edge_falloff.setter
    def edge_falloff(self, value: float) -> None:
        # Keep the two falloff curves from overlapping.
        half_size = (self._upper_bound - self._lower_bound) / 2
        self._edge_falloff = half_size if value > half_size else value

    def set_bounds(self, lower_bound: float, upper_bound: float) -> None:
        """Set the selection range; the lower bound must be below the upper bound."""
        if not lower_bound < upper_bound:
            raise InvalidParamError(
                f"lower bound {lower_bound} must be less than upper bound {upper_bound}"
            )
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self.edge_falloff = self._edge_falloff

    def get_value(self, x: float, y: float, z: float) -> float:
        first = self.get_source_module(0)
        second = self.get_source_module(1)
        control_value = self.get_source_module(2).get_value(x, y, z)

        lower = self._lower_bound
        upper = self._upper_bound
        falloff = self._edge_falloff

        if falloff > 0.0:
            if control_value < lower - falloff:
                return first.get_value(x, y, z)
            if control_value < lower + falloff:
                low_curve = lower - falloff
                high_curve = lower + falloff
                alpha = s_curve3((control_value - low_curve) / (high_curve - low_curve))
                return linear_interp(
                    first.get_value(x, y, z), second.get_value(x, y, z), alpha
                )
            if control_value < upper - falloff:
                return second.get_value(x, y, z)
            if control_value < upper + falloff:
                low_curve = upper - falloff
                high_curve = upper + falloff
                alpha = s_curve3((control_value - low_curve) / (high_curve - low_curve))
                return linear_interp(
                    second.get_value(x, y, z), first.get_value(x, y, z), alpha
                )
            return first.get_value(x, y, z)

        if control_value < lower or control_value > upper:
            return first.get_value(x, y, z)
        return second.get_value(x, y, z)