"""Noise modules that transform the input point or the output value of a source module."""

from __future__ import annotations

import math
from typing import Optional

from .base import Module
from .interp import DEG_TO_RAD

DEFAULT_ROTATE_X = 0.0
DEFAULT_ROTATE_Y = 0.0
DEFAULT_ROTATE_Z = 0.0

DEFAULT_BIAS = 0.0
DEFAULT_SCALE = 1.0

DEFAULT_SCALE_POINT_X = 1.0
DEFAULT_SCALE_POINT_Y = 1.0
DEFAULT_SCALE_POINT_Z = 1.0

DEFAULT_TRANSLATE_POINT_X = 0.0
DEFAULT_TRANSLATE_POINT_Y = 0.0
DEFAULT_TRANSLATE_POINT_Z = 0.0


class _SingleSourceModule(Module):
    """A module that reads from exactly one source module."""

    SOURCE_MODULE_COUNT = 1

    def __init__(self, source: Optional[Module] = None) -> None:
        super().__init__()
        if source is not None:
            self.set_source_module(0, source)

    @property
    def source(self) -> Module:
        """The connected source module."""
        return self.get_source_module(0)

    @source.setter
    def source(self, module: Module) -> None:
        self.set_source_module(0, module)


class RotatePoint(_SingleSourceModule):
    """Rotates the input point around the origin before querying the source module.

    Angles are in degrees; the coordinate system is left-handed (x right,
    y up, z inward).
    """

    def __init__(
        self,
        x_angle: float = DEFAULT_ROTATE_X,
        y_angle: float = DEFAULT_ROTATE_Y,
        z_angle: float = DEFAULT_ROTATE_Z,
        source: Optional[Module] = None,
    ) -> None:
        super().__init__(source)
        self.set_angles(x_angle, y_angle, z_angle)

    def set_angles(self, x_angle: float, y_angle: float, z_angle: float) -> None:
        """Set the rotation angles around the x, y and z axes, in degrees."""
        x_cos = math.cos(x_angle * DEG_TO_RAD)
        y_cos = math.cos(y_angle * DEG_TO_RAD)
        z_cos = math.cos(z_angle * DEG_TO_RAD)
        x_sin = math.sin(x_angle * DEG_TO_RAD)
        y_sin = math.sin(y_angle * DEG_TO_RAD)
        z_sin = math.sin(z_angle * DEG_TO_RAD)

        self._matrix = (
            (
                y_sin * x_sin * z_sin + y_cos * z_cos,
                x_cos * z_sin,
                y_sin * z_cos - y_cos * x_sin * z_sin,
            ),
            (
                y_sin * x_sin * z_cos - y_cos * z_sin,
                x_cos * z_cos,
                -y_cos * x_sin * z_cos - y_sin * z_sin,
            ),
            (
                -y_sin * x_cos,
                x_sin,
                y_cos * x_cos,
            ),
        )
        self._x_angle = x_angle
        self._y_angle = y_angle
        self._z_angle = z_angle

    @property
    def matrix(self) -> tuple[tuple[float, float, float], ...]:
        """The 3x3 rotation matrix, one tuple per row."""
        return self._matrix

    @property
    def x_angle(self) -> float:
        """Rotation angle around the x axis, in degrees."""
        return self._x_angle

    @x_angle.setter
    def x_angle(self, value: float) -> None:
        self.set_angles(value, self._y_angle, self._z_angle)

    @property
    def y_angle(self) -> float:
        """Rotation angle around the y axis, in degrees."""
        return self._y_angle

    @y_angle.setter
    def y_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, value, self._z_angle)

    @property
    def z_angle(self) -> float:
        """Rotation angle around the z axis, in degrees."""
        return self._z_angle

    @z_angle.setter
    def z_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, self._y_angle, value)

    def get_value(self, x: float, y: float, z: float) -> float:
        source = self.get_source_module(0)
        nx, ny, nz = (r0 * x + r1 * y + r2 * z for r0, r1, r2 in self._matrix)
        return source.get_value(nx, ny, nz)


class ScaleBias(_SingleSourceModule):
    """Multiplies the source module's output by a scale and adds a bias."""

    def __init__(
        self,
        scale: float = DEFAULT_SCALE,
        bias: float = DEFAULT_BIAS,
        source: Optional[Module] = None,
    ) -> None:
        super().__init__(source)
        self.scale = scale
        self.bias = bias

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.get_source_module(0).get_value(x, y, z) * self.scale + self.bias


class ScalePoint(_SingleSourceModule):
    """Scales the coordinates of the input point before querying the source module."""

    def __init__(
        self,
        x_scale: float = DEFAULT_SCALE_POINT_X,
        y_scale: float = DEFAULT_SCALE_POINT_Y,
        z_scale: float = DEFAULT_SCALE_POINT_Z,
        source: Optional[Module] = None,
    ) -> None:
        super().__init__(source)
        self.set_scale(x_scale, y_scale, z_scale)

    def set_scale(
        self,
        x_scale: float,
        y_scale: Optional[float] = None,
        z_scale: Optional[float] = None,
    ) -> None:
        """Set the per-axis scaling factors; a single factor applies to all three axes."""
        if y_scale is None and z_scale is None:
            y_scale = z_scale = x_scale
        elif y_scale is None or z_scale is None:
            raise TypeError("set_scale takes either one factor or three")
        self.x_scale = x_scale
        self.y_scale = y_scale
        self.z_scale = z_scale

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.get_source_module(0).get_value(
            x * self.x_scale, y * self.y_scale, z * self.z_scale
        )


class TranslatePoint(_SingleSourceModule):
    """Moves the input point before querying the source module."""

    def __init__(
        self,
        x_translation: float = DEFAULT_TRANSLATE_POINT_X,
        y_translation: float = DEFAULT_TRANSLATE_POINT_Y,
        z_translation: float = DEFAULT_TRANSLATE_POINT_Z,
        source: Optional[Module] = None,
    ) -> None:
        super().__init__(source)
        self.set_translation(x_translation, y_translation, z_translation)

    def set_translation(
        self,
        x_translation: float,
        y_translation: Optional[float] = None,
        z_translation: Optional[float] = None,
    ) -> None:
        """Set the per-axis translations; a single amount applies to all three axes."""
        if y_translation is None and z_translation is None:
            y_translation = z_translation = x_translation
        elif y_translation is None or z_translation is None:
            raise TypeError("set_translation takes either one amount or three")
        self.x_translation = x_translation
        self.y_translation = y_translation
        self.z_translation = z_translation

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.get_source_module(0).get_value(
            x + self.x_translation, y + self.y_translation, z + self.z_translation
        )