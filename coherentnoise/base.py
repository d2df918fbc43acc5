"""Abstract base class for noise modules."""

from __future__ import annotations

import abc
from typing import Optional

from .errors import InvalidParamError, NoModuleError


class Module(abc.ABC):
    """A noise module producing a value for every point in 3D space.

    Subclasses set ``SOURCE_MODULE_COUNT`` to the number of source modules
    they require and implement :meth:`get_value`.
    """

    SOURCE_MODULE_COUNT: int = 0

    def __init__(self) -> None:
        self._sources: list[Optional[Module]] = [None] * self.SOURCE_MODULE_COUNT

    @property
    def source_module_count(self) -> int:
        """Number of source modules this module requires."""
        return self.SOURCE_MODULE_COUNT

    def get_source_module(self, index: int) -> Module:
        """Return the source module connected at ``index``.

        Raises NoModuleError if the index is out of range or nothing is connected.
        """
        if not 0 <= index < len(self._sources):
            raise NoModuleError(f"no source module slot {index}")
        module = self._sources[index]
        if module is None:
            raise NoModuleError(f"no source module connected at index {index}")
        return module

    def set_source_module(self, index: int, module: Module) -> None:
        """Connect ``module`` as the source module at ``index``.

        Raises InvalidParamError if the index is out of range.
        """
        if not 0 <= index < len(self._sources):
            raise InvalidParamError(
                f"source module index {index} out of range 0..{len(self._sources) - 1}"
            )
        self._sources[index] = module

    @abc.abstractmethod
    def get_value(self, x: float, y: float, z: float) -> float:
        """Return the output value at the point (x, y, z)."""

    def __call__(self, x: float, y: float, z: float) -> float:
        return self.get_value(x, y, z)