"""Exceptions raised by the noise library."""


class NoiseError(Exception):
    """Base class for all errors raised by this package."""


class InvalidParamError(NoiseError, ValueError):
    """An invalid parameter was passed to a function or method."""


class NoModuleError(NoiseError, LookupError):
    """A required source module was not connected to a noise module."""