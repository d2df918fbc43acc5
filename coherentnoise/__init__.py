"""Coherent-noise generation: noise primitives and composable noise modules."""

__version__ = "0.3.0"

__all__ = [
    "base",
    "errors",
    "generators",
    "interp",
    "noisegen",
    "selector",
    "terrace",
    "transformers",
    "vectortable",
]