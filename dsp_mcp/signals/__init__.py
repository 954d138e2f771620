"""
Continuous-time signal algebra for DSP-MCP
"""

from .base import ContinuousSignal
from .generators import (
    impulse,
    step,
    constant,
    complex_exponential,
    sine,
    cosine,
    triangle,
    square,
    hold
)
from .combinators import add, scale, modulate, sample

__all__ = [
    "ContinuousSignal",
    "impulse",
    "step",
    "constant",
    "complex_exponential",
    "sine",
    "cosine",
    "triangle",
    "square",
    "hold",
    "add",
    "scale",
    "modulate",
    "sample"
]
