"""
Discrete signal and spectrum analysis modules for DSP-MCP
"""

from .discrete import DiscreteSignal
from .noise import NoiseSource, default_noise_source
from .spectrum import Spectrum, ForwardFFT, InverseFFT

__all__ = [
    "DiscreteSignal",
    "NoiseSource",
    "default_noise_source",
    "Spectrum",
    "ForwardFFT",
    "InverseFFT"
]
