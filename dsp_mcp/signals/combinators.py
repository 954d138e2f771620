"""
Signal combinators and sampling
"""

import logging

import numpy as np

from .base import ContinuousSignal
from ..utils.validators import validate_sample_step, validate_sample_range

logger = logging.getLogger(__name__)


class Sum(ContinuousSignal):
    """Pointwise sum of two signals"""

    def __init__(self, s1: ContinuousSignal, s2: ContinuousSignal):
        self.s1 = s1
        self.s2 = s2

    def evaluate(self, t: float) -> complex:
        return self.s1.evaluate(t) + self.s2.evaluate(t)

    def __repr__(self):
        return f"Sum({self.s1!r}, {self.s2!r})"


class Scaled(ContinuousSignal):
    """Signal multiplied by a complex constant"""

    def __init__(self, signal: ContinuousSignal, factor: complex):
        self.signal = signal
        self.factor = complex(factor)

    def evaluate(self, t: float) -> complex:
        return self.factor * self.signal.evaluate(t)

    def __repr__(self):
        return f"Scaled({self.signal!r}, {self.factor!r})"


class Modulated(ContinuousSignal):
    """Pointwise product of a signal and a carrier"""

    def __init__(self, signal: ContinuousSignal, carrier: ContinuousSignal):
        self.signal = signal
        self.carrier = carrier

    def evaluate(self, t: float) -> complex:
        return self.signal.evaluate(t) * self.carrier.evaluate(t)

    def __repr__(self):
        return f"Modulated({self.signal!r}, {self.carrier!r})"


def add(s1: ContinuousSignal, s2: ContinuousSignal) -> ContinuousSignal:
    """Add 2 signals"""
    return Sum(s1, s2)


def scale(signal: ContinuousSignal, factor: complex) -> ContinuousSignal:
    """Scale signal by a complex constant"""
    return Scaled(signal, factor)


def modulate(signal: ContinuousSignal, carrier: ContinuousSignal) -> ContinuousSignal:
    """Modulate signal by given carrier"""
    return Modulated(signal, carrier)


def sample(signal: ContinuousSignal, start: float, end: float, step: float) -> np.ndarray:
    """Sample a signal at start, start+step, ... while strictly less than end

    Returns an empty array when start >= end. Raises ValueError for a
    non-positive step or non-finite bounds.
    """
    step = validate_sample_step(step)
    start, end = validate_sample_range(start, end)
    if start >= end:
        return np.zeros(0, dtype=np.complex128)

    # One extra candidate covers rounding in the division; the filter enforces t < end
    count = int(np.ceil((end - start) / step)) + 1
    times = start + step * np.arange(count)
    times = times[times < end]

    logger.debug(f"Sampling {signal!r} at {len(times)} points over [{start}, {end})")
    return np.array([signal.evaluate(t) for t in times], dtype=np.complex128)
