"""
Base signal generators

Each factory returns a stateless ContinuousSignal. Periodic generators
use truncated remainder (math.fmod), so the sign of the result follows
the sign of t.
"""

import math
from typing import Optional

import numpy as np

from .base import ContinuousSignal


class Impulse(ContinuousSignal):
    """x(t) = 1 if t == 0 else 0"""

    def evaluate(self, t: float) -> complex:
        return complex(1.0, 0.0) if t == 0 else complex(0.0, 0.0)

    def __repr__(self):
        return "Impulse()"


class Step(ContinuousSignal):
    """x(t) = 1 if t >= 0 else 0"""

    def evaluate(self, t: float) -> complex:
        return complex(1.0, 0.0) if t >= 0 else complex(0.0, 0.0)

    def __repr__(self):
        return "Step()"


class Constant(ContinuousSignal):
    """x(t) = value for every t"""

    def __init__(self, value: complex):
        self.value = complex(value)

    def evaluate(self, t: float) -> complex:
        return self.value

    def __repr__(self):
        return f"Constant({self.value!r})"


class Sinusoid(ContinuousSignal):
    """Sinusoid with phase centred on offset/2

    kind is one of 'complex', 'sine' or 'cosine'. The argument is
    w * (t + offset / 2) with w = 2*pi*freq.
    """

    KINDS = ("complex", "sine", "cosine")

    def __init__(self, freq: float, offset: float = 0.0, kind: str = "complex"):
        if kind not in self.KINDS:
            raise ValueError(f"Unknown sinusoid kind: {kind}")
        self.freq = float(freq)
        self.offset = float(offset)
        self.kind = kind
        self._omega = 2.0 * np.pi * self.freq

    def evaluate(self, t: float) -> complex:
        phase = self._omega * (t + self.offset / 2.0)
        if self.kind == "sine":
            return complex(np.sin(phase), 0.0)
        if self.kind == "cosine":
            return complex(np.cos(phase), 0.0)
        return complex(np.exp(1j * phase))

    def __repr__(self):
        return f"Sinusoid(freq={self.freq}, offset={self.offset}, kind={self.kind!r})"


class Triangle(ContinuousSignal):
    """Real periodic sawtooth-style triangle, (2*freq*(t+0.5)) mod 2 - 1"""

    def __init__(self, freq: float):
        self.freq = float(freq)

    def evaluate(self, t: float) -> complex:
        return complex(math.fmod(2.0 * self.freq * (t + 0.5), 2.0) - 1.0, 0.0)

    def __repr__(self):
        return f"Triangle(freq={self.freq})"


class Square(ContinuousSignal):
    """Real periodic square wave

    +1 when (freq*t mod 1) lies in (-inf, -0.5) or (0, 0.5), else -1.
    Exactly 0 and exactly 0.5 resolve to -1.
    """

    def __init__(self, freq: float):
        self.freq = float(freq)

    def evaluate(self, t: float) -> complex:
        a = math.fmod(self.freq * t, 1.0)
        if a < -0.5 or 0.0 < a < 0.5:
            return complex(1.0, 0.0)
        return complex(-1.0, 0.0)

    def __repr__(self):
        return f"Square(freq={self.freq})"


class SampleHold(ContinuousSignal):
    """Zero-order hold over a discrete signal

    x(t) = samples.get(floor(t * sample_rate)), zero outside the stored range.
    """

    def __init__(self, samples, sample_rate: Optional[float] = None):
        self.samples = samples
        self.sample_rate = float(sample_rate if sample_rate is not None else samples.sample_rate)

    def evaluate(self, t: float) -> complex:
        return self.samples.get(math.floor(t * self.sample_rate))

    def __repr__(self):
        return f"SampleHold(len={len(self.samples)}, sample_rate={self.sample_rate})"


def impulse() -> ContinuousSignal:
    """Impulse signal"""
    return Impulse()


def step() -> ContinuousSignal:
    """Unit step signal"""
    return Step()


def constant(value: complex) -> ContinuousSignal:
    """Constant signal"""
    return Constant(value)


def complex_exponential(freq: float, offset: float = 0.0) -> ContinuousSignal:
    """Complex sinusoid exp(i*2*pi*freq*(t + offset/2))"""
    return Sinusoid(freq, offset, kind="complex")


def sine(freq: float, offset: float = 0.0) -> ContinuousSignal:
    """Real sine signal"""
    return Sinusoid(freq, offset, kind="sine")


def cosine(freq: float, offset: float = 0.0) -> ContinuousSignal:
    """Real cosine signal"""
    return Sinusoid(freq, offset, kind="cosine")


def triangle(freq: float) -> ContinuousSignal:
    """Real periodic triangle signal (period of 1 second at freq=1)"""
    return Triangle(freq)


def square(freq: float) -> ContinuousSignal:
    """Real periodic square signal (period of 1 second at freq=1)"""
    return Square(freq)


def hold(samples, sample_rate: Optional[float] = None) -> ContinuousSignal:
    """Continuous view of a DiscreteSignal by zero-order hold"""
    return SampleHold(samples, sample_rate)
