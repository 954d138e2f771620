"""
Discrete-time signals

A DiscreteSignal is a finite vector of complex samples. Reads outside
the stored range yield zero, which the shift and differentiate
operations rely on at the boundaries. Every operation returns a new
signal of the same length; the source signal is never modified.
"""

import logging
from typing import Iterable, Optional

import numpy as np

from .noise import NoiseSource, default_noise_source
from .vector import SampleVector

logger = logging.getLogger(__name__)


class DiscreteSignal(SampleVector):
    """Discrete time signal"""

    @classmethod
    def from_reals(cls, data: Iterable[float],
                   sample_rate: Optional[float] = None) -> "DiscreteSignal":
        """Create new signal from real numbers (zero imaginary part)"""
        return cls(np.asarray(list(data), dtype=np.float64), sample_rate)

    def _derive(self, data: np.ndarray) -> "DiscreteSignal":
        # Only an empty signal has a zero rate; let it default again
        return DiscreteSignal(data, self.sample_rate or None)

    def shift(self, k: int) -> "DiscreteSignal":
        """Shift signal by k samples: y[n] = x[n-k]

        Samples shifted past either end are dropped and the vacated
        positions are zero-filled. The length does not change.
        """
        n = len(self._data)
        out = np.zeros(n, dtype=np.complex128)
        if abs(k) < n:
            if k >= 0:
                out[k:] = self._data[:n - k]
            else:
                out[:n + k] = self._data[-k:]
        return self._derive(out)

    def integrate(self) -> "DiscreteSignal":
        """Running sum: y[n] = sum of x[k] for k <= n"""
        return self._derive(np.cumsum(self._data))

    def differentiate(self) -> "DiscreteSignal":
        """First difference: y[n] = x[n] - x[n-1], with x[-1] = 0"""
        return self._derive(np.diff(self._data, prepend=0))

    def energy(self) -> float:
        """E = sum of |x[n]|^2 for all n (0.0 for an empty signal)"""
        e = float(np.sum((self._data * np.conj(self._data)).real))
        assert e >= 0.0
        return e

    def power(self) -> float:
        """P = E / N"""
        if len(self._data) == 0:
            raise ValueError("Power is undefined for an empty signal")
        return self.energy() / len(self._data)

    def add_noise(self, std_dev: float,
                  source: Optional[NoiseSource] = None) -> "DiscreteSignal":
        """Add real-valued Gaussian noise N(0, std_dev) to each sample

        Only the real part is perturbed; imaginary parts pass through.
        """
        source = source or default_noise_source()
        noise = source.sample_normal(0.0, std_dev, len(self._data))
        logger.debug(f"Adding noise (std={std_dev}) to {len(self._data)} samples")
        return self._derive(self._data + noise)
