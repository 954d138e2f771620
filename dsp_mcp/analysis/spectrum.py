"""
Frequency-domain representation and forward/inverse DFT

Normalization follows scipy.fftpack: the forward transform is
unnormalized and the inverse scales by 1/N, so an inverse of a forward
transform returns the original samples up to rounding.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from scipy.fftpack import fft, ifft, fftfreq

from .discrete import DiscreteSignal
from .vector import SampleVector
from ..utils.validators import validate_transform_size, is_power_of_two

logger = logging.getLogger(__name__)


class Spectrum(SampleVector):
    """Frequency-bin amplitudes tagged with the sample rate of their source"""

    def frequencies(self) -> np.ndarray:
        """Bin centre frequencies in fftfreq order"""
        if len(self) == 0:
            return np.zeros(0)
        return fftfreq(len(self), 1.0 / self.sample_rate)

    def magnitudes(self) -> np.ndarray:
        """Absolute value of each bin"""
        return np.abs(self._data)


class _FFT(ABC):
    """Transform bound to a fixed size"""

    direction: str

    def __init__(self, size: int):
        self.size = validate_transform_size(size)
        if not is_power_of_two(self.size):
            logger.warning(f"FFT size {self.size} is not a power of 2; "
                           "transforms will be slower")
        # Warm the backend's plan cache for this length
        self._primitive(np.zeros(self.size, dtype=np.complex128))
        logger.debug(f"Created {self.direction} FFT of size {self.size}")

    @abstractmethod
    def _primitive(self, data: np.ndarray) -> np.ndarray:
        """Apply the transform to a complex array"""
        pass

    def _check_size(self, v: SampleVector):
        if len(v) != self.size:
            raise ValueError(
                f"{type(self).__name__} configured for size {self.size}, "
                f"got input of length {len(v)}"
            )

    def __repr__(self):
        return f"{type(self).__name__}(size={self.size})"


class ForwardFFT(_FFT):
    """Forward DFT (implemented as FFT)"""

    direction = "forward"

    def _primitive(self, data: np.ndarray) -> np.ndarray:
        return fft(data)

    def process(self, signal: DiscreteSignal) -> Spectrum:
        """Transform a signal of exactly `size` samples into a Spectrum"""
        self._check_size(signal)
        out = self._primitive(signal.to_array())
        return Spectrum(out, signal.sample_rate)


class InverseFFT(_FFT):
    """Inverse DFT (implemented as FFT)"""

    direction = "inverse"

    def _primitive(self, data: np.ndarray) -> np.ndarray:
        return ifft(data)

    def process(self, spectrum: Spectrum) -> DiscreteSignal:
        """Transform a spectrum of exactly `size` bins back into a signal"""
        self._check_size(spectrum)
        out = self._primitive(spectrum.to_array())
        return DiscreteSignal(out, spectrum.sample_rate)
