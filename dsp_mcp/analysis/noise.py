"""
Gaussian noise source
"""

import logging
import threading
from typing import Optional, Union

import numpy as np

from ..utils.validators import validate_std_dev

logger = logging.getLogger(__name__)

DEFAULT_NOISE_SEED = None  # None draws entropy from the OS


class NoiseSource:
    """Independent normally-distributed real samples

    Wraps a numpy Generator. Draws are serialized with a lock because
    Generator instances are not safe to share across threads.
    """

    def __init__(self, seed: Optional[int] = DEFAULT_NOISE_SEED):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def sample_normal(self, mean: float, std_dev: float,
                      size: Optional[int] = None) -> Union[float, np.ndarray]:
        """Draw one sample (size=None) or an array of samples"""
        std_dev = validate_std_dev(std_dev)
        with self._lock:
            value = self._rng.normal(mean, std_dev, size)
        if size is None:
            return float(value)
        return value


_default_source: Optional[NoiseSource] = None
_default_lock = threading.Lock()


def default_noise_source() -> NoiseSource:
    """Process-wide noise source, created on first use"""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = NoiseSource()
            logger.debug("Created default noise source")
        return _default_source
