"""
Immutable complex sample storage shared by signals and spectra
"""

from typing import Iterable, Optional

import numpy as np

from ..utils.validators import validate_sample_rate


class SampleVector:
    """Fixed-length, read-only vector of complex128 samples plus a sample rate

    Reads outside [0, len) return zero instead of raising. Equality
    compares samples exactly and ignores the sample rate. The sample rate
    defaults to the sample count; an explicit rate must be positive.
    """

    def __init__(self, data: Iterable[complex], sample_rate: Optional[float] = None):
        if not isinstance(data, (np.ndarray, list, tuple)):
            data = list(data)
        arr = np.array(data, dtype=np.complex128).reshape(-1)
        arr.flags.writeable = False
        self._data = arr
        if sample_rate is None:
            self.sample_rate = float(len(arr))
        else:
            self.sample_rate = validate_sample_rate(sample_rate)

    def __len__(self) -> int:
        return len(self._data)

    def get(self, index: int) -> complex:
        """Return sample at index, or 0 if index is out of bounds"""
        if 0 <= index < len(self._data):
            return complex(self._data[index])
        return complex(0.0, 0.0)

    def to_array(self) -> np.ndarray:
        """Copy data into a new (writable) array"""
        return self._data.copy()

    def __iter__(self):
        return (complex(x) for x in self._data)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return (f"{type(self).__name__}({self._data.tolist()!r}, "
                f"sample_rate={self.sample_rate})")
