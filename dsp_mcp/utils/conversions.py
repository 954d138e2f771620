"""
Conversions between JSON tool payloads and complex sample arrays
"""

from typing import Any, List, Sequence

import numpy as np


def parse_samples(values: Sequence[Any]) -> np.ndarray:
    """Parse a list of numbers or [re, im] pairs into a complex array"""
    out = np.zeros(len(values), dtype=np.complex128)
    for i, v in enumerate(values):
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                raise ValueError(f"Sample {i} must be a number or an [re, im] pair, got {v!r}")
            out[i] = complex(float(v[0]), float(v[1]))
        elif isinstance(v, (int, float)) and not isinstance(v, bool):
            out[i] = complex(float(v), 0.0)
        else:
            raise ValueError(f"Sample {i} must be a number or an [re, im] pair, got {v!r}")
    return out


def encode_samples(samples: np.ndarray, decimals: int = 12) -> List[List[float]]:
    """Encode complex samples as [re, im] pairs"""
    arr = np.round(np.asarray(samples, dtype=np.complex128), decimals)
    # Adding 0.0 turns -0.0 into 0.0
    return [[float(x.real) + 0.0, float(x.imag) + 0.0] for x in arr]
