"""
Validation utilities for DSP-MCP
"""

import math


def validate_sample_step(step: float) -> float:
    """Validate a sampling step is a positive, finite number"""
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"Sampling step must be positive and finite, got {step}")
    return float(step)


def validate_transform_size(size: int) -> int:
    """Validate a transform size is a positive integer"""
    if isinstance(size, bool) or int(size) != size or size <= 0:
        raise ValueError(f"Transform size must be a positive integer, got {size}")
    return int(size)


def validate_std_dev(std_dev: float) -> float:
    """Validate a noise standard deviation"""
    if not math.isfinite(std_dev) or std_dev < 0:
        raise ValueError(f"Standard deviation must be non-negative, got {std_dev}")
    return float(std_dev)


def is_power_of_two(n: int) -> bool:
    """Check if n is a power of two"""
    return n > 0 and (n & (n - 1)) == 0


def validate_sample_range(start: float, end: float):
    """Validate sampling bounds are finite numbers"""
    if not (math.isfinite(start) and math.isfinite(end)):
        raise ValueError(f"Sampling range must be finite, got [{start}, {end})")
    return float(start), float(end)


def validate_sample_rate(rate: float) -> float:
    """Validate a sample rate is positive and finite"""
    if not math.isfinite(rate) or rate <= 0:
        raise ValueError(f"Sample rate must be positive and finite, got {rate}")
    return float(rate)


def validate_shift(k: int) -> int:
    """Validate a shift amount is integral"""
    if isinstance(k, bool) or not float(k).is_integer():
        raise ValueError(f"Shift must be an integer, got {k}")
    return int(k)
