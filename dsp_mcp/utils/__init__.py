"""
Utility functions for DSP-MCP
"""

from .validators import (
    validate_sample_step,
    validate_transform_size,
    validate_std_dev,
    validate_sample_range,
    validate_sample_rate,
    validate_shift,
    is_power_of_two
)
from .conversions import parse_samples, encode_samples

__all__ = [
    "validate_sample_step",
    "validate_transform_size",
    "validate_std_dev",
    "validate_sample_range",
    "validate_sample_rate",
    "validate_shift",
    "is_power_of_two",
    "parse_samples",
    "encode_samples"
]
