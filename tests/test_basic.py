"""
Basic tests for DSP-MCP
"""

import pytest
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_import():
    """Test that the package can be imported"""
    import dsp_mcp
    assert dsp_mcp.__version__ == "0.1.0"


def test_lazy_attribute_error():
    """Unknown attributes raise AttributeError"""
    import dsp_mcp
    with pytest.raises(AttributeError):
        dsp_mcp.does_not_exist


def test_subpackages_import_without_server():
    """The signal toolkit is usable on its own"""
    from dsp_mcp.signals import impulse, sample
    from dsp_mcp.analysis import DiscreteSignal
    x = DiscreteSignal(sample(impulse(), -1.0, 2.0, 1.0))
    assert len(x) == 3


if __name__ == "__main__":
    pytest.main([__file__])
