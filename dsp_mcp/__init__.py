"""
DSP-MCP - Digital signal processing toolkit with a Model Context Protocol server
"""

__version__ = "0.1.0"

# Lazy imports so the signal toolkit does not pull in the MCP runtime
__all__ = ["DSPMCPServer", "main", "__version__"]

def __getattr__(name):
    """Lazy import of the server"""
    if name in ("DSPMCPServer", "main"):
        from .server import DSPMCPServer, main
        return DSPMCPServer if name == "DSPMCPServer" else main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
