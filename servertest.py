#!/usr/bin/env python3
"""
Simple direct test of DSP MCP server functionality
"""

import asyncio
import json
from dsp_mcp.server import DSPMCPServer

async def simple_test():
    """Test the server by directly calling the tool handler"""

    print("DSP MCP Server - Simple Direct Test")
    print("=" * 50)

    server = DSPMCPServer(noise_seed=1)

    print("\n1. Generating a noisy 4 Hz cosine (32 samples)...")
    result = await server.handle_tool("signal_generate", {
        "waveform": "cosine",
        "frequency": 4.0,
        "step": 1.0 / 32,
        "noise_std": 0.05
    })
    generated = json.loads(result[0].text)
    print(f"Got {generated['length']} samples, energy {generated['energy']:.3f}")

    print("\n2. Forward FFT...")
    result = await server.handle_tool("spectrum_forward", {"samples": generated["samples"]})
    spectrum = json.loads(result[0].text)
    peak = max(range(spectrum["length"]), key=lambda i: spectrum["magnitudes"][i])
    print(f"Peak bin {peak} at {spectrum['frequencies'][peak]:.1f} Hz")

    print("\n3. Inverse FFT...")
    result = await server.handle_tool("spectrum_inverse", {"bins": spectrum["bins"]})
    restored = json.loads(result[0].text)
    print(f"Restored energy {restored['energy']:.3f}")

    print("\n✅ Basic functionality test passed!")

if __name__ == "__main__":
    asyncio.run(simple_test())
