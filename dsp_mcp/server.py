#!/usr/bin/env python3
"""
DSP MCP Server - signal generation, measurement and Fourier analysis tools
"""

import asyncio
import json
import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Any, Tuple

# MCP imports
from mcp.server import Server
from mcp.types import Tool, TextContent
import mcp.server.stdio

from .signals import (
    ContinuousSignal,
    impulse,
    step,
    constant,
    complex_exponential,
    sine,
    cosine,
    triangle,
    square,
    modulate,
    scale,
    sample
)
from .analysis import DiscreteSignal, Spectrum, ForwardFFT, InverseFFT, NoiseSource
from .analysis.noise import DEFAULT_NOISE_SEED
from .utils import parse_samples, encode_samples, validate_shift

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Constants
SERVER_NAME = "dsp-mcp"
DEFAULT_SAMPLE_STEP = 1.0 / 64
MAX_CACHED_TRANSFORMS = 16
WAVEFORMS = ["impulse", "step", "constant", "complex", "sine", "cosine", "triangle", "square"]
OPERATIONS = ["shift", "integrate", "differentiate", "add_noise"]

SAMPLES_SCHEMA = {
    "type": "array",
    "description": "Samples as numbers (real) or [re, im] pairs",
    "items": {
        "oneOf": [
            {"type": "number"},
            {"type": "array", "items": {"type": "number"}, "minItems": 2, "maxItems": 2}
        ]
    }
}


def build_waveform(waveform: str, frequency: float = 1.0, offset: float = 0.0) -> ContinuousSignal:
    """Build a base waveform by name"""
    if waveform == "impulse":
        return impulse()
    elif waveform == "step":
        return step()
    elif waveform == "constant":
        return constant(1.0)
    elif waveform == "complex":
        return complex_exponential(frequency, offset)
    elif waveform == "sine":
        return sine(frequency, offset)
    elif waveform == "cosine":
        return cosine(frequency, offset)
    elif waveform == "triangle":
        return triangle(frequency)
    elif waveform == "square":
        return square(frequency)
    raise ValueError(f"Unknown waveform: {waveform}")


def describe_signal(signal: DiscreteSignal) -> Dict[str, Any]:
    """JSON-ready summary of a discrete signal"""
    result = {
        "length": len(signal),
        "sample_rate": signal.sample_rate,
        "samples": encode_samples(signal.to_array()),
        "energy": signal.energy(),
    }
    if len(signal) > 0:
        result["power"] = signal.power()
    return result


class DSPMCPServer:
    """MCP Server for DSP toolkit"""

    def __init__(self, noise_seed: Optional[int] = DEFAULT_NOISE_SEED):
        self.server = Server(SERVER_NAME)
        self.noise_source = NoiseSource(noise_seed)
        # Transforms are reused across calls of the same size, least recently used evicted first
        self.transforms: "OrderedDict[Tuple[str, int], Any]" = OrderedDict()

        self.setup_handlers()

    def setup_handlers(self):
        """Setup MCP server handlers"""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            """List available DSP tools"""
            return self.get_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            """Handle tool calls"""
            return await self.handle_tool(name, arguments)

    def get_tools(self) -> List[Tool]:
        return [
            Tool(
                name="signal_generate",
                description="Sample a waveform over [start, end) with optional scaling, carrier modulation and noise",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "waveform": {
                            "type": "string",
                            "enum": WAVEFORMS,
                            "default": "sine"
                        },
                        "frequency": {
                            "type": "number",
                            "description": "Waveform frequency in Hz",
                            "default": 1.0
                        },
                        "offset": {
                            "type": "number",
                            "description": "Phase offset (halved before being added to t)",
                            "default": 0.0
                        },
                        "amplitude": {
                            "type": "number",
                            "description": "Scale factor applied to the waveform",
                            "default": 1.0
                        },
                        "carrier_frequency": {
                            "type": "number",
                            "description": "If set, modulate by a complex carrier at this frequency"
                        },
                        "start": {"type": "number", "default": 0.0},
                        "end": {"type": "number", "default": 1.0},
                        "step": {
                            "type": "number",
                            "description": "Sampling step in seconds",
                            "default": DEFAULT_SAMPLE_STEP
                        },
                        "noise_std": {
                            "type": "number",
                            "description": "Standard deviation of additive real Gaussian noise",
                            "default": 0.0
                        }
                    }
                }
            ),
            Tool(
                name="signal_measure",
                description="Compute energy and power of a discrete signal",
                inputSchema={
                    "type": "object",
                    "properties": {"samples": SAMPLES_SCHEMA},
                    "required": ["samples"]
                }
            ),
            Tool(
                name="signal_transform",
                description="Apply a time-domain operation to a discrete signal",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "samples": SAMPLES_SCHEMA,
                        "operation": {"type": "string", "enum": OPERATIONS},
                        "k": {
                            "type": "integer",
                            "description": "Shift amount for 'shift' (y[n] = x[n-k])",
                            "default": 1
                        },
                        "std_dev": {
                            "type": "number",
                            "description": "Noise standard deviation for 'add_noise'",
                            "default": 0.1
                        }
                    },
                    "required": ["samples", "operation"]
                }
            ),
            Tool(
                name="spectrum_forward",
                description="Forward FFT of a discrete signal",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "samples": SAMPLES_SCHEMA,
                        "sample_rate": {
                            "type": "number",
                            "description": "Samples per second (defaults to the sample count)"
                        }
                    },
                    "required": ["samples"]
                }
            ),
            Tool(
                name="spectrum_inverse",
                description="Inverse FFT of a spectrum back to a discrete signal",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "bins": SAMPLES_SCHEMA,
                        "sample_rate": {
                            "type": "number",
                            "description": "Samples per second (defaults to the bin count)"
                        }
                    },
                    "required": ["bins"]
                }
            )
        ]

    def get_transform(self, direction: str, size: int):
        """Get (or create) a transform for the given direction and size"""
        key = (direction, size)
        if key in self.transforms:
            self.transforms.move_to_end(key)
            return self.transforms[key]

        cls = ForwardFFT if direction == "forward" else InverseFFT
        self.transforms[key] = cls(size)
        while len(self.transforms) > MAX_CACHED_TRANSFORMS:
            evicted, _ = self.transforms.popitem(last=False)
            logger.debug(f"Evicted cached transform {evicted}")
        return self.transforms[key]

    async def handle_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Dispatch a tool call; errors are reported as text"""
        arguments = arguments or {}
        try:
            if name == "signal_generate":
                result = self._generate(arguments)
            elif name == "signal_measure":
                result = self._measure(arguments)
            elif name == "signal_transform":
                result = self._transform(arguments)
            elif name == "spectrum_forward":
                result = self._forward(arguments)
            elif name == "spectrum_inverse":
                result = self._inverse(arguments)
            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

            return [TextContent(type="text", text=json.dumps(result, indent=2))]

        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    def _generate(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        waveform = arguments.get("waveform", "sine")
        signal = build_waveform(
            waveform,
            float(arguments.get("frequency", 1.0)),
            float(arguments.get("offset", 0.0))
        )

        amplitude = float(arguments.get("amplitude", 1.0))
        if amplitude != 1.0:
            signal = scale(signal, amplitude)

        carrier_frequency = arguments.get("carrier_frequency")
        if carrier_frequency is not None:
            signal = modulate(signal, complex_exponential(float(carrier_frequency), 0.0))

        samples = sample(
            signal,
            float(arguments.get("start", 0.0)),
            float(arguments.get("end", 1.0)),
            float(arguments.get("step", DEFAULT_SAMPLE_STEP))
        )
        discrete = DiscreteSignal(samples)

        noise_std = float(arguments.get("noise_std", 0.0))
        if noise_std != 0:
            discrete = discrete.add_noise(noise_std, self.noise_source)

        logger.info(f"Generated {waveform} signal with {len(discrete)} samples")
        return describe_signal(discrete)

    def _measure(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        signal = DiscreteSignal(parse_samples(arguments["samples"]))
        return {
            "length": len(signal),
            "energy": signal.energy(),
            "power": signal.power()
        }

    def _transform(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        signal = DiscreteSignal(parse_samples(arguments["samples"]))
        operation = arguments["operation"]

        if operation == "shift":
            result = signal.shift(validate_shift(arguments.get("k", 1)))
        elif operation == "integrate":
            result = signal.integrate()
        elif operation == "differentiate":
            result = signal.differentiate()
        elif operation == "add_noise":
            result = signal.add_noise(float(arguments.get("std_dev", 0.1)), self.noise_source)
        else:
            raise ValueError(f"Unknown operation: {operation}")

        return describe_signal(result)

    def _forward(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        signal = DiscreteSignal(parse_samples(arguments["samples"]), arguments.get("sample_rate"))
        spectrum = self.get_transform("forward", len(signal)).process(signal)
        return {
            "length": len(spectrum),
            "sample_rate": spectrum.sample_rate,
            "bins": encode_samples(spectrum.to_array()),
            "magnitudes": spectrum.magnitudes().tolist(),
            "frequencies": spectrum.frequencies().tolist()
        }

    def _inverse(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        spectrum = Spectrum(parse_samples(arguments["bins"]), arguments.get("sample_rate"))
        signal = self.get_transform("inverse", len(spectrum)).process(spectrum)
        return describe_signal(signal)

    async def run(self):
        """Run the MCP server"""
        logger.info(f"Starting {SERVER_NAME} server")
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


async def main():
    """Main entry point"""
    server = DSPMCPServer()
    await server.run()


def cli():
    """Console script entry point"""
    asyncio.run(main())


if __name__ == "__main__":
    cli()
