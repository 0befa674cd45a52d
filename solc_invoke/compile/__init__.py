"""Compiler subsystem package.

This package runs Solidity compilers in standard JSON mode behind one interface.
It includes:
- Compiler: Abstract base class with the ``compile(input) -> output`` contract
- InProcessCompiler: Loads a compiler bundle into the interpreter once and calls it
- NativeProcessCompiler: Runs a native solc executable as a subprocess per call
- CompilerRegistry: Central registry sharing compiler instances per CompilerSpec
- CompilerError and its subclasses: The failures a compilation can raise

The typical workflow is:
1. Get the singleton registry: registry = CompilerRegistry.get_instance()
2. Describe the compiler: spec = CompilerSpec(path="/usr/bin/solc", version="0.8.24", native=True)
3. Compile: output = registry.compile(spec, standard_json_input)
"""

from .compiler import (
    BundleLoadError,
    Compiler,
    CompilerError,
    CompilerExecutionError,
    CompilerInvocationError,
    CompilerOutputTooLargeError,
    NativeCompilerSpawnError,
    OutputParseError,
)
from .compilers import InProcessCompiler, NativeProcessCompiler
from .registry import CompilerRegistry

__all__ = [
    "BundleLoadError",
    "Compiler",
    "CompilerError",
    "CompilerExecutionError",
    "CompilerInvocationError",
    "CompilerOutputTooLargeError",
    "CompilerRegistry",
    "InProcessCompiler",
    "NativeCompilerSpawnError",
    "NativeProcessCompiler",
    "OutputParseError",
]
