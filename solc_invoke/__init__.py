from solc_invoke.compile import (
    BundleLoadError,
    Compiler,
    CompilerError,
    CompilerExecutionError,
    CompilerInvocationError,
    CompilerOutputTooLargeError,
    CompilerRegistry,
    InProcessCompiler,
    NativeCompilerSpawnError,
    NativeProcessCompiler,
    OutputParseError,
)
from solc_invoke.data import CompilerSpec, JsonDocument, parse_solc_version
from solc_invoke.logging import configure_logging, get_logger
from solc_invoke.verify import (
    ChainConfig,
    ChainResolutionError,
    ChainUrls,
    Etherscan,
    MissingApiKeyError,
    VerificationError,
)

__all__ = [
    # Compilers
    "Compiler",
    "InProcessCompiler",
    "NativeProcessCompiler",
    "CompilerRegistry",
    # Compiler errors
    "CompilerError",
    "BundleLoadError",
    "CompilerInvocationError",
    "NativeCompilerSpawnError",
    "CompilerExecutionError",
    "CompilerOutputTooLargeError",
    "OutputParseError",
    # Data types
    "CompilerSpec",
    "JsonDocument",
    "parse_solc_version",
    # Verification
    "ChainConfig",
    "ChainUrls",
    "Etherscan",
    "ChainResolutionError",
    "MissingApiKeyError",
    "VerificationError",
    "configure_logging",
    "get_logger",
]
