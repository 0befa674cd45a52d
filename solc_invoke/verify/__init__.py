"""Verification collaborators: mapping a connected network to a block explorer."""

from .chains import (
    BUILTIN_CHAINS,
    HARDHAT_NETWORK_NAME,
    ChainConfig,
    ChainResolutionError,
    ChainUrls,
    MissingApiKeyError,
    VerificationError,
)
from .etherscan import Etherscan, Network, Provider

__all__ = [
    "BUILTIN_CHAINS",
    "ChainConfig",
    "ChainResolutionError",
    "ChainUrls",
    "Etherscan",
    "HARDHAT_NETWORK_NAME",
    "MissingApiKeyError",
    "Network",
    "Provider",
    "VerificationError",
]
