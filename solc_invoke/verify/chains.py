"""Chain definitions for block explorer verification services."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import Field

from solc_invoke.data import BaseModelWithDocstrings, NonEmptyString


class VerificationError(RuntimeError):
    """Base class for failures of the verification collaborators."""


class ChainResolutionError(VerificationError):
    """Raised when the current network cannot be mapped to a supported chain."""


class MissingApiKeyError(VerificationError):
    """Raised when no API key is configured for the network being verified on."""


class ChainUrls(BaseModelWithDocstrings):
    """Endpoints of a block explorer."""

    api_url: NonEmptyString
    """URL of the explorer's verification API."""
    browser_url: NonEmptyString
    """Base URL of the explorer's web interface."""


class ChainConfig(BaseModelWithDocstrings):
    """A network supported by a block explorer."""

    network: NonEmptyString
    """Name of the network, e.g. 'sepolia'."""
    chain_id: int = Field(ge=0)
    """Numeric chain id reported by ``eth_chainId``."""
    urls: ChainUrls
    """The explorer endpoints for this network."""


HARDHAT_NETWORK_NAME = "hardhat"
"""Reserved name of the local development network. It is never verifiable unless a custom
chain explicitly declares it."""

# fmt: off
_BUILTIN_CHAIN_TABLE: List[Tuple[str, int, str, str]] = [
    ("mainnet", 1, "https://api.etherscan.io/api", "https://etherscan.io"),
    ("goerli", 5, "https://api-goerli.etherscan.io/api", "https://goerli.etherscan.io"),
    ("optimisticEthereum", 10, "https://api-optimistic.etherscan.io/api", "https://optimistic.etherscan.io/"),
    ("bsc", 56, "https://api.bscscan.com/api", "https://bscscan.com"),
    ("sokol", 77, "https://blockscout.com/poa/sokol/api", "https://blockscout.com/poa/sokol"),
    ("bscTestnet", 97, "https://api-testnet.bscscan.com/api", "https://testnet.bscscan.com"),
    ("xdai", 100, "https://api.gnosisscan.io/api", "https://gnosisscan.io"),
    ("gnosis", 100, "https://api.gnosisscan.io/api", "https://gnosisscan.io"),
    ("heco", 128, "https://api.hecoinfo.com/api", "https://hecoinfo.com"),
    ("polygon", 137, "https://api.polygonscan.com/api", "https://polygonscan.com"),
    ("opera", 250, "https://api.ftmscan.com/api", "https://ftmscan.com"),
    ("hecoTestnet", 256, "https://api-testnet.hecoinfo.com/api", "https://testnet.hecoinfo.com"),
    ("optimisticGoerli", 420, "https://api-goerli-optimism.etherscan.io/api", "https://goerli-optimism.etherscan.io/"),
    ("polygonZkEVM", 1101, "https://api-zkevm.polygonscan.com/api", "https://zkevm.polygonscan.com"),
    ("moonbeam", 1284, "https://api-moonbeam.moonscan.io/api", "https://moonbeam.moonscan.io"),
    ("moonriver", 1285, "https://api-moonriver.moonscan.io/api", "https://moonriver.moonscan.io"),
    ("moonbaseAlpha", 1287, "https://api-moonbase.moonscan.io/api", "https://moonbase.moonscan.io/"),
    ("polygonZkEVMTestnet", 1442, "https://api-testnet-zkevm.polygonscan.com/api", "https://testnet-zkevm.polygonscan.com"),
    ("ftmTestnet", 4002, "https://api-testnet.ftmscan.com/api", "https://testnet.ftmscan.com"),
    ("base", 8453, "https://api.basescan.org/api", "https://basescan.org/"),
    ("chiado", 10200, "https://gnosis-chiado.blockscout.com/api", "https://gnosis-chiado.blockscout.com"),
    ("holesky", 17000, "https://api-holesky.etherscan.io/api", "https://holesky.etherscan.io"),
    ("arbitrumOne", 42161, "https://api.arbiscan.io/api", "https://arbiscan.io/"),
    ("avalancheFujiTestnet", 43113, "https://api-testnet.snowtrace.io/api", "https://testnet.snowtrace.io/"),
    ("avalanche", 43114, "https://api.snowtrace.io/api", "https://snowtrace.io/"),
    ("polygonMumbai", 80001, "https://api-testnet.polygonscan.com/api", "https://mumbai.polygonscan.com/"),
    ("baseGoerli", 84531, "https://api-goerli.basescan.org/api", "https://goerli.basescan.org/"),
    ("arbitrumTestnet", 421611, "https://api-testnet.arbiscan.io/api", "https://testnet.arbiscan.io/"),
    ("arbitrumGoerli", 421613, "https://api-goerli.arbiscan.io/api", "https://goerli.arbiscan.io/"),
    ("arbitrumSepolia", 421614, "https://api-sepolia.arbiscan.io/api", "https://sepolia.arbiscan.io/"),
    ("sepolia", 11155111, "https://api-sepolia.etherscan.io/api", "https://sepolia.etherscan.io"),
    ("aurora", 1313161554, "https://explorer.mainnet.aurora.dev/api", "https://aurora.dev"),
    ("auroraTestnet", 1313161555, "https://explorer.testnet.aurora.dev/api", "https://aurora.dev"),
    ("harmony", 1666600000, "https://ctrver.t.hmny.io/verify", "https://explorer.harmony.one"),
    ("harmonyTest", 1666700000, "https://ctrver.t.hmny.io/verify?network=testnet", "https://explorer.pops.one"),
]
# fmt: on

BUILTIN_CHAINS: List[ChainConfig] = [
    ChainConfig(
        network=network,
        chain_id=chain_id,
        urls=ChainUrls(api_url=api_url, browser_url=browser_url),
    )
    for network, chain_id, api_url, browser_url in _BUILTIN_CHAIN_TABLE
]
"""Explorers supported out of the box, in lookup order."""
