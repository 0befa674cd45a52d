"""Etherscan-compatible explorer client configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, Sequence, Union

from solc_invoke.logging import get_logger

from .chains import (
    BUILTIN_CHAINS,
    HARDHAT_NETWORK_NAME,
    ChainConfig,
    ChainResolutionError,
    MissingApiKeyError,
)

logger = get_logger("Etherscan")

ApiKey = Union[str, Mapping[str, str], None]
"""Either a single key used for every network, or a mapping from network name to key."""


class Provider(Protocol):
    """JSON-RPC provider of the network being verified on."""

    def send(self, method: str, params: Optional[List[Any]] = None) -> Any:
        ...


class Network(Protocol):
    """The network the host tool is connected to."""

    name: str
    provider: Provider


class Etherscan:
    """Client configuration for an Etherscan-compatible verification service.

    Examples
    --------
    >>> chain = Etherscan.get_current_chain_config(network, custom_chains)
    >>> etherscan = Etherscan(api_key, chain)
    >>> etherscan.get_contract_url("0x5FbDB2315678afecb367f032d93F642f64180aa3")
    'https://sepolia.etherscan.io/address/0x5FbDB2315678afecb367f032d93F642f64180aa3#code'
    """

    def __init__(self, api_key: ApiKey, chain_config: ChainConfig) -> None:
        """Initialize the client.

        Parameters
        ----------
        api_key : ApiKey
            The explorer API key, or a mapping from network name to key.
        chain_config : ChainConfig
            The chain to verify on.

        Raises
        ------
        MissingApiKeyError
            If no non-empty key is available for ``chain_config.network``.
        """
        self.api_key = self._resolve_api_key(api_key, chain_config.network)
        self.chain_config = chain_config
        self.api_url = chain_config.urls.api_url
        self.browser_url = chain_config.urls.browser_url.strip().rstrip("/")

    @staticmethod
    def _resolve_api_key(api_key: ApiKey, network: str) -> str:
        if isinstance(api_key, Mapping):
            key = api_key.get(network)
        else:
            key = api_key
        if not key:
            raise MissingApiKeyError(
                f"You are trying to verify a contract in '{network}', but no API token was "
                "found for this network. Please provide one in your verification config."
            )
        return key

    @staticmethod
    def get_current_chain_config(
        network: Network, custom_chains: Sequence[ChainConfig]
    ) -> ChainConfig:
        """Resolve the chain the network is connected to.

        The chain id is queried with ``eth_chainId``. Custom chains take precedence over the
        built-in ones, and among custom chains the last matching entry wins. The local
        development network only resolves if a custom chain declares its chain id.

        Parameters
        ----------
        network : Network
            The connected network.
        custom_chains : Sequence[ChainConfig]
            User-declared chains.

        Returns
        -------
        ChainConfig
            The matching chain.

        Raises
        ------
        ChainResolutionError
            If the network is the local development network without a custom chain, or no
            chain matches the reported chain id.
        """
        chain_id = int(network.provider.send("eth_chainId"), 16)
        candidates = [*reversed(custom_chains), *BUILTIN_CHAINS]
        for chain in candidates:
            if chain.chain_id == chain_id:
                logger.debug("Network '%s' resolved to chain '%s'", network.name, chain.network)
                return chain

        if network.name == HARDHAT_NETWORK_NAME:
            raise ChainResolutionError(
                f"The selected network is {network.name}. Please select a network supported "
                "by Etherscan."
            )
        raise ChainResolutionError(
            f"Trying to verify a contract in a network with chain id {chain_id}, but the plugin "
            "doesn't recognize it as a supported chain.\n\nYou can manually add support for it "
            "by following these instructions: declare it as a custom chain with its API and "
            "browser URLs."
        )

    def get_contract_url(self, address: str) -> str:
        """Explorer page showing the verified source of ``address``."""
        return f"{self.browser_url}/address/{address}#code"
