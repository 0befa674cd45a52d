import sys
from typing import Any, List, Optional

import pytest

from solc_invoke.verify import (
    BUILTIN_CHAINS,
    ChainConfig,
    ChainResolutionError,
    ChainUrls,
    Etherscan,
    MissingApiKeyError,
)

GOERLI = ChainConfig(
    network="goerli",
    chain_id=5,
    urls=ChainUrls(
        api_url="https://api-goerli.etherscan.io/api", browser_url="https://goerli.etherscan.io"
    ),
)


def _custom_chain(network: str, chain_id: int) -> ChainConfig:
    return ChainConfig(
        network=network,
        chain_id=chain_id,
        urls=ChainUrls(api_url="<api-url>", browser_url="<browser-url>"),
    )


CUSTOM_CHAINS = [
    _custom_chain("customChain1", 5000),
    _custom_chain("customChain2", 5000),
    _custom_chain("customChain3", 4999),
]


class FakeProvider:
    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        self.calls: List[str] = []

    def send(self, method: str, params: Optional[List[Any]] = None) -> str:
        self.calls.append(method)
        return format(self.chain_id, "x")


class FakeNetwork:
    def __init__(self, name: str, chain_id: int) -> None:
        self.name = name
        self.provider = FakeProvider(chain_id)


@pytest.mark.parametrize("api_key", [None, "", {}, {"goerli": ""}, {"sepolia": "key"}])
def test_missing_api_key(api_key):
    with pytest.raises(
        MissingApiKeyError,
        match="You are trying to verify a contract in 'goerli', but no API token was found "
        "for this network.",
    ):
        Etherscan(api_key, GOERLI)


def test_api_key_per_network():
    etherscan = Etherscan({"goerli": "goerli-key", "mainnet": "mainnet-key"}, GOERLI)
    assert etherscan.api_key == "goerli-key"
    assert etherscan.api_url == "https://api-goerli.etherscan.io/api"


def test_last_matching_custom_chain_wins():
    network = FakeNetwork("customChain2", 5000)
    chain = Etherscan.get_current_chain_config(network, CUSTOM_CHAINS)

    assert chain.network == "customChain2"
    assert chain.chain_id == 5000
    assert network.provider.calls == ["eth_chainId"]


def test_builtin_chain_when_no_custom_chain_matches():
    chain = Etherscan.get_current_chain_config(FakeNetwork("goerli", 5), CUSTOM_CHAINS)
    assert chain.network == "goerli"
    assert chain.chain_id == 5


def test_custom_chain_overrides_builtin():
    override = _custom_chain("myGoerli", 5)
    chain = Etherscan.get_current_chain_config(FakeNetwork("goerli", 5), [override])
    assert chain is override


def test_hardhat_without_custom_chain():
    with pytest.raises(
        ChainResolutionError,
        match="The selected network is hardhat. Please select a network supported by Etherscan.",
    ):
        Etherscan.get_current_chain_config(FakeNetwork("hardhat", 31337), CUSTOM_CHAINS)


def test_hardhat_declared_as_custom_chain():
    chains = [*CUSTOM_CHAINS, _custom_chain("hardhat", 31337)]
    chain = Etherscan.get_current_chain_config(FakeNetwork("hardhat", 31337), chains)
    assert chain.network == "hardhat"
    assert chain.chain_id == 31337


def test_no_matching_chain():
    with pytest.raises(
        ChainResolutionError,
        match="Trying to verify a contract in a network with chain id 21343214123, but the "
        "plugin doesn't recognize it as a supported chain.",
    ):
        network = FakeNetwork("someNetwork", 21343214123)
        Etherscan.get_current_chain_config(network, CUSTOM_CHAINS)


def test_builtin_chain_ids_resolve():
    for chain in BUILTIN_CHAINS:
        network = FakeNetwork(chain.network, chain.chain_id)
        resolved = Etherscan.get_current_chain_config(network, [])
        assert resolved.chain_id == chain.chain_id


@pytest.mark.parametrize(
    "browser_url", ["https://goerli.etherscan.io", "   https://goerli.etherscan.io/  "]
)
def test_get_contract_url(browser_url: str):
    chain = GOERLI.model_copy(
        update={"urls": ChainUrls(api_url=GOERLI.urls.api_url, browser_url=browser_url)}
    )
    etherscan = Etherscan("someApiKey", chain)
    assert (
        etherscan.get_contract_url("someAddress")
        == "https://goerli.etherscan.io/address/someAddress#code"
    )


if __name__ == "__main__":
    pytest.main(sys.argv)
