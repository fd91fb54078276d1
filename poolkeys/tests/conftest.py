import pytest
from eth_abi import abi
from web3 import Web3

from poolkeys.config.settings import ETH, INITIALIZE_TOPIC0, POOL_MANAGER_ADDRESS, USDT, ExplorerConfig
from poolkeys.sources.uniswap_v4.config import INITIALIZE_DATA_TYPES
from poolkeys.utils.address import pad_address_to_32_bytes

HOOKS = Web3.to_checksum_address("0x0d5e0f971ed27fbff6c2837bf31316121532048d")
POOL_ID = "0x" + "ab" * 32


@pytest.fixture
def config():
    return ExplorerConfig(
        api_url="https://explorer.test/api",
        api_key="test-key",
        contract_address=POOL_MANAGER_ADDRESS,
        event_topic=INITIALIZE_TOPIC0,
    )


@pytest.fixture
def make_log():
    """Build an explorer-style Initialize log."""

    def _make_log(
        fee=3000,
        tick_spacing=60,
        hooks=HOOKS,
        sqrt_price_x96=79228162514264337593543950336,
        tick=0,
        currency0=ETH,
        currency1=USDT,
        topics=None,
    ):
        data = abi.encode(INITIALIZE_DATA_TYPES, [fee, tick_spacing, hooks, sqrt_price_x96, tick])
        if topics is None:
            topics = [
                INITIALIZE_TOPIC0,
                POOL_ID,
                pad_address_to_32_bytes(currency0),
                pad_address_to_32_bytes(currency1),
            ]
        return {
            "address": POOL_MANAGER_ADDRESS.lower(),
            "topics": topics,
            "data": "0x" + data.hex(),
            "blockNumber": "0x10b6f3a1",
            "transactionHash": "0x" + "12" * 32,
            "logIndex": "0x1",
        }

    return _make_log


@pytest.fixture
def hooks():
    return HOOKS
