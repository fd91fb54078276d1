import os
from typing import NamedTuple

from dotenv import load_dotenv
from hexbytes import HexBytes

from poolkeys.sources.uniswap_v4.config import INITIALIZE_TOPIC

load_dotenv()

ARBISCAN_API_URL = "https://api.arbiscan.io/api"

# Uniswap v4 PoolManager on Arbitrum
POOL_MANAGER_ADDRESS = "0x360E68faCcca8cA495c1B759Fd9EEe466db9FB32"

# topic0 of Initialize(bytes32,address,address,uint24,int24,address,uint160,int24)
INITIALIZE_TOPIC0 = HexBytes(INITIALIZE_TOPIC).to_0x_hex()

DEFAULT_FROM_BLOCK = "280369405"
DEFAULT_TO_BLOCK = "305235670"

DEFAULT_PAGE = 1
DEFAULT_OFFSET = 1000

# v4 uses address 0 for native ETH
ETH = "0x0000000000000000000000000000000000000000"
USDT = "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9"

CURRENCY_0 = ETH
CURRENCY_1 = USDT


class ExplorerConfig(NamedTuple):
    api_url: str
    api_key: str | None
    contract_address: str
    event_topic: str


def load_explorer_config() -> ExplorerConfig:
    """Build the explorer config from the environment (.env is loaded on import)."""
    return ExplorerConfig(
        api_url=os.getenv("ARBISCAN_API_URL", ARBISCAN_API_URL),
        api_key=os.getenv("ARBISCAN_KEY"),
        contract_address=POOL_MANAGER_ADDRESS,
        event_topic=INITIALIZE_TOPIC0,
    )
