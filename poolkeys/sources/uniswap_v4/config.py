from eth_utils import event_abi_to_log_topic

# PoolId is a bytes32 alias, Currency and IHooks are address aliases
INITIALIZE_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "internalType": "PoolId", "name": "id", "type": "bytes32"},
        {"indexed": True, "internalType": "Currency", "name": "currency0", "type": "address"},
        {"indexed": True, "internalType": "Currency", "name": "currency1", "type": "address"},
        {"indexed": False, "internalType": "uint24", "name": "fee", "type": "uint24"},
        {"indexed": False, "internalType": "int24", "name": "tickSpacing", "type": "int24"},
        {"indexed": False, "internalType": "contract IHooks", "name": "hooks", "type": "address"},
        {"indexed": False, "internalType": "uint160", "name": "sqrtPriceX96", "type": "uint160"},
        {"indexed": False, "internalType": "int24", "name": "tick", "type": "int24"},
    ],
    "name": "Initialize",
    "type": "event",
}

INITIALIZE_TOPIC = event_abi_to_log_topic(INITIALIZE_ABI)

# fee, tickSpacing, hooks, sqrtPriceX96, tick
INITIALIZE_DATA_TYPES = [i["type"] for i in INITIALIZE_ABI["inputs"] if not i["indexed"]]

MIN_TOPICS = 4
DATA_SIZE = 32 * len(INITIALIZE_DATA_TYPES)
