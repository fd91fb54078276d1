import logging
from collections.abc import Sequence
from typing import Iterable, List, Tuple

from eth_abi import abi
from eth_abi.exceptions import DecodingError
from hexbytes import HexBytes
from web3 import Web3

from poolkeys.sources.uniswap_v4.config import DATA_SIZE, INITIALIZE_DATA_TYPES, MIN_TOPICS
from poolkeys.utils.address import topic_to_address
from poolkeys.utils.errors import DecodeError, MalformedLog
from poolkeys.utils.log_utils import sanitize_log
from poolkeys.utils.types import DecodeResult, PoolKey

logger = logging.getLogger(__name__)


def decode_pool_key(log) -> PoolKey:
    """Decode one raw Initialize log into a PoolKey.

    Indexed: id (topic1), currency0 (topic2), currency1 (topic3).
    Data: fee, tickSpacing, hooks, sqrtPriceX96, tick. The last two are
    decoded to validate the payload and then dropped.
    """
    try:
        topics = log.get("topics") or []
        data = log.get("data")
    except AttributeError as e:
        raise MalformedLog(f"Log is not a mapping: {type(log).__name__}") from e

    if isinstance(topics, (str, bytes)) or not isinstance(topics, Sequence):
        raise MalformedLog(f"Log topics must be a list, got {type(topics).__name__}")
    if len(topics) < MIN_TOPICS:
        raise MalformedLog(f"Log does not have enough topics ({len(topics)} < {MIN_TOPICS})")

    try:
        currency0 = topic_to_address(topics[2])
        currency1 = topic_to_address(topics[3])
        data_bytes = HexBytes(data if data is not None else b"")
    except (TypeError, ValueError, KeyError, IndexError) as e:
        raise DecodeError(f"Bad topic or data encoding: {e}") from e

    if len(data_bytes) != DATA_SIZE:
        raise MalformedLog(f"Expected {DATA_SIZE} bytes of data, got {len(data_bytes)}")

    try:
        fee, tick_spacing, hooks, _sqrt_price_x96, _tick = abi.decode(
            INITIALIZE_DATA_TYPES, bytes(data_bytes)
        )
    except DecodingError as e:
        raise DecodeError(f"Data does not match Initialize schema: {e}") from e

    return PoolKey(
        currency0=currency0,
        currency1=currency1,
        fee=int(fee),
        tick_spacing=int(tick_spacing),
        hooks=Web3.to_checksum_address(hooks),
    )


def try_decode_pool_key(log) -> DecodeResult:
    try:
        return DecodeResult(log=log, pool_key=decode_pool_key(log))
    except DecodeError as e:
        return DecodeResult(log=log, error=e)


def decode_pool_keys(logs: Iterable) -> Tuple[List[PoolKey], List[DecodeResult]]:
    """Decode a batch, logging and skipping every log that fails."""
    pool_keys: List[PoolKey] = []
    failures: List[DecodeResult] = []

    for log in logs:
        result = try_decode_pool_key(log)
        if result.ok:
            pool_keys.append(result.pool_key)
            continue
        logger.error(f"Error decoding event: {result.error} {sanitize_log(log)}")
        failures.append(result)

    logger.debug("decoded %d pool keys, %d failures", len(pool_keys), len(failures))
    return pool_keys, failures
