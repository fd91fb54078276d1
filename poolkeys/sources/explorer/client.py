import logging
from typing import Dict, List, Optional, Union

import requests

from poolkeys.config.settings import DEFAULT_OFFSET, DEFAULT_PAGE, ExplorerConfig
from poolkeys.utils.errors import ApiError, TransportError

logger = logging.getLogger(__name__)

BlockId = Union[int, str]


def parse_block(block: BlockId) -> int:
    """Accept 123, "123" or "0x7b"."""
    if isinstance(block, bool):
        raise ValueError(f"Invalid block number: {block!r}")
    if isinstance(block, int):
        value = block
    else:
        text = str(block).strip().lower()
        try:
            value = int(text, 16) if text.startswith("0x") else int(text, 10)
        except ValueError:
            raise ValueError(f"Invalid block number: {block!r}") from None
    if value < 0:
        raise ValueError(f"Block number must not be negative: {block!r}")
    return value


def build_log_params(
    config: ExplorerConfig,
    from_block: BlockId,
    to_block: BlockId,
    currency0: Optional[str] = None,
    currency1: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    offset: int = DEFAULT_OFFSET,
) -> Dict[str, Union[str, int, None]]:
    """Query string for module=logs&action=getLogs, filtered on the Initialize topic.

    currency0/currency1 are 32-byte padded topic values; when both are set the
    explorer is told to AND topic2 and topic3.
    """
    params = {
        "module": "logs",
        "action": "getLogs",
        "fromBlock": parse_block(from_block),
        "toBlock": parse_block(to_block),
        "address": config.contract_address,
        "topic0": config.event_topic,
        "page": page,
        "offset": offset,
        "apikey": config.api_key,
    }
    if currency0:
        params["topic2"] = currency0.lower()
    if currency1:
        params["topic3"] = currency1.lower()
    if currency0 and currency1:
        params["topic2_3_opr"] = "and"
    return params


def get_logs(config: ExplorerConfig, params: Dict) -> List[Dict]:
    """Single GET against the explorer. Raises TransportError or ApiError."""
    try:
        response = requests.get(config.api_url, params=params)
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as e:
        raise TransportError(f"Error fetching logs: {e}") from e
    except ValueError as e:
        raise TransportError(f"Explorer returned a non-JSON body: {e}") from e

    if not isinstance(body, dict):
        raise TransportError(f"Unexpected explorer response: {body!r}")
    if body.get("status") != "1":
        raise ApiError(body.get("message", "unknown error"), body.get("result"))

    return list(body.get("result") or [])


def fetch_initialize_events(
    config: ExplorerConfig,
    from_block: BlockId,
    to_block: BlockId,
    currency0: Optional[str] = None,
    currency1: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    offset: int = DEFAULT_OFFSET,
) -> List[Dict]:
    """Fetch one page of Initialize logs. Failures are logged and yield []."""
    params = build_log_params(config, from_block, to_block, currency0, currency1, page, offset)
    try:
        logs = get_logs(config, params)
    except ApiError as e:
        logger.error(f"API Error: {e.message} {e.result}")
        return []
    except TransportError as e:
        logger.error(str(e))
        return []

    logger.info(f"Fetched {len(logs)} logs from blocks {params['fromBlock']} to {params['toBlock']}")
    return logs
