import json
import logging
from typing import List, Optional

import typer

from poolkeys.config.settings import (
    CURRENCY_0,
    CURRENCY_1,
    DEFAULT_FROM_BLOCK,
    DEFAULT_TO_BLOCK,
    ExplorerConfig,
    load_explorer_config,
)
from poolkeys.sources.explorer.client import fetch_initialize_events, parse_block
from poolkeys.sources.uniswap_v4.decoder import decode_pool_keys
from poolkeys.utils.address import pad_address_to_32_bytes
from poolkeys.utils.shortname import ShortNameFilter
from poolkeys.utils.types import PoolKey

log = logging.getLogger(__name__)

app = typer.Typer(help="Fetch Uniswap v4 Initialize events from Arbiscan and decode their pool keys")


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(shortname)s: %(message)s",
    )
    for handler in logging.getLogger().handlers:
        handler.addFilter(ShortNameFilter())


def run(
    config: ExplorerConfig,
    from_block: str,
    to_block: str,
    currency0: Optional[str] = None,
    currency1: Optional[str] = None,
) -> List[PoolKey]:
    """Fetch one page of Initialize logs and decode every one that parses."""
    log.info(f"Fetching Initialize events from block {from_block} to {to_block}")
    if currency0:
        log.info(f"Filtering by currency0: {currency0}")
    if currency1:
        log.info(f"Filtering by currency1: {currency1}")

    raw_events = fetch_initialize_events(
        config,
        from_block,
        to_block,
        pad_address_to_32_bytes(currency0) if currency0 else None,
        pad_address_to_32_bytes(currency1) if currency1 else None,
    )

    pool_keys, failures = decode_pool_keys(raw_events)
    if failures:
        log.warning(f"Dropped {len(failures)} of {len(raw_events)} logs that failed to decode")
    return pool_keys


def _block_argument(value: str) -> str:
    try:
        parse_block(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    return value


@app.command()
def pool_keys(
    from_block: str = typer.Argument(
        DEFAULT_FROM_BLOCK, callback=_block_argument, help="First block, decimal or 0x hex"
    ),
    to_block: str = typer.Argument(
        DEFAULT_TO_BLOCK, callback=_block_argument, help="Last block, decimal or 0x hex"
    ),
):
    """
    Print the decoded PoolKeys for the configured currency pair as JSON.
    """
    keys = run(load_explorer_config(), from_block, to_block, CURRENCY_0, CURRENCY_1)
    typer.echo(json.dumps([k.to_json() for k in keys], indent=2))


def main():
    configure_logging()
    app()


if __name__ == "__main__":
    main()
