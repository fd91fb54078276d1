import logging

import pytest
from hexbytes import HexBytes
from web3.datastructures import AttributeDict

from poolkeys.utils.log_utils import sanitize_log
from poolkeys.utils.shortname import ShortNameFilter


def test_sanitize_log_hexes_bytes():
    log = AttributeDict({
        "topics": [HexBytes("0x" + "01" * 32)],
        "data": HexBytes("0xbeef"),
        "logIndex": 3,
    })

    assert sanitize_log(log) == {
        "topics": ["0x" + "01" * 32],
        "data": "0xbeef",
        "logIndex": 3,
    }


def test_sanitize_log_passes_explorer_dict_through(make_log):
    log = make_log()

    assert sanitize_log(log) == log


@pytest.mark.parametrize("name,shortname", [
    ("poolkeys.sources.explorer.client", "explorer-client"),
    ("poolkeys.sources.uniswap_v4.decoder", "uniswap_v4-decoder"),
    ("poolkeys.main", "main"),
    ("poolkeys", "poolkeys"),
    ("urllib3.connectionpool", "urllib3-connectionpool"),
    ("__main__", "__main__"),
])
def test_shortname_filter(name, shortname):
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

    assert ShortNameFilter().filter(record)
    assert record.shortname == shortname
