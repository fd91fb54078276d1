from collections.abc import Mapping

from hexbytes import HexBytes
from web3.datastructures import AttributeDict


def _json_safe(value):
    if isinstance(value, (bytes, bytearray, HexBytes)):
        return HexBytes(value).to_0x_hex()
    if isinstance(value, AttributeDict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def sanitize_log(log):
    """Convert an explorer or Web3 log to a JSON-safe dict."""
    if not isinstance(log, Mapping):
        return _json_safe(log)
    return {k: _json_safe(v) for k, v in log.items()}
