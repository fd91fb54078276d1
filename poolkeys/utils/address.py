from hexbytes import HexBytes
from web3 import Web3


def pad_address_to_32_bytes(address: str) -> str:
    """Left-pad a 20-byte address to a 32-byte topic value (0x + 64 hex chars)."""
    clean = address[2:] if address.startswith("0x") else address
    clean = clean.lower()
    if len(clean) != 40:
        raise ValueError("Invalid Ethereum address length")
    return "0x" + clean.rjust(64, "0")


def topic_to_address(topic) -> str:
    """Take the low 20 bytes of a 32-byte topic and checksum them."""
    raw = HexBytes(topic)
    if len(raw) != 32:
        raise ValueError(f"Topic must be 32 bytes, got {len(raw)}")
    return Web3.to_checksum_address(HexBytes(raw[12:]).to_0x_hex())
