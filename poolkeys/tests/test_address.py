import pytest
from web3 import Web3

from poolkeys.config.settings import USDT
from poolkeys.utils.address import pad_address_to_32_bytes, topic_to_address


def test_pad_address_returns_66_char_topic():
    padded = pad_address_to_32_bytes(USDT)

    assert len(padded) == 66
    assert padded == "0x" + "0" * 24 + USDT[2:].lower()


def test_pad_address_without_prefix():
    assert pad_address_to_32_bytes(USDT[2:]) == pad_address_to_32_bytes(USDT)


def test_pad_zero_address():
    assert pad_address_to_32_bytes("0x" + "0" * 40) == "0x" + "0" * 64


def test_pad_address_rejects_short_body():
    with pytest.raises(ValueError, match="Invalid Ethereum address length"):
        pad_address_to_32_bytes("0x" + "a" * 39)


def test_topic_to_address_strips_padding_and_checksums():
    topic = pad_address_to_32_bytes(USDT.lower())

    assert topic_to_address(topic) == Web3.to_checksum_address(USDT)


def test_topic_to_address_rejects_wrong_size():
    with pytest.raises(ValueError):
        topic_to_address("0x" + "00" * 20)
