from typing import NamedTuple, Optional

from poolkeys.utils.errors import DecodeError


class PoolKey(NamedTuple):
    currency0: str
    currency1: str
    fee: int
    tick_spacing: int
    hooks: str

    def to_json(self) -> dict:
        return {
            "currency0": self.currency0,
            "currency1": self.currency1,
            "fee": self.fee,
            "tickSpacing": self.tick_spacing,
            "hooks": self.hooks,
        }


class DecodeResult(NamedTuple):
    log: dict
    pool_key: Optional[PoolKey] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
