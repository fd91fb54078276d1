class PoolKeysError(Exception):
    """Base error for the pool key fetcher."""


class TransportError(PoolKeysError):
    """The explorer could not be reached or sent back garbage."""


class ApiError(PoolKeysError):
    """The explorer answered with status != "1"."""

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.message = message
        self.result = result


class DecodeError(PoolKeysError):
    """A single log could not be decoded into a PoolKey."""


class MalformedLog(DecodeError):
    """Wrong number of topics or wrong data length."""
