"""Exceptions raised by the Axioplan client.

Every failure surfaces to the caller. Nothing here is retried internally:
repeating a "set" that already reached the stand could move it twice.
"""


class ScopeError(Exception):
    """Base class for all stand communication errors."""


class CommunicationFailure(ScopeError, ConnectionError):
    """Opening, writing to, or reading from the serial port failed."""


class EmptyResponse(ScopeError):
    def __init__(self, received=b""):
        self.received = received
        super().__init__(f"received response was empty ({received!r})")


class QueryValidation(ScopeError):
    """The echoed command code did not match the command sent."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"query validation failed; {expected!r} != {actual!r}")


class InvalidResponse(ScopeError):
    def __init__(self, detail="the response received was invalid"):
        super().__init__(detail)


class InvalidNumber(ScopeError, ValueError):
    pass


class InvalidUTF8(ScopeError, ValueError):
    pass


class OutOfRange(ScopeError, ValueError):
    def __init__(self, value, limit):
        self.value = value
        self.limit = limit
        super().__init__(f"value provided was out of the valid range: {value} (limit {limit})")
