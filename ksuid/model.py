"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import numbers
import struct
from decimal import Decimal
from functools import total_ordering

from ksuid import base62
from ksuid.errors import (
    InvalidEncodedLengthError,
    InvalidLengthError,
    InvalidPayloadLengthError,
    TimestampOutOfRangeError,
)
from ksuid.logging import get_logger
from ksuid.random_source import random_bytes
from ksuid.timestamp import from_millis, iso_seconds, now_millis

# KSUID epoch: 2014-05-13T16:53:20Z
EPOCH_IN_MS = 1_400_000_000_000
MAX_TIME_IN_MS = 1000 * (2**32 - 1) + EPOCH_IN_MS

TIMESTAMP_BYTE_LENGTH = 4
PAYLOAD_BYTE_LENGTH = 16
BYTE_LENGTH = TIMESTAMP_BYTE_LENGTH + PAYLOAD_BYTE_LENGTH
STRING_ENCODED_LENGTH = 27

MIN_STRING_ENCODED = "000000000000000000000000000"
MAX_STRING_ENCODED = "aWgEPTl1tmebfsQzFP4bxwgy80V"

TIME_IN_MS_ASSERTION = (
    f"Valid KSUID timestamps must be in milliseconds since {iso_seconds(0)}, "
    f"no earlier than {iso_seconds(EPOCH_IN_MS)} and no later than {iso_seconds(MAX_TIME_IN_MS)}"
)
VALID_ENCODING_ASSERTION = f"Valid encoded KSUIDs are {STRING_ENCODED_LENGTH} characters"
VALID_BUFFER_ASSERTION = f"Valid KSUID buffers are {BYTE_LENGTH} bytes"
VALID_PAYLOAD_ASSERTION = f"Valid KSUID payloads are {PAYLOAD_BYTE_LENGTH} bytes"

_BYTES_LIKE = (bytes, bytearray, memoryview)
_TIMESTAMP = struct.Struct(">I")


def _checked_timestamp(timestamp):
    """Integral milliseconds inside the representable window."""
    if isinstance(timestamp, bool):
        raise TimestampOutOfRangeError(TIME_IN_MS_ASSERTION, timestamp=timestamp)
    if isinstance(timestamp, numbers.Integral):
        timestamp = int(timestamp)
    elif isinstance(timestamp, (numbers.Real, Decimal)):
        try:
            whole = int(timestamp)
        except (ValueError, OverflowError):
            raise TimestampOutOfRangeError(TIME_IN_MS_ASSERTION, timestamp=timestamp) from None
        if whole != timestamp:
            raise TimestampOutOfRangeError(TIME_IN_MS_ASSERTION, timestamp=timestamp)
        timestamp = whole
    else:
        raise TimestampOutOfRangeError(TIME_IN_MS_ASSERTION, timestamp=timestamp)
    if not EPOCH_IN_MS <= timestamp <= MAX_TIME_IN_MS:
        raise TimestampOutOfRangeError(TIME_IN_MS_ASSERTION, timestamp=timestamp)
    return timestamp


def _pack(timestamp, payload):
    return _TIMESTAMP.pack((timestamp - EPOCH_IN_MS) // 1000) + payload


@total_ordering
class KSUID:
    """An immutable 20-byte identifier ordered by creation second."""

    __slots__ = ("_raw",)

    MIN_STRING_ENCODED = MIN_STRING_ENCODED
    MAX_STRING_ENCODED = MAX_STRING_ENCODED

    def __init__(self, buffer):
        if not isinstance(buffer, _BYTES_LIKE):
            raise TypeError(f"KSUID buffer must be bytes-like, got {type(buffer).__name__}")
        raw = bytes(buffer)
        if len(raw) != BYTE_LENGTH:
            get_logger().debug("Rejected KSUID buffer", length=len(raw))
            raise InvalidLengthError(VALID_BUFFER_ASSERTION, length=len(raw), expected=BYTE_LENGTH)
        self._raw = raw

    @classmethod
    def from_bytes(cls, buffer):
        return cls(buffer)

    @classmethod
    def from_parts(cls, timestamp, payload):
        """Build a KSUID from a millisecond timestamp and a 16-byte payload."""
        timestamp = _checked_timestamp(timestamp)
        if not isinstance(payload, _BYTES_LIKE):
            raise InvalidPayloadLengthError(VALID_PAYLOAD_ASSERTION, expected=PAYLOAD_BYTE_LENGTH)
        payload = bytes(payload)
        if len(payload) != PAYLOAD_BYTE_LENGTH:
            raise InvalidPayloadLengthError(
                VALID_PAYLOAD_ASSERTION, length=len(payload), expected=PAYLOAD_BYTE_LENGTH
            )
        return cls(_pack(timestamp, payload))

    @classmethod
    def random(cls, timestamp=None, random_source=None):
        """Generate a KSUID with a fresh payload from a secure random source."""
        if timestamp is None:
            timestamp = now_millis()
        return cls.from_parts(timestamp, random_bytes(PAYLOAD_BYTE_LENGTH, random_source))

    @classmethod
    async def random_async(cls, timestamp=None, random_source=None):
        """Awaitable form of :meth:`random`; it never suspends."""
        return cls.random(timestamp, random_source)

    @classmethod
    def parse(cls, data):
        """Decode a 27-character base62 string."""
        if not isinstance(data, str):
            raise TypeError(f"Encoded KSUID must be str, got {type(data).__name__}")
        if len(data) != STRING_ENCODED_LENGTH:
            get_logger().debug("Rejected encoded KSUID", length=len(data))
            raise InvalidEncodedLengthError(
                VALID_ENCODING_ASSERTION, length=len(data), expected=STRING_ENCODED_LENGTH
            )

        decoded = base62.decode(data, BYTE_LENGTH)
        if len(decoded) < BYTE_LENGTH:
            pad = BYTE_LENGTH - len(decoded)
            buffer = bytearray(BYTE_LENGTH)
            buffer[:pad] = bytes(pad)
            buffer[pad:] = decoded
            decoded = bytes(buffer)
        return cls(decoded)

    @staticmethod
    def is_valid(buffer):
        return isinstance(buffer, _BYTES_LIKE) and len(bytes(buffer)) == BYTE_LENGTH

    @property
    def raw(self):
        return self._raw

    @property
    def timestamp(self):
        """Seconds since the KSUID epoch."""
        return _TIMESTAMP.unpack_from(self._raw, 0)[0]

    @property
    def millis(self):
        """Milliseconds since the Unix epoch."""
        return self.timestamp * 1000 + EPOCH_IN_MS

    @property
    def date(self):
        return from_millis(self.millis)

    @property
    def payload(self):
        return self._raw[TIMESTAMP_BYTE_LENGTH:]

    @property
    def string(self):
        return base62.encode(self._raw, STRING_ENCODED_LENGTH).rjust(STRING_ENCODED_LENGTH, "0")

    def compare(self, other):
        """Unsigned byte-wise comparison returning -1, 0 or 1."""
        if self is other:
            return 0
        if not isinstance(other, KSUID):
            raise TypeError(f"cannot compare KSUID with {type(other).__name__}")
        a, b = self._raw, other._raw
        return (a > b) - (a < b)

    def equals(self, other):
        return self.compare(other) == 0

    def __eq__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, KSUID):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(self._raw)

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self.string

    def __repr__(self):
        return f"KSUID({self.string!r})"

    def __reduce__(self):
        return (type(self), (self._raw,))


KSUID.MIN = KSUID(bytes(BYTE_LENGTH))
KSUID.MAX = KSUID(b"\xff" * BYTE_LENGTH)


def compare(a, b):
    """Three-way comparison, usable with ``functools.cmp_to_key``."""
    return a.compare(b)


def equals(a, b):
    return a.compare(b) == 0


def is_valid(buffer):
    return KSUID.is_valid(buffer)


def generate_ksuid(timestamp=None):
    """Generate a 27-character sortable unique ID."""
    return KSUID.random(timestamp).string
