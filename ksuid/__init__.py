"""K-Sortable Unique Identifiers."""

from ksuid.errors import (
    InvalidCharacterError,
    InvalidEncodedLengthError,
    InvalidLengthError,
    InvalidPayloadLengthError,
    KSUIDError,
    RandomSourceUnavailableError,
    TimestampOutOfRangeError,
)
from ksuid.model import (
    BYTE_LENGTH,
    EPOCH_IN_MS,
    KSUID,
    MAX_STRING_ENCODED,
    MAX_TIME_IN_MS,
    MIN_STRING_ENCODED,
    PAYLOAD_BYTE_LENGTH,
    STRING_ENCODED_LENGTH,
    compare,
    equals,
    generate_ksuid,
    is_valid,
)
from ksuid.random_source import secrets_random_bytes, set_default_source, system_random_bytes

__all__ = [
    "BYTE_LENGTH",
    "EPOCH_IN_MS",
    "KSUID",
    "MAX_STRING_ENCODED",
    "MAX_TIME_IN_MS",
    "MIN_STRING_ENCODED",
    "PAYLOAD_BYTE_LENGTH",
    "STRING_ENCODED_LENGTH",
    "InvalidCharacterError",
    "InvalidEncodedLengthError",
    "InvalidLengthError",
    "InvalidPayloadLengthError",
    "KSUIDError",
    "RandomSourceUnavailableError",
    "TimestampOutOfRangeError",
    "compare",
    "equals",
    "generate_ksuid",
    "is_valid",
    "secrets_random_bytes",
    "set_default_source",
    "system_random_bytes",
]
