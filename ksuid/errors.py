"""KSUID errors with tracking context."""

from ksuid.timestamp import format_timestamp


class KSUIDError(Exception):
    """Base error with context and timestamp for tracking."""

    def __init__(self, message, context=None):
        super().__init__(message)
        self.message = message
        self.timestamp = format_timestamp()
        self.context = context or {}


class InvalidLengthError(KSUIDError, ValueError):
    """Raw buffer is not exactly 20 bytes."""

    def __init__(self, message, length=None, expected=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(length=length, expected=expected)
        super().__init__(message, context=context, **kwargs)


class InvalidEncodedLengthError(KSUIDError, ValueError):
    """Encoded text is not exactly 27 characters."""

    def __init__(self, message, length=None, expected=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(length=length, expected=expected)
        super().__init__(message, context=context, **kwargs)


class InvalidCharacterError(KSUIDError, ValueError):
    """Encoded text contains a character outside the base-62 alphabet."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(character=character, position=position)
        super().__init__(message, context=context, **kwargs)


class TimestampOutOfRangeError(KSUIDError, ValueError):
    """Timestamp is not an integral millisecond inside the 32-bit window."""

    def __init__(self, message, timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        context["timestamp"] = timestamp
        super().__init__(message, context=context, **kwargs)


class InvalidPayloadLengthError(KSUIDError, ValueError):
    """Payload is not exactly 16 bytes."""

    def __init__(self, message, length=None, expected=None, **kwargs):
        context = kwargs.pop("context", {})
        context.update(length=length, expected=expected)
        super().__init__(message, context=context, **kwargs)


class RandomSourceUnavailableError(KSUIDError, RuntimeError):
    """No cryptographically secure random source could be used."""
