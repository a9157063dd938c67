"""Base-62 text codec over the radix converter."""

from ksuid.errors import InvalidCharacterError
from ksuid.radix import convert

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)


def _digit(char, position):
    # 0-9, A-Z, a-z are three contiguous ASCII ranges
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 36
    raise InvalidCharacterError(
        f"Invalid base62 character {char!r} at position {position}",
        character=char,
        position=position,
    )


def encode(data, fixed_length=None):
    """Encode bytes as base-62 text, left-padded with '0'."""
    digits = convert(bytes(data), 256, BASE, fixed_length)
    return "".join(ALPHABET[value] for value in digits)


def decode(text, fixed_length=None):
    """Decode base-62 text into bytes, left-padded with zero bytes."""
    digits = [_digit(char, position) for position, char in enumerate(text)]
    return bytes(convert(digits, BASE, 256, fixed_length))
