"""
Cryptographically secure random bytes for KSUID payloads.

A random source is any callable taking a byte count and returning that many
bytes. The built-in sources read the operating system CSPRNG and never fall
back to a weaker generator.
"""

import os
import secrets
import threading

from ksuid.errors import RandomSourceUnavailableError
from ksuid.logging import get_logger

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _unavailable(name, n, exc):
    get_logger().error("Secure random source unavailable", error=exc, source=name, requested=n)
    return RandomSourceUnavailableError(
        "No cryptographically secure random source available", context={"source": name}
    )


def system_random_bytes(n):
    """Read ``n`` bytes from the OS CSPRNG."""
    try:
        return os.urandom(n)
    except NotImplementedError as exc:
        raise _unavailable("system", n, exc) from exc


def secrets_random_bytes(n):
    """Read ``n`` bytes through :mod:`secrets`."""
    try:
        return secrets.token_bytes(n)
    except NotImplementedError as exc:
        raise _unavailable("secrets", n, exc) from exc


SOURCES = {
    "system": system_random_bytes,
    "secrets": secrets_random_bytes,
}


def source_by_name(name):
    try:
        return SOURCES[name]
    except KeyError:
        choices = ", ".join(sorted(SOURCES))
        raise ValueError(f"Unknown random source {name!r}, expected one of {choices}") from None


_default_source = system_random_bytes
_source_lock = threading.Lock()


def get_default_source():
    return _default_source


def set_default_source(source):
    """Replace the process-wide default source, returning the previous one."""
    global _default_source
    if not callable(source):
        raise TypeError(f"random source must be callable, got {type(source).__name__}")
    with _source_lock:
        previous, _default_source = _default_source, source
    return previous


def random_bytes(n, source=None):
    """Draw ``n`` bytes from ``source`` or the default source."""
    data = (source or _default_source)(n)
    if not isinstance(data, _BYTES_LIKE):
        raise TypeError(f"random source must return bytes, got {type(data).__name__}")
    return bytes(data)
