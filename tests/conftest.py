"""Pytest fixtures for all tests."""

import io
import random

import pytest

from ksuid import logging as ksuid_logging
from ksuid import random_source


@pytest.fixture
def payload():
    """A recognisable 16-byte payload."""
    return bytes(range(1, 17))


@pytest.fixture
def fixed_source():
    """Factory for random sources that replay the given bytes."""
    def make(data):
        calls = []

        def source(n):
            calls.append(n)
            return data[:n]

        source.calls = calls
        return source
    return make


@pytest.fixture
def seeded():
    """Deterministic PRNG for sampling buffers in property tests."""
    return random.Random(20140513)


@pytest.fixture
def log_stream():
    """Route the structured logger to an in-memory stream at DEBUG."""
    stream = io.StringIO()
    ksuid_logging.StructuredLogger.configure(ksuid_logging.LogLevel.DEBUG, stream=stream)
    yield stream
    ksuid_logging._logger = None


@pytest.fixture(autouse=True)
def restore_globals():
    """Undo process-wide wiring done by a test."""
    source = random_source.get_default_source()
    logger = ksuid_logging._logger
    yield
    random_source.set_default_source(source)
    ksuid_logging._logger = logger
