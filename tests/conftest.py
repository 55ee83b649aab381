"""Shared fixtures for the password generator tests."""

import logging
from collections import deque

import pytest

from udp_passgen.core.generator import PasswordGenerator, StandardRandomSource
from udp_passgen.core.transport import Transport


class FakeTransport(Transport):
    """In-memory transport that records sends and replays queued receives."""

    def __init__(self, incoming=None, reply=None):
        self.incoming = deque(incoming or [])
        self.sent = []
        self.reply = reply
        self.closed = False

    def send(self, data, address):
        self.sent.append((data, address))
        if self.reply is not None:
            self.incoming.append((self.reply(data), address))

    def receive(self):
        if not self.incoming:
            raise AssertionError("receive() called with nothing queued")
        return self.incoming.popleft()

    def close(self):
        self.closed = True


@pytest.fixture
def generator():
    """Generator with a fixed seed for reproducible output."""
    return PasswordGenerator(StandardRandomSource(seed=1234))


@pytest.fixture
def peer():
    return ("127.0.0.1", 50000)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler setup done by the CLI so caplog keeps seeing records."""
    yield
    package_logger = logging.getLogger("udp_passgen")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
