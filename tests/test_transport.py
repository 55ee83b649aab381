"""Tests for the UDP transport, including a loopback exchange."""

import threading

import pytest

from udp_passgen.core.client import PasswordClient
from udp_passgen.core.server import PasswordServer
from udp_passgen.core.transport import UDPTransport, resolve_address
from udp_passgen.utils.exceptions import TransportFailure


@pytest.fixture
def server_transport():
    transport = UDPTransport(bind_address=("127.0.0.1", 0))
    yield transport
    transport.close()


def test_resolve_loopback():
    assert resolve_address("localhost", 8080)[1] == 8080
    assert resolve_address("127.0.0.1", 9000) == ("127.0.0.1", 9000)


def test_resolve_failure():
    with pytest.raises(TransportFailure):
        resolve_address("host.invalid", 8080)


def test_bind_failure(server_transport):
    with pytest.raises(TransportFailure):
        UDPTransport(bind_address=server_transport.local_address)


def test_receive_timeout():
    with UDPTransport(bind_address=("127.0.0.1", 0), timeout=0.05) as transport:
        with pytest.raises(TransportFailure, match="Timed out"):
            transport.receive()


def test_datagram_round_trip(server_transport):
    with UDPTransport(timeout=2) as sender:
        sender.send(b"x" * 1500, server_transport.local_address)
        data, address = server_transport.receive()
    assert data == b"x" * 1500
    assert address[0] == "127.0.0.1"


def test_loopback_exchange(server_transport, generator):
    server = PasswordServer(server_transport, generator=generator)
    worker = threading.Thread(target=server.serve_once, daemon=True)
    worker.start()

    with UDPTransport(timeout=5) as transport:
        client = PasswordClient(transport, server_transport.local_address)
        response = client.request_password("s", "20")

    worker.join(timeout=5)
    assert len(response.password) == 20
    assert server.requests_served == 1
