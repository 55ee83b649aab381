"""
Datagram transport for the password exchange.
"""

from abc import ABC, abstractmethod
import socket
from typing import Optional, Tuple

from udp_passgen.utils.exceptions import TransportFailure


Address = Tuple[str, int]

# Whole datagrams are read; oversized ones fail the codec size check
MAX_DATAGRAM_SIZE = 65535


def resolve_address(host: str, port: int) -> Address:
    """Resolve a hostname to an IPv4 (address, port) pair
    
    Raises:
        TransportFailure: If the host cannot be resolved
    """
    try:
        return socket.gethostbyname(host), port
    except (socket.gaierror, UnicodeError) as e:
        raise TransportFailure(f"Error resolving host {host!r}: {e}")


class Transport(ABC):
    """Connectionless message transport"""

    @abstractmethod
    def send(self, data: bytes, address: Address) -> None:
        """Send one message to a peer"""
        pass

    @abstractmethod
    def receive(self) -> Tuple[bytes, Address]:
        """Block until one message arrives; return it with its sender"""
        pass

    def close(self) -> None:
        """Release the transport"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class UDPTransport(Transport):
    """UDP/IPv4 socket transport"""

    def __init__(self, bind_address: Optional[Address] = None,
                 timeout: Optional[float] = None):
        """Create the socket, optionally binding it and setting a receive timeout
        
        Args:
            bind_address: Local (host, port) to listen on; servers need one
            timeout: Seconds to wait in receive(); None waits forever
        """
        try:
            self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        except OSError as e:
            raise TransportFailure(f"Error creating socket: {e}")

        try:
            self.sock.settimeout(timeout)
            if bind_address is not None:
                self.sock.bind(bind_address)
        except OSError as e:
            self.sock.close()
            raise TransportFailure(f"Bind failed on {bind_address}: {e}")

    @property
    def local_address(self) -> Address:
        return self.sock.getsockname()

    def send(self, data: bytes, address: Address) -> None:
        try:
            sent = self.sock.sendto(data, address)
        except OSError as e:
            raise TransportFailure(f"Error sending to {address[0]}:{address[1]}: {e}")
        if sent != len(data):
            raise TransportFailure(f"Sent {sent} of {len(data)} bytes")

    def receive(self) -> Tuple[bytes, Address]:
        try:
            return self.sock.recvfrom(MAX_DATAGRAM_SIZE)
        except socket.timeout:
            raise TransportFailure("Timed out waiting for a datagram")
        except OSError as e:
            raise TransportFailure(f"Error receiving datagram: {e}")

    def close(self) -> None:
        self.sock.close()
