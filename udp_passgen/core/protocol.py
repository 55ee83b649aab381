"""
Wire format of the password exchange.

Both messages are fixed-size C-style records:

    request:  1 byte class selector + 1024-byte NUL-terminated ASCII length
    response: 33-byte NUL-terminated ASCII password (at most 32 characters)

Bytes after the terminator are padding and are ignored when decoding.
"""

import struct
from dataclasses import dataclass

from udp_passgen.utils.exceptions import MalformedMessage
from .validator import MAX_PASSWORD_LENGTH


BUFFER_SIZE = 1024
PASSWORD_BUFFER_SIZE = MAX_PASSWORD_LENGTH + 1

_REQUEST_STRUCT = struct.Struct(f"=c{BUFFER_SIZE}s")
_RESPONSE_STRUCT = struct.Struct(f"={PASSWORD_BUFFER_SIZE}s")

REQUEST_SIZE = _REQUEST_STRUCT.size
RESPONSE_SIZE = _RESPONSE_STRUCT.size


@dataclass(frozen=True)
class PasswordRequest:
    """Request for one password"""
    selector: str
    length: str


@dataclass(frozen=True)
class PasswordResponse:
    """Generated password returned for a request"""
    password: str


def _to_field(text: str, capacity: int, name: str) -> bytes:
    """Encode text as ASCII, leaving room for the NUL terminator"""
    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError:
        raise MalformedMessage(f"{name} must be ASCII: {text!r}")
    if b"\0" in raw:
        raise MalformedMessage(f"{name} must not contain NUL bytes")
    if len(raw) >= capacity:
        raise MalformedMessage(
            f"{name} is {len(raw)} bytes, field holds at most {capacity - 1}"
        )
    return raw


def _from_field(raw: bytes, name: str) -> str:
    """Decode a NUL-terminated ASCII field"""
    end = raw.find(b"\0")
    if end < 0:
        raise MalformedMessage(f"{name} is not NUL-terminated")
    try:
        return raw[:end].decode("ascii")
    except UnicodeDecodeError:
        raise MalformedMessage(f"{name} is not ASCII")


def _check_size(data: bytes, expected: int, kind: str) -> None:
    if len(data) != expected:
        raise MalformedMessage(
            f"{kind} must be exactly {expected} bytes, got {len(data)}"
        )


def encode_request(request: PasswordRequest) -> bytes:
    """Encode a request into its fixed-size wire form
    
    Args:
        request: Request to encode
        
    Returns:
        REQUEST_SIZE bytes
        
    Raises:
        MalformedMessage: If a field cannot be represented in the layout
    """
    selector = _to_field(request.selector, 2, "Class selector")
    if len(selector) != 1:
        raise MalformedMessage("Class selector must be exactly one character")
    length = _to_field(request.length, BUFFER_SIZE, "Length")
    # struct pads the length field with NUL bytes
    return _REQUEST_STRUCT.pack(selector, length)


def decode_request(data: bytes) -> PasswordRequest:
    """Decode a request received from the wire
    
    Raises:
        MalformedMessage: If the buffer is not exactly REQUEST_SIZE bytes
            or the length field is not NUL-terminated ASCII
    """
    _check_size(data, REQUEST_SIZE, "Request")
    selector, length = _REQUEST_STRUCT.unpack(data)
    # Any byte decodes to a selector; whether it names a class is up to the server
    return PasswordRequest(selector=selector.decode("latin-1"), length=_from_field(length, "Length"))


def encode_response(response: PasswordResponse) -> bytes:
    """Encode a response into its fixed-size wire form
    
    Raises:
        MalformedMessage: If the password is longer than MAX_PASSWORD_LENGTH
    """
    password = _to_field(response.password, PASSWORD_BUFFER_SIZE, "Password")
    return _RESPONSE_STRUCT.pack(password)


def decode_response(data: bytes) -> PasswordResponse:
    """Decode a response received from the wire
    
    Raises:
        MalformedMessage: If the buffer is not exactly RESPONSE_SIZE bytes
    """
    _check_size(data, RESPONSE_SIZE, "Response")
    (password,) = _RESPONSE_STRUCT.unpack(data)
    return PasswordResponse(password=_from_field(password, "Password"))
