"""
Serving side of the password exchange.

This module provides the PasswordServer class, which answers each request
datagram with one response datagram, one exchange at a time.
"""

import logging
from enum import Enum
from typing import Optional, Tuple

from .charset import PasswordClass
from .generator import PasswordGenerator
from .protocol import (
    PasswordRequest,
    PasswordResponse,
    decode_request,
    encode_response,
)
from .transport import Transport
from .validator import MAX_PASSWORD_LENGTH, PasswordLength, parse_class
from udp_passgen.utils.exceptions import MalformedMessage, ValidationFailure


class ServerState(Enum):
    """Where the server is within one exchange"""
    LISTENING = "listening"
    DECODING = "decoding"
    GENERATING = "generating"
    RESPONDING = "responding"


def _atoi(text: str) -> int:
    """Parse leading digits like C atoi(); 0 when there are none"""
    text = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for c in text:
        if not "0" <= c <= "9":
            break
        digits += c
    return sign * int(digits) if digits else 0


class PasswordServer:
    """Answers password requests arriving on a transport"""
    
    def __init__(self, transport: Transport, generator: Optional[PasswordGenerator] = None,
                 strict: bool = True, logger=None):
        """Initialize with a bound transport and a generator
        
        Args:
            transport: Transport to receive requests on and reply through
            generator: Password generator (default: non-cryptographic source)
            strict: Re-validate every decoded request; when False, unknown
                selectors fall back to Numeric and lengths are not range-checked
            logger: Optional logger instance
        """
        self.transport = transport
        self.generator = generator or PasswordGenerator()
        self.strict = strict
        self.logger = logger or logging.getLogger("udp_passgen.server")
        self.state = ServerState.LISTENING
        self.requests_served = 0
        
        if not self.generator.random_source.cryptographic:
            self.logger.warning(
                "Using a non-cryptographic random source; "
                "enable secure_random for passwords that protect anything real"
            )
    
    def _resolve(self, request: PasswordRequest) -> Tuple[PasswordClass, int]:
        """Turn a decoded request into a class and a length
        
        Raises:
            ValidationFailure: In strict mode, if the request is not acceptable
            MalformedMessage: In lenient mode, if the length exceeds the response capacity
        """
        if self.strict:
            return parse_class(request.selector), PasswordLength.parse(request.length)
            
        password_class = PasswordClass.from_selector(request.selector)
        if password_class is None:
            self.logger.warning(f"Unknown password type {request.selector!r}, using numeric")
            password_class = PasswordClass.NUMERIC
        length = _atoi(request.length)
        if length > MAX_PASSWORD_LENGTH:
            raise MalformedMessage(
                f"Length {length} does not fit the {MAX_PASSWORD_LENGTH}-character response"
            )
        return password_class, length
    
    def handle_request(self, data: bytes) -> bytes:
        """Produce the response datagram for one request datagram
        
        A strict server answers an unacceptable request with an empty
        password so the requesting side is not left waiting.
        
        Args:
            data: Raw request datagram
            
        Returns:
            Encoded response
            
        Raises:
            MalformedMessage: If the request cannot be decoded, or asks for
                more characters than the response buffer holds
        """
        self.state = ServerState.DECODING
        request = decode_request(data)
        
        try:
            password_class, length = self._resolve(request)
        except ValidationFailure as e:
            self.logger.warning(f"Rejected request: {e}")
            self.state = ServerState.RESPONDING
            return encode_response(PasswordResponse(password=""))
        
        self.state = ServerState.GENERATING
        self.logger.debug(f"Generating {password_class.name.lower()} password of length {length}")
        password = self.generator.generate(password_class, length)
        
        self.state = ServerState.RESPONDING
        return encode_response(PasswordResponse(password=password))
    
    def serve_once(self) -> bool:
        """Receive one request and answer it
        
        Returns:
            True if a response was sent, False if the request was dropped
            
        Raises:
            TransportFailure: If receiving or sending fails
        """
        self.state = ServerState.LISTENING
        data, peer = self.transport.receive()
        self.logger.info(f"New request from {peer[0]}:{peer[1]}")
        
        try:
            reply = self.handle_request(data)
        except MalformedMessage as e:
            self.logger.warning(f"Dropped request from {peer[0]}:{peer[1]}: {e}")
            self.state = ServerState.LISTENING
            return False
            
        self.transport.send(reply, peer)
        self.requests_served += 1
        self.state = ServerState.LISTENING
        return True
    
    def serve_forever(self) -> None:
        """Answer requests until the transport fails or the process is interrupted"""
        self.logger.info("Server listening...")
        while True:
            self.serve_once()
