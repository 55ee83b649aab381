"""
Requesting side of the password exchange.
"""

import logging
from typing import List, Optional

from tqdm import tqdm

from .protocol import (
    PasswordRequest,
    PasswordResponse,
    encode_request,
    decode_response,
)
from .transport import Address, Transport
from .validator import (
    DEFAULT_PASSWORD_LENGTH,
    is_stop_request,
    validate_class,
    validate_length,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
)
from udp_passgen.utils.exceptions import MalformedMessage, ValidationFailure


class PasswordClient:
    """Requests passwords from a server, one exchange at a time"""
    
    def __init__(self, transport: Transport, server_address: Address,
                 default_length: int = DEFAULT_PASSWORD_LENGTH, logger=None):
        """Initialize with a transport and the server's resolved address
        
        Args:
            transport: Unbound transport used for requests
            server_address: (ip, port) of the server
            default_length: Length used when a request names only a type
            logger: Optional logger instance
        """
        self.transport = transport
        self.server_address = server_address
        self.default_length = default_length
        self.logger = logger or logging.getLogger("udp_passgen.client")
    
    def build_request(self, selector: str, length: Optional[str] = None) -> PasswordRequest:
        """Validate user input and build a request from it
        
        Args:
            selector: Password type selector (n, a, m, s or u)
            length: Length as text; default_length when omitted
            
        Returns:
            Request ready to be sent
            
        Raises:
            ValidationFailure: If the type or the length is not acceptable
        """
        if is_stop_request(selector):
            raise ValidationFailure("'q' stops the client and cannot be requested")
        if not validate_class(selector):
            raise ValidationFailure(f"Invalid type {selector!r}. Please choose a valid option.")
        
        if length is None:
            length = str(self.default_length)
        if not validate_length(length):
            raise ValidationFailure(
                f"Invalid length {length!r}. Please choose a length between "
                f"{MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}."
            )
        return PasswordRequest(selector=selector, length=length)
    
    def request_password(self, selector: str, length: Optional[str] = None) -> PasswordResponse:
        """Run one exchange with the server
        
        Nothing is sent when validation fails.
        
        Returns:
            The server's response
            
        Raises:
            ValidationFailure: If the request is not acceptable
            MalformedMessage: If the response is malformed or the server
                rejected the request
            TransportFailure: If sending or receiving fails
        """
        request = self.build_request(selector, length)
        self.logger.debug(f"Requesting type {request.selector!r} length {request.length}")
        
        self.transport.send(encode_request(request), self.server_address)
        response = decode_response(self._receive_from_server())
        
        if not response.password:
            raise MalformedMessage("Server rejected the request")
        if len(response.password) != int(request.length):
            raise MalformedMessage(
                f"Server returned {len(response.password)} characters, "
                f"requested {int(request.length)}"
            )
        return response
    
    def _receive_from_server(self) -> bytes:
        """Wait for a datagram from the server, skipping any other sender"""
        while True:
            data, sender = self.transport.receive()
            if sender == self.server_address:
                return data
            self.logger.warning(f"Ignored datagram from unexpected peer {sender[0]}:{sender[1]}")
    
    def request_passwords(self, selector: str, length: Optional[str] = None,
                          count: int = 1, progress: bool = True) -> List[str]:
        """Request several passwords of the same type, one after another
        
        Args:
            selector: Password type selector
            length: Length as text; default_length when omitted
            count: Number of passwords to request
            progress: Show a progress bar when more than one is requested
            
        Returns:
            The generated passwords in order
        """
        # Fail before the first send rather than on it
        self.build_request(selector, length)
        
        passwords = []
        with tqdm(total=count, unit="pw", disable=not progress or count <= 1) as pbar:
            for _ in range(count):
                passwords.append(self.request_password(selector, length).password)
                pbar.update(1)
        return passwords
