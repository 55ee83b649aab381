"""
Core functionality for the UDP password generator.
"""

from .charset import PasswordClass, charset_for
from .generator import (
    RandomSource,
    StandardRandomSource,
    SystemRandomSource,
    PasswordGenerator,
)
from .validator import (
    validate_class,
    validate_length,
    is_stop_request,
    PasswordLength,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
)
from .protocol import (
    PasswordRequest,
    PasswordResponse,
    encode_request,
    decode_request,
    encode_response,
    decode_response,
    REQUEST_SIZE,
    RESPONSE_SIZE,
)
from .transport import Transport, UDPTransport, resolve_address
from .server import PasswordServer, ServerState
from .client import PasswordClient
