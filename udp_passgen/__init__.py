"""
UDP Password Generator

Request passwords of a chosen class and length from a server over UDP.
"""

from udp_passgen.core.client import PasswordClient
from udp_passgen.core.server import PasswordServer
from udp_passgen.core.generator import PasswordGenerator
from udp_passgen.core.charset import PasswordClass

__version__ = "0.1.0"
