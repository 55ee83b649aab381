"""
Utility modules for the UDP password generator.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PassgenError,
    ValidationFailure,
    MalformedMessage,
    TransportFailure,
    ConfigError,
)
from .logger import Logger
