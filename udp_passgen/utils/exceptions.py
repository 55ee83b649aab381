"""
Custom exceptions for the UDP password generator.
"""

class PassgenError(Exception):
    """Base exception for password generator errors"""
    pass


class ValidationFailure(PassgenError):
    """Requested class or length is not acceptable"""
    pass


class MalformedMessage(PassgenError):
    """Message does not match the fixed wire layout"""
    pass


class TransportFailure(PassgenError):
    """Error sending or receiving a datagram"""
    pass


class ConfigError(PassgenError):
    """Error in configuration"""
    pass
