"""
Validation of password requests.

The requesting side runs these checks before anything is sent; a strict
server runs them again on every decoded request.
"""

from udp_passgen.utils.exceptions import ValidationFailure
from .charset import PasswordClass


MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 32
DEFAULT_PASSWORD_LENGTH = 8

# Local sentinel that ends an interactive session; never sent
STOP_SELECTOR = "q"


def is_stop_request(selector: str) -> bool:
    """Check if the selector asks the client to stop"""
    return isinstance(selector, str) and selector.lower() == STOP_SELECTOR


def validate_class(selector: str) -> bool:
    """Check that a class selector names a defined password class"""
    return PasswordClass.from_selector(selector) is not None


def validate_length(text: str) -> bool:
    """Check that a length is all decimal digits and within range
    
    Leading zeros are allowed, so "007" is a valid length of 7.
    
    Args:
        text: Length as typed or as decoded from the wire
        
    Returns:
        True if the length is acceptable
    """
    if not isinstance(text, str) or not text:
        return False
    # str.isdigit() also accepts non-ASCII digits such as superscripts
    if not all("0" <= c <= "9" for c in text):
        return False
    return MIN_PASSWORD_LENGTH <= int(text) <= MAX_PASSWORD_LENGTH


class PasswordLength(int):
    """Password length known to lie within the accepted range"""

    def __new__(cls, value: int):
        if not MIN_PASSWORD_LENGTH <= value <= MAX_PASSWORD_LENGTH:
            raise ValidationFailure(
                f"Length must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}, got {value}"
            )
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, text: str) -> "PasswordLength":
        """Parse and range-check a length string
        
        Raises:
            ValidationFailure: If the text is not a valid length
        """
        if not validate_length(text):
            raise ValidationFailure(
                f"Invalid length {text!r}: expected a number between "
                f"{MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
            )
        return cls(int(text))


def parse_class(selector: str) -> PasswordClass:
    """Convert a selector to its password class
    
    Raises:
        ValidationFailure: If the selector names no class
    """
    password_class = PasswordClass.from_selector(selector)
    if password_class is None:
        raise ValidationFailure(f"Invalid password type {selector!r}")
    return password_class
