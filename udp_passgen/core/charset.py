"""
Character sets for each password class.

Every class maps to a fixed, ordered charset. Mixed has no charset of its own:
it draws each position from either ALPHA or NUMERIC.
"""

import string
from enum import Enum
from typing import Dict, Optional


NUMERIC = string.digits
ALPHA = string.ascii_lowercase
SYMBOLS = "!@#$%^&*()"
SECURE = string.ascii_lowercase + string.ascii_uppercase + string.digits + SYMBOLS

# Characters easily confused with one another when read or typed
AMBIGUOUS_CHARACTERS = "0Oo1lIi2Zz5Ss8B"
UNAMBIGUOUS = "".join(c for c in SECURE if c not in AMBIGUOUS_CHARACTERS)


class PasswordClass(Enum):
    """Password classes, valued by their wire selector"""

    NUMERIC = "n"
    ALPHA = "a"
    MIXED = "m"
    SECURE = "s"
    UNAMBIGUOUS = "u"

    @property
    def selector(self) -> str:
        return self.value

    @classmethod
    def from_selector(cls, selector: str) -> Optional["PasswordClass"]:
        """Map a class selector to its class, ignoring case

        Args:
            selector: Single-character class selector

        Returns:
            The matching PasswordClass or None if the selector is not defined
        """
        if not isinstance(selector, str) or len(selector) != 1:
            return None
        try:
            return cls(selector.lower())
        except ValueError:
            return None


_CHARSETS: Dict[PasswordClass, str] = {
    PasswordClass.NUMERIC: NUMERIC,
    PasswordClass.ALPHA: ALPHA,
    PasswordClass.MIXED: ALPHA + NUMERIC,
    PasswordClass.SECURE: SECURE,
    PasswordClass.UNAMBIGUOUS: UNAMBIGUOUS,
}


def charset_for(password_class: PasswordClass) -> str:
    """Return every character that may appear in a password of this class"""
    return _CHARSETS[password_class]
