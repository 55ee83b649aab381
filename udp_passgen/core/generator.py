"""
Password generation for the UDP password generator.

Randomness comes from an injected RandomSource so tests can seed it and
deployments can swap in the operating system's CSPRNG.
"""

from abc import ABC, abstractmethod
import random
from typing import Optional

from .charset import PasswordClass, charset_for, ALPHA, NUMERIC


class RandomSource(ABC):
    """Abstract source of uniform random indices"""

    @property
    def cryptographic(self) -> bool:
        """Whether the source is suitable for secrets"""
        return False

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniform random integer in [0, n)"""
        pass

    def choice(self, charset: str) -> str:
        """Draw one character uniformly from a non-empty charset"""
        return charset[self.randbelow(len(charset))]


class StandardRandomSource(RandomSource):
    """Mersenne Twister source, reproducible when seeded. Not for secrets."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


class SystemRandomSource(RandomSource):
    """Source backed by the operating system's CSPRNG"""

    def __init__(self):
        self._random = random.SystemRandom()

    @property
    def cryptographic(self) -> bool:
        return True

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)


class PasswordGenerator:
    """Generates passwords of a given class and length"""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """Initialize with a random source (default: unseeded StandardRandomSource)"""
        self.random_source = random_source or StandardRandomSource()

    def generate(self, password_class: PasswordClass, length: int) -> str:
        """Generate a password
        
        Every position is drawn independently. Mixed first flips a fair coin
        per position, then draws a letter or a digit, so letters and digits
        are equally likely overall rather than weighted 26:10.
        
        Args:
            password_class: Class of password to generate
            length: Number of characters; the caller checks the range
            
        Returns:
            The generated password
        """
        if password_class is PasswordClass.MIXED:
            return "".join(self._mixed_character() for _ in range(length))

        charset = charset_for(password_class)
        return "".join(self.random_source.choice(charset) for _ in range(length))

    def _mixed_character(self) -> str:
        if self.random_source.randbelow(2):
            return self.random_source.choice(ALPHA)
        return self.random_source.choice(NUMERIC)
