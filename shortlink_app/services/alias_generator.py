"""
Alias generation strategies.
Uses Strategy Pattern so the generation algorithm can be swapped in tests.
"""

import secrets
import string
from abc import ABC, abstractmethod


ALPHABET = string.ascii_letters + string.digits


class AliasGenerator(ABC):
    """Abstract base class for alias generators"""

    @abstractmethod
    def generate(self, length: int) -> str:
        """
        Generate a candidate alias.

        Uniqueness is NOT guaranteed; the store rejects duplicates and
        the caller retries.

        Args:
            length: Number of characters

        Returns:
            A candidate alias string
        """
        pass


class RandomAliasGenerator(AliasGenerator):
    """
    Draws each character uniformly from the alphabet.

    Uses the OS entropy source through `secrets`, so there is no shared
    generator state and concurrent calls are safe.
    """

    def __init__(self, alphabet: str = ALPHABET):
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self.alphabet = alphabet

    def generate(self, length: int) -> str:
        if length < 1:
            raise ValueError(f"alias length must be positive, got {length}")
        return ''.join(secrets.choice(self.alphabet) for _ in range(length))
