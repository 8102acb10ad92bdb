"""
Key Stream Generator
====================
Lazily yields the letters of a keyword, forever, wrapping back to the
first letter after the last one:

    "queen" -> q u e e n q u e e n q ...

The stream is never materialized. There is no reset: a fresh stream
means a fresh KeyGenerator.

Case policy
-----------
retain_case=False  the stored character is returned as-is.
retain_case=True   the stored character is returned LOWERCASED, whatever
                   case the keyword was written in. The name suggests
                   mirroring the plaintext's case, but the long-standing
                   behaviour is to force lowercase, and callers depend on it.

A single instance mutates its cursor on every call, so it must not be
shared between threads without a lock held by the owner. Separate
instances share nothing.
"""

import logging

from .alphabet import to_lower

logger = logging.getLogger(__name__)


class InvalidKeyword(ValueError):
    """The keyword cannot drive a key stream (empty or not a string)."""


class KeyGenerator:
    """Infinite, cycling stream of key characters taken from a keyword."""

    def __init__(self, keyword: str, retain_case: bool = False):
        if not isinstance(keyword, str):
            raise InvalidKeyword(
                f"Keyword must be a string, got {type(keyword).__name__}."
            )
        if not keyword:
            raise InvalidKeyword("Keyword must contain at least one character.")
        self._keyword     = keyword
        self._retain_case = bool(retain_case)
        self._position    = -1   # before the first character
        logger.info(
            f"KeyGenerator | length={len(keyword)} retain_case={self._retain_case}"
        )

    @property
    def keyword(self) -> str:
        return self._keyword

    @property
    def retain_case(self) -> bool:
        return self._retain_case

    @property
    def position(self) -> int:
        """Index of the character produced last; -1 until the first advance()."""
        return self._position

    def advance(self) -> str:
        """Return the next key character and move the cursor one step."""
        nxt = self._position + 1
        if nxt >= len(self._keyword):
            nxt = 0
        self._position = nxt

        ch = self._keyword[nxt]
        if self._retain_case:
            ch = to_lower(ch)
        logger.debug(f"advance: position={nxt} codepoint={ord(ch)}")
        return ch

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.advance()

    def __repr__(self):
        return (
            f"KeyGenerator(length={len(self._keyword)}, "
            f"retain_case={self._retain_case}, position={self._position})"
        )
