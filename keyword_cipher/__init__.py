"""
keyword_cipher — Vigenère-family substitution core
==================================================
The two moving parts of a repeating-keyword polyalphabetic cipher.

Parts:
    keygen    — KeyGenerator: infinite, cycling stream of keyword letters
    shift     — shift / unshift: one text char + one key char, mod 26
    alphabet  — shared A..Z / a..z normalization used by both

A caller pulls one key character per text character and feeds both
into shift() (encrypt) or unshift() (decrypt).

DISCLAIMER: for study and entertainment only. Not secure in any sense.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .alphabet import (
    ALPHABET_SIZE,
    UPPER_OFFSET,
    LOWER_OFFSET,
    AlphabetInvariantError,
)
from .keygen   import KeyGenerator, InvalidKeyword
from .shift    import shift, unshift, wrapped_shift

__all__ = [
    "KeyGenerator",
    "InvalidKeyword",
    "shift",
    "unshift",
    "wrapped_shift",
    "AlphabetInvariantError",
    "ALPHABET_SIZE",
    "UPPER_OFFSET",
    "LOWER_OFFSET",
]
