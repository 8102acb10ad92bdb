"""
Alphabet Normalization
======================
Two fixed, disjoint 26-letter ranges plus a pass-through class.

    Upper  : A..Z  (code points 65..90)   restoration offset 65
    Lower  : a..z  (code points 97..122)  restoration offset 97
    Other  : digits, punctuation, whitespace, anything non-Latin
             -> no normalized form, never altered

A normalized value is a letter's zero-based position in its own range
(A=0 ... Z=25, a=0 ... z=25). Both the key generator and the shift
transform go through this module, so the range checks live in one place.
"""

from typing import Optional, Tuple

ALPHABET_SIZE = 26
UPPER_OFFSET  = 65   # ord("A")
LOWER_OFFSET  = 97   # ord("a")

_OFFSETS = (UPPER_OFFSET, LOWER_OFFSET)


class AlphabetInvariantError(RuntimeError):
    """A normalized value could not be mapped back onto the alphabet."""


def _check_char(ch) -> None:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}.")


def normalize(ch: str) -> Optional[Tuple[int, int]]:
    """
    Return (value, offset) for a Latin letter, or None for anything else.

    >>> normalize("C")
    (2, 65)
    >>> normalize("7") is None
    True
    """
    _check_char(ch)
    cp = ord(ch)
    for offset in _OFFSETS:
        if offset <= cp < offset + ALPHABET_SIZE:
            return cp - offset, offset
    return None


def denormalize(value: int, offset: int) -> str:
    """
    Re-encode a normalized value into the range named by `offset`.

    Raises AlphabetInvariantError instead of returning a wrong character.
    """
    if offset not in _OFFSETS:
        raise AlphabetInvariantError(f"Unknown restoration offset {offset}.")
    if not 0 <= value < ALPHABET_SIZE:
        raise AlphabetInvariantError(
            f"Normalized value {value} outside [0, {ALPHABET_SIZE})."
        )
    return chr(value + offset)


def is_letter(ch: str) -> bool:
    return normalize(ch) is not None


def to_lower(ch: str) -> str:
    """Lowercase an uppercase Latin letter; every other character is unchanged."""
    norm = normalize(ch)
    if norm is None:
        return ch
    value, _ = norm
    return denormalize(value, LOWER_OFFSET)
