"""
Wrapped Shift Transform
=======================
One plaintext character + one key character -> one ciphertext character.

    encrypt :  c = ((p + k) mod 26) + o
    decrypt :  p = ((c - k + 26) mod 26) + o

p, c : normalized value of the text character (A=0 ... Z=25, same for a..z)
k    : normalized value of the key character; the key's case is ignored
o    : restoration offset of the TEXT character, so output case always
       follows the text, never the key

If either character is not a Latin letter, the text character comes back
unchanged. The caller still consumed a key character for that position;
whether it should have is a policy of the message loop, not of this module.

All functions here are pure.
"""

from .alphabet import ALPHABET_SIZE, denormalize, normalize


def shift(plain: str, key: str) -> str:
    """Encrypt one character with one key character."""
    p = normalize(plain)
    k = normalize(key)
    if p is None or k is None:
        return plain
    value, offset = p
    return denormalize((value + k[0]) % ALPHABET_SIZE, offset)


def unshift(cipher: str, key: str) -> str:
    """Inverse of shift(): unshift(shift(p, k), k) == p."""
    c = normalize(cipher)
    k = normalize(key)
    if c is None or k is None:
        return cipher
    value, offset = c
    return denormalize((value - k[0] + ALPHABET_SIZE) % ALPHABET_SIZE, offset)


def wrapped_shift(ch: str, amount: int) -> str:
    """
    Shift a letter by a plain integer amount, wrapping around the alphabet.

    Case is preserved and negative amounts shift backwards;
    non-letters pass through.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Shift amount must be an int, got {amount!r}.")
    norm = normalize(ch)
    if norm is None:
        return ch
    value, offset = norm
    # Python's % is already non-negative for a positive modulus
    return denormalize((value + amount) % ALPHABET_SIZE, offset)
