"""One-time pad over the 27-symbol alphabet of capital letters and space."""

from __future__ import annotations

import string

ALPHABET = string.ascii_uppercase + " "
MODULUS = len(ALPHABET)
_SPACE_VALUE = MODULUS - 1


class CipherError(ValueError):
    """Raised when a text or key cannot be enciphered or deciphered."""


def _value(char: str) -> int:
    return _SPACE_VALUE if char == " " else ord(char) - ord("A")


def _symbol(value: int) -> str:
    return " " if value == _SPACE_VALUE else chr(ord("A") + value)


def validate_text(text: str) -> None:
    """Reject anything other than ASCII letters and spaces."""
    for char in text:
        if char != " " and char not in string.ascii_letters:
            raise CipherError(f"invalid character detected: '{char}'")


def validate_ciphertext(text: str) -> None:
    """Reject anything other than capital letters and spaces."""
    for char in text:
        if char not in ALPHABET:
            raise CipherError(f"invalid character detected: '{char}'")


def _check_key_length(text: str, key: str) -> None:
    if len(key) < len(text):
        raise CipherError("Key too short")


def encrypt(plaintext: str, key: str) -> str:
    """Add the key to the plaintext symbol by symbol, modulo 27."""
    _check_key_length(plaintext, key)
    validate_text(plaintext)
    validate_text(key)
    return "".join(
        _symbol((_value(p) + _value(k)) % MODULUS) for p, k in zip(plaintext, key)
    )


def decrypt(ciphertext: str, key: str) -> str:
    """Subtract the key from the ciphertext symbol by symbol, modulo 27."""
    _check_key_length(ciphertext, key)
    try:
        validate_ciphertext(ciphertext)
    except CipherError:
        raise CipherError("Invalid ciphertext character") from None
    try:
        validate_ciphertext(key)
    except CipherError:
        raise CipherError("Invalid key character") from None
    return "".join(
        _symbol((_value(c) - _value(k)) % MODULUS) for c, k in zip(ciphertext, key)
    )