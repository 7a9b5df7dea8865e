import random

import pytest

from otpad.cipher import (
    CipherError,
    decrypt,
    encrypt,
    validate_ciphertext,
    validate_text,
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "


def test_zero_key_is_identity():
    assert encrypt("HELLO WORLD", "AAAAAAAAAAA") == "HELLO WORLD"
    assert decrypt("HELLO WORLD", "AAAAAAAAAAA") == "HELLO WORLD"


def test_worked_examples():
    assert encrypt("A", "B") == "B"
    assert encrypt(" ", " ") == "Z"
    assert decrypt("A", "B") == " "


def test_round_trip_random():
    rng = random.Random(1234)
    for _ in range(50):
        n = rng.randint(1, 40)
        text = "".join(rng.choice(ALPHABET) for _ in range(n))
        key = "".join(rng.choice(ALPHABET) for _ in range(n + rng.randint(0, 5)))
        cipher = encrypt(text, key)
        assert len(cipher) == len(text)
        assert set(cipher) <= set(ALPHABET)
        assert decrypt(cipher, key) == text


def test_longer_key_only_prefix_used():
    assert encrypt("HI", "BCZZZZ") == encrypt("HI", "BC")


def test_encrypt_key_too_short():
    with pytest.raises(CipherError, match="Key too short"):
        encrypt("HELLO", "ABC")


def test_decrypt_key_too_short():
    with pytest.raises(CipherError, match="Key too short"):
        decrypt("HELLO", "ABC")


def test_encrypt_rejects_digit_in_plaintext():
    with pytest.raises(CipherError, match="invalid character"):
        encrypt("HELLO1", "AAAAAA")


def test_encrypt_rejects_bad_character_in_key_tail():
    with pytest.raises(CipherError):
        encrypt("HI", "AB$")


def test_encrypt_accepts_lowercase_letters():
    result = encrypt("abc", "AAA")
    assert len(result) == 3
    assert set(result) <= set(ALPHABET)


def test_decrypt_rejects_lowercase_ciphertext():
    with pytest.raises(CipherError, match="Invalid ciphertext character"):
        decrypt("abc", "AAA")


def test_decrypt_rejects_bad_key():
    with pytest.raises(CipherError, match="Invalid key character"):
        decrypt("ABC", "AB!")


def test_validate_text_accepts_letters_and_spaces():
    assert validate_text("Hello World") is None
    with pytest.raises(CipherError):
        validate_text("Hello, World")


def test_validate_ciphertext_only_uppercase():
    assert validate_ciphertext("HELLO WORLD") is None
    with pytest.raises(CipherError):
        validate_ciphertext("Hello")