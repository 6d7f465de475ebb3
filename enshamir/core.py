"""Encrypt a secret with a password and split it into Shamir shares."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .aesgcm import decrypt, encrypt
from .kdf import DEFAULT_ARGON2ID_PARAMS, Argon2idParams, hash_password_with_salt
from .shamir import combine, split


def random_bytes(length: int) -> bytes:
    """Return ``length`` bytes from the operating system's secure generator."""
    if length < 0:
        raise ValueError("length must not be negative")
    return os.urandom(length)


def encrypt_split(
    password: bytes | str,
    secret: bytes,
    parts: int,
    threshold: int,
    params: Argon2idParams = DEFAULT_ARGON2ID_PARAMS,
) -> tuple[bytes, list[bytes]]:
    """Encrypt ``secret`` with a key derived from ``password`` and split it.

    Returns the random salt, which must be kept to decrypt later, and the
    ``parts`` shares, any ``threshold`` of which reconstruct the ciphertext.
    """
    salt = random_bytes(params.salt_length)
    key = hash_password_with_salt(password, salt, params)
    encrypted_secret = encrypt(key, secret)
    shares = split(encrypted_secret, parts, threshold)
    return salt, shares


def combine_decrypt(
    password: bytes | str,
    salt: bytes,
    shares: Sequence[bytes],
    params: Argon2idParams = DEFAULT_ARGON2ID_PARAMS,
) -> bytes:
    """Reconstruct the ciphertext from ``shares`` and decrypt it."""
    try:
        encrypted_secret = combine(shares)
    except ValueError as exc:
        raise ValueError(f"unable to combine shares: {exc}") from exc

    key = hash_password_with_salt(password, salt, params)

    try:
        return decrypt(key, encrypted_secret)
    except ValueError as exc:
        raise ValueError(f"unable to decrypt the secret: {exc}") from exc