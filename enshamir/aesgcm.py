"""AES-256-GCM encryption with a random nonce prepended to the ciphertext."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

NONCE_LENGTH = 12
KEY_LENGTH = 32


def _check_key(key: bytes) -> None:
    if len(key) != KEY_LENGTH:
        raise ValueError("AES-256 key should be 32 bytes")


def encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt ``plaintext`` and return ``nonce + ciphertext + tag``."""
    _check_key(key)
    nonce = os.urandom(NONCE_LENGTH)
    return nonce + AESGCM(key).encrypt(nonce, bytes(plaintext), None)


def decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt data produced by :func:`encrypt`.

    Raises ``ValueError`` when the data is malformed or fails authentication.
    """
    _check_key(key)
    if len(ciphertext) < NONCE_LENGTH:
        raise ValueError("invalid data length")
    nonce, data = ciphertext[:NONCE_LENGTH], ciphertext[NONCE_LENGTH:]
    try:
        return AESGCM(key).decrypt(bytes(nonce), bytes(data), None)
    except InvalidTag as exc:
        raise ValueError("message authentication failed") from exc