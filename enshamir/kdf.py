"""Argon2id key derivation and the PHC-style encoded hash format."""

from __future__ import annotations

import base64
import binascii
import hmac
import re
from dataclasses import dataclass

from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

ARGON2_VERSION = 19

_UINT32_MAX = 0xFFFFFFFF
_UINT8_MAX = 0xFF


@dataclass(frozen=True)
class Argon2idParams:
    """Cost parameters for Argon2id; ``memory`` is in KiB."""

    memory: int
    times: int
    threads: int
    salt_length: int
    key_length: int

    def __str__(self) -> str:
        return (
            f"memory: {self.memory}, times: {self.times}, thread: {self.threads}, "
            f"saltLength: {self.salt_length}, keyLength: {self.key_length}"
        )


DEFAULT_ARGON2ID_PARAMS = Argon2idParams(
    memory=2048 * 1024,
    times=4,
    threads=1,
    salt_length=16,
    key_length=32,
)


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _derive(password: bytes, salt: bytes, times: int, memory: int, threads: int, length: int) -> bytes:
    # Argon2 needs at least 8 KiB per lane; smaller requests are raised to that.
    memory = max(memory, 8 * threads)
    kdf = Argon2id(
        salt=salt,
        length=length,
        iterations=times,
        lanes=threads,
        memory_cost=memory,
    )
    return kdf.derive(password)


def hash_password_with_salt(
    password: bytes | str,
    salt: bytes,
    params: Argon2idParams = DEFAULT_ARGON2ID_PARAMS,
) -> bytes:
    """Derive a ``params.key_length`` byte key from the password and salt."""
    return _derive(
        _as_bytes(password),
        bytes(salt),
        params.times,
        params.memory,
        params.threads,
        params.key_length,
    )


def verify_password(password: bytes | str, encoded_hash: str) -> None:
    """Check a password against an encoded hash; raise ``ValueError`` on mismatch."""
    try:
        params, salt, key = decode(encoded_hash)
    except ValueError as exc:
        raise ValueError(f"unable to decode hash: {exc}") from exc

    new_key = _derive(
        _as_bytes(password),
        salt,
        params.times,
        params.memory,
        params.threads,
        params.key_length,
    )
    if not hmac.compare_digest(key, new_key):
        raise ValueError("password does not match")


def _b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64_decode(text: str) -> bytes:
    if "=" in text or len(text) % 4 == 1:
        raise ValueError(f"illegal base64 data: {text!r}")
    try:
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc


def encode(params: Argon2idParams, salt: bytes, key: bytes) -> str:
    """Encode parameters, salt and key as ``$argon2id$v=19$m=..,t=..,p=..$salt$key``."""
    return (
        f"$argon2id$v={ARGON2_VERSION}"
        f"$m={params.memory},t={params.times},p={params.threads}"
        f"${_b64_encode(salt)}${_b64_encode(key)}"
    )


def decode(encoded_hash: str) -> tuple[Argon2idParams, bytes, bytes]:
    """Parse an encoded hash into its parameters, salt and key."""
    values = encoded_hash.split("$")
    if len(values) != 6:
        raise ValueError("invalid hash format")
    if values[1] != "argon2id":
        raise ValueError("incompatible argon2 variant")

    version_match = re.match(r"v=(\d+)", values[2])
    if version_match is None:
        raise ValueError(f"invalid version: {values[2]!r}")
    version = int(version_match.group(1))
    if version != ARGON2_VERSION:
        raise ValueError(f"incompatible argon2 version: {version}")

    cost_match = re.match(r"m=(\d+),t=(\d+),p=(\d+)", values[3])
    if cost_match is None:
        raise ValueError(f"unable to parse argon2 parameters: {values[3]!r}")
    memory, times, threads = (int(group) for group in cost_match.groups())
    if memory > _UINT32_MAX or times > _UINT32_MAX or threads > _UINT8_MAX:
        raise ValueError("unable to parse argon2 parameters: value out of range")

    try:
        salt = _b64_decode(values[4])
    except ValueError as exc:
        raise ValueError(f"unable to decode salt: {exc}") from exc
    try:
        key = _b64_decode(values[5])
    except ValueError as exc:
        raise ValueError(f"unable to decode key: {exc}") from exc

    params = Argon2idParams(
        memory=memory,
        times=times,
        threads=threads,
        salt_length=len(salt),
        key_length=len(key),
    )
    return params, salt, key