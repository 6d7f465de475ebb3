"""Shamir's secret sharing over GF(2^8).

Each share is the secret's length plus one byte: the evaluated polynomial
values followed by the share's x coordinate (1..255).
"""

from __future__ import annotations

import os
import secrets
from collections.abc import Sequence

_FIELD_POLYNOMIAL = 0x11B


def _build_tables() -> tuple[list[int], list[int]]:
    exp = [0] * 510
    log = [0] * 256
    value = 1
    for power in range(255):
        exp[power] = value
        log[value] = power
        doubled = value << 1
        if doubled & 0x100:
            doubled ^= _FIELD_POLYNOMIAL
        value ^= doubled  # multiply by the generator 3
    exp[255:510] = exp[0:255]
    return exp, log


_EXP, _LOG = _build_tables()


def _mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return _EXP[_LOG[a] + _LOG[b]]


def _div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("divide by zero")
    if a == 0:
        return 0
    return _EXP[(_LOG[a] - _LOG[b]) % 255]


def _evaluate(coefficients: Sequence[int], x: int) -> int:
    if x == 0:
        return coefficients[0]
    result = 0
    for coefficient in reversed(coefficients):
        result = _mul(result, x) ^ coefficient
    return result


def _interpolate(xs: Sequence[int], ys: Sequence[int], x: int) -> int:
    result = 0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        basis = 1
        for j, xj in enumerate(xs):
            if i != j:
                basis = _mul(basis, _div(x ^ xj, xi ^ xj))
        result ^= _mul(yi, basis)
    return result


def split(secret: bytes, parts: int, threshold: int) -> list[bytes]:
    """Split ``secret`` into ``parts`` shares, any ``threshold`` of which recover it."""
    if parts < threshold:
        raise ValueError("parts cannot be less than threshold")
    if parts > 255:
        raise ValueError("parts cannot exceed 255")
    if threshold < 2:
        raise ValueError("threshold must be at least 2")
    if threshold > 255:
        raise ValueError("threshold cannot exceed 255")
    if len(secret) == 0:
        raise ValueError("cannot split an empty secret")

    xs = secrets.SystemRandom().sample(range(1, 256), parts)
    columns = [bytearray() for _ in xs]
    for value in secret:
        coefficients = [value, *os.urandom(threshold - 1)]
        for column, x in zip(columns, xs):
            column.append(_evaluate(coefficients, x))
    return [bytes(column) + bytes([x]) for column, x in zip(columns, xs)]


def combine(shares: Sequence[bytes]) -> bytes:
    """Reconstruct the secret from shares produced by :func:`split`."""
    if len(shares) < 2:
        raise ValueError("less than two parts cannot be used to reconstruct the secret")
    length = len(shares[0])
    if length < 2:
        raise ValueError("parts must be at least two bytes")
    if any(len(share) != length for share in shares):
        raise ValueError("all parts must be the same length")

    xs: list[int] = []
    for share in shares:
        x = share[-1]
        if x in xs:
            raise ValueError("duplicate part detected")
        xs.append(x)

    return bytes(
        _interpolate(xs, ys, 0) for ys in zip(*(share[:-1] for share in shares))
    )