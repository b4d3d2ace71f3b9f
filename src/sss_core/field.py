# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Arithmetic over the prime field Z/pZ.

All helpers take the modulus explicitly and reduce after every addition,
subtraction and multiplication so intermediate values never grow past ``p**2``.
"""
from __future__ import annotations

from typing import Sequence

from .errors import IllegalStateError


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` such that ``a*x + b*y == g == gcd(a, b)``."""
    last_x, x = 1, 0
    last_y, y = 0, 1
    while b != 0:
        quot = a // b
        a, b = b, a % b
        last_x, x = x, last_x - quot * x
        last_y, y = y, last_y - quot * y
    return a, last_x, last_y


def mod_inverse(value: int, prime: int) -> int:
    """Return the multiplicative inverse of *value* modulo *prime*."""
    g, x, _ = extended_gcd(value % prime, prime)
    if g != 1:
        raise IllegalStateError(f"{value} has no inverse modulo the prime")
    return x % prime


def evaluate_polynomial(coefficients: Sequence[int], x: int, prime: int) -> int:
    """Evaluate ``sum(c_i * x**i)`` modulo *prime*; ``coefficients[0]`` is the constant."""
    y = 0
    power = 1
    for c in coefficients:
        y = (y + c * power) % prime
        power = (power * x) % prime
    return y


def lagrange_basis_at_zero(indices: Sequence[int], position: int, prime: int) -> int:
    """Value at ``x = 0`` of the Lagrange basis polynomial for ``indices[position]``."""
    xi = indices[position]
    num = 1
    den = 1
    for j, xj in enumerate(indices):
        if j == position:
            continue
        num = (num * ((0 - xj) % prime)) % prime
        den = (den * ((xi - xj) % prime)) % prime
    return (num * mod_inverse(den, prime)) % prime


def interpolate_at_zero(points: Sequence[tuple[int, int]], prime: int) -> int:
    """Recover ``f(0)`` from ``(x, f(x))`` points by Lagrange interpolation."""
    indices = [x for x, _ in points]
    total = 0
    for position, (_, y) in enumerate(points):
        total = (total + y * lagrange_basis_at_zero(indices, position, prime)) % prime
    return total


__all__ = [
    "extended_gcd",
    "mod_inverse",
    "evaluate_polynomial",
    "lagrange_basis_at_zero",
    "interpolate_at_zero",
]
