# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Randomness sources used to draw polynomial coefficients."""
from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniformly distributed integers of a given bit length.

    :class:`secrets.SystemRandom` is the production choice. A seeded
    :class:`random.Random` satisfies the protocol as well, which keeps tests
    reproducible, but it must never be used to protect real secrets.
    """

    def getrandbits(self, k: int) -> int:
        ...


def system_random() -> RandomSource:
    """Return a source backed by the operating system CSPRNG."""
    return secrets.SystemRandom()


def random_field_element(source: RandomSource, prime: int) -> int:
    """Draw an integer uniformly from ``[0, prime)``.

    Candidates outside the range are rejected rather than reduced, since
    reduction would bias the result towards small values.
    """
    bits = prime.bit_length()
    while True:
        candidate = source.getrandbits(bits)
        if candidate < prime:
            return candidate


__all__ = ["RandomSource", "system_random", "random_field_element"]
