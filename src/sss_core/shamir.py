# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over a caller-supplied prime field.

:class:`SecretSharer` exposes two operations:

``create_shares``
    Split an integer secret into ``n`` shares with a reconstruction threshold
    of ``k`` using a random polynomial whose constant term is the secret.

``recover_secret``
    Reconstruct the secret from shares produced by ``create_shares`` using
    Lagrange interpolation at ``x = 0``.

Recovery does not, by default, check that at least ``k`` shares were given.
Too few shares yield a well-defined but meaningless integer. Pass
``enforce_threshold=True`` to turn that case into an
:class:`IllegalStateError`.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import IllegalStateError, InvalidArgumentError
from .field import evaluate_polynomial, interpolate_at_zero
from .model import CreationScheme, RecoveryScheme, Share
from .randomness import RandomSource, random_field_element

_logger = logging.getLogger(__name__)


class SecretSharer:
    """Create and recover Shamir shares using an injected randomness source."""

    def __init__(self, random: RandomSource) -> None:
        if random is None:
            raise InvalidArgumentError("random must not be None")
        if not callable(getattr(random, "getrandbits", None)):
            raise InvalidArgumentError("random must provide getrandbits(k)")
        self._random = random

    def create_shares(self, secret: int, scheme: CreationScheme) -> frozenset[Share]:
        """Split *secret* into ``scheme.total_share_count`` shares.

        Raises :class:`InvalidArgumentError` when *secret* or *scheme* is
        missing, and :class:`IllegalStateError` when *secret* is outside
        ``[0, prime)`` or the field is too small to give every share its own
        non-zero index.
        """
        if secret is None:
            raise InvalidArgumentError("secret must not be None")
        if scheme is None:
            raise InvalidArgumentError("scheme must not be None")
        if isinstance(secret, bool) or not isinstance(secret, int):
            raise InvalidArgumentError(f"secret must be an integer, got {type(secret).__name__}")
        if not isinstance(scheme, CreationScheme):
            raise InvalidArgumentError("scheme must be a CreationScheme")

        prime = scheme.prime
        if secret < 0:
            raise IllegalStateError("secret must not be negative")
        if secret >= prime:
            raise IllegalStateError("secret must be less than the prime")
        if scheme.total_share_count >= prime:
            raise IllegalStateError("total_share_count must be less than the prime")

        coefficients = [secret] + [
            random_field_element(self._random, prime)
            for _ in range(scheme.required_share_count - 1)
        ]
        # index 0 is skipped: f(0) is the secret itself
        shares = frozenset(
            Share(index=x, value=evaluate_polynomial(coefficients, x, prime))
            for x in range(1, scheme.total_share_count + 1)
        )

        _logger.debug(
            "Created %d shares (threshold=%d, prime_bits=%d)",
            len(shares),
            scheme.required_share_count,
            prime.bit_length(),
        )
        return shares

    def recover_secret(
        self,
        shares: Iterable[Share],
        scheme: RecoveryScheme,
        *,
        enforce_threshold: bool = False,
    ) -> int:
        """Reconstruct the secret from *shares*.

        Duplicate share indices raise :class:`IllegalStateError` instead of
        being collapsed. With *enforce_threshold* fewer than
        ``required_share_count`` shares are rejected as well.
        """
        if shares is None:
            raise InvalidArgumentError("shares must not be None")
        if scheme is None:
            raise InvalidArgumentError("scheme must not be None")
        share_list = list(shares)
        if any(share is None for share in share_list):
            raise InvalidArgumentError("shares must not contain None")
        if not all(isinstance(share, Share) for share in share_list):
            raise InvalidArgumentError("shares must only contain Share instances")
        if not isinstance(scheme, RecoveryScheme):
            raise InvalidArgumentError("scheme must be a RecoveryScheme")

        _check_unique_indices(share_list)

        if enforce_threshold and len(share_list) < scheme.required_share_count:
            raise IllegalStateError(
                f"{scheme.required_share_count} shares are required, got {len(share_list)}"
            )
        if len(share_list) < scheme.required_share_count:
            _logger.warning(
                "Recovering from %d shares with threshold %d; result is not the secret",
                len(share_list),
                scheme.required_share_count,
            )

        points = [(share.index, share.value) for share in share_list]
        secret = interpolate_at_zero(points, scheme.prime)
        _logger.debug("Recovered secret from %d shares", len(share_list))
        return secret


def _check_unique_indices(shares: list[Share]) -> None:
    seen: set[int] = set()
    for share in shares:
        if share.index in seen:
            raise IllegalStateError(f"duplicate share index {share.index}")
        seen.add(share.index)


__all__ = ["SecretSharer"]
