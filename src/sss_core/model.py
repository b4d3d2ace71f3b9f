# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Value records exchanged with :class:`sss_core.shamir.SecretSharer`."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError


def _require_int(name: str, value: object, minimum: int) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be at least {minimum}, got {value}")


@dataclass(frozen=True, order=True)
class Share:
    """One ``(index, value)`` point on the secret polynomial.

    Index uniqueness is checked when shares are combined, not here.
    """

    index: int
    value: int

    def __post_init__(self) -> None:
        _require_int("index", self.index, 1)
        _require_int("value", self.value, 0)


@dataclass(frozen=True)
class CreationScheme:
    """Parameters for splitting a secret.

    ``prime`` is trusted to be prime; it is not tested.
    """

    required_share_count: int
    total_share_count: int
    prime: int

    def __post_init__(self) -> None:
        _require_int("required_share_count", self.required_share_count, 1)
        _require_int("total_share_count", self.total_share_count, 1)
        _require_int("prime", self.prime, 2)
        if self.total_share_count < self.required_share_count:
            raise InvalidArgumentError(
                "total_share_count must not be less than required_share_count"
            )


@dataclass(frozen=True)
class RecoveryScheme:
    """Parameters for recovering a secret.

    Must carry the same values used at creation; a mismatch is not detected
    and silently produces a wrong secret.
    """

    required_share_count: int
    prime: int

    def __post_init__(self) -> None:
        _require_int("required_share_count", self.required_share_count, 1)
        _require_int("prime", self.prime, 2)


__all__ = ["Share", "CreationScheme", "RecoveryScheme"]
