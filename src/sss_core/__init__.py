# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Shamir's Secret Sharing over an arbitrary prime field."""

from __future__ import annotations

from .errors import IllegalStateError, InvalidArgumentError, ShamirError
from .model import CreationScheme, RecoveryScheme, Share
from .randomness import RandomSource, system_random
from .shamir import SecretSharer

__all__ = [
    "SecretSharer",
    "Share",
    "CreationScheme",
    "RecoveryScheme",
    "RandomSource",
    "system_random",
    "ShamirError",
    "InvalidArgumentError",
    "IllegalStateError",
]
