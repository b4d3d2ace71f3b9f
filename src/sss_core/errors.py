# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised by the secret sharing core."""
from __future__ import annotations


class ShamirError(Exception):
    """Base class for every error raised by :mod:`sss_core`."""


class InvalidArgumentError(ShamirError, ValueError):
    """Raised when a required input is missing or has the wrong type.

    Detected before any arithmetic runs, so the caller can always fix it
    without touching cryptographic state.
    """


class IllegalStateError(ShamirError, RuntimeError):
    """Raised when present inputs are semantically invalid for the scheme."""


__all__ = ["ShamirError", "InvalidArgumentError", "IllegalStateError"]
