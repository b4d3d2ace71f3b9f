# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Centralised tunables for secret sharing.

Values can be overridden by environment variables so deployments can tighten
recovery or switch the default field without code changes. Malformed values
fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PRIME = 2**127 - 1

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _resolve_audit_dir() -> Path:
    override = os.environ.get("ZILANT_AUDIT_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".zilant_audit"


@dataclass(frozen=True)
class SharingPolicy:
    """Holds runtime tunables for share creation and recovery."""

    strict_recovery: bool = False
    default_prime: int = DEFAULT_PRIME
    audit_enabled: bool = False
    audit_dir: Path = Path.home() / ".zilant_audit"


def load_policy() -> SharingPolicy:
    """Load the sharing policy considering environment overrides."""

    prime = _load_int("ZILANT_SSS_PRIME", DEFAULT_PRIME)
    if prime < 2:
        prime = DEFAULT_PRIME
    return SharingPolicy(
        strict_recovery=_load_bool("ZILANT_SSS_STRICT_RECOVERY", False),
        default_prime=prime,
        audit_enabled=_load_bool("ZILANT_SSS_AUDIT", False),
        audit_dir=_resolve_audit_dir(),
    )


policy = load_policy()


__all__ = ["DEFAULT_PRIME", "SharingPolicy", "policy", "load_policy"]
