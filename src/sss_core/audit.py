# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Offline audit trail for sharing operations, Ed25519-signed and hash-chained.

Records carry operation metadata only (thresholds, share counts, prime size).
Secrets and share values must never be passed in ``details``.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from . import policy as _policy

KEY_FILENAME = "signing_key.pem"
CHAIN_STATE_FILENAME = "chain.state"
GENESIS = "GENESIS"


def _audit_dir(audit_dir: os.PathLike[str] | str | None) -> Path:
    directory = Path(audit_dir) if audit_dir is not None else _policy.policy.audit_dir
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _load_private_key(directory: Path) -> Ed25519PrivateKey:
    key_path = directory / KEY_FILENAME
    if key_path.exists():
        return serialization.load_pem_private_key(key_path.read_bytes(), password=None)
    private_key = Ed25519PrivateKey.generate()
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    # owner-only
    fd = os.open(key_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(pem)
    return private_key


def _load_prev_hash(directory: Path) -> str:
    try:
        return (directory / CHAIN_STATE_FILENAME).read_text().strip()
    except FileNotFoundError:
        return GENESIS


def _encode(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


def record_event(
    event: str,
    *,
    details: Dict[str, Any] | None = None,
    audit_dir: os.PathLike[str] | str | None = None,
) -> Path:
    """Sign *event* and append it to the chain; return the record path."""
    directory = _audit_dir(audit_dir)
    timestamp = int(time.time())
    payload = {
        "event": event,
        "details": details or {},
        "timestamp": timestamp,
        "prev_hash": _load_prev_hash(directory),
    }
    message = _encode(payload)
    signature = _load_private_key(directory).sign(message)
    chain_hash = hashlib.sha3_512(message + signature).hexdigest()
    entry = {
        "payload": payload,
        "signature": signature.hex(),
        "chain_hash": chain_hash,
    }
    file_path = directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
    file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
    (directory / CHAIN_STATE_FILENAME).write_text(chain_hash)
    return file_path


def verify_log(path: os.PathLike[str] | str, *, audit_dir: os.PathLike[str] | str | None = None) -> bool:
    """Check the signature and chain hash of a single record.

    The signing key is looked up in *audit_dir*, or next to the record when
    no directory is given.
    """
    record = Path(path)
    key_path = (Path(audit_dir) if audit_dir is not None else record.parent) / KEY_FILENAME
    if not key_path.exists():
        return False
    public_key = _load_private_key(key_path.parent).public_key()
    try:
        data = json.loads(record.read_text())
        payload = _encode(data["payload"])
        signature_hex = data.get("signature")
        signature = bytes.fromhex(signature_hex) if signature_hex else b""
        public_key.verify(signature, payload)
    except (ValueError, KeyError, TypeError, AttributeError, InvalidSignature):
        return False
    expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
    return expected_chain_hash == data.get("chain_hash")


__all__ = ["record_event", "verify_log"]
