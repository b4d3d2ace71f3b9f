# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``sss split`` and ``sss recover``."""

from __future__ import annotations

import logging

import click

from . import policy as _policy
from .audit import record_event
from .errors import ShamirError
from .model import CreationScheme, RecoveryScheme, Share
from .randomness import system_random
from .shamir import SecretSharer

_logger = logging.getLogger(__name__)


def parse_share(text: str) -> Share:
    """Parse an ``index:value`` pair as printed by ``sss split``."""
    index, sep, value = text.strip().partition(":")
    if not sep:
        raise ValueError(f"expected INDEX:VALUE, got {text!r}")
    return Share(index=int(index), value=int(value))


class ShareParam(click.ParamType):
    name = "share"

    def convert(self, value, param, ctx):
        if isinstance(value, Share):
            return value
        try:
            return parse_share(value)
        except (ValueError, ShamirError) as exc:
            self.fail(str(exc), param, ctx)


def _audit(enabled: bool, event: str, details: dict) -> None:
    if enabled:
        path = record_event(event, details=details)
        _logger.debug("Audit record written to %s", path)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Split and recover secrets with Shamir's Secret Sharing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_shares_from_stdin() -> list[Share]:
    stream = click.get_text_stream("stdin")
    shares = []
    for line in stream:
        if not line.strip():
            continue
        try:
            shares.append(parse_share(line))
        except (ValueError, ShamirError) as exc:
            raise click.BadParameter(str(exc), param_hint="stdin") from exc
    return shares


@main.command()
@click.option(
    "--secret",
    type=int,
    prompt="Secret",
    hide_input=True,
    help="Secret to split; prompted for (or read from stdin) when omitted.",
)
@click.option("-k", "--required", type=int, required=True, help="Shares needed to recover.")
@click.option("-n", "--total", type=int, required=True, help="Shares to create.")
@click.option("--prime", type=int, default=None, help="Field prime (defaults to policy).")
@click.option("--audit/--no-audit", default=None, help="Write a signed audit record.")
def split(secret: int, required: int, total: int, prime: int | None, audit: bool | None) -> None:
    """Split a secret into shares, one INDEX:VALUE per line."""
    current = _policy.policy
    prime = prime if prime is not None else current.default_prime
    try:
        scheme = CreationScheme(required_share_count=required, total_share_count=total, prime=prime)
        shares = SecretSharer(system_random()).create_shares(secret, scheme)
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc
    for share in sorted(shares):
        click.echo(f"{share.index}:{share.value}")
    _audit(
        current.audit_enabled if audit is None else audit,
        "shares.created",
        {"required": required, "total": total, "prime_bits": prime.bit_length()},
    )


@main.command()
@click.argument("shares", nargs=-1, type=ShareParam())
@click.option("-k", "--required", type=int, required=True, help="Shares needed to recover.")
@click.option("--prime", type=int, default=None, help="Field prime (defaults to policy).")
@click.option("--strict/--no-strict", default=None, help="Refuse fewer than REQUIRED shares.")
@click.option("--audit/--no-audit", default=None, help="Write a signed audit record.")
def recover(
    shares: tuple[Share, ...],
    required: int,
    prime: int | None,
    strict: bool | None,
    audit: bool | None,
) -> None:
    """Recover the secret from INDEX:VALUE SHARES.

    Shares are read from stdin, one per line, when none are given as
    arguments.
    """
    current = _policy.policy
    prime = prime if prime is not None else current.default_prime
    share_list = list(shares) if shares else _read_shares_from_stdin()
    strict = current.strict_recovery if strict is None else strict
    try:
        scheme = RecoveryScheme(required_share_count=required, prime=prime)
        secret = SecretSharer(system_random()).recover_secret(
            share_list, scheme, enforce_threshold=strict
        )
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(str(secret))
    _audit(
        current.audit_enabled if audit is None else audit,
        "secret.recovered",
        {"required": required, "shares": len(share_list), "prime_bits": prime.bit_length()},
    )


if __name__ == "__main__":
    main()
