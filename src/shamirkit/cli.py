# SPDX-FileCopyrightText: 2025 shamirkit contributors
# SPDX-License-Identifier: MIT

"""Command line interface for shamirkit."""

from __future__ import annotations

import logging
from typing import TextIO, Tuple

import click

from .container import Container, SharingConfig
from .errors import SecretSharingError
from .randomness import random_of_bitlength
from .secret import MAX_BITLENGTH, Secret
from .share import Share

_FORMATS = click.Choice(["encoded", "integer"])


def _parse_secret(text: str, fmt: str) -> Secret:
    if fmt == "integer":
        try:
            value = int(text.strip(), 10)
        except ValueError as exc:
            raise click.BadParameter("secret must be a decimal integer") from exc
        return Secret(value)
    return Secret.decode(text.strip())


def _render_secret(secret: Secret, fmt: str) -> str:
    return str(secret.value) if fmt == "integer" else secret.encode()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Split secrets into shares and combine them again."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--bits", type=click.IntRange(1, MAX_BITLENGTH - 1), default=256, show_default=True)
def generate(bits: int) -> None:
    """Print a new random secret."""
    try:
        secret = Secret(random_of_bitlength(bits))
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(secret.encode())


@main.command()
@click.option("-k", "--threshold", type=int, required=True, help="Shares needed to recover.")
@click.option("-n", "--shares", "num_shares", type=int, required=True, help="Shares to create.")
@click.option("--secret", "secret_text", envvar="SHAMIRKIT_SECRET", help="Secret to split.")
@click.option("--random", "use_random", is_flag=True, help="Split a freshly generated secret.")
@click.option("--format", "fmt", type=_FORMATS, default="encoded", show_default=True)
def split(threshold: int, num_shares: int, secret_text: str | None, use_random: bool, fmt: str) -> None:
    """Split a secret into shares, one per line."""
    try:
        config = SharingConfig(threshold=threshold, num_shares=num_shares)
        if use_random:
            secret = Secret()
            click.echo(_render_secret(secret, fmt), err=True)
        else:
            if secret_text is None:
                secret_text = click.prompt("Secret", hide_input=True)
            secret = _parse_secret(secret_text, fmt)
        shares = Container(config).split(secret)
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    for share in shares:
        click.echo(share.encode())


@main.command()
@click.option("-k", "--threshold", type=int, required=True, help="Shares needed to recover.")
@click.option("--format", "fmt", type=_FORMATS, default="encoded", show_default=True)
@click.argument("shares", nargs=-1)
@click.option(
    "-i",
    "--input",
    "share_file",
    type=click.File("r"),
    default="-",
    help="File with one share per line, read when no SHARES are given.",
)
def combine(threshold: int, fmt: str, shares: Tuple[str, ...], share_file: TextIO) -> None:
    """Recover a secret from SHARES (or one share per input line)."""
    if not shares:
        shares = tuple(line.strip() for line in share_file if line.strip())
    try:
        decoded = [Share.decode(text) for text in shares]
        config = SharingConfig(threshold=threshold, num_shares=max(threshold, len(decoded)))
        secret = Container(config).combine(decoded)
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(_render_secret(secret, fmt))


@main.command()
@click.argument("secret_text", metavar="SECRET")
@click.option("--format", "fmt", type=_FORMATS, default="encoded", show_default=True)
def tag(secret_text: str, fmt: str) -> None:
    """Print the integrity tag of SECRET."""
    try:
        secret = _parse_secret(secret_text, fmt)
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(secret.integrity_tag)


@main.command()
@click.argument("secret_text", metavar="SECRET")
@click.argument("tag")
@click.option("--format", "fmt", type=_FORMATS, default="encoded", show_default=True)
def verify(secret_text: str, tag: str, fmt: str) -> None:
    """Check that TAG is the integrity tag of SECRET."""
    try:
        secret = _parse_secret(secret_text, fmt)
    except SecretSharingError as exc:
        raise click.ClickException(str(exc)) from exc
    if not secret.verify_integrity(tag):
        raise click.ClickException("integrity tag does not match")
    click.echo("ok")


if __name__ == "__main__":
    main()
