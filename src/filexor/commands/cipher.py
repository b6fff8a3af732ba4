#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Encrypt and decrypt commands for the filexor CLI."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from provide.foundation.console import perr, pout
from provide.foundation.formatting import format_size

from filexor.config import FileXorRuntimeConfig
from filexor.console import get_command_logger
from filexor.engine import CryptoAction, ProcessResult, run_action
from filexor.exceptions import ErrorKind

# Get structured logger for these commands
log = get_command_logger("cipher")


def _resolve_output(
    action: CryptoAction, input_path: Path, output: str | None, in_place: bool, config: FileXorRuntimeConfig
) -> Path:
    if in_place and output:
        raise click.UsageError("--output and --in-place cannot be used together")
    if in_place:
        return input_path
    if output:
        return Path(output)
    return Path(f"{input_path}{config.suffix_for(action.value)}")


def _run(
    ctx: click.Context,
    action: CryptoAction,
    input_path: Path,
    output: str | None,
    in_place: bool,
    key: str,
    force: bool,
    atomic: bool,
) -> None:
    config = ctx.obj.get("config") if ctx.obj else None
    if config is None:
        config = FileXorRuntimeConfig.from_env()

    output_path = _resolve_output(action, input_path, output, in_place, config)
    log.debug(
        "Cipher command started",
        action=action.value,
        source=str(input_path),
        output=str(output_path),
        force=force,
        atomic=atomic,
    )

    result: ProcessResult = run_action(
        action,
        input_path,
        output_path,
        key,
        overwrite=force,
        atomic=atomic,
    )

    if not result.ok:
        log.error(
            "Cipher command failed",
            action=action.value,
            kind=result.kind.value if result.kind else None,
            error=str(result.error),
            source=str(input_path),
        )
        perr(f"❌ {action.noun} failed: {result.error}")
        if result.kind is ErrorKind.IO_ERROR and not force and output_path != input_path and output_path.exists():
            perr("Use --force to overwrite")
        raise click.Abort() from result.error

    log.info(
        "Cipher command succeeded",
        action=action.value,
        source=str(input_path),
        output=str(result.destination),
        size=result.bytes_written,
    )
    pout(
        f"✅ File {action.past_tense} successfully to '{result.destination}' "
        f"({format_size(result.bytes_written)})."
    )


def cipher_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Arguments and options shared by the encrypt and decrypt commands."""
    decorators = [
        click.argument(
            "input_file",
            type=click.Path(dir_okay=False, resolve_path=True),
            required=True,
        ),
        click.option(
            "--output",
            "-o",
            type=click.Path(dir_okay=False, resolve_path=True),
            default=None,
            help="Where to write the result (default: INPUT_FILE plus a suffix)",
        ),
        click.option(
            "--in-place",
            is_flag=True,
            help="Overwrite INPUT_FILE with the result",
        ),
        click.option(
            "--key",
            "-k",
            prompt="Enter password",
            hide_input=True,
            help="Key string, UTF-8 encoded (prompted when omitted)",
        ),
        click.option(
            "--force",
            "-f",
            is_flag=True,
            help="Overwrite an existing output file",
        ),
        click.option(
            "--atomic",
            is_flag=True,
            help="Write through a temporary file and rename into place",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


@click.command("encrypt")
@cipher_options
@click.pass_context
def encrypt_command(
    ctx: click.Context,
    input_file: str,
    output: str | None,
    in_place: bool,
    key: str,
    force: bool,
    atomic: bool,
) -> None:
    """XOR-encrypt INPUT_FILE with a repeating key.

    This is obfuscation, not security: anyone with the key, or enough
    known plaintext, can reverse it.
    """
    _run(ctx, CryptoAction.ENCRYPT, Path(input_file), output, in_place, key, force, atomic)


@click.command("decrypt")
@cipher_options
@click.pass_context
def decrypt_command(
    ctx: click.Context,
    input_file: str,
    output: str | None,
    in_place: bool,
    key: str,
    force: bool,
    atomic: bool,
) -> None:
    """Reverse an encryption by applying the same key again."""
    _run(ctx, CryptoAction.DECRYPT, Path(input_file), output, in_place, key, force, atomic)


# 🌶️📦🔚
