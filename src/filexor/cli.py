#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""filexor command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from filexor.commands.cipher import decrypt_command, encrypt_command
from filexor.commands.interactive import interactive_command
from filexor.config import FileXorRuntimeConfig

__version__ = get_version("filexor", caller_file=__file__)


@click.group(
    invoke_without_command=True,
    context_settings=dict(help_option_names=["-h", "--help"]),
)
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="filexor",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Repeating-key XOR file encryptor.

    Without a command, starts the interactive menu.

    Configure via environment variables:
    - FILEXOR_LOG_LEVEL: Set log level (trace, debug, info, warning, error)
    - FILEXOR_ENCRYPT_SUFFIX / FILEXOR_DECRYPT_SUFFIX: Default output suffixes
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    # Load filexor configuration from environment
    filexor_config = FileXorRuntimeConfig.from_env()

    cli_ctx = CLIContext.from_env()

    # Get base telemetry config from environment
    base_telemetry = TelemetryConfig.from_env()

    # Merge with filexor-specific settings
    telemetry_config = evolve(
        base_telemetry,
        service_name="filexor",
        logging=evolve(
            base_telemetry.logging,
            default_level=filexor_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["config"] = filexor_config
    ctx.obj["log"] = cli_ctx.logger

    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive_command)


cli.add_command(encrypt_command, name="encrypt")
cli.add_command(decrypt_command, name="decrypt")
cli.add_command(interactive_command, name="interactive")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
