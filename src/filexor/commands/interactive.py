#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Interactive menu for the filexor CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import pout

from filexor.config import FileXorRuntimeConfig
from filexor.console import get_command_logger
from filexor.engine import CryptoAction, run_action
from filexor.session import SessionHistory

# Get structured logger for this command
log = get_command_logger("interactive")

MENU_RULE = "=" * 55
MENU = (
    "",
    "================ File Encryptor ================",
    "1) Encrypt file",
    "2) Decrypt file",
    "3) Show history",
    "4) Quit",
    MENU_RULE,
)


def _ask(text: str, hide_input: bool = False) -> str:
    """Prompt for a line, accepting blank answers, and trim it."""
    value: str = click.prompt(text, default="", show_default=False, hide_input=hide_input)
    return value.strip()


class InteractiveSession:
    """Menu loop that keeps running until the user quits."""

    def __init__(self, config: FileXorRuntimeConfig) -> None:
        self.config = config
        self.history = SessionHistory()

    def run(self) -> None:
        actions = {
            "1": lambda: self.handle(CryptoAction.ENCRYPT),
            "2": lambda: self.handle(CryptoAction.DECRYPT),
            "3": self.show_history,
        }
        while True:
            for line in MENU:
                pout(line)
            choice = _ask("Enter your choice")

            if choice == "4":
                pout("Goodbye!")
                return
            handler = actions.get(choice)
            if handler is None:
                pout("Invalid choice. Please enter 1, 2, 3, or 4.")
                continue
            handler()

    def handle(self, action: CryptoAction) -> None:
        """Prompt for paths and password, run the action and record it."""
        suffix = self.config.suffix_for(action.value)
        pout("")
        pout(f"--- {action.label} File ---")
        input_path = _ask("Enter input file path")
        output_path = _ask(f"Enter output file path (leave blank for default {suffix})")
        if not output_path:
            output_path = f"{input_path}{suffix}"

        target = Path(output_path)
        if target != Path(input_path) and target.exists():
            if not click.confirm(f"'{output_path}' already exists. Overwrite?", default=False):
                pout("Aborted.")
                return

        password = _ask("Enter password", hide_input=True)

        result = run_action(action, input_path, output_path, password)
        if result.ok:
            log.info(
                "Interactive action succeeded",
                action=action.value,
                source=input_path,
                output=output_path,
                size=result.bytes_written,
            )
            pout(f"File {action.past_tense} successfully to '{output_path}'.")
        else:
            log.warning(
                "Interactive action failed",
                action=action.value,
                kind=result.kind.value if result.kind else None,
                source=input_path,
            )
            pout(f"{action.noun} failed: {result.error}")

        self.history.add(input_path, action, result.ok)

    def show_history(self) -> None:
        """Display all history entries for this session and a small summary."""
        pout("")
        if self.history.is_empty:
            pout("No history yet. Try encrypting or decrypting a file first.")
            return

        pout("--- History ---")
        for index, entry in enumerate(self.history.entries, start=1):
            pout(f"{index}. {entry.describe()}")

        summary = self.history.summary()
        pout("")
        pout("Summary this session:")
        pout(f"Encrypted: {summary[CryptoAction.ENCRYPT]} file(s)")
        pout(f"Decrypted: {summary[CryptoAction.DECRYPT]} file(s)")


@click.command("interactive")
@click.pass_context
def interactive_command(ctx: click.Context) -> None:
    """Run the menu-driven encryptor (the default when no command is given)."""
    config = ctx.obj.get("config") if ctx.obj else None
    if config is None:
        config = FileXorRuntimeConfig.from_env()

    log.debug("Interactive session started")
    pout("Welcome to the File Encryptor.")
    pout("Note: This is a simple learning project and is not meant for real security.")
    session = InteractiveSession(config)
    session.run()
    log.debug("Interactive session ended", entries=len(session.history.entries))


# 🌶️📦🔚
