#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the filexor CLI."""

from __future__ import annotations

from filexor.commands.cipher import decrypt_command, encrypt_command
from filexor.commands.interactive import interactive_command

__all__ = [
    "decrypt_command",
    "encrypt_command",
    "interactive_command",
]

# 🌶️📦🔚
