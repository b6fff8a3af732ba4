#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""In-memory history of the actions taken during one interactive session."""

from __future__ import annotations

from dataclasses import dataclass, field

from filexor.engine import CryptoAction


@dataclass
class HistoryEntry:
    """A single encrypt or decrypt attempt."""

    file_path: str
    action: CryptoAction
    success: bool

    @property
    def status(self) -> str:
        return "Success" if self.success else "Failed"

    def describe(self) -> str:
        return f"[{self.action.label}] {self.file_path} -> {self.status}"


@dataclass
class SessionHistory:
    """Records every attempt for the lifetime of the session. Nothing is persisted."""

    entries: list[HistoryEntry] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def add(self, file_path: str, action: CryptoAction, success: bool) -> HistoryEntry:
        entry = HistoryEntry(file_path=file_path, action=action, success=success)
        self.entries.append(entry)
        return entry

    def summary(self) -> dict[CryptoAction, int]:
        """Count attempts per action, failed ones included."""
        counts = dict.fromkeys(CryptoAction, 0)
        for entry in self.entries:
            counts[entry.action] += 1
        return counts


# 🌶️📦🔚
