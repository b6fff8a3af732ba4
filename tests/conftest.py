#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for filexor tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

# Longer than any key used in the tests so the key has to wrap around
SAMPLE_CONTENT = b"The quick brown fox jumps over the lazy dog.\n" * 8


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_filexor_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FILEXOR_* settings out of the tests."""
    for name in (
        "FILEXOR_LOG_LEVEL",
        "FILEXOR_ENCRYPT_SUFFIX",
        "FILEXOR_DECRYPT_SUFFIX",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A plaintext file several times longer than the test keys."""
    path = tmp_path / "notes.txt"
    path.write_bytes(SAMPLE_CONTENT)
    return path


# 🌶️📦🔚
