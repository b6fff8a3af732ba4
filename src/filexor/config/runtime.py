#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""filexor runtime configuration for CLI startup."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from filexor.config.defaults import (
    DEFAULT_DECRYPT_SUFFIX,
    DEFAULT_ENCRYPT_SUFFIX,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
)


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_suffix(value: str) -> str:
    """Require a non-empty suffix so default outputs never collide with the input."""
    suffix = value.strip()
    if not suffix:
        raise ValueError("Output suffix cannot be empty")
    return suffix


@define
class FileXorRuntimeConfig(RuntimeConfig):
    """filexor runtime configuration for CLI startup."""

    log_level: str = field(
        default=DEFAULT_LOG_LEVEL,
        env_var="FILEXOR_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for filexor operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    encrypt_suffix: str = field(
        default=DEFAULT_ENCRYPT_SUFFIX,
        env_var="FILEXOR_ENCRYPT_SUFFIX",
        converter=parse_suffix,
        metadata={"help": "Suffix appended to the input path when no encrypt output is given"},
    )

    decrypt_suffix: str = field(
        default=DEFAULT_DECRYPT_SUFFIX,
        env_var="FILEXOR_DECRYPT_SUFFIX",
        converter=parse_suffix,
        metadata={"help": "Suffix appended to the input path when no decrypt output is given"},
    )

    def suffix_for(self, action: str) -> str:
        """Return the default output suffix for ``"encrypt"`` or ``"decrypt"``."""
        return self.encrypt_suffix if action == "encrypt" else self.decrypt_suffix


# 🌶️📦🔚
