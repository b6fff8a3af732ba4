#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for filexor configuration."""

from __future__ import annotations

# =================================
# Output path defaults
# =================================
DEFAULT_ENCRYPT_SUFFIX = ".enc"
DEFAULT_DECRYPT_SUFFIX = ".dec"

# =================================
# Logging defaults
# =================================
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# =================================
# Write defaults
# =================================
DEFAULT_OVERWRITE = True
DEFAULT_ATOMIC_WRITE = False

# 🌶️📦🔚
