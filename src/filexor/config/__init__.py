#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""filexor configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from filexor.config.runtime import FileXorRuntimeConfig, parse_log_level, parse_suffix

__all__ = [
    "FileXorRuntimeConfig",
    "parse_log_level",
    "parse_suffix",
]

# 🌶️📦🔚
