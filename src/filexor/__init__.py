#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""filexor core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from filexor.cipher import Key, derive_key, transform
from filexor.engine import (
    CryptoAction,
    ProcessResult,
    decrypt_file,
    encrypt_file,
    process_file,
)
from filexor.exceptions import (
    CipherIOError,
    ErrorKind,
    FileXorError,
    InvalidKeyError,
    SourceNotFoundError,
)

__version__ = get_version("filexor", caller_file=__file__)

__all__ = [
    "CipherIOError",
    "CryptoAction",
    "ErrorKind",
    "FileXorError",
    "InvalidKeyError",
    "Key",
    "ProcessResult",
    "SourceNotFoundError",
    "__version__",
    "decrypt_file",
    "derive_key",
    "encrypt_file",
    "process_file",
    "transform",
]

# 🌶️📦🔚
