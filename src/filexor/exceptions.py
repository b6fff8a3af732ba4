#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for filexor."""

from __future__ import annotations

from enum import Enum

from provide.foundation.errors import FoundationError


class ErrorKind(Enum):
    """Failure kinds reported by the cipher engine."""

    INVALID_KEY = "InvalidKey"
    FILE_NOT_FOUND = "FileNotFound"
    IO_ERROR = "IoError"


class FileXorError(FoundationError):
    """Base exception for all filexor errors."""

    kind: ErrorKind = ErrorKind.IO_ERROR


class InvalidKeyError(FileXorError):
    """Raised when the supplied key is empty."""

    kind = ErrorKind.INVALID_KEY


class SourceNotFoundError(FileXorError):
    """Raised when the source file cannot be opened for reading."""

    kind = ErrorKind.FILE_NOT_FOUND


class CipherIOError(FileXorError):
    """Raised for any other read or write failure."""

    kind = ErrorKind.IO_ERROR


# 🌶️📦🔚
