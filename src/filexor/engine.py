#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""File pipeline for the XOR cipher: read, transform, write."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from attrs import define
from provide.foundation.file import atomic_write

from filexor.cipher import Key, derive_key, transform
from filexor.config.defaults import (
    DEFAULT_ATOMIC_WRITE,
    DEFAULT_DECRYPT_SUFFIX,
    DEFAULT_ENCRYPT_SUFFIX,
    DEFAULT_OVERWRITE,
)
from filexor.exceptions import (
    CipherIOError,
    ErrorKind,
    FileXorError,
    InvalidKeyError,
    SourceNotFoundError,
)


class CryptoAction(Enum):
    """What the user asked for. Both actions run the same transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def noun(self) -> str:
        return f"{self.label}ion"

    @property
    def past_tense(self) -> str:
        return f"{self.value}ed"


@define(frozen=True)
class ProcessResult:
    """Outcome of a single ``process_file`` call."""

    source: Path
    destination: Path
    bytes_written: int = 0
    error: FileXorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def raise_for_error(self) -> None:
        """Re-raise the captured failure, if any."""
        if self.error is not None:
            raise self.error


def _read_source(path: Path) -> bytes:
    try:
        handle = path.open("rb")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError) as e:
        raise SourceNotFoundError(f"Failed to read input file: {e}") from e
    except OSError as e:
        raise CipherIOError(f"Failed to read input file: {e}") from e

    with handle:
        try:
            return handle.read()
        except OSError as e:
            raise CipherIOError(f"Failed to read input file: {e}") from e


def _write_destination(path: Path, data: bytes, atomic: bool) -> None:
    try:
        if atomic:
            atomic_write(path, data)
            return
        with path.open("wb") as handle:
            handle.write(data)
    except OSError as e:
        raise CipherIOError(f"Failed to write output file: {e}") from e


def process_file(
    path: str | Path,
    key: bytes | Key,
    destination: str | Path | None = None,
    *,
    overwrite: bool = DEFAULT_OVERWRITE,
    atomic: bool = DEFAULT_ATOMIC_WRITE,
) -> ProcessResult:
    """Apply the XOR transform to a file.

    The whole file is read into memory, transformed and written to
    ``destination``, or back over ``path`` when no destination is given.
    Failures are returned in the result rather than raised.

    Args:
        path: File to read
        key: Key bytes or a ``Key``
        destination: Where to write the output (default: overwrite ``path``)
        overwrite: Replace an existing destination other than ``path``
        atomic: Write through a temporary file and rename into place

    Returns:
        ProcessResult describing the written file or the failure
    """
    source = Path(path)
    target = Path(destination) if destination is not None else source

    try:
        key = key if isinstance(key, Key) else Key(key)
        data = _read_source(source)
        if not overwrite and target != source and target.exists():
            raise CipherIOError(f"Output file already exists: {target}")
        output = transform(data, key)
        _write_destination(target, output, atomic)
    except (InvalidKeyError, SourceNotFoundError, CipherIOError) as e:
        return ProcessResult(source=source, destination=target, error=e)

    return ProcessResult(source=source, destination=target, bytes_written=len(output))


def default_output_path(path: str | Path, action: CryptoAction, suffix: str | None = None) -> Path:
    """Append the action's default suffix (``.enc`` / ``.dec``) to ``path``."""
    if suffix is None:
        suffix = DEFAULT_ENCRYPT_SUFFIX if action is CryptoAction.ENCRYPT else DEFAULT_DECRYPT_SUFFIX
    return Path(f"{path}{suffix}")


def run_action(
    action: CryptoAction,
    input_path: str | Path,
    output_path: str | Path | None,
    password: str,
    *,
    suffix: str | None = None,
    overwrite: bool = DEFAULT_OVERWRITE,
    atomic: bool = DEFAULT_ATOMIC_WRITE,
) -> ProcessResult:
    """Derive a key from ``password`` and process ``input_path``.

    An empty ``output_path`` falls back to ``input_path`` plus the action's
    default suffix.
    """
    if not output_path:
        output_path = default_output_path(input_path, action, suffix)
    try:
        key = derive_key(password)
    except InvalidKeyError as e:
        return ProcessResult(source=Path(input_path), destination=Path(output_path), error=e)
    return process_file(input_path, key, output_path, overwrite=overwrite, atomic=atomic)


def encrypt_file(
    input_path: str | Path, output_path: str | Path | None, password: str, **kwargs: Any
) -> ProcessResult:
    return run_action(CryptoAction.ENCRYPT, input_path, output_path, password, **kwargs)


def decrypt_file(
    input_path: str | Path, output_path: str | Path | None, password: str, **kwargs: Any
) -> ProcessResult:
    # XOR is its own inverse
    return run_action(CryptoAction.DECRYPT, input_path, output_path, password, **kwargs)


# 🌶️📦🔚
