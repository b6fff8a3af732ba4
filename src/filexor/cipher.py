#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Repeating-key XOR transform and key derivation."""

from __future__ import annotations

from attrs import define, field

from filexor.exceptions import InvalidKeyError

KEY_ENCODING = "utf-8"


def _as_key_bytes(value: object) -> bytes:
    if isinstance(value, Key):
        return value.material
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidKeyError(f"Key must be bytes-like, not {type(value).__name__}.")
    return bytes(value)


def _require_bytes(instance: Key, attribute: object, value: bytes) -> None:
    if not value:
        raise InvalidKeyError("Key cannot be empty.")


@define(frozen=True, repr=False)
class Key:
    """A non-empty XOR key.

    The repr hides the key bytes so keys never end up in logs verbatim.
    """

    material: bytes = field(converter=_as_key_bytes, validator=_require_bytes)

    @classmethod
    def from_text(cls, text: str) -> Key:
        """Build a key from the UTF-8 encoding of ``text``."""
        return cls(text.encode(KEY_ENCODING))

    def __len__(self) -> int:
        return len(self.material)

    def __repr__(self) -> str:
        return f"Key(length={len(self.material)})"


def derive_key(text: str) -> Key:
    """
    Derive a key from a user supplied string.

    Args:
        text: Password or key string, used as-is (no trimming)

    Returns:
        Key holding the UTF-8 bytes of ``text``

    Raises:
        InvalidKeyError: If ``text`` encodes to zero bytes
    """
    return Key.from_text(text)


def transform(data: bytes, key: bytes | Key) -> bytes:
    """
    XOR data with a repeating key.

    Applying the transform twice with the same key returns the original data,
    so this is both the encrypt and the decrypt operation.

    Args:
        data: Bytes to transform, may be empty
        key: Key bytes or a ``Key``, must be non-empty

    Returns:
        Transformed bytes, same length as ``data``

    Raises:
        InvalidKeyError: If ``key`` is empty or not bytes-like
    """
    key_bytes = _as_key_bytes(key)
    if not key_bytes:
        raise InvalidKeyError("Key cannot be empty.")
    key_len = len(key_bytes)
    return bytes(data[i] ^ key_bytes[i % key_len] for i in range(len(data)))


# 🌶️📦🔚
