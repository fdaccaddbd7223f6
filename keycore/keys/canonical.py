#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key representation conversions and canonical length enforcement.

Keys travel as hexadecimal text, raw bytes or unsigned integers. The helpers in
this module convert between these forms without loss and enforce the canonical
lengths: private keys are always 32 bytes, public keys always 65 bytes with the
0x04 uncompressed point prefix.
"""

import binascii
from typing import Union

from keycore.exceptions import KeyCoreInvalidArgument, KeyCoreInvalidKeyLength
from keycore.utils.misc import Endianness

PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 65
PUBLIC_KEY_COORDINATES_LENGTH = 64
PUBLIC_KEY_PREFIX = 0x04


def as_string(key_bytes: bytes) -> str:
    """Convert key bytes into lowercase hexadecimal text.

    :param key_bytes: Key as bytes.
    :return: Hexadecimal string without prefix.
    """
    return key_bytes.hex()


def as_big_integer(key_bytes: bytes) -> int:
    """Convert big-endian key bytes into a non-negative integer.

    :param key_bytes: Key as bytes.
    :return: Unsigned integer value of the key.
    """
    return int.from_bytes(key_bytes, byteorder=Endianness.BIG.value, signed=False)


def as_bytes(value: Union[str, int]) -> bytes:
    """Convert hexadecimal text or an unsigned integer into key bytes.

    Hexadecimal text may carry a "0x" prefix; text of odd length is padded with
    a leading zero, so "a" is the single byte 0x0a. Integers are converted into
    the shortest unsigned big-endian form (at least one byte).

    :param value: Hexadecimal string or non-negative integer.
    :raises KeyCoreInvalidArgument: The text is not hexadecimal or the integer is negative.
    :return: Key bytes.
    """
    if isinstance(value, int):
        if value < 0:
            raise KeyCoreInvalidArgument("Key value cannot be negative")
        return value.to_bytes(max(1, (value.bit_length() + 7) // 8), Endianness.BIG.value)
    hex_value = value.strip()
    if hex_value[:2].lower() == "0x":
        hex_value = hex_value[2:]
    if len(hex_value) % 2:
        hex_value = "0" + hex_value
    try:
        return binascii.unhexlify(hex_value)
    except (binascii.Error, ValueError) as exc:
        raise KeyCoreInvalidArgument(f"Invalid hexadecimal key: {exc}") from exc


def _to_key_bytes(key: Union[str, bytes], name: str) -> bytes:
    key_bytes = b""
    if key is not None:
        key_bytes = as_bytes(key) if isinstance(key, str) else bytes(key)
    if not key_bytes:
        raise KeyCoreInvalidArgument(f"The {name} cannot be empty")
    return key_bytes


def ensure_standard_32_bytes_private_key(key: Union[str, bytes]) -> bytes:
    """Normalize private key to exactly 32 bytes.

    Shorter keys are left-padded with zero bytes. Longer keys are rejected, they
    are never truncated.

    :param key: Private key as hexadecimal string or bytes.
    :raises KeyCoreInvalidArgument: The key is empty or not hexadecimal.
    :raises KeyCoreInvalidKeyLength: The key is longer than 32 bytes.
    :return: Private key as 32 bytes.
    """
    key_bytes = _to_key_bytes(key, "private key")
    if len(key_bytes) > PRIVATE_KEY_LENGTH:
        raise KeyCoreInvalidKeyLength(
            f"Private key has {len(key_bytes)} bytes, expected at most {PRIVATE_KEY_LENGTH}"
        )
    return key_bytes.rjust(PRIVATE_KEY_LENGTH, b"\x00")


def ensure_standard_65_bytes_public_key(key: Union[str, bytes]) -> bytes:
    """Normalize public key to the 65 bytes uncompressed point form.

    A 64 bytes coordinate pair gets the 0x04 prefix, a 65 bytes value that
    already starts with 0x04 is returned unchanged.

    :param key: Public key as hexadecimal string or bytes.
    :raises KeyCoreInvalidArgument: The key is empty or not hexadecimal.
    :raises KeyCoreInvalidKeyLength: The key has any other length or prefix.
    :return: Public key as 65 bytes.
    """
    key_bytes = _to_key_bytes(key, "public key")
    if len(key_bytes) == PUBLIC_KEY_COORDINATES_LENGTH:
        return bytes([PUBLIC_KEY_PREFIX]) + key_bytes
    if len(key_bytes) == PUBLIC_KEY_LENGTH and key_bytes[0] == PUBLIC_KEY_PREFIX:
        return key_bytes
    raise KeyCoreInvalidKeyLength(
        f"Public key has {len(key_bytes)} bytes, expected {PUBLIC_KEY_COORDINATES_LENGTH} "
        f"or {PUBLIC_KEY_LENGTH} bytes with 0x04 prefix"
    )
