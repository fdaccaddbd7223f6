#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Authenticated symmetric encryption used by password protected envelopes."""


# Used security modules
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import aead, algorithms

from keycore.exceptions import KeyCoreDecryptFailure, KeyCoreError


def _check_gcm_params(key: bytes, init_vector: bytes) -> None:
    if len(key) * 8 not in algorithms.AES.key_sizes:
        raise KeyCoreError(
            "The key must be a valid AES key length: "
            f"{', '.join([str(k) for k in sorted(algorithms.AES.key_sizes)])}"
        )
    if len(init_vector) != 12:
        raise KeyCoreError("The initial vector length must be 12 Bytes long")


def aes_gcm_encrypt(
    key: bytes, plain_data: bytes, init_vector: Optional[bytes] = None, associated_data: bytes = b""
) -> bytes:
    """Encrypt plain data with AES in GCM mode (Galois/Counter Mode).

    The authentication tag is appended to the encrypted data.

    :param key: The AES encryption key (must be 128, 192, or 256 bits).
    :param plain_data: Input data to be encrypted.
    :param init_vector: Initialization vector (nonce), defaults to 12 zero bytes if None.
    :param associated_data: Additional authenticated data that remains unencrypted.
    :raises KeyCoreError: Invalid key length or initialization vector length.
    :return: Encrypted data with authentication tag appended.
    """
    init_vector = init_vector or bytes(12)
    _check_gcm_params(key, init_vector)
    return aead.AESGCM(key).encrypt(init_vector, plain_data, associated_data)


def aes_gcm_decrypt(
    key: bytes,
    encrypted_data: bytes,
    init_vector: bytes,
    associated_data: bytes = b"",
) -> bytes:
    """Decrypt encrypted data with AES in GCM mode (Galois/Counter Mode).

    :param key: The key for data decryption (16, 24, or 32 bytes for AES-128/192/256)
    :param encrypted_data: Input data with authentication tag appended
    :param init_vector: Initialization vector (nonce) - must be exactly 12 bytes
    :param associated_data: Associated data - unencrypted but authenticated data
    :raises KeyCoreError: Invalid key length or IV length.
    :raises KeyCoreDecryptFailure: Authentication of the data failed.
    :return: Decrypted data as bytes
    """
    _check_gcm_params(key, init_vector)
    try:
        return aead.AESGCM(key).decrypt(init_vector, encrypted_data, associated_data)
    except InvalidTag as exc:
        raise KeyCoreDecryptFailure("AES-GCM authentication failed") from exc
