#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore hash algorithms.

SHA-2 digests are computed by the cryptography package, SM3 by gmssl, behind a
single `get_hash` entry point.
"""

# Used security modules

from cryptography.hazmat.primitives import hashes
from gmssl import func, sm3

from keycore.exceptions import KeyCoreError
from keycore.utils.keycore_enum import KeyCoreEnum


class EnumHashAlgorithm(KeyCoreEnum):
    """Hash algorithm enumeration for cryptographic operations."""

    SHA256 = (1, "sha256", "SHA256")
    SHA512 = (3, "sha512", "SHA512")
    SM3 = (5, "sm3", "SM3")


def get_hash_algorithm(algorithm: EnumHashAlgorithm) -> hashes.HashAlgorithm:
    """Get cryptography hash algorithm instance for specified algorithm type.

    :param algorithm: Hash algorithm type enumeration value.
    :raises KeyCoreError: If the algorithm is not provided by the cryptography package.
    :return: Instance of the corresponding hash algorithm class.
    """
    cls_name = algorithm.label.upper()
    algo_cls = getattr(hashes, cls_name, None)
    if algo_cls is None:
        raise KeyCoreError(f"Unsupported algorithm: hashes.{cls_name}")
    return algo_cls()  # pylint: disable=not-callable


def get_hash(data: bytes, algorithm: EnumHashAlgorithm = EnumHashAlgorithm.SHA256) -> bytes:
    """Compute hash digest from input data using specified algorithm.

    :param data: Input data to be hashed.
    :param algorithm: Hash algorithm to use for computation.
    :raises KeyCoreError: If the specified algorithm is not supported.
    :return: Hash digest as bytes.
    """
    if algorithm == EnumHashAlgorithm.SM3:
        return bytes.fromhex(sm3.sm3_hash(func.bytes_to_list(data)))
    hash_obj = hashes.Hash(get_hash_algorithm(algorithm))
    hash_obj.update(data)
    return hash_obj.finalize()
