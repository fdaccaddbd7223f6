#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Password based key derivation functions (PBKDF2 and scrypt)."""

# Used security modules
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from keycore.crypto.hash import EnumHashAlgorithm, get_hash_algorithm


def pbkdf2(
    password: bytes,
    salt: bytes,
    iterations: int,
    length: int,
    algorithm: EnumHashAlgorithm = EnumHashAlgorithm.SHA512,
) -> bytes:
    """Derive key using PBKDF2 with HMAC (PKCS #5 v2.0).

    :param password: Input key material.
    :param salt: Salt value.
    :param iterations: Number of iterations.
    :param length: Length of the derived key in bytes.
    :param algorithm: Hash algorithm used by the HMAC, defaults to SHA512.
    :return: Derived key as bytes.
    """
    kdf = PBKDF2HMAC(
        algorithm=get_hash_algorithm(algorithm),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password)


def scrypt(password: bytes, salt: bytes, n: int, r: int, p: int, length: int) -> bytes:
    """Derive key using the scrypt memory-hard function (RFC 7914).

    :param password: Password bytes.
    :param salt: Salt value.
    :param n: CPU/memory cost parameter, power of 2.
    :param r: Block size parameter.
    :param p: Parallelization parameter.
    :param length: Length of the derived key in bytes.
    :return: Derived key as bytes.
    """
    return Scrypt(salt=salt, length=length, n=n, r=r, p=p).derive(password)
