#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Legacy chain code key derivation.

Deprecated. Kept only to recover keys (and their addresses) derived by earlier
releases, so the byte-for-byte output of this module must never change:

    seed = SHA256(PBKDF2-HMAC-SHA512(seed_key, chain_code, 2048 iterations, 64 bytes))
    private key = seed interpreted as big-endian scalar
"""

import logging

from keycore.crypto.hash import EnumHashAlgorithm, get_hash
from keycore.crypto.kdf import pbkdf2
from keycore.keys.generator import create_key_pair
from keycore.keys.model import EccType, PkeyInfo

logger = logging.getLogger(__name__)

SEED_ITERATIONS = 2048
SEED_KEY_SIZE = 512


def derive_seed(seed_key: bytes, chain_code: str) -> bytes:
    """Derive the 32 bytes private key seed.

    :param seed_key: Parent key material used as PBKDF2 password.
    :param chain_code: Chain code used as PBKDF2 salt (UTF-8 encoded).
    :return: SHA256 digest of the 512-bit derived value.
    """
    derived = pbkdf2(
        password=seed_key,
        salt=chain_code.encode("utf-8"),
        iterations=SEED_ITERATIONS,
        length=SEED_KEY_SIZE // 8,
        algorithm=EnumHashAlgorithm.SHA512,
    )
    return get_hash(derived, EnumHashAlgorithm.SHA256)


def generate_private_key_by_chain_code(seed_key: bytes, chain_code: str) -> PkeyInfo:
    """Derive SM2 key pair from a parent key and a chain code.

    :param seed_key: Parent key material.
    :param chain_code: Chain code text.
    :return: Derived key value object, identical for identical inputs.
    """
    logger.warning(
        "Chain code key derivation is deprecated and kept only to recover existing keys."
    )
    return create_key_pair(derive_seed(seed_key, chain_code), EccType.SM2P256V1)
