#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Legacy chain code derivation test suite.

The derived keys must stay bit-for-bit identical across releases, so they are
checked against an independent computation.
"""

import hashlib
import logging
from typing import Any

import pytest
from gmssl import sm2

from keycore.keys.legacy import derive_seed, generate_private_key_by_chain_code


def reference_key_pair(seed_key: bytes, chain_code: str) -> tuple[str, str]:
    """Compute the legacy key pair without KeyCore.

    :param seed_key: Parent key material.
    :param chain_code: Chain code text.
    :return: Private key and public key (without prefix) in hexadecimal form.
    """
    derived = hashlib.pbkdf2_hmac("sha512", seed_key, chain_code.encode("utf-8"), 2048, 64)
    seed = hashlib.sha256(derived).digest()
    scalar = int.from_bytes(seed, "big")
    curve = sm2.CryptSM2(private_key=None, public_key="None")
    point = curve._kg(scalar, sm2.default_ecc_table["g"])  # pylint: disable=protected-access
    return seed.hex(), point


@pytest.mark.parametrize(
    "seed_key, chain_code",
    [
        (b"\x00" * 32, "0"),
        (bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"), "m/44/0/0"),
        (b"legacy seed key", "链码"),
    ],
)
def test_matches_reference(seed_key: bytes, chain_code: str) -> None:
    """Test derivation against PBKDF2, SHA256 and scalar multiplication.

    :param seed_key: Parent key material.
    :param chain_code: Chain code text.
    """
    private_key, point = reference_key_pair(seed_key, chain_code)
    pkey_info = generate_private_key_by_chain_code(seed_key, chain_code)
    assert pkey_info.private_key_hex == private_key
    assert pkey_info.public_key_hex == "04" + point
    assert derive_seed(seed_key, chain_code).hex() == private_key


def test_deterministic() -> None:
    first = generate_private_key_by_chain_code(b"seed", "chain")
    second = generate_private_key_by_chain_code(b"seed", "chain")
    assert first == second
    assert first.address == second.address
    assert generate_private_key_by_chain_code(b"seed", "chain2") != first


def test_deprecation_warning(caplog: Any) -> None:
    """Test every derivation logs a deprecation warning.

    :param caplog: Pytest log capture fixture.
    """
    with caplog.at_level(logging.WARNING, logger="keycore.keys.legacy"):
        generate_private_key_by_chain_code(b"seed", "chain")
    assert "deprecated" in caplog.text
