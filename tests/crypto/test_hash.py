#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore hash, random number and key derivation helpers test suite."""

import hashlib

import pytest

from keycore.crypto.hash import EnumHashAlgorithm, get_hash
from keycore.crypto.kdf import pbkdf2, scrypt
from keycore.crypto.rng import rand_below, random_bytes


@pytest.mark.parametrize(
    "algorithm, expected",
    [
        (
            EnumHashAlgorithm.SHA256,
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad",
        ),
        (
            EnumHashAlgorithm.SHA512,
            "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f",
        ),
        (
            EnumHashAlgorithm.SM3,
            "66c7f0f462eeedd9d1f2d46bdc10e4e24167c4875cf2f7a2297da02b8f4ba8e0",
        ),
    ],
)
def test_hash_vectors(algorithm: EnumHashAlgorithm, expected: str) -> None:
    """Test published digests of the message "abc".

    :param algorithm: Hash algorithm under test.
    :param expected: Expected digest in hexadecimal form.
    """
    digest = get_hash(b"abc", algorithm)
    assert digest.hex() == expected


def test_hash_algorithm_from_label() -> None:
    assert EnumHashAlgorithm.from_label("SM3") == EnumHashAlgorithm.SM3
    assert get_hash(b"") == hashlib.sha256(b"").digest()


def test_pbkdf2_matches_hashlib() -> None:
    """Test PBKDF2-HMAC-SHA512 against the standard library implementation."""
    expected = hashlib.pbkdf2_hmac("sha512", b"password", b"salt", 2048, 64)
    assert pbkdf2(b"password", b"salt", 2048, 64) == expected


def test_scrypt_matches_hashlib() -> None:
    expected = hashlib.scrypt(b"password", salt=b"NaCl", n=1024, r=8, p=1, dklen=64)
    assert scrypt(b"password", b"NaCl", 1024, 8, 1, 64) == expected


def test_random_values() -> None:
    """Test random values have requested size and differ between calls."""
    assert len(random_bytes(16)) == 16
    assert random_bytes(16) != random_bytes(16)
    assert all(0 <= rand_below(10) < 10 for _ in range(100))
