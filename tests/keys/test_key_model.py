#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key value objects test suite."""

import dataclasses
from typing import Any

import pytest

from keycore.crypto.hash import EnumHashAlgorithm, get_hash
from keycore.exceptions import (
    KeyCoreDecryptFailure,
    KeyCoreInvalidArgument,
    KeyCoreInvalidKeyLength,
)
from keycore.keys.model import DecryptResult, EccType, PkeyInfo, compute_address


def test_ecc_type() -> None:
    assert EccType.from_label("SM2P256V1") is EccType.SM2P256V1
    assert EccType.SM2P256V1.oid == "1.2.156.10197.1.301"
    assert EccType.from_oid("1.2.156.10197.1.301") is EccType.SM2P256V1
    with pytest.raises(KeyCoreInvalidArgument):
        EccType.from_label("secp256r1")
    with pytest.raises(KeyCoreInvalidArgument):
        EccType.from_oid("1.2.840.10045.3.1.7")


def test_compute_address(pkey_info: Any) -> None:
    """Test address is the tail of SM3 digest of the point coordinates.

    :param pkey_info: Key pair fixture.
    """
    digest = get_hash(pkey_info.public_key[1:], EnumHashAlgorithm.SM3)
    assert compute_address(pkey_info.public_key) == "0x" + digest[-20:].hex()
    assert pkey_info.address == compute_address(pkey_info.public_key)
    assert len(pkey_info.address) == 42


def test_pkey_info_lengths(pkey_info: Any) -> None:
    with pytest.raises(KeyCoreInvalidKeyLength):
        PkeyInfo(pkey_info.private_key[1:], pkey_info.public_key, pkey_info.address)
    with pytest.raises(KeyCoreInvalidKeyLength):
        PkeyInfo(pkey_info.private_key, pkey_info.public_key[1:], pkey_info.address)


def test_pkey_info_is_immutable(pkey_info: Any) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        pkey_info.address = "0x00"


def test_pkey_info_repr_hides_private_key(pkey_info: Any) -> None:
    """Test the private key never appears in the text representation.

    :param pkey_info: Key pair fixture.
    """
    text = repr(pkey_info)
    assert pkey_info.address in text
    assert pkey_info.private_key_hex not in text
    assert str(pkey_info.private_key) not in text


def test_hex_properties(pkey_info: Any) -> None:
    assert len(pkey_info.private_key_hex) == 64
    assert len(pkey_info.public_key_hex) == 130
    assert pkey_info.public_key_hex.startswith("04")


def test_decrypt_result_check_address(pkey_info: Any) -> None:
    """Test cross-check of recovered and claimed address.

    :param pkey_info: Key pair fixture.
    """
    result = DecryptResult(pkey_info.private_key, pkey_info.public_key, pkey_info.address)
    result.check_address(pkey_info.address.upper().replace("0X", "0x"))
    with pytest.raises(KeyCoreDecryptFailure):
        result.check_address("0x" + "00" * 20)
    assert result.to_pkey_info() == pkey_info
    assert pkey_info.private_key_hex not in repr(result)
