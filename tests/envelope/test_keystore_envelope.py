#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Keystore envelope test suite."""

import json
import os
from typing import Any

import pytest

from keycore.envelope.keystore import KeystoreEncryptAlgorithm
from keycore.exceptions import KeyCoreDecryptFailure, KeyCoreIOError

PASSWORD = "correct horse battery staple"


@pytest.fixture
def keystore() -> KeystoreEncryptAlgorithm:
    return KeystoreEncryptAlgorithm(scrypt_n=1024)


@pytest.fixture
def envelope(keystore: KeystoreEncryptAlgorithm, pkey_info: Any) -> str:
    return keystore.encrypt(PASSWORD, pkey_info.private_key, pkey_info.address, "sm2p256v1")


def test_document_layout(envelope: str, pkey_info: Any) -> None:
    """Test the keystore document carries its metadata and no plain key.

    :param envelope: Keystore envelope.
    :param pkey_info: Key pair fixture.
    """
    document = json.loads(envelope)
    assert document["version"] == 1
    assert document["algorithm"] == "keystore"
    assert document["address"] == pkey_info.address
    assert document["eccType"] == "sm2p256v1"
    assert document["crypto"]["kdf"] == "scrypt"
    assert document["crypto"]["kdfparams"]["n"] == 1024
    assert document["crypto"]["cipher"] == "aes-256-gcm"
    assert pkey_info.private_key_hex not in envelope


def test_round_trip(keystore: KeystoreEncryptAlgorithm, envelope: str, pkey_info: Any) -> None:
    assert keystore.decrypt(PASSWORD, envelope) == pkey_info.private_key
    assert keystore.decrypt_fully(PASSWORD, envelope).to_pkey_info() == pkey_info


def test_envelopes_are_salted(
    keystore: KeystoreEncryptAlgorithm, envelope: str, pkey_info: Any
) -> None:
    again = keystore.encrypt(PASSWORD, pkey_info.private_key, pkey_info.address, "sm2p256v1")
    assert json.loads(again)["crypto"]["ciphertext"] != json.loads(envelope)["crypto"]["ciphertext"]


def test_wrong_password(keystore: KeystoreEncryptAlgorithm, envelope: str) -> None:
    with pytest.raises(KeyCoreDecryptFailure):
        keystore.decrypt("wrong password", envelope)


def test_tampered_address(keystore: KeystoreEncryptAlgorithm, envelope: str) -> None:
    """Test the address is authenticated together with the ciphertext.

    :param keystore: Keystore envelope algorithm.
    :param envelope: Keystore envelope.
    """
    document = json.loads(envelope)
    document["address"] = "0x" + "11" * 20
    with pytest.raises(KeyCoreDecryptFailure):
        keystore.decrypt_fully(PASSWORD, json.dumps(document))


def test_tampered_ciphertext(keystore: KeystoreEncryptAlgorithm, envelope: str) -> None:
    document = json.loads(envelope)
    ciphertext = bytearray.fromhex(document["crypto"]["ciphertext"])
    ciphertext[0] ^= 0x01
    document["crypto"]["ciphertext"] = ciphertext.hex()
    with pytest.raises(KeyCoreDecryptFailure):
        keystore.decrypt(PASSWORD, json.dumps(document))


@pytest.mark.parametrize(
    "mutation",
    [
        lambda doc: doc.update(algorithm="pem"),
        lambda doc: doc.update(version=2),
        lambda doc: doc["crypto"].update(kdf="pbkdf2"),
        lambda doc: doc["crypto"].pop("ciphertext"),
        lambda doc: doc["crypto"]["cipherparams"].update(iv="xyz"),
        lambda doc: doc.update(eccType="secp256k1"),
        lambda doc: doc.update(eccType=1),
        lambda doc: doc.update(crypto=["x"]),
        lambda doc: doc.update(address=5),
        lambda doc: doc["crypto"].update(kdfparams=[1024]),
        lambda doc: doc["crypto"].update(cipherparams="iv"),
    ],
)
def test_malformed_document(
    keystore: KeystoreEncryptAlgorithm, envelope: str, mutation: Any
) -> None:
    """Test unsupported or damaged documents are decrypt failures.

    :param keystore: Keystore envelope algorithm.
    :param envelope: Keystore envelope.
    :param mutation: Function damaging the document.
    """
    document = json.loads(envelope)
    mutation(document)
    with pytest.raises(KeyCoreDecryptFailure):
        keystore.decrypt(PASSWORD, json.dumps(document))


@pytest.mark.parametrize("text", ["", "not json", "[1, 2]", "{}"])
def test_not_a_keystore(keystore: KeystoreEncryptAlgorithm, text: str) -> None:
    with pytest.raises(KeyCoreDecryptFailure):
        keystore.decrypt(PASSWORD, text)


def test_decrypt_file(
    keystore: KeystoreEncryptAlgorithm, envelope: str, pkey_info: Any, tmpdir: Any
) -> None:
    """Test envelope stored in a file can be decrypted.

    :param keystore: Keystore envelope algorithm.
    :param envelope: Keystore envelope.
    :param pkey_info: Key pair fixture.
    :param tmpdir: Temporary directory fixture.
    """
    path = keystore.export_key(envelope, pkey_info.address, str(tmpdir))
    assert path == os.path.join(str(tmpdir), pkey_info.address)
    assert keystore.decrypt_file(PASSWORD, path) == pkey_info.private_key
    with pytest.raises(KeyCoreIOError):
        keystore.decrypt_file(PASSWORD, os.path.join(str(tmpdir), "missing"))
