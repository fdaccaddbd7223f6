#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Password protected keystore envelope.

The envelope is a JSON document::

    {
        "version": 1,
        "algorithm": "keystore",
        "address": "0x...",
        "eccType": "sm2p256v1",
        "crypto": {
            "kdf": "scrypt",
            "kdfparams": {"n": 16384, "r": 8, "p": 1, "dklen": 32, "salt": "..."},
            "cipher": "aes-256-gcm",
            "cipherparams": {"iv": "..."},
            "ciphertext": "..."
        }
    }

The AES key is derived from the password by scrypt and the address is bound to
the ciphertext as AES-GCM associated data.
"""

import json
from typing import Any, Union

from keycore import KEYCORE_SCRYPT_N
from keycore.crypto.kdf import scrypt
from keycore.crypto.rng import random_bytes
from keycore.crypto.symmetric import aes_gcm_decrypt, aes_gcm_encrypt
from keycore.envelope.base import KeyEncryptAlgorithm
from keycore.exceptions import KeyCoreDecryptFailure, KeyCoreError
from keycore.keys.generator import create_key_pair
from keycore.keys.model import DecryptResult, EccType

KEYSTORE_VERSION = 1
KDF_NAME = "scrypt"
CIPHER_NAME = "aes-256-gcm"
SCRYPT_R = 8
SCRYPT_P = 1
DKLEN = 32
SALT_LENGTH = 32
IV_LENGTH = 12


class KeystoreEncryptAlgorithm(KeyEncryptAlgorithm):
    """Scrypt and AES-256-GCM protected JSON keystore."""

    identifier = "keystore"

    def __init__(self, scrypt_n: int = KEYCORE_SCRYPT_N) -> None:
        """Keystore algorithm constructor.

        :param scrypt_n: Scrypt CPU/memory cost of newly created envelopes.
        """
        self.scrypt_n = scrypt_n

    def encrypt(
        self, password: str, private_key: Union[bytes, str], address: str, ecc_name: str
    ) -> str:
        pkey_info = self.key_pair(private_key, address, ecc_name)
        salt = random_bytes(SALT_LENGTH)
        init_vector = random_bytes(IV_LENGTH)
        key = scrypt(password.encode("utf-8"), salt, self.scrypt_n, SCRYPT_R, SCRYPT_P, DKLEN)
        ciphertext = aes_gcm_encrypt(
            key, pkey_info.private_key, init_vector, pkey_info.address.encode("utf-8")
        )
        document = {
            "version": KEYSTORE_VERSION,
            "algorithm": self.identifier,
            "address": pkey_info.address,
            "eccType": pkey_info.ecc_type.label,
            "crypto": {
                "kdf": KDF_NAME,
                "kdfparams": {
                    "n": self.scrypt_n,
                    "r": SCRYPT_R,
                    "p": SCRYPT_P,
                    "dklen": DKLEN,
                    "salt": salt.hex(),
                },
                "cipher": CIPHER_NAME,
                "cipherparams": {"iv": init_vector.hex()},
                "ciphertext": ciphertext.hex(),
            },
        }
        return json.dumps(document, indent=2)

    @staticmethod
    def parse(envelope: str) -> dict[str, Any]:
        """Parse and check the keystore document.

        :param envelope: Envelope text.
        :raises KeyCoreDecryptFailure: The text is not a supported keystore document.
        :return: Keystore document.
        """
        try:
            document = json.loads(envelope)
        except ValueError as exc:
            raise KeyCoreDecryptFailure(f"Keystore is not a valid JSON document: {exc}") from exc
        if not isinstance(document, dict):
            raise KeyCoreDecryptFailure("Keystore must be a JSON object")
        if document.get("algorithm") != KeystoreEncryptAlgorithm.identifier:
            raise KeyCoreDecryptFailure(
                f"Unexpected envelope algorithm: {document.get('algorithm')}"
            )
        if document.get("version") != KEYSTORE_VERSION:
            raise KeyCoreDecryptFailure(f"Unsupported keystore version: {document.get('version')}")
        crypto = document.get("crypto")
        if not isinstance(crypto, dict):
            raise KeyCoreDecryptFailure("Keystore crypto section must be a JSON object")
        if crypto.get("kdf") != KDF_NAME or crypto.get("cipher") != CIPHER_NAME:
            raise KeyCoreDecryptFailure(
                f"Unsupported keystore primitives: {crypto.get('kdf')}, {crypto.get('cipher')}"
            )
        for section in ("kdfparams", "cipherparams"):
            if not isinstance(crypto.get(section), dict):
                raise KeyCoreDecryptFailure(f"Keystore {section} must be a JSON object")
        for field in ("address", "eccType"):
            if not isinstance(document.get(field), str):
                raise KeyCoreDecryptFailure(f"Keystore {field} must be a string")
        return document

    def decrypt_fully(self, password: str, envelope: str) -> DecryptResult:
        document = self.parse(envelope)
        try:
            address = document["address"]
            kdf_params = document["crypto"]["kdfparams"]
            key = scrypt(
                password.encode("utf-8"),
                bytes.fromhex(kdf_params["salt"]),
                int(kdf_params["n"]),
                int(kdf_params["r"]),
                int(kdf_params["p"]),
                int(kdf_params["dklen"]),
            )
            private_key = aes_gcm_decrypt(
                key,
                bytes.fromhex(document["crypto"]["ciphertext"]),
                bytes.fromhex(document["crypto"]["cipherparams"]["iv"]),
                address.encode("utf-8"),
            )
            pkey_info = create_key_pair(private_key, EccType.from_label(document["eccType"]))
        except KeyCoreDecryptFailure:
            raise
        except (KeyError, TypeError, ValueError, KeyCoreError) as exc:
            raise KeyCoreDecryptFailure(f"Invalid keystore: {exc}") from exc
        result = DecryptResult(
            private_key=pkey_info.private_key,
            public_key=pkey_info.public_key,
            address=pkey_info.address,
            ecc_type=pkey_info.ecc_type,
        )
        result.check_address(address)
        return result
