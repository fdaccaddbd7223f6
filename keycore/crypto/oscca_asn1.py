#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""OSCCA SM2 private key container serialization.

This module provides ASN.1 encoding and decoding of SM2 key sets in the
PKCS#8-like container used for the armored private key envelope, together with
PEM armoring helpers.
"""

import base64
import binascii
import textwrap
from typing import NamedTuple, Union

from pyasn1.codec.der.decoder import decode
from pyasn1.codec.der.encoder import encode
from pyasn1.error import PyAsn1Error
from pyasn1.type import namedtype, tag, univ

from keycore.exceptions import KeyCoreError

EC_PUBLIC_KEY_OID = "1.2.840.10045.2.1"
SM2_OID = "1.2.156.10197.1.301"

PEM_PRIVATE_KEY_LABEL = "PRIVATE KEY"


class KeySet(univ.Sequence):
    """OSCCA ASN.1 key set container for private and public key pairs.

    ASN.1 Structure:
        KeySet ::= SEQUENCE {
            number  INTEGER,
            prk     OCTET STRING,
            puk     [1] EXPLICIT BIT STRING
        }
    """


KeySet.componentType = namedtype.NamedTypes(
    namedtype.NamedType("number", univ.Integer()),
    namedtype.NamedType("prk", univ.OctetString()),
    namedtype.NamedType(
        "puk",
        univ.BitString().subtype(
            explicitTag=tag.Tag(tag.tagClassContext, tag.tagFormatSimple, 1),
        ),
    ),
)


class Private(univ.Sequence):
    """OSCCA private key ASN.1 structure representation.

    ASN.1 Structure:
        Private ::= SEQUENCE {
            number      INTEGER,
            ids         SEQUENCE OF OBJECT IDENTIFIER,
            keyset      OCTET STRING (CONTAINING KeySet)
        }
    """


Private.componentType = namedtype.NamedTypes(
    namedtype.NamedType("number", univ.Integer()),
    namedtype.NamedType("ids", univ.SequenceOf(componentType=univ.ObjectIdentifier())),
    namedtype.NamedType("keyset", univ.OctetString()),
)


class DecodedKeySet(NamedTuple):
    """Key material recovered from the private key container."""

    curve_oid: str
    private: bytes
    public: bytes


def encode_private_key(private: bytes, public: bytes, curve_oid: str = SM2_OID) -> bytes:
    """Encode private key set into the DER container.

    :param private: Private key scalar as 32 bytes.
    :param public: Uncompressed public key as 65 bytes (04 || X || Y).
    :param curve_oid: Dotted object identifier of the curve.
    :raises KeyCoreError: When ASN.1 encoding fails.
    :return: ASN.1 DER encoded private key structure as bytes.
    """
    try:
        keyset_data = {
            "number": 1,
            "prk": univ.OctetString(hexValue=private.hex()),
            "puk": univ.BitString(hexValue=public.hex()),
        }
        keyset = bytes(encode(keyset_data, asn1Spec=KeySet()))

        private_key = {
            "number": 0,
            "ids": [univ.ObjectIdentifier(EC_PUBLIC_KEY_OID), univ.ObjectIdentifier(curve_oid)],
            "keyset": keyset,
        }
        return bytes(encode(private_key, asn1Spec=Private()))
    except PyAsn1Error as exc:
        raise KeyCoreError(str(exc)) from exc


def decode_private_key(data: bytes) -> DecodedKeySet:
    """Parse private key set from DER data.

    :param data: Binary ASN.1 encoded private key data to decode.
    :raises KeyCoreError: If ASN.1 decoding fails or the container is not an EC key.
    :return: Curve object identifier, private key and public key.
    """
    try:
        result, rest = decode(data, asn1Spec=Private())
        if rest:
            raise KeyCoreError("Unexpected data after the private key structure")
        ids = [str(oid) for oid in result["ids"]]
        if len(ids) != 2 or ids[0] != EC_PUBLIC_KEY_OID:
            raise KeyCoreError(f"Unsupported private key algorithm identifiers: {ids}")
        key_set, rest = decode(bytes(result["keyset"]), asn1Spec=KeySet())
        if rest:
            raise KeyCoreError("Unexpected data after the key set structure")
        return DecodedKeySet(
            curve_oid=ids[1],
            private=bytes(key_set["prk"]),
            public=bytes(key_set["puk"].asOctets()),
        )
    except PyAsn1Error as exc:
        raise KeyCoreError(str(exc)) from exc


def armor_pem(der_data: bytes, label: str = PEM_PRIVATE_KEY_LABEL) -> str:
    """Wrap DER data into PEM armor.

    :param der_data: DER encoded data.
    :param label: PEM label, defaults to "PRIVATE KEY".
    :return: PEM text terminated by a new line.
    """
    body = "\n".join(textwrap.wrap(base64.b64encode(der_data).decode("ascii"), 64))
    return f"-----BEGIN {label}-----\n{body}\n-----END {label}-----\n"


def sanitize_pem(data: Union[str, bytes]) -> bytes:
    """Convert PEM data into DER format.

    Extracts the base64-encoded data between PEM markers containing 'KEY'. Data
    without PEM markers are returned unchanged.

    :param data: Input data that may be in PEM or DER format.
    :raises KeyCoreError: When PEM data is corrupted or cannot be decoded.
    :return: DER-formatted data as bytes.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    if b"---" not in data:
        return data

    capture_data = False
    base64_data = b""
    for line in data.splitlines(keepends=False):
        if capture_data and b"---" not in line:
            base64_data += line.strip()
        # PEM data may contain EC PARAMS, thus capture trigger should be the word KEY
        if b"KEY" in line:
            capture_data = not capture_data
    # in the end the `capture_data` flag should be false signaling proper END * KEY
    if capture_data is False and len(base64_data) > 0:
        try:
            return base64.b64decode(base64_data, validate=True)
        except binascii.Error as exc:
            raise KeyCoreError("PEM data are corrupted") from exc
    raise KeyCoreError("PEM data are corrupted")
