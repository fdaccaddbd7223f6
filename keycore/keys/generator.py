#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SM2 key generation.

Random key pairs come straight from the primitive library; this module only
wraps the primitive output into canonical `PkeyInfo` objects.
"""

from typing import Union

from keycore.crypto import primitives
from keycore.exceptions import KeyCoreInvalidArgument, KeyCorePrimitiveFailure
from keycore.keys.canonical import (
    PUBLIC_KEY_COORDINATES_LENGTH,
    as_big_integer,
    as_bytes,
    as_string,
    ensure_standard_32_bytes_private_key,
    ensure_standard_65_bytes_public_key,
)
from keycore.keys.model import EccType, PkeyInfo, compute_address
from keycore.utils.misc import Endianness

KeyValue = Union[bytes, str, int]


def get_ecc_type(ecc_type: Union[EccType, str]) -> EccType:
    """Resolve curve type given by enum member or by name.

    :param ecc_type: Curve type or its name, e.g. "sm2p256v1".
    :raises KeyCoreInvalidArgument: Unknown curve name.
    :return: Curve type.
    """
    if isinstance(ecc_type, EccType):
        return ecc_type
    return EccType.from_label(ecc_type)


def _key_bytes(value: KeyValue) -> bytes:
    return as_bytes(value) if isinstance(value, int) else value  # type: ignore[return-value]


def _public_key_bytes(value: KeyValue) -> bytes:
    # an integer coordinate pair loses the leading zero bytes of X
    if isinstance(value, int) and 0 <= value < 1 << (PUBLIC_KEY_COORDINATES_LENGTH * 8):
        return value.to_bytes(PUBLIC_KEY_COORDINATES_LENGTH, Endianness.BIG.value)
    return _key_bytes(value)


def create_pkey_info(
    private_key: KeyValue,
    public_key: KeyValue,
    ecc_type: Union[EccType, str] = EccType.SM2P256V1,
) -> PkeyInfo:
    """Create key value object from a key pair in any representation.

    Both keys are canonicalized and the address is computed from the public key.

    :param private_key: Private key as bytes, hexadecimal string or integer.
    :param public_key: Public key as bytes, hexadecimal string or integer.
    :param ecc_type: Curve type or its name.
    :return: Canonical key value object.
    """
    private = ensure_standard_32_bytes_private_key(_key_bytes(private_key))
    public = ensure_standard_65_bytes_public_key(_public_key_bytes(public_key))
    return PkeyInfo(
        private_key=private,
        public_key=public,
        address=compute_address(public),
        ecc_type=get_ecc_type(ecc_type),
    )


def create_key_pair(
    private_key: KeyValue, ecc_type: Union[EccType, str] = EccType.SM2P256V1
) -> PkeyInfo:
    """Derive the full key pair of a private scalar.

    :param private_key: Private key as bytes, hexadecimal string or integer.
    :param ecc_type: Curve type or its name.
    :raises KeyCoreInvalidArgument: The scalar is zero or not below the curve order.
    :raises KeyCorePrimitiveFailure: The primitive failed to derive the public key.
    :return: Canonical key value object.
    """
    curve = get_ecc_type(ecc_type)
    private = ensure_standard_32_bytes_private_key(_key_bytes(private_key))
    if not 0 < as_big_integer(private) < primitives.curve_order():
        raise KeyCoreInvalidArgument("Private key is out of the curve scalar range")
    result = primitives.sm2_public_key(as_string(private))
    if result.failed:
        raise KeyCorePrimitiveFailure(result.error_message)
    return create_pkey_info(private, result.public_key or "", curve)


def generate_private_key(ecc_type: Union[EccType, str] = EccType.SM2P256V1) -> PkeyInfo:
    """Generate a new random key pair.

    :param ecc_type: Curve type or its name.
    :raises KeyCorePrimitiveFailure: The primitive failed to generate the key pair.
    :return: Canonical key value object.
    """
    curve = get_ecc_type(ecc_type)
    result = primitives.sm2_key_pair()
    if result.failed:
        raise KeyCorePrimitiveFailure(result.error_message)
    return create_pkey_info(result.private_key or "", result.public_key or "", curve)
