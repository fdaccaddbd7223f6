#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key value objects.

`PkeyInfo` bundles a canonical key pair with its address and curve type; it is
produced by the key generator and consumed by an envelope algorithm. The
`DecryptResult` is its counterpart recovered from an envelope.
"""

from dataclasses import dataclass

from keycore.crypto.hash import EnumHashAlgorithm, get_hash
from keycore.exceptions import (
    KeyCoreDecryptFailure,
    KeyCoreInvalidArgument,
    KeyCoreInvalidKeyLength,
)
from keycore.keys.canonical import PRIVATE_KEY_LENGTH, PUBLIC_KEY_LENGTH, as_string
from keycore.utils.keycore_enum import KeyCoreEnum

ADDRESS_LENGTH = 20


class EccType(KeyCoreEnum):
    """Supported named elliptic curves."""

    SM2P256V1 = (0, "sm2p256v1", "SM2 recommended 256-bit curve")

    @property
    def oid(self) -> str:
        """Get the dotted object identifier of the curve.

        :return: Object identifier string.
        """
        return _CURVE_OIDS[self.label]

    @classmethod
    def from_oid(cls, oid: str) -> "EccType":
        """Get curve with given object identifier.

        :param oid: Dotted object identifier.
        :raises KeyCoreInvalidArgument: No supported curve has this identifier.
        :return: Curve type.
        """
        for label, curve_oid in _CURVE_OIDS.items():
            if curve_oid == oid:
                return cls.from_label(label)
        raise KeyCoreInvalidArgument(f"Unsupported curve object identifier: {oid}")


_CURVE_OIDS = {"sm2p256v1": "1.2.156.10197.1.301"}


def compute_address(public_key: bytes) -> str:
    """Compute the account address of a public key.

    The address is the last 20 bytes of the SM3 digest of the X || Y coordinates.

    :param public_key: Public key as 65 bytes uncompressed point.
    :return: Address as "0x" prefixed lowercase hexadecimal string.
    """
    digest = get_hash(public_key[1:], EnumHashAlgorithm.SM3)
    return "0x" + as_string(digest[-ADDRESS_LENGTH:])


def _check_lengths(private_key: bytes, public_key: bytes) -> None:
    if len(private_key) != PRIVATE_KEY_LENGTH:
        raise KeyCoreInvalidKeyLength(
            f"Private key must have {PRIVATE_KEY_LENGTH} bytes, got {len(private_key)}"
        )
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise KeyCoreInvalidKeyLength(
            f"Public key must have {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
        )


@dataclass(frozen=True, repr=False)
class PkeyInfo:
    """Canonical key pair with its address and curve type."""

    private_key: bytes
    public_key: bytes
    address: str
    ecc_type: EccType = EccType.SM2P256V1

    def __post_init__(self) -> None:
        _check_lengths(self.private_key, self.public_key)

    @property
    def private_key_hex(self) -> str:
        """Private key as 64 hexadecimal characters."""
        return as_string(self.private_key)

    @property
    def public_key_hex(self) -> str:
        """Public key as 130 hexadecimal characters including the 04 prefix."""
        return as_string(self.public_key)

    def __repr__(self) -> str:
        return f"PkeyInfo(address={self.address!r}, ecc_type={self.ecc_type.label!r})"


@dataclass(frozen=True, repr=False)
class DecryptResult:
    """Key material and metadata recovered from an envelope."""

    private_key: bytes
    public_key: bytes
    address: str
    ecc_type: EccType = EccType.SM2P256V1

    def __post_init__(self) -> None:
        _check_lengths(self.private_key, self.public_key)

    def check_address(self, address: str) -> None:
        """Cross-check the recovered address against a claimed one.

        :param address: Claimed address, compared case-insensitively.
        :raises KeyCoreDecryptFailure: The addresses differ.
        """
        if address.lower() != self.address.lower():
            raise KeyCoreDecryptFailure(
                f"Envelope belongs to address {self.address}, not to {address}"
            )

    def to_pkey_info(self) -> PkeyInfo:
        """Convert into key value object.

        :return: Key pair with address and curve type.
        """
        return PkeyInfo(self.private_key, self.public_key, self.address, self.ecc_type)

    def __repr__(self) -> str:
        return f"DecryptResult(address={self.address!r}, ecc_type={self.ecc_type.label!r})"
