#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SM2/SM3 primitive library binding.

The functions in this module form the only boundary between KeyCore and the curve
and hash implementation (gmssl). They all take and return hexadecimal strings and
never raise: a failure is reported through the `error_message` field of the
returned `CryptoResult`. Callers must treat any populated `error_message` as a
failure, whatever its text.

Public keys are exchanged as 65-byte uncompressed points (``04 || X || Y``),
private keys as 32-byte scalars and signatures as raw ``r || s`` (64 bytes).
"""

from dataclasses import dataclass
from typing import Optional

from gmssl import func, sm2, sm3 as gmssl_sm3

from keycore.crypto.rng import rand_below

SM2_SCALAR_HEX_LEN = 64
SM2_POINT_HEX_LEN = 128
SM2_SIGNATURE_HEX_LEN = 128
UNCOMPRESSED_POINT_PREFIX = "04"


@dataclass(frozen=True)
class CryptoResult:
    """Outcome of a primitive call.

    Only the fields relevant to the called primitive are populated on success.
    """

    hash: Optional[str] = None
    signature: Optional[str] = None
    result: Optional[bool] = None
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def failed(self) -> bool:
        """Check whether the primitive reported an error.

        :return: True if the error message is populated.
        """
        return self.error_message is not None


def _new_sm2(private_key: Optional[str] = None, public_key: Optional[str] = None) -> sm2.CryptSM2:
    key = sm2.CryptSM2(private_key=private_key, public_key="None")
    # the constructor strips every leading "0"/"4" of a "04" prefixed key,
    # assigning the attribute keeps the coordinates intact
    if public_key is not None:
        key.public_key = public_key
    return key


def curve_order() -> int:
    """Get the order n of the sm2p256v1 base point.

    :return: Curve order as integer.
    """
    return int(_new_sm2().ecc_table["n"], base=16)


def _check_private_key(private_key: str) -> int:
    if len(private_key) != SM2_SCALAR_HEX_LEN:
        raise ValueError(
            f"Private key must have {SM2_SCALAR_HEX_LEN} hex characters, got {len(private_key)}"
        )
    scalar = int(private_key, 16)
    if not 0 < scalar < curve_order():
        raise ValueError("Private key is out of the curve scalar range")
    return scalar


def _strip_point_prefix(public_key: str) -> str:
    if len(public_key) != SM2_POINT_HEX_LEN + 2 or not public_key.startswith(
        UNCOMPRESSED_POINT_PREFIX
    ):
        raise ValueError("Public key must be an uncompressed point of 65 bytes")
    int(public_key, 16)
    return public_key[2:]


def sm3(hex_input: str) -> CryptoResult:
    """Compute SM3 digest of hex encoded data.

    :param hex_input: Data to hash as hexadecimal string.
    :return: Result with `hash` (64 hex characters) or `error_message`.
    """
    try:
        data = bytes.fromhex(hex_input)
        return CryptoResult(hash=gmssl_sm3.sm3_hash(func.bytes_to_list(data)))
    except Exception as exc:  # pylint: disable=broad-except
        return CryptoResult(error_message=f"SM3 hash failed: {exc}")


def sm2_key_pair() -> CryptoResult:
    """Generate a new random SM2 key pair.

    The private scalar is drawn uniformly from [1, n-1] by the `secrets` module.

    :return: Result with `private_key` and `public_key` or `error_message`.
    """
    try:
        key = _new_sm2()
        scalar = rand_below(curve_order() - 1) + 1
        point = key._kg(scalar, key.ecc_table["g"])  # pylint: disable=protected-access
        return CryptoResult(
            private_key=f"{scalar:064x}", public_key=UNCOMPRESSED_POINT_PREFIX + point
        )
    except Exception as exc:  # pylint: disable=broad-except
        return CryptoResult(error_message=f"SM2 key pair generation failed: {exc}")


def sm2_public_key(private_key: str) -> CryptoResult:
    """Derive the SM2 public key of a private key.

    :param private_key: Private key as 64 hexadecimal characters.
    :return: Result with `public_key` or `error_message`.
    """
    try:
        scalar = _check_private_key(private_key)
        key = _new_sm2()
        point = key._kg(scalar, key.ecc_table["g"])  # pylint: disable=protected-access
        return CryptoResult(
            private_key=private_key, public_key=UNCOMPRESSED_POINT_PREFIX + point
        )
    except Exception as exc:  # pylint: disable=broad-except
        return CryptoResult(error_message=f"SM2 public key derivation failed: {exc}")


def sm2_sign(private_key: str, digest: str) -> CryptoResult:
    """Sign a message digest with SM2.

    :param private_key: Private key as 64 hexadecimal characters.
    :param digest: Message digest as hexadecimal string.
    :return: Result with raw `signature` (r || s, 128 hex characters) or `error_message`.
    """
    try:
        _check_private_key(private_key)
        key = _new_sm2(private_key=private_key)
        nonce = f"{rand_below(curve_order() - 1) + 1:064x}"
        signature = key.sign(data=bytes.fromhex(digest), K=nonce)
        if not signature:
            return CryptoResult(error_message="SM2 signature could not be created")
        return CryptoResult(signature=signature)
    except Exception as exc:  # pylint: disable=broad-except
        return CryptoResult(error_message=f"SM2 signing failed: {exc}")


def sm2_verify(public_key: str, digest: str, signature: str) -> CryptoResult:
    """Verify an SM2 signature of a message digest.

    A signature that simply does not match is a successful call with
    `result=False`; malformed inputs are reported through `error_message`.

    :param public_key: Uncompressed public key as 130 hexadecimal characters.
    :param digest: Message digest as hexadecimal string.
    :param signature: Raw signature (r || s) as 128 hexadecimal characters.
    :return: Result with `result` or `error_message`.
    """
    try:
        point = _strip_point_prefix(public_key)
        if len(signature) != SM2_SIGNATURE_HEX_LEN:
            raise ValueError(
                f"Signature must have {SM2_SIGNATURE_HEX_LEN} hex characters, got {len(signature)}"
            )
        int(signature, 16)
        key = _new_sm2(public_key=point)
        return CryptoResult(result=bool(key.verify(Sign=signature, data=bytes.fromhex(digest))))
    except Exception as exc:  # pylint: disable=broad-except
        return CryptoResult(error_message=f"SM2 verification failed: {exc}")
