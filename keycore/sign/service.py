#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""SM2 signing service.

Messages are hashed with SM3 and the digest is signed or verified by the SM2
primitive. The service never raises for bad input or primitive failures, every
outcome is reported through `SignResult` or `VerifyResult`.
"""

from typing import Optional, Union

from keycore.crypto import primitives
from keycore.crypto.hash import EnumHashAlgorithm
from keycore.exceptions import KeyCoreError, KeyCoreInvalidArgument, KeyCorePrimitiveFailure
from keycore.keys.canonical import (
    as_string,
    ensure_standard_32_bytes_private_key,
    ensure_standard_65_bytes_public_key,
)
from keycore.sign.result import OperationResult, SignResult, VerifyResult

Message = Optional[Union[bytes, str]]


def _message_bytes(message: Message) -> bytes:
    if message is None:
        return b""
    return message.encode("utf-8") if isinstance(message, str) else bytes(message)


def _is_blank(value: Optional[Union[bytes, str]]) -> bool:
    if value is None:
        return True
    return not (value.strip() if isinstance(value, str) else value)


class SM2SignService:
    """Stateless SM2 signing service with SM3 digests."""

    hash_algorithm = EnumHashAlgorithm.SM3

    def digest(self, message: Message) -> OperationResult[str]:
        """Compute SM3 digest of a message.

        :param message: Message bytes, text is encoded as UTF-8.
        :return: Result with digest hexadecimal string.
        """
        data = _message_bytes(message)
        if not data:
            return OperationResult.failure(KeyCoreInvalidArgument("Message cannot be empty"))
        result = primitives.sm3(data.hex())
        if result.failed:
            return OperationResult.failure(KeyCorePrimitiveFailure(result.error_message))
        return OperationResult.success(result.hash)

    def sign(self, message: Message, private_key: Union[str, bytes]) -> SignResult:
        """Sign a message.

        :param message: Message bytes, text is encoded as UTF-8.
        :param private_key: Private key as hexadecimal string or bytes.
        :return: Result with r || s signature hexadecimal string.
        """
        if not _message_bytes(message):
            return SignResult.failure(KeyCoreInvalidArgument("Message cannot be empty"))
        if _is_blank(private_key):
            return SignResult.failure(KeyCoreInvalidArgument("Private key cannot be empty"))
        try:
            key = ensure_standard_32_bytes_private_key(private_key)
        except KeyCoreError as exc:
            return SignResult.failure(exc)
        digest = self.digest(message)
        if not digest.ok:
            return SignResult.failure(digest.error)  # type: ignore[arg-type]
        result = primitives.sm2_sign(as_string(key), digest.unwrap())
        if result.failed:
            return SignResult.failure(KeyCorePrimitiveFailure(result.error_message))
        return SignResult.success(result.signature)

    def verify(
        self, message: Message, signature: Optional[str], public_key: Union[str, bytes]
    ) -> VerifyResult:
        """Verify a message signature.

        :param message: Message bytes, text is encoded as UTF-8.
        :param signature: The r || s signature as hexadecimal string.
        :param public_key: Public key as 64 or 65 bytes, hexadecimal string or bytes.
        :return: Result with True for a matching signature, False otherwise.
        """
        if not _message_bytes(message):
            return VerifyResult.failure(KeyCoreInvalidArgument("Message cannot be empty"))
        if _is_blank(signature):
            return VerifyResult.failure(KeyCoreInvalidArgument("Signature cannot be empty"))
        if _is_blank(public_key):
            return VerifyResult.failure(KeyCoreInvalidArgument("Public key cannot be empty"))
        try:
            key = ensure_standard_65_bytes_public_key(public_key)
        except KeyCoreError as exc:
            return VerifyResult.failure(exc)
        digest = self.digest(message)
        if not digest.ok:
            return VerifyResult.failure(digest.error)  # type: ignore[arg-type]
        result = primitives.sm2_verify(
            as_string(key), digest.unwrap(), signature.strip().lower()  # type: ignore[union-attr]
        )
        if result.failed:
            return VerifyResult.failure(
                KeyCorePrimitiveFailure(f"Could not verify signature: {result.error_message}")
            )
        return VerifyResult.success(bool(result.result))
