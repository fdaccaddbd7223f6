#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Outcome of signing operations."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from typing_extensions import Self

from keycore.exceptions import KeyCoreError

T = TypeVar("T")


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Either a value or the error that prevented computing it."""

    value: Optional[T] = None
    error: Optional[KeyCoreError] = None

    @property
    def ok(self) -> bool:
        """Check whether the operation succeeded.

        :return: True if no error is carried.
        """
        return self.error is None

    def unwrap(self) -> T:
        """Get the value or raise the carried error.

        :raises KeyCoreError: The carried error.
        :return: Operation value.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> Self:
        """Create successful result.

        :param value: Operation value.
        :return: Result instance.
        """
        return cls(value=value)

    @classmethod
    def failure(cls, error: KeyCoreError) -> Self:
        """Create failed result.

        :param error: Error that prevented the operation.
        :return: Result instance.
        """
        return cls(error=error)


@dataclass(frozen=True)
class SignResult(OperationResult[str]):
    """Signing outcome, the value is the r || s signature in hexadecimal form."""

    @property
    def signature(self) -> Optional[str]:
        """Signature hexadecimal string, None on failure."""
        return self.value


@dataclass(frozen=True)
class VerifyResult(OperationResult[bool]):
    """Verification outcome.

    A successful result with value False means the signature doesn't match,
    a failed result means the verification couldn't be performed at all.
    """

    @property
    def verified(self) -> bool:
        """True only for a successfully verified signature."""
        return self.ok and self.value is True
