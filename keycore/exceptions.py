#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore exception classes.

Every failure the library reports is one of the kinds defined here, so callers
can tell an invalid input from a broken envelope or from an error reported by
the underlying curve primitives.
"""

from typing import Optional

#######################################################################
# # KeyCore Exceptions
#######################################################################


class KeyCoreError(Exception):
    """KeyCore Base Exception.

    Base exception class for all KeyCore errors. It keeps an optional
    description and formats it consistently for command line tools and logs.

    :cvar fmt: Default error message format template.
    """

    fmt = "KeyCore: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base KeyCore Exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message as string.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class KeyCoreInvalidArgument(KeyCoreError, ValueError):
    """Required input is empty, blank or cannot be interpreted."""


class KeyCoreInvalidKeyLength(KeyCoreError, ValueError):
    """Key material does not fit its canonical length.

    Raised when a private key is longer than 32 bytes or a public key is
    neither a 64-byte coordinate pair nor a 65-byte uncompressed point.
    """


class KeyCoreUnknownAlgorithm(KeyCoreError, KeyError):
    """No envelope algorithm is registered under the requested name."""


class KeyCoreDecryptFailure(KeyCoreError):
    """Envelope is malformed, was tampered with or the password is wrong."""


class KeyCorePrimitiveFailure(KeyCoreError):
    """The curve or hash primitive reported an error.

    The description holds the original message reported by the primitive.
    """


class KeyCoreIOError(KeyCoreError, IOError):
    """Reading or writing a persisted envelope failed."""


class KeyCoreTypeError(KeyCoreError, TypeError):
    """KeyCore standard type error exception."""
