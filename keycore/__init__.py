#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore - SM2 key lifecycle toolkit for blockchain identities.

KeyCore generates and derives SM2 private keys, keeps them in canonical
fixed-length form, persists them through pluggable encrypted envelopes and
signs or verifies messages with SM3 digests.

The behavior of the library can be tuned by environment variables which are
evaluated once, when the package is imported.
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs

from .__version__ import __version__ as keycore_version


def get_keycore_version() -> Version:
    """Get KeyCore version information.

    :return: Parsed version object containing KeyCore version information.
    """
    return parse(keycore_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_keycore_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)


KEYCORE_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="keycore",
    version=version.base_version,
)

KEYCORE_DEBUG = value_to_bool(os.environ.get("KEYCORE_DEBUG"))

KEYCORE_DEBUG_LOGGING_DISABLED = value_to_bool(os.environ.get("KEYCORE_DEBUG_LOGGING_DISABLED"))
KEYCORE_DEBUG_LOG_FILE = os.environ.get(
    "KEYCORE_DEBUG_LOG_FILE", os.path.join(KEYCORE_PLATFORM_DIRS.user_log_dir, "debug.log")
)

# default destination of exported envelopes, one file per address
KEYCORE_KEYSTORE_DIR = os.environ.get(
    "KEYCORE_KEYSTORE_DIR", os.path.join(KEYCORE_PLATFORM_DIRS.user_data_dir, "keys")
)
KEYCORE_DEFAULT_ENVELOPE = os.environ.get("KEYCORE_DEFAULT_ENVELOPE", "pem")
KEYCORE_SCRYPT_N = int(os.environ.get("KEYCORE_SCRYPT_N", str(2**14)))

KEYCORE_CONFIG_FOLDER = os.path.expanduser("~/.keycore")
