#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Key value objects, canonicalization and key generation."""

from keycore.keys.canonical import (
    as_big_integer,
    as_bytes,
    as_string,
    ensure_standard_32_bytes_private_key,
    ensure_standard_65_bytes_public_key,
)
from keycore.keys.generator import create_key_pair, create_pkey_info, generate_private_key
from keycore.keys.model import DecryptResult, EccType, PkeyInfo, compute_address

__all__ = [
    "as_big_integer",
    "as_bytes",
    "as_string",
    "compute_address",
    "create_key_pair",
    "create_pkey_info",
    "DecryptResult",
    "EccType",
    "ensure_standard_32_bytes_private_key",
    "ensure_standard_65_bytes_public_key",
    "generate_private_key",
    "PkeyInfo",
]
