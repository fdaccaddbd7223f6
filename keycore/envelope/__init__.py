#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Encrypted key envelopes: algorithms and their registry."""

from keycore.envelope.base import KeyEncryptAlgorithm
from keycore.envelope.keystore import KeystoreEncryptAlgorithm
from keycore.envelope.pem import PemEncryptAlgorithm
from keycore.envelope.registry import (
    EnvelopeHandlers,
    EnvelopeRegistry,
    build_registry,
    detect_algorithm,
    get_envelope_registry,
)

__all__ = [
    "build_registry",
    "detect_algorithm",
    "EnvelopeHandlers",
    "EnvelopeRegistry",
    "get_envelope_registry",
    "KeyEncryptAlgorithm",
    "KeystoreEncryptAlgorithm",
    "PemEncryptAlgorithm",
]
