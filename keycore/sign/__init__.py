#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Message signing and verification."""

from keycore.sign.result import OperationResult, SignResult, VerifyResult
from keycore.sign.service import SM2SignService

__all__ = ["OperationResult", "SignResult", "SM2SignService", "VerifyResult"]
