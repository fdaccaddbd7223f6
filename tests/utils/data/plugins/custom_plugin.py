#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Plugin module without envelope algorithms."""


class CustomPlugin:
    """Custom plugin used to check plugin loading."""
