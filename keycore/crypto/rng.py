#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore cryptographic random number generation utilities.

Thin wrappers around the `secrets` module; KeyCore never post-processes the
values these functions return.
"""

# Used security modules

from secrets import randbelow, token_bytes


def random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    :param length: The number of random bytes to generate.
    :return: Cryptographically secure random bytes of specified length.
    """
    return token_bytes(length)


def rand_below(upper_bound: int) -> int:
    """Generate a random integer in the range [0, upper_bound).

    :param upper_bound: The exclusive upper bound for the random number.
    :return: Random integer between 0 and upper_bound - 1.
    """
    return randbelow(upper_bound)
