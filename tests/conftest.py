#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore pytest configuration and shared test fixtures."""

import logging
import os
from typing import Any

import pytest

from tests.cli_runner import CliRunner

os.environ["KEYCORE_DEBUG_LOGGING_DISABLED"] = "True"
# keep keystore tests fast, the cost is stored in every envelope
os.environ["KEYCORE_SCRYPT_N"] = "1024"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(scope="module")
def data_dir(request: Any) -> str:
    """Get test data directory path for the current test module.

    :param request: Pytest request fixture containing test execution context.
    :return: Absolute path to the test data directory.
    """
    logging.debug(f"data_dir for module: {request.fspath}")
    data_path = os.path.join(os.path.dirname(request.fspath), "data")
    logging.debug(f"data_dir: {data_path}")
    return data_path


@pytest.fixture
def tests_root_dir() -> str:
    """Get the root directory of tests.

    :return: Absolute path to the tests root directory.
    """
    return os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(scope="session")
def pkey_info() -> Any:
    """Get a key pair derived from a fixed private scalar.

    :return: Key value object shared by the whole test session.
    """
    from keycore.keys.generator import create_key_pair

    return create_key_pair("3945208f7b2144b13f36e38ac6d39f95889393692860b51a42fb81ef4df7c5b8")
