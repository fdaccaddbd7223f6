#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore miscellaneous utilities test suite."""

import os
from typing import Any, Optional, Union

import pytest

from keycore import value_to_bool
from keycore.exceptions import KeyCoreError, KeyCoreIOError
from keycore.utils.misc import (
    load_binary,
    load_configuration,
    load_text,
    write_file_atomic,
)


def test_write_and_load(tmpdir: Any) -> None:
    """Test text and binary files can be written into new folders and read back.

    :param tmpdir: Temporary directory fixture.
    """
    text_path = os.path.join(str(tmpdir), "new", "file.txt")
    write_file_atomic("zpráva", text_path)
    assert load_text(text_path) == "zpráva"

    bin_path = os.path.join(str(tmpdir), "file.bin")
    write_file_atomic(b"\x00\x01", bin_path)
    assert load_binary(bin_path) == b"\x00\x01"


def test_load_missing_file(tmpdir: Any) -> None:
    with pytest.raises(KeyCoreIOError):
        load_text(os.path.join(str(tmpdir), "missing.txt"))


def test_load_folder(tmpdir: Any) -> None:
    with pytest.raises(KeyCoreIOError):
        load_binary(str(tmpdir))


def test_write_file_atomic(tmpdir: Any) -> None:
    path = os.path.join(str(tmpdir), "keys", "0xabc")
    assert write_file_atomic("first", path) == path
    assert write_file_atomic(b"second", path) == path
    assert load_text(path) == "second"
    assert os.listdir(os.path.dirname(path)) == ["0xabc"]


def test_write_file_atomic_failure(tmpdir: Any, monkeypatch: Any) -> None:
    """Test failed write keeps the previous content and removes the temporary file.

    :param tmpdir: Temporary directory fixture.
    :param monkeypatch: Pytest monkeypatch fixture.
    """
    path = os.path.join(str(tmpdir), "0xabc")
    write_file_atomic("original", path)

    def failing_fsync(fd: int) -> None:
        raise OSError("no space left on device")

    monkeypatch.setattr(os, "fsync", failing_fsync)
    with pytest.raises(KeyCoreIOError):
        write_file_atomic("partial", path)
    assert load_text(path) == "original"
    assert os.listdir(str(tmpdir)) == ["0xabc"]


def test_load_configuration(tmpdir: Any) -> None:
    path = os.path.join(str(tmpdir), "config.yaml")
    write_file_atomic("level: DEBUG\nitems:\n  - 1\n", path)
    assert load_configuration(path) == {"level": "DEBUG", "items": [1]}

    write_file_atomic("- just\n- a list\n", path)
    with pytest.raises(KeyCoreError):
        load_configuration(path)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, False),
        ("", False),
        ("True", True),
        ("true", True),
        ("T", True),
        ("1", True),
        ("False", False),
        ("0", False),
        (1, True),
        (0, False),
        (True, True),
    ],
)
def test_value_to_bool(value: Optional[Union[int, bool, str]], expected: bool) -> None:
    assert value_to_bool(value) is expected
