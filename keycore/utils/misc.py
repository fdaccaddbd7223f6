#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Miscellaneous file and data utilities.

This module provides file loading and storing helpers (including atomic
replacement of a destination file), configuration loading and small
metaclass helpers used across KeyCore.
"""

import logging
import os
import tempfile
from enum import Enum
from typing import Any, Type, TypeVar, Union

import yaml

from keycore.exceptions import KeyCoreError, KeyCoreIOError

logger = logging.getLogger(__name__)


class Endianness(str, Enum):
    """Endianness enumeration for byte order specification.

    :cvar BIG: Big-endian byte order representation.
    """

    BIG = "big"


def load_file(path: str, mode: str = "r") -> Union[str, bytes]:
    """Load file content from specified path.

    :param path: Path to the file to be loaded.
    :param mode: File reading mode, 'r' for text or 'rb' for binary.
    :raises KeyCoreIOError: The file does not exist or cannot be read.
    :return: File content as string (text mode) or bytes (binary mode).
    """
    if not os.path.isfile(path):
        raise KeyCoreIOError(f"File not found: {path}")
    logger.debug(f"Loading {'binary' if 'b' in mode else 'text'} file from {path}")
    encoding = None if "b" in mode else "utf-8"
    try:
        with open(path, mode, encoding=encoding) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise KeyCoreIOError(f"Cannot read file {path}: {exc}") from exc


def load_binary(path: str) -> bytes:
    """Load binary file into bytes.

    :param path: Path to the binary file to load.
    :return: Content of the binary file as bytes.
    """
    data = load_file(path, mode="rb")
    assert isinstance(data, bytes)
    return data


def load_text(path: str) -> str:
    """Load text file content into string.

    :param path: Path to the text file to load.
    :return: Content of the text file as string.
    """
    text = load_file(path, mode="r")
    assert isinstance(text, str)
    return text


def write_file_atomic(data: Union[str, bytes], path: str, encoding: str = "utf-8") -> str:
    """Write data to a file so that the destination is either complete or untouched.

    The data go into a temporary file created in the destination folder which is
    renamed over the destination once it has been flushed to disk. On any failure
    the temporary file is removed and the destination path is left as it was.

    :param data: Data to write, text is encoded with `encoding`.
    :param path: Path to the target file.
    :param encoding: Text encoding, defaults to 'utf-8'.
    :raises KeyCoreIOError: The file cannot be written.
    :return: Absolute path of the written file.
    """
    path = os.path.abspath(path)
    folder = os.path.dirname(path)
    raw = data.encode(encoding) if isinstance(data, str) else data
    tmp_path = None
    try:
        os.makedirs(folder, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", dir=folder)
        with os.fdopen(fd, "wb") as f:
            f.write(raw)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise KeyCoreIOError(f"Cannot write file {path}: {exc}") from exc
    finally:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
    logger.debug(f"Stored file at {path}")
    return path


def load_configuration(path: str) -> dict:
    """Load configuration from YAML or JSON file.

    :param path: Path to configuration file.
    :raises KeyCoreError: When the file content is not a dictionary.
    :return: Content of configuration as dictionary.
    """
    cfg = yaml.safe_load(load_text(path))
    if not isinstance(cfg, dict):
        raise KeyCoreError(f"Configuration file {path} does not contain a dictionary")
    return cfg


TS = TypeVar("TS", bound="SingletonMeta")  # pylint: disable=invalid-name


class SingletonMeta(type):
    """Singleton metaclass for ensuring single instance creation.

    :cvar _instance: Stores the single instance of the class.
    """

    _instance = None

    def __call__(cls: Type[TS], *args: Any, **kwargs: Any) -> TS:  # type: ignore
        """Create or return singleton instance of the class.

        :param args: Positional arguments to pass to the class constructor.
        :param kwargs: Keyword arguments to pass to the class constructor.
        :return: The singleton instance of the class.
        """
        if cls._instance is None:
            instance = super().__call__(*args, **kwargs)
            cls._instance = instance
        return cls._instance
