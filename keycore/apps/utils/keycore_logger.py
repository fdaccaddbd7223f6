#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore logging utilities with colored console output support."""

import logging
import logging.config
import logging.handlers
import os
import platform
import sys
from datetime import datetime
from typing import Optional, TextIO

import colorama

from keycore import (
    KEYCORE_CONFIG_FOLDER,
    KEYCORE_DEBUG,
    KEYCORE_DEBUG_LOG_FILE,
    KEYCORE_DEBUG_LOGGING_DISABLED,
    __version__,
)
from keycore.utils.misc import load_configuration

colorama.just_fix_windows_console()

LOGGING_CONFIG_FILE = os.path.join(KEYCORE_CONFIG_FOLDER, "logging.yaml")


class ColoredFormatter(logging.Formatter):
    """KeyCore Colored Logging Formatter.

    :cvar COLORED_FORMATS: Color-coded format strings for each logging level.
    :cvar FORMATS: Plain text format strings for each logging level.
    """

    FORMAT = logging.BASIC_FORMAT
    FORMAT_DEBUG = FORMAT + " (%(relativeCreated)dms since start, %(filename)s:%(lineno)d)"

    COLORED_FORMATS = {
        logging.DEBUG: colorama.Fore.BLUE + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.INFO: colorama.Fore.WHITE
        + colorama.Style.BRIGHT
        + FORMAT
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
        logging.WARNING: colorama.Fore.YELLOW + FORMAT + colorama.Fore.RESET,
        logging.ERROR: colorama.Fore.RED + FORMAT_DEBUG + colorama.Fore.RESET,
        logging.CRITICAL: colorama.Fore.RED
        + colorama.Style.BRIGHT
        + FORMAT_DEBUG
        + colorama.Fore.RESET
        + colorama.Style.RESET_ALL,
    }
    FORMATS = {
        logging.DEBUG: FORMAT_DEBUG,
        logging.INFO: FORMAT,
        logging.WARNING: FORMAT,
        logging.ERROR: FORMAT_DEBUG,
        logging.CRITICAL: FORMAT_DEBUG,
    }

    def __init__(self, colored: bool = True) -> None:
        """Overloaded init method to add colored parameter."""
        super().__init__()
        self.colored = colored
        self.formats = self.COLORED_FORMATS if colored else self.FORMATS

    def format(self, record: logging.LogRecord) -> str:
        """Modified format method.

        :param record: Input logging record to print.
        :return: Formatted logging string.
        """
        return logging.Formatter(self.formats.get(record.levelno)).format(record)


def load_logging_config(path: str = LOGGING_CONFIG_FILE) -> bool:
    """Apply user logging configuration if the file exists.

    :param path: Path to YAML logging configuration for `logging.config.dictConfig`.
    :return: True if the configuration was applied.
    """
    if not os.path.isfile(path):
        return False
    logging.config.dictConfig(load_configuration(path))
    return True


def _install_debug_log(target_logger: logging.Logger) -> None:
    for h in target_logger.handlers:
        if (
            isinstance(h, logging.handlers.RotatingFileHandler)
            and h.baseFilename == KEYCORE_DEBUG_LOG_FILE
        ):
            return
    os.makedirs(os.path.dirname(KEYCORE_DEBUG_LOG_FILE), exist_ok=True)
    debug_handler = logging.handlers.RotatingFileHandler(
        KEYCORE_DEBUG_LOG_FILE, mode="a", maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    debug_handler.setFormatter(ColoredFormatter(colored=False))
    debug_handler.setLevel(logging.DEBUG)
    target_logger.addHandler(debug_handler)

    starter = f"* KEYCORE DEBUG LOGGING STARTED {datetime.now().strftime('%Y-%m-%d %H:%M:%S')} *"
    padding = len(starter) - 2
    target_logger.debug("*" * len(starter))
    target_logger.debug(starter)
    target_logger.debug(f"* KeyCore version: {__version__}".ljust(padding) + " *")
    target_logger.debug(f"* Python version: {sys.version.split()[0]}".ljust(padding) + " *")
    target_logger.debug(f"* OS version: {platform.platform()}".ljust(padding) + " *")
    target_logger.debug(f"* Last command: {sys.argv}".ljust(padding) + " *")
    target_logger.debug("*" * len(starter))


def install(
    level: Optional[int] = None,
    stream: TextIO = sys.stderr,
    colored: Optional[bool] = None,
    logger: Optional[logging.Logger] = None,
    create_debug_logger: bool = True,
) -> None:
    """Install KeyCore log handler for colored output.

    :param level: logging level, defaults to logging.WARNING (DEBUG with KEYCORE_DEBUG set)
    :param stream: stream to output logging, defaults to sys.stderr
    :param colored: colored output, always colored if true
    :param logger: defaults to "keycore" logger
    :param create_debug_logger: create rotating debug log file
    """
    if not level:
        level = logging.DEBUG if KEYCORE_DEBUG else logging.WARNING
    target_logger = logger or logging.getLogger("keycore")
    target_logger.setLevel(logging.DEBUG)

    color = True
    if "NO_COLOR" in os.environ:
        # For details see https://no-color.org/
        color = False
    if not hasattr(stream, "isatty") or not stream.isatty():
        color = False
    if colored is not None:
        color = colored

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(color))
    target_logger.addHandler(handler)
    target_logger.propagate = True

    if load_logging_config():
        target_logger.debug(f"Logging config loaded from {LOGGING_CONFIG_FILE}")

    if create_debug_logger and not KEYCORE_DEBUG_LOGGING_DISABLED:
        try:
            _install_debug_log(target_logger)
        except OSError as exc:
            target_logger.warning(f"Failed to initialize debug logging: {exc}")
