#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore application utilities."""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from keycore import KEYCORE_DEBUG_LOG_FILE, KEYCORE_DEBUG_LOGGING_DISABLED
from keycore.exceptions import KeyCoreError

logger = logging.getLogger(__name__)


class KeyCoreAppError(KeyCoreError):
    """Non-fatal application error with its own exit code.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.error_code = error_code


def catch_keycore_error(function: Callable) -> Callable:
    """Catch and handle KeyCoreError and other exceptions.

    `KeyCoreAppError` prints its message and exits with its own error code,
    any other `KeyCoreError` exits with 2, anything else with 3.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return function(*args, **kwargs)
        except KeyCoreAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except KeyCoreError as keycore_exc:
            click.echo(f"{keycore_exc.__class__.__name__}: {keycore_exc}", err=True)
            logger.debug(str(keycore_exc), exc_info=True)
            if not KEYCORE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {KEYCORE_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not KEYCORE_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {KEYCORE_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
