#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Common click options shared by KeyCore commands."""

import logging
from typing import Callable, TypeVar, Union

import click

from keycore import KEYCORE_KEYSTORE_DIR
from keycore import __version__ as keycore_version

FC = TypeVar("FC", bound=Union[Callable[..., object], click.Command])


def keycore_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(keycore_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def keycore_plugin_option(options: FC) -> FC:
    """Plugin click option decorator.

    Provides: `plugin: str` a full path to plugin file.

    :return: Click decorator
    """
    return click.option(
        "--plugin",
        required=False,
        type=click.Path(resolve_path=True, dir_okay=False, exists=True),
        help="External python file containing a custom envelope algorithm.",
    )(options)


def envelope_algorithm_option(default: Union[str, None] = None) -> Callable[[FC], FC]:
    """Envelope algorithm click option decorator.

    Provides: `algorithm: str` name of the envelope algorithm.

    :param default: Default algorithm, None means to detect it from the envelope.
    :return: Click decorator
    """
    help_text = "Envelope algorithm, e.g. 'pem' or 'keystore'."
    if default is None:
        help_text += " Detected from the envelope content if omitted."
    return click.option(
        "-a",
        "--algorithm",
        default=default,
        show_default=default is not None,
        help=help_text,
    )


def password_option(options: FC) -> FC:
    """Envelope password click option decorator.

    Provides: `password: str`.

    :return: Click decorator
    """
    return click.option(
        "-p",
        "--password",
        default="",
        envvar="KEYCORE_PASSWORD",
        help="Password of the envelope, can be set by KEYCORE_PASSWORD environment variable.",
    )(options)


def key_file_option(options: FC) -> FC:
    """Envelope file click option decorator.

    Provides: `key_file: str`.

    :return: Click decorator
    """
    return click.option(
        "-k",
        "--key-file",
        required=True,
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        help="Path to the envelope file.",
    )(options)


def output_dir_option(options: FC) -> FC:
    """Output folder click option decorator.

    Provides: `output_dir: str`.

    :return: Click decorator
    """
    return click.option(
        "-o",
        "--output-dir",
        default=KEYCORE_KEYSTORE_DIR,
        show_default=True,
        type=click.Path(file_okay=False, resolve_path=True),
        help="Folder where the envelope is stored as a file named by the key address.",
    )(options)


def message_options(options: FC) -> FC:
    """Message click options decorator.

    Provides: `message: str` and `binary: str` (path to a file with the message).

    :return: Click decorator
    """
    options = click.option(
        "-b",
        "--binary",
        type=click.Path(exists=True, dir_okay=False, resolve_path=True),
        help="Path to a file with the message.",
    )(options)
    options = click.option("-m", "--message", help="Message text, encoded as UTF-8.")(options)
    return options
