#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore command line application.

Generates and derives SM2 keys, stores them in envelopes named by the key
address and signs or verifies messages.
"""

import logging
import sys
from typing import Optional

import click

from keycore import KEYCORE_DEFAULT_ENVELOPE
from keycore.apps.utils import keycore_logger
from keycore.apps.utils.common_cli_options import (
    envelope_algorithm_option,
    key_file_option,
    keycore_apps_common_options,
    keycore_plugin_option,
    message_options,
    output_dir_option,
    password_option,
)
from keycore.apps.utils.utils import KeyCoreAppError, catch_keycore_error
from keycore.envelope import detect_algorithm, get_envelope_registry
from keycore.keys.canonical import as_bytes
from keycore.keys.generator import generate_private_key
from keycore.keys.legacy import generate_private_key_by_chain_code
from keycore.keys.model import DecryptResult, PkeyInfo
from keycore.sign import SM2SignService
from keycore.utils.misc import load_binary, load_text
from keycore.utils.plugins import PluginsManager

logger = logging.getLogger(__name__)


def _store_key(pkey_info: PkeyInfo, algorithm: str, password: str, output_dir: str) -> str:
    registry = get_envelope_registry()
    logger.info(f"Wrapping key {pkey_info.address} into {algorithm} envelope")
    envelope = registry.encrypt(
        algorithm, password, pkey_info.private_key, pkey_info.address, pkey_info.ecc_type.label
    )
    path = registry.export_key(algorithm, envelope, pkey_info.address, output_dir)
    logger.info(f"Envelope stored into {path}")
    return path


def _open_envelope(key_file: str, algorithm: Optional[str], password: str) -> DecryptResult:
    envelope = load_text(key_file)
    algorithm = algorithm or detect_algorithm(envelope)
    logger.debug(f"Opening {algorithm} envelope {key_file}")
    return get_envelope_registry().decrypt_fully(algorithm, password, envelope)


def _load_message(message: Optional[str], binary: Optional[str]) -> bytes:
    if (message is None) == (binary is None):
        raise click.UsageError("Exactly one of --message and --binary must be used.")
    if binary:
        return load_binary(binary)
    return message.encode("utf-8")  # type: ignore[union-attr]


@click.group(name="keycore", no_args_is_help=True)
@keycore_apps_common_options
@keycore_plugin_option
def main(log_level: int, plugin: Optional[str]) -> None:
    """SM2 key lifecycle utility."""
    keycore_logger.install(level=log_level)
    if plugin:
        PluginsManager().load_from_source_file(plugin)
        get_envelope_registry.cache_clear()


@main.command(name="genkey", no_args_is_help=False)
@envelope_algorithm_option(default=KEYCORE_DEFAULT_ENVELOPE)
@password_option
@output_dir_option
def genkey(algorithm: str, password: str, output_dir: str) -> None:
    """Generate a new SM2 key and store it into an envelope."""
    pkey_info = generate_private_key()
    path = _store_key(pkey_info, algorithm, password, output_dir)
    click.echo(f"Address: {pkey_info.address}")
    click.echo(f"Envelope: {path}")


@main.command(name="derive", no_args_is_help=True)
@click.option(
    "--seed-key", required=True, help="Parent key material as hexadecimal string."
)
@click.option("--chain-code", required=True, help="Chain code text.")
@envelope_algorithm_option(default=KEYCORE_DEFAULT_ENVELOPE)
@password_option
@output_dir_option
def derive(seed_key: str, chain_code: str, algorithm: str, password: str, output_dir: str) -> None:
    """Derive SM2 key by the deprecated chain code scheme and store it into an envelope."""
    pkey_info = generate_private_key_by_chain_code(as_bytes(seed_key), chain_code)
    path = _store_key(pkey_info, algorithm, password, output_dir)
    click.echo(f"Address: {pkey_info.address}")
    click.echo(f"Envelope: {path}")


@main.command(name="info", no_args_is_help=True)
@key_file_option
@envelope_algorithm_option()
@password_option
def info(key_file: str, algorithm: Optional[str], password: str) -> None:
    """Print address, curve and public key of an envelope."""
    result = _open_envelope(key_file, algorithm, password)
    click.echo(f"Address: {result.address}")
    click.echo(f"Curve: {result.ecc_type.label}")
    click.echo(f"Public key: {result.public_key.hex()}")


@main.command(name="sign", no_args_is_help=True)
@key_file_option
@envelope_algorithm_option()
@password_option
@message_options
def sign(
    key_file: str,
    algorithm: Optional[str],
    password: str,
    message: Optional[str],
    binary: Optional[str],
) -> None:
    """Sign a message by the key from an envelope and print the signature."""
    data = _load_message(message, binary)
    result = _open_envelope(key_file, algorithm, password)
    signature = SM2SignService().sign(data, result.private_key).unwrap()
    click.echo(signature)


@main.command(name="verify", no_args_is_help=True)
@click.option("--public-key", required=True, help="Public key as hexadecimal string.")
@click.option("-s", "--signature", required=True, help="Signature (r || s) as hexadecimal string.")
@message_options
def verify(
    public_key: str, signature: str, message: Optional[str], binary: Optional[str]
) -> None:
    """Verify a message signature, exit code 1 means an invalid signature."""
    data = _load_message(message, binary)
    if not SM2SignService().verify(data, signature, public_key).unwrap():
        raise KeyCoreAppError("Signature is NOT valid", error_code=1)
    click.echo("Signature is valid")


@main.command(name="export", no_args_is_help=True)
@key_file_option
@envelope_algorithm_option()
@password_option
@output_dir_option
def export(key_file: str, algorithm: Optional[str], password: str, output_dir: str) -> None:
    """Check integrity of an envelope and store it as a file named by its address."""
    envelope = load_text(key_file)
    algorithm = algorithm or detect_algorithm(envelope)
    result = get_envelope_registry().decrypt_fully(algorithm, password, envelope)
    path = get_envelope_registry().export_key(algorithm, envelope, result.address, output_dir)
    click.echo(f"Address: {result.address}")
    click.echo(f"Envelope: {path}")


@catch_keycore_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
