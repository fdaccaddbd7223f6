#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Encrypted key envelope algorithm base class.

An envelope algorithm turns a private key into a self-contained text (the
envelope) and back. Concrete algorithms are discovered by walking the
subclasses of `KeyEncryptAlgorithm`, so defining a subclass with a unique
`identifier` (in KeyCore itself or in a plugin module) is all it takes to make
a new envelope format available.
"""

import abc
import inspect
import logging
import os
from typing import Iterator, Type, Union

from typing_extensions import Self

from keycore.exceptions import KeyCoreError, KeyCoreInvalidArgument
from keycore.keys.generator import create_key_pair
from keycore.keys.model import DecryptResult, PkeyInfo
from keycore.utils.misc import load_text, write_file_atomic
from keycore.utils.plugins import PluginsManager, PluginType

logger = logging.getLogger(__name__)


class KeyEncryptAlgorithm(abc.ABC):
    """Encrypted key envelope algorithm.

    :cvar identifier: Unique name of the algorithm used for dispatch.
    :cvar plugin_identifier: Entry point group of algorithm plugins.
    """

    identifier: str
    plugin_identifier = PluginType.ENVELOPE_ALGORITHM.label

    def __init_subclass__(cls) -> None:
        """Check that concrete algorithms define their identifier.

        :raises KeyCoreError: Concrete subclass doesn't have 'identifier' attribute set.
        """
        if not inspect.isabstract(cls) and not hasattr(cls, "identifier"):
            raise KeyCoreError(f"{cls.__name__}.identifier is not set")
        return super().__init_subclass__()

    def get_name(self) -> str:
        """Get name of the algorithm.

        :return: Algorithm identifier.
        """
        return self.identifier

    @abc.abstractmethod
    def encrypt(
        self, password: str, private_key: Union[bytes, str], address: str, ecc_name: str
    ) -> str:
        """Wrap private key into an envelope.

        :param password: Password protecting the envelope.
        :param private_key: Private key as bytes or hexadecimal string.
        :param address: Address of the key, it must match the private key.
        :param ecc_name: Curve name of the key.
        :return: Envelope text.
        """

    @abc.abstractmethod
    def decrypt_fully(self, password: str, envelope: str) -> DecryptResult:
        """Recover key pair and its metadata from an envelope.

        :param password: Password protecting the envelope.
        :param envelope: Envelope text.
        :raises KeyCoreDecryptFailure: Malformed envelope or wrong password.
        :return: Recovered key material and metadata.
        """

    def decrypt(self, password: str, envelope: str) -> bytes:
        """Recover private key from an envelope.

        :param password: Password protecting the envelope.
        :param envelope: Envelope text.
        :raises KeyCoreDecryptFailure: Malformed envelope or wrong password.
        :return: Private key as 32 bytes.
        """
        return self.decrypt_fully(password, envelope).private_key

    def decrypt_file(self, password: str, path: str) -> bytes:
        """Recover private key from an envelope file.

        :param password: Password protecting the envelope.
        :param path: Path to the envelope file.
        :raises KeyCoreIOError: The file cannot be read.
        :raises KeyCoreDecryptFailure: Malformed envelope or wrong password.
        :return: Private key as 32 bytes.
        """
        return self.decrypt(password, load_text(path))

    def export_key(self, envelope: str, address: str, destination_directory: str) -> str:
        """Store envelope as `<destination_directory>/<address>`.

        The file is replaced atomically, a failed export leaves no partial file
        at the destination.

        :param envelope: Envelope text.
        :param address: Address of the key, used as file name.
        :param destination_directory: Folder to store the envelope in.
        :raises KeyCoreInvalidArgument: The address is blank or not a plain file name.
        :raises KeyCoreIOError: The file cannot be written.
        :return: Absolute path of the stored envelope.
        """
        if not address or not address.strip():
            raise KeyCoreInvalidArgument("Address cannot be empty")
        if os.path.basename(address) != address or address in (".", ".."):
            raise KeyCoreInvalidArgument(f"Address '{address}' is not a valid file name")
        logger.debug(f"Exporting {self.identifier} envelope of {address}")
        return write_file_atomic(envelope, os.path.join(destination_directory, address))

    @staticmethod
    def key_pair(private_key: Union[bytes, str], address: str, ecc_name: str) -> PkeyInfo:
        """Derive key pair of a private key and check it belongs to the address.

        :param private_key: Private key as bytes or hexadecimal string.
        :param address: Claimed address of the key.
        :param ecc_name: Curve name of the key.
        :raises KeyCoreInvalidArgument: The address doesn't belong to the private key.
        :return: Key value object.
        """
        pkey_info = create_key_pair(private_key, ecc_name)
        if address.lower() != pkey_info.address:
            raise KeyCoreInvalidArgument(
                f"Address {address} doesn't belong to the private key ({pkey_info.address})"
            )
        return pkey_info

    @classmethod
    def load_plugins(cls) -> None:
        """Load all plugin modules implementing envelope algorithms."""
        logger.debug(f"Loading plugins: {cls.plugin_identifier}")
        PluginsManager().load_from_entrypoints(cls.plugin_identifier)

    @classmethod
    def get_all_providers(cls) -> list[Type[Self]]:
        """Get all concrete envelope algorithm classes.

        :return: List of algorithm classes found in the inheritance hierarchy.
        """

        def get_subclasses(base_class: Type[Self]) -> Iterator[Type[Self]]:
            for subclass in base_class.__subclasses__():
                yield subclass
                yield from get_subclasses(subclass)

        return [klass for klass in get_subclasses(cls) if not inspect.isabstract(klass)]
