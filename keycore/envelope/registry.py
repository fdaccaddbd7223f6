#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Envelope algorithm registry.

The registry maps an algorithm name to the bound operations of one algorithm
instance. It is assembled once from all known algorithms and cannot be changed
afterwards; a new envelope format is added by defining a new algorithm class.
"""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, NamedTuple, Optional, Union

from keycore.envelope.base import KeyEncryptAlgorithm
from keycore.exceptions import KeyCoreInvalidArgument, KeyCoreUnknownAlgorithm
from keycore.keys.model import DecryptResult

logger = logging.getLogger(__name__)


class EnvelopeHandlers(NamedTuple):
    """Bound operations of one envelope algorithm."""

    encrypt: Callable[[str, Union[bytes, str], str, str], str]
    decrypt: Callable[[str, str], bytes]
    decrypt_fully: Callable[[str, str], DecryptResult]
    decrypt_file: Callable[[str, str], bytes]
    export_key: Callable[[str, str, str], str]

    @classmethod
    def from_algorithm(cls, algorithm: KeyEncryptAlgorithm) -> "EnvelopeHandlers":
        """Bind operations of an algorithm instance.

        :param algorithm: Envelope algorithm instance.
        :return: Record of bound operations.
        """
        return cls(
            encrypt=algorithm.encrypt,
            decrypt=algorithm.decrypt,
            decrypt_fully=algorithm.decrypt_fully,
            decrypt_file=algorithm.decrypt_file,
            export_key=algorithm.export_key,
        )


class EnvelopeRegistry(Mapping):
    """Read-only mapping of algorithm name to its envelope operations."""

    def __init__(self, handlers: dict[str, EnvelopeHandlers]) -> None:
        """Registry constructor.

        :param handlers: Operations by algorithm name, the dictionary is copied.
        """
        self._handlers = MappingProxyType(dict(handlers))

    def __getitem__(self, name: str) -> EnvelopeHandlers:
        try:
            return self._handlers[name]
        except KeyError as exc:
            raise KeyCoreUnknownAlgorithm(
                f"Unknown envelope algorithm '{name}', available: {', '.join(self.names())}"
            ) from exc

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"EnvelopeRegistry({', '.join(self.names())})"

    def names(self) -> list[str]:
        """Get names of all registered algorithms.

        :return: Sorted list of algorithm names.
        """
        return sorted(self._handlers)

    def encrypt(
        self,
        name: str,
        password: str,
        private_key: Union[bytes, str],
        address: str,
        ecc_name: str,
    ) -> str:
        """Wrap private key into an envelope of given algorithm.

        :param name: Algorithm name.
        :param password: Password protecting the envelope.
        :param private_key: Private key as bytes or hexadecimal string.
        :param address: Address of the key.
        :param ecc_name: Curve name of the key.
        :raises KeyCoreUnknownAlgorithm: No algorithm with such name.
        :return: Envelope text.
        """
        return self[name].encrypt(password, private_key, address, ecc_name)

    def decrypt(self, name: str, password: str, envelope: str) -> bytes:
        """Recover private key from an envelope of given algorithm.

        :param name: Algorithm name.
        :param password: Password protecting the envelope.
        :param envelope: Envelope text.
        :raises KeyCoreUnknownAlgorithm: No algorithm with such name.
        :return: Private key as 32 bytes.
        """
        return self[name].decrypt(password, envelope)

    def decrypt_fully(self, name: str, password: str, envelope: str) -> DecryptResult:
        """Recover key material and metadata from an envelope of given algorithm.

        :param name: Algorithm name.
        :param password: Password protecting the envelope.
        :param envelope: Envelope text.
        :raises KeyCoreUnknownAlgorithm: No algorithm with such name.
        :return: Recovered key material.
        """
        return self[name].decrypt_fully(password, envelope)

    def decrypt_file(self, name: str, password: str, path: str) -> bytes:
        """Recover private key from an envelope file of given algorithm.

        :param name: Algorithm name.
        :param password: Password protecting the envelope.
        :param path: Path to the envelope file.
        :raises KeyCoreUnknownAlgorithm: No algorithm with such name.
        :return: Private key as 32 bytes.
        """
        return self[name].decrypt_file(password, path)

    def export_key(self, name: str, envelope: str, address: str, destination_directory: str) -> str:
        """Store envelope of given algorithm as `<destination_directory>/<address>`.

        :param name: Algorithm name.
        :param envelope: Envelope text.
        :param address: Address of the key.
        :param destination_directory: Folder to store the envelope in.
        :raises KeyCoreUnknownAlgorithm: No algorithm with such name.
        :return: Absolute path of the stored envelope.
        """
        return self[name].export_key(envelope, address, destination_directory)


def build_registry(
    algorithms: Optional[Iterable[KeyEncryptAlgorithm]] = None,
) -> EnvelopeRegistry:
    """Assemble registry of envelope algorithms.

    :param algorithms: Algorithm instances to register, defaults to an instance of
        every known algorithm class including the ones from plugins.
    :raises KeyCoreInvalidArgument: Two algorithms share the same name.
    :return: Envelope registry.
    """
    if algorithms is None:
        KeyEncryptAlgorithm.load_plugins()
        algorithms = [klass() for klass in KeyEncryptAlgorithm.get_all_providers()]
    handlers: dict[str, EnvelopeHandlers] = {}
    for algorithm in algorithms:
        name = algorithm.get_name()
        if name in handlers:
            raise KeyCoreInvalidArgument(f"Envelope algorithm '{name}' is registered twice")
        handlers[name] = EnvelopeHandlers.from_algorithm(algorithm)
        logger.debug(f"Registered envelope algorithm {name}")
    return EnvelopeRegistry(handlers)


@lru_cache(maxsize=None)
def get_envelope_registry() -> EnvelopeRegistry:
    """Get the default envelope registry, built on first use.

    :return: Envelope registry with all known algorithms.
    """
    return build_registry()


def detect_algorithm(envelope: str) -> str:
    """Guess the algorithm name of an envelope from its content.

    Keystore documents carry their own algorithm tag, PEM armor is recognized
    by its markers.

    :param envelope: Envelope text.
    :raises KeyCoreUnknownAlgorithm: The format is not recognized.
    :return: Algorithm name.
    """
    text = envelope.lstrip()
    if text.startswith("{"):
        try:
            return str(json.loads(text)["algorithm"])
        except (ValueError, KeyError, TypeError) as exc:
            raise KeyCoreUnknownAlgorithm("JSON envelope has no algorithm tag") from exc
    if text.startswith("-----BEGIN"):
        return "pem"
    raise KeyCoreUnknownAlgorithm("Envelope format is not recognized")
