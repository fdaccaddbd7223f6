#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore plugins manager.

Plugins are ordinary Python modules. Importing them is enough to make their
envelope algorithms visible, because algorithms are discovered by walking the
subclasses of the envelope base class. Modules come either from setuptools
entry points or from a source file given on the command line.
"""

import logging
import os
import sys
from importlib.util import module_from_spec, spec_from_file_location
from types import ModuleType
from typing import Optional

import importlib_metadata

from keycore.exceptions import KeyCoreError, KeyCoreTypeError
from keycore.utils.keycore_enum import KeyCoreEnum
from keycore.utils.misc import SingletonMeta

logger = logging.getLogger(__name__)


class PluginType(KeyCoreEnum):
    """KeyCore Plugin Type Enumeration."""

    ENVELOPE_ALGORITHM = (0, "keycore.envelope", "Encrypted key envelope algorithm")


class PluginsManager(metaclass=SingletonMeta):
    """KeyCore Plugin Manager for dynamic module loading and registration."""

    def __init__(self) -> None:
        """Initialize the plugin manager with no plugins loaded."""
        self.plugins: dict[str, ModuleType] = {}

    def load_from_entrypoints(self, group_name: Optional[str] = None) -> int:
        """Load modules from given setuptools group.

        Failed module imports are logged as warnings and skipped.

        :param group_name: Entry point group to load plugins from. If None, loads from all groups.
        :raises KeyCoreTypeError: When group_name is not a string type.
        :return: The number of successfully loaded plugins.
        """
        if group_name is not None and not isinstance(group_name, str):
            raise KeyCoreTypeError("Group name must be of string type.")
        group_names = [group_name] if group_name is not None else PluginType.labels()

        entry_points: list[importlib_metadata.EntryPoint] = []
        for group in group_names:
            entry_points.extend(importlib_metadata.entry_points(group=group))

        count = 0
        for ep in entry_points:
            try:
                plugin = ep.load()
            except (ModuleNotFoundError, ImportError) as exc:
                logger.warning(f"Module {ep.module} could not be loaded: {exc}")
                continue
            if self.register(plugin):
                logger.info(f"Plugin {ep.name}-{ep.group} has been loaded.")
                count += 1
        return count

    def load_from_source_file(self, source_file: str, module_name: Optional[str] = None) -> None:
        """Import Python source file directly.

        :param source_file: Path to python source file: absolute or relative to cwd
        :param module_name: Name for the new module, default is basename of the source file
        :raises KeyCoreError: If importing of source file failed
        """
        name = module_name or os.path.splitext(os.path.basename(source_file))[0]
        if name in self.plugins:
            # executing the module again would define its algorithms twice
            logger.debug(f"Plugin {name} has been already loaded.")
            return
        spec = spec_from_file_location(name=name, location=source_file)
        if not spec or not spec.loader:
            raise KeyCoreError(
                f"Source '{source_file}' does not exist. Check if it is valid file path name"
            )
        module = module_from_spec(spec)
        try:
            sys.modules[spec.name] = module
            spec.loader.exec_module(module)
        except Exception as exc:
            del sys.modules[spec.name]
            raise KeyCoreError(f"Failed to load module spec {spec.name}: {exc}") from exc
        logger.debug(f"A module spec {spec.name} has been loaded.")
        self.register(module)

    def register(self, plugin: ModuleType) -> bool:
        """Register a plugin module.

        :param plugin: Plugin as a module to be registered.
        :return: True if plugin was registered, False if plugin is already registered.
        """
        plugin_name = self.get_plugin_name(plugin)
        if plugin_name in self.plugins:
            logger.debug(f"Plugin {plugin_name} has been already registered.")
            return False
        self.plugins[plugin_name] = plugin
        logger.debug(f"A plugin {plugin_name} has been registered.")
        return True

    @staticmethod
    def get_plugin_name(plugin: ModuleType) -> str:
        """Get canonical name of plugin.

        :param plugin: Plugin as a module
        :raises KeyCoreError: Plugin name could not be determined.
        :return: String with plugin name
        """
        name = getattr(plugin, "__name__", None)
        if name is None:
            raise KeyCoreError("Plugin name could not be determined.")
        return name
