#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""KeyCore enumeration with tag/label lookup.

Members are (tag, label, description) triples, so the same member can be found
by its numeric tag (persisted identifiers) or by its label (names given by the
user on the command line or stored in envelopes).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from typing_extensions import Self

from keycore.exceptions import KeyCoreInvalidArgument, KeyCoreTypeError


@dataclass(frozen=True)
class KeyCoreEnumMember:
    """KeyCore Enum member representation."""

    tag: int
    label: str
    description: Optional[str] = None


class KeyCoreEnum(KeyCoreEnumMember, Enum):
    """KeyCore enumeration comparable by tag or label."""

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        """Calculate hash value for the enum instance.

        :return: Hash value as integer.
        """
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check if given member with given tag/label exists in enum.

        :param obj: Label or tag of enum member to check for existence.
        :raises KeyCoreTypeError: Object must be either string or integer.
        :return: True if member exists, False otherwise.
        """
        if not isinstance(obj, (int, str)):
            raise KeyCoreTypeError("Object must be either string or integer")
        try:
            if isinstance(obj, int):
                cls.from_tag(obj)
            else:
                cls.from_label(obj)
            return True
        except KeyCoreInvalidArgument:
            return False

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching.
        :raises KeyCoreInvalidArgument: If enum with given tag is not found.
        :return: Found enum member.
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise KeyCoreInvalidArgument(f"There is no {cls.__name__} item with tag {tag} defined")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label.

        The search is case-insensitive.

        :param label: Label to be used for searching.
        :raises KeyCoreInvalidArgument: If enum with given label is not found.
        :return: Found enum member.
        """
        if not isinstance(label, str):
            raise KeyCoreInvalidArgument("Label must be string")
        for item in cls.__members__.values():
            if item.label.upper() == label.upper():
                return item
        raise KeyCoreInvalidArgument(f"There is no {cls.__name__} item with label {label} defined")
