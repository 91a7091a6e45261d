#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Segment identifier conversion — maps GFA segment names onto integer node
ids.

All-digit names are used as-is ('11' -> 11). Any other name is encoded by
concatenating the decimal ASCII code of each character ('A1' -> 6549). The
encoding is not injective (e.g. 'A' and '65'), so SegmentIdConverter keeps
every name it has seen and rejects a second name landing on a taken id.

Author: GFAWeaver Development Team
License: MIT
"""

import re
from typing import Dict, Optional, Union

from ..handle_graph.handle import MAX_NODE_ID
from .errors import UintIdError

MAX_ID_DIGITS = 20

_DIGITS = re.compile(r"[0-9]+")
_PRINTABLE = re.compile(r"[!-~]+")

SegmentName = Union[str, int]


def segment_name_to_int(name: str) -> int:
    """
    Convert one segment name to an integer node id.

    Raises:
        UintIdError: If the name is not printable ASCII, its decimal
            expansion is longer than 20 digits, or the value is 0 or does
            not fit in 64 bits
    """
    if _PRINTABLE.fullmatch(name) is None:
        raise UintIdError(f"{name!r} is not a printable identifier")

    if _DIGITS.fullmatch(name):
        digits = name
    else:
        digits = "".join(str(ord(char)) for char in name)

    if len(digits) > MAX_ID_DIGITS:
        raise UintIdError(
            f"conversion of {name!r} into {digits} exceeds the maximum "
            f"length ({MAX_ID_DIGITS} digits)"
        )

    value = int(digits)
    if value == 0 or value > MAX_NODE_ID:
        raise UintIdError(f"{name!r} maps to {value}, outside 1..{MAX_NODE_ID}")
    return value


class SegmentIdConverter:
    """
    Name -> node id mapping with collision detection.

    Integers pass through unchanged: they were already converted and
    recorded by a parser running with integer ids, which hands its
    converter to the graph builder so later string references are checked
    against the same names.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._names: Dict[int, str] = {}

    def to_id(self, name: SegmentName) -> int:
        """
        Node id for name.

        Raises:
            UintIdError: If the name cannot be converted or collides with a
                different name already converted to the same id
        """
        if isinstance(name, int):
            return name

        cached = self._ids.get(name)
        if cached is not None:
            return cached

        value = segment_name_to_int(name)
        other = self._names.get(value)
        if other is not None and other != name:
            raise UintIdError(
                f"segment names {other!r} and {name!r} both map to id {value}"
            )

        self._ids[name] = value
        self._names[value] = name
        return value

    def name_of(self, node_id: int) -> Optional[str]:
        return self._names.get(node_id)

    def clear(self):
        self._ids.clear()
        self._names.clear()

    def __len__(self) -> int:
        return len(self._names)
