#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Handle algebra — packed (node id, orientation) identifiers, directions and
bidirected edges.

A handle stores a node id and a strand in a single integer: the low bit is
the orientation flag (0 = forward, 1 = reverse) and the remaining bits hold
the node id. Flipping a handle is a pure bit toggle, which every back-edge
rewrite in the mutation kernel relies on.

Author: GFAWeaver Development Team
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

# Largest representable node id; also the "unset minimum" sentinel.
MAX_NODE_ID = 2 ** 64 - 1


class Orientation(Enum):
    """Strand of a segment reference."""
    FORWARD = "+"
    BACKWARD = "-"

    @classmethod
    def from_char(cls, char: str) -> "Orientation":
        """
        Parse a '+' / '-' orientation character.

        Raises:
            ValueError: If char is neither '+' nor '-'
        """
        if char == "+":
            return cls.FORWARD
        if char == "-":
            return cls.BACKWARD
        raise ValueError(f"Unrecognized orientation character: {char!r}")

    @classmethod
    def from_reverse(cls, is_reverse: bool) -> "Orientation":
        return cls.BACKWARD if is_reverse else cls.FORWARD

    @property
    def is_reverse(self) -> bool:
        return self is Orientation.BACKWARD

    def flip(self) -> "Orientation":
        return Orientation.FORWARD if self.is_reverse else Orientation.BACKWARD

    def __str__(self) -> str:
        return self.value


class Direction(Enum):
    """Side of a handle to look at when enumerating neighbours."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, order=True)
class Handle:
    """
    Oriented view of a node, packed into one integer.

    Attributes:
        value: (node_id << 1) | is_reverse
    """
    value: int

    @classmethod
    def pack(cls, node_id: int, is_reverse: bool) -> "Handle":
        """
        Build a handle from a node id and a reverse flag.

        Raises:
            ValueError: If node_id is negative or exceeds MAX_NODE_ID
        """
        if node_id < 0 or node_id > MAX_NODE_ID:
            raise ValueError(f"Node id out of range: {node_id}")
        return cls((node_id << 1) | int(bool(is_reverse)))

    @classmethod
    def new(cls, node_id: int, orientation: Orientation) -> "Handle":
        return cls.pack(node_id, orientation.is_reverse)

    @classmethod
    def forward_of(cls, node_id: int) -> "Handle":
        return cls.pack(node_id, False)

    @property
    def id(self) -> int:
        return self.value >> 1

    @property
    def is_reverse(self) -> bool:
        return bool(self.value & 1)

    @property
    def orientation(self) -> Orientation:
        return Orientation.from_reverse(self.is_reverse)

    def flip(self) -> "Handle":
        """Toggle the orientation bit."""
        return Handle(self.value ^ 1)

    def forward(self) -> "Handle":
        """Clear the orientation bit."""
        return Handle(self.value & ~1)

    def __str__(self) -> str:
        return f"{self.id}{self.orientation}"

    def __repr__(self) -> str:
        return f"Handle({self.id}{self.orientation})"


class Edge(NamedTuple):
    """
    Bidirected edge between two oriented nodes.

    Edge(l, r) and Edge(r.flip(), l.flip()) denote the same edge; use
    normalized() or same_as() to compare edges independently of the
    representation that produced them.
    """
    left: Handle
    right: Handle

    def reverse(self) -> "Edge":
        return Edge(self.right.flip(), self.left.flip())

    def normalized(self) -> "Edge":
        """Return the canonical (smallest) of the two equivalent forms."""
        return min(self, self.reverse())

    def same_as(self, other: "Edge") -> bool:
        return self.normalized() == Edge(*other).normalized()

    def __str__(self) -> str:
        return f"{self.left} -> {self.right}"
