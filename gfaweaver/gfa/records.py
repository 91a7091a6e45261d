#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA record model — one dataclass per line kind plus the GFA / GFA2
documents that collect them.

Numeric fields stay strings exactly as lexed; the trailing optional tags of
every line are kept tab-joined in `tag`. Segment names are str, or int when
the parser converts identifiers to integers.

Author: GFAWeaver Development Team
License: MIT
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, Union

from ..handle_graph.errors import OrientationNotPresentError
from ..handle_graph.handle import Orientation

SegmentName = Union[str, int]

# Optional tag marking a P line or O group as a circular path
CIRCULAR_TAG = "ci:i:1"


def _has_circular_tag(tag: str) -> bool:
    return CIRCULAR_TAG in tag.split("\t")


def _split_oriented(token: str) -> Tuple[str, Orientation]:
    if len(token) < 2 or token[-1] not in "+-":
        raise OrientationNotPresentError(token)
    return token[:-1], Orientation.from_char(token[-1])


# ============================================================================
# GFA1 records
# ============================================================================

@dataclass
class Header:
    """H line. version is '' when the line carries no version tag."""
    version: str = ""
    tag: str = ""

    kind = "H"


@dataclass
class Segment:
    name: SegmentName
    sequence: str
    tag: str = ""

    kind = "S"


@dataclass
class Link:
    from_segment: SegmentName
    from_orient: Orientation
    to_segment: SegmentName
    to_orient: Orientation
    overlap: str = "*"
    tag: str = ""

    kind = "L"


@dataclass
class Containment:
    container_name: SegmentName
    container_orient: Orientation
    contained_name: SegmentName
    contained_orient: Orientation
    pos: str
    overlap: str = "*"
    tag: str = ""

    kind = "C"


@dataclass
class Path:
    """
    P line. segment_names keeps the raw comma-separated step list, e.g.
    '11+,12-,13+'; iter() parses it lazily.
    """
    path_name: str
    segment_names: str
    overlaps: str = "*"
    tag: str = ""

    kind = "P"

    def iter(self) -> Iterator[Tuple[str, Orientation]]:
        """
        Yield (segment name, orientation) for every step.

        Raises:
            OrientationNotPresentError: If a step lacks its '+' / '-'
        """
        for token in self.segment_names.split(","):
            yield _split_oriented(token)

    def is_circular(self) -> bool:
        return _has_circular_tag(self.tag)


# ============================================================================
# GFA2 records
# ============================================================================

@dataclass
class GFA2Header:
    version: str = ""
    tag: str = ""

    kind = "H"


@dataclass
class GFA2Segment:
    """S line. len is kept as lexed; the sequence length is authoritative."""
    id: SegmentName
    len: str
    sequence: str
    tag: str = ""

    kind = "S"


@dataclass
class Fragment:
    id: SegmentName
    ext_ref: str
    sbeg: str
    send: str
    fbeg: str
    fend: str
    alignment: str = "*"
    tag: str = ""

    kind = "F"


@dataclass
class GFA2Edge:
    """E line. sid1 / sid2 keep their trailing orientation, e.g. '45+'."""
    id: str
    sid1: str
    sid2: str
    beg1: str
    end1: str
    beg2: str
    end2: str
    alignment: str = "*"
    tag: str = ""

    kind = "E"

    def endpoints(self) -> Tuple[Tuple[str, Orientation], Tuple[str, Orientation]]:
        return _split_oriented(self.sid1), _split_oriented(self.sid2)


@dataclass
class Gap:
    id: str
    sid1: str
    sid2: str
    dist: str
    var: str = "*"
    tag: str = ""

    kind = "G"


@dataclass
class GroupO:
    """O line: ordered group of space-separated oriented references."""
    id: str
    var_field: str
    tag: str = ""

    kind = "O"

    def iter(self) -> Iterator[Tuple[str, Orientation]]:
        for token in self.var_field.split(" "):
            yield _split_oriented(token)

    def is_circular(self) -> bool:
        return _has_circular_tag(self.tag)


@dataclass
class GroupU:
    """U line: unordered group of space-separated identifiers."""
    id: str
    var_field: str
    tag: str = ""

    kind = "U"

    def iter(self) -> Iterator[str]:
        yield from self.var_field.split(" ")


# ============================================================================
# Documents
# ============================================================================

@dataclass
class GFA:
    """Parsed GFA1 document, records grouped by kind."""
    headers: List[Header] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    containments: List[Containment] = field(default_factory=list)
    paths: List[Path] = field(default_factory=list)

    _slots = {
        Header: 'headers',
        Segment: 'segments',
        Link: 'links',
        Containment: 'containments',
        Path: 'paths',
    }

    def insert_line(self, record):
        slot = self._slots.get(type(record))
        if slot is None:
            raise TypeError(f"Not a GFA1 record: {type(record).__name__}")
        getattr(self, slot).append(record)

    def lines(self) -> Iterator:
        """Yield every record, headers and segments first."""
        for slot in self._slots.values():
            yield from getattr(self, slot)

    def counts(self) -> Dict[str, int]:
        return {slot: len(getattr(self, slot)) for slot in self._slots.values()}

    def __len__(self) -> int:
        return sum(self.counts().values())


@dataclass
class GFA2:
    """Parsed GFA2 document, records grouped by kind."""
    headers: List[GFA2Header] = field(default_factory=list)
    segments: List[GFA2Segment] = field(default_factory=list)
    fragments: List[Fragment] = field(default_factory=list)
    edges: List[GFA2Edge] = field(default_factory=list)
    gaps: List[Gap] = field(default_factory=list)
    groups_o: List[GroupO] = field(default_factory=list)
    groups_u: List[GroupU] = field(default_factory=list)

    _slots = {
        GFA2Header: 'headers',
        GFA2Segment: 'segments',
        Fragment: 'fragments',
        GFA2Edge: 'edges',
        Gap: 'gaps',
        GroupO: 'groups_o',
        GroupU: 'groups_u',
    }

    def insert_line(self, record):
        slot = self._slots.get(type(record))
        if slot is None:
            raise TypeError(f"Not a GFA2 record: {type(record).__name__}")
        getattr(self, slot).append(record)

    def lines(self) -> Iterator:
        for slot in self._slots.values():
            yield from getattr(self, slot)

    def counts(self) -> Dict[str, int]:
        return {slot: len(getattr(self, slot)) for slot in self._slots.values()}

    def __len__(self) -> int:
        return sum(self.counts().values())
