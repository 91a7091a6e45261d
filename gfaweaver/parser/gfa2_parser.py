#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA2 line parser — H/S/F/E/G/O/U lines. Line dispatch, tolerance handling
and file reading are shared with the GFA1 parser.

Author: GFAWeaver Development Team
License: MIT
"""

from typing import Dict, Iterator

from ..gfa import lexers
from ..gfa.records import (
    GFA2,
    Fragment,
    Gap,
    GFA2Edge,
    GFA2Header,
    GFA2Segment,
    GroupO,
    GroupU,
)
from .gfa1_parser import GFAParser


class GFA2Parser(GFAParser):
    """Parser for GFA2 text; see GFAParser for the arguments."""

    format_name = "GFA2"
    line_kinds: Dict[str, str] = {
        'H': 'headers',
        'S': 'segments',
        'F': 'fragments',
        'E': 'edges',
        'G': 'gaps',
        'O': 'groups_o',
        'U': 'groups_u',
    }
    document_type = GFA2

    def _build_record_parsers(self):
        return {
            'headers': self._parse_header,
            'segments': self._parse_segment,
            'fragments': self._parse_fragment,
            'edges': self._parse_edge,
            'gaps': self._parse_gap,
            'groups_o': self._parse_group_o,
            'groups_u': self._parse_group_u,
        }

    def _parse_header(self, fields: Iterator[str]) -> GFA2Header:
        version, tag = lexers.parse_header(fields)
        return GFA2Header(version, tag)

    def _parse_segment(self, fields: Iterator[str]) -> GFA2Segment:
        segment_id = self._segment_name(fields)
        length = lexers.parse_length(fields)
        sequence = lexers.parse_sequence(fields, gfa2=True)
        return GFA2Segment(segment_id, length, sequence, lexers.parse_tags(fields))

    def _parse_fragment(self, fields: Iterator[str]) -> Fragment:
        segment_id = self._segment_name(fields)
        ext_ref = lexers.parse_reference_id(fields)
        sbeg = lexers.parse_position(fields)
        send = lexers.parse_position(fields)
        fbeg = lexers.parse_position(fields)
        fend = lexers.parse_position(fields)
        alignment = lexers.parse_alignment(fields)
        return Fragment(
            segment_id, ext_ref, sbeg, send, fbeg, fend,
            alignment, lexers.parse_tags(fields),
        )

    def _parse_edge(self, fields: Iterator[str]) -> GFA2Edge:
        edge_id = lexers.parse_optional_id(fields)
        sid1 = lexers.parse_reference_id(fields)
        sid2 = lexers.parse_reference_id(fields)
        beg1 = lexers.parse_position(fields)
        end1 = lexers.parse_position(fields)
        beg2 = lexers.parse_position(fields)
        end2 = lexers.parse_position(fields)
        alignment = lexers.parse_alignment(fields)
        return GFA2Edge(
            edge_id, sid1, sid2, beg1, end1, beg2, end2,
            alignment, lexers.parse_tags(fields),
        )

    def _parse_gap(self, fields: Iterator[str]) -> Gap:
        gap_id = lexers.parse_optional_id(fields)
        sid1 = lexers.parse_reference_id(fields)
        sid2 = lexers.parse_reference_id(fields)
        dist = lexers.parse_distance(fields)
        var = lexers.parse_variance(fields)
        return Gap(gap_id, sid1, sid2, dist, var, lexers.parse_tags(fields))

    def _parse_group_o(self, fields: Iterator[str]) -> GroupO:
        group_id = lexers.parse_optional_id(fields)
        refs = lexers.parse_group_o_refs(fields)
        return GroupO(group_id, refs, lexers.parse_tags(fields))

    def _parse_group_u(self, fields: Iterator[str]) -> GroupU:
        group_id = lexers.parse_optional_id(fields)
        ids = lexers.parse_group_u_ids(fields)
        return GroupU(group_id, ids, lexers.parse_tags(fields))
