#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

GFA1 line parser — turns H/S/L/C/P lines into records and applies the
error-tolerance policy.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
from pathlib import Path as FilePath
from typing import Dict, Iterable, Iterator, Optional, Union

from ..gfa import lexers
from ..gfa.errors import (
    GFAIOError,
    GFAParseError,
    EmptyLineError,
    InvalidFieldError,
    InvalidLineError,
    InvalidNamedFieldError,
    ParseFieldError,
    ParserTolerance,
    UnknownLineTypeError,
)
from ..gfa.records import GFA, Containment, Header, Link, Path, Segment
from ..gfa.segment_id import SegmentIdConverter, SegmentName

logger = logging.getLogger(__name__)


class GFAParser:
    """
    Parser for GFA1 text.

    Args:
        line_types: kind -> enabled; kinds missing from the mapping are parsed
        tolerance: Which line errors are skipped instead of raised
        integer_ids: Convert segment names to integer node ids while lexing
    """

    format_name = "GFA1"
    line_kinds: Dict[str, str] = {
        'H': 'headers',
        'S': 'segments',
        'L': 'links',
        'C': 'containments',
        'P': 'paths',
    }
    document_type = GFA

    def __init__(
        self,
        line_types: Optional[Dict[str, bool]] = None,
        tolerance: ParserTolerance = ParserTolerance.SAFE,
        integer_ids: bool = False,
    ):
        self.line_types = {kind: True for kind in self.line_kinds.values()}
        if line_types:
            for kind, enabled in line_types.items():
                if kind in self.line_types:
                    self.line_types[kind] = bool(enabled)
        self.tolerance = tolerance
        self.integer_ids = integer_ids
        self.ids = SegmentIdConverter()
        self._record_parsers = self._build_record_parsers()

    def _build_record_parsers(self):
        return {
            'headers': self._parse_header,
            'segments': self._parse_segment,
            'links': self._parse_link,
            'containments': self._parse_containment,
            'paths': self._parse_path,
        }

    # ========================================================================
    # Line dispatch
    # ========================================================================

    def parse_line(self, line: Union[str, bytes]):
        """
        Parse one line.

        Returns:
            The record, or None when the line's kind is disabled

        Raises:
            EmptyLineError: Blank line
            UnknownLineTypeError: Line tag is not a known record kind
            InvalidFieldError: A trailing field is not a tag
            InvalidLineError: A field failed to lex
        """
        try:
            text = lexers.decode_line(line)
        except ParseFieldError as err:
            raise InvalidLineError(err, repr(line)) from err

        text = text.rstrip()
        if not text:
            raise EmptyLineError()

        fields = iter(text.split("\t"))
        line_type = next(fields)
        kind = self.line_kinds.get(line_type)
        if kind is None:
            raise UnknownLineTypeError(line_type)
        if not self.line_types[kind]:
            return None

        try:
            return self._record_parsers[kind](fields)
        except ParseFieldError as err:
            if isinstance(err, InvalidNamedFieldError) and err.name == "Tag":
                raise InvalidFieldError(err) from err
            raise InvalidLineError(err, text) from err

    def parse_lines(self, lines: Iterable[Union[str, bytes]]) -> Iterator:
        """
        Yield a record for every parsable line.

        Errors the tolerance policy accepts are logged and skipped; any other
        error is raised and ends the stream.
        """
        for number, line in enumerate(lines, 1):
            try:
                record = self.parse_line(line)
            except GFAParseError as err:
                if self.tolerance.can_safely_continue(err):
                    logger.debug(f"Skipping {self.format_name} line {number}: {err}")
                    continue
                raise
            if record is not None:
                yield record

    def parse_document(self, lines: Iterable[Union[str, bytes]]):
        """Collect every parsed record of lines into a document."""
        document = self.document_type()
        for record in self.parse_lines(lines):
            document.insert_line(record)
        return document

    def parse_file(self, path: Union[str, FilePath]):
        """
        Parse a whole file into a document.

        Raises:
            GFAIOError: If the file cannot be read
        """
        try:
            with open(path, 'rb') as handle:
                return self.parse_document(handle)
        except OSError as err:
            raise GFAIOError(err) from err

    def parse_file_to_graph(self, path: Union[str, FilePath]):
        """Parse a file and fold it into a new HashGraph."""
        from ..io_utils.graph_builder import GraphBuilder

        document = self.parse_file(path)
        builder = GraphBuilder(tolerance=self.tolerance, converter=self.ids)
        return builder.build_from_document(document)

    # ========================================================================
    # Record parsers
    # ========================================================================

    def _segment_name(self, fields: Iterator[str]) -> SegmentName:
        name = lexers.parse_id(fields)
        return self.ids.to_id(name) if self.integer_ids else name

    def _parse_header(self, fields: Iterator[str]) -> Header:
        version, tag = lexers.parse_header(fields)
        return Header(version, tag)

    def _parse_segment(self, fields: Iterator[str]) -> Segment:
        name = self._segment_name(fields)
        sequence = lexers.parse_sequence(fields)
        return Segment(name, sequence, lexers.parse_tags(fields))

    def _parse_link(self, fields: Iterator[str]) -> Link:
        from_segment = self._segment_name(fields)
        from_orient = lexers.parse_orientation(fields)
        to_segment = self._segment_name(fields)
        to_orient = lexers.parse_orientation(fields)
        overlap = lexers.parse_overlap(fields)
        return Link(
            from_segment, from_orient, to_segment, to_orient,
            overlap, lexers.parse_tags(fields),
        )

    def _parse_containment(self, fields: Iterator[str]) -> Containment:
        container = self._segment_name(fields)
        container_orient = lexers.parse_orientation(fields)
        contained = self._segment_name(fields)
        contained_orient = lexers.parse_orientation(fields)
        pos = lexers.parse_position(fields)
        overlap = lexers.parse_overlap(fields)
        return Containment(
            container, container_orient, contained, contained_orient,
            pos, overlap, lexers.parse_tags(fields),
        )

    def _parse_path(self, fields: Iterator[str]) -> Path:
        path_name = lexers.parse_id(fields)
        segment_names = lexers.parse_segment_names(fields)
        overlaps = lexers.parse_path_overlaps(fields)
        return Path(path_name, segment_names, overlaps, lexers.parse_tags(fields))
