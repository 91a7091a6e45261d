#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Parser builder — fluent configuration of which line kinds to parse, how
tolerant to be of malformed lines and whether segment names become integer
ids.

Example:
    parser = ParserBuilder.none().segments().links().pedantic_errors().build_gfa1()

Author: GFAWeaver Development Team
License: MIT
"""

from typing import Any, Dict

from ..gfa.errors import ParserTolerance
from .gfa1_parser import GFAParser
from .gfa2_parser import GFA2Parser

GFA1_LINE_TYPES = tuple(GFAParser.line_kinds.values())
GFA2_LINE_TYPES = tuple(GFA2Parser.line_kinds.values())
ALL_LINE_TYPES = tuple(dict.fromkeys(GFA1_LINE_TYPES + GFA2_LINE_TYPES))


class ParserBuilder:
    """Collects parser options; build_gfa1() / build_gfa2() produce parsers."""

    def __init__(self, enabled: bool = True):
        self.line_types: Dict[str, bool] = {kind: enabled for kind in ALL_LINE_TYPES}
        self.tolerance = ParserTolerance.SAFE
        self.use_integer_ids = False

    @classmethod
    def all(cls) -> "ParserBuilder":
        """Parse every line kind."""
        return cls(True)

    @classmethod
    def none(cls) -> "ParserBuilder":
        """Parse no line kind; enable the wanted ones afterwards."""
        return cls(False)

    @classmethod
    def from_config(cls, config: Dict[str, Any], gfa_format: str = "gfa1") -> "ParserBuilder":
        """
        Builder from the `parser` section of a configuration dict.

        Args:
            config: Full configuration (see gfaweaver.config.DEFAULT_CONFIG)
            gfa_format: 'gfa1' or 'gfa2'; selects the line_types block
        """
        section = config.get('parser', {})
        builder = cls.all()
        builder.error_tolerance(ParserTolerance.from_name(section.get('tolerance', 'safe')))
        builder.integer_ids(bool(section.get('integer_ids', False)))
        for kind, enabled in section.get('line_types', {}).get(gfa_format, {}).items():
            builder.line_type(kind, bool(enabled))
        return builder

    # ========================================================================
    # Line kinds
    # ========================================================================

    def line_type(self, kind: str, include: bool = True) -> "ParserBuilder":
        if kind not in self.line_types:
            raise ValueError(f"Unknown line type: {kind!r}")
        self.line_types[kind] = include
        return self

    def headers(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('headers', include)

    def segments(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('segments', include)

    def links(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('links', include)

    def containments(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('containments', include)

    def paths(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('paths', include)

    def fragments(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('fragments', include)

    def edges(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('edges', include)

    def gaps(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('gaps', include)

    def groups_o(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('groups_o', include)

    def groups_u(self, include: bool = True) -> "ParserBuilder":
        return self.line_type('groups_u', include)

    # ========================================================================
    # Tolerance and ids
    # ========================================================================

    def error_tolerance(self, tolerance: ParserTolerance) -> "ParserBuilder":
        self.tolerance = tolerance
        return self

    def ignore_errors(self) -> "ParserBuilder":
        return self.error_tolerance(ParserTolerance.IGNORE_ALL)

    def ignore_safe_errors(self) -> "ParserBuilder":
        return self.error_tolerance(ParserTolerance.SAFE)

    def pedantic_errors(self) -> "ParserBuilder":
        return self.error_tolerance(ParserTolerance.PEDANTIC)

    def integer_ids(self, enabled: bool = True) -> "ParserBuilder":
        self.use_integer_ids = enabled
        return self

    # ========================================================================
    # Build
    # ========================================================================

    def _subset(self, kinds) -> Dict[str, bool]:
        return {kind: self.line_types[kind] for kind in kinds}

    def build_gfa1(self) -> GFAParser:
        return GFAParser(self._subset(GFA1_LINE_TYPES), self.tolerance, self.use_integer_ids)

    def build_gfa2(self) -> GFA2Parser:
        return GFA2Parser(self._subset(GFA2_LINE_TYPES), self.tolerance, self.use_integer_ids)

    def build(self, gfa_format: str = "gfa1") -> GFAParser:
        """Parser for 'gfa1' or 'gfa2'."""
        if gfa_format == "gfa1":
            return self.build_gfa1()
        if gfa_format == "gfa2":
            return self.build_gfa2()
        raise ValueError(f"Unknown GFA format: {gfa_format!r}")
