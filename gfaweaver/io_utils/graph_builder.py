#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Graph Builder — folds parsed GFA1 / GFA2 records into a HashGraph.

Projection rules:
    - H lines carry no graph content.
    - S lines become nodes; L lines and GFA2 E lines become edges.
    - P lines and GFA2 O groups become paths, circular when tagged ci:i:1.
    - C, F, G and U lines are accepted but not projected.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..gfa import records
from ..gfa.errors import ConversionError, ParseFieldError, ParserTolerance
from ..gfa.segment_id import SegmentIdConverter, SegmentName
from ..handle_graph.errors import GraphError
from ..handle_graph.handle import Edge, Handle, Orientation
from ..handle_graph.hash_graph import HashGraph

logger = logging.getLogger(__name__)

GFA1_RECORDS = (
    records.Header, records.Segment, records.Link, records.Containment, records.Path,
)
GFA2_RECORDS = (
    records.GFA2Header, records.GFA2Segment, records.Fragment, records.GFA2Edge,
    records.Gap, records.GroupO, records.GroupU,
)


class GraphBuilder:
    """
    Inserts records into a graph, one at a time or a whole document.

    Args:
        graph: Graph to populate (a new HashGraph by default)
        tolerance: Under IGNORE_ALL, records that cannot be inserted are
            logged and skipped; otherwise ConversionError is raised
        converter: Segment name -> node id mapping shared across documents
    """

    def __init__(
        self,
        graph: Optional[HashGraph] = None,
        tolerance: ParserTolerance = ParserTolerance.SAFE,
        converter: Optional[SegmentIdConverter] = None,
    ):
        self.graph = graph if graph is not None else HashGraph()
        self.tolerance = tolerance
        self.ids = converter if converter is not None else SegmentIdConverter()
        self.inserted = 0
        self.skipped = 0

    # ========================================================================
    # Entry points
    # ========================================================================

    def build_from_document(self, document: Union[records.GFA, records.GFA2]) -> HashGraph:
        """Insert every record of a parsed document (segments first)."""
        return self.build_from_records(document.lines())

    def build_from_records(self, lines: Iterable) -> HashGraph:
        for record in lines:
            self.insert_record(record)
        if self.skipped:
            logger.info(f"Skipped {self.skipped} record(s) that could not be added to the graph")
        return self.graph

    def insert_record(self, record) -> bool:
        """
        Insert one record.

        Returns:
            True if the record was inserted (or needs no projection), False
            if it was skipped under the ignore-all policy

        Raises:
            ConversionError: If the record cannot be inserted and the
                policy is not ignore-all
        """
        try:
            if isinstance(record, GFA1_RECORDS):
                self.insert_gfa1_line(record)
            elif isinstance(record, GFA2_RECORDS):
                self.insert_gfa2_line(record)
            else:
                raise TypeError(f"Not a GFA record: {type(record).__name__}")
        except (GraphError, ParseFieldError) as err:
            if self.tolerance is ParserTolerance.IGNORE_ALL:
                logger.warning(f"Ignoring {record.kind} record: {err}")
                self.skipped += 1
                return False
            raise ConversionError(str(err)) from err
        self.inserted += 1
        return True

    # ========================================================================
    # GFA1
    # ========================================================================

    def insert_gfa1_line(self, record):
        if isinstance(record, records.Segment):
            self.graph.create_handle(self.ids.to_id(record.name), record.sequence)
        elif isinstance(record, records.Link):
            left = self._handle(record.from_segment, record.from_orient)
            right = self._handle(record.to_segment, record.to_orient)
            self.graph.create_edge(Edge(left, right))
        elif isinstance(record, records.Path):
            self._insert_path(record.path_name, record.iter(), record.is_circular())
        # Header and Containment carry nothing for the graph

    # ========================================================================
    # GFA2
    # ========================================================================

    def insert_gfa2_line(self, record):
        if isinstance(record, records.GFA2Segment):
            self.graph.create_handle(self.ids.to_id(record.id), record.sequence)
        elif isinstance(record, records.GFA2Edge):
            (sid1, orient1), (sid2, orient2) = record.endpoints()
            self.graph.create_edge(Edge(
                self._handle(sid1, orient1),
                self._handle(sid2, orient2),
            ))
        elif isinstance(record, records.GroupO):
            if record.id == "*":
                logger.warning(f"Skipping anonymous O-group: {record.var_field}")
                return
            self._insert_path(record.id, record.iter(), record.is_circular())
        # Header, Fragment, Gap and GroupU carry nothing for the graph

    # ========================================================================
    # Helpers
    # ========================================================================

    def _handle(self, name: SegmentName, orientation: Orientation) -> Handle:
        return Handle.new(self.ids.to_id(name), orientation)

    def _insert_path(self, name: str, steps: Iterable[Tuple[str, Orientation]],
                     is_circular: bool = False):
        handles: List[Handle] = [self._handle(seg, orient) for seg, orient in steps]
        for handle in handles:
            self.graph.get_node_unchecked(handle.id)

        path_id = self.graph.create_path_handle(name, is_circular)
        for handle in handles:
            self.graph.append_step(path_id, handle)
