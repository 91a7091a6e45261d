#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

File driver — picks a parser from the file suffix (or an explicit format
for streams), parses the input and builds the graph.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

from ..gfa.errors import ExtensionError, GFAIOError, ParserTolerance
from ..handle_graph.hash_graph import HashGraph
from ..io_utils.graph_builder import GraphBuilder
from .builder import ParserBuilder

logger = logging.getLogger(__name__)

EXTENSIONS = {
    '.gfa': 'gfa1',
    '.gfa2': 'gfa2',
}


def detect_format(path: Union[str, Path]) -> str:
    """
    GFA version for a file name.

    Raises:
        ExtensionError: If the suffix is neither .gfa nor .gfa2
    """
    gfa_format = EXTENSIONS.get(Path(path).suffix.lower())
    if gfa_format is None:
        raise ExtensionError(str(path))
    return gfa_format


def _builder(config: Optional[Dict[str, Any]], gfa_format: str,
             tolerance: Optional[ParserTolerance]) -> ParserBuilder:
    builder = ParserBuilder.from_config(config, gfa_format) if config else ParserBuilder.all()
    if tolerance is not None:
        builder.error_tolerance(tolerance)
    return builder


def parse_file_to_graph(
    path: Union[str, Path],
    config: Optional[Dict[str, Any]] = None,
    tolerance: Optional[ParserTolerance] = None,
) -> HashGraph:
    """
    Parse a .gfa / .gfa2 file into a HashGraph.

    Args:
        path: Input file; the suffix selects GFA1 or GFA2
        config: Optional configuration dict (parser section is used)
        tolerance: Overrides the configured tolerance

    Raises:
        ExtensionError: Unsupported suffix
        GFAIOError: The file cannot be read
        GFAParseError: A line error the tolerance policy does not accept
        ConversionError: A record could not be added to the graph
    """
    gfa_format = detect_format(path)
    parser = _builder(config, gfa_format, tolerance).build(gfa_format)

    logger.info(f"Parsing {gfa_format.upper()} file: {path}")
    document = parser.parse_file(path)
    logger.info(f"Parsed {len(document)} records")

    builder = GraphBuilder(tolerance=parser.tolerance, converter=parser.ids)
    graph = builder.build_from_document(document)
    logger.info(
        f"Built graph: {graph.node_count()} nodes, {graph.edge_count()} edges, "
        f"{graph.path_count()} paths"
    )
    return graph


def parse_stream_to_graph(
    stream: Iterable[Union[str, bytes]],
    gfa_format: str = "gfa1",
    config: Optional[Dict[str, Any]] = None,
    tolerance: Optional[ParserTolerance] = None,
) -> HashGraph:
    """Parse lines from an open stream (text or binary) of the given format."""
    parser = _builder(config, gfa_format, tolerance).build(gfa_format)
    try:
        document = parser.parse_document(stream)
    except OSError as err:
        raise GFAIOError(err) from err
    builder = GraphBuilder(tolerance=parser.tolerance, converter=parser.ids)
    return builder.build_from_document(document)


def parse_file(
    path: Union[str, Path],
    config: Optional[Dict[str, Any]] = None,
    tolerance: Optional[ParserTolerance] = None,
):
    """Parse a .gfa / .gfa2 file into a GFA / GFA2 document without building a graph."""
    gfa_format = detect_format(path)
    return _builder(config, gfa_format, tolerance).build(gfa_format).parse_file(path)
