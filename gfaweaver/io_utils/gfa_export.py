#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Graph Export — GFA1 / GFA2 text and FASTA output of a HashGraph.

Node ids are written as segment names, so a graph exported here and parsed
back keeps its ids, edges and path steps.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
from pathlib import Path
from typing import List, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..gfa.records import CIRCULAR_TAG
from ..handle_graph.handle import Edge, Handle
from ..handle_graph.hash_graph import HashGraph

logger = logging.getLogger(__name__)

DEFAULT_OVERLAP = "0M"


# ============================================================================
#                       LINE FORMATTING
# ============================================================================

def _sorted_edges(graph: HashGraph) -> List[Edge]:
    return sorted(graph.edges(), key=lambda e: (e.left.value, e.right.value))


def _gfa2_reference(handle: Handle) -> str:
    return f"{handle.id}{handle.orientation}"


def _path_tags(graph: HashGraph, path_id: int) -> str:
    return f"\t{CIRCULAR_TAG}" if graph.is_circular(path_id) else ""


def _blunt_positions(graph: HashGraph, edge: Edge):
    """
    beg1/end1/beg2/end2 of a zero-length GFA2 overlap between two segments.

    The junction sits at the end of sid1 when it is read forward and at its
    start when reverse; the opposite holds for sid2.
    """
    left, right = edge
    len1 = graph.node_len(left)
    len2 = graph.node_len(right)
    pos1 = "0" if left.is_reverse else f"{len1}$"
    pos2 = f"{len2}$" if right.is_reverse else "0"
    return pos1, pos1, pos2, pos2


def graph_to_gfa1(graph: HashGraph, overlap: str = DEFAULT_OVERLAP) -> List[str]:
    """
    GFA1 lines (without newlines) describing the graph.

    Segments are written in ascending id order, links in a stable order and
    paths in creation order. Circular paths carry the ci:i:1 tag. Paths
    without steps cannot be expressed in GFA1 and are left out.
    """
    lines = ["H\tVN:Z:1.0"]

    for node_id in sorted(graph.graph):
        lines.append(f"S\t{node_id}\t{graph.graph[node_id].sequence}")

    for left, right in _sorted_edges(graph):
        lines.append(
            f"L\t{left.id}\t{left.orientation}\t{right.id}\t{right.orientation}\t{overlap}"
        )

    for path_id in sorted(graph.paths):
        path = graph.paths[path_id]
        if not path.nodes:
            logger.debug(f"Path {path.name!r} has no steps; not written")
            continue
        steps = ",".join(_gfa2_reference(h) for h in path.nodes)
        lines.append(f"P\t{path.name}\t{steps}\t*{_path_tags(graph, path_id)}")

    return lines


def graph_to_gfa2(graph: HashGraph, alignment: str = DEFAULT_OVERLAP) -> List[str]:
    """
    GFA2 lines: S with lengths, E with blunt positions, O groups for paths.

    O groups have no circular form, so circular paths carry the ci:i:1 tag
    that the graph builder reads back.
    """
    lines = ["H\tVN:Z:2.0"]

    for node_id in sorted(graph.graph):
        sequence = graph.graph[node_id].sequence
        lines.append(f"S\t{node_id}\t{len(sequence)}\t{sequence}")

    for edge in _sorted_edges(graph):
        beg1, end1, beg2, end2 = _blunt_positions(graph, edge)
        lines.append(
            f"E\t*\t{_gfa2_reference(edge.left)}\t{_gfa2_reference(edge.right)}"
            f"\t{beg1}\t{end1}\t{beg2}\t{end2}\t{alignment}"
        )

    for path_id in sorted(graph.paths):
        path = graph.paths[path_id]
        if not path.nodes:
            logger.debug(f"Path {path.name!r} has no steps; not written")
            continue
        refs = " ".join(_gfa2_reference(h) for h in path.nodes)
        lines.append(f"O\t{path.name}\t{refs}{_path_tags(graph, path_id)}")

    return lines


# ============================================================================
#                       FILE EXPORT
# ============================================================================

def _write_lines(lines: List[str], output_path: Path):
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        for line in lines:
            f.write(line + "\n")


def export_graph_to_gfa(
    graph: HashGraph,
    output_path: Union[str, Path],
    overlap: str = DEFAULT_OVERLAP,
) -> int:
    """
    Write the graph as GFA1.

    Returns:
        Number of lines written
    """
    output_path = Path(output_path)
    logger.info(f"Exporting graph to GFA1: {output_path}")
    lines = graph_to_gfa1(graph, overlap)
    _write_lines(lines, output_path)
    logger.info(f"GFA export complete: {len(lines)} lines")
    return len(lines)


def export_graph_to_gfa2(
    graph: HashGraph,
    output_path: Union[str, Path],
    alignment: str = DEFAULT_OVERLAP,
) -> int:
    """Write the graph as GFA2; returns the number of lines written."""
    output_path = Path(output_path)
    logger.info(f"Exporting graph to GFA2: {output_path}")
    lines = graph_to_gfa2(graph, alignment)
    _write_lines(lines, output_path)
    logger.info(f"GFA2 export complete: {len(lines)} lines")
    return len(lines)


def export_segments_fasta(graph: HashGraph, output_path: Union[str, Path]) -> int:
    """
    Write every node sequence (forward strand, ascending id) as FASTA.

    Returns:
        Number of records written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    records = (
        SeqRecord(Seq(graph.graph[node_id].sequence), id=str(node_id), description="")
        for node_id in sorted(graph.graph)
    )
    with open(output_path, 'w') as handle:
        count = SeqIO.write(records, handle, "fasta")

    logger.info(f"Exported {count} segments to {output_path}")
    return count


def export_paths_fasta(graph: HashGraph, output_path: Union[str, Path]) -> int:
    """Write the spelled sequence of every path as FASTA, keyed by path name."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    records = (
        SeqRecord(
            Seq(graph.path_sequence(path_id)),
            id=graph.paths[path_id].name,
            description="",
        )
        for path_id in sorted(graph.paths)
    )
    with open(output_path, 'w') as handle:
        count = SeqIO.write(records, handle, "fasta")

    logger.info(f"Exported {count} paths to {output_path}")
    return count
