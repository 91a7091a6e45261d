"""
GFAWeaver I/O utilities.

Folding parsed records into a graph, and writing graphs back out as GFA1,
GFA2 or FASTA.
"""

from .gfa_export import (
    export_graph_to_gfa,
    export_graph_to_gfa2,
    export_paths_fasta,
    export_segments_fasta,
    graph_to_gfa1,
    graph_to_gfa2,
)
from .graph_builder import GraphBuilder

__all__ = [
    'GraphBuilder',
    'graph_to_gfa1',
    'graph_to_gfa2',
    'export_graph_to_gfa',
    'export_graph_to_gfa2',
    'export_segments_fasta',
    'export_paths_fasta',
]
