"""
GFAWeaver handle graph.

Packed handles, bidirected edges and the hash-map backed graph store with
embedded paths.
"""

from .data_structures import Node, Path, PathId, PathStep
from .errors import (
    EdgeAlreadyExistsError,
    EdgeNotExistsError,
    EmptySequenceError,
    GraphError,
    IdAlreadyExistsError,
    NodeNotExistsError,
    OrientationNotPresentError,
    PathNotExistsError,
    PositionNotFoundError,
    UnknownGraphError,
)
from .handle import MAX_NODE_ID, Direction, Edge, Handle, Orientation
from .hash_graph import HashGraph

__all__ = [
    'Direction',
    'Edge',
    'Handle',
    'HashGraph',
    'MAX_NODE_ID',
    'Node',
    'Orientation',
    'Path',
    'PathId',
    'PathStep',
    # Errors
    'EdgeAlreadyExistsError',
    'EdgeNotExistsError',
    'EmptySequenceError',
    'GraphError',
    'IdAlreadyExistsError',
    'NodeNotExistsError',
    'OrientationNotPresentError',
    'PathNotExistsError',
    'PositionNotFoundError',
    'UnknownGraphError',
]
