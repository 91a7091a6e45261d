#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Handle-graph data structures — nodes with bidirected adjacency, embedded
paths and step handles.

Author: GFAWeaver Development Team
License: MIT
"""

from bisect import insort
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple

from .handle import Handle

PathId = int


class PathStep(NamedTuple):
    """A single position (path id, step index) within an embedded path."""
    path_id: PathId
    index: int


@dataclass
class Node:
    """
    Node of the hash graph.

    Attributes:
        sequence: Forward-strand bases
        left_edges: Neighbours reached when leaving the node on its left side
        right_edges: Neighbours reached when leaving the node on its right side
        occurrences: path id -> sorted step indices where this node is visited
    """
    sequence: str
    left_edges: List[Handle] = field(default_factory=list)
    right_edges: List[Handle] = field(default_factory=list)
    occurrences: Dict[PathId, List[int]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.sequence)

    def add_occurrence(self, path_id: PathId, index: int):
        indices = self.occurrences.setdefault(path_id, [])
        if index not in indices:
            insort(indices, index)

    def drop_occurrences(self, path_id: PathId, from_index: int = 0):
        """Forget every occurrence on path_id at or after from_index."""
        indices = self.occurrences.get(path_id)
        if indices is None:
            return
        kept = [i for i in indices if i < from_index]
        if kept:
            self.occurrences[path_id] = kept
        else:
            del self.occurrences[path_id]


@dataclass
class Path:
    """
    Named walk through the graph.

    Attributes:
        name: Path name (unique within a graph)
        path_id: Identifier assigned by the graph
        is_circular: Whether the last step connects back to the first
        nodes: Ordered oriented node references
    """
    name: str
    path_id: PathId
    is_circular: bool = False
    nodes: List[Handle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def lookup_step_handle(self, step: PathStep):
        if 0 <= step.index < len(self.nodes):
            return self.nodes[step.index]
        return None

    def bases_len(self, graph: Dict[int, Node]) -> int:
        return sum(len(graph[h.id].sequence) for h in self.nodes)

    def position_of_step(self, graph: Dict[int, Node], step: PathStep):
        """Base offset of the start of a step, or None if out of range."""
        if not 0 <= step.index < len(self.nodes):
            return None
        return sum(len(graph[h.id].sequence) for h in self.nodes[:step.index])

    def step_at_position(self, graph: Dict[int, Node], pos: int):
        """
        Step covering base offset pos, or None if pos lies past the end.
        """
        if pos < 0:
            return None
        offset = 0
        for index, handle in enumerate(self.nodes):
            offset += len(graph[handle.id].sequence)
            if pos < offset:
                return PathStep(self.path_id, index)
        return None
