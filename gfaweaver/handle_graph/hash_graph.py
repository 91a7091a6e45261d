#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Hash Graph — in-memory bidirected sequence graph with embedded paths.

Every edge is stored twice, once in the adjacency list of each endpoint,
so neighbour queries cost O(degree) and a mutation only touches the two
nodes it concerns. An adjacency entry x stored on the right side of node
n stands for the edge (n+, x); on the left side for the edge (n-, x). The
mirror entry of x therefore lives on node x.id, in its right list when x
is reverse and in its left list otherwise.

Author: GFAWeaver Development Team
License: MIT
"""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from ..utils.parallel import parallel_map
from ..utils.sequence_utils import iter_strand, reverse_complement
from .data_structures import Node, Path, PathId, PathStep
from .errors import (
    EdgeNotExistsError,
    EmptySequenceError,
    IdAlreadyExistsError,
    NodeNotExistsError,
    PathNotExistsError,
)
from .handle import MAX_NODE_ID, Direction, Edge, Handle

logger = logging.getLogger(__name__)


class HashGraph:
    """
    Handle graph backed by hash maps.

    Attributes:
        min_id: Smallest stored node id (MAX_NODE_ID when empty)
        max_id: Largest stored node id (0 when empty)
        graph: node id -> Node
        path_id: path name -> path id
        paths: path id -> Path
    """

    def __init__(self):
        self.min_id: int = MAX_NODE_ID
        self.max_id: int = 0
        self.graph: Dict[int, Node] = {}
        self.path_id: Dict[str, PathId] = {}
        self.paths: Dict[PathId, Path] = {}
        self._next_path_id: PathId = 0

    # ========================================================================
    # Part 1: Lookup helpers
    # ========================================================================

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.graph.get(node_id)

    def get_node_unchecked(self, node_id: int) -> Node:
        """Return the node for node_id or raise NodeNotExistsError."""
        node = self.graph.get(node_id)
        if node is None:
            raise NodeNotExistsError(node_id)
        return node

    def get_path(self, path_id: PathId) -> Optional[Path]:
        return self.paths.get(path_id)

    def get_path_unchecked(self, path_id: PathId) -> Path:
        path = self.paths.get(path_id)
        if path is None:
            raise PathNotExistsError(path_id)
        return path

    def _path_id_by_name(self, name: str) -> PathId:
        if name not in self.path_id:
            raise PathNotExistsError(name)
        return self.path_id[name]

    @staticmethod
    def _out_side(node: Node, handle: Handle) -> List[Handle]:
        """Adjacency list holding the edges that leave handle to the right."""
        return node.left_edges if handle.is_reverse else node.right_edges

    def _mirror_side(self, entry: Handle) -> List[Handle]:
        """Adjacency list on entry's node that holds the mirror of entry."""
        other = self.graph[entry.id]
        return other.right_edges if entry.is_reverse else other.left_edges

    def __contains__(self, node_id: int) -> bool:
        return node_id in self.graph

    def __len__(self) -> int:
        return len(self.graph)

    # ========================================================================
    # Part 2: Immutable queries (handles, edges, neighbours, sequences)
    # ========================================================================

    def min_node_id(self) -> int:
        return self.min_id

    def max_node_id(self) -> int:
        return self.max_id

    def handles(self) -> Iterator[Handle]:
        """Yield the forward handle of every node (unspecified order)."""
        for node_id in self.graph:
            yield Handle.forward_of(node_id)

    def node_count(self) -> int:
        return len(self.graph)

    def has_node(self, node_id: int) -> bool:
        return node_id in self.graph

    def total_length(self) -> int:
        return sum(len(node.sequence) for node in self.graph.values())

    def edges(self) -> Iterator[Edge]:
        """
        Yield every bidirected edge exactly once.

        An entry on the right of node n is reported from n when n.id is
        not larger than the neighbour id; an entry on the left is reported
        when n.id is strictly smaller, or for a self-loop when the stored
        neighbour is forward (the reverse-stored twin is reported from the
        right side instead).
        """
        for node_id, node in self.graph.items():
            fwd = Handle.forward_of(node_id)
            for right in node.right_edges:
                if node_id <= right.id:
                    yield Edge(fwd, right)
            rev = fwd.flip()
            for left in node.left_edges:
                if node_id < left.id or (node_id == left.id and not left.is_reverse):
                    yield Edge(rev, left)

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def neighbors(self, handle: Handle, direction: Direction) -> List[Handle]:
        """
        Neighbours of an oriented node.

        Direction.RIGHT returns every x such that the edge (handle, x)
        exists; Direction.LEFT returns every x such that (x, handle) exists.

        Raises:
            NodeNotExistsError: If the handle's node is not in the graph
        """
        node = self.get_node_unchecked(handle.id)
        if direction is Direction.RIGHT:
            side = node.left_edges if handle.is_reverse else node.right_edges
            return list(side)
        side = node.right_edges if handle.is_reverse else node.left_edges
        return [h.flip() for h in side]

    def degree(self, handle: Handle, direction: Direction) -> int:
        node = self.get_node_unchecked(handle.id)
        if (direction is Direction.RIGHT) != handle.is_reverse:
            return len(node.right_edges)
        return len(node.left_edges)

    def has_edge(self, left: Handle, right: Handle) -> bool:
        node = self.graph.get(left.id)
        if node is None:
            return False
        return right in self._out_side(node, left)

    def sequence(self, handle: Handle) -> str:
        """Bases of the node read on the handle's strand."""
        seq = self.get_node_unchecked(handle.id).sequence
        return reverse_complement(seq) if handle.is_reverse else seq

    def sequence_iter(self, handle: Handle) -> Iterator[str]:
        return iter_strand(self.get_node_unchecked(handle.id).sequence, handle.is_reverse)

    def subsequence(self, handle: Handle, start: int, length: int) -> str:
        return self.sequence(handle)[start:start + length]

    def base(self, handle: Handle, index: int) -> str:
        return self.sequence(handle)[index]

    def node_len(self, handle: Handle) -> int:
        return len(self.get_node_unchecked(handle.id).sequence)

    # ========================================================================
    # Part 3: Parallel read-only enumeration
    # ========================================================================

    def handles_par(self, func: Callable[[Handle], object], threads: Optional[int] = None) -> list:
        """Apply func to every handle on a thread pool."""
        return parallel_map(func, self.handles(), threads)

    def edges_par(self, func: Callable[[Edge], object], threads: Optional[int] = None) -> list:
        return parallel_map(func, self.edges(), threads)

    def neighbors_par(
        self,
        handle: Handle,
        direction: Direction,
        func: Callable[[Handle], object],
        threads: Optional[int] = None,
    ) -> list:
        return parallel_map(func, self.neighbors(handle, direction), threads)

    def sequence_par(
        self,
        handle: Handle,
        func: Callable[[str], object],
        threads: Optional[int] = None,
    ) -> list:
        return parallel_map(func, self.sequence_iter(handle), threads)

    # ========================================================================
    # Part 4: Additive mutation
    # ========================================================================

    def create_handle(self, node_id: int, sequence: str) -> Handle:
        """
        Insert a new node.

        Args:
            node_id: Node identifier (1 .. MAX_NODE_ID)
            sequence: Forward-strand bases (must be non-empty)

        Returns:
            Forward handle of the new node

        Raises:
            EmptySequenceError: If sequence is empty
            IdAlreadyExistsError: If node_id is already used
        """
        if not sequence:
            raise EmptySequenceError()
        if node_id in self.graph:
            raise IdAlreadyExistsError(node_id)
        if node_id < 1 or node_id > MAX_NODE_ID:
            raise ValueError(f"Node id must be in 1..{MAX_NODE_ID}, got {node_id}")

        self.graph[node_id] = Node(sequence)
        self.max_id = max(self.max_id, node_id)
        self.min_id = min(self.min_id, node_id)
        return Handle.forward_of(node_id)

    def append_handle(self, sequence: str) -> Handle:
        """Insert a node with the next free id (max_id + 1)."""
        return self.create_handle(self.max_id + 1, sequence)

    def create_edge(self, edge: Edge) -> bool:
        """
        Insert a bidirected edge.

        Returns:
            True if the edge was inserted, False if it was already present

        Raises:
            NodeNotExistsError: If either endpoint is missing
        """
        left, right = edge
        left_node = self.get_node_unchecked(left.id)
        right_node = self.get_node_unchecked(right.id)

        out = self._out_side(left_node, left)
        if right in out:
            return False
        out.append(right)

        # (n+, n-) and (n-, n+) are their own mirror: store a single entry
        if left != right.flip():
            mirror = right_node.right_edges if right.is_reverse else right_node.left_edges
            mirror.append(left.flip())
        return True

    # ========================================================================
    # Part 5: Subtractive mutation
    # ========================================================================

    def remove_handle(self, node_id: int) -> bool:
        """
        Remove a node, its edges and every path that visits it.

        Raises:
            NodeNotExistsError: If the node is absent
        """
        node = self.get_node_unchecked(node_id)
        fwd = Handle.forward_of(node_id)

        for entry in node.right_edges:
            self._drop_mirror(node_id, entry, fwd.flip())
        for entry in node.left_edges:
            self._drop_mirror(node_id, entry, fwd)

        for path_id in list(node.occurrences):
            logger.debug(f"Removing node {node_id} destroys path {path_id}")
            self.destroy_path(path_id)

        del self.graph[node_id]
        self._refresh_id_bounds(node_id)
        return True

    def _drop_mirror(self, node_id: int, entry: Handle, back: Handle):
        if entry.id == node_id or entry.id not in self.graph:
            return
        mirror = self._mirror_side(entry)
        if back in mirror:
            mirror.remove(back)

    def _refresh_id_bounds(self, removed_id: int):
        if not self.graph:
            self.min_id = MAX_NODE_ID
            self.max_id = 0
        elif removed_id in (self.min_id, self.max_id):
            self.min_id = min(self.graph)
            self.max_id = max(self.graph)

    def remove_edge(self, edge: Edge) -> bool:
        """
        Remove an edge and destroy every path that walks across it.

        Raises:
            EdgeNotExistsError: If the edge is not in the graph
        """
        left, right = edge
        if not self.has_edge(left, right):
            raise EdgeNotExistsError(left, right)

        self._out_side(self.graph[left.id], left).remove(right)
        if left != right.flip():
            self._mirror_side(right).remove(left.flip())

        target = Edge(left, right).normalized()
        doomed = [
            path_id for path_id, path in self.paths.items()
            if self._path_traverses(path, target)
        ]
        for path_id in doomed:
            logger.debug(f"Removing edge {left} -> {right} destroys path {path_id}")
            self.destroy_path(path_id)
        return True

    @staticmethod
    def _path_traverses(path: Path, target: Edge) -> bool:
        steps = path.nodes
        pairs = list(zip(steps, steps[1:]))
        if path.is_circular and len(steps) > 1:
            pairs.append((steps[-1], steps[0]))
        return any(Edge(a, b).normalized() == target for a, b in pairs)

    def clear_graph(self):
        """Drop every node and path and reset the id bounds."""
        self.max_id = 0
        self.min_id = MAX_NODE_ID
        self.graph.clear()
        self.path_id.clear()
        self.paths.clear()

    # ========================================================================
    # Part 6: Modify
    # ========================================================================

    def modify_handle(self, node_id: int, sequence: str) -> bool:
        """
        Replace a node's sequence; adjacency and path steps are untouched.

        Raises:
            NodeNotExistsError: If the node is absent
            EmptySequenceError: If sequence is empty
        """
        node = self.get_node_unchecked(node_id)
        if not sequence:
            raise EmptySequenceError()
        node.sequence = sequence
        return True

    def modify_edge(
        self,
        old_edge: Edge,
        left: Optional[Handle] = None,
        right: Optional[Handle] = None,
    ) -> bool:
        """
        Move an edge to new endpoints.

        Returns:
            True if the edge changed, False if the new endpoints describe
            the same edge
        """
        old_left, old_right = old_edge
        new_edge = Edge(
            left if left is not None else old_left,
            right if right is not None else old_right,
        )
        if new_edge.same_as(old_edge):
            return False

        self.get_node_unchecked(new_edge.left.id)
        self.get_node_unchecked(new_edge.right.id)

        self.remove_edge(Edge(old_left, old_right))
        self.create_edge(new_edge)
        return True

    # ========================================================================
    # Part 7: Divide and orientation
    # ========================================================================

    def divide_handle(self, handle: Handle, offsets: Iterable[int]) -> List[Handle]:
        """
        Split a node at the given offsets into a chain of nodes.

        Offsets are measured along the handle's own strand. The original
        node keeps the first forward-strand piece; the other pieces become
        new nodes with fresh ids. Edges leaving the right side of the
        original move to the last piece, consecutive pieces are linked, and
        every path step on the node expands into the chain.

        Args:
            handle: Handle to divide
            offsets: Cut positions in [0, node_len]; 0 and node_len are
                ignored, as are duplicates

        Returns:
            Handles of all pieces in the handle's own reading order

        Raises:
            NodeNotExistsError: If the node is absent
            ValueError: If an offset falls outside [0, node_len]
        """
        node = self.get_node_unchecked(handle.id)
        node_len = len(node.sequence)

        offsets = list(offsets)
        for offset in offsets:
            if offset < 0 or offset > node_len:
                raise ValueError(
                    f"Offset {offset} outside node {handle.id} of length {node_len}"
                )

        fwd_offsets = sorted({
            (node_len - o) if handle.is_reverse else o for o in offsets
        } - {0, node_len})
        if not fwd_offsets:
            return [handle]

        fwd = handle.forward()
        sequence = node.sequence
        bounds = fwd_offsets + [node_len]

        chain = [fwd]
        for start, end in zip(bounds, bounds[1:]):
            chain.append(self.append_handle(sequence[start:end]))
        node.sequence = sequence[:fwd_offsets[0]]

        # Move the right side of the original onto the last piece
        last = chain[-1]
        moved = node.right_edges
        node.right_edges = []
        self.graph[last.id].right_edges = moved

        for i, entry in enumerate(moved):
            if entry.id == fwd.id:
                if entry.is_reverse:
                    # (n+, n-) becomes the single-entry loop (last+, last-)
                    moved[i] = last.flip()
                else:
                    self._replace_in(node.left_edges, fwd.flip(), last.flip())
                continue
            self._replace_in(self._mirror_side(entry), fwd.flip(), last.flip())

        for this, following in zip(chain, chain[1:]):
            self.create_edge(Edge(this, following))

        reverse_chain = [h.flip() for h in reversed(chain)]
        for path_id, indices in list(node.occurrences.items()):
            path = self.paths[path_id]
            for index in sorted(indices, reverse=True):
                step_handle = path.nodes[index]
                replacement = reverse_chain if step_handle.is_reverse else chain
                step = PathStep(path_id, index)
                self.rewrite_segment(step, step, replacement)

        logger.debug(f"Divided node {fwd.id} into {len(chain)} pieces")
        return reverse_chain if handle.is_reverse else chain

    @staticmethod
    def _replace_in(handles: List[Handle], old: Handle, new: Handle):
        for i, h in enumerate(handles):
            if h == old:
                handles[i] = new

    def apply_orientation(self, handle: Handle) -> Handle:
        """
        Make a reverse handle's strand the node's forward strand.

        The node's sequence is reverse-complemented, every reference to it
        (neighbour adjacency, self-loops, path steps) is flipped and its two
        adjacency lists are swapped. Forward handles are returned unchanged.

        Returns:
            The forward handle of the node
        """
        node = self.get_node_unchecked(handle.id)
        if not handle.is_reverse:
            return handle

        node_id = handle.id
        node.sequence = reverse_complement(node.sequence)

        def flipped(handles: List[Handle]) -> List[Handle]:
            return [h.flip() if h.id == node_id else h for h in handles]

        touched = {h.id for h in node.left_edges} | {h.id for h in node.right_edges}
        for other_id in touched:
            other = self.graph[other_id]
            other.left_edges = flipped(other.left_edges)
            other.right_edges = flipped(other.right_edges)

        node.left_edges, node.right_edges = node.right_edges, node.left_edges

        for path_id in node.occurrences:
            path = self.paths[path_id]
            path.nodes = flipped(path.nodes)

        return handle.flip()

    # ========================================================================
    # Part 8: Embedded paths
    # ========================================================================

    def path_count(self) -> int:
        return len(self.paths)

    def has_path(self, name: str) -> bool:
        return name in self.path_id

    def name_to_path_handle(self, name: str) -> Optional[PathId]:
        return self.path_id.get(name)

    def path_handle_to_name(self, path_id: PathId) -> str:
        return self.get_path_unchecked(path_id).name

    def is_circular(self, path_id: PathId) -> bool:
        return self.get_path_unchecked(path_id).is_circular

    def step_count(self, path_id: PathId) -> int:
        return len(self.get_path_unchecked(path_id).nodes)

    def path_ids(self) -> List[PathId]:
        return list(self.paths)

    def steps(self, path_id: PathId) -> Iterator[PathStep]:
        path = self.get_path_unchecked(path_id)
        for index in range(len(path.nodes)):
            yield PathStep(path_id, index)

    def occurrences(self, handle: Handle) -> Iterator[PathStep]:
        node = self.get_node_unchecked(handle.id)
        for path_id, indices in node.occurrences.items():
            for index in indices:
                yield PathStep(path_id, index)

    def handle_of_step(self, step: PathStep) -> Optional[Handle]:
        return self.get_path_unchecked(step.path_id).lookup_step_handle(step)

    def path_handle_of_step(self, step: PathStep) -> PathId:
        return step.path_id

    def path_begin(self, path_id: PathId) -> Optional[PathStep]:
        if self.step_count(path_id) == 0:
            return None
        return PathStep(path_id, 0)

    def path_back(self, path_id: PathId) -> Optional[PathStep]:
        count = self.step_count(path_id)
        if count == 0:
            return None
        return PathStep(path_id, count - 1)

    def has_next_step(self, step: PathStep) -> bool:
        return self.next_step(step) is not None

    def has_previous_step(self, step: PathStep) -> bool:
        return self.previous_step(step) is not None

    def next_step(self, step: PathStep) -> Optional[PathStep]:
        """Following step, wrapping on circular paths; None past the end."""
        path = self.get_path_unchecked(step.path_id)
        if step.index + 1 < len(path.nodes):
            return PathStep(step.path_id, step.index + 1)
        if path.is_circular and path.nodes:
            return PathStep(step.path_id, 0)
        return None

    def previous_step(self, step: PathStep) -> Optional[PathStep]:
        path = self.get_path_unchecked(step.path_id)
        if step.index > 0:
            return PathStep(step.path_id, step.index - 1)
        if path.is_circular and path.nodes:
            return PathStep(step.path_id, len(path.nodes) - 1)
        return None

    def path_bases_len(self, path_id: PathId) -> Optional[int]:
        path = self.paths.get(path_id)
        if path is None:
            return None
        return path.bases_len(self.graph)

    def position_of_step(self, step: PathStep) -> Optional[int]:
        path = self.paths.get(step.path_id)
        if path is None:
            return None
        return path.position_of_step(self.graph, step)

    def step_at_position(self, path_id: PathId, pos: int) -> Optional[PathStep]:
        path = self.paths.get(path_id)
        if path is None:
            return None
        return path.step_at_position(self.graph, pos)

    def path_sequence(self, path_id: PathId) -> str:
        """Concatenated bases along a path, each step read on its strand."""
        path = self.get_path_unchecked(path_id)
        return "".join(self.sequence(h) for h in path.nodes)

    def create_path_handle(self, name: str, is_circular: bool = False) -> PathId:
        """
        Create an empty path.

        A path already registered under name is destroyed first.

        Returns:
            The new path id
        """
        if name in self.path_id:
            logger.warning(f"Path {name!r} already exists; replacing it")
            self.destroy_path(self.path_id[name])

        path_id = self._next_path_id
        self._next_path_id += 1
        self.paths[path_id] = Path(name, path_id, is_circular)
        self.path_id[name] = path_id
        return path_id

    def destroy_path(self, path_id: PathId):
        """
        Remove a path and erase its occurrences from every node it visits.

        Raises:
            PathNotExistsError: If the path id is unknown
        """
        path = self.get_path_unchecked(path_id)
        for node_id in {h.id for h in path.nodes}:
            node = self.graph.get(node_id)
            if node is not None:
                node.occurrences.pop(path_id, None)
        del self.paths[path_id]
        if self.path_id.get(path.name) == path_id:
            del self.path_id[path.name]

    def append_step(self, path_id: PathId, handle: Handle) -> PathStep:
        """
        Append a step to a path.

        Raises:
            PathNotExistsError: If the path id is unknown
            NodeNotExistsError: If the handle's node is absent
        """
        path = self.get_path_unchecked(path_id)
        node = self.get_node_unchecked(handle.id)
        path.nodes.append(handle)
        index = len(path.nodes) - 1
        node.add_occurrence(path_id, index)
        return PathStep(path_id, index)

    def prepend_step(self, path_id: PathId, handle: Handle) -> PathStep:
        """Insert a step at the front of a path, shifting every other step."""
        path = self.get_path_unchecked(path_id)
        self.get_node_unchecked(handle.id)
        previous_ids = {h.id for h in path.nodes}
        path.nodes.insert(0, handle)
        self._refresh_occurrences(path_id, 0, previous_ids)
        return PathStep(path_id, 0)

    def rewrite_segment(
        self,
        begin: PathStep,
        end: PathStep,
        new_segment: List[Handle],
    ) -> Tuple[PathStep, PathStep]:
        """
        Replace the inclusive step range [begin, end] with new_segment.

        Returns:
            (first, last) steps of the inserted segment

        Raises:
            ValueError: If the steps belong to different paths or do not
                form a valid range
        """
        if begin.path_id != end.path_id:
            raise ValueError(
                "Tried to rewrite path segment between two different paths"
            )
        path_id = begin.path_id
        path = self.get_path_unchecked(path_id)

        first, last = begin.index, end.index
        if not 0 <= first <= last < len(path.nodes):
            raise ValueError(
                f"Invalid step range [{first}, {last}] for path of {len(path.nodes)} steps"
            )
        for handle in new_segment:
            self.get_node_unchecked(handle.id)

        previous_ids = {h.id for h in path.nodes[first:]}
        path.nodes[first:last + 1] = list(new_segment)
        self._refresh_occurrences(path_id, first, previous_ids)

        return PathStep(path_id, first), PathStep(path_id, first + len(new_segment) - 1)

    def _refresh_occurrences(self, path_id: PathId, start: int, previous_ids: Set[int]):
        """Rebuild the occurrences of path_id from step start onward."""
        path = self.paths[path_id]
        tail = path.nodes[start:]
        for node_id in previous_ids | {h.id for h in tail}:
            node = self.graph.get(node_id)
            if node is not None:
                node.drop_occurrences(path_id, start)
        for offset, handle in enumerate(tail):
            self.graph[handle.id].add_occurrence(path_id, start + offset)

    def remove_step(self, name: str, node_id: int) -> bool:
        """Drop every step of the named path that visits node_id."""
        path_id = self._path_id_by_name(name)
        path = self.paths[path_id]
        previous_ids = {h.id for h in path.nodes}
        path.nodes = [h for h in path.nodes if h.id != node_id]
        self._refresh_occurrences(path_id, 0, previous_ids)
        return True

    def modify_step(self, name: str, old_node_id: int, new_handle: Handle) -> bool:
        """Replace every step of the named path on old_node_id by new_handle."""
        path_id = self._path_id_by_name(name)
        self.get_node_unchecked(new_handle.id)
        path = self.paths[path_id]
        previous_ids = {h.id for h in path.nodes}
        path.nodes = [new_handle if h.id == old_node_id else h for h in path.nodes]
        self._refresh_occurrences(path_id, 0, previous_ids)
        return True

    def rewrite_path(self, name: str, handles: List[Handle]) -> bool:
        """Re-create the named path (non-circular) from handles."""
        path_id = self._path_id_by_name(name)
        for handle in handles:
            self.get_node_unchecked(handle.id)
        self.destroy_path(path_id)
        new_id = self.create_path_handle(name, False)
        for handle in handles:
            self.append_step(new_id, handle)
        return True

    # ========================================================================
    # Part 9: Reporting
    # ========================================================================

    def summary(self) -> Dict[str, int]:
        """Counts describing the graph."""
        return {
            'nodes': self.node_count(),
            'edges': self.edge_count(),
            'paths': self.path_count(),
            'total_length': self.total_length(),
            'min_id': self.min_id if self.graph else 0,
            'max_id': self.max_id,
        }

    def print_graph(self):
        """Log a human-readable dump of nodes, edges and paths."""
        logger.info("Graph: {")
        logger.info("\tNodes: {")
        for node_id in sorted(self.graph):
            logger.info(f"\t\t{node_id}: {self.graph[node_id].sequence}")
        logger.info("\t}")
        logger.info("\tEdges: {")
        for edge in self.edges():
            logger.info(f"\t\t{edge.left} --> {edge.right}")
        logger.info("\t}")
        logger.info("\tPaths: {")
        for path in self.paths.values():
            walk = " -> ".join(str(h) for h in path.nodes)
            logger.info(f"\t\t{path.name}: {walk}")
        logger.info("\t}")
        logger.info("}")
