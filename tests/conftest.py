#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from gfaweaver.handle_graph import MAX_NODE_ID, Direction, Edge, Handle
from gfaweaver.parser import parse_stream_to_graph


SMALL_GFA1 = (
    "H\tVN:Z:1.0\n"
    "S\t11\tACCTT\n"
    "S\t12\tTCAAGG\n"
    "S\t13\tCTTGATT\n"
    "L\t11\t+\t12\t-\t0M\n"
    "L\t12\t-\t13\t+\t0M\n"
    "L\t11\t+\t13\t+\t0M\n"
    "P\t14\t11+,12-,13+\t0M\n"
)

SMALL_GFA2 = (
    "H\tVN:Z:2.0\n"
    "S\t2\t4\tACGT\n"
    "S\t45\t4\tTTGA\n"
    "E\t*\t2+\t45+\t2531\t2591$\t0\t60\t60M\n"
)


def check_graph_invariants(graph):
    """Assert every structural invariant of a HashGraph."""
    # Id bounds
    if graph.graph:
        assert graph.min_id <= min(graph.graph)
        assert max(graph.graph) <= graph.max_id
    else:
        assert (graph.min_id, graph.max_id) == (MAX_NODE_ID, 0)

    # Adjacency entries name existing nodes and have their mirror
    for node_id, node in graph.graph.items():
        fwd = Handle.forward_of(node_id)
        for side, origin in ((node.right_edges, fwd), (node.left_edges, fwd.flip())):
            for entry in side:
                assert entry.id in graph.graph
                assert graph.has_edge(entry.flip(), origin.flip())

    # Path tables in bijection, occurrences in both directions
    assert len(graph.path_id) == len(graph.paths)
    for path_id, path in graph.paths.items():
        assert graph.path_id[path.name] == path_id
        for index, handle in enumerate(path.nodes):
            assert index in graph.graph[handle.id].occurrences[path_id]
    for node_id, node in graph.graph.items():
        for path_id, indices in node.occurrences.items():
            for index in indices:
                assert graph.paths[path_id].nodes[index].id == node_id

    # Every edge reported exactly once
    reported = [edge.normalized() for edge in graph.edges()]
    assert len(reported) == len(set(reported))
    stored = set()
    for node_id, node in graph.graph.items():
        fwd = Handle.forward_of(node_id)
        stored.update(Edge(fwd, r).normalized() for r in node.right_edges)
        stored.update(Edge(fwd.flip(), l).normalized() for l in node.left_edges)
    assert set(reported) == stored

    # Neighbour symmetry
    for fwd in graph.handles():
        for handle in (fwd, fwd.flip()):
            for right in graph.neighbors(handle, Direction.RIGHT):
                assert handle.flip() in graph.neighbors(right.flip(), Direction.RIGHT)
            for left in graph.neighbors(handle, Direction.LEFT):
                assert graph.has_edge(left, handle)


@pytest.fixture
def assert_invariants():
    """The graph invariant checker, as a fixture."""
    return check_graph_invariants


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="gfaweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def small_gfa1_text():
    """Three segments, three links and one path."""
    return SMALL_GFA1


@pytest.fixture
def small_gfa2_text():
    """Two segments joined by one GFA2 edge."""
    return SMALL_GFA2


@pytest.fixture
def small_gfa1_file(temp_output_dir):
    path = temp_output_dir / "small.gfa"
    path.write_text(SMALL_GFA1)
    return path


@pytest.fixture
def small_gfa2_file(temp_output_dir):
    path = temp_output_dir / "small.gfa2"
    path.write_text(SMALL_GFA2)
    return path


@pytest.fixture
def small_graph():
    """HashGraph built from SMALL_GFA1."""
    return parse_stream_to_graph(SMALL_GFA1.splitlines(), "gfa1")


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
