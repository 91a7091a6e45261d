#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Graph-level exceptions raised by the handle-graph store.

Author: GFAWeaver Development Team
License: MIT
"""


class GraphError(Exception):
    """Base class for errors raised while querying or mutating a graph."""
    pass


class IdAlreadyExistsError(GraphError):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"The Id provided ({node_id}) already exists")


class EmptySequenceError(GraphError):
    def __init__(self):
        super().__init__("Empty sequence")


class NodeNotExistsError(GraphError):
    def __init__(self, node_id):
        self.node_id = node_id
        super().__init__(f"Cannot find the node: {node_id}")


class EdgeNotExistsError(GraphError):
    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"The Edge ({left} -> {right}) did not exist")


class EdgeAlreadyExistsError(GraphError):
    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"The Edge ({left} -> {right}) already exists")


class PathNotExistsError(GraphError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"The Path ({path}) did not exist")


class OrientationNotPresentError(GraphError):
    def __init__(self, reference):
        self.reference = reference
        super().__init__(
            f"Segment reference Id ({reference}) did not include orientation"
        )


class PositionNotFoundError(GraphError):
    def __init__(self, position_list, side):
        self.position_list = position_list
        self.side = side
        super().__init__(f"Not found node {position_list} in {side} list")


class UnknownGraphError(GraphError):
    def __init__(self, message: str = "Unknown error while operating on the graph"):
        super().__init__(message)
