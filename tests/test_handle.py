#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for the handle algebra: packed handles, orientations and edges.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
from gfaweaver.handle_graph import (
    MAX_NODE_ID,
    Edge,
    Handle,
    Orientation,
)


class TestOrientation:
    """Test orientation parsing and flipping."""

    def test_from_char(self):
        assert Orientation.from_char("+") is Orientation.FORWARD
        assert Orientation.from_char("-") is Orientation.BACKWARD

    def test_from_char_invalid(self):
        """Test that anything but '+' / '-' is rejected."""
        with pytest.raises(ValueError):
            Orientation.from_char("x")

    def test_flip_and_str(self):
        assert Orientation.FORWARD.flip() is Orientation.BACKWARD
        assert str(Orientation.BACKWARD) == "-"
        assert Orientation.BACKWARD.is_reverse


class TestHandle:
    """Test handle packing."""

    def test_pack_layout(self):
        """Test that the orientation lives in the low bit."""
        assert Handle.pack(5, False).value == 10
        assert Handle.pack(5, True).value == 11

    def test_accessors(self):
        handle = Handle.new(12, Orientation.BACKWARD)
        assert handle.id == 12
        assert handle.is_reverse
        assert handle.orientation is Orientation.BACKWARD
        assert str(handle) == "12-"

    def test_flip_is_involution(self):
        """Test that flipping twice gives the original handle."""
        handle = Handle.forward_of(7)
        assert handle.flip() != handle
        assert handle.flip().flip() == handle
        assert handle.flip().id == 7

    def test_forward_clears_orientation(self):
        assert Handle.pack(3, True).forward() == Handle.forward_of(3)
        assert Handle.forward_of(3).forward() == Handle.forward_of(3)

    def test_largest_id(self):
        handle = Handle.forward_of(MAX_NODE_ID)
        assert handle.id == MAX_NODE_ID

    @pytest.mark.parametrize("node_id", [-1, MAX_NODE_ID + 1])
    def test_pack_out_of_range(self, node_id):
        with pytest.raises(ValueError):
            Handle.pack(node_id, False)

    def test_ordering_follows_value(self):
        assert Handle.forward_of(1) < Handle.pack(1, True) < Handle.forward_of(2)


class TestEdge:
    """Test bidirected edge equivalence."""

    def test_reverse(self):
        edge = Edge(Handle.forward_of(11), Handle.pack(12, True))
        assert edge.reverse() == Edge(Handle.forward_of(12), Handle.pack(11, True))

    def test_same_as_reverse_form(self):
        """Test that (l, r) and (r', l') describe the same edge."""
        edge = Edge(Handle.forward_of(11), Handle.forward_of(13))
        assert edge.same_as(edge.reverse())
        assert edge.normalized() == edge.reverse().normalized()

    def test_different_edges(self):
        a = Edge(Handle.forward_of(1), Handle.forward_of(2))
        b = Edge(Handle.forward_of(1), Handle.pack(2, True))
        assert not a.same_as(b)

    def test_self_loop_reverse_is_itself(self):
        """Test that (n+, n-) is its own reverse."""
        edge = Edge(Handle.forward_of(4), Handle.pack(4, True))
        assert edge.reverse() == edge

    def test_same_as_accepts_tuples(self):
        edge = Edge(Handle.forward_of(1), Handle.forward_of(2))
        assert edge.same_as((Handle.pack(2, True), Handle.pack(1, True)))


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
