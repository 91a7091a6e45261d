#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for sequence manipulation utilities.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
from gfaweaver.utils.sequence_utils import (
    complement,
    reverse_complement,
    iter_strand,
)
from gfaweaver.utils.parallel import parallel_map, resolve_threads


class TestComplement:
    """Test base complementing."""

    def test_complement_basic(self):
        """Test complement without reversal."""
        assert complement("ATCG") == "TAGC"

    def test_complement_preserves_case(self):
        """Test lowercase bases stay lowercase."""
        assert complement("acgT") == "tgcA"

    def test_complement_leaves_other_characters(self):
        """Test that N and IUPAC codes pass through unchanged."""
        assert complement("ANRC") == "TNRG"


class TestReverseComplement:
    """Test reverse complement function."""

    def test_reverse_complement_basic(self):
        """Test basic reverse complement."""
        assert reverse_complement("ATCG") == "CGAT"

    def test_reverse_complement_node_sequence(self):
        """Test reverse complement of a segment sequence."""
        assert reverse_complement("TCAAGG") == "CCTTGA"

    def test_reverse_complement_palindrome(self):
        """Test reverse complement of palindromic sequence."""
        assert reverse_complement("GAATTC") == "GAATTC"

    def test_reverse_complement_twice(self):
        """Test that reverse complement twice returns original."""
        sequence = "ACCTTGACGTNNacg"
        assert reverse_complement(reverse_complement(sequence)) == sequence

    def test_reverse_complement_empty(self):
        """Test reverse complement of empty sequence."""
        assert reverse_complement("") == ""


class TestIterStrand:
    """Test strand-aware base iteration."""

    def test_forward_strand(self):
        assert list(iter_strand("ACCTT", False)) == ["A", "C", "C", "T", "T"]

    def test_reverse_strand(self):
        assert "".join(iter_strand("ACCTT", True)) == "AAGGT"


class TestParallelMap:
    """Test thread-pool helpers."""

    def test_resolve_threads_explicit(self):
        assert resolve_threads(3) == 3

    @pytest.mark.parametrize("threads", [None, 0, -2])
    def test_resolve_threads_auto(self, threads):
        """Test that unset or invalid counts fall back to the CPU count."""
        assert resolve_threads(threads) >= 1

    def test_parallel_map_preserves_order(self):
        """Test results come back in item order."""
        items = list(range(50))
        assert parallel_map(lambda x: x * x, items, threads=4) == [x * x for x in items]

    def test_parallel_map_single_thread(self):
        assert parallel_map(str.upper, iter(["a", "b"]), threads=1) == ["A", "B"]

    def test_parallel_map_empty(self):
        assert parallel_map(len, [], threads=4) == []


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
