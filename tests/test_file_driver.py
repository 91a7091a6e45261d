#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for format detection, the file driver and record-to-graph conversion.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
from gfaweaver.config import load_config
from gfaweaver.gfa.errors import (
    ConversionError,
    ExtensionError,
    GFAIOError,
    InvalidLineError,
    ParserTolerance,
)
from gfaweaver.gfa.records import Link, Segment
from gfaweaver.handle_graph import Handle, HashGraph, Orientation
from gfaweaver.io_utils import GraphBuilder
from gfaweaver.parser import (
    ParserBuilder,
    detect_format,
    parse_file,
    parse_file_to_graph,
    parse_stream_to_graph,
)


class TestDetectFormat:
    """Test suffix-based format selection."""

    @pytest.mark.parametrize("name,expected", [
        ("graph.gfa", "gfa1"),
        ("graph.GFA", "gfa1"),
        ("graph.gfa2", "gfa2"),
        ("/data/run.v2.gfa2", "gfa2"),
    ])
    def test_known_suffixes(self, name, expected):
        assert detect_format(name) == expected

    @pytest.mark.parametrize("name", ["graph.txt", "graph", "graph.gfa.gz"])
    def test_unknown_suffix(self, name):
        with pytest.raises(ExtensionError):
            detect_format(name)


class TestParseFileToGraph:
    """Test the file entry points."""

    def test_gfa1_file(self, small_gfa1_file, assert_invariants):
        graph = parse_file_to_graph(small_gfa1_file)
        assert graph.node_count() == 3
        assert graph.edge_count() == 3
        assert graph.path_count() == 1
        assert_invariants(graph)

    def test_gfa2_file(self, small_gfa2_file, assert_invariants):
        graph = parse_file_to_graph(str(small_gfa2_file))
        assert graph.has_edge(Handle.forward_of(2), Handle.forward_of(45))
        assert_invariants(graph)

    def test_wrong_extension(self, temp_output_dir):
        path = temp_output_dir / "graph.txt"
        path.write_text("S\t1\tA\n")
        with pytest.raises(ExtensionError):
            parse_file_to_graph(path)

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(GFAIOError):
            parse_file_to_graph(temp_output_dir / "absent.gfa")

    def test_parse_file_document_only(self, small_gfa1_file):
        document = parse_file(small_gfa1_file)
        assert document.counts()['paths'] == 1

    def test_config_controls_line_types(self, small_gfa1_file):
        config = load_config()
        config['parser']['line_types']['gfa1']['paths'] = False
        graph = parse_file_to_graph(small_gfa1_file, config)
        assert graph.path_count() == 0
        assert graph.edge_count() == 3

    def test_tolerance_override(self, temp_output_dir):
        path = temp_output_dir / "bad.gfa"
        path.write_text("S\t1\tACGT\nS\t2\tAC GT\n")
        with pytest.raises(InvalidLineError):
            parse_file_to_graph(path)
        graph = parse_file_to_graph(path, tolerance=ParserTolerance.IGNORE_ALL)
        assert graph.node_count() == 1

    def test_stream_of_bytes(self, small_gfa1_text):
        lines = [line.encode() for line in small_gfa1_text.splitlines()]
        graph = parse_stream_to_graph(lines, "gfa1")
        assert graph.node_count() == 3


class TestConversionErrors:
    """Test records the graph rejects."""

    DUPLICATE = ["S\t1\tACGT", "S\t1\tTTTT", "S\t2\tGG"]

    def test_duplicate_segment_raises(self):
        with pytest.raises(ConversionError):
            parse_stream_to_graph(self.DUPLICATE, "gfa1")

    def test_duplicate_segment_ignored(self):
        graph = parse_stream_to_graph(
            self.DUPLICATE, "gfa1", tolerance=ParserTolerance.IGNORE_ALL
        )
        assert graph.node_count() == 2
        assert graph.sequence(Handle.forward_of(1)) == "ACGT"

    def test_link_to_missing_segment(self):
        with pytest.raises(ConversionError):
            parse_stream_to_graph(["S\t1\tA", "L\t1\t+\t9\t+\t0M"], "gfa1")

    def test_path_over_missing_segment(self):
        """Test that a path with an unknown step is not created at all."""
        graph = parse_stream_to_graph(
            ["S\t1\tA", "P\tp\t1+,9+\t*"], "gfa1", tolerance=ParserTolerance.IGNORE_ALL
        )
        assert graph.path_count() == 0

    def test_segment_name_collision(self):
        with pytest.raises(ConversionError):
            parse_stream_to_graph(["S\t65\tA", "S\tA\tC"], "gfa1")


class TestIntegerIdCollisions:
    """Test that integer-id parsing and graph building share one name registry."""

    @pytest.fixture
    def integer_config(self):
        config = load_config()
        config['parser']['integer_ids'] = True
        return config

    def test_path_step_collision(self, integer_config):
        """Test that step 'A' does not resolve to segment '65'."""
        lines = ["S\t65\tACGT", "S\tB\tTT", "P\tp\tA+,B+\t*"]
        with pytest.raises(ConversionError):
            parse_stream_to_graph(lines, "gfa1", config=integer_config)

    def test_gfa2_edge_collision(self, integer_config):
        lines = ["S\t65\t4\tACGT", "S\tB\t2\tTT", "E\t*\tA+\tB+\t0\t0\t0\t0\t0M"]
        with pytest.raises(ConversionError):
            parse_stream_to_graph(lines, "gfa2", config=integer_config)

    def test_gfa2_group_collision(self, integer_config):
        lines = ["S\t65\t4\tACGT", "S\tB\t2\tTT", "O\tp\tA+ B+"]
        with pytest.raises(ConversionError):
            parse_stream_to_graph(lines, "gfa2", config=integer_config)

    def test_matching_names_resolve(self, integer_config, assert_invariants):
        lines = ["S\t65\tACGT", "S\tB\tTT", "L\t65\t+\tB\t-\t0M", "P\tp\t65+,B+\t*"]
        graph = parse_stream_to_graph(lines, "gfa1", config=integer_config)
        assert sorted(graph.graph) == [65, 66]
        assert graph.has_edge(Handle.forward_of(65), Handle.pack(66, True))
        assert graph.paths[0].nodes == [Handle.forward_of(65), Handle.forward_of(66)]
        assert_invariants(graph)

    def test_parse_file_to_graph_shares_names(self, temp_output_dir):
        path = temp_output_dir / "collide.gfa"
        path.write_text("S\t65\tACGT\nS\tB\tTT\nP\tp\tA+,B+\t*\n")
        parser = ParserBuilder.all().integer_ids().build_gfa1()
        with pytest.raises(ConversionError):
            parser.parse_file_to_graph(path)


class TestGraphBuilder:
    """Test record insertion counters and shared graphs."""

    def test_insert_records(self):
        builder = GraphBuilder()
        builder.insert_record(Segment("1", "ACGT"))
        builder.insert_record(Segment("2", "GG"))
        builder.insert_record(Link("1", Orientation.FORWARD, "2", Orientation.BACKWARD))
        assert builder.inserted == 3
        assert builder.graph.has_edge(Handle.forward_of(1), Handle.pack(2, True))

    def test_skip_counter(self):
        builder = GraphBuilder(tolerance=ParserTolerance.IGNORE_ALL)
        builder.insert_record(Segment("1", "A"))
        assert builder.insert_record(Segment("1", "C")) is False
        assert builder.skipped == 1

    def test_non_record(self):
        with pytest.raises(TypeError):
            GraphBuilder().insert_record("S\t1\tA")

    def test_existing_graph(self):
        graph = HashGraph()
        graph.create_handle(5, "AAA")
        GraphBuilder(graph).build_from_records([Segment("6", "C")])
        assert sorted(graph.graph) == [5, 6]

    def test_integer_names_from_parser(self):
        builder = GraphBuilder()
        builder.insert_record(Segment(6549, "ACGT"))
        builder.insert_record(Segment("B", "A"))
        builder.insert_record(Link("A1", Orientation.FORWARD, 66, Orientation.FORWARD))
        assert builder.graph.has_edge(Handle.forward_of(6549), Handle.forward_of(66))


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
