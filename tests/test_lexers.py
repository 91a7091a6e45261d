#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Tests for the GFA field lexers.

Author: GFAWeaver Development Team
License: MIT
"""

import pytest
from gfaweaver.gfa import lexers
from gfaweaver.gfa.errors import (
    InvalidNamedFieldError,
    MissingFieldError,
    NumericFieldError,
    OrientationFieldError,
    Utf8FieldError,
)
from gfaweaver.handle_graph import Orientation


def fields(*values):
    return iter(values)


class TestIdentifiers:
    """Test identifier and orientation lexers."""

    def test_parse_id(self):
        assert lexers.parse_id(fields("utg001", "x")) == "utg001"

    def test_parse_id_rejects_space(self):
        with pytest.raises(InvalidNamedFieldError) as excinfo:
            lexers.parse_id(fields("a b"))
        assert excinfo.value.name == "ID"

    def test_parse_id_missing(self):
        with pytest.raises(MissingFieldError):
            lexers.parse_id(fields())

    def test_optional_id_star(self):
        assert lexers.parse_optional_id(fields("*")) == "*"

    def test_reference_id_keeps_orientation(self):
        assert lexers.parse_reference_id(fields("45+")) == "45+"

    def test_reference_id_requires_orientation(self):
        with pytest.raises(InvalidNamedFieldError):
            lexers.parse_reference_id(fields("45"))

    def test_parse_orientation(self):
        assert lexers.parse_orientation(fields("-")) is Orientation.BACKWARD

    def test_parse_orientation_invalid(self):
        with pytest.raises(OrientationFieldError):
            lexers.parse_orientation(fields("+-"))

    def test_split_reference(self):
        assert lexers.split_reference("utg7-") == ("utg7", Orientation.BACKWARD)

    def test_split_reference_invalid(self):
        with pytest.raises(OrientationFieldError):
            lexers.split_reference("+")


class TestHeaderAndTags:
    """Test H-line and optional tag lexing."""

    def test_header_with_version(self):
        assert lexers.parse_header(fields("VN:Z:1.0")) == ("VN:Z:1.0", "")

    def test_header_without_version(self):
        """Test that a non-version first field is kept as a tag."""
        version, tags = lexers.parse_header(fields("xx:Z:abc"))
        assert version == ""
        assert tags == "xx:Z:abc"

    def test_header_version_and_tags(self):
        version, tags = lexers.parse_header(fields("VN:Z:2.0", "TS:i:1", "xx:Z:a b"))
        assert version == "VN:Z:2.0"
        assert tags == "TS:i:1\txx:Z:a b"

    def test_empty_header(self):
        assert lexers.parse_header(fields()) == ("", "")

    def test_bad_tag(self):
        with pytest.raises(InvalidNamedFieldError) as excinfo:
            lexers.parse_tags(fields("LN:i:5", "garbage"))
        assert excinfo.value.name == "Tag"


class TestSequences:
    """Test sequence lexing for both GFA versions."""

    def test_gfa1_sequence(self):
        assert lexers.parse_sequence(fields("ACGTn")) == "ACGTn"

    def test_gfa1_placeholder(self):
        assert lexers.parse_sequence(fields("*")) == "*"

    def test_gfa1_rejects_digits(self):
        with pytest.raises(InvalidNamedFieldError) as excinfo:
            lexers.parse_sequence(fields("AC1T"))
        assert excinfo.value.name == "Sequence"

    def test_gfa2_accepts_printable(self):
        assert lexers.parse_sequence(fields("AC1T"), gfa2=True) == "AC1T"


class TestNumbersAndAlignments:
    """Test positions, integers, overlaps and alignments."""

    @pytest.mark.parametrize("token", ["0", "2531", "2591$", "-3"])
    def test_positions(self, token):
        assert lexers.parse_position(fields(token)) == token

    def test_position_value(self):
        assert lexers.position_value("2591$") == (2591, True)
        assert lexers.position_value("60") == (60, False)

    def test_position_value_invalid(self):
        with pytest.raises(NumericFieldError):
            lexers.position_value("6x")

    def test_variance(self):
        assert lexers.parse_variance(fields("*")) == "*"
        assert lexers.parse_variance(fields("-12")) == "-12"

    def test_length_rejects_text(self):
        with pytest.raises(InvalidNamedFieldError):
            lexers.parse_length(fields("ten"))

    @pytest.mark.parametrize("token", ["*", "0M", "10M2I3D"])
    def test_overlap(self, token):
        assert lexers.parse_overlap(fields(token)) == token

    def test_overlap_invalid(self):
        with pytest.raises(InvalidNamedFieldError) as excinfo:
            lexers.parse_overlap(fields("M10"))
        assert excinfo.value.name == "Overlap"

    def test_path_overlaps(self):
        assert lexers.parse_path_overlaps(fields("4M,5M")) == "4M,5M"

    @pytest.mark.parametrize("token", ["*", "60M", "2,4,-6"])
    def test_alignment(self, token):
        assert lexers.parse_alignment(fields(token)) == token


class TestStepLists:
    """Test path step lists and group members."""

    def test_segment_names(self):
        assert lexers.parse_segment_names(fields("11+,12-,13+")) == "11+,12-,13+"

    def test_segment_names_reject_spaces(self):
        with pytest.raises(InvalidNamedFieldError):
            lexers.parse_segment_names(fields("11+, 12-"))

    def test_group_o_refs(self):
        assert lexers.parse_group_o_refs(fields("1+ 2- 3+")) == "1+ 2- 3+"

    def test_group_o_refs_require_orientation(self):
        with pytest.raises(InvalidNamedFieldError):
            lexers.parse_group_o_refs(fields("1+ 2"))

    def test_group_u_ids(self):
        assert lexers.parse_group_u_ids(fields("a b c")) == "a b c"


class TestDecoding:
    """Test byte-line decoding."""

    def test_decode_bytes(self):
        assert lexers.decode_line(b"S\t1\tA") == "S\t1\tA"

    def test_decode_text_passthrough(self):
        assert lexers.decode_line("S\t1\tA") == "S\t1\tA"

    def test_decode_invalid_utf8(self):
        with pytest.raises(Utf8FieldError):
            lexers.decode_line(b"S\t1\t\xff\xfe")


# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
