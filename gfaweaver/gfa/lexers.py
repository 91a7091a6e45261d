#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Field lexers — regex-guarded recognisers for the tab-separated fields of
GFA1 and GFA2 lines.

Every lexer pulls the next field from an iterator over the fields of a line,
requires a full match of its pattern and returns the token (or a typed value
for orientations). A missing field raises MissingFieldError; a malformed one
raises InvalidNamedFieldError carrying the field's name.

Author: GFAWeaver Development Team
License: MIT
"""

import re
from typing import Iterator, Tuple, Union

from ..handle_graph.handle import Orientation
from .errors import (
    InvalidNamedFieldError,
    MissingFieldError,
    NumericFieldError,
    OrientationFieldError,
    Utf8FieldError,
)

# ============================================================================
# Patterns
# ============================================================================

RE_ID = re.compile(r"[!-~]+")
RE_OPTIONAL_ID = re.compile(r"[!-~]+|\*")
RE_REFERENCE_ID = re.compile(r"[!-~]+[+-]")
RE_ORIENTATION = re.compile(r"[+-]")
RE_VERSION = re.compile(r"[A-Za-z0-9]{2}:[ABHJZif]:[+-]?[0-9]+\.?[0-9]+")
RE_TAG = re.compile(r"[A-Za-z0-9]{2}:[ABHJZif]:[ -~]*")
RE_SEQUENCE_GFA1 = re.compile(r"\*|[A-Za-z=.]+")
RE_SEQUENCE_GFA2 = re.compile(r"\*|[!-~]+")
RE_POSITION = re.compile(r"-?[0-9]+\$?")
RE_INTEGER = re.compile(r"-?[0-9]+")
RE_VARIANCE = re.compile(r"\*|-?[0-9]+")
RE_CIGAR = r"(?:[0-9]+[MIDNSHPX=])+"
RE_OVERLAP = re.compile(rf"\*|{RE_CIGAR}")
RE_PATH_OVERLAPS = re.compile(rf"\*|{RE_CIGAR}(?:,{RE_CIGAR})*")
RE_ALIGNMENT = re.compile(rf"\*|{RE_CIGAR}|-?[0-9]+(?:,-?[0-9]+)*")
RE_SEGMENT_NAMES = re.compile(r"[!-~]+(?:,[!-~]+)*")
RE_GROUP_O_REFS = re.compile(r"[!-~]+[+-](?: [!-~]+[+-])*")
RE_GROUP_U_IDS = re.compile(r"[!-~]+(?: [!-~]+)*")

Line = Union[str, bytes]


# ============================================================================
# Primitives
# ============================================================================

def decode_line(line: Line) -> str:
    """Return line as text, decoding bytes as UTF-8."""
    if isinstance(line, bytes):
        try:
            return line.decode("utf-8")
        except UnicodeDecodeError:
            raise Utf8FieldError() from None
    return line


def next_field(fields: Iterator[str]) -> str:
    try:
        return next(fields)
    except StopIteration:
        raise MissingFieldError() from None


def _match_next(fields: Iterator[str], pattern: "re.Pattern", name: str) -> str:
    value = next_field(fields)
    if pattern.fullmatch(value) is None:
        raise InvalidNamedFieldError(name)
    return value


# ============================================================================
# Identifiers and orientation
# ============================================================================

def parse_id(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_ID, "ID")


def parse_optional_id(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_OPTIONAL_ID, "Optional ID")


def parse_reference_id(fields: Iterator[str]) -> str:
    """An identifier with its trailing '+' / '-' kept, e.g. '45+'."""
    return _match_next(fields, RE_REFERENCE_ID, "Reference ID")


def parse_orientation(fields: Iterator[str]) -> Orientation:
    value = next_field(fields)
    if RE_ORIENTATION.fullmatch(value) is None:
        raise OrientationFieldError()
    return Orientation.from_char(value)


def split_reference(reference: str) -> Tuple[str, Orientation]:
    """
    Split '45+' into ('45', Orientation.FORWARD).

    Raises:
        OrientationFieldError: If the last character is not '+' or '-'
    """
    if len(reference) < 2 or reference[-1] not in "+-":
        raise OrientationFieldError()
    return reference[:-1], Orientation.from_char(reference[-1])


# ============================================================================
# Header and tags
# ============================================================================

def parse_header(fields: Iterator[str]) -> Tuple[str, str]:
    """
    Lex the fields of an H line.

    The version field is optional: when the first field does not look like
    a version tag it is handled as an ordinary tag.

    Returns:
        (version, remaining tags)
    """
    rest = list(fields)
    version = ""
    if rest and RE_VERSION.fullmatch(rest[0]):
        version = rest.pop(0)
    return version, parse_tags(iter(rest))


def parse_tags(fields: Iterator[str]) -> str:
    """Validate every remaining field as a tag and return them tab-joined."""
    tags = []
    for value in fields:
        if RE_TAG.fullmatch(value) is None:
            raise InvalidNamedFieldError("Tag")
        tags.append(value)
    return "\t".join(tags)


# ============================================================================
# Sequences, numbers and alignments
# ============================================================================

def parse_sequence(fields: Iterator[str], gfa2: bool = False) -> str:
    pattern = RE_SEQUENCE_GFA2 if gfa2 else RE_SEQUENCE_GFA1
    return _match_next(fields, pattern, "Sequence")


def parse_position(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_POSITION, "Position")


def parse_length(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_INTEGER, "Length")


def parse_distance(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_INTEGER, "Distance")


def parse_variance(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_VARIANCE, "Variance")


def parse_overlap(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_OVERLAP, "Overlap")


def parse_path_overlaps(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_PATH_OVERLAPS, "Overlap")


def parse_alignment(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_ALIGNMENT, "Alignment")


def position_value(token: str) -> Tuple[int, bool]:
    """
    Convert a position token such as '2591$' to (2591, True).

    Raises:
        NumericFieldError: If token is not a valid position
    """
    if RE_POSITION.fullmatch(token) is None:
        raise NumericFieldError(token)
    if token.endswith("$"):
        return int(token[:-1]), True
    return int(token), False


# ============================================================================
# Step lists
# ============================================================================

def parse_segment_names(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_SEGMENT_NAMES, "Segment names")


def parse_group_o_refs(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_GROUP_O_REFS, "Reference Group ID")


def parse_group_u_ids(fields: Iterator[str]) -> str:
    return _match_next(fields, RE_GROUP_U_IDS, "Id Group Id")
