"""
GFAWeaver GFA model.

Record types for GFA1 / GFA2 lines, field lexers, segment-id conversion and
the parser error taxonomy.
"""

from .errors import (
    ConversionError,
    EmptyLineError,
    ExtensionError,
    GFAIOError,
    GFAParseError,
    InvalidFieldError,
    InvalidLineError,
    InvalidNamedFieldError,
    MissingFieldError,
    NumericFieldError,
    OrientationFieldError,
    ParseFieldError,
    ParserTolerance,
    UintIdError,
    UnknownFieldError,
    UnknownLineTypeError,
    UnknownParseError,
    Utf8FieldError,
)
from .records import (
    GFA,
    GFA2,
    Containment,
    Fragment,
    Gap,
    GFA2Edge,
    GFA2Header,
    GFA2Segment,
    GroupO,
    GroupU,
    Header,
    Link,
    Path,
    Segment,
)
from .segment_id import SegmentIdConverter, segment_name_to_int

__all__ = [
    # Documents and records
    'GFA', 'GFA2',
    'Header', 'Segment', 'Link', 'Containment', 'Path',
    'GFA2Header', 'GFA2Segment', 'Fragment', 'GFA2Edge', 'Gap', 'GroupO', 'GroupU',
    # Segment ids
    'SegmentIdConverter', 'segment_name_to_int',
    # Errors
    'ParserTolerance',
    'ParseFieldError', 'UintIdError', 'Utf8FieldError', 'NumericFieldError',
    'OrientationFieldError', 'InvalidNamedFieldError', 'MissingFieldError',
    'UnknownFieldError',
    'GFAParseError', 'EmptyLineError', 'UnknownLineTypeError', 'InvalidLineError',
    'InvalidFieldError', 'GFAIOError', 'ExtensionError', 'ConversionError',
    'UnknownParseError',
]
