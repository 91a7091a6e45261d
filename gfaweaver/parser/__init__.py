"""
GFAWeaver parsers.

GFA1 / GFA2 line parsers, the fluent ParserBuilder and the file driver that
turns a .gfa / .gfa2 file into a HashGraph.
"""

from .builder import ParserBuilder
from .file_driver import detect_format, parse_file, parse_file_to_graph, parse_stream_to_graph
from .gfa1_parser import GFAParser
from .gfa2_parser import GFA2Parser

__all__ = [
    'GFAParser',
    'GFA2Parser',
    'ParserBuilder',
    'detect_format',
    'parse_file',
    'parse_file_to_graph',
    'parse_stream_to_graph',
]
