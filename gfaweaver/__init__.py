#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Package initialization and version metadata.

Author: GFAWeaver Development Team
License: MIT
"""

from .version import __version__
from .handle_graph import (
    Direction,
    Edge,
    Handle,
    HashGraph,
    Orientation,
    PathStep,
)
from .parser import (
    GFAParser,
    GFA2Parser,
    ParserBuilder,
    parse_file_to_graph,
    parse_stream_to_graph,
)

__all__ = [
    "__version__",
    "Direction",
    "Edge",
    "Handle",
    "HashGraph",
    "Orientation",
    "PathStep",
    "GFAParser",
    "GFA2Parser",
    "ParserBuilder",
    "parse_file_to_graph",
    "parse_stream_to_graph",
]

# GFAWeaver v0.1.0
# Any usage is subject to this software's license.
