#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFAWeaver v0.1.0

Parser exceptions and error-tolerance policy.

Errors come in two levels. Field errors (ParseFieldError subclasses) are
raised by the lexers for a single tab-separated field; the line parser wraps
them into line errors (GFAParseError subclasses), which are then filtered
through a ParserTolerance.

Author: GFAWeaver Development Team
License: MIT
"""

from enum import Enum


# ============================================================================
# Field-level errors
# ============================================================================

class ParseFieldError(Exception):
    """Base class for errors raised while lexing a single field."""
    pass


class UintIdError(ParseFieldError):
    def __init__(self, detail: str = ""):
        message = "Failed to parse a segment ID as an unsigned integer"
        super().__init__(f"{message}: {detail}" if detail else message)


class Utf8FieldError(ParseFieldError):
    def __init__(self):
        super().__init__("Failed to parse a bytestring as a UTF-8 string")


class NumericFieldError(ParseFieldError):
    def __init__(self, field: str = ""):
        self.field = field
        super().__init__(f"Failed to parse a field from a string: {field!r}")


class OrientationFieldError(ParseFieldError):
    def __init__(self):
        super().__init__("Failed to parse an orientation character")


class InvalidNamedFieldError(ParseFieldError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Failed to parse field `{name}`")


class MissingFieldError(ParseFieldError):
    def __init__(self):
        super().__init__("Line is missing required fields")


class UnknownFieldError(ParseFieldError):
    def __init__(self):
        super().__init__("Unknown error when parsing a field")


# ============================================================================
# Line-level errors
# ============================================================================

class GFAParseError(Exception):
    """Base class for errors raised while parsing a line or a file."""
    pass


class EmptyLineError(GFAParseError):
    def __init__(self):
        super().__init__("Line was empty")


class UnknownLineTypeError(GFAParseError):
    def __init__(self, line_type: str = ""):
        self.line_type = line_type
        super().__init__(f"Unknown line type: {line_type!r}")


class InvalidLineError(GFAParseError):
    """A line could not be parsed; carries the field error and the raw line."""

    def __init__(self, field_error: ParseFieldError, line: str):
        self.field_error = field_error
        self.line = line
        super().__init__(f"Failed to parse line {line}, error: {field_error}")


class InvalidFieldError(GFAParseError):
    def __init__(self, field_error: ParseFieldError):
        self.field_error = field_error
        super().__init__(f"Failed to parse field: {field_error}")


class GFAIOError(GFAParseError):
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"IO error: {cause}")


class ExtensionError(GFAParseError):
    def __init__(self, path: str = ""):
        self.path = path
        super().__init__(f"Extension not correct: {path}" if path else "Extension not correct!")


class ConversionError(GFAParseError):
    """A parsed record could not be folded into the graph."""

    def __init__(self, message: str):
        super().__init__(message)


class UnknownParseError(GFAParseError):
    def __init__(self):
        super().__init__("Unknown error when parsing a line")


# ============================================================================
# Tolerance policy
# ============================================================================

class ParserTolerance(Enum):
    """How many line errors a parser swallows before giving up."""
    IGNORE_ALL = "ignore_all"
    SAFE = "safe"
    PEDANTIC = "pedantic"

    @classmethod
    def from_name(cls, name: str) -> "ParserTolerance":
        try:
            return cls(name.lower().replace("-", "_"))
        except ValueError:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(
                f"Unknown parser tolerance {name!r} (expected one of: {valid})"
            ) from None

    def can_safely_continue(self, error: Exception) -> bool:
        if self is ParserTolerance.IGNORE_ALL:
            return True
        if self is ParserTolerance.SAFE:
            return isinstance(error, (EmptyLineError, UnknownLineTypeError))
        return False
