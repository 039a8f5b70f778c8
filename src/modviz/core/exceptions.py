"""Exception types raised by modviz."""

from __future__ import annotations


class ModvizError(Exception):
    """Base class for all modviz errors."""

    stage = "modviz"


class InputAccessError(ModvizError, RuntimeError):
    """Standard input cannot be inspected or is not a pipe."""

    stage = "input"


class MalformedRecordError(ModvizError, ValueError):
    """An input line does not hold exactly two labels."""

    stage = "parse"

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"line {line_number}: expected '<module> <dependency>', got {line!r}",
        )


class UndecodableInputError(ModvizError, ValueError):
    """Input bytes near a line are not valid UTF-8."""

    stage = "parse"

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        super().__init__(f"line {line_number}: input is not valid UTF-8 ({reason})")


class UnknownPackageError(ModvizError, ValueError):
    """The focus package does not appear in the parsed graph."""

    stage = "filter"

    def __init__(self, package: str):
        self.package = package
        super().__init__(f"package {package} not existed")


class SerializationError(ModvizError, RuntimeError):
    """The DOT document could not be written to its sink."""

    stage = "render"
