"""Core modviz module."""

from .exceptions import (
    InputAccessError,
    MalformedRecordError,
    ModvizError,
    SerializationError,
    UndecodableInputError,
    UnknownPackageError,
)
from .models import Direction, ModuleGraph, RenderConfig, to_label

__all__ = [
    "Direction",
    "InputAccessError",
    "MalformedRecordError",
    "ModuleGraph",
    "ModvizError",
    "RenderConfig",
    "SerializationError",
    "UndecodableInputError",
    "UnknownPackageError",
    "to_label",
]
