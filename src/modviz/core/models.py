"""Data models and enums for modviz."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel


def to_label(raw: str) -> str:
    """Turn a ``name@version`` token into a two-line ``name\\nversion`` label."""
    return raw.strip().replace("@", "\n", 1)


class Direction(str, Enum):
    """Graph layout direction."""

    LEFT_TO_RIGHT = "left-to-right"
    TOP_TO_BOTTOM = "top-to-bottom"


@dataclass
class ModuleGraph:
    """Module dependency graph.

    ``mods`` and ``mod_ids`` form the node table (label <-> id), and
    ``dependencies`` maps a module id to the ids it depends on, in the order
    the edges were declared. Duplicate edges are kept.
    """

    mods: dict[str, int] = field(default_factory=dict)
    mod_ids: dict[int, str] = field(default_factory=dict)
    dependencies: dict[int, list[int]] = field(default_factory=dict)
    next_id: int = 1

    def add_module(self, label: str) -> int:
        """Return the id of ``label``, allocating the next serial id if unseen."""
        mod_id = self.mods.get(label)
        if mod_id is None:
            mod_id = self.next_id
            self.mods[label] = mod_id
            self.mod_ids[mod_id] = label
            self.next_id += 1
        return mod_id

    def add_dependency(self, module: str, dependency: str) -> None:
        """Record that ``module`` depends on ``dependency``."""
        mod_id = self.add_module(module)
        dep_id = self.add_module(dependency)
        self.dependencies.setdefault(mod_id, []).append(dep_id)

    def iter_edges(self) -> Iterator[tuple[int, int]]:
        """Yield (source, destination) id pairs in stored order."""
        for mod_id, dep_ids in self.dependencies.items():
            for dep_id in dep_ids:
                yield mod_id, dep_id

    def number_of_nodes(self) -> int:
        return len(self.mods)

    def number_of_edges(self) -> int:
        return sum(len(dep_ids) for dep_ids in self.dependencies.values())

    def source_count(self) -> int:
        """Number of modules with at least one outgoing edge."""
        return sum(1 for dep_ids in self.dependencies.values() if dep_ids)

    def __contains__(self, label: object) -> bool:
        return label in self.mods


class RenderConfig(BaseModel):
    """Configuration for DOT generation."""

    horizontal_threshold: int = 15
    node_shape: str = "box"
