"""DOT language generation for Graphviz rendering."""

import logging
from typing import List, Optional

from ..core.models import Direction, ModuleGraph, RenderConfig

logger = logging.getLogger(__name__)


class DOTGenerator:
    """Generates DOT language documents from module graphs."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize DOT generator with configuration.

        Args:
            config: Render configuration. Defaults are used when omitted.
        """
        self.config = config or RenderConfig()

    def choose_direction(self, graph: ModuleGraph) -> Direction:
        """Lay wide graphs out horizontally so they stay readable."""
        if graph.source_count() > self.config.horizontal_threshold:
            return Direction.LEFT_TO_RIGHT
        return Direction.TOP_TO_BOTTOM

    def generate_dot(self, graph: ModuleGraph) -> str:
        """Generate DOT language string from a module graph.

        Args:
            graph: Module graph, filtered or not.

        Returns:
            DOT language string.
        """
        direction = self.choose_direction(graph)
        logger.info(
            f"Generating DOT for {graph.number_of_nodes()} modules, "
            f"{graph.number_of_edges()} dependencies ({direction.value})",
        )

        lines: List[str] = ["digraph {"]
        if direction == Direction.LEFT_TO_RIGHT:
            lines.append("    rankdir=LR;")
        lines.append(f"    node [shape={self.config.node_shape}];")

        for mod_id, label in graph.mod_ids.items():
            lines.append(f"    {self._format_node(mod_id, label)}")

        for source, target in graph.iter_edges():
            lines.append(f"    {source} -> {target};")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _format_node(self, mod_id: int, label: str) -> str:
        """Format a single node definition."""
        return f'{mod_id} [label="{self._escape(label)}"];'

    @staticmethod
    def _escape(label: str) -> str:
        """Escape a label for use inside a DOT quoted string."""
        return (
            label.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
        )
