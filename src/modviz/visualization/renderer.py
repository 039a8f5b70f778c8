"""Focus filtering and DOT output for module graphs."""

import logging
from typing import Optional, Set, TextIO

from ..core.exceptions import SerializationError, UnknownPackageError
from ..core.models import ModuleGraph, RenderConfig, to_label
from .dot_generator import DOTGenerator

logger = logging.getLogger(__name__)


class GraphRenderer:
    """Renders module graphs, optionally restricted to one package's dependencies."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize renderer.

        Args:
            config: Render configuration passed on to the DOT generator.
        """
        self.generator = DOTGenerator(config)

    def filter(self, graph: ModuleGraph, focus: str) -> ModuleGraph:
        """Return the subgraph reachable from ``focus``.

        The input graph is left untouched. Every module reachable from the
        focus package, directly or transitively, is kept together with its
        full dependency list; the focus package is always kept.

        Args:
            graph: Parsed module graph.
            focus: Package in ``name@version`` form.

        Returns:
            A new module graph.

        Raises:
            UnknownPackageError: ``focus`` is not a module of ``graph``.
        """
        focus = focus.strip()
        label = to_label(focus)
        if label not in graph:
            raise UnknownPackageError(focus)

        start = graph.mods[label]
        visited: Set[int] = {start}
        frontier = [start]
        while frontier:
            next_frontier = []
            for mod_id in frontier:
                for dep_id in graph.dependencies.get(mod_id, []):
                    # Already-visited modules are never expanded again, so cycles terminate
                    if dep_id not in visited:
                        visited.add(dep_id)
                        next_frontier.append(dep_id)
            frontier = next_frontier

        filtered = ModuleGraph(next_id=graph.next_id)
        for mod_id, mod_label in graph.mod_ids.items():
            if mod_id in visited:
                filtered.mods[mod_label] = mod_id
                filtered.mod_ids[mod_id] = mod_label
        for mod_id, dep_ids in graph.dependencies.items():
            if mod_id in visited:
                filtered.dependencies[mod_id] = list(dep_ids)

        logger.info(
            f"Filtered {graph.number_of_nodes()} modules to {filtered.number_of_nodes()} reachable from {focus}",
        )
        return filtered

    def render(
        self,
        graph: ModuleGraph,
        output: TextIO,
        focus: Optional[str] = None,
    ) -> ModuleGraph:
        """Write the DOT document for ``graph`` to ``output``.

        Args:
            graph: Parsed module graph.
            output: Writable text sink.
            focus: Optional package restricting output to its dependencies.
                Blank values are ignored.

        Returns:
            The graph that was rendered (filtered when a focus was given).

        Raises:
            UnknownPackageError: The focus package is not in the graph.
            SerializationError: Writing to ``output`` failed.
        """
        if focus and focus.strip():
            graph = self.filter(graph, focus)

        dot_content = self.generator.generate_dot(graph)

        try:
            output.write(dot_content)
            output.flush()
        except OSError as e:
            raise SerializationError(f"failed to write DOT output: {e}") from e

        return graph
