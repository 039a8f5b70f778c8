"""Module graph building from dependency edge lists."""

import logging
from typing import Iterable

from ..core.exceptions import MalformedRecordError, UndecodableInputError
from ..core.models import ModuleGraph, to_label

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Builds a ModuleGraph from ``<module> <dependency>`` lines."""

    def __init__(self):
        """Initialize graph builder with an empty graph."""
        self.graph = ModuleGraph()

    def parse(self, stream: Iterable[str]) -> ModuleGraph:
        """Parse every line of ``stream`` into a fresh module graph.

        Each line must hold exactly two whitespace-separated labels, the
        module and one of its dependencies. Edges are appended in input
        order, repeated edges included.

        Args:
            stream: Text stream or any iterable of lines.

        Returns:
            The populated module graph.

        Raises:
            MalformedRecordError: A line does not hold exactly two labels.
            UndecodableInputError: The stream holds bytes that are not UTF-8.
        """
        logger.info("Parsing module dependency edges")

        # Graphs already returned stay untouched by later parses
        self.graph = ModuleGraph()

        lines = iter(stream)
        line_number = 0
        while True:
            try:
                line = next(lines)
            except StopIteration:
                break
            except UnicodeDecodeError as e:
                raise UndecodableInputError(line_number + 1, e.reason) from e
            line_number += 1

            tokens = line.split()
            if len(tokens) != 2:
                raise MalformedRecordError(line_number, line.rstrip("\r\n"))

            module, dependency = tokens
            self.graph.add_dependency(to_label(module), to_label(dependency))

        logger.info(
            f"Built graph with {self.graph.number_of_nodes()} modules and {self.graph.number_of_edges()} dependencies",
        )
        return self.graph
