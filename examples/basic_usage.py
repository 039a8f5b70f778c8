#!/usr/bin/env python3
"""Basic usage examples for modviz."""

import io
import sys

from modviz import GraphBuilder, GraphRenderer, RenderConfig

GO_MOD_GRAPH = """\
example.com/app github.com/spf13/cobra@v1.8.0
example.com/app golang.org/x/net@v0.17.0
github.com/spf13/cobra@v1.8.0 github.com/spf13/pflag@v1.0.5
golang.org/x/net@v0.17.0 golang.org/x/text@v0.13.0
golang.org/x/text@v0.13.0 golang.org/x/tools@v0.6.0
"""


def main():
    """Demonstrate basic modviz usage."""

    # Parse `go mod graph` output
    graph = GraphBuilder().parse(io.StringIO(GO_MOD_GRAPH))
    print(f"Parsed {graph.number_of_nodes()} modules, {graph.number_of_edges()} edges")

    # Example 1: Whole graph as DOT
    renderer = GraphRenderer()
    renderer.render(graph, sys.stdout)

    # Example 2: Only what golang.org/x/net pulls in
    renderer.render(graph, sys.stdout, focus="golang.org/x/net@v0.17.0")

    # Example 3: Keep the filtered graph for further inspection
    subgraph = renderer.filter(graph, "github.com/spf13/cobra@v1.8.0")
    for label in subgraph.mods:
        print(f"  - {label.replace(chr(10), '@')}")

    # Example 4: Force a left-to-right layout with elliptic nodes
    with open("graph.dot", "w", encoding="utf-8") as out:
        GraphRenderer(RenderConfig(horizontal_threshold=0, node_shape="ellipse")).render(graph, out)
    print("Wrote graph.dot; render it with: dot -T svg graph.dot -o graph.svg")


if __name__ == "__main__":
    main()
