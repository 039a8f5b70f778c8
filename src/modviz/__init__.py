"""modviz - Go module dependency graph visualization tool.

Turns the output of ``go mod graph`` into a Graphviz DOT document.
"""

from .core.models import Direction, ModuleGraph, RenderConfig
from .visualization import DOTGenerator, GraphBuilder, GraphRenderer

__version__ = "1.0.0"
__all__ = [
    "DOTGenerator",
    "Direction",
    "GraphBuilder",
    "GraphRenderer",
    "ModuleGraph",
    "RenderConfig",
]
