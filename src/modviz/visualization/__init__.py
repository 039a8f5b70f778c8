"""Visualization module for graph building and DOT rendering."""

from .dot_generator import DOTGenerator
from .graph_builder import GraphBuilder
from .renderer import GraphRenderer

__all__ = ["DOTGenerator", "GraphBuilder", "GraphRenderer"]
