"""Town/road graph and its shortest-path engine.

This subpackage contains the graph container and the single-source
relaxation used to answer shortest-path queries on it.
"""

from .dijkstra import dijkstra_shortest_path
from .graph import Graph

__all__ = ["Graph", "dijkstra_shortest_path"]
