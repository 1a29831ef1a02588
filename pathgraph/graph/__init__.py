"""
Graph module.

Provides the named graph data structure and decoration side tables:
- NamedGraph: Nodes keyed by name, symmetric weighted edges
- GraphNode: A node and its adjacency list
- GraphEdge: One half of an undirected edge
- DecorationRegistry: Per-node algorithm state
"""

from pathgraph.graph.decoration import Decoration, DecorationRegistry
from pathgraph.graph.named_graph import EdgeLink, GraphEdge, GraphNode, NamedGraph

__all__ = [
    "NamedGraph",
    "GraphNode",
    "GraphEdge",
    "EdgeLink",
    "Decoration",
    "DecorationRegistry",
]
