"""
Shapes and Diagrams

A shape is a small indexing graph with no composition of its own; a diagram
sends its nodes to objects and its edges to morphisms of a target category.
"""

from typing import Dict, List, Set
from dataclasses import dataclass, field

from .categorical import ValidationError


@dataclass(frozen=True)
class Edge:
    """An edge source → target in a shape."""
    id: str
    source: str
    target: str


@dataclass
class Shape:
    """Indexing graph for diagrams."""
    name: str
    nodes: Set[str] = field(default_factory=set)
    edges: Dict[str, Edge] = field(default_factory=dict)

    def add_node(self, node: str) -> None:
        """Add a node to the shape."""
        if node in self.nodes:
            raise ValidationError(f"Node {node} already present in shape {self.name}")
        self.nodes.add(node)

    def add_edge(self, edge_id: str, source: str, target: str) -> Edge:
        """Add an edge between two existing nodes."""
        for node in (source, target):
            if node not in self.nodes:
                raise ValidationError(f"Node {node} not in shape {self.name}")
        if edge_id in self.edges:
            raise ValidationError(f"Edge {edge_id} already present in shape {self.name}")
        edge = Edge(edge_id, source, target)
        self.edges[edge_id] = edge
        return edge

    def sorted_nodes(self) -> List[str]:
        return sorted(self.nodes)

    def sorted_edges(self) -> List[Edge]:
        return [self.edges[e] for e in sorted(self.edges)]


@dataclass
class Diagram:
    """
    Image of a shape inside a category.

    Both maps may be partial; a diagram is complete relative to its shape
    once every node and every edge has an image.

    Attributes:
        name: Name of the diagram
        shape: Name of the indexing shape
        category: Name of the target category
        node_map: Shape node -> category object
        edge_map: Shape edge -> category morphism
    """
    name: str
    shape: str
    category: str
    node_map: Dict[str, str] = field(default_factory=dict)
    edge_map: Dict[str, str] = field(default_factory=dict)

    def map_node(self, node: str, obj: str) -> None:
        self.node_map[node] = obj

    def map_edge(self, edge_id: str, morphism_id: str) -> None:
        self.edge_map[edge_id] = morphism_id

    def missing_nodes(self, shape: Shape) -> List[str]:
        """Shape nodes without an image, sorted."""
        return [n for n in shape.sorted_nodes() if n not in self.node_map]

    def missing_edges(self, shape: Shape) -> List[str]:
        """Shape edges without an image, sorted."""
        return [e for e in sorted(shape.edges) if e not in self.edge_map]

    def is_complete(self, shape: Shape) -> bool:
        return not self.missing_nodes(shape) and not self.missing_edges(shape)
