"""
Tests for Shapes and Diagrams
"""

import pytest

from diagram_chaser import Diagram, Edge, Shape, ValidationError


def span():
    shape = Shape(name="span")
    for node in ("1", "2", "3"):
        shape.add_node(node)
    shape.add_edge("e1", "1", "2")
    shape.add_edge("e2", "3", "2")
    return shape


class TestShape:
    def test_add_nodes_and_edges(self):
        shape = span()
        assert shape.nodes == {"1", "2", "3"}
        assert shape.edges["e2"] == Edge("e2", "3", "2")

    def test_duplicate_node(self):
        shape = span()
        with pytest.raises(ValidationError):
            shape.add_node("1")

    def test_edge_to_unknown_node(self):
        shape = span()
        with pytest.raises(ValidationError):
            shape.add_edge("e3", "1", "4")

    def test_duplicate_edge(self):
        shape = span()
        with pytest.raises(ValidationError):
            shape.add_edge("e1", "3", "2")

    def test_sorted_views(self):
        shape = span()
        assert shape.sorted_nodes() == ["1", "2", "3"]
        assert [e.id for e in shape.sorted_edges()] == ["e1", "e2"]


class TestDiagram:
    def test_partial_diagram(self):
        shape = span()
        diagram = Diagram(name="D", shape="span", category="C")
        diagram.map_node("1", "a")
        diagram.map_edge("e1", "f")

        assert diagram.missing_nodes(shape) == ["2", "3"]
        assert diagram.missing_edges(shape) == ["e2"]
        assert not diagram.is_complete(shape)

    def test_complete_diagram(self):
        shape = span()
        diagram = Diagram(name="D", shape="span", category="C",
                          node_map={"1": "a", "2": "b", "3": "c"},
                          edge_map={"e1": "f", "e2": "k"})
        assert diagram.is_complete(shape)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
