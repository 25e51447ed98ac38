"""
Tests for the Limit Finder
"""

import pytest

from diagram_chaser import (
    Category, Cone, Diagram, LimitFinder, SearchBudget, SearchStatus, Shape, find_limit,
)


def point_shape():
    shape = Shape(name="point")
    shape.add_node("n")
    return shape


def point_diagram(obj):
    return Diagram(name="at_" + obj, shape="point", category="C", node_map={"n": obj})


def with_units(cat):
    cat.ensure_identities()
    cat.add_unit_laws()
    return cat


def product_category(extra_mediator=False):
    """p with projections to x, y and a test object t factoring through p."""
    cat = Category(name="C")
    for obj in ("p", "t", "x", "y"):
        cat.add_object(obj)
    cat.ensure_identities()
    cat.add_morphism("p1", "p", "x")
    cat.add_morphism("p2", "p", "y")
    cat.add_morphism("tx", "t", "x")
    cat.add_morphism("ty", "t", "y")
    cat.add_morphism("m", "t", "p")
    if extra_mediator:
        cat.add_morphism("m2", "t", "p")
    cat.add_unit_laws()
    cat.set_composition("p1", "m", "tx")
    cat.set_composition("p2", "m", "ty")
    if extra_mediator:
        cat.set_composition("p1", "m2", "tx")
        cat.set_composition("p2", "m2", "ty")
    return cat


def discrete_pair():
    shape = Shape(name="pair")
    shape.add_node("1")
    shape.add_node("2")
    return shape


def pair_diagram():
    return Diagram(name="xy", shape="pair", category="C", node_map={"1": "x", "2": "y"})


def pullback_setup():
    cat = Category(name="C")
    for obj in ("a", "b", "c"):
        cat.add_object(obj)
    cat.ensure_identities()
    cat.add_morphism("f", "a", "b")
    cat.add_morphism("h", "a", "c")
    cat.add_morphism("k", "c", "b")
    cat.add_unit_laws()
    cat.set_composition("k", "h", "f")

    shape = Shape(name="span")
    for node in ("1", "2", "3"):
        shape.add_node(node)
    shape.add_edge("e1", "1", "2")
    shape.add_edge("e2", "3", "2")

    diagram = Diagram(name="cospan", shape="span", category="C",
                      node_map={"1": "a", "2": "b", "3": "c"},
                      edge_map={"e1": "f", "e2": "k"})
    return cat, shape, diagram


class TestIdentityCone:
    def test_single_object(self):
        cat = with_units(Category(name="C", objects={"X"}))
        result = find_limit(cat, point_shape(), point_diagram("X"))

        assert result.found
        assert result.cone == Cone("X", {"n": "id_X"})

    def test_requires_declared_unit_law(self):
        cat = Category(name="C", objects={"X"})
        cat.ensure_identities()
        # id_X ∘ id_X is not declared, so no mediating morphism is found
        result = find_limit(cat, point_shape(), point_diagram("X"))

        assert result.status is SearchStatus.NEGATIVE
        assert result.cones_found == 1

    def test_skips_non_universal_apex(self):
        cat = Category(name="C", objects={"A", "X"})
        cat.add_morphism("u", "A", "X")
        with_units(cat)

        result = find_limit(cat, point_shape(), point_diagram("X"))
        assert result.cone == Cone("X", {"n": "id_X"})


class TestLimitSearch:
    def test_pullback(self):
        cat, shape, diagram = pullback_setup()
        result = find_limit(cat, shape, diagram)

        assert result.status is SearchStatus.FOUND
        assert result.cone.apex == "a"
        assert result.cone.legs == {"1": "id_a", "2": "f", "3": "h"}

    def test_span_with_wrong_way_edge(self):
        cat = Category(name="C")
        for obj in ("a", "b", "c"):
            cat.add_object(obj)
        cat.ensure_identities()
        cat.add_morphism("f", "a", "b")
        cat.add_morphism("g", "b", "c")
        cat.add_morphism("h", "a", "c")
        cat.add_unit_laws()
        cat.set_composition("g", "f", "h")
        _, shape, _ = pullback_setup()
        diagram = Diagram(name="span", shape="span", category="C",
                          node_map={"1": "a", "2": "b", "3": "c"},
                          edge_map={"e1": "f", "e2": "g"})

        result = find_limit(cat, shape, diagram)
        assert result.status is SearchStatus.NEGATIVE
        assert result.cone is None
        assert result.cones_found == 0

    def test_product(self):
        result = find_limit(product_category(), discrete_pair(), pair_diagram())

        assert result.found
        assert result.cone == Cone("p", {"1": "p1", "2": "p2"})
        assert result.cones_found == 2

    def test_non_unique_mediator_breaks_universality(self):
        result = find_limit(product_category(extra_mediator=True), discrete_pair(), pair_diagram())

        assert result.status is SearchStatus.NEGATIVE
        assert "no universal cone" in result.reason

    def test_terminal_object_for_empty_shape(self):
        cat = Category(name="C", objects={"s", "t"})
        cat.add_morphism("!", "s", "t")
        with_units(cat)
        shape = Shape(name="empty")
        diagram = Diagram(name="empty", shape="empty", category="C")

        result = find_limit(cat, shape, diagram)
        assert result.cone == Cone("t", {})


class TestGuards:
    def _chain(self, size):
        cat = Category(name="C", objects={f"o{i}" for i in range(size)})
        return with_units(cat)

    def test_eight_objects_are_searched(self):
        result = find_limit(self._chain(8), point_shape(), point_diagram("o0"))
        assert result.found
        assert result.cone.apex == "o0"

    def test_nine_objects_are_infeasible(self):
        result = find_limit(self._chain(9), point_shape(), point_diagram("o0"))
        assert result.status is SearchStatus.INFEASIBLE
        assert result.candidates_explored == 0
        assert "too large" in result.describe()

    def test_budget_exceeded(self):
        result = find_limit(product_category(), discrete_pair(), pair_diagram(),
                            budget=SearchBudget(max_candidates=1))

        assert result.status is SearchStatus.BUDGET_EXCEEDED
        assert result.candidates_explored == 2
        assert result.cone is None

    def test_unlimited_budget(self):
        result = find_limit(product_category(), discrete_pair(), pair_diagram(),
                            budget=SearchBudget.unlimited())
        assert result.found

    def test_invalid_budget(self):
        with pytest.raises(ValueError):
            SearchBudget(max_candidates=0)
        with pytest.raises(ValueError):
            SearchBudget(max_seconds=-1.0)


class TestIncompleteInput:
    def test_missing_edge_image(self):
        cat, shape, diagram = pullback_setup()
        del diagram.edge_map["e2"]

        finder = LimitFinder(cat, shape, diagram)
        result = finder.find_limit()

        assert result.status is SearchStatus.INCOMPLETE_INPUT
        assert "e2" in result.reason
        assert finder.incomplete_checks == 1
        assert result.incomplete_checks == 1
        assert result.summary()["incomplete_checks"] == 1
        assert result.cones_found == 0

    def test_missing_node_image(self):
        cat, shape, diagram = pullback_setup()
        del diagram.node_map["3"]

        result = find_limit(cat, shape, diagram)
        assert result.status is SearchStatus.INCOMPLETE_INPUT
        assert result.candidates_explored == 0
        assert "3" in result.reason


class TestDeterminism:
    def test_repeated_calls_agree(self):
        cat = product_category()
        first = find_limit(cat, discrete_pair(), pair_diagram())
        second = find_limit(cat, discrete_pair(), pair_diagram())

        assert first == second
        assert first.summary() == second.summary()

    def test_insertion_order_does_not_matter(self):
        # Two isomorphic limits; the lexicographically first apex wins
        def build(order):
            cat = Category(name="C")
            for obj in order:
                cat.add_object(obj)
            cat.add_morphism("u", "q", "r")
            cat.add_morphism("v", "r", "q")
            cat.ensure_identities()
            cat.add_unit_laws()
            cat.set_composition("v", "u", "id_q")
            cat.set_composition("u", "v", "id_r")
            return cat

        shape = Shape(name="empty")
        diagram = Diagram(name="empty", shape="empty", category="C")
        forward = find_limit(build(["q", "r"]), shape, diagram)
        backward = find_limit(build(["r", "q"]), shape, diagram)

        assert forward.cone == backward.cone


class TestDescribe:
    def test_found(self):
        result = find_limit(product_category(), discrete_pair(), pair_diagram())
        text = result.describe()

        assert text.startswith("Found limit with apex: p")
        assert " - 1 : p1" in text

    def test_summary(self):
        result = find_limit(product_category(), discrete_pair(), pair_diagram())
        summary = result.summary()

        assert summary["status"] == "found"
        assert summary["legs"] == {"1": "p1", "2": "p2"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
