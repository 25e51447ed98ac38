"""
Demonstration of the DiagramChaser search engine

This script walks through three searches:
1. A pullback of a cospan a → b ← c
2. A product that fails to be universal once a second mediator appears
3. A heuristic right-adjoint search for a functor C → D
"""

import logging

from diagram_chaser import SearchBudget, Session


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_pullback():
    """Find the limit of a cospan."""
    print_section("LIMIT: pullback of a → b ← c")

    session = Session()
    C = session.new_category("C")
    for obj in ("a", "b", "c"):
        C.add_object(obj)
    C.ensure_identities()
    C.add_morphism("f", "a", "b")
    C.add_morphism("h", "a", "c")
    C.add_morphism("k", "c", "b")
    C.add_unit_laws()
    C.set_composition("k", "h", "f")

    span = session.new_shape("span")
    for node in ("1", "2", "3"):
        span.add_node(node)
    span.add_edge("e1", "1", "2")
    span.add_edge("e2", "3", "2")

    session.new_diagram("cospan", "span", "C")
    session.map_diagram("cospan", nodes={"1": "a", "2": "b", "3": "c"},
                        edges={"e1": "f", "e2": "k"})

    result = session.compute_limit("cospan", budget=SearchBudget(max_candidates=10_000))
    print(result.describe())
    print(f"  candidates explored: {result.candidates_explored}")

    print("\nSame diagram with e2 left unmapped:")
    session.new_diagram("partial", "span", "C")
    session.map_diagram("partial", nodes={"1": "a", "2": "b", "3": "c"}, edges={"e1": "f"})
    print(session.compute_limit("partial").describe())


def demonstrate_product():
    """Products need a unique mediating morphism."""
    print_section("LIMIT: product of x and y")

    session = Session()
    C = session.new_category("C")
    for obj in ("p", "t", "x", "y"):
        C.add_object(obj)
    C.ensure_identities()
    for morphism_id, source, target in [
        ("p1", "p", "x"), ("p2", "p", "y"),
        ("tx", "t", "x"), ("ty", "t", "y"),
        ("m", "t", "p"), ("m2", "t", "p"),
    ]:
        C.add_morphism(morphism_id, source, target)
    C.add_unit_laws()
    C.set_composition("p1", "m", "tx")
    C.set_composition("p2", "m", "ty")

    pair = session.new_shape("pair")
    pair.add_node("1")
    pair.add_node("2")
    session.new_diagram("xy", "pair", "C")
    session.map_diagram("xy", nodes={"1": "x", "2": "y"})

    print(session.compute_limit("xy").describe())

    print("\nDeclaring that m2 also mediates:")
    C.set_composition("p1", "m2", "tx")
    C.set_composition("p2", "m2", "ty")
    print(session.compute_limit("xy").describe())


def demonstrate_adjoint():
    """Hom-set cardinality search for a right adjoint."""
    print_section("ADJOINT: candidate right adjoint of F: C → D")

    session = Session()
    C = session.new_category("C")
    for obj in ("a", "b", "c"):
        C.add_object(obj)
    C.add_morphism("f", "a", "b")
    C.add_morphism("g", "b", "c")
    C.add_morphism("h", "a", "c")
    C.set_composition("g", "f", "h")

    D = session.new_category("D")
    D.add_object("x")
    D.add_object("y")
    D.ensure_identities()
    D.add_morphism("u", "x", "y")

    session.define_functor("F", "C", "D",
                           object_map={"a": "x", "b": "y", "c": "y"},
                           morphism_map={"f": "u", "g": "id_y", "h": "u"})
    print(session.check_adjunction("F").describe())

    session.define_functor("Const", "D", "D", object_map={"x": "y", "y": "y"})
    print()
    print(session.check_adjunction("Const").describe())

    print("\nSession contents:")
    for kind, entries in session.summary().items():
        print(f"  {kind}: {entries}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "=" * 70)
    print("  DIAGRAMCHASER DEMONSTRATION")
    print("=" * 70)

    demonstrate_pullback()
    demonstrate_product()
    demonstrate_adjoint()


if __name__ == "__main__":
    main()
