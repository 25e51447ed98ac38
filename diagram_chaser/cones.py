"""
Cone Verification

A cone over a diagram D: S → C is an apex a with legs l_n: a → D(n) such that
D(e) ∘ l_s = l_t for every edge e: s → t. Commutativity is decided purely by
the category's declared composition table.
"""

from itertools import product
from typing import Iterator, List, Optional

from .categorical import Category
from .diagrams import Diagram, Shape
from .results import Cone, ConeCheck, SearchStatus


def verify_cone(category: Category, shape: Shape, diagram: Diagram, cone: Cone) -> ConeCheck:
    """
    Check a candidate cone against every edge of the shape.

    Args:
        category: Target category of the diagram
        shape: Indexing shape
        diagram: Diagram whose edge images must commute with the legs
        cone: Candidate apex and legs

    Returns:
        ConeCheck; a missing edge image anywhere decides the verdict first,
        otherwise the first failing edge (in sorted order) does
    """
    edges = shape.sorted_edges()
    for edge in edges:
        if edge.id not in diagram.edge_map:
            return ConeCheck(
                SearchStatus.INCOMPLETE_INPUT,
                f"diagram incomplete: edge {edge.id} has no image",
                edge.id,
            )

    for edge in edges:
        image = diagram.edge_map[edge.id]
        leg_source = cone.leg(edge.source)
        leg_target = cone.leg(edge.target)
        if leg_source is None or leg_target is None:
            return ConeCheck(
                SearchStatus.INCOMPLETE_INPUT,
                f"cone incomplete: no leg for an endpoint of edge {edge.id}",
                edge.id,
            )

        composite = category.compose(image, leg_source)
        if composite is None:
            return ConeCheck(
                SearchStatus.NEGATIVE,
                f"{image} ∘ {leg_source} is not declared",
                edge.id,
            )
        if composite != leg_target:
            return ConeCheck(
                SearchStatus.NEGATIVE,
                f"{image} ∘ {leg_source} = {composite}, expected {leg_target}",
                edge.id,
            )

    return ConeCheck(SearchStatus.FOUND)


def leg_choices(category: Category, nodes: List[str], diagram: Diagram,
                apex: str) -> Optional[List[List[str]]]:
    """
    Hom(apex, D(n)) for each node, in node order.

    Returns None when some node has no image or an empty hom-set, in which
    case no cone exists at this apex.
    """
    choices = []
    for node in nodes:
        image = diagram.node_map.get(node)
        if image is None:
            return None
        homs = category.hom(apex, image)
        if not homs:
            return None
        choices.append(homs)
    return choices


def candidate_cones(category: Category, nodes: List[str], diagram: Diagram,
                    apex: str) -> Iterator[Cone]:
    """Every assignment of one leg per node at ``apex``, unverified."""
    choices = leg_choices(category, nodes, diagram, apex)
    if choices is None:
        return
    for legs in product(*choices):
        yield Cone(apex, dict(zip(nodes, legs)))


def mediating_morphisms(category: Category, limit: Cone, other: Cone) -> List[str]:
    """
    Morphisms m: other.apex → limit.apex with limit.leg(n) ∘ m = other.leg(n)
    for every node n.
    """
    found = []
    for m in category.hom(other.apex, limit.apex):
        if all(_factors(category.compose(leg, m), other.leg(node))
               for node, leg in limit.legs.items()):
            found.append(m)
    return found


def _factors(composite: Optional[str], leg: Optional[str]) -> bool:
    return composite is not None and composite == leg
