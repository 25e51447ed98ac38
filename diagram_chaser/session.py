"""
Session Registry

Holds named categories, shapes, diagrams, functors and natural
transformations, validates references between them, and runs the limit and
adjoint searches by name.
"""

import logging
from typing import Any, Dict, Optional

from .adjoint import find_right_adjoint
from .categorical import Category, Functor, NaturalTransformation, ValidationError
from .diagrams import Diagram, Shape
from .limits import find_limit
from .results import AdjointResult, LimitResult, SearchBudget

logger = logging.getLogger(__name__)


class Session:
    """
    Named store of categorical data for one working session.

    Entities are only ever added; lookups of unknown names raise
    ValidationError.
    """

    def __init__(self):
        self.categories: Dict[str, Category] = {}
        self.shapes: Dict[str, Shape] = {}
        self.diagrams: Dict[str, Diagram] = {}
        self.functors: Dict[str, Functor] = {}
        self.natural_transformations: Dict[str, NaturalTransformation] = {}

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def new_category(self, name: str, strict_composition: bool = True) -> Category:
        self._check_new(self.categories, name, "Category")
        category = Category(name=name, strict_composition=strict_composition)
        self.categories[name] = category
        logger.debug("Category %s created", name)
        return category

    def category(self, name: str) -> Category:
        return self._lookup(self.categories, name, "Category")

    # ------------------------------------------------------------------
    # Shapes and diagrams
    # ------------------------------------------------------------------

    def new_shape(self, name: str) -> Shape:
        self._check_new(self.shapes, name, "Shape")
        shape = Shape(name=name)
        self.shapes[name] = shape
        return shape

    def shape(self, name: str) -> Shape:
        return self._lookup(self.shapes, name, "Shape")

    def new_diagram(self, name: str, shape_name: str, category_name: str) -> Diagram:
        self._check_new(self.diagrams, name, "Diagram")
        self.shape(shape_name)
        self.category(category_name)
        diagram = Diagram(name=name, shape=shape_name, category=category_name)
        self.diagrams[name] = diagram
        return diagram

    def diagram(self, name: str) -> Diagram:
        return self._lookup(self.diagrams, name, "Diagram")

    def map_diagram(self, name: str,
                    nodes: Optional[Dict[str, str]] = None,
                    edges: Optional[Dict[str, str]] = None) -> Diagram:
        """
        Extend a diagram's node and edge images.

        Args:
            name: Diagram to update
            nodes: Shape node -> category object
            edges: Shape edge -> category morphism

        Raises:
            ValidationError: If a node, edge, object or morphism is unknown
        """
        diagram = self.diagram(name)
        shape = self.shape(diagram.shape)
        category = self.category(diagram.category)

        for node, obj in (nodes or {}).items():
            if node not in shape.nodes:
                raise ValidationError(f"Node {node} not in shape {shape.name}")
            if obj not in category.objects:
                raise ValidationError(f"Object {obj} not in category {category.name}")
        for edge, morphism_id in (edges or {}).items():
            if edge not in shape.edges:
                raise ValidationError(f"Edge {edge} not in shape {shape.name}")
            if morphism_id not in category.morphisms:
                raise ValidationError(f"Morphism {morphism_id} not in category {category.name}")

        for node, obj in (nodes or {}).items():
            diagram.map_node(node, obj)
        for edge, morphism_id in (edges or {}).items():
            diagram.map_edge(edge, morphism_id)
        return diagram

    # ------------------------------------------------------------------
    # Functors and natural transformations
    # ------------------------------------------------------------------

    def define_functor(self, name: str, source_name: str, target_name: str,
                       object_map: Optional[Dict[str, str]] = None,
                       morphism_map: Optional[Dict[str, str]] = None) -> Functor:
        """Register a functor after checking every mapped id exists."""
        self._check_new(self.functors, name, "Functor")
        source = self.category(source_name)
        target = self.category(target_name)

        functor = Functor(name=name, source_category=source_name, target_category=target_name)
        for x, y in (object_map or {}).items():
            if x not in source.objects:
                raise ValidationError(f"Object {x} not in source category {source_name}")
            if y not in target.objects:
                raise ValidationError(f"Object {y} not in target category {target_name}")
            functor.add_object_mapping(x, y)
        for f, g in (morphism_map or {}).items():
            if f not in source.morphisms:
                raise ValidationError(f"Morphism {f} not in source category {source_name}")
            if g not in target.morphisms:
                raise ValidationError(f"Morphism {g} not in target category {target_name}")
            functor.add_morphism_mapping(f, g)

        self.functors[name] = functor
        return functor

    def functor(self, name: str) -> Functor:
        return self._lookup(self.functors, name, "Functor")

    def add_natural_transformation(self, name: str, source_functor: str, target_functor: str,
                                   components: Optional[Dict[str, str]] = None) -> NaturalTransformation:
        """Store a natural transformation; naturality is not checked."""
        self._check_new(self.natural_transformations, name, "Natural transformation")
        eta = NaturalTransformation(
            name=name,
            source_functor=self.functor(source_functor),
            target_functor=self.functor(target_functor),
        )
        for obj, morphism_id in (components or {}).items():
            eta.add_component(obj, morphism_id)
        self.natural_transformations[name] = eta
        return eta

    def natural_transformation(self, name: str) -> NaturalTransformation:
        return self._lookup(self.natural_transformations, name, "Natural transformation")

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------

    def compute_limit(self, diagram_name: str,
                      budget: Optional[SearchBudget] = None) -> LimitResult:
        diagram = self.diagram(diagram_name)
        return find_limit(
            self.category(diagram.category), self.shape(diagram.shape), diagram, budget
        )

    def check_adjunction(self, functor_name: str) -> AdjointResult:
        functor = self.functor(functor_name)
        return find_right_adjoint(
            self.category(functor.source_category),
            self.category(functor.target_category),
            functor,
        )

    def summary(self) -> Dict[str, Any]:
        """Get a summary of everything registered in the session."""
        return {
            "categories": {
                name: {"objects": len(c.objects), "morphisms": len(c.morphisms)}
                for name, c in self.categories.items()
            },
            "functors": {
                name: f"{f.source_category} -> {f.target_category}"
                for name, f in self.functors.items()
            },
            "shapes": {
                name: {"nodes": len(s.nodes), "edges": len(s.edges)}
                for name, s in self.shapes.items()
            },
            "diagrams": {
                name: f"{d.shape} -> {d.category}"
                for name, d in self.diagrams.items()
            },
            "natural_transformations": sorted(self.natural_transformations),
        }

    @staticmethod
    def _check_new(registry: Dict[str, Any], name: str, kind: str) -> None:
        if name in registry:
            raise ValidationError(f"{kind} {name} already exists")

    @staticmethod
    def _lookup(registry: Dict[str, Any], name: str, kind: str) -> Any:
        if name not in registry:
            raise ValidationError(f"{kind} {name} not found")
        return registry[name]
