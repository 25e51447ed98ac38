"""
DiagramChaser - Brute-Force Reasoning over Finite Categories

Small categories are given by explicit objects, morphisms and declared
composites. On top of that data the package searches for limits of finite
diagrams and for candidate right adjoints of functors.
"""

__version__ = "0.1.0"

from .categorical import Category, Functor, Morphism, NaturalTransformation, ValidationError
from .diagrams import Diagram, Edge, Shape
from .results import (
    AdjointCandidate,
    AdjointResult,
    Cone,
    ConeCheck,
    LimitResult,
    SearchBudget,
    SearchStatus,
)
from .cones import verify_cone
from .limits import LimitFinder, find_limit
from .adjoint import AdjointChecker, find_right_adjoint
from .session import Session

__all__ = [
    "Category",
    "Functor",
    "Morphism",
    "NaturalTransformation",
    "ValidationError",
    "Diagram",
    "Edge",
    "Shape",
    "AdjointCandidate",
    "AdjointResult",
    "Cone",
    "ConeCheck",
    "LimitResult",
    "SearchBudget",
    "SearchStatus",
    "verify_cone",
    "LimitFinder",
    "find_limit",
    "AdjointChecker",
    "find_right_adjoint",
    "Session",
]
