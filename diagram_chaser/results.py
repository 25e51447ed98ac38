"""
Search Results

Value types returned by the cone verifier, the limit finder and the adjoint
checker. None of the searches raise for a negative outcome: every result
carries a ``status`` and a human-readable ``reason``.
"""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field
from enum import Enum

from .constants import DEFAULT_MAX_CANDIDATES


class SearchStatus(Enum):
    """Outcome of a search or of a single cone check."""
    FOUND = "found"
    NEGATIVE = "negative"                  # exhaustive search, nothing satisfied
    INFEASIBLE = "infeasible"              # size guard tripped before searching
    BUDGET_EXCEEDED = "budget_exceeded"    # aborted part way through
    INCOMPLETE_INPUT = "incomplete_input"  # diagram or functor lacks an image


@dataclass(frozen=True)
class SearchBudget:
    """
    Limits on a single brute-force search.

    max_candidates counts leg combinations examined plus cone pairs compared
    during universality checks. max_seconds is a wall-clock limit; leaving it
    unset keeps results reproducible.
    """
    max_candidates: Optional[int] = DEFAULT_MAX_CANDIDATES
    max_seconds: Optional[float] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.max_candidates is not None and self.max_candidates < 1:
            raise ValueError("max_candidates must be >= 1")
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise ValueError("max_seconds must be > 0")

    @classmethod
    def unlimited(cls) -> "SearchBudget":
        """Budget with no candidate or time limit."""
        return cls(max_candidates=None, max_seconds=None)


@dataclass
class Cone:
    """An apex object and one leg morphism per shape node."""
    apex: str
    legs: Dict[str, str] = field(default_factory=dict)

    def leg(self, node: str) -> Optional[str]:
        """Leg at ``node``, or None if the cone has none."""
        return self.legs.get(node)


@dataclass
class ConeCheck:
    """Verdict of the cone verifier; truthy iff the cone commutes."""
    status: SearchStatus
    reason: str = ""
    edge: Optional[str] = None

    @property
    def commutes(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def incomplete(self) -> bool:
        return self.status is SearchStatus.INCOMPLETE_INPUT

    def __bool__(self) -> bool:
        return self.commutes


@dataclass
class LimitResult:
    """Outcome of a limit search."""
    status: SearchStatus
    cone: Optional[Cone] = None
    reason: str = ""
    candidates_explored: int = 0
    cones_found: int = 0
    incomplete_checks: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def describe(self) -> str:
        """Render the result for display."""
        if self.cone is None:
            return f"No limit found: {self.reason}"
        lines = [f"Found limit with apex: {self.cone.apex}", "Legs:"]
        lines.extend(f" - {node} : {leg}" for node, leg in self.cone.legs.items())
        return "\n".join(lines)

    def summary(self) -> Dict[str, Any]:
        """Get the search outcome as a plain dictionary."""
        return {
            "status": self.status.value,
            "apex": self.cone.apex if self.cone else None,
            "legs": dict(self.cone.legs) if self.cone else {},
            "reason": self.reason,
            "candidates_explored": self.candidates_explored,
            "cones_found": self.cones_found,
            "incomplete_checks": self.incomplete_checks,
        }


@dataclass
class AdjointCandidate:
    """
    Object assignment G: B → A that passed the hom-set cardinality test.

    Equal hom-set sizes are necessary for an adjunction but not sufficient;
    ``verified`` stays False because no natural bijection is constructed.
    """
    mapping: Dict[str, str]
    verified: bool = False

    def __getitem__(self, obj: str) -> str:
        return self.mapping[obj]


@dataclass
class AdjointResult:
    """Outcome of a right-adjoint search."""
    status: SearchStatus
    candidate: Optional[AdjointCandidate] = None
    reason: str = ""
    unmatched: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def describe(self) -> str:
        """Render the result for display."""
        if self.candidate is None:
            return f"No right adjoint found (heuristic search): {self.reason}"
        lines = ["Found candidate right adjoint mapping B->A (unverified, hom-set sizes only):"]
        lines.extend(f" - {b} -> {a}" for b, a in self.candidate.mapping.items())
        return "\n".join(lines)

    def summary(self) -> Dict[str, Any]:
        """Get the candidate mapping and its status as a plain dictionary."""
        return {
            "status": self.status.value,
            "mapping": dict(self.candidate.mapping) if self.candidate else {},
            "verified": self.candidate.verified if self.candidate else False,
            "reason": self.reason,
            "unmatched": list(self.unmatched),
        }
