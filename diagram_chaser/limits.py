"""
Limit Finder

Brute-force search for a limit of a finite diagram: enumerate cones at every
apex, then keep the first one through which every cone factors by exactly one
mediating morphism.

Apexes, shape nodes and hom-sets are all enumerated in sorted order, so a
search over unchanged inputs always returns the same cone.
"""

import logging
import time
from typing import Dict, List, Optional

from .categorical import Category
from .constants import MAX_LIMIT_OBJECTS
from .cones import candidate_cones, mediating_morphisms, verify_cone
from .diagrams import Diagram, Shape
from .results import Cone, LimitResult, SearchBudget, SearchStatus

logger = logging.getLogger(__name__)


class LimitFinder:
    """
    Searches a finite category for a universal cone over a diagram.

    The universality test compares a candidate against every cone at every
    apex, so the work grows with the product of hom-set sizes. Two bounds
    apply: categories above MAX_LIMIT_OBJECTS are refused outright, and the
    SearchBudget caps the number of candidates examined.
    """

    def __init__(self, category: Category, shape: Shape, diagram: Diagram,
                 budget: Optional[SearchBudget] = None):
        self.category = category
        self.shape = shape
        self.diagram = diagram
        self.budget = budget or SearchBudget()

        self.nodes: List[str] = shape.sorted_nodes()
        self.apexes: List[str] = sorted(category.objects)
        self.candidates_explored = 0
        self.incomplete_checks = 0

        self._cones: Dict[str, List[Cone]] = {}
        self._deadline: Optional[float] = None
        self._exhausted = False

    def find_limit(self) -> LimitResult:
        """
        Run the search.

        Returns:
            LimitResult with the first universal cone, or the reason none
            was returned
        """
        if len(self.category.objects) > MAX_LIMIT_OBJECTS:
            logger.warning(
                "Category %s has %d objects; limit search is capped at %d",
                self.category.name, len(self.category.objects), MAX_LIMIT_OBJECTS,
            )
            return LimitResult(
                SearchStatus.INFEASIBLE,
                reason=f"category {self.category.name} too large for brute-force search "
                       f"(> {MAX_LIMIT_OBJECTS} objects)",
            )

        missing = self.diagram.missing_nodes(self.shape)
        if missing:
            return LimitResult(
                SearchStatus.INCOMPLETE_INPUT,
                reason=f"diagram {self.diagram.name} has no image for node(s) {', '.join(missing)}",
            )

        if self.budget.max_seconds is not None:
            self._deadline = time.monotonic() + self.budget.max_seconds

        for apex in self.apexes:
            cones = self._cones_at(apex)
            logger.debug("Apex %s: %d cone(s)", apex, len(cones))
            for cone in cones:
                universal = self._is_universal(cone)
                if self._exhausted:
                    break
                if universal:
                    logger.info("Limit of %s found at apex %s", self.diagram.name, apex)
                    return self._result(SearchStatus.FOUND, cone=cone)
            if self._exhausted:
                break

        if self._exhausted:
            logger.warning(
                "Limit search for %s stopped after %d candidates",
                self.diagram.name, self.candidates_explored,
            )
            return self._result(
                SearchStatus.BUDGET_EXCEEDED,
                reason=f"search budget exhausted after {self.candidates_explored} candidates",
            )

        missing_edges = self.diagram.missing_edges(self.shape)
        if missing_edges:
            return self._result(
                SearchStatus.INCOMPLETE_INPUT,
                reason=f"no limit found; diagram {self.diagram.name} has no image "
                       f"for edge(s) {', '.join(missing_edges)}",
            )

        logger.info("No limit found for %s", self.diagram.name)
        return self._result(
            SearchStatus.NEGATIVE, reason="exhaustive search found no universal cone"
        )

    def _cones_at(self, apex: str) -> List[Cone]:
        """Verified cones at ``apex``, computed once per search."""
        if apex in self._cones:
            return self._cones[apex]

        cones = []
        for candidate in candidate_cones(self.category, self.nodes, self.diagram, apex):
            if not self._charge():
                return cones
            check = verify_cone(self.category, self.shape, self.diagram, candidate)
            if check:
                cones.append(candidate)
            elif check.incomplete:
                self.incomplete_checks += 1

        self._cones[apex] = cones
        return cones

    def _is_universal(self, cone: Cone) -> bool:
        """Every cone factors through ``cone`` by exactly one morphism."""
        for other_apex in self.apexes:
            for other in self._cones_at(other_apex):
                if self._exhausted or not self._charge():
                    return False
                if len(mediating_morphisms(self.category, cone, other)) != 1:
                    return False
            if self._exhausted:
                return False
        return True

    def _charge(self) -> bool:
        """Count one candidate; False once the budget is spent."""
        self.candidates_explored += 1
        limit = self.budget.max_candidates
        if limit is not None and self.candidates_explored > limit:
            self._exhausted = True
        elif self._deadline is not None and time.monotonic() > self._deadline:
            self._exhausted = True
        return not self._exhausted

    def _result(self, status: SearchStatus, cone: Optional[Cone] = None,
                reason: str = "") -> LimitResult:
        return LimitResult(
            status,
            cone=cone,
            reason=reason,
            candidates_explored=self.candidates_explored,
            cones_found=sum(len(c) for c in self._cones.values()),
            incomplete_checks=self.incomplete_checks,
        )


def find_limit(category: Category, shape: Shape, diagram: Diagram,
               budget: Optional[SearchBudget] = None) -> LimitResult:
    """Search ``category`` for a limit of ``diagram`` indexed by ``shape``."""
    return LimitFinder(category, shape, diagram, budget).find_limit()
