"""
Adjoint Checker

Heuristic search for the object part of a right adjoint G: B → A of a functor
F: A → B. An adjunction needs a natural bijection Hom_B(F(x), b) ≅ Hom_A(x, G(b));
this module only compares the sizes of the two hom-sets, which is necessary
but not sufficient. Results are therefore returned as unverified candidates.
"""

import logging
from typing import Dict, List

import numpy as np

from .categorical import Category, Functor
from .constants import MAX_ADJOINT_OBJECTS
from .results import AdjointCandidate, AdjointResult, SearchStatus

logger = logging.getLogger(__name__)


def hom_count_matrix(category: Category, sources: List[str], targets: List[str]) -> np.ndarray:
    """
    Hom-set sizes |Hom(s, t)| for every pair.

    Args:
        category: Category whose morphisms are counted
        sources: Row objects, repeats allowed
        targets: Column objects

    Returns:
        Integer matrix of shape (len(sources), len(targets))
    """
    counts = np.zeros((len(sources), len(targets)), dtype=np.int64)
    for i, source in enumerate(sources):
        for j, target in enumerate(targets):
            counts[i, j] = len(category.hom(source, target))
    return counts


class AdjointChecker:
    """
    Looks for G(b) for every object b of B.

    G(b) is the first object a of A, in sorted order, such that
    |Hom_B(F(x), b)| == |Hom_A(x, a)| for every object x of A.
    """

    def __init__(self, source: Category, target: Category, functor: Functor):
        self.source = source
        self.target = target
        self.functor = functor

    def find_right_adjoint(self) -> AdjointResult:
        """
        Run the search.

        Returns:
            AdjointResult carrying an unverified AdjointCandidate on success
        """
        if (len(self.source.objects) > MAX_ADJOINT_OBJECTS
                or len(self.target.objects) > MAX_ADJOINT_OBJECTS):
            logger.warning(
                "Categories %s/%s too large for adjoint search (> %d objects)",
                self.source.name, self.target.name, MAX_ADJOINT_OBJECTS,
            )
            return AdjointResult(
                SearchStatus.INFEASIBLE,
                reason=f"categories too large for brute-force adjoint search "
                       f"(> {MAX_ADJOINT_OBJECTS} objects)",
            )

        xs = sorted(self.source.objects)
        bs = sorted(self.target.objects)

        unmapped = [x for x in xs if self.functor.map_object(x) is None]
        if unmapped:
            return AdjointResult(
                SearchStatus.INCOMPLETE_INPUT,
                reason=f"functor {self.functor.name} has no image for object(s) {', '.join(unmapped)}",
            )

        # Row x of target_counts is Hom_B(F(x), -); row x of source_counts is Hom_A(x, -)
        images = [self.functor.map_object(x) for x in xs]
        target_counts = hom_count_matrix(self.target, images, bs)
        source_counts = hom_count_matrix(self.source, xs, xs)

        mapping: Dict[str, str] = {}
        unmatched = []
        for j, b in enumerate(bs):
            match = self._first_match(target_counts[:, j], source_counts, xs)
            if match is None:
                unmatched.append(b)
            else:
                mapping[b] = match
            logger.debug("G(%s) = %s", b, match)

        if unmatched:
            logger.info("No right adjoint candidate for %s", self.functor.name)
            return AdjointResult(
                SearchStatus.NEGATIVE,
                reason=f"no object of {self.source.name} matches hom-set sizes "
                       f"for {', '.join(unmatched)}",
                unmatched=unmatched,
            )

        logger.info("Right adjoint candidate for %s: %s", self.functor.name, mapping)
        return AdjointResult(SearchStatus.FOUND, candidate=AdjointCandidate(mapping))

    @staticmethod
    def _first_match(column: np.ndarray, source_counts: np.ndarray, xs: List[str]):
        for i, a in enumerate(xs):
            if np.array_equal(column, source_counts[:, i]):
                return a
        return None


def find_right_adjoint(source: Category, target: Category, functor: Functor) -> AdjointResult:
    """Search for the object part of a right adjoint to ``functor``."""
    return AdjointChecker(source, target, functor).find_right_adjoint()
