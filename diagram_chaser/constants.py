# diagram_chaser/constants.py
"""
DiagramChaser Constants

Limits and defaults shared by the search engine:

SIZE GUARDS (brute-force feasibility)
- MAX_LIMIT_OBJECTS: largest category the limit finder will search
- MAX_ADJOINT_OBJECTS: largest source/target category for the adjoint checker

SEARCH BUDGET
- DEFAULT_MAX_CANDIDATES: leg combinations examined before a search aborts

NAMING
- IDENTITY_PREFIX: identity morphisms are named IDENTITY_PREFIX + object
"""


# =============================================================================
# SIZE GUARDS
# =============================================================================

# A category with exactly this many objects is still searched
MAX_LIMIT_OBJECTS = 8
MAX_ADJOINT_OBJECTS = 7


# =============================================================================
# SEARCH BUDGET
# =============================================================================

# Counts outer cone candidates and the inner ones visited by universality checks
DEFAULT_MAX_CANDIDATES = 1_000_000

assert DEFAULT_MAX_CANDIDATES > 0, "Default search budget must be positive"


# =============================================================================
# NAMING
# =============================================================================

IDENTITY_PREFIX = "id_"


def identity_id(obj: str) -> str:
    """Identifier of the identity morphism on ``obj``."""
    return f"{IDENTITY_PREFIX}{obj}"
