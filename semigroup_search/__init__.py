"""

semigroup_search
================
Invariantes de semigrupos numéricos y búsqueda de todos los semigrupos con
número de Frobenius, género o género y multiplicidad fijos.
"""

# oráculo de representabilidad
from .oracle import canonical_key, representable, reachability_table

# motor de invariantes
from .engine import Classification, InsufficientBoundError, SemigroupEngine

from .numerical_semigroup import NumericalSemigroup

# búsquedas
from .search import (
    FixedFrobeniusSearch,
    FixedGenusSearch,
    FixedGenusMultiplicitySearch,
    SearchResult,
    candidate_subsets,
)

__all__ = [
    # oracle
    "canonical_key",
    "representable",
    "reachability_table",
    # engine
    "Classification",
    "InsufficientBoundError",
    "SemigroupEngine",
    "NumericalSemigroup",
    # search
    "FixedFrobeniusSearch",
    "FixedGenusSearch",
    "FixedGenusMultiplicitySearch",
    "SearchResult",
    "candidate_subsets",
]
