"""
Fixtures compartidas por los tests.
"""

import pytest

from semigroup_search.config import Settings
from semigroup_search.engine import SemigroupEngine


def _brute_force_elements(generators, limit):
    # Elementos del semigrupo hasta 'limit', sin pasar por el oráculo
    elements = {0}
    for n in range(1, limit + 1):
        if any(g <= n and (n - g) in elements for g in generators):
            elements.add(n)
    return elements


@pytest.fixture
def settings() -> Settings:
    return Settings(apery_bound_factor=2, genus_universe_factor=5, log_level="WARNING")


@pytest.fixture
def engine(settings) -> SemigroupEngine:
    """Sesión de cálculo nueva para cada test."""
    return SemigroupEngine(settings)


@pytest.fixture
def brute_force_elements():
    return _brute_force_elements


@pytest.fixture
def brute_force_apery(brute_force_elements):
    """Menor elemento de cada clase de resto, por búsqueda directa."""
    def apery(generators, period, limit=500):
        elements = brute_force_elements(generators, limit)
        return tuple(min(e for e in elements if e % period == r) for r in range(period))
    return apery
