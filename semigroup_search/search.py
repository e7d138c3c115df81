"""
Búsquedas de semigrupos numéricos con un invariante fijo.

  - FixedFrobeniusSearch: búsqueda en anchura de todos los semigrupos con
    número de Frobenius F, partiendo de <F+1, ..., 2F+1>.
  - FixedGenusSearch: fuerza bruta sobre subconjuntos de [2, 5g] con género g.
  - FixedGenusMultiplicitySearch: como la anterior, con multiplicidad fija.

Todas comparten un SemigroupEngine (una sesión de memoización) y clasifican
cada semigrupo encontrado en interno u hoja.
"""

import itertools
import logging
import math
import time
from dataclasses import dataclass, field

import networkx as nx

from .engine import Classification, SemigroupEngine
from .numerical_semigroup import NumericalSemigroup
from .oracle import canonical_key

logger = logging.getLogger(__name__)


def extremal_generators(genus):
    """
    Generadores de <g+1, g+2, ..., 2g+1>, el semigrupo de género g con
    multiplicidad máxima. Para g = 0 es <1>.
    """
    return tuple(range(genus + 1, 2 * genus + 2))


def candidate_subsets(universe, sizes, first=None):
    """
    Genera de forma perezosa los subconjuntos del universo con los tamaños
    indicados, por tamaño creciente y en orden lexicográfico. Si se indica
    'first', solo se generan los subconjuntos cuyo mínimo es 'first'.
    Cada llamada empieza la enumeración de nuevo.
    """
    universe = sorted(universe)
    for size in sizes:
        if first is None:
            yield from itertools.combinations(universe, size)
        elif first in universe:
            rest = [x for x in universe if x > first]
            for tail in itertools.combinations(rest, size - 1):
                yield (first,) + tail


@dataclass
class Candidate:
    x: int
    semigroup: tuple


@dataclass
class SearchResult:
    parameters: dict
    semigroups: list = field(default_factory=list)
    internal: list = field(default_factory=list)
    leaves: list = field(default_factory=list)
    elapsed: float = 0.0

    def majority(self):
        """
        Compara la cantidad de semigrupos internos y hojas.
        """
        if len(self.internal) > len(self.leaves):
            return Classification.INTERNAL
        if len(self.internal) < len(self.leaves):
            return Classification.LEAF
        return None


class SemigroupSearch:
    """
    Estrategia de búsqueda. Las subclases implementan semigroups(), que
    genera los semigrupos encontrados en orden de aparición.
    """

    def __init__(self, engine=None):
        self.engine = engine if engine is not None else SemigroupEngine()

    def parameters(self):
        return {}

    def semigroups(self):
        raise NotImplementedError

    def semigroup(self, generators):
        return NumericalSemigroup(list(generators), engine=self.engine)

    def run(self, on_found=None):
        """
        Ejecuta la búsqueda completa y clasifica los resultados. Si se indica
        'on_found', se llama con cada semigrupo en cuanto se encuentra.
        """
        start = time.perf_counter()
        result = SearchResult(parameters=self.parameters())

        for S in self.semigroups():
            if on_found is not None:
                on_found(S)
            result.semigroups.append(S)
            if S.classification() is Classification.LEAF:
                result.leaves.append(S)
            else:
                result.internal.append(S)

        result.elapsed = time.perf_counter() - start
        logger.info("%s %s: %d internos, %d hojas en %.2fs", type(self).__name__, result.parameters,
                    len(result.internal), len(result.leaves), result.elapsed)
        return result


class FixedFrobeniusSearch(SemigroupSearch):
    def __init__(self, frobenius, engine=None):
        if not isinstance(frobenius, int) or frobenius <= 0:
            raise ValueError("F debe ser un entero positivo.")
        super().__init__(engine)
        self.F = frobenius
        self.graph = nx.DiGraph()

    def parameters(self):
        return {"F": self.F}

    def seed(self):
        """
        Semigrupo inicial S0 = <F+1, F+2, ..., 2F+1>, minimizado.
        """
        return self.engine.minimize(range(self.F + 1, 2 * self.F + 2))

    def candidates(self, S):
        """
        Devuelve los candidatos (x, T) con x en [2, min(S)), x != F, tales que
        T = minimize(S + {x}) conserva el número de Frobenius F.
        """
        candidates = []
        m = S[0] if S else self.F + 1
        for x in range(2, m):
            if x == self.F or x in S:
                continue
            T = self.engine.minimize(S + (x,))
            if self.engine.frobenius_valid(T, self.F):
                candidates.append(Candidate(x, T))
        return candidates

    def apery(self, semigroup):
        """
        Conjunto de Apéry respecto a F + 1.
        """
        return self.engine.apery(semigroup.generators, self.F + 1)

    def semigroups(self):
        """
        Búsqueda en anchura: cada nivel añade un generador menor que la
        multiplicidad a los semigrupos del nivel anterior.
        """
        self.graph = nx.DiGraph()
        seen = set()

        S0 = self.seed()
        seen.add(canonical_key(S0))
        self.graph.add_node(canonical_key(S0), generators=S0, level=0)
        yield self.semigroup(S0)

        current_level = [S0]
        level = 0
        while current_level:
            level += 1
            next_level = []
            for S in current_level:
                for c in self.candidates(S):
                    key = canonical_key(c.semigroup)
                    is_new = key not in seen
                    if is_new:
                        seen.add(key)
                        self.graph.add_node(key, generators=c.semigroup, level=level)
                        next_level.append(c.semigroup)
                    self.graph.add_edge(canonical_key(S), key, x=c.x, tree=is_new)
                    if is_new:
                        yield self.semigroup(c.semigroup)
            logger.debug("F=%d nivel %d: %d semigrupos nuevos", self.F, level, len(next_level))
            current_level = next_level


class FixedGenusSearch(SemigroupSearch):
    def __init__(self, genus, engine=None):
        if not isinstance(genus, int) or genus < 0:
            raise ValueError("El género debe ser un entero no negativo.")
        super().__init__(engine)
        self.genus = genus

    def parameters(self):
        return {"genus": self.genus}

    def universe_start(self):
        return 2

    def universe(self):
        """
        Universo de candidatos [inicio, factor * género].

        Un generador minimal n distinto de la multiplicidad m cumple
        n - m <= F, luego n <= F + m <= 3g. Con un factor menor que 3 la
        búsqueda podría perder semigrupos.
        """
        factor = self.engine.settings.genus_universe_factor
        if self.genus > 0 and factor < 3:
            raise ValueError(f"genus_universe_factor={factor} no cubre los generadores minimales (hace falta >= 3).")
        return range(self.universe_start(), factor * self.genus + 1)

    def subsets(self):
        return candidate_subsets(self.universe(), range(2, self.genus + 1))

    def accepts(self, subset):
        """
        Filtros de la fuerza bruta: mcd 1, género exacto y minimalidad de Hilbert.
        """
        if math.gcd(*subset) != 1:
            return False
        if self.engine.genus(subset) != self.genus:
            return False
        return self.engine.is_hilbert_minimal(subset)

    def include_extremal(self):
        return True

    def semigroups(self):
        for subset in self.subsets():
            if self.accepts(subset):
                yield self.semigroup(subset)

        # <g+1, ..., 2g+1> tiene g+1 generadores y no sale en la enumeración
        if self.include_extremal():
            yield self.semigroup(extremal_generators(self.genus))


class FixedGenusMultiplicitySearch(FixedGenusSearch):
    def __init__(self, genus, multiplicity, engine=None):
        if not isinstance(multiplicity, int) or multiplicity < 1:
            raise ValueError("La multiplicidad debe ser un entero positivo.")
        super().__init__(genus, engine)
        if genus < multiplicity - 1:
            raise ValueError("El género debe ser mayor o igual que multiplicidad - 1.")
        self.multiplicity = multiplicity

    def parameters(self):
        return {"genus": self.genus, "multiplicity": self.multiplicity}

    def universe_start(self):
        return self.multiplicity

    def subsets(self):
        # Solo interesan los subconjuntos cuyo mínimo es la multiplicidad
        return candidate_subsets(self.universe(), range(2, self.genus + 1), first=self.multiplicity)

    def include_extremal(self):
        return self.multiplicity == self.genus + 1
