"""
Tests de las tres búsquedas: Frobenius fijo (anchura), género fijo y género
con multiplicidad fija (fuerza bruta).
"""

import itertools

import pytest

from semigroup_search.config import Settings
from semigroup_search.engine import Classification, SemigroupEngine
from semigroup_search.search import (
    FixedFrobeniusSearch,
    FixedGenusMultiplicitySearch,
    FixedGenusSearch,
    candidate_subsets,
    extremal_generators,
)


def keys(semigroups):
    return [str(S) for S in semigroups]


# ============================================================================
# ENUMERACIÓN DE SUBCONJUNTOS
# ============================================================================

def test_candidate_subsets_order():
    assert list(candidate_subsets(range(2, 6), range(2, 4))) == [
        (2, 3), (2, 4), (2, 5), (3, 4), (3, 5), (4, 5),
        (2, 3, 4), (2, 3, 5), (2, 4, 5), (3, 4, 5),
    ]


def test_candidate_subsets_is_lazy_and_restartable():
    universe = range(2, 40)
    first = candidate_subsets(universe, range(2, 20))
    assert next(first) == (2, 3)
    assert next(first) == (2, 4)
    assert next(candidate_subsets(universe, range(2, 20))) == (2, 3)


def test_candidate_subsets_with_fixed_minimum():
    subsets = list(candidate_subsets(range(3, 7), range(2, 4), first=3))
    assert subsets == [(3, 4), (3, 5), (3, 6), (3, 4, 5), (3, 4, 6), (3, 5, 6)]
    assert list(candidate_subsets(range(3, 7), range(2, 4), first=9)) == []


def test_extremal_generators():
    assert extremal_generators(3) == (4, 5, 6, 7)
    assert extremal_generators(0) == (1,)


# ============================================================================
# FROBENIUS FIJO
# ============================================================================

def test_frobenius_5(engine):
    search = FixedFrobeniusSearch(5, engine=engine)
    result = search.run()

    assert keys(result.semigroups) == ["<6,7,8,9,10,11>", "<2,7>", "<3,7,8>", "<4,6,7,9>", "<3,4>"]
    assert result.semigroups[0].frobenius_number() == 5
    assert keys(result.leaves) == ["<3,4>"]
    assert keys(result.internal) == ["<6,7,8,9,10,11>", "<2,7>", "<3,7,8>", "<4,6,7,9>"]


def test_frobenius_seed_is_emitted_first(engine):
    search = FixedFrobeniusSearch(5, engine=engine)
    first = next(search.semigroups())
    assert first.generators == (6, 7, 8, 9, 10, 11)
    assert first.frobenius_number() == 5


@pytest.mark.parametrize("F,count", [(1, 1), (2, 1), (3, 2), (4, 2), (5, 5), (6, 4), (7, 11)])
def test_frobenius_counts(engine, F, count):
    result = FixedFrobeniusSearch(F, engine=engine).run()
    assert len(result.semigroups) == count
    assert len(set(keys(result.semigroups))) == count
    for S in result.semigroups:
        assert S.frobenius_number() == F


@pytest.mark.parametrize("F", [5, 7, 8])
def test_frobenius_leaves_have_all_generators_below_F(engine, F):
    result = FixedFrobeniusSearch(F, engine=engine).run()
    for S in result.leaves:
        assert max(S.generators) < F
    for S in result.internal:
        assert max(S.generators) >= F


@pytest.mark.parametrize("F", [5, 8])
def test_frobenius_apery_sets(engine, brute_force_apery, F):
    search = FixedFrobeniusSearch(F, engine=engine)
    for S in search.run().semigroups:
        assert search.apery(S) == brute_force_apery(S.generators, F + 1)


def test_frobenius_search_graph(engine):
    search = FixedFrobeniusSearch(5, engine=engine)
    search.run()
    G = search.graph

    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 5
    tree = [(u, v) for u, v, data in G.edges(data=True) if data["tree"]]
    assert len(tree) == 4
    assert G.edges["<4,6,7,9>", "<3,4>"]["x"] == 3
    assert G.nodes["<6,7,8,9,10,11>"]["level"] == 0
    assert G.nodes["<3,4>"]["level"] == 2


def test_frobenius_candidates(engine):
    search = FixedFrobeniusSearch(5, engine=engine)
    candidates = search.candidates((4, 6, 7, 9))
    assert [(c.x, c.semigroup) for c in candidates] == [(2, (2, 7)), (3, (3, 4))]


@pytest.mark.parametrize("F", [0, -3])
def test_frobenius_must_be_positive(F):
    with pytest.raises(ValueError):
        FixedFrobeniusSearch(F)


# ============================================================================
# GÉNERO FIJO
# ============================================================================

def test_genus_0(engine):
    result = FixedGenusSearch(0, engine=engine).run()
    assert keys(result.internal) == ["<1>"]
    assert result.leaves == []


def test_genus_1(engine):
    result = FixedGenusSearch(1, engine=engine).run()
    assert keys(result.semigroups) == ["<2,3>"]
    # F(<2,3>) = 1 no supera a 3: interno
    assert keys(result.internal) == ["<2,3>"]
    assert result.leaves == []


def test_genus_2(engine):
    result = FixedGenusSearch(2, engine=engine).run()
    assert keys(result.internal) == ["<2,5>", "<3,4,5>"]
    assert result.leaves == []


def test_genus_3(engine):
    result = FixedGenusSearch(3, engine=engine).run()
    assert keys(result.internal) == ["<2,7>", "<3,5,7>", "<4,5,6,7>"]
    assert keys(result.leaves) == ["<3,4>"]
    assert result.majority() is Classification.INTERNAL


def test_genus_4_is_complete(engine):
    result = FixedGenusSearch(4, engine=engine).run()
    assert len(result.semigroups) == 7
    assert len(set(keys(result.semigroups))) == 7
    for S in result.semigroups:
        assert S.genus() == 4
        assert engine.minimize(S.generators) == S.generators
    assert keys(result.semigroups)[-1] == "<5,6,7,8,9>"


def test_genus_universe_factor_must_cover_minimal_generators():
    engine = SemigroupEngine(Settings(genus_universe_factor=2))
    with pytest.raises(ValueError):
        FixedGenusSearch(3, engine=engine).run()


def test_genus_must_be_non_negative():
    with pytest.raises(ValueError):
        FixedGenusSearch(-1)


# ============================================================================
# GÉNERO Y MULTIPLICIDAD FIJOS
# ============================================================================

@pytest.mark.parametrize("genus,multiplicity,internal,leaves", [
    (0, 1, ["<1>"], []),
    (1, 2, ["<2,3>"], []),
    (2, 3, ["<3,4,5>"], []),
    (3, 2, ["<2,7>"], []),
    (3, 3, ["<3,5,7>"], ["<3,4>"]),
    (3, 4, ["<4,5,6,7>"], []),
    (3, 1, [], []),
])
def test_genus_multiplicity(engine, genus, multiplicity, internal, leaves):
    result = FixedGenusMultiplicitySearch(genus, multiplicity, engine=engine).run()
    assert keys(result.internal) == internal
    assert keys(result.leaves) == leaves


def test_genus_multiplicity_partitions_genus_search(engine):
    by_genus = set(keys(FixedGenusSearch(4, engine=engine).run().semigroups))
    by_multiplicity = [
        keys(FixedGenusMultiplicitySearch(4, m, engine=engine).run().semigroups) for m in range(1, 6)
    ]
    assert set(itertools.chain.from_iterable(by_multiplicity)) == by_genus
    assert sum(len(k) for k in by_multiplicity) == len(by_genus)


@pytest.mark.parametrize("genus,multiplicity", [(1, 3), (0, 2), (2, 0), (-1, 1)])
def test_genus_multiplicity_rejects_invalid_parameters(genus, multiplicity):
    with pytest.raises(ValueError):
        FixedGenusMultiplicitySearch(genus, multiplicity)
