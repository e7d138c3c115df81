"""
Motor compartido de cálculo de invariantes de semigrupos numéricos.

Un SemigroupEngine es una sesión de cálculo: guarda en tablas de memoización
(indexadas por la clave canónica del conjunto de generadores) el conductor,
el género, el número de Frobenius y los conjuntos de Apéry ya calculados.
Las tres búsquedas comparten un único motor por sesión.
"""

import enum
import logging
import math

import numpy as np

from .config import get_settings
from .oracle import canonical_key, expand, first_run, reachability_table, representable

logger = logging.getLogger(__name__)


class InsufficientBoundError(RuntimeError):
    """
    La cota heurística de una tabla de alcanzables se ha quedado corta.
    """


class Classification(enum.Enum):
    INTERNAL = "interno"
    LEAF = "hoja"


def _clean(generators):
    # Quitamos ceros y repetidos, y ordenamos
    return tuple(sorted({int(g) for g in generators if g != 0}))


def _check_numerical(gens):
    if not gens:
        raise ValueError("Debe haber al menos un generador.")
    if any(g < 0 for g in gens):
        raise ValueError("Todos los generadores deben ser enteros positivos.")
    if math.gcd(*gens) != 1:
        raise ValueError("El máximo común divisor debe ser 1.")


class SemigroupEngine:
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else get_settings()

        # Tablas de memoización de la sesión
        self._conductor_genus = {}
        self._frobenius = {}
        self._apery = {}

    def cache_size(self):
        return len(self._conductor_genus) + len(self._frobenius) + len(self._apery)

    def representable(self, value, generators):
        return representable(value, generators)

    def minimize(self, generators):
        """
        Devuelve el sistema mínimo de generadores.

        Cada elemento se conserva si no es representable con el resto de
        elementos del conjunto original. Como solo se puede escribir con
        elementos estrictamente menores y los repetidos ya se han eliminado,
        comparar con el conjunto original da el mismo resultado que comparar
        con el conjunto ya reducido.
        """
        gens = _clean(generators)
        minimal = []
        for i, g in enumerate(gens):
            others = gens[:i] + gens[i + 1:]
            if not representable(g, others):
                minimal.append(g)
        return tuple(minimal)

    def conductor_and_genus(self, generators):
        """
        Calcula el conductor y el género.

        Se busca en la tabla de alcanzables el primer bloque de min(S)
        enteros consecutivos; a partir de él todo es alcanzable sumando min(S).
        Si la cota (inicialmente sum(S)) no basta, se duplica.
        """
        gens = _clean(generators)
        key = canonical_key(gens)
        if key in self._conductor_genus:
            return self._conductor_genus[key]

        _check_numerical(gens)
        m = gens[0]
        bound = sum(gens)

        while True:
            table = reachability_table(gens, bound)
            conductor = first_run(table, m)
            if conductor is not None:
                break
            bound *= 2
            logger.debug("%s: cota duplicada a %d", key, bound)

        genus = int(np.count_nonzero(~table[:conductor]))
        self._conductor_genus[key] = (conductor, genus)
        return conductor, genus

    def conductor(self, generators):
        return self.conductor_and_genus(generators)[0]

    def genus(self, generators):
        return self.conductor_and_genus(generators)[1]

    def frobenius(self, generators):
        """
        Devuelve el número de Frobenius (mayor entero no representable), -1 si
        1 está entre los generadores, o None si el conjunto es vacío o su
        máximo común divisor no es 1.
        """
        gens = _clean(generators)
        key = canonical_key(gens)
        if key in self._frobenius:
            return self._frobenius[key]

        if not gens or math.gcd(*gens) != 1:
            return None

        m = gens[0]
        bound = sum(gens)

        # La tabla solo es fiable si termina en un bloque de m alcanzables
        table = reachability_table(gens, bound)
        while not table[-m:].all():
            bound *= 2
            logger.debug("%s: cota duplicada a %d", key, bound)
            table = reachability_table(gens, bound)

        gaps = np.flatnonzero(~table)
        F = int(gaps[-1]) if gaps.size else -1
        self._frobenius[key] = F
        return F

    def frobenius_valid(self, generators, F):
        """
        Comprueba que F no es representable y F + 1 sí lo es.
        """
        return not representable(F, generators) and representable(F + 1, generators)

    def apery(self, generators, period, bound=None):
        """
        Calcula el conjunto de Apéry respecto a 'period': para cada resto r
        módulo period, el menor elemento del semigrupo congruente con r.
        La posición r de la tupla devuelta corresponde al resto r.

        Sin 'bound' se usa la cota heurística apery_bound_factor * period^2,
        válida para los semigrupos de la búsqueda con Frobenius fijo
        (period = F + 1), pero no para un semigrupo cualquiera.
        """
        if period < 1:
            raise ValueError("El periodo debe ser un entero positivo.")

        gens = _clean(generators)
        if bound is None:
            bound = self.settings.apery_bound_factor * period * period

        key = (canonical_key(gens), period, bound)
        if key in self._apery:
            return self._apery[key]

        table = reachability_table(gens, bound)
        apery = []
        for r in range(period):
            hits = np.flatnonzero(table[r::period])
            if hits.size == 0:
                raise InsufficientBoundError(
                    f"Ningún elemento de {canonical_key(gens)} congruente con {r} "
                    f"módulo {period} por debajo de {bound}."
                )
            apery.append(r + period * int(hits[0]))

        self._apery[key] = tuple(apery)
        return tuple(apery)

    def is_hilbert_minimal(self, generators):
        """
        Comprueba que el conjunto es un sistema minimal de generadores que
        "cierra" un semigrupo numérico:
          1. La expansión de sumas hasta conductor + min(S) contiene un bloque
             de min(S) consecutivos.
          2. Ningún generador se alcanza con los demás.
          3. Todos los generadores aparecen en la expansión del paso 1.
        """
        gens = _clean(generators)
        if len(gens) == 1:
            return True

        m = gens[0]
        limit = self.conductor(gens) + m
        hilbert = expand(gens, limit)

        # Paso 1: bloque de consecutivos
        consecutive = 0
        prev = -2  # el primero no cuenta como consecutivo
        for n in sorted(hilbert):
            consecutive = consecutive + 1 if n == prev + 1 else 1
            if consecutive >= m:
                break
            prev = n
        if consecutive < m:
            return False

        # Paso 2: ningún generador se puede generar sin él mismo
        for i, g in enumerate(gens):
            others = gens[:i] + gens[i + 1:]
            if g in expand(others, g + 1):
                return False

        # Paso 3: todos los generadores están en la expansión
        return all(g in hilbert for g in gens)

    def classify(self, generators):
        """
        Hoja si el número de Frobenius supera al mayor generador; interno en
        otro caso.
        """
        F = self.frobenius(generators)
        if F is not None and F > max(generators):
            return Classification.LEAF
        return Classification.INTERNAL
