import math

from .engine import SemigroupEngine
from .oracle import canonical_key

class NumericalSemigroup:
    def __init__(self, *args, engine=None):
        """
        Construye un semigrupo numérico a partir de un conjunto de generadores
        como argumentos: lista o secuencia de enteros positivos cuyo máximo común divisor es 1.
        Los invariantes se calculan con 'engine' (una sesión SemigroupEngine);
        si no se indica, se crea una nueva.
        """

        # Aceptamos tanto listas/tuplas como varios enteros
        if len(args) == 1 and isinstance(args[0], (list, tuple, set, frozenset)):
            gens = list(args[0])
        else:
            gens = list(args)

        # Validaciones
        L = set(gens)
        L.discard(0)

        if not L:
            raise ValueError("Debe haber al menos un generador.")

        if not all(isinstance(x, int) and x > 0 for x in L):
            raise ValueError("Todos los generadores deben ser enteros positivos.")

        if math.gcd(*L) != 1:
            raise ValueError("El máximo común divisor debe ser 1.")

        # Guardamos los generadores ordenados
        self.generators = tuple(sorted(L))
        self.multiplicity_val = min(self.generators)
        self.engine = engine if engine is not None else SemigroupEngine()

        self.minimal_generators_val = None
        self.conductor_val = None

        # Caso especial: S = N
        if self.multiplicity_val == 1:
            self.minimal_generators_val = (1,)
            self.conductor_val = 0

    def __contains__(self, n):
        """
        Permite usar la sintaxis 'n in S'.
        """
        return self.belongs(n)

    def __eq__(self, other):
        if not isinstance(other, NumericalSemigroup):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __str__(self):
        return canonical_key(self.generators)

    def __repr__(self):
        return f"NumericalSemigroup{self.generators}"

    def key(self):
        return canonical_key(self.generators)

    def multiplicity(self):
        return self.multiplicity_val

    def minimal_generators(self):
        """
        Devuelve el sistema mínimo de generadores del semigrupo numérico.
        """
        if self.minimal_generators_val is None:
            self.minimal_generators_val = self.engine.minimize(self.generators)
        return self.minimal_generators_val

    def embedding_dimension(self):
        return len(self.minimal_generators())

    def conductor(self):
        if self.conductor_val is None:
            self.conductor_val = self.engine.conductor(self.generators)
        return self.conductor_val

    def genus(self):
        return self.engine.genus(self.generators)

    def frobenius_number(self):
        return self.engine.frobenius(self.generators)

    def gaps(self):
        """
        Devuelve los gaps (saltos) del semigrupo.
        """
        return tuple(n for n in range(self.conductor()) if n not in self)

    def small_elements(self):
        """
        Devuelve todos los elementos del semigrupo hasta el conductor (F + 1).
        """
        return tuple(n for n in range(self.conductor() + 1) if n in self)

    def belongs(self, n):
        """
        Determina si el entero 'n' pertenece al semigrupo numérico.
        """
        if n < 0: return False
        if n == 0: return True
        if self.conductor_val is not None and n >= self.conductor_val:
            return True
        return self.engine.representable(n, self.generators)

    def apery(self, m=None):
        """
        Calcula el conjunto de Apéry del semigrupo respecto a m (que pertenezca
        o no a S). Si no se indica m, se usa la multiplicidad del semigrupo.
        Cada clase de resto tiene un elemento en [C, C + m), así que basta
        con la tabla hasta el conductor C más m.
        """
        if m is None:
            m = self.multiplicity()
        return self.engine.apery(self.generators, m, bound=self.conductor() + m)

    def is_hilbert_minimal(self):
        return self.engine.is_hilbert_minimal(self.generators)

    def classification(self):
        return self.engine.classify(self.generators)
