import numpy as np

# Funciones auxiliares sobre conjuntos de generadores:
def canonical_key(generators):
    """
    Devuelve la clave canónica de un conjunto de generadores: la notación
    angular <g1,...,gk> con los generadores ordenados y sin repetir.
    Dos conjuntos con la misma clave se consideran el mismo semigrupo.
    """
    return "<" + ",".join(str(g) for g in sorted(set(generators))) + ">"

def SetAdd(L1, L2, limit=None):
    """
    Devuelve la lista ordenada y sin repetidos de todas las sumas a + b con
    a en L1 y b en L2. Si se especifica 'limit', solo se guardan las sumas
    menores o iguales a ese límite.
    """
    sums = {a + b for a in L1 for b in L2}
    if limit is not None:
        sums = {s for s in sums if s <= limit}
    return sorted(sums)

def expand(generators, limit):
    """
    Expande en anchura todas las sumas parciales de los generadores, partiendo
    de 0, sin superar 'limit'. Devuelve el conjunto de valores alcanzados.
    """
    gens = [g for g in generators if g > 0]
    elements = {0}
    current_layer = [0]

    # Cada capa suma un generador más a los elementos nuevos de la capa anterior
    while current_layer:
        new_elements = [x for x in SetAdd(current_layer, gens, limit=limit) if x not in elements]
        elements.update(new_elements)
        current_layer = new_elements

    return elements

def reachability_table(generators, bound):
    """
    Construye la tabla de alcanzables: un array booleano de tamaño bound + 1
    donde la posición i vale True si i es combinación lineal no negativa de
    los generadores.

    Se parte de table[0] = True y se cierra la tabla bajo la suma de cada
    generador g. Dentro de cada clase de resto módulo g, i es alcanzable en
    cuanto lo sea algún j <= i de la misma clase, así que basta un OR
    acumulado por clase.
    """
    table = np.zeros(bound + 1, dtype=bool)
    table[0] = True

    for g in sorted(set(generators)):
        if g <= 0 or g > bound:
            continue
        for r in range(g):
            table[r::g] = np.logical_or.accumulate(table[r::g])

    return table

def representable(value, generators):
    """
    Determina si 'value' es combinación lineal no negativa de los generadores.
    """
    if value < 0:
        return False
    if value == 0:
        return True
    return bool(reachability_table(generators, value)[value])

def first_run(table, length):
    """
    Devuelve el primer índice donde empieza un bloque de 'length' posiciones
    consecutivas a True en 'table', o None si no existe.
    """
    if length <= 0 or length > len(table):
        return None

    # Suma acumulada: la ventana [i, i + length) está llena si su suma es length
    sums = np.concatenate(([0], np.cumsum(table, dtype=np.int64)))
    windows = sums[length:] - sums[:-length]
    hits = np.flatnonzero(windows == length)
    if hits.size == 0:
        return None
    return int(hits[0])
