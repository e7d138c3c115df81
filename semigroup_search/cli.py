"""
Programas de línea de comandos.

  semigroups-frobenius            todos los semigrupos con Frobenius F
  semigroups-genus                semigrupos internos y hojas de género g
  semigroups-genus-multiplicity   semigrupos internos y hojas de género g y multiplicidad m

Cada valor se puede pasar como argumento o introducir cuando se pide.
"""

import argparse
import logging
import re
import sys

from .config import get_settings
from .engine import Classification
from .graph import plot_search_graph
from .search import FixedFrobeniusSearch, FixedGenusMultiplicitySearch, FixedGenusSearch

DIGITS = re.compile(r"^[0-9]+$")


def setup_logging(level="WARNING"):
    """
    Configura el log por stderr; stdout queda solo para los resultados.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))


def read_value(value, prompt):
    """
    Devuelve 'value' o, si no se ha pasado, lo pide por teclado.
    """
    if value is None:
        value = input(prompt)
    return value.strip("\r\n")


def is_number(text):
    return DIGITS.fullmatch(text) is not None


def format_apery(semigroup, period, apery):
    return f"Ap({semigroup}, {period}) = {{" + ",".join(str(a) for a in apery) + "}"


def print_classification(result, suffix=""):
    print(f"Semigrupos numericos internos{suffix}:")
    for S in result.internal:
        print(S)
    print(f"\nSemigrupos numericos hoja{suffix}:")
    for S in result.leaves:
        print(S)


def print_majority(result):
    print("\nComparacion:")
    majority = result.majority()
    if majority is Classification.INTERNAL:
        print("Hay mas semigrupos numericos internos que hojas.")
    elif majority is Classification.LEAF:
        print("Hay mas semigrupos numericos hojas que internos.")
    else:
        print("Hay igual cantidad de semigrupos numericos internos y hojas.")


def parser(description, *values):
    p = argparse.ArgumentParser(description=description)
    for name in values:
        p.add_argument(name, nargs="?", default=None)
    p.add_argument("--log-level", default=None, help="nivel de log (por defecto, el de la configuración)")
    return p


def frobenius_main(argv=None):
    p = parser("Genera todos los semigrupos numericos con numero de Frobenius F.", "frobenius")
    p.add_argument("--plot", choices=["plotly", "pyvis"], default=None, help="dibuja el grafo de la busqueda")
    args = p.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    text = read_value(args.frobenius, "Numero de Frobenius (F): ")

    # Se comprueba que la entrada sea un único entero positivo
    if not is_number(text):
        print("Entrada no valida. Debes introducir un unico numero entero positivo "
              "(sin decimales, letras o espacios extras).")
        return 1

    F = int(text)
    if F <= 0:
        print("F debe ser un entero positivo.")
        return 1

    search = FixedFrobeniusSearch(F)
    result = search.run(on_found=lambda S: print(f"{str(S):<30} | {format_apery(S, F + 1, search.apery(S))}"))

    print("\nSemigrupos numericos internos")
    for S in result.internal:
        print(S)
    print("\nSemigrupos numericos hoja")
    for S in result.leaves:
        print(S)

    print(f"\nTotal internos: {len(result.internal)}   Total hojas: {len(result.leaves)}")
    print(f"\nEl programa ha tardado {int(result.elapsed)} segundos.")

    if args.plot:
        plot_search_graph(search.graph, engine=args.plot, title=f"Semigrupos numericos con F = {F}")
    return 0


def genus_main(argv=None):
    p = parser("Encuentra los semigrupos numericos internos y hojas de un genero dado.", "genus")
    args = p.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    text = read_value(args.genus, "Introduce el genero: ")

    # Se comprueba que la entrada sean solo números
    if not is_number(text):
        print("Entrada no valida. Debes introducir un unico numero entero (0 o mayor) sin caracteres.")
        return 1

    genus = int(text)

    # Caso trivial: género 0
    if genus == 0:
        print("Semigrupos numericos internos:\n<1>\n\nSemigrupos numericos hoja:")
        return 0

    print("Calculando semigrupos numericos internos y hojas...")
    result = FixedGenusSearch(genus).run()

    print_classification(result)
    print_majority(result)
    print(f"\nEl programa tardo {int(result.elapsed)} segundos.")
    return 0


def genus_multiplicity_main(argv=None):
    p = parser("Encuentra los semigrupos numericos internos y hojas de un genero y multiplicidad dados.",
               "genus", "multiplicity")
    args = p.parse_args(argv)
    setup_logging(args.log_level or get_settings().log_level)

    genus_text = read_value(args.genus, "Introduce el genero: ")
    multiplicity_text = read_value(args.multiplicity, "Introduce la multiplicidad: ")

    if not is_number(genus_text) or not is_number(multiplicity_text):
        print("Por favor, introduce valores validos (un unico numero entero sin caracteres ni decimales).")
        return 1

    genus = int(genus_text)
    multiplicity = int(multiplicity_text)

    # Condiciones que se deben cumplir
    if genus < 0 or multiplicity < 1 or genus < multiplicity - 1:
        print("Por favor, introduce valores validos (genero >= 0, multiplicidad >= 1 y genero >= multiplicidad - 1).")
        return 1

    # Caso trivial: género 0 y multiplicidad 1
    if genus == 0 and multiplicity == 1:
        print("Semigrupos numericos internos:\n<1>\n\nSemigrupos numericos hoja:")
        return 0

    print(f"Calculando semigrupos numericos con genero {genus} y multiplicidad {multiplicity}...")
    result = FixedGenusMultiplicitySearch(genus, multiplicity).run()

    print()
    print_classification(result, suffix=f" (m={multiplicity}, g={genus})")
    print_majority(result)
    print(f"\nEl programa tardo {int(result.elapsed)} segundos.")
    return 0
