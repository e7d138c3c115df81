"""
Configuración de la búsqueda: cotas heurísticas y nivel de log.

Los valores se pueden sobrescribir con variables de entorno con prefijo
SEMIGROUPS_ (por ejemplo SEMIGROUPS_APERY_BOUND_FACTOR=3) o desde un fichero .env.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Parámetros de la sesión de búsqueda.
    """

    model_config = SettingsConfigDict(env_prefix="SEMIGROUPS_", env_file=".env", case_sensitive=False)

    # Cota de la tabla de alcanzables para el conjunto de Apéry: factor * periodo^2
    apery_bound_factor: int = 2

    # Universo de candidatos en la fuerza bruta por género: [inicio, factor * género]
    genus_universe_factor: int = 5

    log_level: str = "WARNING"

    @field_validator("apery_bound_factor", "genus_universe_factor")
    @classmethod
    def positive_factor(cls, v: int) -> int:
        if v < 1:
            raise ValueError("El factor debe ser un entero positivo.")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
