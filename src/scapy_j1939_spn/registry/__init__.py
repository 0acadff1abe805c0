"""Registry of built-in SPN definitions."""

from .database import (
    DEFAULT_DATABASE,
    SpnDatabase,
    database_stats,
    get_spn_def,
    get_spns_for_pgn,
    list_supported_pgns,
)
from .definitions import SPN_DEFINITIONS, SpnDefinition
from .validation import RegistryValidator

__all__ = [
    "DEFAULT_DATABASE",
    "RegistryValidator",
    "SPN_DEFINITIONS",
    "SpnDatabase",
    "SpnDefinition",
    "database_stats",
    "get_spn_def",
    "get_spns_for_pgn",
    "list_supported_pgns",
]
