"""Read-only lookup of SPN definitions by SPN number and by PGN."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .definitions import SPN_DEFINITIONS, SpnDefinition

__all__ = [
    "DEFAULT_DATABASE",
    "SpnDatabase",
    "database_stats",
    "get_spn_def",
    "get_spns_for_pgn",
    "list_supported_pgns",
]


class SpnDatabase:
    """Immutable registry of SPN definitions.

    Both indices are built once in the constructor and never modified, so a
    single instance can be shared between threads without locking.
    """

    __slots__ = ("_by_spn", "_by_pgn")

    def __init__(self, definitions: Iterable[SpnDefinition] = SPN_DEFINITIONS) -> None:
        by_spn: dict[int, SpnDefinition] = {}
        by_pgn: dict[int, list[SpnDefinition]] = {}
        for definition in definitions:
            if definition.spn in by_spn:
                raise ValueError(f"SPN {definition.spn} is registered twice")
            by_spn[definition.spn] = definition
            by_pgn.setdefault(definition.pgn, []).append(definition)

        self._by_spn: Mapping[int, SpnDefinition] = MappingProxyType(by_spn)
        self._by_pgn: Mapping[int, Tuple[SpnDefinition, ...]] = MappingProxyType(
            {pgn: tuple(defs) for pgn, defs in by_pgn.items()}
        )

    def get_spn_def(self, spn: int) -> Optional[SpnDefinition]:
        """Return the definition for ``spn`` when it is known."""

        return self._by_spn.get(spn)

    def get_spns_for_pgn(self, pgn: int) -> Tuple[SpnDefinition, ...]:
        """Return the definitions registered under ``pgn`` in registration order."""

        return self._by_pgn.get(pgn, ())

    def list_supported_pgns(self) -> Tuple[int, ...]:
        return tuple(sorted(self._by_pgn))

    def database_stats(self) -> Tuple[int, int]:
        """Return ``(spn_count, pgn_count)``."""

        return len(self._by_spn), len(self._by_pgn)

    def spns(self) -> Tuple[int, ...]:
        return tuple(self._by_spn)

    def __iter__(self):
        return iter(self._by_spn.values())

    def __len__(self) -> int:
        return len(self._by_spn)

    def __contains__(self, spn: object) -> bool:
        return spn in self._by_spn


DEFAULT_DATABASE = SpnDatabase()


def get_spn_def(spn: int, database: SpnDatabase = DEFAULT_DATABASE) -> Optional[SpnDefinition]:
    return database.get_spn_def(spn)


def get_spns_for_pgn(pgn: int, database: SpnDatabase = DEFAULT_DATABASE) -> Tuple[SpnDefinition, ...]:
    return database.get_spns_for_pgn(pgn)


def list_supported_pgns(database: SpnDatabase = DEFAULT_DATABASE) -> Tuple[int, ...]:
    return database.list_supported_pgns()


def database_stats(database: SpnDatabase = DEFAULT_DATABASE) -> Tuple[int, int]:
    return database.database_stats()
