"""Validation helpers for SPN databases."""
from __future__ import annotations

from typing import Iterable

from .database import SpnDatabase
from .definitions import SpnDefinition


class RegistryValidator:
    """Runs sanity checks on registry content."""

    def __init__(self, database: SpnDatabase) -> None:
        self._database = database

    def validate(self) -> Iterable[str]:
        """Yield validation error strings."""

        for definition in self._database:
            for problem in self.validate_definition(definition):
                yield f"SPN {definition.spn}: {problem}"

    def validate_definition(self, definition: SpnDefinition) -> Iterable[str]:
        """Validate a single definition instance."""

        if not definition.name:
            yield "Name must not be empty"
        if definition.not_available_raw != definition.all_ones:
            yield "Not-available value is not the all-ones pattern"
        if definition.scale == 0:
            yield "Scale must be non-zero"
        if _overlaps_previous(self._database, definition):
            yield "Bit range overlaps an earlier SPN in the same PGN"


def _overlaps_previous(database: SpnDatabase, definition: SpnDefinition) -> bool:
    start = definition.bit_position
    end = start + definition.length_bits
    for other in database.get_spns_for_pgn(definition.pgn):
        if other is definition:
            return False
        other_start = other.bit_position
        if start < other_start + other.length_bits and other_start < end:
            return True
    return False
