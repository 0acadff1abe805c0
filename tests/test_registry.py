"""Tests for the SPN definition table and database lookups."""

import pytest

from scapy_j1939_spn.registry import (
    DEFAULT_DATABASE,
    SPN_DEFINITIONS,
    RegistryValidator,
    SpnDatabase,
    SpnDefinition,
    database_stats,
    get_spn_def,
    get_spns_for_pgn,
    list_supported_pgns,
)


def test_database_stats() -> None:
    spn_count, pgn_count = database_stats()

    assert spn_count == 71
    assert pgn_count == 14
    assert spn_count == len([spn for spn in DEFAULT_DATABASE.spns() if get_spn_def(spn) is not None])
    assert pgn_count == len(list_supported_pgns())


def test_get_spn_def() -> None:
    spn = get_spn_def(190)
    assert spn is not None
    assert spn.name == "engine_speed"
    assert spn.pgn == 61444
    assert spn.scale == 0.125
    assert spn.not_available_raw == 0xFFFF

    spn = get_spn_def(110)
    assert spn is not None
    assert spn.name == "engine_coolant_temperature"
    assert spn.offset == -40.0
    assert spn.not_available_raw == 0xFF


def test_get_spn_def_unknown() -> None:
    assert get_spn_def(99999) is None
    assert 99999 not in DEFAULT_DATABASE
    assert 190 in DEFAULT_DATABASE


def test_get_spns_for_pgn_preserves_registration_order() -> None:
    spns = get_spns_for_pgn(65262)
    assert [s.spn for s in spns] == [110, 174, 175, 176, 52, 1134]
    assert all(s.pgn == 65262 for s in spns)
    assert get_spns_for_pgn(0xFF00) == ()


def test_list_supported_pgns() -> None:
    pgns = list_supported_pgns()

    assert 61444 in pgns
    assert 65262 in pgns
    assert 65253 in pgns
    assert list(pgns) == sorted(set(pgns))
    assert list_supported_pgns() == pgns


def test_every_table_entry_is_reachable() -> None:
    for definition in SPN_DEFINITIONS:
        assert get_spn_def(definition.spn) is definition
        assert definition in get_spns_for_pgn(definition.pgn)


def test_duplicate_spn_rejected() -> None:
    definition = SpnDefinition(1, "a", 65280, 0, 0, 8)
    with pytest.raises(ValueError):
        SpnDatabase([definition, SpnDefinition(1, "b", 65281, 0, 0, 8)])


def test_definition_layout_validation() -> None:
    with pytest.raises(ValueError):
        SpnDefinition(1, "empty", 65280, 0, 0, 0)
    with pytest.raises(ValueError):
        SpnDefinition(1, "too_wide", 65280, 0, 0, 65)
    with pytest.raises(ValueError):
        SpnDefinition(1, "bad_byte", 65280, 8, 0, 1)
    with pytest.raises(ValueError):
        SpnDefinition(1, "bad_bit", 65280, 0, 8, 1)
    with pytest.raises(ValueError):
        SpnDefinition(1, "overrun", 65280, 7, 0, 9)

    assert SpnDefinition(1, "last_bit", 65280, 7, 7, 1).not_available_raw == 1
    assert SpnDefinition(1, "whole_frame", 65280, 0, 0, 64).not_available_raw == 2**64 - 1


def test_definitions_are_immutable() -> None:
    spn = get_spn_def(110)
    with pytest.raises(AttributeError):
        spn.scale = 2.0  # type: ignore[misc]


def test_substitute_database_is_independent() -> None:
    database = SpnDatabase([SpnDefinition(42, "answer", 65280, 0, 0, 8)])

    assert database.database_stats() == (1, 1)
    assert database_stats(database) == (1, 1)
    assert get_spn_def(42, database).name == "answer"
    assert get_spn_def(190, database) is None
    assert len(database) == 1
    assert database_stats() == (71, 14)


def test_builtin_table_validation() -> None:
    problems = list(RegistryValidator(DEFAULT_DATABASE).validate())
    assert problems == ["SPN 512: Bit range overlaps an earlier SPN in the same PGN"]


def test_validator_flags_unusual_definitions() -> None:
    database = SpnDatabase(
        [
            SpnDefinition(1, "odd_sentinel", 65280, 0, 0, 8, not_available_raw=0xFE),
            SpnDefinition(2, "", 65280, 1, 0, 8, scale=0.0),
        ]
    )

    problems = list(RegistryValidator(database).validate())
    assert problems == [
        "SPN 1: Not-available value is not the all-ones pattern",
        "SPN 2: Name must not be empty",
        "SPN 2: Scale must be non-zero",
    ]
