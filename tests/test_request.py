"""Tests for Request PGN frame construction."""

from scapy_j1939_spn.ident import parse_can_id
from scapy_j1939_spn.layers import RequestPGN
from scapy_j1939_spn.request import REQUEST_PGN, build_request_pgn


def test_request_engine_hours() -> None:
    can_id, data = build_request_pgn(0xFE, 0x00, 65253)

    assert can_id == 0x18EA00FE
    assert data == bytes([0xE5, 0xFE, 0x00])


def test_request_identifier_fields() -> None:
    can_id, _ = build_request_pgn(0x21, 0x3D, 65262)
    ident = parse_can_id(can_id)

    assert ident.pgn == REQUEST_PGN == 59904
    assert ident.priority == 6
    assert ident.destination_address == 0x3D
    assert ident.source_address == 0x21
    assert ident.is_peer_to_peer


def test_request_to_global_address() -> None:
    can_id, _ = build_request_pgn(0xFE, 0xFF, 65253)
    assert can_id == 0x18EAFFFE


def test_request_priority_override() -> None:
    can_id, _ = build_request_pgn(0xFE, 0x00, 65253, priority=3)
    assert can_id == 0x0CEA00FE


def test_request_payload_is_always_three_bytes() -> None:
    assert build_request_pgn(0xFE, 0x00, 0x100)[1] == b"\x00\x01\x00"
    assert build_request_pgn(0xFE, 0x00, 0)[1] == b"\x00\x00\x00"
    assert build_request_pgn(0xFE, 0x00, 0x1FEEE)[1] == b"\xEE\xFE\x01"


def test_request_payload_dissects() -> None:
    _, data = build_request_pgn(0xFE, 0x00, 65253)
    assert RequestPGN(data).pgn == 65253
