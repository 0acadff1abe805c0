"""Tests for the Scapy J1939 frame layer."""

from scapy_j1939_spn.layers import J1939Frame

EEC1_DATA = bytes([0x00, 0x00, 0x00, 0x20, 0x4E, 0x00, 0x00, 0x00])


def test_frame_round_trip_encoding() -> None:
    frame = J1939Frame.from_can_id(0x0CF00400, EEC1_DATA)

    raw = bytes(frame)
    assert raw[:4] == bytes.fromhex("0CF00400")
    assert raw[4] == len(EEC1_DATA)
    assert raw[5:] == EEC1_DATA

    decoded = J1939Frame(raw)
    assert decoded.to_can_id() == 0x0CF00400
    assert decoded.priority == 3
    assert decoded.pgn == 61444
    assert decoded.source_address == 0x00
    assert decoded.destination_address == 0xFF
    assert decoded.data_field() == EEC1_DATA


def test_frame_pdu1_destination() -> None:
    frame = J1939Frame.from_can_id(0x18EA00FE, b"\xE5\xFE\x00")

    assert frame.pgn == 0xEA00
    assert frame.destination_address == 0x00
    assert frame.source_address == 0xFE
    assert frame.identifier.is_peer_to_peer


def test_frame_fields_build_identifier() -> None:
    frame = J1939Frame(priority=6, dp=1, pf=0xFE, ps=0xEE, sa=0x21, data=b"\x01")

    assert frame.to_can_id() == 0x19FEEE21
    assert frame.pgn == 0x1FEEE
    assert bytes(frame)[:4] == bytes.fromhex("19FEEE21")
