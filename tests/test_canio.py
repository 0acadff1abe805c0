"""Tests covering the CAN frame container."""

import pytest

from scapy_j1939_spn.util import CANFrame


def test_frame_accepts_classic_payload() -> None:
    frame = CANFrame(can_id=0x0CF00400, data=bytearray(8))
    assert frame.data == bytes(8)
    assert frame.is_extended


def test_frame_rejects_invalid_values() -> None:
    with pytest.raises(ValueError):
        CANFrame(can_id=0x20000000, data=b"")
    with pytest.raises(ValueError):
        CANFrame(can_id=0x123, data=bytes(9))
