"""Parsing and construction of 29-bit SAE J1939 CAN identifiers.

Identifier layout (most significant bit first)::

    | Priority | R | DP |  PF  | PS/DA |  SA  |
    |   3 bit  | 1 | 1  | 8bit | 8 bit | 8bit |

A PDU Format (PF) below 240 selects PDU1 (peer-to-peer) and the PDU
Specific byte carries the destination address. A PF of 240 or above selects
PDU2 (broadcast) and the PDU Specific byte is the low byte of the PGN.
"""
from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CanIdentifier",
    "GLOBAL_ADDRESS",
    "PDU2_THRESHOLD",
    "build_can_id",
    "extract_pgn",
    "extract_source_address",
    "is_valid_j1939_id",
    "parse_can_id",
]

PDU2_THRESHOLD = 240
GLOBAL_ADDRESS = 0xFF
MAX_CAN_ID = 0x1FFFFFFF


def _pgn_from_fields(data_page: int, pdu_format: int, pdu_specific: int) -> int:
    if pdu_format >= PDU2_THRESHOLD:
        return (data_page << 16) | (pdu_format << 8) | pdu_specific
    return (data_page << 16) | (pdu_format << 8)


@dataclass(frozen=True, slots=True)
class CanIdentifier:
    """Decoded view of a 29-bit J1939 identifier."""

    priority: int
    reserved: int
    data_page: int
    pdu_format: int
    pdu_specific: int
    source_address: int

    @property
    def pgn(self) -> int:
        return _pgn_from_fields(self.data_page, self.pdu_format, self.pdu_specific)

    @property
    def is_broadcast(self) -> bool:
        """Return True for PDU2 (globally addressed) identifiers."""

        return self.pdu_format >= PDU2_THRESHOLD

    @property
    def is_peer_to_peer(self) -> bool:
        return not self.is_broadcast

    @property
    def destination_address(self) -> int:
        """Destination address for PDU1, the global address for PDU2."""

        if self.is_broadcast:
            return GLOBAL_ADDRESS
        return self.pdu_specific

    def to_can_id(self) -> int:
        return (
            (self.priority & 0x7) << 26
            | (self.reserved & 0x1) << 25
            | (self.data_page & 0x1) << 24
            | (self.pdu_format & 0xFF) << 16
            | (self.pdu_specific & 0xFF) << 8
            | (self.source_address & 0xFF)
        )


def parse_can_id(can_id: int) -> CanIdentifier:
    """Split ``can_id`` into its J1939 fields.

    Bits above the 29-bit identifier are discarded, so any 32-bit value
    parses successfully.
    """

    return CanIdentifier(
        priority=(can_id >> 26) & 0x7,
        reserved=(can_id >> 25) & 0x1,
        data_page=(can_id >> 24) & 0x1,
        pdu_format=(can_id >> 16) & 0xFF,
        pdu_specific=(can_id >> 8) & 0xFF,
        source_address=can_id & 0xFF,
    )


def build_can_id(
    priority: int,
    data_page: int,
    pdu_format: int,
    pdu_specific: int,
    source_address: int,
    *,
    reserved: int = 0,
) -> int:
    """Pack J1939 fields into a 29-bit identifier.

    Each field is masked to its bit width; out-of-range values are truncated
    rather than rejected.
    """

    return CanIdentifier(
        priority=priority,
        reserved=reserved,
        data_page=data_page,
        pdu_format=pdu_format,
        pdu_specific=pdu_specific,
        source_address=source_address,
    ).to_can_id()


def extract_pgn(can_id: int) -> int:
    """Return only the PGN carried by ``can_id``."""

    dp = (can_id >> 24) & 0x1
    pf = (can_id >> 16) & 0xFF
    ps = (can_id >> 8) & 0xFF
    return _pgn_from_fields(dp, pf, ps)


def extract_source_address(can_id: int) -> int:
    return can_id & 0xFF


def is_valid_j1939_id(can_id: int) -> bool:
    return 0 <= can_id <= MAX_CAN_ID
