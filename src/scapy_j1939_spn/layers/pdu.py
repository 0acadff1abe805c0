"""Scapy Packet models for J1939 frames and the Request PGN payload."""
from __future__ import annotations

from scapy.fields import BitField, ByteField, FieldLenField, LEThreeBytesField, StrLenField
from scapy.packet import Packet

from ..ident import CanIdentifier, parse_can_id

__all__ = ["J1939Frame", "RequestPGN"]


class J1939Frame(Packet):
    """29-bit J1939 identifier followed by a length-prefixed data field.

    The identifier occupies the first four bytes, big-endian, with the three
    bits above bit 28 left at zero.
    """

    name = "J1939 Frame"
    fields_desc = [
        BitField("unused", 0, 3),
        BitField("priority", 6, 3),
        BitField("reserved", 0, 1),
        BitField("dp", 0, 1),
        ByteField("pf", 0),
        ByteField("ps", 0),
        ByteField("sa", 0),
        FieldLenField("length", None, length_of="data", fmt="B"),
        StrLenField("data", b"", length_from=lambda pkt: pkt.length),
    ]

    def extract_padding(self, s: bytes) -> tuple[bytes, bytes]:  # pragma: no cover - scapy API hook
        return b"", s

    @property
    def identifier(self) -> CanIdentifier:
        return parse_can_id(self.to_can_id())

    @property
    def pgn(self) -> int:
        return self.identifier.pgn

    @property
    def destination_address(self) -> int:
        return self.identifier.destination_address

    @property
    def source_address(self) -> int:
        return self.sa & 0xFF

    def data_field(self) -> bytes:
        return bytes(self.data)

    def to_can_id(self) -> int:
        return (
            (self.priority & 0x7) << 26
            | (self.reserved & 0x1) << 25
            | (self.dp & 0x1) << 24
            | (self.pf & 0xFF) << 16
            | (self.ps & 0xFF) << 8
            | (self.sa & 0xFF)
        )

    @classmethod
    def from_can_id(cls, can_id: int, data: bytes) -> "J1939Frame":
        ident = parse_can_id(can_id)
        return cls(
            priority=ident.priority,
            reserved=ident.reserved,
            dp=ident.data_page,
            pf=ident.pdu_format,
            ps=ident.pdu_specific,
            sa=ident.source_address,
            data=bytes(data),
        )


class RequestPGN(Packet):
    """Data field of a Request (PGN 59904): the requested PGN, little-endian."""

    name = "J1939 Request PGN"
    fields_desc = [LEThreeBytesField("pgn", 0)]

    def extract_padding(self, s: bytes) -> tuple[bytes, bytes]:  # pragma: no cover - scapy API hook
        return b"", s
