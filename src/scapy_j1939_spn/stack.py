"""High-level facade for decoding J1939 traffic against an SPN database."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .decoder import DecodedSpn, decode_frame, decode_spn_by_number
from .ident import CanIdentifier, parse_can_id
from .layers.pdu import J1939Frame
from .registry.database import DEFAULT_DATABASE, SpnDatabase
from .util.canio import CANFrame

logger = logging.getLogger(__name__)


class J1939Decoder:
    """Thin orchestrator that binds the decode functions to one database.

    The decoder holds no state besides the database reference, so one
    instance may be used from many threads at once.
    """

    def __init__(self, database: SpnDatabase = DEFAULT_DATABASE) -> None:
        self._database = database

    @property
    def database(self) -> SpnDatabase:
        return self._database

    def decode(self, can_id: int, data: bytes) -> List[DecodedSpn]:
        """Decode the SPNs carried by a single frame."""

        return decode_frame(can_id, data, self._database)

    def decode_spn(self, spn: int, data: bytes) -> Optional[float]:
        return decode_spn_by_number(spn, data, self._database)

    def decode_can_frame(self, frame: CANFrame) -> List[DecodedSpn]:
        return self.decode(frame.can_id, frame.data)

    def decode_packet(self, packet: J1939Frame) -> List[DecodedSpn]:
        return self.decode(packet.to_can_id(), packet.data_field())

    def sniff(self, frames: Iterable[CANFrame]) -> Iterator[Tuple[CanIdentifier, List[DecodedSpn]]]:
        """Yield the parsed identifier and decoded SPNs for each frame."""

        for frame in frames:
            if not frame.is_extended:
                logger.debug("Skipping standard-format CAN id 0x%03X", frame.can_id)
                continue
            yield parse_can_id(frame.can_id), self.decode_can_frame(frame)
