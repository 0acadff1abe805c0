"""Frame container exchanged with an external CAN transport."""
from __future__ import annotations

from dataclasses import dataclass

from ..ident import MAX_CAN_ID

MAX_CLASSIC_PAYLOAD = 8


@dataclass(frozen=True, slots=True)
class CANFrame:
    """Represents a received classic CAN frame."""

    can_id: int
    data: bytes
    is_extended: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.can_id <= MAX_CAN_ID:
            raise ValueError("CAN identifier must fit within 29 bits")
        if len(self.data) > MAX_CLASSIC_PAYLOAD:
            raise ValueError("Classic CAN payloads cannot exceed 8 bytes")
        object.__setattr__(self, "data", bytes(self.data))
