"""Construction of Request PGN (59904) frames."""
from __future__ import annotations

from typing import Tuple

from .ident import build_can_id
from .layers.pdu import RequestPGN

__all__ = ["DEFAULT_REQUEST_PRIORITY", "REQUEST_PGN", "build_request_pgn"]

REQUEST_PGN = 0x00EA00
DEFAULT_REQUEST_PRIORITY = 6


def build_request_pgn(
    requester_sa: int,
    target_da: int,
    pgn: int,
    *,
    priority: int = DEFAULT_REQUEST_PRIORITY,
) -> Tuple[int, bytes]:
    """Return ``(can_id, data)`` asking ``target_da`` to transmit ``pgn``.

    Use 0xFF as ``target_da`` to address every node. The data field is
    always three bytes, even for PGNs below 0x10000.
    """

    can_id = build_can_id(
        priority,
        (REQUEST_PGN >> 16) & 0x1,
        (REQUEST_PGN >> 8) & 0xFF,
        target_da,
        requester_sa,
    )
    data = bytes(RequestPGN(pgn=pgn & 0xFFFFFF))
    return can_id, data
