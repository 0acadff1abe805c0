"""Decoding of SPN values from single-frame J1939 payloads."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .ident import extract_pgn
from .registry.database import DEFAULT_DATABASE, SpnDatabase
from .registry.definitions import SpnDefinition

__all__ = [
    "DecodedSpn",
    "decode_frame",
    "decode_spn",
    "decode_spn_by_number",
    "decode_spn_full",
    "extract_bits",
    "iter_decode_frame",
]

logger = logging.getLogger(__name__)

MAX_FIELD_BITS = 64


@dataclass(frozen=True, slots=True)
class DecodedSpn:
    """Physical value of one SPN taken from a frame."""

    spn: int
    name: str
    value: float
    unit: str
    raw_value: int = 0
    pgn: Optional[int] = None


def extract_bits(data: bytes, start_byte: int, start_bit: int, length_bits: int) -> Optional[int]:
    """Return the unsigned ``length_bits`` wide field at the given position.

    Payload bytes are read little-endian and bit 0 is the least significant
    bit of byte 0, so fields spill into following bytes transparently.
    ``None`` is returned when the payload does not cover the field or the
    length is outside 1..64.
    """

    if not 0 < length_bits <= MAX_FIELD_BITS or start_byte < 0 or start_bit < 0:
        return None
    byte_count = (start_bit + length_bits + 7) // 8
    end = start_byte + byte_count
    if len(data) < end:
        return None
    window = int.from_bytes(bytes(data[start_byte:end]), byteorder="little")
    return (window >> start_bit) & ((1 << length_bits) - 1)


def _extract_and_validate(data: bytes, definition: SpnDefinition) -> Optional[tuple[int, float]]:
    raw = extract_bits(data, definition.start_byte, definition.start_bit, definition.length_bits)
    if raw is None or raw == definition.not_available_raw:
        return None
    return raw, raw * definition.scale + definition.offset


def decode_spn(data: bytes, definition: SpnDefinition) -> Optional[float]:
    """Return the physical value of ``definition`` in ``data``.

    ``None`` means the payload is too short for the field or the source
    reported the field as not available.
    """

    result = _extract_and_validate(data, definition)
    if result is None:
        return None
    return result[1]


def decode_spn_full(data: bytes, definition: SpnDefinition) -> Optional[DecodedSpn]:
    result = _extract_and_validate(data, definition)
    if result is None:
        return None
    raw, value = result
    return DecodedSpn(
        spn=definition.spn,
        name=definition.name,
        value=value,
        unit=definition.unit,
        raw_value=raw,
        pgn=definition.pgn,
    )


def decode_spn_by_number(
    spn: int,
    data: bytes,
    database: SpnDatabase = DEFAULT_DATABASE,
) -> Optional[float]:
    definition = database.get_spn_def(spn)
    if definition is None:
        logger.debug("SPN %d is not in the database", spn)
        return None
    return decode_spn(data, definition)


def iter_decode_frame(
    can_id: int,
    data: bytes,
    database: SpnDatabase = DEFAULT_DATABASE,
) -> Iterator[DecodedSpn]:
    """Lazily yield every known SPN that carries a value in the frame."""

    pgn = extract_pgn(can_id)
    definitions = database.get_spns_for_pgn(pgn)
    if not definitions:
        logger.debug("No SPN definitions for PGN %d (CAN id 0x%08X)", pgn, can_id)
        return
    for definition in definitions:
        decoded = decode_spn_full(data, definition)
        if decoded is None:
            if len(data) * 8 < definition.bit_position + definition.length_bits:
                logger.debug("Payload of %d bytes too short for SPN %d", len(data), definition.spn)
            else:
                logger.debug("SPN %d reported not available", definition.spn)
            continue
        yield decoded


def decode_frame(
    can_id: int,
    data: bytes,
    database: SpnDatabase = DEFAULT_DATABASE,
) -> List[DecodedSpn]:
    """Decode all known SPNs from a CAN frame.

    The result is empty when the PGN is not in ``database``; SPNs that are
    not available or do not fit the payload are omitted.
    """

    return list(iter_decode_frame(can_id, data, database))
