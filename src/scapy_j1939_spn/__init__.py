"""SAE J1939 SPN decoding built on Scapy.

Parses 29-bit J1939 identifiers, extracts Suspect Parameters from
single-frame payloads using a built-in PGN/SPN table, and builds Request PGN
frames.
"""
from __future__ import annotations

__version__ = "0.1.0"

from . import decoder, ident, request, stack
from .decoder import (
    DecodedSpn,
    decode_frame,
    decode_spn,
    decode_spn_by_number,
    decode_spn_full,
    extract_bits,
    iter_decode_frame,
)
from .ident import (
    CanIdentifier,
    build_can_id,
    extract_pgn,
    extract_source_address,
    is_valid_j1939_id,
    parse_can_id,
)
from .layers import *  # noqa: F401,F403
from .registry import *  # noqa: F401,F403
from .request import build_request_pgn
from .stack import J1939Decoder
from .util import *  # noqa: F401,F403

__all__ = [
    "CANFrame",
    "CanIdentifier",
    "DEFAULT_DATABASE",
    "J1939Frame",
    "RegistryValidator",
    "RequestPGN",
    "SPN_DEFINITIONS",
    "SpnDatabase",
    "SpnDefinition",
    "DecodedSpn",
    "J1939Decoder",
    "build_can_id",
    "build_request_pgn",
    "database_stats",
    "decode_frame",
    "decode_spn",
    "decode_spn_by_number",
    "decode_spn_full",
    "decoder",
    "extract_bits",
    "extract_pgn",
    "extract_source_address",
    "get_spn_def",
    "get_spns_for_pgn",
    "ident",
    "is_valid_j1939_id",
    "iter_decode_frame",
    "list_supported_pgns",
    "parse_can_id",
    "request",
    "stack",
]
