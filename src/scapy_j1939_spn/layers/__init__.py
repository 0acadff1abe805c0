"""Scapy layer definitions for J1939."""

from .pdu import J1939Frame, RequestPGN

__all__ = ["J1939Frame", "RequestPGN"]
