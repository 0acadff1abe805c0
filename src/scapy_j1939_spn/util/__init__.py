"""Utility helpers for CAN integration."""

from .canio import CANFrame

__all__ = ["CANFrame"]
