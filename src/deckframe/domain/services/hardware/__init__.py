"""Deck framing hardware: connectors, fasteners and their compliance checks."""

from .calculator import HardwareCalculator, calculate_hardware
from .compliance import validate_hardware_compliance
from .models import FastenerItem, HardwareItem, HardwareSchedule

__all__ = [
    "FastenerItem",
    "HardwareCalculator",
    "HardwareItem",
    "HardwareSchedule",
    "calculate_hardware",
    "validate_hardware_compliance",
]
