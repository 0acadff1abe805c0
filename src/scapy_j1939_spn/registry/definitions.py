"""SPN definitions and the built-in J1939 parameter table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["SPN_DEFINITIONS", "SpnDefinition"]

FRAME_BITS = 64


@dataclass(frozen=True, slots=True)
class SpnDefinition:
    """Placement and scaling of one Suspect Parameter inside a PG payload.

    Attributes:
        spn: Suspect Parameter Number.
        name: Parameter name in snake_case.
        pgn: Parameter Group Number that carries the parameter.
        start_byte: First payload byte holding the field (0-based).
        start_bit: First bit within ``start_byte`` (0 = least significant).
        length_bits: Width of the raw field in bits.
        scale: Resolution applied to the raw unsigned value.
        offset: Added after scaling.
        unit: Engineering unit of the physical value.
        not_available_raw: Raw value meaning "not available"; defaults to the
            all-ones pattern of ``length_bits``.
    """

    spn: int
    name: str
    pgn: int
    start_byte: int
    start_bit: int
    length_bits: int
    scale: float = 1.0
    offset: float = 0.0
    unit: str = ""
    not_available_raw: Optional[int] = None

    def __post_init__(self) -> None:
        if not 1 <= self.length_bits <= FRAME_BITS:
            raise ValueError("SPN length must be between 1 and 64 bits")
        if not 0 <= self.start_byte <= 7:
            raise ValueError("SPN start byte must be between 0 and 7")
        if not 0 <= self.start_bit <= 7:
            raise ValueError("SPN start bit must be between 0 and 7")
        if self.bit_position + self.length_bits > FRAME_BITS:
            raise ValueError(f"SPN {self.spn} does not fit within an 8-byte frame")
        if self.not_available_raw is None:
            object.__setattr__(self, "not_available_raw", self.all_ones)

    @property
    def bit_position(self) -> int:
        """Absolute bit offset of the field in the payload."""

        return self.start_byte * 8 + self.start_bit

    @property
    def all_ones(self) -> int:
        return (1 << self.length_bits) - 1


# Columns: spn, name, pgn, start_byte, start_bit, length_bits, scale, offset, unit
SPN_DEFINITIONS: Tuple[SpnDefinition, ...] = (
    # EEC1 - Electronic Engine Controller 1 (0xF004)
    SpnDefinition(899, "engine_torque_mode", 61444, 0, 0, 4, 1.0, 0.0, ""),
    SpnDefinition(4154, "actual_engine_retarder_percent", 61444, 1, 0, 8, 1.0, -125.0, "%"),
    SpnDefinition(512, "drivers_demand_engine_percent", 61444, 1, 0, 8, 1.0, -125.0, "%"),
    SpnDefinition(513, "actual_engine_percent_torque", 61444, 2, 0, 8, 1.0, -125.0, "%"),
    SpnDefinition(190, "engine_speed", 61444, 3, 0, 16, 0.125, 0.0, "RPM"),
    SpnDefinition(1483, "eec1_source_address", 61444, 5, 0, 8, 1.0, 0.0, ""),
    SpnDefinition(1675, "engine_starter_mode", 61444, 6, 0, 4, 1.0, 0.0, ""),
    SpnDefinition(2432, "engine_demand_percent_torque", 61444, 7, 0, 8, 1.0, -125.0, "%"),

    # EEC2 - Electronic Engine Controller 2 (0xF003)
    SpnDefinition(558, "accelerator_pedal_1_low_switch", 61443, 0, 0, 2, 1.0, 0.0, ""),
    SpnDefinition(559, "accelerator_pedal_kickdown", 61443, 0, 2, 2, 1.0, 0.0, ""),
    SpnDefinition(1437, "road_speed_limit_status", 61443, 0, 4, 2, 1.0, 0.0, ""),
    SpnDefinition(2970, "accelerator_pedal_2_low_switch", 61443, 0, 6, 2, 1.0, 0.0, ""),
    SpnDefinition(91, "accelerator_pedal_position_1", 61443, 1, 0, 8, 0.4, 0.0, "%"),
    SpnDefinition(92, "percent_load_current_speed", 61443, 2, 0, 8, 1.0, 0.0, "%"),
    SpnDefinition(974, "remote_accelerator_position", 61443, 3, 0, 8, 0.4, 0.0, "%"),
    SpnDefinition(29, "accelerator_pedal_position_2", 61443, 4, 0, 8, 0.4, 0.0, "%"),
    SpnDefinition(2979, "vehicle_acceleration_rate_limit", 61443, 5, 0, 8, 1.0, 0.0, ""),
    SpnDefinition(5021, "momentary_engine_max_power_enable", 61443, 6, 0, 2, 1.0, 0.0, ""),

    # EEC3 - Electronic Engine Controller 3 (0xFEDF)
    SpnDefinition(514, "nominal_friction_percent_torque", 65247, 0, 0, 8, 1.0, -125.0, "%"),
    SpnDefinition(515, "engine_desired_operating_speed", 65247, 1, 0, 16, 0.125, 0.0, "RPM"),
    SpnDefinition(519, "engine_operating_speed_asymmetry_adjust", 65247, 3, 0, 8, 1.0, 0.0, ""),
    SpnDefinition(2978, "estimated_engine_parasitic_losses", 65247, 4, 0, 8, 1.0, -125.0, "%"),
    SpnDefinition(6595, "aftertreatment_1_exhaust_gas_mass_flow", 65247, 5, 0, 16, 0.2, 0.0, "kg/h"),

    # ET1 - Engine Temperature 1 (0xFEEE)
    SpnDefinition(110, "engine_coolant_temperature", 65262, 0, 0, 8, 1.0, -40.0, "C"),
    SpnDefinition(174, "fuel_temperature", 65262, 1, 0, 8, 1.0, -40.0, "C"),
    SpnDefinition(175, "engine_oil_temperature_1", 65262, 2, 0, 16, 0.03125, -273.0, "C"),
    SpnDefinition(176, "turbo_oil_temperature", 65262, 4, 0, 16, 0.03125, -273.0, "C"),
    SpnDefinition(52, "engine_intercooler_temperature", 65262, 6, 0, 8, 1.0, -40.0, "C"),
    SpnDefinition(1134, "engine_intercooler_thermostat_opening", 65262, 7, 0, 8, 0.4, 0.0, "%"),

    # EFL/P1 - Engine Fluid Level/Pressure 1 (0xFEEF)
    SpnDefinition(94, "fuel_delivery_pressure", 65263, 0, 0, 8, 4.0, 0.0, "kPa"),
    SpnDefinition(22, "extended_crankcase_blowby_pressure", 65263, 1, 0, 8, 0.05, 0.0, "kPa"),
    SpnDefinition(98, "engine_oil_level", 65263, 2, 0, 8, 0.4, 0.0, "%"),
    SpnDefinition(100, "engine_oil_pressure", 65263, 3, 0, 8, 4.0, 0.0, "kPa"),
    SpnDefinition(101, "crankcase_pressure", 65263, 4, 0, 16, 0.0078125, -250.0, "kPa"),
    SpnDefinition(109, "coolant_pressure", 65263, 6, 0, 8, 2.0, 0.0, "kPa"),
    SpnDefinition(111, "coolant_level", 65263, 7, 0, 8, 0.4, 0.0, "%"),

    # IC1 - Inlet/Exhaust Conditions 1 (0xFEF6)
    SpnDefinition(81, "particulate_trap_inlet_pressure", 65270, 0, 0, 8, 0.5, 0.0, "kPa"),
    SpnDefinition(102, "boost_pressure", 65270, 1, 0, 8, 2.0, 0.0, "kPa"),
    SpnDefinition(105, "intake_manifold_temperature", 65270, 2, 0, 8, 1.0, -40.0, "C"),
    SpnDefinition(106, "air_inlet_pressure", 65270, 3, 0, 8, 2.0, 0.0, "kPa"),
    SpnDefinition(107, "air_filter_differential_pressure", 65270, 4, 0, 8, 0.05, 0.0, "kPa"),
    SpnDefinition(173, "exhaust_gas_temperature", 65270, 5, 0, 16, 0.03125, -273.0, "C"),
    SpnDefinition(112, "coolant_filter_differential_pressure", 65270, 7, 0, 8, 0.5, 0.0, "kPa"),

    # VEP1 - Vehicle Electrical Power 1 (0xFEF7)
    SpnDefinition(114, "net_battery_current", 65271, 0, 0, 16, 1.0, -125.0, "A"),
    SpnDefinition(115, "alternator_current", 65271, 2, 0, 16, 1.0, 0.0, "A"),
    SpnDefinition(168, "battery_potential", 65271, 4, 0, 16, 0.05, 0.0, "V"),
    SpnDefinition(158, "keyswitch_battery_potential", 65271, 6, 0, 16, 0.05, 0.0, "V"),

    # AMB - Ambient Conditions (0xFEF5)
    SpnDefinition(108, "barometric_pressure", 65269, 0, 0, 8, 0.5, 0.0, "kPa"),
    SpnDefinition(170, "cab_interior_temperature", 65269, 1, 0, 16, 0.03125, -273.0, "C"),
    SpnDefinition(171, "ambient_air_temperature", 65269, 3, 0, 16, 0.03125, -273.0, "C"),
    SpnDefinition(172, "air_inlet_temperature", 65269, 5, 0, 8, 1.0, -40.0, "C"),
    SpnDefinition(79, "road_surface_temperature", 65269, 6, 0, 16, 0.03125, -273.0, "C"),

    # LFE - Fuel Economy (0xFEF2)
    SpnDefinition(183, "fuel_rate", 65266, 0, 0, 16, 0.05, 0.0, "L/h"),
    SpnDefinition(184, "instantaneous_fuel_economy", 65266, 2, 0, 16, 0.001953125, 0.0, "km/L"),
    SpnDefinition(185, "average_fuel_economy", 65266, 4, 0, 16, 0.001953125, 0.0, "km/L"),
    SpnDefinition(51, "throttle_position", 65266, 6, 0, 8, 0.4, 0.0, "%"),

    # HOURS - Engine Hours, Revolutions (0xFEE5)
    SpnDefinition(247, "engine_total_hours_of_operation", 65253, 0, 0, 32, 0.05, 0.0, "h"),
    SpnDefinition(249, "engine_total_revolutions", 65253, 4, 0, 32, 1000.0, 0.0, "r"),

    # LFC - Fuel Consumption (0xFEE9)
    SpnDefinition(182, "engine_trip_fuel", 65257, 0, 0, 32, 0.5, 0.0, "L"),
    SpnDefinition(250, "engine_total_fuel_used", 65257, 4, 0, 32, 0.5, 0.0, "L"),

    # Idle/PTO hours (0xFEC1)
    SpnDefinition(246, "engine_total_idle_hours", 65217, 0, 0, 32, 0.05, 0.0, "h"),
    SpnDefinition(248, "engine_total_pto_hours", 65217, 4, 0, 32, 0.05, 0.0, "h"),

    # VD - Vehicle Distance (0xFEE0)
    SpnDefinition(244, "trip_distance", 65248, 0, 0, 32, 0.125, 0.0, "km"),
    SpnDefinition(245, "total_vehicle_distance", 65248, 4, 0, 32, 0.125, 0.0, "km"),

    # CCVS - Cruise Control/Vehicle Speed (0xFEF1)
    SpnDefinition(69, "two_speed_axle_switch", 65265, 0, 0, 2, 1.0, 0.0, ""),
    SpnDefinition(70, "parking_brake_switch", 65265, 0, 2, 2, 1.0, 0.0, ""),
    SpnDefinition(84, "wheel_based_vehicle_speed", 65265, 1, 0, 16, 0.00390625, 0.0, "km/h"),
    SpnDefinition(595, "cruise_control_active", 65265, 3, 0, 2, 1.0, 0.0, ""),
    SpnDefinition(596, "cruise_control_enable_switch", 65265, 3, 2, 2, 1.0, 0.0, ""),
    SpnDefinition(86, "cruise_control_set_speed", 65265, 5, 0, 8, 1.0, 0.0, "km/h"),
    SpnDefinition(976, "pto_state", 65265, 6, 0, 5, 1.0, 0.0, ""),
)
