"""Shared numeric constants and SI unit prefixes."""

import math
from enum import Enum

EPSILON = 1e-4
PI = math.pi
LOG_ENABLED = True

EQU_CURRENT_OFFSET = 0
EQU_VOLTAGE_OFFSET = 1


class UnitPrefix(Enum):
    """SI unit prefixes, each valued by its multiplier."""

    PETA = 1.0e15
    TERA = 1.0e12
    GIGA = 1.0e9
    MEGA = 1.0e6
    KILO = 1.0e3
    HECTO = 1.0e2
    DEKA = 10.0
    BASE = 1.0
    DECI = 0.1
    CENTI = 1.0e-2
    MILLI = 1.0e-3
    MICRO = 1.0e-6
    NANO = 1.0e-9
    ANGSTROM = 1.0e-10
    PICO = 1.0e-12


def prefixed_value(value, prefix):
    """Return ``value`` expressed in base units, given it is in ``prefix`` units."""
    if not isinstance(prefix, UnitPrefix):
        raise TypeError(f"unknown unit prefix: {prefix!r}")
    return value * prefix.value