"""Sinusoidal quantities described by magnitude, phase and frequency."""

from dataclasses import dataclass

from zcalc.complex_number import Complex
from zcalc.units import PI


@dataclass
class Phasor:
    """A sinusoid ``magnitude * cos(2*pi*frequency*t + phase)``."""

    magnitude: float
    phase: float
    frequency: float = 0.0

    def to_complex(self):
        return Complex.from_polar(self.magnitude, self.phase)

    @classmethod
    def from_complex(cls, value, frequency=0.0):
        value = Complex(value)
        return cls(value.abs(), value.arg(), frequency)

    def __str__(self):
        return f"{self.magnitude:g}cos({2.0 * PI * self.frequency:g}t+{self.phase:g})"