"""Complex numbers compared with a fixed tolerance."""

import cmath
import math
from enum import Enum

from zcalc.units import EPSILON


class PrintFormat(Enum):
    """Textual representations of a complex number."""

    BASIC = "basic"
    TRIG_RAD = "trig_rad"
    TRIG_DEG = "trig_deg"
    EULER_RAD = "euler_rad"
    EULER_DEG = "euler_deg"


def _coerce(value):
    if isinstance(value, Complex):
        return value._value
    if isinstance(value, (int, float, complex)):
        return complex(value)
    return None


class Complex:
    """Complex value whose equality tolerates differences below ``EPSILON``."""

    __slots__ = ("_value",)

    def __init__(self, real=0.0, imag=0.0):
        if isinstance(real, (Complex, complex)):
            self._value = complex(real) + complex(0.0, imag)
        else:
            self._value = complex(float(real), float(imag))

    @classmethod
    def from_polar(cls, modulus, argument):
        return cls(cmath.rect(modulus, argument))

    @property
    def real(self):
        return self._value.real

    @property
    def imag(self):
        return self._value.imag

    def abs(self):
        return abs(self._value)

    def arg(self):
        return cmath.phase(self._value)

    def format(self, fmt=PrintFormat.BASIC):
        """Render the number in the requested representation."""
        if fmt is PrintFormat.BASIC:
            if self.imag == 0.0:
                return f"({self.real:g}+j0)"
            if self.imag > 0.0:
                return f"({self.real:g}+j{self.imag:g})"
            return f"({self.real:g}-j{-self.imag:g})"
        modulus = self.abs()
        if fmt is PrintFormat.TRIG_RAD:
            arg = self.arg()
            return f"{modulus:g}*(cos({arg:g})+j*sin({arg:g}))"
        if fmt is PrintFormat.TRIG_DEG:
            arg = math.degrees(self.arg())
            return f"{modulus:g}*(cos({arg:g})+j*sin({arg:g}°))"
        if fmt is PrintFormat.EULER_RAD:
            return f"{modulus:g}<{self.arg():g}"
        if fmt is PrintFormat.EULER_DEG:
            return f"{modulus:g}<{math.degrees(self.arg()):g}°"
        raise ValueError(f"unknown print format: {fmt!r}")

    def __neg__(self):
        return Complex(-self._value)

    def __pos__(self):
        return Complex(self._value)

    def __add__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(self._value + value)

    def __radd__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(value + self._value)

    def __sub__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(self._value - value)

    def __rsub__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(value - self._value)

    def __mul__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(self._value * value)

    def __rmul__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(value * self._value)

    def __truediv__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(self._value / value)

    def __rtruediv__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Complex(value / self._value)

    def __eq__(self, other):
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return (
            abs(self.real - value.real) < EPSILON
            and abs(self.imag - value.imag) < EPSILON
        )

    __hash__ = None

    def __complex__(self):
        return self._value

    def __str__(self):
        return self.format(PrintFormat.BASIC)

    def __repr__(self):
        return f"Complex({self.real!r}, {self.imag!r})"