import cmath
import math

import pytest

from zcalc.complex_number import Complex, PrintFormat
from zcalc.units import EPSILON

COMPARISON_EPSILON = 1e-9


def test_simple():
    c0 = Complex(5.0, 3.0)
    c1 = Complex(-2.0, 8.5)
    assert c0 * c1 == Complex(-35.5, 36.5)

    c0_orig = c0
    c0 += Complex(EPSILON / 2.0, 0.0)
    assert c0 == c0_orig

    c0 += Complex(EPSILON, 0.0)
    assert c0 != c0_orig


def test_constructors():
    c1 = Complex()
    assert c1.real == 0.0
    assert c1.imag == 0.0

    c2 = Complex(3.5, -2.5)
    assert c2.real == 3.5
    assert c2.imag == -2.5

    c3 = Complex(4.0)
    assert c3.real == 4.0
    assert c3.imag == 0.0

    c4 = Complex(2, 3)
    assert c4.real == 2
    assert c4.imag == 3


def test_constructor_from_builtin_complex():
    c = Complex(3 + 4j)
    assert c.real == 3.0
    assert c.imag == 4.0


def test_unary_operators():
    c = Complex(3.0, -4.0)
    neg_c = -c
    assert neg_c.real == -3.0
    assert neg_c.imag == 4.0

    pos_c = +c
    assert pos_c.real == 3.0
    assert pos_c.imag == -4.0


def test_arithmetic_operations():
    c1 = Complex(1.0, 2.0)
    c2 = Complex(3.0, 4.0)

    total = c1 + c2
    assert total.real == 4.0
    assert total.imag == 6.0

    diff = c1 - c2
    assert diff.real == -2.0
    assert diff.imag == -2.0

    prod = c1 * c2
    assert prod.real == -5.0
    assert prod.imag == 10.0

    quot = c1 / c2
    assert quot.real == pytest.approx(0.44, abs=COMPARISON_EPSILON)
    assert quot.imag == pytest.approx(0.08, abs=COMPARISON_EPSILON)


def test_compound_assignment():
    c1 = Complex(1.0, 2.0)
    c2 = Complex(3.0, 4.0)

    c1 += c2
    assert c1.real == 4.0
    assert c1.imag == 6.0

    c1 -= c2
    assert c1.real == 1.0
    assert c1.imag == 2.0

    c1 *= c2
    assert c1.real == -5.0
    assert c1.imag == 10.0

    c1 /= c2
    assert c1.real == pytest.approx(1.0, abs=COMPARISON_EPSILON)
    assert c1.imag == pytest.approx(2.0, abs=COMPARISON_EPSILON)


def test_comparison():
    c1 = Complex(1.0, 2.0)
    c2 = Complex(1.0 + EPSILON / 2.0, 2.0)
    c3 = Complex(1.0 + EPSILON * 4.0, 2.0)
    assert c1 == c2
    assert c1 != c3


def test_mixed_with_plain_numbers():
    c = Complex(1.0, 2.0)
    assert c + 1 == Complex(2.0, 2.0)
    assert 1 - c == Complex(0.0, -2.0)
    assert 2.0 * c == Complex(2.0, 4.0)
    assert Complex(0.0, 0.0) == 0


def test_magnitude_and_phase():
    c = Complex(3.0, 4.0)
    assert c.abs() == 5.0
    assert c.arg() == pytest.approx(math.atan2(4.0, 3.0), abs=COMPARISON_EPSILON)


def test_edge_cases():
    zero = Complex(0.0, 0.0)
    assert zero.abs() == 0.0
    assert zero.arg() == 0.0

    assert Complex(5.0, 0.0).arg() == 0.0
    assert Complex(0.0, 5.0).arg() == pytest.approx(math.pi / 2, abs=COMPARISON_EPSILON)
    assert Complex(-5.0, 0.0).arg() == pytest.approx(math.pi, abs=COMPARISON_EPSILON)


def test_from_polar():
    c = Complex.from_polar(2.0, math.pi / 2)
    assert c == Complex(0.0, 2.0)


def test_complex_conversion():
    assert complex(Complex(1.5, -2.5)) == 1.5 - 2.5j
    assert cmath.phase(complex(Complex(0.0, 1.0))) == pytest.approx(math.pi / 2)


def test_basic_format():
    assert str(Complex(1.0, 2.0)) == "(1+j2)"
    assert str(Complex(1.0, -2.0)) == "(1-j2)"
    assert str(Complex(3.0, 0.0)) == "(3+j0)"


def test_euler_formats():
    assert Complex(0.0, 1.0).format(PrintFormat.EULER_DEG) == "1<90°"
    assert Complex(3.0, 4.0).format(PrintFormat.EULER_RAD).startswith("5<")


def test_trig_formats():
    assert Complex(2.0, 0.0).format(PrintFormat.TRIG_RAD) == "2*(cos(0)+j*sin(0))"
    assert Complex(0.0, 1.0).format(PrintFormat.TRIG_DEG) == "1*(cos(90)+j*sin(90°))"


def test_unsupported_operand():
    with pytest.raises(TypeError):
        Complex(1.0, 1.0) + "x"