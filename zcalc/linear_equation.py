"""A single linear equation ``a0*x0 + a1*x1 + ... = b``."""

import operator


def _fmt(value):
    return format(value, "g") if isinstance(value, float) else str(value)


class LinearEquation:
    """Coefficients of the variables and the right-hand side of one equation."""

    def __init__(self, num_variables, label=""):
        self._coefficients = [0.0] * num_variables
        self.result = 0.0
        self.label = label

    @property
    def num_variables(self):
        return len(self._coefficients)

    def __getitem__(self, index):
        return self._coefficients[index]

    def __setitem__(self, index, value):
        self._coefficients[index] = value

    def is_zero(self):
        """True when every coefficient is zero."""
        return all(c == 0 for c in self._coefficients)

    def is_full_zero(self):
        """True when every coefficient and the result are zero."""
        return self.result == 0 and self.is_zero()

    def first_nonzero_index(self):
        """Index of the first non-zero coefficient, or None if there is none."""
        return next((i for i, c in enumerate(self._coefficients) if c != 0), None)

    def copy(self):
        equation = LinearEquation(0, self.label)
        equation._coefficients = list(self._coefficients)
        equation.result = self.result
        return equation

    def _check_size(self, other):
        if self.num_variables != other.num_variables:
            raise ValueError("equations must have the same number of variables")

    @staticmethod
    def _check_divisor(value):
        if value == 0:
            raise ZeroDivisionError("cannot divide with zero")

    def _combine(self, other, op):
        self._check_size(other)
        equation = LinearEquation(0)
        equation._coefficients = [
            op(a, b) for a, b in zip(self._coefficients, other._coefficients)
        ]
        equation.result = op(self.result, other.result)
        return equation

    def _scale(self, value, op):
        equation = LinearEquation(0)
        equation._coefficients = [op(a, value) for a in self._coefficients]
        equation.result = op(self.result, value)
        return equation

    def __add__(self, other):
        if not isinstance(other, LinearEquation):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other):
        if not isinstance(other, LinearEquation):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __mul__(self, value):
        if isinstance(value, LinearEquation):
            return NotImplemented
        return self._scale(value, operator.mul)

    def __truediv__(self, value):
        if isinstance(value, LinearEquation):
            return NotImplemented
        self._check_divisor(value)
        return self._scale(value, operator.truediv)

    def __iadd__(self, other):
        combined = self + other
        self._coefficients, self.result = combined._coefficients, combined.result
        return self

    def __isub__(self, other):
        combined = self - other
        self._coefficients, self.result = combined._coefficients, combined.result
        return self

    def __imul__(self, value):
        scaled = self * value
        self._coefficients, self.result = scaled._coefficients, scaled.result
        return self

    def __itruediv__(self, value):
        scaled = self / value
        self._coefficients, self.result = scaled._coefficients, scaled.result
        return self

    def __str__(self):
        parts = [self.label, *(_fmt(c) for c in self._coefficients), _fmt(self.result)]
        return ",".join(parts)