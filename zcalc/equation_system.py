"""Systems of complex linear equations solved by Gaussian elimination."""

from zcalc.complex_number import Complex

_ZERO = Complex(0.0, 0.0)


class SolveError(ArithmeticError):
    """Raised when a linear equation system has no unique solution."""


def _as_complex(equation):
    """Return a copy of ``equation`` whose coefficients and result are ``Complex``."""
    converted = equation.copy()
    for index in range(converted.num_variables):
        converted[index] = Complex(converted[index])
    converted.result = Complex(converted.result)
    return converted


def _leftmost_nonzero(equations, start, num_variables):
    """Find the pivot: the leftmost column holding a non-zero value at or below ``start``."""
    for var_index in range(num_variables):
        for equ_index, equation in enumerate(equations[start:], start):
            if equation[var_index] != _ZERO:
                return equ_index, var_index
    return None


def _forward_elimination(equations, num_variables):
    """Reduce the equations to row echelon form in place."""
    for equ_index in range(len(equations)):
        pivot = _leftmost_nonzero(equations, equ_index, num_variables)
        if pivot is None:
            break
        pivot_row, var_index = pivot
        equations[equ_index], equations[pivot_row] = (
            equations[pivot_row],
            equations[equ_index],
        )
        current = equations[equ_index]
        current /= current[var_index]
        for below in equations[equ_index + 1:]:
            multiplier = below[var_index] / current[var_index]
            below -= current * multiplier


def _back_substitution(equations):
    """Clear the entries above each leading one, starting from the last row."""
    for equ_index in range(len(equations) - 1, -1, -1):
        current = equations[equ_index]
        if current.is_zero():
            continue
        leading = current.first_nonzero_index()
        for above in reversed(equations[:equ_index]):
            multiplier = above[leading] / current[leading]
            above[leading] = above[leading] - multiplier * current[leading]
            above.result = above.result - current.result * multiplier


def _check_solvable(equations, num_variables):
    """Raise ``SolveError`` unless the reduced system has exactly one solution."""
    rank_a = sum(1 for equation in equations if not equation.is_zero())
    rank_ab = sum(1 for equation in equations if not equation.is_full_zero())
    if rank_a != rank_ab:
        raise SolveError(
            f"rank(A) = {rank_a}, rank(A|b) = {rank_ab}: "
            "rank(A) != rank(A|b) -> no solution"
        )
    if rank_a < num_variables:
        raise SolveError(
            f"rank(A) = {rank_a}, rank(A|b) = {rank_ab}, "
            f"number of variables = {num_variables}: "
            "rank(A) == rank(A|b) < number of variables -> infinite solution"
        )


class LinearEquationSystem:
    """A set of linear equations over a fixed number of complex variables."""

    def __init__(self, num_variables):
        self._num_variables = num_variables
        self._equations = []
        self._labels = [""] * (num_variables + 1)

    def clear_equations(self):
        """Drop every equation but keep the labels."""
        self._equations.clear()

    def append_equation(self, equation):
        if equation.num_variables != self._num_variables:
            raise ValueError(
                f"equation has {equation.num_variables} variables, "
                f"expected {self._num_variables}"
            )
        self._equations.append(equation)

    def set_label(self, label, index):
        """Name a variable column; index ``num_variables`` names the result column."""
        if not 0 <= index < len(self._labels):
            raise IndexError(f"label index {index} out of range")
        self._labels[index] = label

    @property
    def num_variables(self):
        return self._num_variables

    @property
    def num_equations(self):
        return len(self._equations)

    def solve(self):
        """Return the unique solution as a list of ``Complex`` values.

        Raises ``SolveError`` when the system has no solution or infinitely many.
        The equations held by the system are left unchanged.
        """
        if self._num_variables > self.num_equations:
            raise SolveError("more variables than equations -> unable to solve")
        equations = [_as_complex(equation) for equation in self._equations]
        _forward_elimination(equations, self._num_variables)
        _back_substitution(equations)
        _check_solvable(equations, self._num_variables)
        solution = [Complex(0.0, 0.0) for _ in range(self._num_variables)]
        for equation in equations:
            leading = next(
                (
                    index
                    for index in range(self._num_variables)
                    if equation[index] != _ZERO
                ),
                None,
            )
            if leading is not None:
                solution[leading] = equation.result
        return solution

    def __str__(self):
        header = "equ\\var" + "".join(f",{label}" for label in self._labels)
        lines = [header, *(str(equation) for equation in self._equations)]
        return "\n".join(lines) + "\n"