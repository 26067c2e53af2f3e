"""Dense matrices of arbitrary numeric elements."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Row and column count of a matrix."""

    row: int
    col: int


def _fmt(value):
    return format(value, "g") if isinstance(value, float) else str(value)


class Matrix:
    """A rows-by-columns matrix initialised with zeros."""

    def __init__(self, num_rows, num_cols):
        if num_rows < 1:
            raise ValueError("number of rows cannot be 0")
        if num_cols < 1:
            raise ValueError("number of columns cannot be 0")
        self._rows = [[0] * num_cols for _ in range(num_rows)]

    @classmethod
    def _from_rows(cls, rows):
        matrix = cls(len(rows), len(rows[0]))
        matrix._rows = rows
        return matrix

    @property
    def num_rows(self):
        return len(self._rows)

    @property
    def num_cols(self):
        return len(self._rows[0])

    @property
    def dimensions(self):
        return Dimensions(self.num_rows, self.num_cols)

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        return self._rows[key]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            i, j = key
            self._rows[i][j] = value
            return
        row = list(value)
        if len(row) != self.num_cols:
            raise ValueError("row length must match the number of columns")
        self._rows[key] = row

    def _check_same_shape(self, other):
        if self.dimensions != other.dimensions:
            raise ValueError("matrixes must be of the same dimension")

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._from_rows(
            [[a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._from_rows(
            [[a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)]
        )

    def __mul__(self, other):
        if isinstance(other, Matrix):
            if self.num_cols != other.num_rows:
                raise ValueError("matrix dimensions do not allow multiplication")
            columns = list(zip(*other._rows))
            return Matrix._from_rows(
                [
                    [sum((a * b for a, b in zip(row, col)), 0) for col in columns]
                    for row in self._rows
                ]
            )
        return Matrix._from_rows([[other * v for v in row] for row in self._rows])

    def __rmul__(self, scalar):
        return Matrix._from_rows([[scalar * v for v in row] for row in self._rows])

    def __truediv__(self, scalar):
        return Matrix._from_rows([[v / scalar for v in row] for row in self._rows])

    def __rtruediv__(self, scalar):
        return Matrix._from_rows([[scalar / v for v in row] for row in self._rows])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dimensions == other.dimensions and all(
            a == b for ra, rb in zip(self._rows, other._rows) for a, b in zip(ra, rb)
        )

    __hash__ = None

    def __str__(self):
        lines = [f"dimensions : {self.num_rows}x{self.num_cols}"]
        for row in self._rows:
            lines.append("[ " + "".join(f"{_fmt(v)} " for v in row) + "]")
        return "\n".join(lines) + "\n"