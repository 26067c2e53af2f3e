"""Weighted, optionally directed edges between integer vertices."""

from enum import Enum


class EdgeDirection(Enum):
    """Which way an edge between ``v0`` and ``v1`` may be walked."""

    BIDIRECTIONAL = "bidirectional"  # 0 <-> 1
    FORWARD = "forward"  # 0 -> 1
    REVERSE = "reverse"  # 0 <- 1


_OPPOSITE = {
    EdgeDirection.BIDIRECTIONAL: EdgeDirection.BIDIRECTIONAL,
    EdgeDirection.FORWARD: EdgeDirection.REVERSE,
    EdgeDirection.REVERSE: EdgeDirection.FORWARD,
}

_ARROWS = {
    EdgeDirection.BIDIRECTIONAL: ("--(", ")--"),
    EdgeDirection.FORWARD: ("--(", ")->"),
    EdgeDirection.REVERSE: ("<-(", ")--"),
}


def _fmt(value):
    return format(value, "g") if isinstance(value, float) else str(value)


class Edge:
    """An edge from ``v0`` to ``v1`` carrying ``weight``."""

    __slots__ = ("v0", "v1", "weight", "direction", "_traversed")

    def __init__(self, v0, v1, weight, direction=EdgeDirection.BIDIRECTIONAL):
        self.v0 = v0
        self.v1 = v1
        self.weight = weight
        self.direction = direction
        self._traversed = False

    def traverse(self):
        self._traversed = True

    def was_traversed(self):
        return self._traversed

    def reset(self):
        self._traversed = False

    def can_start_at(self, vertex):
        """True when the edge may be walked starting from ``vertex``."""
        if vertex == self.v0:
            return self.direction in (EdgeDirection.BIDIRECTIONAL, EdgeDirection.FORWARD)
        if vertex == self.v1:
            return self.direction in (EdgeDirection.BIDIRECTIONAL, EdgeDirection.REVERSE)
        return False

    def flip(self):
        """Swap the endpoints in place, keeping the edge's meaning."""
        self.v0, self.v1 = self.v1, self.v0
        self.direction = _OPPOSITE[self.direction]

    def flipped(self):
        """Return a new edge with the endpoints swapped."""
        return Edge(self.v1, self.v0, self.weight, _OPPOSITE[self.direction])

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        if self.weight != other.weight:
            return False
        if self.v0 == other.v0:
            return self.v1 == other.v1 and self.direction == other.direction
        if self.v0 == other.v1:
            return self.v1 == other.v0 and other.direction == _OPPOSITE[self.direction]
        return False

    __hash__ = None

    def __str__(self):
        left, right = _ARROWS[self.direction]
        return f"{self.v0} {left}{_fmt(self.weight)}{right} {self.v1}"

    def __repr__(self):
        return f"Edge({self.v0!r}, {self.v1!r}, {self.weight!r}, {self.direction})"