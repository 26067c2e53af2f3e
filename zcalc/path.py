"""Walks through a graph made of consecutive edges."""

from zcalc.edge import Edge


class Path:
    """A walk that starts at a vertex and follows connected edges."""

    def __init__(self, start):
        self.start = start
        self._edges = []

    def clear(self):
        self._edges.clear()

    def is_cycle(self):
        """True when the path is non-empty and returns to its start."""
        return bool(self._edges) and self._edges[-1].v1 == self.start

    @property
    def end(self):
        return self._edges[-1].v1 if self._edges else self.start

    def fits(self, edge):
        """True when ``edge`` can be walked from the current end of the path."""
        return edge.can_start_at(self.end)

    def append(self, edge):
        """Add a copy of ``edge``, oriented so that it starts at the current end."""
        if not self.fits(edge):
            raise ValueError("edge does not start where it should")
        if edge.v0 == self.end:
            self._edges.append(Edge(edge.v0, edge.v1, edge.weight, edge.direction))
        else:
            self._edges.append(edge.flipped())

    def pop(self):
        """Remove the last edge, if any."""
        if self._edges:
            self._edges.pop()

    @property
    def edges(self):
        return tuple(self._edges)

    def contains(self, edge):
        return any(edge == own for own in self._edges)

    def __contains__(self, edge):
        return self.contains(edge)

    def __len__(self):
        return len(self._edges)

    def __copy__(self):
        path = Path(self.start)
        path._edges = list(self._edges)
        return path

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return len(self) == len(other) and all(other.contains(e) for e in self._edges)

    __hash__ = None

    def __str__(self):
        return "".join(f"{edge} " for edge in self._edges)