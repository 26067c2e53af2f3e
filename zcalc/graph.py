"""Graphs of weighted edges with cycle enumeration."""

import copy

from zcalc.edge import Edge, EdgeDirection
from zcalc.path import Path


class Graph:
    """A graph with ``vertices`` numbered vertices and a list of edges."""

    def __init__(self, vertices=0):
        self.vertices = vertices
        self._edges = []

    def add_edge(self, v0, v1, weight, direction=EdgeDirection.BIDIRECTIONAL):
        self._edges.append(Edge(v0, v1, weight, direction))

    @property
    def edges(self):
        return tuple(self._edges)

    def _dfs(self, node, visited, path, cycles):
        visited[node] = True
        for edge in self._edges:
            if edge.was_traversed() or not path.fits(edge):
                continue
            edge.traverse()
            path.append(edge)
            if path.is_cycle():
                if not any(found == path for found in cycles):
                    cycles.append(copy.copy(path))
            elif not visited[path.end]:
                self._dfs(path.end, visited, path, cycles)
            path.pop()
            edge.reset()
        visited[node] = False

    def find_cycles(self):
        """Return every distinct cycle, each as a ``Path``."""
        cycles = []
        for start in range(self.vertices):
            visited = [False] * self.vertices
            self._dfs(start, visited, Path(start), cycles)
        return cycles

    def __str__(self):
        lines = [f"number of vertices : {self.vertices}", *(str(e) for e in self._edges)]
        return "\n".join(lines) + "\n"