"""Circuits built from named nodes and named components."""

from zcalc.components import (
    Capacitor,
    CurrentSource,
    Inductor,
    Resistor,
    VoltageSource,
)
from zcalc.graph import Graph

_MAX_VERTICES = 2**32 - 1


class Network:
    """A circuit: nodes and components, each known by a unique designator."""

    def __init__(self):
        self._nodes = {}
        self._components = {}

    def add_node(self, designator):
        """Add a node and return its number."""
        if designator in self._nodes:
            raise ValueError(f"node {designator} already exists")
        node = len(self._nodes)
        self._nodes[designator] = node
        return node

    def node(self, designator):
        try:
            return self._nodes[designator]
        except KeyError:
            raise KeyError(f"node {designator} does not exists") from None

    def component_id(self, designator):
        return self.component(designator).id

    def component(self, designator):
        try:
            return self._components[designator]
        except KeyError:
            raise KeyError(f"component {designator} does not exists") from None

    def component_by_id(self, component_id):
        """Return the component with ``component_id``, or None."""
        return next(
            (c for c in self._components.values() if c.id == component_id), None
        )

    def designator_of(self, component_id):
        """Return the designator of the component with ``component_id``, or None."""
        return next(
            (d for d, c in self._components.items() if c.id == component_id), None
        )

    def _add(self, designator, factory, node_0, node_1):
        if designator in self._components:
            raise ValueError(f"component {designator} already exists")
        component_id = len(self._components)
        self._components[designator] = factory(
            self.node(node_0), self.node(node_1), component_id
        )
        return component_id

    def add_voltage_source(self, designator, voltage, frequency, node_0, node_1):
        return self._add(
            designator,
            lambda n0, n1, cid: VoltageSource(voltage, n0, n1, cid, frequency),
            node_0,
            node_1,
        )

    def add_current_source(self, designator, current, frequency, node_0, node_1):
        return self._add(
            designator,
            lambda n0, n1, cid: CurrentSource(current, n0, n1, cid, frequency),
            node_0,
            node_1,
        )

    def add_resistor(self, designator, resistance, node_0, node_1):
        return self._add(
            designator,
            lambda n0, n1, cid: Resistor(resistance, n0, n1, cid),
            node_0,
            node_1,
        )

    def add_inductor(self, designator, inductance, node_0, node_1):
        return self._add(
            designator,
            lambda n0, n1, cid: Inductor(inductance, n0, n1, cid),
            node_0,
            node_1,
        )

    def add_capacitor(self, designator, capacitance, node_0, node_1):
        return self._add(
            designator,
            lambda n0, n1, cid: Capacitor(capacitance, n0, n1, cid),
            node_0,
            node_1,
        )

    @property
    def num_nodes(self):
        return len(self._nodes)

    def _sorted_components(self):
        return sorted(self._components.items())

    def _graph(self, weight_of):
        if len(self._nodes) > _MAX_VERTICES:
            raise ValueError("too many nodes in the graph")
        graph = Graph(len(self._nodes))
        for _, component in self._sorted_components():
            graph.add_edge(component.gate(0), component.gate(1), weight_of(component))
        return graph

    def to_graph(self):
        """Graph with nodes as vertices and component ids as edge weights."""
        return self._graph(lambda component: component.id)

    def to_component_graph(self):
        """Graph with nodes as vertices and the components themselves as edge weights."""
        return self._graph(lambda component: component)

    def __str__(self):
        lines = ["nodes"]
        lines += [f"    {des} : {node}" for des, node in sorted(self._nodes.items())]
        lines.append("components")
        lines += [f"    {des} : {comp!r}" for des, comp in self._sorted_components()]
        return "\n".join(lines) + "\n"