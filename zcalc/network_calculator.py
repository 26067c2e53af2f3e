"""Steady-state AC analysis of a network by superposition of its sources."""

from dataclasses import dataclass, field

from zcalc.complex_number import Complex
from zcalc.equation_system import LinearEquationSystem, SolveError
from zcalc.linear_equation import LinearEquation
from zcalc.phasor import Phasor
from zcalc.units import EQU_CURRENT_OFFSET, EQU_VOLTAGE_OFFSET, LOG_ENABLED

_ZERO = Complex(0.0, 0.0)


@dataclass
class Result:
    """Voltages and currents of one component, one phasor per source."""

    voltages: list = field(default_factory=list)
    currents: list = field(default_factory=list)


def _current_index(component):
    return 2 * component.id + EQU_CURRENT_OFFSET


def _voltage_index(component):
    return 2 * component.id + EQU_VOLTAGE_OFFSET


def _kcl_equations(graph, num_variables):
    """One Kirchhoff current law equation per node."""
    for vertex in range(graph.vertices):
        equation = LinearEquation(num_variables, f"kcl_{vertex}")
        equation.result = _ZERO
        for edge in graph.edges:
            component = edge.weight
            equation[_current_index(component)] = component.kcl(vertex)
            equation[_voltage_index(component)] = _ZERO
        yield equation


def _kvl_equation(cycle, num_variables):
    """The Kirchhoff voltage law equation of one loop."""
    equation = LinearEquation(num_variables, "kvl")
    equation.result = _ZERO
    edges = cycle.edges
    last_vertex = edges[0].v0 if edges else 0
    for edge, next_edge in zip(edges, [*edges[1:], None]):
        component = edge.weight
        equation[_current_index(component)] = _ZERO
        if next_edge is not None:
            neighbours = (next_edge.v0, next_edge.v1)
            if edge.v0 in neighbours:
                equation[_voltage_index(component)] = component.kvl(edge.v1)
                last_vertex = edge.v0
            elif edge.v1 in neighbours:
                equation[_voltage_index(component)] = component.kvl(edge.v0)
                last_vertex = edge.v1
            else:
                raise RuntimeError("unexpected edge in the cycle")
        elif edge.v0 == last_vertex:
            equation[_voltage_index(component)] = component.kvl(edge.v0)
        elif edge.v1 == last_vertex:
            equation[_voltage_index(component)] = component.kvl(edge.v1)
        else:
            raise RuntimeError("unexpected edge in the cycle")
    return equation


def _own_equations(graph, num_variables):
    """The defining equation of every component."""
    for edge in graph.edges:
        component = edge.weight
        equation = LinearEquation(num_variables, f"own_{component.id}")
        equation.result = component.own_r()
        equation[_current_index(component)] = component.own_i()
        equation[_voltage_index(component)] = component.own_u()
        yield equation


def compute(network):
    """Solve ``network`` once per source and return a ``Result`` per component id.

    Each source is switched on alone in turn and the remaining sources are
    eliminated; the phasors of every run are appended to the results in the
    order of the sources' designators.
    """
    graph = network.to_component_graph()
    sources = []
    for edge in graph.edges:
        if edge.weight.is_source():
            edge.weight.eliminate()
            sources.append(edge.weight)

    num_variables = sum(edge.weight.num_variables for edge in graph.edges)
    if num_variables % 2 != 0:
        raise ValueError("cannot deal with an odd number of variables")

    results = {edge.weight.id: Result() for edge in graph.edges}

    system = LinearEquationSystem(num_variables)
    if LOG_ENABLED:
        for edge in graph.edges:
            component = edge.weight
            designator = network.designator_of(component.id)
            system.set_label(f"I_{designator}", _current_index(component))
            system.set_label(f"U_{designator}", _voltage_index(component))
        system.set_label("result", num_variables)

    for source in sources:
        source.reactivate()
        try:
            frequency = source.frequency()
            for edge in graph.edges:
                if not edge.weight.is_source():
                    edge.weight.set_frequency(frequency)

            system.clear_equations()
            for equation in _kcl_equations(graph, num_variables):
                system.append_equation(equation)
            for cycle in graph.find_cycles():
                system.append_equation(_kvl_equation(cycle, num_variables))
            for equation in _own_equations(graph, num_variables):
                system.append_equation(equation)

            try:
                solution = system.solve()
            except SolveError as err:
                raise SolveError(f"could not solve equation system: {err}") from err
            if len(solution) != num_variables:
                raise RuntimeError("unexpected solution size")

            for component_id in range(num_variables // 2):
                result = results[component_id]
                base = 2 * component_id
                result.currents.append(
                    Phasor.from_complex(solution[base + EQU_CURRENT_OFFSET], frequency)
                )
                result.voltages.append(
                    Phasor.from_complex(solution[base + EQU_VOLTAGE_OFFSET], frequency)
                )
        finally:
            source.eliminate()
    return results