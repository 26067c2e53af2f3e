import pytest

from zcalc.components import Capacitor, Resistor, VoltageSource
from zcalc.network import Network


@pytest.fixture
def divider():
    net = Network()
    net.add_node("gnd")
    net.add_node("in")
    net.add_node("out")
    net.add_voltage_source("U1", 5, 50.0e3, "in", "gnd")
    net.add_resistor("R1", 10, "in", "out")
    net.add_resistor("R2", 10, "out", "gnd")
    return net


def test_add_node_numbers_in_order():
    net = Network()
    assert net.add_node("gnd") == 0
    assert net.add_node("in") == 1
    assert net.node("in") == 1
    assert net.num_nodes == 2


def test_duplicate_node_raises():
    net = Network()
    net.add_node("gnd")
    with pytest.raises(ValueError):
        net.add_node("gnd")


def test_missing_node_raises():
    with pytest.raises(KeyError):
        Network().node("nowhere")


def test_component_ids_follow_insertion(divider):
    assert divider.component_id("U1") == 0
    assert divider.component_id("R1") == 1
    assert divider.component_id("R2") == 2


def test_component_types_and_nodes(divider):
    source = divider.component("U1")
    assert isinstance(source, VoltageSource)
    assert source.gate(0) == divider.node("in")
    assert source.gate(1) == divider.node("gnd")
    assert source.frequency() == 50.0e3
    assert isinstance(divider.component("R2"), Resistor)


def test_duplicate_component_raises(divider):
    with pytest.raises(ValueError):
        divider.add_resistor("R1", 5, "in", "gnd")


def test_component_with_missing_node_is_not_added(divider):
    with pytest.raises(KeyError):
        divider.add_capacitor("C1", 1e-9, "in", "nowhere")
    with pytest.raises(KeyError):
        divider.component("C1")
    assert divider.add_capacitor("C1", 1e-9, "in", "out") == 3
    assert isinstance(divider.component("C1"), Capacitor)


def test_missing_component_raises(divider):
    with pytest.raises(KeyError):
        divider.component("R9")
    with pytest.raises(KeyError):
        divider.component_id("R9")


def test_lookup_by_id(divider):
    assert divider.component_by_id(1) is divider.component("R1")
    assert divider.designator_of(2) == "R2"
    assert divider.component_by_id(42) is None
    assert divider.designator_of(42) is None


def test_to_graph_edges_sorted_by_designator(divider):
    graph = divider.to_graph()
    assert graph.vertices == divider.num_nodes
    assert [e.weight for e in graph.edges] == [
        divider.component_id("R1"),
        divider.component_id("R2"),
        divider.component_id("U1"),
    ]
    first = graph.edges[0]
    assert (first.v0, first.v1) == (divider.node("in"), divider.node("out"))


def test_to_component_graph_carries_components(divider):
    graph = divider.to_component_graph()
    weights = [e.weight for e in graph.edges]
    assert weights == [divider.component(d) for d in ("R1", "R2", "U1")]


def test_divider_has_single_loop(divider):
    cycles = divider.to_graph().find_cycles()
    assert len(cycles) == 1
    assert len(cycles[0]) == 3


def test_other_component_kinds():
    net = Network()
    net.add_node("gnd")
    net.add_node("in")
    is_id = net.add_current_source("Is", 1.0, 0.0, "in", "gnd")
    l_id = net.add_inductor("L", 10.0e-9, "in", "gnd")
    assert net.component("Is").is_source() is True
    assert net.component_by_id(l_id).is_source() is False
    assert net.designator_of(is_id) == "Is"


def test_str_lists_nodes_and_components(divider):
    text = str(divider)
    lines = text.splitlines()
    assert lines[0] == "nodes"
    assert "    gnd : 0" in lines
    assert "components" in lines
    assert any(line.startswith("    R1 : ") for line in lines)