import pytest

from zcalc.complex_number import Complex
from zcalc.examples import (
    bandpass_network,
    basic_network,
    capacitor_network,
    lc_filter_network,
    lora_filter_network,
    main,
    rc_element_network,
)
from zcalc.network_calculator import compute


@pytest.mark.parametrize(
    "builder, num_nodes, designators",
    [
        (basic_network, 3, ["U1", "R1", "R2"]),
        (bandpass_network, 4, ["Us", "R_output", "C1", "R1", "R2", "C2"]),
        (capacitor_network, 4, ["Is", "C", "R_esr", "L_esl", "R_output"]),
        (lora_filter_network, 3, ["Us", "R_output", "C1", "C2", "L1", "C3", "RL"]),
        (lc_filter_network, 3, ["Us", "R_output", "L", "C"]),
        (rc_element_network, 3, ["Us", "R_output", "R", "C"]),
    ],
)
def test_networks(builder, num_nodes, designators):
    network = builder()
    assert network.num_nodes == num_nodes
    assert [network.designator_of(i) for i in range(len(designators))] == designators
    assert network.designator_of(len(designators)) is None


def test_basic_network_solution():
    network = basic_network()
    results = compute(network)
    voltage = results[network.component_id("R2")].voltages[0]
    assert voltage.to_complex() == Complex(2.5, 0.0)
    assert voltage.frequency == 50.0e3


def test_capacitor_network_is_current_driven():
    network = capacitor_network()
    source = network.component("Is")
    assert source.is_source()
    assert source.frequency() == 0.0
    assert network.node(source.gate(0)) if False else source.gate(0) == network.node("in")


def test_main_prints_basic(capsys):
    assert main(["basic"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("nodes\n")
    assert "components" in out
    assert "U1" in out


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit):
        main(["nope"])


def test_main_writes_plot(tmp_path, capsys):
    assert main(["rc_element", "--output-dir", str(tmp_path)]) == 0
    path = tmp_path / "rc_element.html"
    assert path.is_file()
    assert str(path) in capsys.readouterr().out
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")