"""Sample circuits and a command that prints or plots them."""

import argparse
from pathlib import Path

from zcalc.network import Network
from zcalc.plotter import plot


def _network(*nodes):
    network = Network()
    for node in nodes:
        network.add_node(node)
    return network


def basic_network():
    """A 5 V, 50 kHz source over two 10 ohm resistors in series."""
    network = _network("gnd", "in", "out")
    network.add_voltage_source("U1", 5, 50.0e3, "in", "gnd")
    network.add_resistor("R1", 10, "in", "out")
    network.add_resistor("R2", 10, "out", "gnd")
    return network


def bandpass_network():
    """A passive RC band-pass filter."""
    network = _network("A", "gnd", "in", "out")
    network.add_voltage_source("Us", 1.0, 0.0, "in", "gnd")
    network.add_resistor("R_output", 10e9, "out", "gnd")
    network.add_capacitor("C1", 15e-9, "in", "A")
    network.add_resistor("R1", 10e3, "A", "gnd")
    network.add_resistor("R2", 10e3, "A", "out")
    network.add_capacitor("C2", 560.0e-12, "out", "gnd")
    return network


def capacitor_network():
    """The equivalent circuit of a real capacitor driven by a current source."""
    network = _network("gnd", "in", "A", "B")
    network.add_current_source("Is", 1.0, 0.0, "in", "gnd")
    network.add_capacitor("C", 100.0e-9, "in", "A")
    network.add_resistor("R_esr", 0.01, "A", "B")
    network.add_inductor("L_esl", 10.0e-9, "B", "gnd")
    network.add_resistor("R_output", 10e9, "in", "gnd")
    return network


def lora_filter_network():
    """An LC filter for the 868 MHz band."""
    network = _network("gnd", "in", "out")
    network.add_voltage_source("Us", 1.0, 868.0e6, "in", "gnd")
    network.add_resistor("R_output", 10e9, "out", "gnd")
    network.add_capacitor("C1", 4.7e-12, "in", "gnd")
    network.add_capacitor("C2", 1.2e-12, "in", "out")
    network.add_inductor("L1", 6.2e-9, "in", "out")
    network.add_capacitor("C3", 1.8e-12, "out", "gnd")
    network.add_resistor("RL", 50.0, "out", "gnd")
    return network


def lc_filter_network():
    """An LC low-pass filter."""
    network = _network("gnd", "in", "out")
    network.add_voltage_source("Us", 1.0, 0.0, "in", "gnd")
    network.add_resistor("R_output", 10e9, "out", "gnd")
    network.add_inductor("L", 10e-9, "in", "out")
    network.add_capacitor("C", 100e-9, "out", "gnd")
    return network


def rc_element_network():
    """An RC low-pass filter."""
    network = _network("gnd", "in", "out")
    network.add_voltage_source("Us", 1.0, 0.0, "in", "gnd")
    network.add_resistor("R_output", 10e9, "out", "gnd")
    network.add_resistor("R", 50.0, "in", "out")
    network.add_capacitor("C", 100.0e-6, "out", "gnd")
    return network


# name -> (builder, input source, output component); None marks a printed example
_EXAMPLES = {
    "basic": (basic_network, None, None),
    "bandpass": (bandpass_network, "Us", "R_output"),
    "capacitor": (capacitor_network, "Is", "R_output"),
    "lora_filter": (lora_filter_network, "Us", "R_output"),
    "lc_filter": (lc_filter_network, "Us", "R_output"),
    "rc_element": (rc_element_network, "Us", "R_output"),
}


def main(argv=None):
    """Print the basic network and write Bode diagrams of the others."""
    parser = argparse.ArgumentParser(
        prog="zcalc-examples", description="Run the sample circuits."
    )
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="EXAMPLE",
        help=f"examples to run, any of: {', '.join(_EXAMPLES)} (default: all)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="directory for the HTML diagrams",
    )
    args = parser.parse_args(argv)

    names = args.examples or list(_EXAMPLES)
    unknown = [name for name in names if name not in _EXAMPLES]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)}")

    for name in names:
        builder, source, output = _EXAMPLES[name]
        network = builder()
        if source is None:
            print(network, end="")
        else:
            path = plot(args.output_dir / name, network, source, output)
            print(f"wrote {path}")
    return 0