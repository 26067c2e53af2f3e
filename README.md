# zcalc

zcalc analyses linear electrical networks made of resistors, capacitors,
inductors and independent voltage and current sources. It writes the
Kirchhoff current law equation of every node, the Kirchhoff voltage law
equation of every loop and the defining equation of every component, solves
them over the complex numbers, and returns the voltage across and the current
through every component as phasors. Networks with several sources, even at
different frequencies, are solved by superposition: one result per source.

It can also sweep a source's frequency and draw a Bode diagram (magnitude
and phase) of the response into a self-contained HTML/SVG file.

The package is pure Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Describing a circuit

A `zcalc.network.Network` is a set of named nodes joined by named
two-terminal components. Each `add_*` method returns the integer id of the
new component, which is the key of its results.

```python
from zcalc.network import Network

net = Network()
net.add_node("gnd")
net.add_node("in")
net.add_node("out")

# 1 V DC source between "in" and "gnd"
us = net.add_voltage_source("Us", 1.0, 0.0, "in", "gnd")
r1 = net.add_resistor("R1", 10, "in", "out")
r2 = net.add_resistor("R2", 10, "out", "gnd")

print(net)
```

The methods are `add_voltage_source` and `add_current_source` (designator,
amplitude, frequency in Hz, two nodes), and `add_resistor`, `add_capacitor`
and `add_inductor` (designator, value in ohms, farads or henries, two nodes).
Adding a node or a component whose designator is already used raises
`ValueError`; referring to an unknown node or component raises `KeyError`.

Components can be looked up with `component(designator)`,
`component_id(designator)`, `component_by_id(id)` and `designator_of(id)`;
`node(designator)` gives a node's number and `num_nodes` their count.

## Solving it

```python
from zcalc.network_calculator import compute

results = compute(net)
for phasor in results[r2].voltages:
    print(complex(phasor.to_complex()), phasor.frequency)
```

`compute` returns a dict from component id to a `Result` holding two lists,
`voltages` and `currents`, with one `Phasor` per source. The sources are
taken in the order of their designators. Each phasor carries its
`magnitude`, `phase` and `frequency`. For the voltage divider above, the
voltage across `R2` is 0.5 V and the current through it 0.05 A.

At DC a capacitor is treated as an open circuit and an inductor as a short
circuit. If the equations have no unique solution, `compute` raises
`zcalc.equation_system.SolveError` instead of returning partial results.

## Bode diagrams

```python
from zcalc.plotter import plot

path = plot("divider", net, "Us", "R2")
```

This sweeps the frequency of source `Us` from 1 Hz up to 10 GHz in steps of
five percent, records the voltage across `R2` at each step and writes
`divider.html` with the magnitude (dB) and phase (degrees) curves, decade
grid lines and the -3 dB crossings marked in blue. It returns the path of
the written file. Frequencies at which the network cannot be solved are
skipped and logged as warnings.

For other frequency ranges or layouts, use `zcalc.bode.Bode(network,
min_freq, max_freq)` with figures from `zcalc.canvas.Canvas`, then call
`Canvas.plot()` to write the file or `Canvas.render()` to get the HTML as a
string.

## Example circuits

Ready-made circuits are available from `zcalc.examples`: `basic_network`,
`bandpass_network`, `capacitor_network`, `lora_filter_network`,
`lc_filter_network` and `rc_element_network`. Each returns a fresh
`Network`.

The command

```
zcalc-examples
```

runs them: it prints the basic voltage divider and writes the Bode diagrams
of the other circuits as HTML files. Give example names (`basic`,
`bandpass`, `capacitor`, `lora_filter`, `lc_filter`, `rc_element`) to run
only those, and `--output-dir DIR` to write the files somewhere other than
the current directory.

## Building blocks

The pieces the solver is made of can be used on their own:

- `zcalc.complex_number.Complex` – complex numbers compared with a tolerance
  of 1e-4, printable in rectangular, trigonometric or Euler form
  (`PrintFormat`).
- `zcalc.phasor.Phasor` – magnitude, phase and frequency of a sinusoid.
- `zcalc.components` – `Resistor`, `Capacitor`, `Inductor`,
  `VoltageSource` and `CurrentSource`, and the equation coefficients each
  contributes.
- `zcalc.matrix.Matrix` – a small dense matrix.
- `zcalc.linear_equation.LinearEquation` and
  `zcalc.equation_system.LinearEquationSystem` – Gaussian elimination over
  complex coefficients.
- `zcalc.graph.Graph`, `zcalc.edge.Edge` and `zcalc.path.Path` – the
  multigraph and cycle search used to find the circuit's loops.
- `zcalc.plot`, `zcalc.figure`, `zcalc.shapes` – shapes and SVG drawing.
- `zcalc.units` – SI unit prefixes (`UnitPrefix`, `prefixed_value`).

## Limits

zcalc does steady-state sinusoidal analysis of linear two-terminal
components only. It has no transient or nonlinear analysis, no dependent
sources, and it does not read circuits from netlist files: networks are
built in Python.