"""Bode diagrams of a network written to an HTML page."""

from zcalc.bode import Bode
from zcalc.canvas import Canvas


def plot(filename, network, input_source, output_component):
    """Write the magnitude and phase diagrams to ``<filename>.html``.

    Returns the path of the written file.
    """
    canvas = Canvas(filename, 10, 10, 1000, 800)
    fig_magnitude = canvas.figure(5, 5, 990, 390)
    fig_phase = canvas.figure(5, 405, 990, 390)
    Bode(network).plot(fig_magnitude, fig_phase, input_source, output_component)
    return canvas.plot()