"""Bode diagrams: magnitude and phase of a network's response over frequency."""

import logging
import math
from itertools import pairwise

from zcalc.complex_number import Complex
from zcalc.network_calculator import compute
from zcalc.plot import Plot
from zcalc.shapes import Color
from zcalc.units import PI

_log = logging.getLogger(__name__)

_FREQUENCY_STEP = 1.05
_CUTOFF_DB = -3.0
_MINOR_LINE_WIDTH = 0.2


def _level_lines(plot, bounds, step, label):
    """Add a horizontal line and a label at every multiple of ``step``."""
    min_x, min_y, max_x, max_y = bounds
    level = math.ceil(min_y)
    while level < max_y:
        if level % step == 0:
            plot.add_line(min_x, float(level), max_x, float(level))
            plot.add_text(label(level), min_x, float(level))
            level += step
        else:
            level += 1


class Bode:
    """Sweeps a network's input source and records the output's response.

    Frequencies run from ``min_freq`` up to, but excluding, ``max_freq`` in
    steps of five percent.
    """

    def __init__(self, network, min_freq=1.0, max_freq=1e10):
        self.network = network
        self.min_freq = min_freq
        self.max_freq = max_freq
        self.magnitude_plot = Plot()
        self.phase_plot = Plot()

    @property
    def num_decades(self):
        return int(math.log10(self.max_freq) - math.log10(self.min_freq))

    def _response(self, source, output_id, frequency):
        source.set_frequency(frequency)
        results = compute(self.network)
        return next(
            (
                voltage.to_complex()
                for voltage in results[output_id].voltages
                if voltage.frequency == frequency
            ),
            Complex(0.0, 0.0),
        )

    def _sweep(self, source, output_id):
        frequency = self.min_freq
        while frequency < self.max_freq:
            try:
                response = self._response(source, output_id, frequency)
                magnitude = 20.0 * math.log10(response.abs())
            except (ArithmeticError, RuntimeError, ValueError) as err:
                _log.warning(
                    "could not solve network for frequency %g\n%s%s",
                    frequency,
                    self.network,
                    err,
                )
            else:
                x = math.log10(frequency)
                self.magnitude_plot.add_point(x, magnitude, 1.0, 1.0)
                self.phase_plot.add_point(x, 180.0 + response.arg() * 180.0 / PI)
            frequency *= _FREQUENCY_STEP

    def _decade_lines(self, magnitude_bounds, phase_bounds):
        _, m_min_y, _, m_max_y = magnitude_bounds
        _, p_min_y, _, p_max_y = phase_bounds
        frequency = self.min_freq * 10.0
        while frequency < self.max_freq:
            x = math.log10(frequency)
            self.magnitude_plot.add_line(x, m_min_y, x, m_max_y)
            self.magnitude_plot.add_text(
                f"10^{int(x)}Hz", x, m_min_y + (m_max_y - m_min_y) / 2.0
            )
            self.phase_plot.add_line(x, p_min_y, x, p_max_y)
            for multiple in range(1, 10):
                minor_x = math.log10(frequency + multiple * frequency)
                self.magnitude_plot.add_line(
                    minor_x, m_min_y, minor_x, m_max_y, _MINOR_LINE_WIDTH
                )
                self.phase_plot.add_line(
                    minor_x, p_min_y, minor_x, p_max_y, _MINOR_LINE_WIDTH
                )
            frequency *= 10.0

    def _cutoff_marks(self, magnitude_bounds, phase_bounds):
        m_min_x, m_min_y, m_max_x, m_max_y = magnitude_bounds
        _, p_min_y, _, p_max_y = phase_bounds
        if m_min_y < _CUTOFF_DB < m_max_y:
            self.magnitude_plot.add_line(
                m_min_x, _CUTOFF_DB, m_max_x, _CUTOFF_DB, 1.0, Color.BLUE
            )
        for prev, curr in pairwise(list(self.magnitude_plot.points)):
            crosses = (curr.y > _CUTOFF_DB and prev.y < _CUTOFF_DB) or (
                curr.y < _CUTOFF_DB and prev.y > _CUTOFF_DB
            )
            if not crosses:
                continue
            # interpolate the crossing with a straight line
            slope = (curr.y - prev.y) / (curr.x - prev.x)
            x = curr.x - (curr.y - _CUTOFF_DB) / slope
            self.magnitude_plot.add_point(
                x, _CUTOFF_DB, 2.0, 1.0, Color.BLUE, Color.BLUE
            )
            self.magnitude_plot.add_line(x, m_min_y, x, m_max_y, 1.0, Color.BLUE)
            self.phase_plot.add_line(x, p_min_y, x, p_max_y, 1.0, Color.BLUE)

    def plot(self, fig_magnitude, fig_phase, input_source, output_component):
        """Sweep the network and draw magnitude and phase into the two figures."""
        output_id = self.network.component_id(output_component)
        source = self.network.component(input_source)
        if not source.is_source():
            raise ValueError(f"component {input_source} must be a source")

        self._sweep(source, output_id)

        magnitude_bounds = self.magnitude_plot.bounds()
        phase_bounds = self.phase_plot.bounds()
        if magnitude_bounds is None or phase_bounds is None:
            raise RuntimeError("the network could not be solved at any frequency")

        self._decade_lines(magnitude_bounds, phase_bounds)
        _level_lines(self.magnitude_plot, magnitude_bounds, 20, lambda y: f"{y}dB")
        _level_lines(self.phase_plot, phase_bounds, 5, lambda y: f"{y - 180}°")
        self._cutoff_marks(magnitude_bounds, phase_bounds)

        fig_magnitude.plot(self.magnitude_plot)
        fig_phase.plot(self.phase_plot)