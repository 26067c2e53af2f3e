"""Two-terminal circuit components and the equations they contribute."""

from abc import ABC, abstractmethod

from zcalc.complex_number import Complex
from zcalc.phasor import Phasor
from zcalc.units import PI

_ZERO = Complex(0.0, 0.0)
_ONE = Complex(1.0, 0.0)
_MINUS_ONE = Complex(-1.0, 0.0)


class Component(ABC):
    """A two-terminal element connecting ``node_0`` to ``node_1``.

    Each component owns two unknowns in the network's equation system: its
    current and the voltage across it.
    """

    def __init__(self, component_id, node_0, node_1):
        self.id = component_id
        self._gates = (node_0, node_1)

    def gate(self, index):
        """Return the node attached to terminal ``index`` (0 or 1)."""
        return self._gates[index]

    @property
    def num_variables(self):
        return 2

    def _current_sign(self, node):
        if self._gates[0] == node:
            return _MINUS_ONE
        if self._gates[1] == node:
            return _ONE
        return _ZERO

    def _voltage_sign(self, node):
        if self._gates[0] == node:
            return _ONE
        if self._gates[1] == node:
            return _MINUS_ONE
        return _ZERO

    @abstractmethod
    def set_frequency(self, frequency):
        """Adapt the component to the given frequency in Hz."""

    @abstractmethod
    def frequency(self):
        """Return the component's own frequency in Hz."""

    @abstractmethod
    def kcl(self, node):
        """Coefficient of this component's current in the node equation."""

    @abstractmethod
    def kvl(self, node):
        """Coefficient of this component's voltage in a loop equation."""

    @abstractmethod
    def own_i(self):
        """Current coefficient of the component's own equation."""

    @abstractmethod
    def own_u(self):
        """Voltage coefficient of the component's own equation."""

    @abstractmethod
    def own_r(self):
        """Right-hand side of the component's own equation."""

    @abstractmethod
    def is_source(self):
        """True for independent sources."""

    @abstractmethod
    def eliminate(self):
        """Switch a source off (superposition)."""

    @abstractmethod
    def reactivate(self):
        """Switch a source back on."""

    def __repr__(self):
        return f"{type(self).__name__}(id={self.id}, nodes={self._gates[0]}-{self._gates[1]})"


class Impedance(Component):
    """A passive element with a complex impedance ``U = Z * I``."""

    def __init__(self, value, node_0, node_1, component_id):
        super().__init__(component_id, node_0, node_1)
        self._value = Complex(value)
        self._short = False
        self._open = False

    def set_rectangular(self, resistance, reactance):
        self._value = Complex(resistance, reactance)

    def set_polar(self, modulus, argument):
        self._value = Complex.from_polar(modulus, argument)

    @property
    def impedance(self):
        return self._value

    @property
    def modulus(self):
        return self._value.abs()

    @property
    def argument(self):
        return self._value.arg()

    @property
    def resistance(self):
        return self._value.real

    @property
    def reactance(self):
        return self._value.imag

    def __str__(self):
        degrees = self.argument * 180.0 / PI
        return (
            f"[({self.resistance:g}) + j({self.reactance:g})] ohm     "
            f"/ {self.modulus:g}<{degrees:g}° /"
        )

    def set_frequency(self, frequency):
        """A plain impedance does not depend on frequency."""

    def frequency(self):
        raise TypeError("an impedance has no frequency of its own")

    def kcl(self, node):
        if self._open:
            return _ZERO
        return self._current_sign(node)

    def kvl(self, node):
        if self._short:
            return _ZERO
        return self._voltage_sign(node)

    # U = Z * I -> 1 * U - Z * I = 0; open -> 1 * I = 0; short -> 1 * U = 0
    def own_i(self):
        if self._open:
            return _ONE
        if self._short:
            return _ZERO
        return self._value * _MINUS_ONE

    def own_u(self):
        if self._open:
            return _ZERO
        return _ONE

    def own_r(self):
        return _ZERO

    def is_source(self):
        return False

    def eliminate(self):
        raise TypeError("cannot eliminate an impedance")

    def reactivate(self):
        raise TypeError("cannot reactivate an impedance")


class Resistor(Impedance):
    """An ideal resistor."""

    def __init__(self, resistance, node_0, node_1, component_id):
        super().__init__(Complex(resistance, 0.0), node_0, node_1, component_id)


class Capacitor(Impedance):
    """An ideal capacitor; an open circuit at DC."""

    def __init__(self, capacitance, node_0, node_1, component_id):
        super().__init__(_ZERO, node_0, node_1, component_id)
        self._open = True
        self.capacitance = capacitance

    def set_frequency(self, frequency):
        if frequency == 0.0:
            self._open = True
            return
        self._open = False
        self._value = Complex.from_polar(
            1.0 / (2.0 * PI * frequency * self.capacitance), -PI / 2.0
        )


class Inductor(Impedance):
    """An ideal inductor; a short circuit at DC."""

    def __init__(self, inductance, node_0, node_1, component_id):
        super().__init__(_ZERO, node_0, node_1, component_id)
        self._short = True
        self.inductance = inductance

    def set_frequency(self, frequency):
        if frequency == 0.0:
            self._short = True
            return
        self._short = False
        self._value = Complex.from_polar(2.0 * PI * frequency * self.inductance, PI / 2.0)


class _Source(Component):
    """Common state of independent sources."""

    def __init__(self, amplitude, node_0, node_1, component_id, frequency=0.0):
        super().__init__(component_id, node_0, node_1)
        self._phasor = Phasor.from_complex(amplitude, frequency)
        self.eliminated = False

    @property
    def phasor(self):
        return self._phasor

    def set_frequency(self, frequency):
        self._phasor.frequency = frequency

    def frequency(self):
        return self._phasor.frequency

    def is_source(self):
        return True

    def eliminate(self):
        self.eliminated = True

    def reactivate(self):
        self.eliminated = False


class VoltageSource(_Source):
    """An ideal voltage source; a short circuit when eliminated."""

    def __init__(self, voltage, node_0, node_1, component_id, frequency=0.0):
        super().__init__(voltage, node_0, node_1, component_id, frequency)

    def kcl(self, node):
        return self._current_sign(node)

    def kvl(self, node):
        if self.eliminated:
            return _ZERO
        return self._voltage_sign(node)

    # 0*I + 1*U = voltage; eliminated -> 0*I + 1*U = 0
    def own_i(self):
        return _ZERO

    def own_u(self):
        return _ONE

    def own_r(self):
        if self.eliminated:
            return _ZERO
        return self._phasor.to_complex()


class CurrentSource(_Source):
    """An ideal current source; an open circuit when eliminated."""

    def __init__(self, current, node_0, node_1, component_id, frequency=0.0):
        super().__init__(current, node_0, node_1, component_id, frequency)

    def kcl(self, node):
        if self.eliminated:
            return _ZERO
        return self._current_sign(node)

    def kvl(self, node):
        return self._voltage_sign(node)

    # 1*I + 0*U = current; eliminated -> 1*I + 0*U = 0
    def own_i(self):
        return _ONE

    def own_u(self):
        return _ZERO

    def own_r(self):
        if self.eliminated:
            return _ZERO
        return self._phasor.to_complex()