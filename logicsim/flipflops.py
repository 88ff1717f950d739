"""Edge-triggered flip-flops."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

from logicsim.wire import Wire, WireState


class EdgeType(enum.Enum):
    RISING = "rising"
    FALLING = "falling"


def _inverted(state: WireState) -> WireState:
    return WireState.LOW if state is WireState.HIGH else WireState.HIGH


class FlipFlop(ABC):
    """A clocked storage element that acts on one clock edge.

    The clock is taken to start low, so a clock that is high on the first
    tick counts as a rising edge.
    """

    def __init__(
        self,
        name: str,
        clock: Wire,
        inputs: list[Wire],
        output: Wire,
        edge: EdgeType = EdgeType.RISING,
    ) -> None:
        if clock is None or output is None or any(wire is None for wire in inputs):
            raise ValueError(f"Flip-flop {name!r} is not fully connected")
        self.name = name
        self.clock = clock
        self.inputs = list(inputs)
        self.output = output
        self.edge = edge
        self.previous_clock = WireState.LOW

    def on_edge(self) -> bool:
        """Whether the clock moved across the active edge since the last tick."""
        current = self.clock.state
        if self.edge is EdgeType.RISING:
            return self.previous_clock is WireState.LOW and current is WireState.HIGH
        return self.previous_clock is WireState.HIGH and current is WireState.LOW

    def tick(self) -> None:
        """Update the output if an active edge occurred, then remember the clock."""
        if self.on_edge():
            self._capture()
        self.previous_clock = self.clock.state

    @abstractmethod
    def _capture(self) -> None:
        """Update the output on an active edge."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, edge={self.edge.value})"


class DFlipFlop(FlipFlop):
    def __init__(self, name: str, clock: Wire, d: Wire, q: Wire, edge: EdgeType = EdgeType.RISING) -> None:
        super().__init__(name, clock, [d], q, edge)

    def _capture(self) -> None:
        self.output.state = self.inputs[0].state


class SRFlipFlop(FlipFlop):
    def __init__(
        self, name: str, clock: Wire, s: Wire, r: Wire, q: Wire, edge: EdgeType = EdgeType.RISING
    ) -> None:
        super().__init__(name, clock, [s, r], q, edge)

    def _capture(self) -> None:
        s, r = self.inputs
        if s.is_high() and r.is_low():
            self.output.state = WireState.HIGH
        elif s.is_low() and r.is_high():
            self.output.state = WireState.LOW


class JKFlipFlop(FlipFlop):
    def __init__(
        self, name: str, clock: Wire, j: Wire, k: Wire, q: Wire, edge: EdgeType = EdgeType.RISING
    ) -> None:
        super().__init__(name, clock, [j, k], q, edge)

    def _capture(self) -> None:
        j, k = self.inputs
        if j.is_low() and k.is_high():
            self.output.state = WireState.LOW
        elif j.is_high() and k.is_low():
            self.output.state = WireState.HIGH
        elif j.is_high() and k.is_high():
            self.output.state = _inverted(self.output.state)


class TFlipFlop(FlipFlop):
    def __init__(self, name: str, clock: Wire, t: Wire, q: Wire, edge: EdgeType = EdgeType.RISING) -> None:
        super().__init__(name, clock, [t], q, edge)

    def _capture(self) -> None:
        if self.inputs[0].is_high():
            self.output.state = _inverted(self.output.state)