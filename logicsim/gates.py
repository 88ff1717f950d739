"""Combinational two-input (and one-input) logic gates."""

from __future__ import annotations

import enum
import itertools
from abc import ABC, abstractmethod
from typing import ClassVar

from logicsim.wire import Wire, WireState


class ComponentType(enum.Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    XOR = "XOR"
    NAND = "NAND"
    NOR = "NOR"
    XNOR = "XNOR"


class Component(ABC):
    """A gate wired between input wires and one output wire.

    Inputs count as asserted only when high; undefined reads as not high.
    """

    kind: ClassVar[ComponentType]
    _uids: ClassVar[itertools.count] = itertools.count()

    def __init__(
        self,
        name: str,
        input_a: Wire | None = None,
        input_b: Wire | None = None,
        output: Wire | None = None,
    ) -> None:
        self.name = name
        self.input_a = input_a
        self.input_b = input_b
        self.output = output
        self.uid = next(Component._uids)

    @property
    def type_name(self) -> str:
        return self.kind.value

    def _required_inputs(self) -> tuple[Wire | None, ...]:
        return (self.input_a, self.input_b)

    def evaluate(self) -> None:
        """Drive the output wire from the current input levels."""
        inputs = self._required_inputs()
        if self.output is None or any(wire is None for wire in inputs):
            raise ValueError(f"{self.type_name} gate {self.name!r} is not fully connected")
        result = self._logic(*(wire.is_high() for wire in inputs))
        self.output.state = WireState.HIGH if result else WireState.LOW

    @abstractmethod
    def _logic(self, *highs: bool) -> bool:
        """Return whether the output is high given which inputs are high."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, uid={self.uid})"


class AndGate(Component):
    kind = ComponentType.AND

    def _logic(self, a: bool, b: bool) -> bool:
        return a and b


class OrGate(Component):
    kind = ComponentType.OR

    def _logic(self, a: bool, b: bool) -> bool:
        return a or b


class NotGate(Component):
    kind = ComponentType.NOT

    def _required_inputs(self) -> tuple[Wire | None, ...]:
        return (self.input_a,)

    def _logic(self, a: bool) -> bool:
        return not a


class XorGate(Component):
    kind = ComponentType.XOR

    def _logic(self, a: bool, b: bool) -> bool:
        return a != b


class NandGate(Component):
    kind = ComponentType.NAND

    def _logic(self, a: bool, b: bool) -> bool:
        return not (a and b)


class NorGate(Component):
    kind = ComponentType.NOR

    def _logic(self, a: bool, b: bool) -> bool:
        return not (a or b)


class XnorGate(Component):
    kind = ComponentType.XNOR

    def _logic(self, a: bool, b: bool) -> bool:
        return a == b


_GATES: dict[ComponentType, type[Component]] = {
    cls.kind: cls
    for cls in (AndGate, OrGate, NotGate, XorGate, NandGate, NorGate, XnorGate)
}


def make_gate(
    kind: str | ComponentType,
    name: str,
    input_a: Wire | None,
    input_b: Wire | None,
    output: Wire | None,
) -> Component:
    """Build a gate from its type name (any case); a NOT gate ignores ``input_b``."""
    if isinstance(kind, str):
        try:
            kind = ComponentType(kind.upper())
        except ValueError:
            raise ValueError(f"Unknown component type: {kind}") from None
    cls = _GATES[kind]
    if cls is NotGate:
        input_b = None
    return cls(name, input_a, input_b, output)