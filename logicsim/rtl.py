"""Register-transfer-level view of a circuit's gates: nodes, pin attributes and links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from logicsim.gates import Component

GRID_COLUMNS = 5
GRID_SPACING = (200.0, 150.0)

_INPUT_A_PIN = 1
_INPUT_B_PIN = 2
_OUTPUT_PIN = 3


def _wire_name(wire) -> str:
    return wire.name if wire is not None else ""


@dataclass(frozen=True)
class RTLNode:
    """One gate as drawn in the RTL view; unconnected pins carry an empty name."""

    id: int
    name: str
    type: str
    input_a: str = ""
    input_b: str = ""
    output: str = ""

    @property
    def input_a_attr(self) -> int:
        return self.id * 100 + _INPUT_A_PIN

    @property
    def input_b_attr(self) -> int:
        return self.id * 100 + _INPUT_B_PIN

    @property
    def output_attr(self) -> int:
        return self.id * 100 + _OUTPUT_PIN


@dataclass(frozen=True)
class RTLEdge:
    """A link from one node's output pin to another node's input pin."""

    id: int
    output_attr: int
    input_attr: int


def build_rtl(components: Iterable[Component]) -> tuple[list[RTLNode], list[RTLEdge]]:
    """Number the components from 1 and link every output to the inputs that read it."""
    nodes = [
        RTLNode(
            id=number,
            name=component.name,
            type=component.type_name,
            input_a=_wire_name(component.input_a),
            input_b=_wire_name(component.input_b),
            output=_wire_name(component.output),
        )
        for number, component in enumerate(components, start=1)
    ]

    edges: list[RTLEdge] = []
    for source in nodes:
        if not source.output:
            continue
        for target in nodes:
            if source.output not in (target.input_a, target.input_b):
                continue
            input_attr = target.input_a_attr if target.input_a == source.output else target.input_b_attr
            edges.append(RTLEdge(source.output_attr * 1000 + input_attr, source.output_attr, input_attr))
    return nodes, edges


def grid_position(index: int) -> tuple[float, float]:
    """Place the ``index``-th node on a grid five nodes wide."""
    if index < 0:
        raise ValueError("Node index cannot be negative")
    row, column = divmod(index, GRID_COLUMNS)
    return column * GRID_SPACING[0], row * GRID_SPACING[1]