"""Bus multiplexers and demultiplexers driven by a binary select bus."""

from __future__ import annotations

from typing import Sequence

from logicsim.wire import Wire


def select_index(select: Sequence[Wire]) -> int:
    """Read a select bus as an unsigned number, bit 0 first; only high wires count as 1."""
    return sum(1 << bit for bit, wire in enumerate(select) if wire.is_high())


class Multiplexer:
    """Copies the selected input bus onto the output bus on every tick."""

    def __init__(
        self,
        name: str,
        inputs: Sequence[Sequence[Wire]],
        select: Sequence[Wire],
        output: Sequence[Wire],
    ) -> None:
        if not inputs or not select or not output:
            raise ValueError("Input buses, select lines, and output bus cannot be empty.")
        if len(select) > 1 and len(inputs) != 1 << len(select):
            raise ValueError("Number of input buses must match 2^number_of_select_lines.")
        if len(output) != len(inputs[0]):
            raise ValueError("Output bus size must match input bus size.")
        self.name = name
        self.inputs = [list(bus) for bus in inputs]
        self.select = list(select)
        self.output = list(output)

    @property
    def size(self) -> int:
        return len(self.inputs)

    def tick(self) -> None:
        """Drive the output from the input bus the select lines point at, if it exists."""
        index = select_index(self.select)
        if index >= len(self.inputs):
            return
        for target, source in zip(self.output, self.inputs[index]):
            target.state = source.state

    def __repr__(self) -> str:
        return f"Multiplexer(name={self.name!r}, size={self.size})"


class Demultiplexer:
    """Copies the input bus onto the selected output bus on every tick."""

    def __init__(
        self,
        name: str,
        input_bus: Sequence[Wire],
        select: Sequence[Wire],
        outputs: Sequence[Sequence[Wire]],
    ) -> None:
        if not select or not outputs:
            raise ValueError("Select lines and output buses cannot be empty.")
        if len(outputs) != 1 << len(select):
            raise ValueError("Number of output buses must match 2^number_of_select_lines.")
        if len(input_bus) != len(outputs[0]):
            raise ValueError("Input size must match output bus size.")
        self.name = name
        self.input = list(input_bus)
        self.select = list(select)
        self.outputs = [list(bus) for bus in outputs]

    @property
    def size(self) -> int:
        return len(self.outputs)

    def tick(self) -> None:
        """Drive the selected output bus from the input; other outputs keep their levels."""
        index = select_index(self.select)
        if index >= len(self.outputs):
            return
        for target, source in zip(self.outputs[index], self.input):
            target.state = source.state

    def __repr__(self) -> str:
        return f"Demultiplexer(name={self.name!r}, size={self.size})"