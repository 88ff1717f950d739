"""Wires, wire buses and the three-valued logic state they carry."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


class WireState(enum.Enum):
    """Logic level carried by a wire."""

    LOW = 0
    HIGH = 1
    UNDEFINED = 2


def parse_state(text: str) -> WireState:
    """Read ``high`` or ``low`` (any case) as a state; anything else is undefined."""
    lowered = text.strip().lower()
    if lowered == "high":
        return WireState.HIGH
    if lowered == "low":
        return WireState.LOW
    return WireState.UNDEFINED


@dataclass(eq=False)
class Wire:
    """A single named signal line."""

    name: str
    state: WireState = WireState.UNDEFINED
    is_clock: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Wire name cannot be empty")

    def is_high(self) -> bool:
        return self.state is WireState.HIGH

    def is_low(self) -> bool:
        return self.state is WireState.LOW

    def is_undefined(self) -> bool:
        return self.state is WireState.UNDEFINED

    def toggle(self) -> None:
        """Flip the level; an undefined wire settles to low."""
        if self.state is WireState.HIGH or self.state is WireState.UNDEFINED:
            self.state = WireState.LOW
        else:
            self.state = WireState.HIGH


class WireBus:
    """A named group of wires, bit 0 first, named ``name[0]``, ``name[1]``, ..."""

    def __init__(self, name: str, size: int, state: WireState = WireState.UNDEFINED) -> None:
        if size < 0:
            raise ValueError(f"Wire bus {name!r} cannot have a negative size")
        self.name = name
        self.wires: list[Wire] = [Wire(f"{name}[{index}]", state) for index in range(size)]

    @property
    def size(self) -> int:
        return len(self.wires)

    def add_wire(self, wire: Wire) -> None:
        self.wires.append(wire)

    def set_state(self, state: WireState) -> None:
        """Drive every wire of the bus to the same level."""
        for wire in self.wires:
            wire.state = state

    def __len__(self) -> int:
        return len(self.wires)

    def __iter__(self) -> Iterator[Wire]:
        return iter(self.wires)

    def __getitem__(self, index: int) -> Wire:
        return self.wires[index]

    def __repr__(self) -> str:
        return f"WireBus(name={self.name!r}, size={self.size})"