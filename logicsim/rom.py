"""Read-only memory loaded from a file of hexadecimal bytes, one per line."""

from __future__ import annotations

import re
from os import PathLike
from typing import Sequence

from logicsim.mux import select_index
from logicsim.wire import Wire, WireState

WORD_BITS = 8
_UINT_MAX = 0xFFFFFFFF
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


def _parse_hex(line: str) -> int:
    match = _HEX_PREFIX.match(line)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits, 16)
    if value > _UINT_MAX:
        value = _UINT_MAX
    return -value if sign == "-" else value


def _word(value: int) -> list[WireState]:
    return [WireState.HIGH if (value >> bit) & 1 else WireState.LOW for bit in range(WORD_BITS)]


def load_memory(path: str | PathLike[str]) -> dict[int, list[WireState]]:
    """Load one 8-bit word per line, bit 0 first, addressed by line number.

    Each line's leading hexadecimal number is used; a line without one stores 0.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    return {address: _word(_parse_hex(line)) for address, line in enumerate(text.splitlines())}


class ROM:
    """Drives its data bus from the word at the address on its address bus."""

    def __init__(
        self,
        name: str,
        address_bus: Sequence[Wire],
        output_bus: Sequence[Wire],
        path: str | PathLike[str],
    ) -> None:
        self.name = name
        self.address_bus = list(address_bus)
        self.output_bus = list(output_bus)
        self.path = path
        self.memory = load_memory(path)

    def tick(self) -> None:
        """Put the addressed word on the data bus; an unknown address changes nothing."""
        data = self.memory.get(select_index(self.address_bus))
        if data is None:
            return
        for wire, state in zip(self.output_bus, data):
            wire.state = state

    def __repr__(self) -> str:
        return f"ROM(name={self.name!r}, entries={len(self.memory)})"