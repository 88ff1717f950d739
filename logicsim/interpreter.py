"""Reading circuit designs and testbenches from text, and running them cycle by cycle.

A design file holds one declaration per line::

    wire A high
    wire CLK clk
    wire BUS[3:0] low
    AND G1 A B C
    NOT N1 C D
    DFF F1 CLK D Q falling
    MUX 2x1 M1 BUS_A BUS_B SEL OUT
    ROM R1 ADDR DATA memory.hex
    assign B A

A testbench file holds lines such as ``@2 set A high``. Blank lines and lines
starting with ``//`` are ignored in both.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Sequence

from logicsim.flipflops import DFlipFlop, EdgeType, FlipFlop, JKFlipFlop, SRFlipFlop, TFlipFlop
from logicsim.gates import Component, NotGate, make_gate
from logicsim.mux import Demultiplexer, Multiplexer
from logicsim.rom import ROM
from logicsim.wire import Wire, WireBus, WireState, parse_state

Waveform = dict[str, list[WireState]]

_BUS_PATTERN = re.compile(r"(\w+)\[(\d+):(\d+)\]", re.ASCII)
_CYCLE_PATTERN = re.compile(r"\d+", re.ASCII)
_TWO_INPUT_GATES = frozenset({"and", "or", "xor", "nand", "nor", "xnor"})
# Flip-flop command -> (class, number of data wires including the output).
_FLIP_FLOPS: dict[str, tuple[type[FlipFlop], int]] = {
    "dff": (DFlipFlop, 2),
    "srff": (SRFlipFlop, 3),
    "jkff": (JKFlipFlop, 3),
    "tff": (TFlipFlop, 2),
}
_MUX_WIDTHS = (2, 4, 8, 16)


@dataclass(eq=False)
class Circuit:
    """All wires, buses and parts of a design, addressable by name."""

    wires: dict[str, Wire] = field(default_factory=dict)
    buses: dict[str, WireBus] = field(default_factory=dict)
    components: list[Component] = field(default_factory=list)
    flip_flops: list[FlipFlop] = field(default_factory=list)
    multiplexers: list[Multiplexer] = field(default_factory=list)
    demultiplexers: list[Demultiplexer] = field(default_factory=list)
    roms: list[ROM] = field(default_factory=list)

    def add_wire(self, wire: Wire) -> None:
        """Register a wire; a later wire of the same name replaces the earlier one."""
        self.wires[wire.name] = wire

    def add_bus(self, bus: WireBus) -> None:
        """Register a bus and each of its wires."""
        self.buses[bus.name] = bus
        for wire in bus:
            self.add_wire(wire)

    def wire(self, name: str) -> Wire:
        try:
            return self.wires[name]
        except KeyError:
            raise KeyError(f"Wire {name!r} not found") from None

    def bus(self, name: str) -> WireBus:
        try:
            return self.buses[name]
        except KeyError:
            raise KeyError(f"Wire bus {name!r} not found") from None

    def step(self) -> None:
        """Advance one cycle: toggle clocks, then drive muxes, demuxes, ROMs, gates and flip-flops."""
        for wire in self.wires.values():
            if wire.is_clock:
                wire.toggle()
        for mux in self.multiplexers:
            mux.tick()
        for demux in self.demultiplexers:
            demux.tick()
        for rom in self.roms:
            rom.tick()
        for component in self.components:
            component.evaluate()
        for flip_flop in self.flip_flops:
            flip_flop.tick()


@dataclass
class TestbenchInstruction:
    """Wire levels to force at the start of one cycle."""

    __test__ = False

    cycle: int
    assignments: dict[Wire, WireState] = field(default_factory=dict)


def _arguments(args: Sequence[str], count: int) -> list[str]:
    """Take exactly ``count`` arguments, filling missing ones with empty strings."""
    return (list(args) + [""] * count)[:count]


def _message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def _declare_wire(circuit: Circuit, args: Sequence[str]) -> None:
    name, state_text = _arguments(args, 2)
    state_text = state_text.lower()
    match = _BUS_PATTERN.fullmatch(name)
    if match:
        bus_name, high, low = match.group(1), int(match.group(2)), int(match.group(3))
        circuit.add_bus(WireBus(bus_name, abs(high - low) + 1, parse_state(state_text)))
        return
    circuit.add_wire(Wire(name, parse_state(state_text), is_clock=state_text == "clk"))


def _assign(circuit: Circuit, args: Sequence[str]) -> None:
    variable, value = _arguments(args, 2)
    target = circuit.wires.get(variable)
    bus = circuit.buses.get(variable)
    if target is None and not bus:
        raise ValueError(f"Variable {variable!r} not found")
    if value in ("high", "low"):
        state = parse_state(value)
    else:
        source = circuit.wires.get(value)
        if source is None:
            raise ValueError(f"Value variable {value!r} not found")
        state = source.state
    if target is not None:
        target.state = state
    else:
        bus.set_state(state)


def _add_not(circuit: Circuit, args: Sequence[str]) -> None:
    name, input_name, output_name = _arguments(args, 3)
    gate = NotGate(name, circuit.wire(input_name), None, circuit.wire(output_name))
    circuit.components.append(gate)


def _add_gate(circuit: Circuit, command: str, args: Sequence[str]) -> None:
    name, a_name, b_name, output_name = _arguments(args, 4)
    gate = make_gate(command, name, circuit.wire(a_name), circuit.wire(b_name), circuit.wire(output_name))
    circuit.components.append(gate)


def _add_flip_flop(circuit: Circuit, command: str, args: Sequence[str]) -> None:
    cls, wire_count = _FLIP_FLOPS[command]
    name, clock_name, *rest = _arguments(args, wire_count + 3)
    wires = [circuit.wire(wire_name) for wire_name in rest[:wire_count]]
    edge = EdgeType.FALLING if rest[wire_count] == "falling" else EdgeType.RISING
    circuit.flip_flops.append(cls(name, circuit.wire(clock_name), *wires, edge))


def _add_mux(circuit: Circuit, args: Sequence[str]) -> None:
    dimensions, name = _arguments(args, 2)
    rest = args[2:]
    for width in _MUX_WIDTHS:
        if dimensions == f"1x{width}":
            input_name, select_name, *output_names = _arguments(rest, width + 2)
            demux = Demultiplexer(
                name,
                circuit.bus(input_name),
                circuit.bus(select_name),
                [circuit.bus(output_name) for output_name in output_names],
            )
            circuit.demultiplexers.append(demux)
            return
        if dimensions == f"{width}x1":
            names = _arguments(rest, width + 2)
            mux = Multiplexer(
                name,
                [circuit.bus(input_name) for input_name in names[:width]],
                circuit.bus(names[width]),
                circuit.bus(names[width + 1]),
            )
            circuit.multiplexers.append(mux)
            return
    raise ValueError(f"Unknown dimensions for MUX/DEMUX: {dimensions}")


def _add_rom(circuit: Circuit, args: Sequence[str]) -> None:
    name, address_name, data_name, memory_file = _arguments(args, 4)
    address_bus = circuit.bus(address_name)
    data_bus = circuit.bus(data_name)
    try:
        rom = ROM(name, address_bus, data_bus, memory_file)
    except OSError as exc:
        raise ValueError(f"Error opening memory file: {memory_file}") from exc
    circuit.roms.append(rom)


def _apply(circuit: Circuit, command: str, args: Sequence[str]) -> None:
    if command == "assign":
        _assign(circuit, args)
    elif command == "wire":
        _declare_wire(circuit, args)
    elif command == "not":
        _add_not(circuit, args)
    elif command in _TWO_INPUT_GATES:
        _add_gate(circuit, command, args)
    elif command in _FLIP_FLOPS:
        _add_flip_flop(circuit, command, args)
    elif command in ("mux", "demux"):
        _add_mux(circuit, args)
    elif command == "rom":
        _add_rom(circuit, args)
    else:
        raise ValueError(f"Unknown command: {command}")


def build_circuit(lines: Iterable[str]) -> Circuit:
    """Build a circuit from design lines; errors name the offending line number."""
    circuit = Circuit()
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        command = tokens[0].lower()
        if command.startswith("//"):
            continue
        try:
            _apply(circuit, command, tokens[1:])
        except (KeyError, ValueError) as exc:
            raise ValueError(f"line {number}: {_message(exc)}") from exc
    return circuit


def parse_testbench(lines: Iterable[str], circuit: Circuit) -> list[TestbenchInstruction]:
    """Read ``@<cycle> set <wire> high|low`` lines; other lines are ignored."""
    testbench: list[TestbenchInstruction] = []
    for number, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        command = tokens[0].lower()
        if command.startswith("//") or not command.startswith("@"):
            continue
        cycle_text = command[1:]
        if not _CYCLE_PATTERN.fullmatch(cycle_text):
            raise ValueError(f"line {number}: Invalid cycle: {tokens[0]}")
        action, wire_name, state_text = _arguments(tokens[1:], 3)
        if action != "set":
            raise ValueError(f"line {number}: Unknown testbench command: {action}")
        state_text = state_text.lower()
        if state_text not in ("high", "low"):
            raise ValueError(f"line {number}: Invalid state for wire: {wire_name}")
        try:
            wire = circuit.wire(wire_name)
        except KeyError as exc:
            raise ValueError(f"line {number}: {_message(exc)}") from exc
        testbench.append(TestbenchInstruction(int(cycle_text), {wire: parse_state(state_text)}))
    return testbench


def _read_lines(path: str | PathLike[str]) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def load_circuit(path: str | PathLike[str]) -> Circuit:
    """Build a circuit from a design file."""
    return build_circuit(_read_lines(path))


def load_testbench(path: str | PathLike[str], circuit: Circuit) -> list[TestbenchInstruction]:
    """Read a testbench file against the wires of ``circuit``."""
    return parse_testbench(_read_lines(path), circuit)


def simulate(
    circuit: Circuit, testbench: Iterable[TestbenchInstruction], max_cycles: int
) -> Waveform:
    """Run ``max_cycles`` cycles and return every wire's level after each one."""
    schedule: defaultdict[int, list[TestbenchInstruction]] = defaultdict(list)
    for instruction in testbench:
        schedule[instruction.cycle].append(instruction)

    waveform: Waveform = {}
    for cycle in range(max_cycles):
        for instruction in schedule.get(cycle, ()):
            for wire, state in instruction.assignments.items():
                wire.state = state
        circuit.step()
        for name, wire in circuit.wires.items():
            waveform.setdefault(name, []).append(wire.state)
    return waveform


def run_simulation(
    design_file: str | PathLike[str],
    testbench_file: str | PathLike[str],
    max_cycles: int,
) -> Waveform:
    """Load a design and its testbench from files and simulate them."""
    circuit = load_circuit(design_file)
    testbench = load_testbench(testbench_file, circuit)
    return simulate(circuit, testbench, max_cycles)