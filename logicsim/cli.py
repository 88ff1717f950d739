"""Command-line front end: run a design against its testbench and show the waveform."""

from __future__ import annotations

import argparse
import sys
from typing import Mapping, Sequence

from logicsim.interpreter import Circuit, load_circuit, load_testbench, simulate
from logicsim.project import Project, clamp_cycles, load_project
from logicsim.rtl import build_rtl
from logicsim.wire import WireState

DEFAULT_CYCLES = 10
_HEADER_LABEL = "cycle"
_SYMBOLS = {WireState.HIGH: "1", WireState.LOW: "0", WireState.UNDEFINED: "X"}


def render_waveform(waveform: Mapping[str, Sequence[WireState]], max_cycles: int) -> str:
    """Lay out the waveform as text, one row per wire in name order, one column per cycle.

    High reads ``1``, low ``0`` and undefined ``X``; cycles past ``max_cycles`` are cut off.
    """
    cycles = max(max_cycles, 0)
    cell = max(len(str(cycles - 1)) if cycles else 1, 1) + 1
    label_width = max([len(_HEADER_LABEL), *(len(name) for name in waveform)])

    header = _HEADER_LABEL.ljust(label_width) + "".join(
        str(cycle).rjust(cell) for cycle in range(cycles)
    )
    rows = [header.rstrip()]
    for name in sorted(waveform):
        states = list(waveform[name])[:cycles]
        cells = "".join(_SYMBOLS[state].rjust(cell) for state in states)
        rows.append((name.ljust(label_width) + cells).rstrip())
    return "\n".join(rows)


def _describe_rtl(circuit: Circuit) -> str:
    nodes, edges = build_rtl(circuit.components)
    lines = ["RTL nodes:"]
    for node in nodes:
        lines.append(
            f"  {node.id} {node.name} {node.type}"
            f" A: {node.input_a or '-'} B: {node.input_b or '-'} Out: {node.output or '-'}"
        )
    lines.append("RTL links:")
    for edge in edges:
        lines.append(f"  {edge.output_attr} -> {edge.input_attr}")
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logicsim",
        description="Simulate a digital logic design against a testbench.",
    )
    parser.add_argument("design", nargs="?", help="design file")
    parser.add_argument("testbench", nargs="?", help="testbench file")
    parser.add_argument("-p", "--project", help="project (.lsim) file naming the design and testbench")
    parser.add_argument(
        "-c",
        "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help="number of clock cycles to simulate (kept between 2 and 99)",
    )
    parser.add_argument("--rtl", action="store_true", help="also list the gate graph")
    parser.add_argument("--save", metavar="PATH", help="write a project file for the chosen design and testbench")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator from the command line; returns the exit status."""
    parser = _parser()
    args = parser.parse_args(argv)

    try:
        if args.project:
            project = load_project(args.project)
        else:
            project = Project(args.design or "", args.testbench or "")
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.design:
        project.design_path = args.design
    if args.testbench:
        project.testbench_path = args.testbench
    if not project.design_path or not project.testbench_path:
        parser.error("please select design and testbench files first")

    cycles = clamp_cycles(args.cycles)
    try:
        if args.save:
            saved = project.save(args.save)
            print(f"Project saved to {saved}")
        circuit = load_circuit(project.design_path)
        testbench = load_testbench(project.testbench_path, circuit)
        print(
            f"System created: {len(circuit.wires)} wires, {len(circuit.components)} components, "
            f"{len(circuit.flip_flops)} flip-flops."
        )
        waveform = simulate(circuit, testbench, cycles)
    except (OSError, ValueError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(render_waveform(waveform, cycles))
    if args.rtl:
        print(_describe_rtl(circuit))
    return 0


if __name__ == "__main__":
    sys.exit(main())