"""Project files that tie a design to a testbench, plus editor helpers."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

PROJECT_VERSION = "0.1"
PROJECT_SUFFIX = ".lsim"
MIN_CYCLES = 2
MAX_CYCLES = 99

_TEMPLATES: dict[str, str] = {
    "and": "AND <name> <inputA> <inputB> <output>\n",
    "or": "OR <name> <inputA> <inputB> <output>\n",
    "not": "NOT <name> <input> <output>\n",
    "nand": "NAND <name> <inputA> <inputB> <output>\n",
    "nor": "NOR <name> <inputA> <inputB> <output>\n",
    "xor": "XOR <name> <inputA> <inputB> <output>\n",
    "xnor": "XNOR <name> <inputA> <inputB> <output>\n",
    "mux2x1": "MUX 2x1 <name> <inputBusA> <inputBusB> <selectBus> <outputBus>\n",
    "mux4x1": "MUX 4x1 <name> <inputBusA> <inputBusB> <inputBusC> <inputBusD> <selectBus> <outputBus>\n",
    "mux8x1": "MUX 8x1 <name> <inputBusA> <inputBusB> ... <inputBusH> <selectBus> <outputBus>\n",
    "mux16x1": "MUX 16x1 <name> <inputBusA> <inputBusB> ... <inputBusP> <selectBus> <outputBus>\n",
    "demux1x2": "DEMUX 1x2 <name> <inputBus> <selectBus> <outputBusA> <outputBusB>\n",
    "demux1x4": "DEMUX 1x4 <name> <inputBus> <selectBus> <outputBusA> ... <outputBusD>\n",
    "demux1x8": "DEMUX 1x8 <name> <inputBus> <selectBus> <outputBusA> ... <outputBusH>\n",
    "demux1x16": "DEMUX 1x16 <name> <inputBus> <selectBus> <outputBusA> ... <outputBusP>\n",
    "rom": "ROM <name> <addressBus> <dataBus> <memoryFilePath>\n",
    "dff": "DFF <name> <clock> <inputD> <outputQ> <default: rising/falling>\n",
    "jkff": "JKFF <name> <clock> <inputJ> <inputK> <outputQ> <default: rising/falling>\n",
    "tff": "TFF <name> <clock> <inputT> <outputQ> <default: rising/falling>\n",
    "srff": "SRFF <name> <clock> <inputS> <inputR> <outputQ> <default: rising/falling>\n",
    "wire": "WIRE <name> <optional: high/low>\n",
    "bus": "WIRE <name>[<number>:<number>] <optional: high/low>\n",
    "clock": "WIRE <name> clk\n",
}


@dataclass
class Project:
    """The design and testbench files that make up one simulation."""

    design_path: str = ""
    testbench_path: str = ""

    def save(self, path: str | PathLike[str]) -> Path:
        """Write the project file, adding the ``.lsim`` suffix if missing; return where it went."""
        target = str(path)
        if not target.endswith(PROJECT_SUFFIX):
            target += PROJECT_SUFFIX
        content = "\n".join(
            ["[Version]", PROJECT_VERSION, "[Design]", self.design_path, "[Testbench]", self.testbench_path]
        )
        destination = Path(target)
        destination.write_text(content + "\n", encoding="utf-8")
        return destination


def load_project(path: str | PathLike[str]) -> Project:
    """Read a project file; raises ValueError for an unsupported version."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    lines += [""] * (6 - len(lines))
    version = lines[1]
    if version != PROJECT_VERSION:
        raise ValueError(f"Unsupported file version: {version}")
    return Project(design_path=lines[3], testbench_path=lines[5])


def component_template(kind: str) -> str:
    """Design-file line to append for a component kind such as ``AND``, ``MUX 4x1`` or ``clock``."""
    key = "".join(kind.split()).lower()
    try:
        return _TEMPLATES[key]
    except KeyError:
        raise ValueError(f"Unknown component kind: {kind}") from None


def clamp_cycles(count: int) -> int:
    """Keep a cycle count within the range the simulator accepts."""
    return max(MIN_CYCLES, min(MAX_CYCLES, count))