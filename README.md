# logicsim

A small cycle-based simulator for digital logic. A circuit is described in a
plain-text design file, stimulus in a testbench file, and the simulator steps
the circuit one clock cycle at a time, recording the state of every wire into
a waveform that is printed as a text chart.

Building blocks:

- single wires and multi-bit wire buses, plus clock wires that toggle every cycle
- logic gates `AND`, `OR`, `XOR`, `NAND`, `NOR`, `XNOR` (two inputs) and `NOT`
- D, SR, JK and T flip-flops, triggered on the rising (default) or falling edge
- bus multiplexers and demultiplexers with 2, 4, 8 or 16 ways
- read-only memory loaded from a file of hexadecimal bytes

Every wire is high, low or undefined. Gates treat an undefined input as not
high.

## Installation

```
pip install .
```

Only the Python standard library is needed (Python 3.10 or later). The tests
use pytest: `pip install .[test]`.

## Running a simulation

```
logicsim design.txt testbench.txt
```

Options:

- `-c N`, `--cycles N` — number of clock cycles to simulate (default 10, kept
  between 2 and 99)
- `-p FILE`, `--project FILE` — read the design and testbench paths from a
  `.lsim` project file; paths given on the command line take precedence
- `--save PATH` — write a project file for the chosen design and testbench
  (`.lsim` is appended if missing)
- `--rtl` — after the waveform, list the gates as numbered nodes and the
  links from each gate output to the gate inputs that read it

The command prints a summary line (`System created: N wires, N components,
N flip-flops.`) and then the waveform: a header row of cycle numbers and one
row per wire, sorted by name, with `1` for high, `0` for low and `X` for
undefined. Errors in the files are reported on standard error with the line
number, and the exit status is 1. Run `logicsim --help` for the usage text.

## Design files

One statement per line; keywords are case-insensitive. Blank lines and lines
whose first word starts with `//` are ignored. A small complete example:

```
wire CLK clk
wire A high
wire B low
wire C
wire D
wire Q
AND G1 A B C
NOT N1 C D
DFF F1 CLK D Q
```

All statements:

```
// wires: optional initial state high, low, or clk for a clock
wire A high
wire CLK clk

// buses: name[high:low] creates name[0] ... name[n-1]
wire data[3:0] low

// gates: <type> <name> <inputA> <inputB> <output>, NOT takes one input
AND G1 A B C
NOT N1 C D

// flip-flops: <type> <name> <clock> <inputs...> <output> [rising|falling]
DFF  F1 CLK D Q rising
JKFF F2 CLK J K Q2 falling
SRFF F3 CLK S R Q3
TFF  F4 CLK T Q4

// multiplexers: MUX <N>x1 <name> <N input buses> <select bus> <output bus>
MUX 2x1 M1 in0 in1 sel out
// demultiplexers: DEMUX 1x<N> <name> <input bus> <select bus> <N output buses>
DEMUX 1x2 X1 in sel out0 out1

// ROM: <name> <address bus> <data bus> <memory file>
ROM R1 addr data memory.hex

// assign a wire or a whole bus from high, low, or another wire's state
assign B low
assign data A
```

Every wire and bus must be declared before it is used; an unknown name, an
unknown command, or a mux size other than 2, 4, 8 or 16 is an error. Select
and address buses are read with bit 0 first.

A ROM memory file holds one hexadecimal number per line (an optional `0x`
prefix is accepted); line *n* is the content of address *n*, and the low
8 bits are put on the data bus, bit 0 on its first wire. A line with no
number stores 0; an address with no line leaves the data bus unchanged.

## Testbench files

Each instruction sets a wire at the start of a cycle:

```
// @<cycle> set <wire> <high|low>
@0 set A high
@12 set A low
```

Lines that do not start with `@` are ignored. An unknown action, a state other
than high or low, or an undeclared wire is an error.

## Each clock cycle

1. testbench assignments for the cycle are applied;
2. every clock wire toggles (an undefined clock becomes low);
3. multiplexers, demultiplexers and ROMs update their outputs;
4. every gate is evaluated once, in the order it was declared;
5. flip-flops act if their clock crossed the active edge (a clock is taken to
   start low);
6. the state of every wire is appended to the waveform.

## Using the library

```python
from logicsim.interpreter import load_circuit, load_testbench, simulate
from logicsim.cli import render_waveform

circuit = load_circuit("design.txt")
testbench = load_testbench("testbench.txt", circuit)
waveform = simulate(circuit, testbench, 10)
print(render_waveform(waveform, 10))
```

`simulate` returns a dict from wire name to the list of `WireState` values,
one per cycle. `run_simulation(design_file, testbench_file, max_cycles)`
performs the three steps at once, and `build_circuit(lines)` /
`parse_testbench(lines, circuit)` take lines of text instead of paths. A
`Circuit` can also be assembled by hand with `add_wire`, `add_bus` and its
lists of components, and advanced with `step()`.

Modules:

- `logicsim.wire` — `Wire`, `WireBus`, `WireState`, `parse_state`
- `logicsim.gates` — the gate classes, `ComponentType`, `make_gate`
- `logicsim.flipflops` — `DFlipFlop`, `SRFlipFlop`, `JKFlipFlop`,
  `TFlipFlop`, `EdgeType`
- `logicsim.mux` — `Multiplexer`, `Demultiplexer`, `select_index`
- `logicsim.rom` — `ROM`, `load_memory`
- `logicsim.interpreter` — `Circuit`, `TestbenchInstruction` and the loading
  and simulation functions above
- `logicsim.rtl` — `build_rtl(components)` returns `RTLNode` and `RTLEdge`
  lists; `grid_position(index)` lays nodes out five to a row
- `logicsim.project` — `Project` (with `save`) and `load_project` for `.lsim`
  files, `component_template(kind)` for a skeleton design line per component
  kind, `clamp_cycles(count)`
- `logicsim.cli` — `render_waveform` and the `main` entry point

## Project files

A `.lsim` project file ties a design and a testbench together:

```
[Version]
0.1
[Design]
design.txt
[Testbench]
testbench.txt
```

Only version `0.1` is accepted.

## What this package does not do

There is no graphical interface: no design or testbench editor, no drawn
waveform and no interactive node diagram. Waveforms are shown only as the text
chart above, and the RTL view only as the text listing printed by `--rtl` (or
the data returned by `build_rtl`).