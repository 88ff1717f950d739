import itertools

import pytest

from logicsim.gates import (
    AndGate,
    ComponentType,
    NandGate,
    NorGate,
    NotGate,
    OrGate,
    XnorGate,
    XorGate,
    make_gate,
)
from logicsim.wire import Wire, WireState

STATES = list(WireState)


def _run(gate_cls, a_state, b_state):
    a, b, out = Wire("A", a_state), Wire("B", b_state), Wire("Y")
    gate = gate_cls("g", a, b, out)
    gate.evaluate()
    return out.state


def test_and_high_only_when_both_high():
    assert _run(AndGate, WireState.HIGH, WireState.HIGH) is WireState.HIGH
    assert _run(AndGate, WireState.HIGH, WireState.UNDEFINED) is WireState.LOW


def test_or_undefined_inputs_give_low():
    assert _run(OrGate, WireState.UNDEFINED, WireState.UNDEFINED) is WireState.LOW
    assert _run(OrGate, WireState.UNDEFINED, WireState.HIGH) is WireState.HIGH


@pytest.mark.parametrize(
    "plain, inverted", [(AndGate, NandGate), (OrGate, NorGate), (XorGate, XnorGate)]
)
def test_inverted_gates_are_complements(plain, inverted):
    for a, b in itertools.product(STATES, STATES):
        assert {_run(plain, a, b), _run(inverted, a, b)} == {WireState.HIGH, WireState.LOW}


@pytest.mark.parametrize(
    "gate_cls", [AndGate, OrGate, XorGate, NandGate, NorGate, XnorGate]
)
def test_two_input_gates_are_symmetric(gate_cls):
    for a, b in itertools.product(STATES, STATES):
        assert _run(gate_cls, a, b) is _run(gate_cls, b, a)


def test_xor_of_equal_inputs_is_low():
    for state in STATES:
        assert _run(XorGate, state, state) is WireState.LOW


def test_not_gate_inverts_and_undefined_reads_low():
    out = Wire("Y")
    gate = NotGate("n", Wire("A", WireState.HIGH), None, out)
    gate.evaluate()
    assert out.is_low()
    gate.input_a.state = WireState.UNDEFINED
    gate.evaluate()
    assert out.is_high()


def test_unconnected_gate_raises():
    gate = AndGate("g", Wire("A"), None, Wire("Y"))
    with pytest.raises(ValueError):
        gate.evaluate()


def test_missing_output_raises():
    gate = NotGate("n", Wire("A"))
    with pytest.raises(ValueError):
        gate.evaluate()


def test_uids_increase():
    first = AndGate("a")
    second = OrGate("b")
    assert second.uid > first.uid


def test_type_name_matches_kind():
    assert XnorGate("x").type_name == "XNOR"
    assert NotGate("n").kind is ComponentType.NOT


def test_make_gate_is_case_insensitive():
    gate = make_gate("nand", "G1", Wire("A"), Wire("B"), Wire("C"))
    assert isinstance(gate, NandGate)
    assert gate.name == "G1"


def test_make_gate_accepts_enum():
    out = Wire("C")
    gate = make_gate(
        ComponentType.OR, "G", Wire("A", WireState.LOW), Wire("B", WireState.HIGH), out
    )
    assert gate.kind is ComponentType.OR
    gate.evaluate()
    assert out.state is WireState.HIGH


def test_make_gate_not_drops_second_input():
    gate = make_gate("NOT", "N", Wire("A"), Wire("B"), Wire("C"))
    assert gate.input_b is None


def test_make_gate_unknown_kind():
    with pytest.raises(ValueError):
        make_gate("buffer", "B", Wire("A"), None, Wire("C"))