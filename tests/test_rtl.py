import pytest

from logicsim.gates import make_gate
from logicsim.rtl import GRID_COLUMNS, GRID_SPACING, RTLEdge, build_rtl, grid_position
from logicsim.wire import Wire


@pytest.fixture
def chain():
    a, b, c, d, e = (Wire(name) for name in "ABCDE")
    return [
        make_gate("AND", "AND1", a, b, c),
        make_gate("NOT", "NOT1", c, None, d),
        make_gate("OR", "OR1", a, d, e),
    ]


def test_nodes_follow_components(chain):
    nodes, _ = build_rtl(chain)
    assert [node.name for node in nodes] == ["AND1", "NOT1", "OR1"]
    assert [node.type for node in nodes] == ["AND", "NOT", "OR"]
    assert [node.id for node in nodes] == [1, 2, 3]


def test_unconnected_input_is_empty(chain):
    nodes, _ = build_rtl(chain)
    assert nodes[1].input_a == "C"
    assert nodes[1].input_b == ""
    assert nodes[1].output == "D"


def test_edges_link_outputs_to_readers(chain):
    nodes, edges = build_rtl(chain)
    assert len(edges) == 2
    first, second = edges
    assert first.output_attr == nodes[0].output_attr
    assert first.input_attr == nodes[1].input_a_attr
    assert second.output_attr == nodes[1].output_attr
    assert second.input_attr == nodes[2].input_b_attr


def test_edge_id_pinned(chain):
    _, edges = build_rtl(chain)
    assert edges[0] == RTLEdge(103201, 103, 201)


def test_edge_ids_unique(chain):
    _, edges = build_rtl(chain)
    assert len({edge.id for edge in edges}) == len(edges)


def test_no_components_gives_empty_graph():
    assert build_rtl([]) == ([], [])


def test_gate_reading_both_inputs_from_same_wire_links_once():
    a, b = Wire("A"), Wire("B")
    nodes, edges = build_rtl([make_gate("NOT", "N", a, None, b), make_gate("AND", "G", b, b, Wire("C"))])
    assert len(edges) == 1
    assert edges[0].input_attr == nodes[1].input_a_attr


def test_grid_origin():
    assert grid_position(0) == (0.0, 0.0)


def test_grid_rows_share_columns():
    for index in range(GRID_COLUMNS):
        x0, y0 = grid_position(index)
        x1, y1 = grid_position(index + GRID_COLUMNS)
        assert x0 == x1
        assert y1 - y0 == GRID_SPACING[1]


def test_grid_columns_step_right():
    assert grid_position(1)[0] - grid_position(0)[0] == GRID_SPACING[0]
    assert grid_position(1)[1] == grid_position(0)[1]


def test_grid_rejects_negative_index():
    with pytest.raises(ValueError):
        grid_position(-1)