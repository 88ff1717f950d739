import pytest

from logicsim.rom import ROM, load_memory
from logicsim.wire import WireBus, WireState

H = WireState.HIGH
L = WireState.LOW


@pytest.fixture
def memory_file(tmp_path):
    path = tmp_path / "mem.hex"
    path.write_text("01\nFF\n80\n")
    return path


def test_load_memory_words_are_lsb_first(memory_file):
    memory = load_memory(memory_file)
    assert sorted(memory) == [0, 1, 2]
    assert memory[0] == [H] + [L] * 7
    assert memory[1] == [H] * 8
    assert memory[2] == [L] * 7 + [H]


def test_load_memory_every_word_is_eight_bits(memory_file):
    assert all(len(word) == 8 for word in load_memory(memory_file).values())


def test_load_memory_blank_line_is_zero(tmp_path):
    path = tmp_path / "m.hex"
    path.write_text("\nzz\n")
    memory = load_memory(path)
    assert memory[0] == [L] * 8
    assert memory[1] == [L] * 8


def test_load_memory_accepts_prefix_and_trailing_text(tmp_path):
    path = tmp_path / "m.hex"
    path.write_text("0x01 first\n0X80\n")
    memory = load_memory(path)
    assert memory[0] == [H] + [L] * 7
    assert memory[1] == [L] * 7 + [H]


def test_load_memory_keeps_low_byte_only(tmp_path):
    path = tmp_path / "m.hex"
    path.write_text("1FF\nFF\n")
    memory = load_memory(path)
    assert memory[0] == memory[1]


def test_load_memory_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_memory(tmp_path / "absent.hex")


def test_rom_drives_addressed_word(memory_file):
    address = WireBus("addr", 2)
    data = WireBus("data", 8)
    rom = ROM("rom", address, data, memory_file)
    address[0].state = H
    address[1].state = L
    rom.tick()
    assert [wire.state for wire in data] == rom.memory[1]
    address[0].state = L
    address[1].state = H
    rom.tick()
    assert [wire.state for wire in data] == rom.memory[2]


def test_rom_unknown_address_leaves_bus(memory_file):
    address = WireBus("addr", 2, H)
    data = WireBus("data", 8)
    ROM("rom", address, data, memory_file).tick()
    assert all(wire.is_undefined() for wire in data)


def test_rom_narrow_data_bus_takes_low_bits(memory_file):
    address = WireBus("addr", 2, L)
    data = WireBus("data", 4)
    rom = ROM("rom", address, data, memory_file)
    rom.tick()
    assert [wire.state for wire in data] == rom.memory[0][:4]


def test_rom_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ROM("rom", WireBus("a", 1), WireBus("d", 8), tmp_path / "absent.hex")