import sys

import pytest

from wsclient.networking import byteswap, host_to_network, network_to_host


def test_byteswap_pinned_values():
    assert byteswap(0x0102, 16) == 0x0201
    assert byteswap(0x01020304, 32) == 0x04030201
    assert byteswap(0x0102030405060708, 64) == 0x0807060504030201


@pytest.mark.parametrize("width", [16, 32, 64])
def test_byteswap_is_involution(width):
    for value in (0, 1, (1 << width) - 1, 0x1234 % (1 << width)):
        assert byteswap(byteswap(value, width), width) == value


@pytest.mark.parametrize("width", [16, 32, 64])
def test_byteswap_reverses_bytes(width):
    size = width // 8
    value = int.from_bytes(bytes(range(1, size + 1)), "big")
    assert byteswap(value, width).to_bytes(size, "big") == value.to_bytes(size, "little")


@pytest.mark.parametrize("width", [16, 32, 64])
def test_host_to_network_memory_is_big_endian(width):
    size = width // 8
    value = int.from_bytes(bytes(range(10, 10 + size)), "big")
    converted = host_to_network(value, width)
    assert converted.to_bytes(size, sys.byteorder) == value.to_bytes(size, "big")


@pytest.mark.parametrize("width", [16, 32, 64])
def test_round_trip(width):
    value = (1 << width) - 3
    assert network_to_host(host_to_network(value, width), width) == value


def test_network_to_host_reads_wire_bytes():
    wire = b"\x12\x34"
    host = network_to_host(int.from_bytes(wire, sys.byteorder), 16)
    assert host == int.from_bytes(wire, "big")


@pytest.mark.parametrize("width", [8, 24, 128])
def test_unsupported_width(width):
    with pytest.raises(ValueError):
        byteswap(1, width)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        host_to_network(1 << 16, 16)
    with pytest.raises(ValueError):
        network_to_host(-1, 32)