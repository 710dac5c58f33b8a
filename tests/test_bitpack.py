import pytest

from huffpress.bitpack import BitPacker, BitUnpacker
from huffpress.codes import build_code_table
from huffpress.errors import CorruptDataError
from huffpress.frequency import count_frequencies
from huffpress.tree import build_tree


def tree_for(data):
    return build_tree(count_frequencies(data))


def test_pack_full_byte_has_no_padding():
    packer = BitPacker(build_code_table(tree_for(b"2150")))
    assert packer.pack(b"2150") == b"\x00\x9c"


def test_pack_partial_byte_is_zero_filled():
    packer = BitPacker(build_code_table(tree_for(b"ab")))
    assert packer.pack(b"ababababab") == b"\x06\x55\x40"


def test_unpack_known_payload():
    assert BitUnpacker(tree_for(b"2150")).unpack(b"\x00\x9c") == b"2150"


def test_unpack_single_leaf_repeats_symbol_per_bit():
    assert BitUnpacker(tree_for(b"a")).unpack(b"\x04\x00") == b"aaaa"


def test_unpack_inverts_pack():
    data = b"mississippi river"
    tree = tree_for(data)
    payload = BitPacker(build_code_table(tree)).pack(data)
    assert BitUnpacker(tree).unpack(payload) == data


def test_data_ending_mid_code_raises():
    # codes for "abc": c=0, a=10, b=11; a lone 1 bit stops inside a code
    with pytest.raises(CorruptDataError):
        BitUnpacker(tree_for(b"abc")).unpack(b"\x07\x80")


@pytest.mark.parametrize("payload", [
    b"",
    b"\x08\x00",
    b"\x03",
    b"\x00",
])
def test_bad_payload_raises(payload):
    with pytest.raises(CorruptDataError):
        BitUnpacker(tree_for(b"abc")).unpack(payload)
