import pytest

from huffpress.errors import CorruptTreeError, OversizedTreeError
from huffpress.frequency import count_frequencies
from huffpress.serializer import deserialize_tree, serialize_tree
from huffpress.tree import build_tree


def test_serialize_known_tree():
    tree = build_tree(count_frequencies(b"2150"))
    assert serialize_tree(tree) == b"\x0701\x0025\x00\x00"


def test_serialize_single_leaf():
    assert serialize_tree(build_tree([(ord("a"), 4)])) == b"\x01a"


def test_deserialize_restores_shape():
    tree = deserialize_tree(b"01\x0025\x00\x00")
    root = tree.root
    left, right = tree.left[root], tree.right[root]
    assert tree.symbols[tree.left[left]] == ord("0")
    assert tree.symbols[tree.right[left]] == ord("1")
    assert tree.symbols[tree.left[right]] == ord("2")
    assert tree.symbols[tree.right[right]] == ord("5")


def test_deserialize_single_leaf():
    tree = deserialize_tree(b"a")
    assert tree.is_leaf(tree.root)
    assert tree.symbols[tree.root] == ord("a")


def test_largest_tree_fits():
    tree = build_tree(count_frequencies(bytes(range(1, 129))))
    serialized = serialize_tree(tree)
    assert serialized[0] == 255
    assert len(serialized) == 256


def test_oversized_tree_raises():
    tree = build_tree(count_frequencies(bytes(range(1, 201))))
    with pytest.raises(OversizedTreeError):
        serialize_tree(tree)


@pytest.mark.parametrize("body", [
    b"",
    b"\x00",
    b"a\x00",
    b"ab",
    b"ab\x00\x00",
    b"aa\x00",
])
def test_malformed_tree_bytes_raise(body):
    with pytest.raises(CorruptTreeError):
        deserialize_tree(body)
