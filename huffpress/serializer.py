"""
Flattening of a huffman tree into the bytes embedded in a container.

The tree is written in post-order: left subtree, right subtree, then the
node itself. A leaf writes its symbol byte and an internal node writes the
merge marker 0x00. The byte sequence is prefixed by its own length in one
byte, so a tree may hold at most 255 entries (128 distinct byte values;
encoded text counts bytes, not characters).
"""

import logging

from .errors import CorruptTreeError, OversizedTreeError
from .tree import MERGE_SENTINEL, HuffmanTree

logger = logging.getLogger(__name__)

MAX_TREE_LENGTH = 0xFF


def serialize_tree(tree: HuffmanTree) -> bytes:
    """
    Converts a tree into its length-prefixed post-order byte form.

    Parameters:
    tree (HuffmanTree): The tree to flatten.

    Returns:
    bytes: One length byte followed by the post-order node bytes.
    """
    body = bytes(tree.symbols[node] for node in tree.post_order())
    if len(body) > MAX_TREE_LENGTH:
        raise OversizedTreeError(
            f"Serialized tree needs {len(body)} bytes, at most {MAX_TREE_LENGTH} fit"
        )
    logger.debug("Serialized tree into %d bytes", len(body))
    return bytes([len(body)]) + body


def deserialize_tree(body: bytes) -> HuffmanTree:
    """
    Rebuilds a tree from post-order node bytes (without the length prefix).

    Leaves are pushed on a stack; each merge marker pops the right subtree,
    then the left subtree, and pushes the node joining them.

    Parameters:
    body (bytes): The post-order node bytes.

    Returns:
    HuffmanTree: The reconstructed tree. Weights are not stored in the
    container, so every node weighs 0.
    """
    if len(body) == 0:
        raise CorruptTreeError("Tree bytes are empty")

    tree = HuffmanTree()
    stack = []
    seen = set()
    for position, value in enumerate(body):
        if value == MERGE_SENTINEL:
            if len(stack) < 2:
                raise CorruptTreeError(
                    f"Merge marker at offset {position} has fewer than two subtrees to join"
                )
            right = stack.pop()
            left = stack.pop()
            stack.append(tree.add_internal(left, right))
        else:
            if value in seen:
                raise CorruptTreeError(f"Symbol {value:#04x} appears on more than one leaf")
            seen.add(value)
            stack.append(tree.add_leaf(value))

    if len(stack) != 1:
        raise CorruptTreeError(f"Tree bytes leave {len(stack)} subtrees instead of one root")

    tree.root = stack[0]
    return tree
