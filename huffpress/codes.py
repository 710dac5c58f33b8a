from typing import Dict

from bitarray import bitarray

from .tree import HuffmanTree


def build_code_table(tree: HuffmanTree) -> Dict[int, bitarray]:
    """
    Derives the bit path of every leaf by walking the tree depth first.

    A step into a left child appends 0, a step into a right child appends 1.
    A tree that is a single leaf has no edges, so its symbol gets the one
    bit code 0 instead of an empty path.

    Parameters:
    tree (HuffmanTree): A tree with its root set.

    Returns:
    Dict[int, bitarray]: Mapping from symbol to its big-endian code.
    """
    table = {}
    if tree.is_leaf(tree.root):
        table[tree.symbols[tree.root]] = bitarray('0', endian='big')
        return table

    stack = [(tree.root, bitarray(endian='big'))]
    while stack:
        node, path = stack.pop()
        if tree.is_leaf(node):
            table[tree.symbols[node]] = path
            continue
        stack.append((tree.right[node], path + bitarray('1', endian='big')))
        stack.append((tree.left[node], path + bitarray('0', endian='big')))
    return table
