import logging
from heapq import heappush, heappop
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Symbol carried by internal nodes; doubles as the merge marker in the serialized tree
MERGE_SENTINEL = 0


class HuffmanTree:
    """
    A full binary tree stored as an arena of nodes addressed by index.

    Every node owns one slot in four parallel lists. Leaves hold a real
    symbol and no children; internal nodes hold MERGE_SENTINEL and exactly
    two children. The root is the node id kept in `root`.
    """

    def __init__(self):
        self.symbols: List[int] = []
        self.weights: List[int] = []
        self.left: List[Optional[int]] = []
        self.right: List[Optional[int]] = []
        self.root: Optional[int] = None

    def __len__(self) -> int:
        return len(self.symbols)

    def add_leaf(self, symbol: int, weight: int = 0) -> int:
        """
        Appends a leaf node to the arena.

        Parameters:
        symbol (int): The byte value stored on the leaf.
        weight (int): Occurrence count of the symbol.

        Returns:
        int: The id of the new node.
        """
        self.symbols.append(symbol)
        self.weights.append(weight)
        self.left.append(None)
        self.right.append(None)
        return len(self.symbols) - 1

    def add_internal(self, left: int, right: int) -> int:
        """
        Appends an internal node joining two existing subtrees.

        Parameters:
        left (int): Node id reached on a 0 bit.
        right (int): Node id reached on a 1 bit.

        Returns:
        int: The id of the new node.
        """
        self.symbols.append(MERGE_SENTINEL)
        self.weights.append(self.weights[left] + self.weights[right])
        self.left.append(left)
        self.right.append(right)
        return len(self.symbols) - 1

    def is_leaf(self, node: int) -> bool:
        return self.left[node] is None

    def post_order(self) -> List[int]:
        """
        Lists the node ids reachable from the root in post-order
        (left subtree, right subtree, node).
        """
        if self.root is None:
            return []
        order = []
        stack = [(self.root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded or self.is_leaf(node):
                order.append(node)
                continue
            stack.append((node, True))
            stack.append((self.right[node], False))
            stack.append((self.left[node], False))
        return order


def build_tree(frequencies: Iterable[Tuple[int, int]]) -> HuffmanTree:
    """
    Merges weighted symbols into a huffman tree.

    The queue is keyed on (weight, sequence) where sequence is the order a
    node was pushed. Leaves are pushed in the order given, so with a
    symbol-sorted frequency list equal weights resolve toward the lower
    symbol and toward nodes created earlier. The first node popped becomes
    the left child of the merged node.

    Parameters:
    frequencies (Iterable[Tuple[int, int]]): (symbol, frequency) pairs.

    Returns:
    HuffmanTree: The tree, with `root` set. A single distinct symbol
    yields a tree consisting of one leaf.
    """
    tree = HuffmanTree()
    heap = []
    sequence = 0
    for symbol, weight in frequencies:
        node = tree.add_leaf(symbol, weight)
        heappush(heap, (weight, sequence, node))
        sequence += 1

    if not heap:
        raise ValueError("Cannot build a tree without symbols")

    while len(heap) > 1:
        _, _, low = heappop(heap)
        _, _, high = heappop(heap)
        merged = tree.add_internal(low, high)
        heappush(heap, (tree.weights[merged], sequence, merged))
        sequence += 1

    tree.root = heappop(heap)[2]
    logger.debug("Built huffman tree with %d nodes", len(tree))
    return tree
