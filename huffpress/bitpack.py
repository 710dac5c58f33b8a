import logging
from typing import Dict

from bitarray import bitarray

from .errors import CorruptDataError
from .tree import HuffmanTree

logger = logging.getLogger(__name__)


class BitPacker:
    def __init__(self, code_table: Dict[int, bitarray]):
        self.code_table = code_table

    def pack(self, data: bytes) -> bytes:
        """
        Packs the code of every symbol, most significant bit first.

        The last byte is zero filled on its low bits. The number of filler
        bits (0 to 7) is stored in a single byte ahead of the packed bytes.

        Parameters:
        data (bytes): The symbols to encode; each must be in the code table.

        Returns:
        bytes: [padding][packed data]
        """
        bits = bitarray(endian='big')
        bits.encode(self.code_table, data)
        padding = bits.fill()
        logger.debug("Packed %d symbols into %d bits (+%d padding)",
                     len(data), len(bits) - padding, padding)
        return bytes([padding]) + bits.tobytes()


class BitUnpacker:
    def __init__(self, tree: HuffmanTree):
        self.tree = tree

    def unpack(self, payload: bytes) -> bytes:
        """
        Decodes a [padding][packed data] payload by walking the tree.

        Parameters:
        payload (bytes): The padding byte followed by the packed bytes.

        Returns:
        bytes: The decoded symbols.
        """
        if len(payload) == 0:
            raise CorruptDataError("Padding byte is missing")
        padding = payload[0]
        if padding > 7:
            raise CorruptDataError(f"Padding of {padding} bits is out of range")
        if padding and len(payload) == 1:
            raise CorruptDataError("Padding given but no packed data follows")

        bits = bitarray(endian='big')
        bits.frombytes(payload[1:])
        if padding:
            del bits[-padding:]
        if len(bits) == 0:
            raise CorruptDataError("Packed data holds no symbols")

        tree = self.tree
        root = tree.root
        # A single leaf has no branches: every bit stands for one symbol
        if tree.is_leaf(root):
            return bytes([tree.symbols[root]]) * len(bits)

        output = bytearray()
        node = root
        for bit in bits:
            node = tree.right[node] if bit else tree.left[node]
            if tree.is_leaf(node):
                output.append(tree.symbols[node])
                node = root
        if node != root:
            raise CorruptDataError("Packed data ends in the middle of a code")
        return bytes(output)
