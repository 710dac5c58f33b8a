import logging

from .bitpack import BitPacker, BitUnpacker
from .codes import build_code_table
from .errors import (
    CorruptDataError,
    CorruptTreeError,
    EmptyInputError,
    ReservedSymbolError,
    UnencodableTextError,
)
from .frequency import count_frequencies
from .serializer import deserialize_tree, serialize_tree
from .tree import MERGE_SENTINEL, HuffmanTree, build_tree

logger = logging.getLogger(__name__)


class HuffmanCompressor:
    # Container layout:
    # [tree_length:1][tree_bytes:tree_length][padding:1][packed_data:*]
    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def build_tree(self, data: bytes) -> HuffmanTree:
        if len(data) == 0:
            raise EmptyInputError("Input cannot be empty")
        if MERGE_SENTINEL in data:
            raise ReservedSymbolError(
                f"Input contains byte {MERGE_SENTINEL:#04x}, which is reserved as the tree merge marker"
            )
        return build_tree(count_frequencies(data))

    def compress_bytes(self, data: bytes) -> bytes:
        data = bytes(data)
        tree = self.build_tree(data)
        header = serialize_tree(tree)
        payload = BitPacker(build_code_table(tree)).pack(data)
        logger.debug("Compressed %d bytes into %d bytes", len(data), len(header) + len(payload))
        return header + payload

    def decompress_bytes(self, data: bytes) -> bytes:
        if len(data) == 0:
            raise CorruptTreeError("Container is empty")
        tree_length = data[0]
        if len(data) < tree_length + 1:
            raise CorruptTreeError(
                f"Container declares {tree_length} tree bytes but only {len(data) - 1} remain"
            )
        tree = deserialize_tree(data[1:tree_length + 1])
        return BitUnpacker(tree).unpack(data[tree_length + 1:])

    def compress(self, text: str) -> bytes:
        """
        Compresses text into a self-describing huffman container.

        Parameters:
        text (str): The text to compress. It is encoded with `self.encoding`
        and every resulting byte is one symbol.

        Returns:
        bytes: The container bytes.
        """
        if not isinstance(text, str):
            raise TypeError("Input text must be a string.")
        try:
            data = text.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise UnencodableTextError(f"Text cannot be encoded as {self.encoding}: {e}") from e
        return self.compress_bytes(data)

    def decompress(self, data: bytes) -> str:
        """
        Restores the text held in a huffman container.

        Parameters:
        data (bytes): Container bytes produced by `compress`.

        Returns:
        str: The original text.
        """
        raw = self.decompress_bytes(bytes(data))
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"Decoded data is not valid {self.encoding}: {e}") from e


# Example Usage
if __name__ == "__main__":
    compressor = HuffmanCompressor()
    text = "aaaaabbc"
    compressed = compressor.compress(text)
    print(f"Compressed: {compressed.hex()}")
    decompressed = compressor.decompress(compressed)
    print(f"Decompressed: {decompressed}")
