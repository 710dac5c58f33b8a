from .errors import (
    CorruptDataError,
    CorruptTreeError,
    EmptyInputError,
    HuffmanError,
    OversizedTreeError,
    ReservedSymbolError,
    UnencodableTextError,
)
from .huffman import HuffmanCompressor

__version__ = "0.1.0"

_default = HuffmanCompressor()


def compress(text: str) -> bytes:
    return _default.compress(text)


def decompress(data: bytes) -> str:
    return _default.decompress(data)


def compress_bytes(data: bytes) -> bytes:
    return _default.compress_bytes(data)


def decompress_bytes(data: bytes) -> bytes:
    return _default.decompress_bytes(data)
