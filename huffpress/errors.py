class HuffmanError(ValueError):
    """Base class for every failure raised by the huffman codec."""


class EmptyInputError(HuffmanError):
    """compress was called with zero symbols."""


class ReservedSymbolError(HuffmanError):
    """The input contains the byte reserved as the tree merge marker."""


class OversizedTreeError(HuffmanError):
    """The serialized tree does not fit in the one byte length field."""


class CorruptTreeError(HuffmanError):
    """The embedded tree bytes do not describe a valid huffman tree."""


class CorruptDataError(HuffmanError):
    """The packed data cannot be decoded with the embedded tree."""


class UnencodableTextError(HuffmanError):
    """The text cannot be represented in the configured encoding."""
