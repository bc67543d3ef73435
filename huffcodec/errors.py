"""
errors.py

Error types raised by the huffcodec core.
"""

from typing import Any, Optional


class HuffmanError(ValueError):
    """Base class for all Huffman coding failures."""


class EmptyAlphabetError(HuffmanError):
    def __init__(self, message: str = "Cannot build a Huffman tree from an empty frequency table") -> None:
        super().__init__(message)


class MalformedTreeError(HuffmanError):
    """Raised when a tree breaks the strict binary tree invariant."""


class UnknownSymbolError(HuffmanError):
    def __init__(self, symbol: Any, position: Optional[int] = None) -> None:
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Symbol {symbol!r} is not in the code book"
        else:
            message = f"Symbol {symbol!r} at position {position} is not in the code book"
        super().__init__(message)


class TruncatedStreamError(HuffmanError):
    def __init__(self, consumed_bits: int, message: Optional[str] = None) -> None:
        self.consumed_bits = consumed_bits
        if message is None:
            message = f"Bit stream ended in the middle of a code after {consumed_bits} bits"
        super().__init__(message)
