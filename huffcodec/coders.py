"""
coders.py



"""


import abc
import struct
from io import BytesIO
from typing import Any, Hashable, Iterable, List, Optional, IO, Union

from .codebook import generate_codebook
from .errors import MalformedTreeError, TruncatedStreamError, UnknownSymbolError
from .logger import Logger, CodingLog, CodingProgressStep, DecodingProgressStep
from .models import CodeBook, EncodedStream
from .settings import SYMBOL_WIDTH_BITS
from .tree import HuffmanTree, InternalNode, LeafNode, TreeNode
from .validators import validate_type, validate_bit


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    def __init__(self) -> None:
        """Initialize the coder."""
        pass

    @abc.abstractmethod
    def encode(self, symbols: List[Hashable], tree: HuffmanTree) -> bytes:
        """
        Encode a sequence of symbols into a compressed byte stream.

        Args:
            symbols (List[Hashable]): The list of symbols to be encoded.
            tree (HuffmanTree): The tree built from the symbol frequencies.

        Returns:
            bytes: The encoded data.
        """
        pass

    @abc.abstractmethod
    def decode(self, data: bytes, tree: HuffmanTree) -> List[Hashable]:
        """
        Decode a compressed byte stream back into a list of symbols.

        Args:
            data (bytes): The encoded data.
            tree (HuffmanTree): The tree used during encoding.

        Returns:
            List[Hashable]: The decoded list of symbols.
        """
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the code for the coder.

        Returns:
            int: The coder code.
        """
        pass


class BitOutputStream:
    """
    A helper class to write bits to an underlying binary stream.
    """

    def __init__(self, out: IO[bytes]) -> None:
        """
        Initialize with an underlying output stream (e.g., a file opened in binary mode).

        Args:
            out (IO[bytes]): The output stream.
        """
        self.out: IO[bytes] = out
        self.current_byte: int = 0
        self.num_bits_filled: int = 0

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Args:
            bit (int): The bit to write.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        if bit not in (0, 1):
            raise ValueError("Bit must be 0 or 1")
        self.current_byte = (self.current_byte << 1) | bit
        self.num_bits_filled += 1
        if self.num_bits_filled == 8:
            self.flush_current_byte()

    def write_code(self, code: str) -> None:
        """Write every bit of a '0'/'1' code string."""
        for bit in code:
            self.write(validate_bit(bit))

    def flush_current_byte(self) -> None:
        """
        Write the current byte to the underlying stream and reset the buffer.
        """
        self.out.write(bytes((self.current_byte,)))
        self.current_byte = 0
        self.num_bits_filled = 0

    def finish(self) -> None:
        """
        Flush any remaining bits to the stream by padding with zeros.
        """
        if self.num_bits_filled > 0:
            self.current_byte = self.current_byte << (8 - self.num_bits_filled)
            self.flush_current_byte()
        self.out.flush()

    def close(self) -> None:
        """
        Finish writing and close the underlying stream.
        """
        self.finish()
        self.out.close()


class BitInputStream:
    """
    A helper class to read bits from an underlying binary stream.
    """

    def __init__(self, inp: IO[bytes]) -> None:
        """
        Initialize with an underlying input stream (e.g., a file opened in binary mode).

        Args:
            inp (IO[bytes]): The input stream.
        """
        self.inp: IO[bytes] = inp
        self.current_byte: int = 0
        self.num_bits_remaining: int = 0

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.num_bits_remaining == 0:
            byte = self.inp.read(1)
            if len(byte) == 0:
                return -1
            self.current_byte = byte[0]
            self.num_bits_remaining = 8
        self.num_bits_remaining -= 1
        return (self.current_byte >> self.num_bits_remaining) & 1

    def close(self) -> None:
        """
        Close the underlying input stream.
        """
        self.inp.close()


class HuffmanEncoder:
    """ Maps symbols to their codes. """

    def __init__(self, symbol_width: int = SYMBOL_WIDTH_BITS, logger: Optional[Logger] = None) -> None:
        validate_type(symbol_width, "symbol_width", int)
        if symbol_width <= 0:
            raise ValueError("symbol_width must be positive")
        self.symbol_width: int = symbol_width
        self.logger: Optional[Logger] = logger

    def encode(self, symbols: Iterable[Hashable], codebook: CodeBook) -> EncodedStream:
        """
        Replace each symbol by its code.

        Args:
            symbols (Iterable[Hashable]): The symbols to encode.
            codebook (CodeBook): Codes generated from the tree of these symbols.

        Returns:
            EncodedStream: One code per input symbol, in input order.

        Raises:
            UnknownSymbolError: If a symbol has no code.
        """
        validate_type(codebook, "codebook", CodeBook)
        symbols = list(symbols)
        codes: List[str] = []
        for position, symbol in enumerate(symbols):
            try:
                code = codebook[symbol]
            except (KeyError, TypeError):
                raise UnknownSymbolError(symbol, position) from None
            codes.append(code)
            if self.logger is not None:
                self.logger.log(CodingLog(self.symbol_width, len(code)))
                self.logger.log(CodingProgressStep("Encoding symbols", len(symbols)))
        return EncodedStream(codes, self.symbol_width)


class HuffmanDecoder:
    """ Walks a Huffman tree bit by bit to recover symbols. """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    def decode(self, bits: Union[str, Iterable[Any], EncodedStream], tree: Union[HuffmanTree, TreeNode]) -> List[Hashable]:
        """
        Decode a bit stream into symbols.

        A tree that is a single leaf emits its symbol once for every bit.

        Args:
            bits (Union[str, Iterable[Any], EncodedStream]): '0'/'1' characters, 0/1 ints,
                booleans, or an encoded stream.
            tree (Union[HuffmanTree, TreeNode]): The tree used during encoding.

        Returns:
            List[Hashable]: The decoded symbols.

        Raises:
            TruncatedStreamError: If the bits end in the middle of a code.
            ValueError: If a bit is not 0 or 1.
        """
        root = tree.root if isinstance(tree, HuffmanTree) else HuffmanTree(tree).root
        if isinstance(bits, EncodedStream):
            bits = bits.bits

        decoded: List[Hashable] = []
        node: TreeNode = root
        consumed = 0
        for raw_bit in bits:
            bit = validate_bit(raw_bit)
            consumed += 1
            if isinstance(root, LeafNode):
                self._emit(decoded, root.symbol)
                continue
            node = node.right if bit else node.left
            if isinstance(node, LeafNode):
                self._emit(decoded, node.symbol)
                node = root
            elif not isinstance(node, InternalNode):
                raise MalformedTreeError(f"Unexpected node of type {type(node).__name__} after {consumed} bits")

        if node is not root:
            raise TruncatedStreamError(consumed)
        return decoded

    def _emit(self, decoded: List[Hashable], symbol: Hashable) -> None:
        decoded.append(symbol)
        if self.logger is not None:
            self.logger.log(DecodingProgressStep("Decoding symbols"))


class HuffmanCoder(CoderBase):
    """
    Packs Huffman codes into bytes.

    Layout: symbol count (4 bytes, big endian), bit count (4 bytes, big endian),
    then the bits MSB first, zero padded to a whole byte.
    """

    HEADER_FORMAT = ">II"
    HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

    def __init__(self, symbol_width: int = SYMBOL_WIDTH_BITS, logger: Optional[Logger] = None) -> None:
        self.encoder: HuffmanEncoder = HuffmanEncoder(symbol_width, logger)
        self.decoder: HuffmanDecoder = HuffmanDecoder(logger)
        self.coder_code: int = 1
        self.logger: Optional[Logger] = logger

    def encode(self, symbols: List[Hashable], tree: HuffmanTree) -> bytes:
        """
        Encode symbols and pack the bits.

        Args:
            symbols (List[Hashable]): The symbols to encode.
            tree (HuffmanTree): The tree built from the symbol frequencies.

        Returns:
            bytes: Header followed by the packed bits.
        """
        validate_type(tree, "tree", HuffmanTree)
        stream = self.encoder.encode(symbols, generate_codebook(tree))

        out_buffer = BytesIO()
        bit_out = BitOutputStream(out_buffer)
        for code in stream:
            bit_out.write_code(code)
        bit_out.finish()

        return self.pack_header(stream.symbol_count, stream.compressed_bits) + out_buffer.getvalue()

    def pack_header(self, symbol_count: int, bit_count: int) -> bytes:
        """
        Pack the symbol and bit counts.

        Raises:
            ValueError: If a count does not fit in 4 bytes.
        """
        limit = 0xFFFFFFFF
        if symbol_count > limit:
            raise ValueError(f"Cannot pack {symbol_count} symbols, the header holds at most {limit}")
        if bit_count > limit:
            raise ValueError(f"Cannot pack {bit_count} bits, the header holds at most {limit}")
        return struct.pack(self.HEADER_FORMAT, symbol_count, bit_count)

    def decode(self, data: bytes, tree: HuffmanTree) -> List[Hashable]:
        """
        Unpack and decode data produced by encode().

        Args:
            data (bytes): The encoded data.
            tree (HuffmanTree): The tree used during encoding.

        Returns:
            List[Hashable]: The decoded symbols.
        """
        validate_type(data, "data", bytes)
        validate_type(tree, "tree", HuffmanTree)
        if len(data) < self.HEADER_SIZE:
            raise TruncatedStreamError(0, f"Data must hold a {self.HEADER_SIZE} byte header")
        symbol_count, bit_count = struct.unpack(self.HEADER_FORMAT, data[:self.HEADER_SIZE])
        payload = data[self.HEADER_SIZE:]
        if len(payload) * 8 < bit_count:
            raise TruncatedStreamError(len(payload) * 8,
                                       f"Header declares {bit_count} bits but only {len(payload) * 8} are present")

        bit_in = BitInputStream(BytesIO(payload))
        bits = [bit_in.read() for _ in range(bit_count)]
        symbols = self.decoder.decode(bits, tree)
        if len(symbols) != symbol_count:
            raise TruncatedStreamError(bit_count, f"Decoded {len(symbols)} symbols but header declares {symbol_count}")
        return symbols

    def get_coder_code(self) -> int:
        """
        Get the coder code.

        Returns:
            int: The code (1 for the Huffman coder).
        """
        return self.coder_code
