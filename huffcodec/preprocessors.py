import abc
import struct
from typing import Hashable, List, Optional

from .models import FrequencyTable
from .logger import Logger, PreprocessingProgressStep


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: bytes) -> List[Hashable]:
        """
        Convert raw data (bytes) to a list of symbols.

        Args:
            data (bytes): The input data as bytes.

        Returns:
            List[Hashable]: The symbol sequence.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Hashable]) -> bytes:
        """
        Convert a list of symbols back to data in bytes.

        Args:
            symbols (List[Hashable]): The list of symbols.

        Returns:
            bytes: The reconstructed data.
        """
        pass

    @abc.abstractmethod
    def symbol_to_bytes(self, symbol: Hashable) -> bytes:
        pass

    @abc.abstractmethod
    def symbol_from_bytes(self, data: bytes) -> Hashable:
        pass

    def encode_frequency_table_for_header(self, table: FrequencyTable) -> bytes:
        """
        Convert a frequency table into its binary representation to be stored in a header.

        The format:
          - entry count (4 bytes, unsigned int)
          - per entry, in symbol order:
            - symbol length (2 bytes, unsigned int)
            - symbol (variable length)
            - frequency (4 bytes, unsigned int)

        Args:
            table (FrequencyTable): The table to encode.

        Returns:
            bytes: The binary representation of the table.
        """
        header = struct.pack(">I", len(table))
        for entry in table.items_sorted():
            symbol_bytes = self.symbol_to_bytes(entry.symbol)
            header += struct.pack(">H", len(symbol_bytes))
            header += symbol_bytes
            header += struct.pack(">I", entry.frequency)
        return header

    def construct_frequency_table_from_header(self, data: bytes) -> FrequencyTable:
        """
        Construct a frequency table from header data.

        Args:
            data (bytes): The header data.

        Returns:
            FrequencyTable: The reconstructed table.
        """
        if len(data) < 4:
            raise ValueError("Header data is too short")
        entry_count, = struct.unpack(">I", data[:4])
        offset = 4
        counts = {}
        for _ in range(entry_count):
            if len(data) < offset + 2:
                raise ValueError("Header data is incomplete for symbol length")
            symbol_length, = struct.unpack(">H", data[offset:offset + 2])
            offset += 2
            if len(data) < offset + symbol_length + 4:
                raise ValueError("Header data is incomplete for symbol entry")
            symbol = self.symbol_from_bytes(data[offset:offset + symbol_length])
            offset += symbol_length
            frequency, = struct.unpack(">I", data[offset:offset + 4])
            offset += 4
            if symbol in counts:
                raise ValueError(f"Header lists symbol {symbol!r} more than once")
            counts[symbol] = frequency
        if offset != len(data):
            raise ValueError("Header data has trailing bytes")
        return FrequencyTable(counts)


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is a symbol, represented by its int value.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 1

    def convert_to_symbols(self, data: bytes) -> List[int]:
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")
        symbols = list(data)
        if self.logger is not None:
            self.logger.log(PreprocessingProgressStep("Converted bytes to symbols", len(data)))
        return symbols

    def convert_from_symbols(self, symbols: List[int]) -> bytes:
        return bytes(symbols)

    def symbol_to_bytes(self, symbol: int) -> bytes:
        return bytes([symbol])

    def symbol_from_bytes(self, data: bytes) -> int:
        if len(data) != 1:
            raise ValueError("Byte symbol must be exactly 1 byte")
        return data[0]


class TextCharPreprocessor(BasePreprocessor):
    """
    Text Character Preprocessor: Each UTF-8 character is a symbol.
    """
    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger

    @property
    def code(self) -> int:
        return 2

    def decode_text(self, data: bytes) -> str:
        if not isinstance(data, bytes):
            raise ValueError("Data should be in form of bytes")
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            raise ValueError("Data should be valid UTF-8 text")

    def convert_to_symbols(self, data: bytes) -> List[str]:
        symbols = list(self.decode_text(data))
        if self.logger is not None:
            self.logger.log(PreprocessingProgressStep("Converted text to symbols", len(symbols)))
        return symbols

    def convert_from_symbols(self, symbols: List[str]) -> bytes:
        return "".join(symbols).encode('utf-8')

    def symbol_to_bytes(self, symbol: str) -> bytes:
        return symbol.encode('utf-8')

    def symbol_from_bytes(self, data: bytes) -> str:
        return data.decode('utf-8')


class CsvFieldPreprocessor(TextCharPreprocessor):
    """
    CSV Field Preprocessor: skips the header line, joins the second and first field
    of every record and makes each character of the result a symbol.

    Only the symbol stream survives, so convert_from_symbols returns the joined
    characters rather than the original records.
    """

    @property
    def code(self) -> int:
        return 3

    def convert_to_symbols(self, data: bytes) -> List[str]:
        lines = self.decode_text(data).splitlines()
        symbols: List[str] = []
        for line in lines[1:]:
            parts = line.split(",")
            # trailing empty fields do not count as fields
            while parts and parts[-1] == "":
                parts.pop()
            if len(parts) >= 2:
                symbols.extend(parts[1].strip() + parts[0].strip())
            if self.logger is not None:
                self.logger.log(PreprocessingProgressStep("Tokenizing records", len(lines) - 1))
        return symbols


def get_preprocessor(code: int, logger: Optional[Logger] = None) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == 1:
        return BytePreprocessor(logger)
    elif code == 2:
        return TextCharPreprocessor(logger)
    elif code == 3:
        return CsvFieldPreprocessor(logger)
    else:
        raise ValueError("Preprocessor code not supported")
