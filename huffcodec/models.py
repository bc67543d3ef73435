"""
models.py

The shared objects used in the huffcodec.

"""


from collections import Counter
from collections.abc import Mapping
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .settings import SYMBOL_WIDTH_BITS
from .validators import validate_symbol, validate_frequency


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Hashable, frequency: int) -> None:
        self.symbol: Hashable = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class FrequencyTable(Mapping):
    """
    Read-only mapping from each distinct symbol to its number of occurrences.
    """
    def __init__(self, counts: Optional[Mapping] = None) -> None:
        self._counts: Dict[Hashable, int] = {}
        if counts is not None:
            for symbol, frequency in counts.items():
                validate_symbol(symbol)
                validate_frequency(frequency, symbol)
                self._counts[symbol] = frequency

    @classmethod
    def count(cls, symbols: Iterable[Hashable]) -> 'FrequencyTable':
        """
        Count the occurrences of each symbol in a sequence.

        Args:
            symbols (Iterable[Hashable]): The symbol sequence, possibly empty.

        Returns:
            FrequencyTable: The counts for every distinct symbol.
        """
        counter = Counter()
        for symbol in symbols:
            validate_symbol(symbol)
            counter[symbol] += 1
        return cls(counter)

    @classmethod
    def merge(cls, tables: Iterable['FrequencyTable']) -> 'FrequencyTable':
        """
        Combine tables counted over separate chunks of one input.

        Args:
            tables (Iterable[FrequencyTable]): Partial tables.

        Returns:
            FrequencyTable: The table of the concatenated input.
        """
        counter = Counter()
        for table in tables:
            counter.update(table)
        return cls(counter)

    def __getitem__(self, symbol: Hashable) -> int:
        return self._counts[symbol]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"

    @property
    def total(self) -> int:
        """Sum of all counts, equal to the length of the counted input."""
        return sum(self._counts.values())

    def items_sorted(self) -> List[SymbolFrequency]:
        try:
            symbols = sorted(self._counts)
        except TypeError as e:
            raise ValueError("Symbols must be mutually comparable: " + str(e)) from e
        return [SymbolFrequency(symbol, self._counts[symbol]) for symbol in symbols]

    def most_common(self) -> List[SymbolFrequency]:
        return sorted(self.items_sorted(), key=lambda sf: -sf.frequency)


class CodeBook(Mapping):
    """
    Mapping from symbol to its bit-code, a non-empty string of '0' and '1'.
    """
    def __init__(self, codes: Mapping) -> None:
        self._codes: Dict[Hashable, str] = dict(codes)
        self._inverse: Dict[str, Hashable] = {}
        for symbol, code in self._codes.items():
            if not code or any(bit not in "01" for bit in code):
                raise ValueError(f"Code for {symbol!r} must be a non-empty string of 0 and 1, got {code!r}")
            if code in self._inverse:
                raise ValueError(f"Code {code} is assigned to both {self._inverse[code]!r} and {symbol!r}")
            self._inverse[code] = symbol

    def __getitem__(self, symbol: Hashable) -> str:
        return self._codes[symbol]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __repr__(self) -> str:
        return f"CodeBook({self._codes!r})"

    @property
    def inverse(self) -> Dict[str, Hashable]:
        """Mapping from code back to symbol."""
        return dict(self._inverse)

    def symbol_for(self, code: str) -> Hashable:
        return self._inverse[code]

    def code_length(self, symbol: Hashable) -> int:
        return len(self._codes[symbol])

    def code_lengths(self) -> Dict[Hashable, int]:
        return {symbol: len(code) for symbol, code in self._codes.items()}

    def as_bits(self, symbol: Hashable) -> Tuple[bool, ...]:
        """
        Get the code of a symbol as a tuple of booleans.

        Args:
            symbol (Hashable): The symbol to look up.

        Returns:
            Tuple[bool, ...]: True for every '1' in the code.
        """
        return tuple(bit == '1' for bit in self._codes[symbol])

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another.

        Once sorted, a code that prefixes others sorts directly before one of them,
        so only neighbours need comparing.
        """
        codes = sorted(self._codes.values())
        for current, following in zip(codes, codes[1:]):
            if following.startswith(current):
                return False
        return True

    def rows(self, frequency_table: Mapping) -> List[Tuple[Hashable, str, int]]:
        """
        Build the (symbol, code, frequency) table sorted by symbol.

        Args:
            frequency_table (Mapping): Counts the code book was built from.

        Returns:
            List[Tuple[Hashable, str, int]]: One row per symbol.
        """
        return [(symbol, self._codes[symbol], frequency_table[symbol]) for symbol in sorted(self._codes)]


class EncodedStream:
    """
    Per-symbol codes in input order, together with the size figures of the encoding.
    """
    def __init__(self, codes: Iterable[str], symbol_width: int = SYMBOL_WIDTH_BITS) -> None:
        self.codes: Tuple[str, ...] = tuple(codes)
        self.symbol_width: int = symbol_width
        self.compressed_bits: int = sum(len(code) for code in self.codes)
        self.uncompressed_bits: int = len(self.codes) * symbol_width

    @property
    def symbol_count(self) -> int:
        return len(self.codes)

    @property
    def bits(self) -> str:
        """All codes concatenated into one bit string."""
        return "".join(self.codes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, EncodedStream):
            return self.codes == other.codes and self.symbol_width == other.symbol_width
        return False

    def __repr__(self) -> str:
        return f"EncodedStream(symbols={self.symbol_count}, compressed_bits={self.compressed_bits})"
