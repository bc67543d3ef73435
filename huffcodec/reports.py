"""
reports.py

Compression statistics and the human-readable report files.

"""


import csv
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from .models import CodeBook, EncodedStream, FrequencyTable

DICTIONARY_HEADER = ["Character", "Huffman_Code", "Frequency"]
RULE = "=" * 60


class CompressionStatistics:
    """
    Size figures of one encoding.
    """

    def __init__(self, uncompressed_bits: int, compressed_bits: int, symbol_count: int,
                 entropy: Optional[float] = None) -> None:
        self.uncompressed_bits = uncompressed_bits
        self.compressed_bits = compressed_bits
        self.symbol_count = symbol_count
        self.entropy = entropy

    @staticmethod
    def from_stream(stream: EncodedStream, frequency_table: Optional[Mapping] = None) -> 'CompressionStatistics':
        """
        Collect the statistics of an encoded stream.

        Args:
            stream (EncodedStream): The encoding.
            frequency_table (Optional[Mapping]): Counts of the encoded symbols, used for the entropy.

        Returns:
            CompressionStatistics: The statistics.
        """
        entropy = shannon_entropy(frequency_table) if frequency_table else None
        return CompressionStatistics(stream.uncompressed_bits, stream.compressed_bits, stream.symbol_count, entropy)

    @property
    def compression_ratio(self) -> float:
        if self.compressed_bits == 0:
            return 0.0
        return self.uncompressed_bits / self.compressed_bits

    @property
    def space_savings(self) -> float:
        """Percentage of the uncompressed size saved."""
        if self.uncompressed_bits == 0:
            return 0.0
        return (self.uncompressed_bits - self.compressed_bits) / self.uncompressed_bits * 100

    @property
    def average_code_length(self) -> float:
        if self.symbol_count == 0:
            return 0.0
        return self.compressed_bits / self.symbol_count

    def format(self, title: str = "HUFFMAN CODING COMPRESSION RESULTS") -> str:
        lines = [
            title,
            RULE,
            f"Uncompressed Size: {self.uncompressed_bits} bits ({self.uncompressed_bits / 8.0:.2f} bytes)",
            f"Compressed Size: {self.compressed_bits} bits ({self.compressed_bits / 8.0:.2f} bytes)",
            f"Compression Ratio: {self.compression_ratio:.4f}:1",
            f"Space Savings: {self.space_savings:.2f}%",
            f"Average Code Length: {self.average_code_length:.4f} bits/symbol",
        ]
        if self.entropy is not None:
            lines.append(f"Entropy: {self.entropy:.4f} bits/symbol")
        lines.append(RULE)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


def shannon_entropy(frequency_table: Mapping) -> float:
    """
    Shannon entropy of the symbol distribution, in bits per symbol.

    Args:
        frequency_table (Mapping): Symbol to count.

    Returns:
        float: The entropy, 0.0 for an empty or single-symbol table.
    """
    counts = np.array(list(frequency_table.values()), dtype=np.float64)
    if counts.size == 0:
        return 0.0
    probs = counts / counts.sum()
    return float(max(0.0, -np.sum(probs * np.log2(probs))))


def write_dictionary_table(file_path: str, codebook: CodeBook, frequency_table: Mapping) -> None:
    """Write one (symbol, code, frequency) row per symbol, sorted by symbol."""
    with open(file_path, "w", newline="", encoding="utf-8") as file:
        writer = csv.writer(file)
        writer.writerow(DICTIONARY_HEADER)
        for symbol, code, frequency in codebook.rows(frequency_table):
            writer.writerow([symbol, code, frequency])


def read_dictionary_table(file_path: str) -> Tuple[CodeBook, FrequencyTable]:
    """
    Read a table written by write_dictionary_table().

    Symbols come back as strings.

    Args:
        file_path (str): The dictionary file.

    Returns:
        Tuple[CodeBook, FrequencyTable]: The codes and their counts.
    """
    codes: Dict[str, str] = {}
    counts: Dict[str, int] = {}
    with open(file_path, "r", newline="", encoding="utf-8") as file:
        reader = csv.reader(file)
        header = next(reader, None)
        if header != DICTIONARY_HEADER:
            raise ValueError(f"Unexpected dictionary header: {header}")
        for row in reader:
            if len(row) != 3:
                raise ValueError(f"Dictionary row must have 3 columns, got {row}")
            symbol, code, frequency = row
            codes[symbol] = code
            counts[symbol] = int(frequency)
    return CodeBook(codes), FrequencyTable(counts)


def write_encoded_codes(file_path: str, stream: EncodedStream) -> None:
    """Write one code per line, in input order."""
    with open(file_path, "w", encoding="utf-8") as file:
        for code in stream:
            file.write(code + "\n")


def read_encoded_codes(file_path: str) -> List[str]:
    with open(file_path, "r", encoding="utf-8") as file:
        return [line.strip() for line in file if line.strip()]


def write_statistics(file_path: str, statistics: CompressionStatistics) -> None:
    with open(file_path, "w", encoding="utf-8") as file:
        file.write(statistics.format() + "\n")
