"""
validators.py

Shared codes for input validation in huffcodec.
"""


import os
from collections.abc import Hashable
from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_symbol(symbol: Any) -> None:
    """Validate that a value can be used as a symbol of the alphabet."""
    if symbol is None:
        raise ValueError("Symbol must not be None")
    if not isinstance(symbol, Hashable):
        raise ValueError(f"Symbol must be hashable, got {type(symbol).__name__}")
    if isinstance(symbol, (str, bytes)) and len(symbol) == 0:
        raise ValueError("Symbol must not be empty")


def validate_frequency(frequency: Any, symbol: Any = None) -> None:
    """Validate that a frequency is a positive integer."""
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        raise ValueError(f"Frequency of {symbol!r} must be of type int")
    if frequency <= 0:
        raise ValueError(f"Frequency of {symbol!r} must be positive, got {frequency}")


def validate_bit(bit: Any) -> int:
    """Validate a single bit given as '0'/'1', 0/1 or a bool and return it as an int."""
    if bit in ('0', '1'):
        return int(bit)
    if isinstance(bit, (bool, int)) and bit in (0, 1):
        return int(bit)
    raise ValueError(f"Bit must be 0 or 1, got {bit!r}")
