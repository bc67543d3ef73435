"""
huffcodec: A Python library for static Huffman coding of symbol sequences.
"""

from .models import (
    SymbolFrequency,
    FrequencyTable,
    CodeBook,
    EncodedStream,
)

from .tree import (
    LeafNode,
    InternalNode,
    HuffmanTree,
    build_tree,
)

from .codebook import generate_codebook

from .coders import (
    CoderBase,
    BitOutputStream,
    BitInputStream,
    HuffmanEncoder,
    HuffmanDecoder,
    HuffmanCoder,
)

from .codecs import (
    encode_symbols,
    CompressedHuffmanModel,
    CompressedModelFile,
    HuffmanCodec,
    HuffmanCodecFile,
)

from .errors import (
    HuffmanError,
    EmptyAlphabetError,
    MalformedTreeError,
    UnknownSymbolError,
    TruncatedStreamError,
)

from .preprocessors import (
    BasePreprocessor,
    BytePreprocessor,
    TextCharPreprocessor,
    CsvFieldPreprocessor,
    get_preprocessor,
)

from .reports import (
    CompressionStatistics,
    shannon_entropy,
    write_dictionary_table,
    read_dictionary_table,
    write_encoded_codes,
    read_encoded_codes,
    write_statistics,
)

from .settings import VERSION, SYMBOL_WIDTH_BITS

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyCountLog,
    TreeMergeLog,
    CodeAssignmentLog,
    CodingLog,
    PreprocessingProgressStep,
    CodingProgressStep,
    DecodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "SymbolFrequency",
    "FrequencyTable",
    "CodeBook",
    "EncodedStream",

    "LeafNode",
    "InternalNode",
    "HuffmanTree",
    "build_tree",
    "generate_codebook",

    "CoderBase",
    "BitOutputStream",
    "BitInputStream",
    "HuffmanEncoder",
    "HuffmanDecoder",
    "HuffmanCoder",

    "encode_symbols",
    "CompressedHuffmanModel",
    "CompressedModelFile",
    "HuffmanCodec",
    "HuffmanCodecFile",

    "HuffmanError",
    "EmptyAlphabetError",
    "MalformedTreeError",
    "UnknownSymbolError",
    "TruncatedStreamError",

    "BasePreprocessor",
    "BytePreprocessor",
    "TextCharPreprocessor",
    "CsvFieldPreprocessor",
    "get_preprocessor",

    "CompressionStatistics",
    "shannon_entropy",
    "write_dictionary_table",
    "read_dictionary_table",
    "write_encoded_codes",
    "read_encoded_codes",
    "write_statistics",

    "Logger",
    "Log",
    "LogLevel",
]
