"""
settings.py

Constants shared across huffcodec.
"""

VERSION = 1

# Width of one symbol in the uncompressed representation.
SYMBOL_WIDTH_BITS = 8

FILE_SIGNATURE = b'HUF'

DICTIONARY_FILE_NAME = "huffman_dictionary.txt"
ENCODED_FILE_NAME = "huffman_encoded.txt"
STATISTICS_FILE_NAME = "compression_statistics.txt"
COMPRESSED_FILE_EXTENSION = ".huff"

PREPROCESSOR_STEP_INTERVAL_COUNT = 10000
CODING_STEP_INTERVAL_COUNT = 1000
