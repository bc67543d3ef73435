import struct
from typing import Hashable, List, Optional, Tuple

from .validators import validate_type, validate_file_exists
from .preprocessors import BasePreprocessor, get_preprocessor
from .coders import HuffmanCoder, HuffmanEncoder
from .codebook import generate_codebook
from .file_handler import CompressedFile
from .models import CodeBook, EncodedStream, FrequencyTable
from .tree import HuffmanTree, build_tree
from .settings import VERSION
from .logger import Logger, FrequencyCountLog


def encode_symbols(
    symbols: List[Hashable],
    logger: Optional[Logger] = None,
) -> Tuple[FrequencyTable, HuffmanTree, CodeBook, EncodedStream]:
    """
    Run the whole encoding pipeline over a symbol sequence.

    Args:
        symbols (List[Hashable]): The symbols to encode.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Tuple[FrequencyTable, HuffmanTree, CodeBook, EncodedStream]: Every intermediate result.
    """
    frequency_table = FrequencyTable.count(symbols)
    if logger is not None:
        logger.log(FrequencyCountLog(frequency_table.total, len(frequency_table)))
    tree = build_tree(frequency_table, logger)
    codebook = generate_codebook(tree, logger)
    stream = HuffmanEncoder(logger=logger).encode(symbols, codebook)
    return frequency_table, tree, codebook, stream


class CompressedHuffmanModel:
    """Represents a compressed file."""

    def __init__(
        self,
        preprocessor_code: int,
        version: int,
        frequency_header: bytes,
        coder_code: int,
        data: bytes,
        original_file_name: Optional[str] = None,
    ) -> None:
        validate_type(preprocessor_code, "Preprocessor code", int)
        validate_type(version, "Version", int)
        validate_type(frequency_header, "Frequency header", bytes)
        validate_type(coder_code, "Coder code", int)
        validate_type(data, "Data", bytes)
        if original_file_name is not None:
            validate_type(original_file_name, "Original file name", str)

        get_preprocessor(preprocessor_code)

        if version != VERSION:
            raise ValueError("Version not supported")
        if coder_code != HuffmanCoder().get_coder_code():
            raise ValueError("Unknown coder code: " + str(coder_code))

        self.original_file_name = original_file_name
        self.preprocessor_code = preprocessor_code
        self.version = version
        self.frequency_header = frequency_header
        self.coder_code = coder_code
        self.data = data

    @staticmethod
    def serialize(model: 'CompressedHuffmanModel') -> bytes:
        """
        Serialize a CompressedHuffmanModel instance into bytes.

        The format:
          - preprocessor_code (4 bytes, unsigned int)
          - version (4 bytes, unsigned int)
          - frequency header length (4 bytes, unsigned int)
          - frequency_header (variable length)
          - coder_code (4 bytes, unsigned int)
          - data length (4 bytes, unsigned int)
          - data (variable length)
          - original_file_name length (4 bytes, unsigned int; 0 if None)
          - original_file_name (UTF-8 encoded, if present)
        """
        file_name_bytes = (
            model.original_file_name.encode("utf-8") if model.original_file_name is not None else b""
        )

        serialized = struct.pack(">III", model.preprocessor_code, model.version, len(model.frequency_header))
        serialized += model.frequency_header
        serialized += struct.pack(">I", model.coder_code)
        serialized += struct.pack(">I", len(model.data))
        serialized += model.data
        serialized += struct.pack(">I", len(file_name_bytes))
        serialized += file_name_bytes

        return serialized

    @staticmethod
    def deserialize(serialized: bytes) -> 'CompressedHuffmanModel':
        """
        Deserialize bytes into a CompressedHuffmanModel instance.
        The byte structure is expected to be the same as produced by serialize().
        """
        if len(serialized) < 12:
            raise ValueError("Serialized data is too short")
        preprocessor_code, version, header_length = struct.unpack(">III", serialized[:12])
        offset = 12

        if len(serialized) < offset + header_length:
            raise ValueError("Serialized data is incomplete for frequency header")
        frequency_header = serialized[offset : offset + header_length]
        offset += header_length

        if len(serialized) < offset + 4:
            raise ValueError("Serialized data is incomplete for coder_code")
        coder_code, = struct.unpack(">I", serialized[offset : offset + 4])
        offset += 4

        if len(serialized) < offset + 4:
            raise ValueError("Serialized data is incomplete for data length")
        data_length, = struct.unpack(">I", serialized[offset : offset + 4])
        offset += 4

        if len(serialized) < offset + data_length:
            raise ValueError("Serialized data is incomplete for data")
        data = serialized[offset : offset + data_length]
        offset += data_length

        if len(serialized) < offset + 4:
            raise ValueError("Serialized data is incomplete for file name length")
        file_name_length, = struct.unpack(">I", serialized[offset : offset + 4])
        offset += 4
        if file_name_length > 0:
            original_file_name = serialized[offset : offset + file_name_length].decode("utf-8")
        else:
            original_file_name = None

        return CompressedHuffmanModel(
            preprocessor_code, version, frequency_header, coder_code, data, original_file_name
        )


class CompressedModelFile:
    """Provides methods to write and read a CompressedHuffmanModel instance to/from a file."""

    @staticmethod
    def write_to_file(model: CompressedHuffmanModel, file_path: str) -> None:
        """
        Serialize the model and write it, behind the file signature, to the given file.

        Args:
            model (CompressedHuffmanModel): The compressed model to write.
            file_path (str): The path to the output file.
        """
        CompressedFile().write(file_path, CompressedHuffmanModel.serialize(model))

    @staticmethod
    def read_from_file(file_path: str) -> CompressedHuffmanModel:
        """
        Read a file written by write_to_file() and deserialize it.

        Args:
            file_path (str): The path to the compressed file.

        Returns:
            CompressedHuffmanModel: The deserialized compressed model.
        """
        _, serialized_data = CompressedFile().read(file_path)
        return CompressedHuffmanModel.deserialize(serialized_data)


class HuffmanCodec:
    def compress(
        self,
        data: bytes,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> CompressedHuffmanModel:
        """
        Compress the input data.

        Args:
            data (bytes): The data to compress.
            preprocessor: An instance of BasePreprocessor.
            logger: Logger instance for logging.

        Returns:
            CompressedHuffmanModel: The resulting compressed model.
        """
        validate_type(data, "Data", bytes)
        if not isinstance(preprocessor, BasePreprocessor):
            raise ValueError("Preprocessor must be an instance of BasePreprocessor")

        symbols = preprocessor.convert_to_symbols(data)
        frequency_table = FrequencyTable.count(symbols)
        if logger is not None:
            logger.log(FrequencyCountLog(frequency_table.total, len(frequency_table)))
        tree = build_tree(frequency_table, logger)

        coder = HuffmanCoder(logger=logger)
        encoded_data = coder.encode(symbols, tree)
        return CompressedHuffmanModel(
            preprocessor.code,
            VERSION,
            preprocessor.encode_frequency_table_for_header(frequency_table),
            coder.get_coder_code(),
            encoded_data,
        )

    def decompress(
        self,
        compressed_model: CompressedHuffmanModel,
        logger: Optional[Logger] = None,
    ) -> bytes:
        """
        Decompress the encoded data.

        The tree is rebuilt from the stored frequency table; construction is deterministic,
        so it matches the tree used for compression.

        Args:
            compressed_model (CompressedHuffmanModel): The compressed model.
            logger: Logger instance for logging.

        Returns:
            bytes: The decompressed data.
        """
        if not isinstance(compressed_model, CompressedHuffmanModel):
            raise ValueError("Input must be a CompressedHuffmanModel instance")
        if compressed_model.version != VERSION:
            raise ValueError("Version not supported")

        preprocessor = get_preprocessor(compressed_model.preprocessor_code, logger=logger)
        frequency_table = preprocessor.construct_frequency_table_from_header(compressed_model.frequency_header)
        tree = build_tree(frequency_table, logger)

        coder = HuffmanCoder(logger=logger)
        symbols = coder.decode(compressed_model.data, tree)
        return preprocessor.convert_from_symbols(symbols)


class HuffmanCodecFile(HuffmanCodec):
    def compress(
        self,
        input_path: str,
        output_path: str,
        preprocessor: BasePreprocessor,
        logger: Optional[Logger] = None,
    ) -> None:
        """
        Compress the input file and write the compressed model to an output file.

        Args:
            input_path (str): Path to the input file.
            output_path (str): Path to the output file.
            preprocessor: An instance of BasePreprocessor.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        with open(input_path, "rb") as file:
            data = file.read()

        compressed_model = super().compress(data, preprocessor, logger)
        CompressedModelFile.write_to_file(compressed_model, output_path)

    def decompress(
        self,
        input_path: str,
        output_path: str,
        logger: Optional[Logger] = None,
    ) -> None:
        """
        Decompress a compressed file and write the restored data to an output file.

        Args:
            input_path (str): Path to the compressed file.
            output_path (str): Path to the output file.
            logger: Logger instance for logging.
        """
        validate_type(input_path, "Input path", str)
        validate_type(output_path, "Output path", str)
        validate_file_exists(input_path)

        compressed_model = CompressedModelFile.read_from_file(input_path)
        data = super().decompress(compressed_model, logger)
        with open(output_path, "wb") as file:
            file.write(data)
