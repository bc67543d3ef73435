#experiments.py
import os
import time

from .codecs import HuffmanCodecFile, encode_symbols
from .coders import HuffmanDecoder
from .errors import HuffmanError
from .logger import Logger, Log, LogLevel
from .preprocessors import get_preprocessor
from .reports import CompressionStatistics, write_dictionary_table, write_encoded_codes, write_statistics
from .settings import DICTIONARY_FILE_NAME, ENCODED_FILE_NAME, STATISTICS_FILE_NAME, COMPRESSED_FILE_EXTENSION


class HuffmanExperiment:
    def __init__(self, name: str, input_file_path, experiment_root_folder_path, preprocessor_code = 3, logger = None):

        self.name = name

        #validate that input file exists and can be read
        if not os.path.exists(input_file_path):
            raise FileNotFoundError(f"File {input_file_path} not found.")
        if not os.access(input_file_path, os.R_OK):
            raise PermissionError(f"File {input_file_path} is not readable.")

        self.input_file_path = input_file_path

        #attempt to create experiment folder
        self.experiment_folder_path = os.path.join(experiment_root_folder_path, name)
        if not os.path.exists(self.experiment_folder_path):
            os.makedirs(self.experiment_folder_path)

        input_file_name = os.path.basename(input_file_path)
        self.dictionary_file_path = os.path.join(self.experiment_folder_path, DICTIONARY_FILE_NAME)
        self.encoded_file_path = os.path.join(self.experiment_folder_path, ENCODED_FILE_NAME)
        self.statistics_file_path = os.path.join(self.experiment_folder_path, STATISTICS_FILE_NAME)
        self.compressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}{COMPRESSED_FILE_EXTENSION}")
        self.decompressed_file_path = os.path.join(self.experiment_folder_path, f"{input_file_name}_decompressed")

        self.logger = logger if logger is not None else Logger()
        self.preprocessor = get_preprocessor(preprocessor_code, self.logger)
        self.codec = HuffmanCodecFile()


    def run(self):
        self.input_file_size = os.path.getsize(self.input_file_path)
        with open(self.input_file_path, "rb") as file:
            data = file.read()

        self.encoding_start_time = time.time()
        self.symbols = self.preprocessor.convert_to_symbols(data)
        self.frequency_table, self.tree, self.codebook, self.stream = encode_symbols(self.symbols, self.logger)
        self.encoding_end_time = time.time()

        self.decoding_start_time = time.time()
        decoded = HuffmanDecoder(self.logger).decode(self.stream, self.tree)
        self.decoding_end_time = time.time()
        if decoded != self.symbols:
            self.logger.log(Log("Experiment", LogLevel.ERROR, f"{self.name}: decoded symbols differ from the input"))
            raise HuffmanError("Round trip failed: decoded symbols differ from the input")

        self.statistics = CompressionStatistics.from_stream(self.stream, self.frequency_table)
        write_dictionary_table(self.dictionary_file_path, self.codebook, self.frequency_table)
        write_encoded_codes(self.encoded_file_path, self.stream)
        write_statistics(self.statistics_file_path, self.statistics)

        self.codec.compress(self.input_file_path, self.compressed_file_path, self.preprocessor, self.logger)
        self.codec.decompress(self.compressed_file_path, self.decompressed_file_path, self.logger)

        self.compressed_file_size = os.path.getsize(self.compressed_file_path)
        self.encoding_time = self.encoding_end_time - self.encoding_start_time
        self.decoding_time = self.decoding_end_time - self.decoding_start_time

        self.logger.log(Log("Experiment", LogLevel.INFO,
                            f"{self.name}: {self.statistics.symbol_count} symbols, "
                            f"ratio {self.statistics.compression_ratio:.4f}:1"))
        return self.statistics
