import os
import tempfile
import unittest
from huffcodec.codecs import (
    encode_symbols,
    CompressedHuffmanModel,
    CompressedModelFile,
    HuffmanCodec,
    HuffmanCodecFile,
)
from huffcodec.preprocessors import BytePreprocessor, TextCharPreprocessor
from huffcodec.errors import EmptyAlphabetError, TruncatedStreamError
from huffcodec.logger import Logger

class TestEncodeSymbols(unittest.TestCase):
    def test_scenario(self):
        table, tree, book, stream = encode_symbols(list("aaabbc"))
        self.assertEqual(dict(table), {'a': 3, 'b': 2, 'c': 1})
        self.assertEqual(tree.frequency, 6)
        self.assertEqual(book.code_lengths(), {'a': 1, 'b': 2, 'c': 2})
        self.assertEqual(stream.compressed_bits, 9)

    def test_empty(self):
        with self.assertRaises(EmptyAlphabetError):
            encode_symbols([])

class TestCompressedHuffmanModel(unittest.TestCase):
    def setUp(self):
        self.model = CompressedHuffmanModel(
            preprocessor_code=1,
            version=1,
            frequency_header=b'header_data',
            coder_code=1,
            data=b'some_binary_data',
            original_file_name='test_file.txt'
        )

    def test_serialization_deserialization(self):
        serialized = CompressedHuffmanModel.serialize(self.model)
        deserialized = CompressedHuffmanModel.deserialize(serialized)
        self.assertEqual(self.model.preprocessor_code, deserialized.preprocessor_code)
        self.assertEqual(self.model.version, deserialized.version)
        self.assertEqual(self.model.frequency_header, deserialized.frequency_header)
        self.assertEqual(self.model.coder_code, deserialized.coder_code)
        self.assertEqual(self.model.data, deserialized.data)
        self.assertEqual(self.model.original_file_name, deserialized.original_file_name)

    def test_deserialize_truncated(self):
        serialized = CompressedHuffmanModel.serialize(self.model)
        with self.assertRaises(ValueError):
            CompressedHuffmanModel.deserialize(serialized[:8])
        with self.assertRaises(ValueError):
            CompressedHuffmanModel.deserialize(serialized[:30])

    def test_invalid_fields(self):
        with self.assertRaises(ValueError):
            CompressedHuffmanModel(1, 2, b'', 1, b'')
        with self.assertRaises(ValueError):
            CompressedHuffmanModel(42, 1, b'', 1, b'')
        with self.assertRaises(ValueError):
            CompressedHuffmanModel(1, 1, b'', 7, b'')
        with self.assertRaises(ValueError):
            CompressedHuffmanModel(1, 1, 'header', 1, b'')

    def test_file_write_read(self):
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file_name = temp_file.name
        try:
            CompressedModelFile.write_to_file(self.model, temp_file_name)
            with open(temp_file_name, "rb") as file:
                self.assertEqual(file.read(3), b'HUF')
            read_model = CompressedModelFile.read_from_file(temp_file_name)
            self.assertEqual(self.model.frequency_header, read_model.frequency_header)
            self.assertEqual(self.model.data, read_model.data)
            self.assertEqual(self.model.original_file_name, read_model.original_file_name)
        finally:
            os.remove(temp_file_name)

    def test_bad_signature(self):
        with tempfile.NamedTemporaryFile(delete=False) as temp_file:
            temp_file.write(b'NNC\x00\x01')
            temp_file_name = temp_file.name
        try:
            with self.assertRaises(ValueError):
                CompressedModelFile.read_from_file(temp_file_name)
        finally:
            os.remove(temp_file_name)

class TestHuffmanCodec(unittest.TestCase):
    def test_compress_decompress_bytes(self):
        codec = HuffmanCodec()
        data = b'Testing Data with some repetition: aaaaaaaabbbbcc'
        model = codec.compress(data, BytePreprocessor())
        restored = codec.decompress(CompressedHuffmanModel.deserialize(CompressedHuffmanModel.serialize(model)))
        self.assertEqual(restored, data)

    def test_compress_decompress_text(self):
        codec = HuffmanCodec()
        data = "Ünïcödé text, with ünïcödé letters".encode('utf-8')
        model = codec.compress(data, TextCharPreprocessor(), Logger())
        self.assertEqual(codec.decompress(model), data)

    def test_single_repeated_byte(self):
        codec = HuffmanCodec()
        data = b'A' * 1000
        model = codec.compress(data, BytePreprocessor())
        # 1000 one-bit codes
        self.assertEqual(len(model.data), 8 + 125)
        self.assertEqual(codec.decompress(model), data)

    def test_all_bytes(self):
        codec = HuffmanCodec()
        data = bytes(range(256)) * 3
        self.assertEqual(codec.decompress(codec.compress(data, BytePreprocessor())), data)

    def test_empty_input(self):
        with self.assertRaises(EmptyAlphabetError):
            HuffmanCodec().compress(b'', BytePreprocessor())

    def test_truncated_data(self):
        codec = HuffmanCodec()
        model = codec.compress(b'This is a test' * 20, BytePreprocessor())
        model.data = model.data[:-3]
        with self.assertRaises(TruncatedStreamError):
            codec.decompress(model)

    def test_rejects_bad_arguments(self):
        with self.assertRaises(ValueError):
            HuffmanCodec().compress("text", BytePreprocessor())
        with self.assertRaises(ValueError):
            HuffmanCodec().compress(b"data", object())
        with self.assertRaises(ValueError):
            HuffmanCodec().decompress(b"data")

class TestHuffmanCodecFile(unittest.TestCase):
    def test_compress_decompress_file(self):
        with tempfile.TemporaryDirectory() as folder:
            input_path = os.path.join(folder, "input.txt")
            compressed_path = os.path.join(folder, "input.txt.huff")
            output_path = os.path.join(folder, "output.txt")
            data = b"file based round trip " * 40
            with open(input_path, "wb") as file:
                file.write(data)
            codec = HuffmanCodecFile()
            codec.compress(input_path, compressed_path, BytePreprocessor())
            codec.decompress(compressed_path, output_path)
            with open(output_path, "rb") as file:
                self.assertEqual(file.read(), data)
            self.assertLess(os.path.getsize(compressed_path), len(data))

    def test_missing_input(self):
        with self.assertRaises(ValueError):
            HuffmanCodecFile().compress("/nonexistent/input", "/tmp/out.huff", BytePreprocessor())

if __name__ == '__main__':
    unittest.main()
