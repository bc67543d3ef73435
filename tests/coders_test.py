import random
import struct
import unittest
from io import BytesIO

from huffcodec.coders import (
    BitOutputStream,
    BitInputStream,
    HuffmanEncoder,
    HuffmanDecoder,
    HuffmanCoder,
)
from huffcodec.codebook import generate_codebook
from huffcodec.tree import build_tree, HuffmanTree, InternalNode, LeafNode
from huffcodec.models import FrequencyTable, EncodedStream
from huffcodec.errors import MalformedTreeError, UnknownSymbolError, TruncatedStreamError
from huffcodec.logger import Logger, CodingLog

def pipeline(symbols):
    tree = build_tree(FrequencyTable.count(symbols))
    book = generate_codebook(tree)
    return tree, book

class TestBitStreamHelpers(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1, 0, 1, 0, 1, 0]:
            bos.write(bit)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_code("101")
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0b10100000]))

    def test_bit_input_stream(self):
        bis = BitInputStream(BytesIO(bytes([0b11001010])))
        bits = [bis.read() for _ in range(9)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0, -1])

    def test_invalid_bit_write(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write(2)
        with self.assertRaises(ValueError):
            bos.write_code("102")

class TestHuffmanEncoder(unittest.TestCase):
    def test_scenario(self):
        symbols = list("aaabbc")
        _, book = pipeline(symbols)
        stream = HuffmanEncoder().encode(symbols, book)
        self.assertEqual(stream.codes, ('0', '0', '0', '11', '11', '10'))
        self.assertEqual(stream.compressed_bits, 9)
        self.assertEqual(stream.uncompressed_bits, 48)

    def test_unknown_symbol(self):
        _, book = pipeline(list("abc"))
        with self.assertRaises(UnknownSymbolError) as context:
            HuffmanEncoder().encode(list("abz"), book)
        self.assertEqual(context.exception.symbol, 'z')
        self.assertEqual(context.exception.position, 2)

    def test_single_symbol(self):
        symbols = ['s'] * 5
        _, book = pipeline(symbols)
        stream = HuffmanEncoder().encode(symbols, book)
        self.assertEqual(stream.codes, ('0',) * 5)

    def test_empty_input(self):
        _, book = pipeline(list("ab"))
        stream = HuffmanEncoder().encode([], book)
        self.assertEqual(stream.symbol_count, 0)
        self.assertEqual(stream.compressed_bits, 0)

    def test_invalid_symbol_width(self):
        with self.assertRaises(ValueError):
            HuffmanEncoder(symbol_width=0)

    def test_logging(self):
        logger = Logger()
        symbols = list("aab")
        _, book = pipeline(symbols)
        HuffmanEncoder(logger=logger).encode(symbols, book)
        sizes = [log.encoded_size for log in logger.logs if isinstance(log, CodingLog)]
        self.assertEqual(sizes, [1, 1, 1])

class TestHuffmanDecoder(unittest.TestCase):
    def test_scenario(self):
        tree, _ = pipeline(list("aaabbc"))
        self.assertEqual(HuffmanDecoder().decode("000111110", tree), list("aaabbc"))

    def test_bit_forms(self):
        tree, _ = pipeline(list("aaabbc"))
        expected = ['a', 'b', 'c']
        self.assertEqual(HuffmanDecoder().decode([0, 1, 1, 1, 0], tree), expected)
        self.assertEqual(HuffmanDecoder().decode([False, True, True, True, False], tree), expected)
        self.assertEqual(HuffmanDecoder().decode(EncodedStream(['0', '11', '10']), tree), expected)

    def test_accepts_root_node(self):
        tree, _ = pipeline(list("aaabbc"))
        self.assertEqual(HuffmanDecoder().decode("0", tree.root), ['a'])

    def test_truncated_stream(self):
        tree, _ = pipeline(list("aaabbc"))
        with self.assertRaises(TruncatedStreamError) as context:
            HuffmanDecoder().decode("0001", tree)
        self.assertEqual(context.exception.consumed_bits, 4)

    def test_invalid_bit(self):
        tree, _ = pipeline(list("aaabbc"))
        with self.assertRaises(ValueError):
            HuffmanDecoder().decode("0201", tree)

    def test_single_leaf_tree(self):
        tree = build_tree({'s': 3})
        self.assertIsInstance(tree.root, LeafNode)
        self.assertEqual(HuffmanDecoder().decode("000", tree), ['s', 's', 's'])

    def test_empty_stream(self):
        tree, _ = pipeline(list("ab"))
        self.assertEqual(HuffmanDecoder().decode("", tree), [])

    def test_missing_child(self):
        root = InternalNode(LeafNode('a', 1), LeafNode('b', 1))
        tree = HuffmanTree(root)
        root.right = None
        self.assertEqual(HuffmanDecoder().decode("0", tree), ['a'])
        with self.assertRaises(MalformedTreeError):
            HuffmanDecoder().decode("1", tree)

class TestProperties(unittest.TestCase):
    def setUp(self):
        self.rng = random.Random(2024)

    def random_sequence(self):
        alphabet = [chr(c) for c in range(ord('a'), ord('a') + self.rng.randint(1, 26))]
        weights = [self.rng.random() ** 3 + 0.01 for _ in alphabet]
        return self.rng.choices(alphabet, weights=weights, k=self.rng.randint(1, 400))

    def test_round_trip(self):
        for _ in range(30):
            symbols = self.random_sequence()
            tree, book = pipeline(symbols)
            stream = HuffmanEncoder().encode(symbols, book)
            self.assertEqual(HuffmanDecoder().decode(stream.bits, tree), symbols)

    def test_length_frequency_monotonicity(self):
        for _ in range(30):
            symbols = self.random_sequence()
            table = FrequencyTable.count(symbols)
            book = generate_codebook(build_tree(table))
            for a in table:
                for b in table:
                    if table[a] > table[b]:
                        self.assertLessEqual(book.code_length(a), book.code_length(b))

    def test_compressed_size_matches_frequencies(self):
        symbols = self.random_sequence()
        table = FrequencyTable.count(symbols)
        tree, book = pipeline(symbols)
        stream = HuffmanEncoder().encode(symbols, book)
        self.assertEqual(stream.compressed_bits, sum(table[s] * book.code_length(s) for s in table))

class TestHuffmanCoder(unittest.TestCase):
    def setUp(self):
        self.coder = HuffmanCoder()

    def test_encode_decode(self):
        symbols = list("abracadabra alakazam")
        tree = build_tree(FrequencyTable.count(symbols))
        data = self.coder.encode(symbols, tree)
        self.assertEqual(self.coder.decode(data, tree), symbols)

    def test_scenario_layout(self):
        symbols = list("aaabbc")
        tree = build_tree(FrequencyTable.count(symbols))
        data = self.coder.encode(symbols, tree)
        # 000111110 padded to two bytes
        self.assertEqual(data, bytes([0, 0, 0, 6, 0, 0, 0, 9, 0b00011111, 0b00000000]))

    def test_truncated_payload(self):
        symbols = list("the truncated payload test")
        tree = build_tree(FrequencyTable.count(symbols))
        data = self.coder.encode(symbols, tree)
        with self.assertRaises(TruncatedStreamError):
            self.coder.decode(data[:-2], tree)
        with self.assertRaises(TruncatedStreamError):
            self.coder.decode(data[:5], tree)

    def test_symbol_count_mismatch(self):
        tree = build_tree(FrequencyTable.count(list("ab")))
        # bits "01" decode to two symbols, not five
        data = struct.pack(">II", 5, 2) + bytes([0b01000000])
        with self.assertRaises(TruncatedStreamError) as context:
            self.coder.decode(data, tree)
        self.assertEqual(context.exception.consumed_bits, 2)

    def test_header_overflow(self):
        self.assertEqual(self.coder.pack_header(6, 9), bytes([0, 0, 0, 6, 0, 0, 0, 9]))
        self.assertEqual(self.coder.pack_header(0xFFFFFFFF, 0), b"\xff\xff\xff\xff" + bytes(4))
        with self.assertRaises(ValueError):
            self.coder.pack_header(2 ** 32, 0)
        with self.assertRaises(ValueError):
            self.coder.pack_header(1, 2 ** 32)

    def test_get_coder_code(self):
        self.assertEqual(self.coder.get_coder_code(), 1)

if __name__ == '__main__':
    unittest.main()
