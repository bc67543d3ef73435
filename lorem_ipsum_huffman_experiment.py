import time

from huffcodec.codecs import HuffmanCodec, CompressedHuffmanModel, encode_symbols
from huffcodec.coders import HuffmanDecoder
from huffcodec.logger import Logger
from huffcodec.performence_display import PerformanceDisplay
from huffcodec.preprocessors import TextCharPreprocessor
from huffcodec.reports import CompressionStatistics

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

def main():
    lorem_ipsum_bytes = str.encode(lorem_ipsum_1par)
    print(f"Size of original data: {len(lorem_ipsum_bytes)}")

    logger = Logger()
    logger.display_info = False

    preprocessor = TextCharPreprocessor(logger)
    symbols = preprocessor.convert_to_symbols(lorem_ipsum_bytes)
    start = time.time()
    table, tree, codebook, stream = encode_symbols(symbols, logger)
    print(f"Encoded {stream.symbol_count} symbols in {time.time() - start:.4f}s")
    print(CompressionStatistics.from_stream(stream, table))

    print("\nSample Dictionary (first 10 entries):")
    print("-" * 40)
    for symbol, code, frequency in codebook.rows(table)[:10]:
        print(f"'{symbol}' -> {code:<12} (freq: {frequency})")

    if HuffmanDecoder().decode(stream.bits, tree) == symbols:
        print("\nCode round trip preserved.")
    else:
        print("\nCode round trip compromised.")

    codec = HuffmanCodec()
    compressed_data = CompressedHuffmanModel.serialize(codec.compress(lorem_ipsum_bytes, preprocessor, logger=logger))
    print(f"Size of compressed data: {len(compressed_data)}")
    decompressed_data = codec.decompress(CompressedHuffmanModel.deserialize(compressed_data), logger=logger)
    print(f"Size of decompressed data: {len(decompressed_data)}")

    if lorem_ipsum_bytes == decompressed_data:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    pm = PerformanceDisplay(logger.logs)
    pm.generate_code_length_plot(show_graphs=True)
    pm.generate_coding_log_plot(show_graphs=True)

if __name__ == "__main__":
    main()
