from .config_loader import DEFAULT_CONFIG
from .container import decode_container, encode_container
from .frequency import symbols_to_text, text_to_symbols
from .huffman import HuffmanCompressor


class Compressor:
        # Compression Block: converts plaintext to a self-contained Huffman
        # container and back. The input to compress is a str and the output
        # is the container bytes; decompress reverses it exactly.
        def __init__(self, config=None):
            """
            Initializes the Compressor from a loaded configuration.

            Parameters:
            config (dict, optional): As returned by load_config. Defaults apply when omitted.
            """
            config = config or DEFAULT_CONFIG
            self.huffman = HuffmanCompressor(single_symbol=config["huffman"]["single_symbol"])

        def compress(self, plaintext: str) -> bytes:
            """
            Compresses the given plaintext.

            Parameters:
            plaintext (str): The text to compress.

            Returns:
            bytes: The container bytes.
            """
            if not isinstance(plaintext, str):
                raise TypeError("Input plaintext must be a string.")
            container = self.huffman.compress(text_to_symbols(plaintext))
            return encode_container(container)

        def decompress(self, compressed: bytes) -> str:
            """
            Decompresses the given container bytes.

            Parameters:
            compressed (bytes): Container bytes produced by compress.

            Returns:
            str: Decompressed text.
            """
            if not isinstance(compressed, (bytes, bytearray, memoryview)):
                raise TypeError("Input compressed data must be bytes.")
            symbols = self.huffman.decompress(decode_container(compressed))
            return symbols_to_text(symbols)


def compress(plaintext: str) -> bytes:
    return Compressor().compress(plaintext)


def decompress(compressed: bytes) -> str:
    return Compressor().decompress(compressed)
