import logging
from typing import Iterable, List

from bitarray import bitarray
from bitarray.util import zeros

from .bitpack import pack, unpack
from .codes import generate_codes, is_prefix_free
from .container import Container
from .frequency import count_frequencies
from .tree import HuffmanNode, build_tree
from .tree_codec import deserialize_tree, serialize_tree

logger = logging.getLogger(__name__)

SINGLE_SYMBOL_POLICIES = {"bit", "legacy"}


class HuffmanCompressor:
    def __init__(self, single_symbol: str = "bit"):
        """
        Initializes the compressor.

        Parameters:
        single_symbol (str): How input with one distinct symbol is encoded.
            'bit' writes one 0 bit per occurrence so the text survives the
            round trip. 'legacy' writes no content bits, and such a container
            decodes to an empty string.
        """
        if single_symbol not in SINGLE_SYMBOL_POLICIES:
            raise ValueError(f"Unsupported single symbol policy: {single_symbol}")
        self.single_symbol = single_symbol

    def build_tree(self, symbols: Iterable[str]) -> HuffmanNode:
        freq = count_frequencies(symbols)
        logger.debug("Counted %d distinct symbols", len(freq))
        return build_tree(freq)

    def compress(self, symbols: Iterable[str]) -> Container:
        """
        Compresses a sequence of symbols.

        Parameters:
        symbols (Iterable[str]): The source, read once into memory and then
            scanned to count, to measure and to emit.

        Returns:
        Container: The serialized tree and the packed content.
        """
        symbols = list(symbols)
        tree = self.build_tree(symbols)
        codes = generate_codes(tree)

        if logger.isEnabledFor(logging.DEBUG):
            total_bits = sum(len(codes[s]) for s in symbols if s in codes)
            logger.debug("Code table has %d entries, prefix-free: %s, measured %d bits",
                         len(codes), is_prefix_free(codes), total_bits)

        if tree.is_leaf:
            # bitarray.encode rejects empty codes, so the lone symbol is
            # written as one 0 bit per occurrence, or not at all.
            count = len(symbols) if self.single_symbol == "bit" else 0
            compressed = zeros(count, endian="little")
        else:
            compressed = bitarray(endian="little")
            compressed.encode(codes, (s for s in symbols if s in codes))

        content, bit_length = pack(compressed)
        tree_bytes = serialize_tree(tree)
        logger.debug("Encoded %d symbols into %d bits, tree takes %d bytes",
                     len(symbols), bit_length, len(tree_bytes))
        return Container(tree_bytes, content, bit_length)

    def decompress(self, container: Container) -> List[str]:
        """
        Decodes a container back into its symbols.

        Parameters:
        container (Container): A container produced by compress.

        Returns:
        List[str]: The decoded symbols in stream order.
        """
        root = deserialize_tree(container.tree_bytes)
        bits = unpack(container.content_bytes, container.bit_length)

        if root.is_leaf:
            # A lone leaf has no path to walk: every content bit stands for
            # one occurrence, and a legacy container carries no bits at all.
            return [root.symbol] * len(bits)

        decoded = []
        walker = root
        for bit in bits:
            walker = walker.right if bit else walker.left
            if walker.is_leaf:
                decoded.append(walker.symbol)
                walker = root
        if walker is not root:
            logger.debug("Dropped trailing bits that do not complete a code")
        return decoded
