from heapq import heapify, heappush, heappop
from itertools import count
from typing import Mapping, Optional

from .errors import EmptyInputError


class HuffmanNode:
    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol: Optional[str] = None, weight: int = 0,
                 left: "HuffmanNode" = None, right: "HuffmanNode" = None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.weight})"
        return f"HuffmanNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


def build_tree(frequencies: Mapping[str, int]) -> HuffmanNode:
    """
    Builds a Huffman tree by repeatedly merging the two lightest nodes.

    Ties on weight are broken by insertion order: leaves in the order of the
    frequency map, then merged nodes in the order they were created.

    Parameters:
    frequencies (Mapping[str, int]): Symbol to occurrence count.

    Returns:
    HuffmanNode: The root. A single distinct symbol yields a lone leaf.
    """
    if not frequencies:
        raise EmptyInputError()

    order = count()
    heap = [[weight, next(order), HuffmanNode(symbol, weight)] for symbol, weight in frequencies.items()]
    heapify(heap)
    while len(heap) > 1:
        a = heappop(heap)[2]
        b = heappop(heap)[2]
        merged = HuffmanNode(weight=a.weight + b.weight, left=a, right=b)
        heappush(heap, [merged.weight, next(order), merged])
    return heap[0][2]
