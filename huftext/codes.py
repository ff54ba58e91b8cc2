from collections import deque
from typing import Dict

from bitarray import bitarray

from .tree import HuffmanNode


def generate_codes(root: HuffmanNode) -> Dict[str, bitarray]:
    """
    Walks the tree breadth-first and records the path to every leaf.

    Parameters:
    root (HuffmanNode): The Huffman tree.

    Returns:
    Dict[str, bitarray]: Symbol to code, 0 for a left step and 1 for a right
    step. A tree that is a single leaf gives that symbol an empty code.
    """
    codes = {}
    queue = deque([(root, bitarray(endian="little"))])
    while queue:
        node, path = queue.popleft()
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        if node.left is not None:
            queue.append((node.left, path + bitarray("0", endian="little")))
        if node.right is not None:
            queue.append((node.right, path + bitarray("1", endian="little")))
    return codes


def is_prefix_free(codes: Dict[str, bitarray]) -> bool:
    ordered = sorted(code.to01() for code in codes.values())
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))
