"""
Breadth-first binary encoding of a Huffman tree.

Every node is one flag byte, 0x01 for a leaf and 0x00 for an internal node.
A leaf flag is followed by its symbol as an unsigned 16-bit little-endian
code unit. Internal nodes queue their right child before their left child;
changing that order breaks every container written before the change.
"""
import logging
import struct
from collections import deque

from .errors import MalformedContainerError
from .tree import HuffmanNode

logger = logging.getLogger(__name__)

RIGHT_FIRST = True

LEAF = 1
INTERNAL = 0
SYMBOL_FMT = "<H"
SYMBOL_SIZE = struct.calcsize(SYMBOL_FMT)


def _children(node):
    return node.right, node.left


def _write_leaf(out: bytearray, node: HuffmanNode):
    out.append(LEAF)
    out += struct.pack(SYMBOL_FMT, ord(node.symbol))


def serialize_tree(root: HuffmanNode) -> bytes:
    """
    Encodes a tree into bytes.

    Parameters:
    root (HuffmanNode): The tree to encode.

    Returns:
    bytes: The flag/symbol stream, root first.
    """
    out = bytearray()
    if root.is_leaf:
        _write_leaf(out, root)
        return bytes(out)

    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.is_leaf:
            _write_leaf(out, node)
            continue
        out.append(INTERNAL)
        queue.extend(_children(node))
    return bytes(out)


class _TreeReader:
    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0

    def read_node(self) -> HuffmanNode:
        if self.pos >= len(self.data):
            raise MalformedContainerError(f"Tree data truncated: missing flag byte at offset {self.pos}")
        flag = self.data[self.pos]
        self.pos += 1
        if flag == INTERNAL:
            return HuffmanNode()
        if flag != LEAF:
            raise MalformedContainerError(f"Invalid tree flag byte {flag:#04x} at offset {self.pos - 1}")
        end = self.pos + SYMBOL_SIZE
        if end > len(self.data):
            raise MalformedContainerError(f"Tree data truncated: incomplete symbol at offset {self.pos}")
        (unit,) = struct.unpack_from(SYMBOL_FMT, self.data, self.pos)
        self.pos = end
        return HuffmanNode(chr(unit))


def deserialize_tree(data: bytes) -> HuffmanNode:
    """
    Rebuilds a tree written by serialize_tree.

    Parameters:
    data (bytes): The serialized tree.

    Returns:
    HuffmanNode: The root of the rebuilt tree.
    """
    reader = _TreeReader(data)
    root = reader.read_node()
    if not root.is_leaf:
        queue = deque([root])
        while queue:
            current = queue.popleft()
            first = reader.read_node()
            second = reader.read_node()
            current.right, current.left = first, second
            queue.extend(child for child in (first, second) if not child.is_leaf)

    if reader.pos < len(data):
        logger.debug("Ignoring %d trailing bytes after the tree", len(data) - reader.pos)
    return root
