import struct
from typing import NamedTuple

from .errors import MalformedContainerError

# Both length fields are little-endian unsigned 32-bit integers:
# tree_len(u32) tree(tree_len) bit_len(u32) content(ceil(bit_len / 8))
LENGTH_FMT = "<I"
LENGTH_SIZE = struct.calcsize(LENGTH_FMT)


class Container(NamedTuple):
    tree_bytes: bytes
    content_bytes: bytes
    bit_length: int


def encode_container(container: Container) -> bytes:
    expected = (container.bit_length + 7) // 8
    if len(container.content_bytes) != expected:
        raise ValueError(
            f"Content holds {len(container.content_bytes)} bytes, "
            f"{container.bit_length} bits need {expected}")
    return b"".join((
        struct.pack(LENGTH_FMT, len(container.tree_bytes)),
        container.tree_bytes,
        struct.pack(LENGTH_FMT, container.bit_length),
        container.content_bytes,
    ))


def _read_length(data: bytes, offset: int, what: str) -> int:
    if offset + LENGTH_SIZE > len(data):
        raise MalformedContainerError(f"Container truncated: missing {what} at offset {offset}")
    return struct.unpack_from(LENGTH_FMT, data, offset)[0]


def decode_container(data: bytes) -> Container:
    """
    Splits container bytes into the serialized tree and the packed content.

    Parameters:
    data (bytes): The whole container.

    Returns:
    Container: The tree bytes, content bytes and content bit length.
    """
    data = bytes(data)
    tree_len = _read_length(data, 0, "tree length")
    offset = LENGTH_SIZE
    if offset + tree_len > len(data):
        raise MalformedContainerError(
            f"Tree length {tree_len} exceeds the {len(data) - offset} bytes available")
    tree_bytes = data[offset:offset + tree_len]
    offset += tree_len

    bit_length = _read_length(data, offset, "content bit length")
    offset += LENGTH_SIZE
    content_len = (bit_length + 7) // 8
    if offset + content_len > len(data):
        raise MalformedContainerError(
            f"Content bit length {bit_length} needs {content_len} bytes, "
            f"only {len(data) - offset} available")
    return Container(tree_bytes, data[offset:offset + content_len], bit_length)
