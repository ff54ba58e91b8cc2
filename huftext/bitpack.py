from typing import Iterable, Tuple

from bitarray import bitarray
from bitarray.util import zeros


def pack(bits: Iterable[bool]) -> Tuple[bytes, int]:
    """
    Packs bits into bytes, least significant bit first within each byte.

    Parameters:
    bits (Iterable[bool]): The bits to pack, usually a bitarray.

    Returns:
    Tuple[bytes, int]: ceil(bit_count / 8) bytes with the unused tail of the
    last byte zeroed, and the logical bit count.
    """
    if isinstance(bits, bitarray):
        packed = bitarray(bits.to01(), endian="little")
    else:
        packed = bitarray([bool(b) for b in bits], endian="little")
    return packed.tobytes(), len(packed)


def unpack(data: bytes, bit_count: int) -> bitarray:
    """
    Unpacks exactly bit_count bits from data.

    Bits beyond bit_count are ignored. If data holds fewer bits than
    bit_count, the missing tail is read as zeros.

    Parameters:
    data (bytes): The packed bytes.
    bit_count (int): The logical number of bits.

    Returns:
    bitarray: A little-endian bitarray of length bit_count.
    """
    if bit_count < 0:
        raise ValueError(f"bit_count must be non-negative, got {bit_count}")
    bits = bitarray(endian="little")
    bits.frombytes(bytes(data[:(bit_count + 7) // 8]))
    if len(bits) < bit_count:
        bits.extend(zeros(bit_count - len(bits), endian="little"))
    del bits[bit_count:]
    return bits
