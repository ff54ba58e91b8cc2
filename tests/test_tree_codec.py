import pytest

from huftext import tree_codec
from huftext.errors import MalformedContainerError
from huftext.frequency import count_frequencies, text_to_symbols
from huftext.tree import HuffmanNode, build_tree
from huftext.tree_codec import deserialize_tree, serialize_tree

ABRACADABRA_TREE = bytes([
    0x00,              # root
    0x00,              # right: internal (c d)(b r)
    0x01, 0x61, 0x00,  # left: 'a'
    0x00,              # right of right: (b r)
    0x00,              # left of right: (c d)
    0x01, 0x72, 0x00,  # 'r'
    0x01, 0x62, 0x00,  # 'b'
    0x01, 0x64, 0x00,  # 'd'
    0x01, 0x63, 0x00,  # 'c'
])


def _shape(node):
    if node.is_leaf:
        return node.symbol
    return (_shape(node.left), _shape(node.right))


def test_right_child_is_written_first():
    assert tree_codec.RIGHT_FIRST is True
    tree = HuffmanNode(left=HuffmanNode("L"), right=HuffmanNode("R"))
    assert serialize_tree(tree) == b"\x00\x01R\x00\x01L\x00"


def test_serialize_abracadabra():
    tree = build_tree(count_frequencies("abracadabra"))
    assert serialize_tree(tree) == ABRACADABRA_TREE


def test_deserialize_abracadabra():
    tree = deserialize_tree(ABRACADABRA_TREE)
    assert _shape(tree) == ("a", (("c", "d"), ("b", "r")))


def test_single_leaf_tree():
    data = serialize_tree(HuffmanNode("z", 9))
    assert data == b"\x01z\x00"
    tree = deserialize_tree(data)
    assert tree.is_leaf and tree.symbol == "z"


@pytest.mark.parametrize("text", [
    "ab",
    "hello world",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "\u00e9\u4e2d\uffff\x00\U0001F600",
])
def test_tree_round_trip(text):
    tree = build_tree(count_frequencies(text_to_symbols(text)))
    assert _shape(deserialize_tree(serialize_tree(tree))) == _shape(tree)


def test_wide_symbol_is_little_endian():
    tree = HuffmanNode(left=HuffmanNode("\u4e2d"), right=HuffmanNode("\uffff"))
    assert serialize_tree(tree) == b"\x00\x01\xff\xff\x01\x2d\x4e"


def test_empty_data_raises():
    with pytest.raises(MalformedContainerError):
        deserialize_tree(b"")


def test_missing_child_raises():
    with pytest.raises(MalformedContainerError):
        deserialize_tree(b"\x00\x01a\x00")


def test_invalid_flag_raises():
    with pytest.raises(MalformedContainerError, match="flag"):
        deserialize_tree(b"\x00\x02a\x00\x01b\x00")


def test_truncated_symbol_raises():
    with pytest.raises(MalformedContainerError, match="symbol"):
        deserialize_tree(b"\x00\x01a\x00\x01b")


def test_trailing_bytes_are_ignored():
    tree = deserialize_tree(ABRACADABRA_TREE + b"\xff\xff")
    assert _shape(tree) == ("a", (("c", "d"), ("b", "r")))
