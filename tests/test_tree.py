import pytest

from huftext.errors import EmptyInputError
from huftext.frequency import count_frequencies, symbols_to_text, text_to_symbols
from huftext.tree import HuffmanNode, build_tree


def _shape(node):
    if node.is_leaf:
        return node.symbol
    return (_shape(node.left), _shape(node.right))


def _check_weights(node):
    if node.is_leaf:
        assert node.left is None and node.right is None
        return node.weight
    assert node.left is not None and node.right is not None
    assert node.weight == _check_weights(node.left) + _check_weights(node.right)
    return node.weight


def test_count_frequencies_abracadabra():
    freq = count_frequencies("abracadabra")
    assert dict(freq) == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}
    assert list(freq) == ["a", "b", "r", "c", "d"]


def test_count_frequencies_empty():
    assert count_frequencies([]) == {}


def test_text_to_symbols_splits_astral_characters():
    symbols = text_to_symbols("a\U0001F600")
    assert symbols == ["a", "\ud83d", "\ude00"]
    assert symbols_to_text(symbols) == "a\U0001F600"


def test_lone_surrogate_survives():
    assert symbols_to_text(text_to_symbols("x\udc80y")) == "x\udc80y"


def test_build_tree_abracadabra_shape():
    tree = build_tree(count_frequencies("abracadabra"))
    assert _shape(tree) == ("a", (("c", "d"), ("b", "r")))
    assert tree.weight == 11
    _check_weights(tree)


def test_build_tree_single_symbol_is_leaf():
    tree = build_tree({"a": 4})
    assert tree.is_leaf
    assert tree.symbol == "a"
    assert tree.weight == 4


def test_build_tree_empty_raises():
    with pytest.raises(EmptyInputError):
        build_tree({})


def test_build_tree_deterministic():
    freq = count_frequencies("the quick brown fox jumps over the lazy dog")
    assert _shape(build_tree(freq)) == _shape(build_tree(freq))


def test_build_tree_every_internal_node_has_two_children():
    tree = build_tree(count_frequencies("mississippi river banks"))
    assert _check_weights(tree) == len("mississippi river banks")


def test_node_repr():
    assert repr(HuffmanNode("a", 3)) == "HuffmanNode('a', 3)"
