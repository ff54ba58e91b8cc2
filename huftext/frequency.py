from collections import Counter
from typing import Iterable, List


def text_to_symbols(text: str) -> List[str]:
    """
    Splits text into 16-bit code units, one symbol per unit.

    Characters outside the Basic Multilingual Plane become two surrogate
    symbols that are compressed independently.

    Parameters:
    text (str): The text to split.

    Returns:
    List[str]: One single-character string per code unit.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return [chr(raw[i] | (raw[i + 1] << 8)) for i in range(0, len(raw), 2)]


def symbols_to_text(symbols: Iterable[str]) -> str:
    """Joins code units back into text, recombining surrogate pairs."""
    return "".join(symbols).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def count_frequencies(symbols: Iterable[str]) -> Counter:
    # Counter keeps first-occurrence order, which the tree builder relies on
    # for a stable tie-break.
    return Counter(symbols)
