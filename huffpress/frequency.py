from typing import List, Tuple

from .errors import EmptyInputError


def count_frequencies(data: bytes) -> List[Tuple[int, int]]:
    """
    Counts how often every distinct symbol occurs in the input.

    The input is copied and sorted, then equal neighbours are run-length
    counted, so the result is always in ascending symbol order.

    Parameters:
    data (bytes): The symbols to analyse.

    Returns:
    List[Tuple[int, int]]: (symbol, frequency) pairs, one per distinct symbol.
    """
    if len(data) == 0:
        raise EmptyInputError("Input cannot be empty")

    symbols = sorted(data)
    frequencies = []
    previous = symbols[0]
    count = 0
    for symbol in symbols:
        if symbol == previous:
            count += 1
        else:
            frequencies.append((previous, count))
            previous = symbol
            count = 1
    frequencies.append((previous, count))
    return frequencies
