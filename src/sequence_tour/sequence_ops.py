"""Iteration, search and mutation primitives over a list of integers."""

from typing import Callable, Iterator, Optional

import click

from sequence_tour.commons import debug

Predicate = Callable[[int], bool]

AGES = (18, 17, 21, 18, 21)


class SequenceIndexError(IndexError):
    """Raised when a position falls outside the sequence."""

    def __init__(self, position: int, length: int):
        super().__init__(f"position {position} out of range for sequence of length {length}")
        self.position = position
        self.length = length


def _check_position(sequence: list[int], position: int) -> None:
    if position < 0 or position >= len(sequence):
        raise SequenceIndexError(position, len(sequence))


def is_even(value: int) -> bool:
    return value % 2 == 0


def less_than(limit: int) -> Predicate:
    return lambda value: value < limit


def greater_than(limit: int) -> Predicate:
    return lambda value: value > limit


def populate(sequence: list[int]) -> None:
    """Replace the contents of sequence with the sample ages."""
    sequence.clear()
    for age in AGES:
        sequence.append(age)
    debug(f"populated sequence with {len(sequence)} values")


def render(sequence: list[int]) -> str:
    return ",".join(str(value) for value in sequence)


def display(sequence: list[int]) -> None:
    """Echo the sequence as comma separated values on one line.

    An empty sequence produces just the line break.
    """
    click.echo(render(sequence))


def element_at(sequence: list[int], position: int) -> int:
    """Return the element at a zero-based position.

    Arguments:
        sequence: the sequence to read
        position: zero-based index, negative positions are not accepted

    Raises:
        SequenceIndexError: if position is outside the sequence
    """
    _check_position(sequence, position)
    return sequence[position]


def traverse(sequence: list[int]) -> Iterator[int]:
    for value in sequence:
        yield value


def count_equal(sequence: list[int], value: int) -> int:
    return sum(1 for element in sequence if element == value)


def count_if(sequence: list[int], predicate: Predicate) -> int:
    return sum(1 for element in sequence if predicate(element))


def pop_last(sequence: list[int]) -> Optional[int]:
    """Remove and return the last element, or None if the sequence is empty."""
    if not sequence:
        return None
    return sequence.pop()


def erase_at(sequence: list[int], position: int) -> int:
    """Remove and return the element at a zero-based position.

    Raises:
        SequenceIndexError: if position is outside the sequence
    """
    _check_position(sequence, position)
    return sequence.pop(position)


def erase_if(sequence: list[int], predicate: Predicate) -> int:
    """Remove every element satisfying predicate, keeping the order of the rest.

    Survivors are compacted towards the front in a single pass and the tail is
    cut off afterwards, so the sequence is never resized while it is scanned.

    Returns:
        the number of elements removed
    """
    kept = 0
    for value in sequence:
        if not predicate(value):
            sequence[kept] = value
            kept += 1
    removed = len(sequence) - kept
    del sequence[kept:]
    debug(f"erase_if removed {removed} values")
    return removed


def all_of(sequence: list[int], predicate: Predicate) -> bool:
    return all(predicate(value) for value in sequence)


def none_of(sequence: list[int], predicate: Predicate) -> bool:
    return not any(predicate(value) for value in sequence)


def find(sequence: list[int], value: int) -> Optional[int]:
    """Position of the first element equal to value, None if there is none."""
    return find_if(sequence, lambda element: element == value)


def find_if(sequence: list[int], predicate: Predicate) -> Optional[int]:
    for position, value in enumerate(sequence):
        if predicate(value):
            return position
    return None


def sequences_equal(left: list[int], right: list[int]) -> bool:
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def compare(left: list[int], right: list[int]) -> int:
    """Lexicographic comparison of two sequences.

    Returns:
        -1 if left orders before right, 1 if after, 0 if they are equal
    """
    for a, b in zip(left, right):
        if a != b:
            return -1 if a < b else 1
    if len(left) == len(right):
        return 0
    return -1 if len(left) < len(right) else 1
