"""Sort stack a with the fewest operations the search strategy can find.

Small stacks of two or three elements are handled directly. Larger
stacks push two elements to b, then repeatedly push the element of a
that is cheapest to place in descending order in b, until three
elements remain. Those are sorted, everything returns to a in place,
and a is finally rotated so that its smallest element is on top.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, TextIO

from pushswap.search import SearchResult, search_insert_min_node
from pushswap.stacks import Stacks


def _rotate_a_to_top(stacks: Stacks, count: int) -> None:
    """Bring the element at index count of a to the top by the shorter way."""
    size = len(stacks.a)
    if count <= size // 2:
        for _ in range(count):
            stacks.ra()
    else:
        for _ in range(size - count):
            stacks.rra()


def sort_two_element(stacks: Stacks) -> bool:
    """Sort a when it holds exactly two elements; return whether it did."""
    if len(stacks.a) != 2:
        return False
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()
    return True


def sort_three_element(stacks: Stacks) -> bool:
    """Sort a when it holds exactly three elements; return whether it did."""
    a = stacks.a
    if len(a) != 3:
        return False
    top, mid, bot = a[0], a[1], a[-1]
    if top < mid < bot:
        return True
    if mid < top < bot:
        stacks.sa()
    elif bot < top < mid:
        stacks.rra()
    elif top > mid > bot:
        stacks.sa()
        stacks.rra()
    elif top > mid and mid < bot:
        stacks.ra()
    elif top < mid and mid > bot:
        stacks.sa()
        stacks.ra()
    return True


def search_on_inserted_a_count(value: int, a: Sequence[int]) -> int:
    """Return how many forward rotations of a put value's place on top.

    a is kept in ascending order around its cycle; the place is the node
    above which value belongs.
    """
    values = list(a)
    if not values:
        raise ValueError("stack a is empty")
    previous_values = values[-1:] + values[:-1]
    for index, (previous, current) in enumerate(zip(previous_values, values)):
        if ((current > value or previous < value) and previous > current) or (
            current > value and previous < value
        ):
            return index
    return len(values) - 1


def rotate_sort_a(stacks: Stacks) -> None:
    """Rotate a so that the element 0 is on top, by the shorter way."""
    if 0 not in stacks.a:
        return
    _rotate_a_to_top(stacks, stacks.a.index(0))


def _bring_insertion_point_up(stacks: Stacks) -> None:
    count = search_on_inserted_a_count(stacks.b[0], stacks.a)
    _rotate_a_to_top(stacks, count)


def return_stack_to_a_from_b(stacks: Stacks) -> None:
    """Push every element of b back into its place in a."""
    while stacks.b:
        top, bottom, value = stacks.a[0], stacks.a[-1], stacks.b[0]
        if (top > value and bottom < value) or (
            (bottom < value or top > value) and top < bottom
        ):
            stacks.pa()
        else:
            _bring_insertion_point_up(stacks)


def move_two_node_to_b(stacks: Stacks) -> None:
    """Push the top two elements of a onto b."""
    stacks.pb()
    stacks.pb()


def move_stack(stacks: Stacks, result: SearchResult) -> None:
    """Perform the rotations a search result calls for, then push to b.

    Rotations in the same direction on both stacks are combined.
    """
    a_forward, a_reverse = result.a_head_count
    b_forward, b_reverse = result.b_head_count
    while a_forward > 0 and b_forward > 0:
        a_forward -= 1
        b_forward -= 1
        stacks.rr()
    while a_reverse > 0 and b_reverse > 0:
        a_reverse -= 1
        b_reverse -= 1
        stacks.rrr()
    for _ in range(max(a_forward, 0)):
        stacks.ra()
    for _ in range(max(a_reverse, 0)):
        stacks.rra()
    for _ in range(max(b_forward, 0)):
        stacks.rb()
    for _ in range(max(b_reverse, 0)):
        stacks.rrb()
    stacks.pb()


def is_sorted(stacks: Stacks) -> bool:
    """Return True when b is empty and a is in ascending order from the top."""
    if stacks.b:
        return False
    a = list(stacks.a)
    return all(lower <= upper for lower, upper in zip(a, a[1:]))


def push_swap(values: Iterable[int], out: Optional[TextIO] = None) -> Stacks:
    """Sort values on stack a, writing each operation to out.

    Returns the stacks, whose ``operations`` list the moves made.
    """
    stacks = Stacks(values, out)
    if sort_two_element(stacks) or sort_three_element(stacks) or is_sorted(stacks):
        return stacks
    move_two_node_to_b(stacks)
    while len(stacks.a) > 3:
        move_stack(stacks, search_insert_min_node(stacks.a, stacks.b))
    sort_three_element(stacks)
    return_stack_to_a_from_b(stacks)
    rotate_sort_a(stacks)
    return stacks