"""Search for the element of a that is cheapest to push into place in b.

Stacks are sequences with the top at index 0; a node is named by its
index. Rotation counts come in pairs: index 0 counts forward rotations
(ra, rb) and index 1 counts reverse rotations (rra, rrb). A count of -1
marks a direction that has been ruled out.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

# For each choice of combined rotation, the directions (a, b) dropped.
_RULED_OUT = {0: (1, 1), 1: (1, 0), 2: (0, 1), 3: (0, 0)}


@dataclass
class SearchResult:
    """A candidate move: which a node to push and the rotations it needs."""

    target_a_node: int
    min_count: int = 0
    a_head_count: List[int] = field(default_factory=lambda: [0, 0])
    b_head_count: List[int] = field(default_factory=lambda: [0, 0])
    inserted_b_node: Optional[int] = None


def search_on_inserted_b_node(value: int, b: Sequence[int]) -> int:
    """Return the index of the b node above which value belongs.

    b is kept in descending order around its cycle.
    """
    b = list(b)
    if not b:
        raise ValueError("stack b is empty")
    previous_values = b[-1:] + b[:-1]
    for index, (previous, current) in enumerate(zip(previous_values, b)):
        if ((current < value or previous > value) and previous < current) or (
            current < value and previous > value
        ):
            return index
    return 0


def search_insert_position_count(
    stack: Sequence[int], target: int, count: Sequence[int], min_count: int
) -> List[int]:
    """Return the forward and reverse rotations that bring target to the top.

    count holds the starting values. When min_count is not -1, a direction
    whose count reaches min_count is abandoned and marked -1.
    """
    size = len(stack)
    forward, backward = count
    reversing = False
    position = target
    while forward != -1 or backward != -1:
        if position == 0:
            break
        if min_count != -1 and min_count <= forward and not reversing:
            forward = -1
            position = target
            reversing = True
        elif not reversing:
            moving = forward != -1
            forward += 1
            if moving:
                position = (position - 1) % size
        if min_count != -1 and min_count <= backward and reversing:
            backward = -1
        elif reversing:
            moving = backward != -1
            backward += 1
            if moving:
                position = (position + 1) % size
    if forward != -1:
        backward = size - forward
    return [forward, backward]


def check_rest_count(result: SearchResult, min_result: Optional[SearchResult]) -> int:
    """Return the budget left for b once a's cheapest rotation is paid, or -1."""
    if min_result is None:
        return -1
    usable = [steps for steps in result.a_head_count if steps != -1]
    count = min_result.min_count
    if usable:
        count -= min(usable)
    return count


def com_count(count_array: Sequence[int]) -> int:
    """Return the index of the smallest non-zero cost among the four."""
    value = 0
    index = 0
    for position, candidate in enumerate(count_array[:4]):
        if value == 0 or (candidate != 0 and value > candidate):
            value = candidate
            index = position
    return index


def fill_minus(result: SearchResult, index: int) -> None:
    """Rule out the rotation directions not used by combination index."""
    if index not in _RULED_OUT:
        return
    a_direction, b_direction = _RULED_OUT[index]
    result.a_head_count[a_direction] = -1
    result.b_head_count[b_direction] = -1


def _within(min_result: Optional[SearchResult], steps: int) -> bool:
    return min_result is None or min_result.min_count > steps


def search_min_count(
    count_array: Sequence[int],
    result: SearchResult,
    min_result: Optional[SearchResult],
) -> SearchResult:
    """Cost the four rotation combinations and keep the better result.

    The combinations are: both forward, a forward with b reverse, a
    reverse with b forward, both reverse. A cost of 0 means unavailable.
    """
    counts = list(count_array)
    a0, a1 = result.a_head_count
    b0, b1 = result.b_head_count
    if a0 != -1 and b0 != -1:
        if a0 >= b0 and _within(min_result, a0):
            counts[0] = a0 + 1
        elif a0 < b0 and _within(min_result, b0):
            counts[0] = b0 + 1
    if a0 != -1 and b1 != -1 and _within(min_result, a0 + b1):
        counts[1] = a0 + b1 + 1
    if a1 != -1 and b0 != -1 and _within(min_result, a1 + b0):
        counts[2] = a1 + b0 + 1
    if a1 != -1 and b1 != -1:
        if a1 >= b1 and _within(min_result, a1):
            counts[3] = a1 + 1
        elif a1 < b1 and _within(min_result, b1):
            counts[3] = b1 + 1
    return eval_min_count(counts, result, min_result)


def eval_min_count(
    count_array: Sequence[int],
    result: SearchResult,
    min_result: Optional[SearchResult],
) -> SearchResult:
    """Settle result on its cheapest combination and return the better of the two."""
    index = com_count(count_array)
    fill_minus(result, index)
    result.min_count = count_array[index]
    if min_result is None or (
        min_result.min_count > result.min_count and result.min_count != 0
    ):
        return result
    return min_result


def _evaluate(
    a: List[int], b: List[int], target: int, best: Optional[SearchResult]
) -> SearchResult:
    result = SearchResult(target)
    result.a_head_count = search_insert_position_count(
        a, target, result.a_head_count, best.min_count if best else -1
    )
    result.inserted_b_node = search_on_inserted_b_node(a[target], b)
    rest = check_rest_count(result, best)
    if rest:
        result.b_head_count = search_insert_position_count(
            b, result.inserted_b_node, result.b_head_count, rest
        )
    return search_min_count([0, 0, 0, 0], result, best)


def search_insert_min_node(a: Sequence[int], b: Sequence[int]) -> SearchResult:
    """Return the cheapest move of an a node into its place in b.

    Candidates are taken from the top of a downward and the search stops
    once the number examined reaches the best cost found.
    """
    a = list(a)
    b = list(b)
    if not a or not b:
        raise ValueError("both stacks must be non-empty")
    best: Optional[SearchResult] = None
    for target in range(len(a)):
        best = _evaluate(a, b, target, best)
        if target + 1 >= best.min_count:
            break
    return best