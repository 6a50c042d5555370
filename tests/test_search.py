from collections import deque

import pytest

from pushswap.search import (
    SearchResult,
    check_rest_count,
    com_count,
    eval_min_count,
    fill_minus,
    search_insert_min_node,
    search_insert_position_count,
    search_min_count,
    search_on_inserted_b_node,
)


def _is_circular_descending(values):
    values = list(values)
    rises = sum(
        1 for current, following in zip(values, values[1:] + values[:1])
        if current < following
    )
    return rises <= 1


def _bring_to_top(values, counts):
    rotated = deque(values)
    if counts[0] != -1:
        rotated.rotate(-counts[0])
    else:
        rotated.rotate(counts[1])
    return rotated


@pytest.mark.parametrize(
    "b",
    [[5, 3, 1], [3, 1, 5], [1, 5, 3], [9, 8, 4, 2, 0], [2, 0, 9, 8, 4]],
)
@pytest.mark.parametrize("value", [-1, 1.5, 3.5, 4.5, 6, 10])
def test_inserted_b_node_keeps_b_descending(b, value):
    index = search_on_inserted_b_node(value, b)
    smaller = [v for v in b if v < value]
    expected = max(smaller) if smaller else max(b)
    assert b[index] == expected
    placed = b[:index] + [value] + b[index:]
    assert _is_circular_descending(placed)


def test_inserted_b_node_empty_raises():
    with pytest.raises(ValueError):
        search_on_inserted_b_node(3, [])


@pytest.mark.parametrize("target", range(6))
def test_position_count_without_limit(target):
    stack = [10, 20, 30, 40, 50, 60]
    forward, backward = search_insert_position_count(stack, target, [0, 0], -1)
    assert forward == target
    assert forward + backward == len(stack)


def test_position_count_drops_forward_beyond_limit():
    stack = list(range(8))
    forward, backward = search_insert_position_count(stack, 6, [0, 0], 3)
    assert forward == -1
    assert backward == len(stack) - 6


def test_position_count_drops_both_beyond_limit():
    stack = list(range(10))
    assert search_insert_position_count(stack, 5, [0, 0], 2) == [-1, -1]


def test_check_rest_count_without_best():
    assert check_rest_count(SearchResult(0), None) == -1


def test_check_rest_count_subtracts_cheapest_a_rotation():
    best = SearchResult(0, min_count=10)
    result = SearchResult(1, a_head_count=[3, 5])
    assert check_rest_count(result, best) == 10 - 3
    result = SearchResult(1, a_head_count=[-1, 5])
    assert check_rest_count(result, best) == 10 - 5


@pytest.mark.parametrize("counts", [[4, 7, 2, 9], [5, 5, 8, 6], [0, 4, 0, 2]])
def test_com_count_picks_smallest_nonzero(counts):
    smallest = min(c for c in counts if c != 0)
    assert com_count(counts) == counts.index(smallest)


@pytest.mark.parametrize(
    "index, a_out, b_out", [(0, 1, 1), (1, 1, 0), (2, 0, 1), (3, 0, 0)]
)
def test_fill_minus_rules_out_directions(index, a_out, b_out):
    result = SearchResult(0, a_head_count=[2, 4], b_head_count=[3, 5])
    fill_minus(result, index)
    assert result.a_head_count[a_out] == -1
    assert result.a_head_count[1 - a_out] != -1 and result.a_head_count[1 - a_out] >= 0
    assert result.b_head_count[b_out] == -1
    assert result.b_head_count[1 - b_out] >= 0


def test_search_min_count_first_result_is_kept():
    result = SearchResult(0, a_head_count=[2, 3], b_head_count=[1, 4])
    chosen = search_min_count([0, 0, 0, 0], result, None)
    assert chosen is result
    assert chosen.min_count == 3
    assert chosen.a_head_count[1] == -1
    assert chosen.b_head_count[1] == -1


def test_eval_min_count_replaces_with_cheaper():
    best = SearchResult(0, min_count=9)
    result = SearchResult(1)
    assert eval_min_count([4, 6, 0, 0], result, best) is result
    assert result.min_count == 4


def test_eval_min_count_keeps_best_when_not_cheaper():
    best = SearchResult(0, min_count=3)
    result = SearchResult(1)
    assert eval_min_count([5, 0, 0, 0], result, best) is best


def test_eval_min_count_ignores_zero_cost():
    best = SearchResult(0, min_count=3)
    result = SearchResult(1)
    assert eval_min_count([0, 0, 0, 0], result, best) is best


@pytest.mark.parametrize(
    "a, b",
    [
        ([3, 7, 1, 8, 2, 6], [5, 0]),
        ([0, 9, 4, 11, 6, 2, 10], [8, 5, 3, 1]),
        ([12, 2, 7, 15, 1, 9, 4, 13], [11, 6, 3, 0, 14]),
        ([5, 4, 3, 2, 1, 0], [6, 7]),
    ],
)
def test_search_insert_min_node_gives_valid_move(a, b):
    result = search_insert_min_node(a, b)
    assert 0 <= result.target_a_node < len(a)
    assert result.min_count >= 1
    assert result.a_head_count.count(-1) >= 1
    assert result.b_head_count.count(-1) >= 1
    rotated_a = _bring_to_top(a, result.a_head_count)
    rotated_b = _bring_to_top(b, result.b_head_count)
    assert rotated_a[0] == a[result.target_a_node]
    assert rotated_b[0] == b[result.inserted_b_node]
    rotated_b.appendleft(rotated_a.popleft())
    assert _is_circular_descending(rotated_b)
    assert sorted(rotated_a) + sorted(rotated_b) == sorted(a + b) or sorted(
        list(rotated_a) + list(rotated_b)
    ) == sorted(a + b)


def test_search_insert_min_node_needs_both_stacks():
    with pytest.raises(ValueError):
        search_insert_min_node([1, 2, 3], [])