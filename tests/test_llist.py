import pytest

from pushswap.llist import (
    ListNode,
    lstadd_back,
    lstadd_front,
    lstclear,
    lstdelone,
    lstiter,
    lstlast,
    lstmap,
    lstnew,
    lstsize,
)


def build(values):
    head = None
    for value in values:
        head = lstadd_back(head, lstnew(value))
    return head


def contents(head):
    collected = []
    lstiter(head, collected.append)
    return collected


def test_lstnew_holds_content_and_no_next():
    node = lstnew("x")
    assert node.content == "x"
    assert node.next is None


def test_add_back_preserves_order():
    values = [1, 2, 3, 4]
    assert contents(build(values)) == values


def test_add_front_prepends():
    head = build([2, 3])
    head = lstadd_front(head, lstnew(1))
    assert contents(head) == [1, 2, 3]


def test_add_front_none_node_keeps_head():
    head = build([5])
    assert lstadd_front(head, None) is head


def test_add_back_to_empty_list_returns_node():
    node = lstnew(7)
    assert lstadd_back(None, node) is node


@pytest.mark.parametrize("values", [[], [1], list(range(10))])
def test_lstsize_matches_length(values):
    assert lstsize(build(values)) == len(values)


def test_lstlast():
    values = ["a", "b", "c"]
    assert lstlast(build(values)).content == values[-1]
    assert lstlast(None) is None


def test_iteration_over_nodes():
    head = build([1, 2, 3])
    assert [node.content for node in head] == [1, 2, 3]


def test_lstmap_builds_new_list():
    values = [1, 2, 3]
    head = build(values)
    mapped = lstmap(head, lambda v: v * 10)
    assert contents(mapped) == [v * 10 for v in values]
    assert contents(head) == values
    assert all(a is not b for a, b in zip(head, mapped))


def test_lstmap_empty():
    assert lstmap(None, str) is None


def test_lstclear_deletes_every_content_in_order():
    values = ["p", "q", "r"]
    deleted = []
    lstclear(build(values), deleted.append)
    assert deleted == values


def test_lstdelone_deletes_only_that_node():
    head = build([1, 2])
    second = head.next
    deleted = []
    lstdelone(head, deleted.append)
    assert deleted == [1]
    assert second.content == 2


def test_lstiter_requires_callable():
    with pytest.raises(TypeError):
        lstiter(build([1]), None)


def test_listnode_default_next():
    node = ListNode(3)
    assert lstsize(node) == 1