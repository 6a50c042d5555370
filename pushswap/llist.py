"""A minimal singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One cell of a singly linked list."""

    content: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator["ListNode"]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    return iter(head) if head is not None else iter(())


def lstnew(content: Any) -> ListNode:
    """Return a new single-element list holding content."""
    return ListNode(content)


def lstadd_front(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put node in front of head and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstadd_back(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Attach node after the last element and return the head."""
    if node is None:
        return head
    if head is None:
        return node
    lstlast(head).next = node
    return head


def lstsize(head: Optional[ListNode]) -> int:
    """Return the number of elements."""
    return sum(1 for _ in _nodes(head))


def lstlast(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the last element, or None for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lstiter(head: Optional[ListNode], f: Callable[[Any], Any]) -> None:
    """Call f on the content of every element, front to back."""
    if f is None:
        raise TypeError("f must be callable, not None")
    for node in _nodes(head):
        f(node.content)


def lstmap(head: Optional[ListNode], f: Callable[[Any], Any]) -> Optional[ListNode]:
    """Return a new list whose contents are f applied to each content."""
    if f is None:
        raise TypeError("f must be callable, not None")
    new_head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for node in _nodes(head):
        cell = ListNode(f(node.content))
        if tail is None:
            new_head = cell
        else:
            tail.next = cell
        tail = cell
    return new_head


def lstdelone(node: Optional[ListNode], delete: Callable[[Any], Any]) -> None:
    """Release one element, passing its content to delete."""
    if node is None:
        return
    if delete is None:
        raise TypeError("delete must be callable, not None")
    delete(node.content)
    node.content = None
    node.next = None


def lstclear(head: Optional[ListNode], delete: Callable[[Any], Any]) -> None:
    """Release every element, passing each content to delete in order."""
    if delete is None:
        raise TypeError("delete must be callable, not None")
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node = following