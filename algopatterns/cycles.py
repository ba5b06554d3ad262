"""Fast and slow pointer algorithms on singly linked lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _meeting_point(head: ListNode | None) -> ListNode | None:
    """Return the node where the fast and slow pointers meet, if any."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def _loop_length(node: ListNode) -> int:
    length = 1
    current = node.next
    while current is not node:
        current = current.next
        length += 1
    return length


def has_cycle(head: ListNode | None) -> bool:
    """Return True if the list starting at ``head`` contains a cycle."""
    return _meeting_point(head) is not None


def cycle_length(head: ListNode | None) -> int:
    """Return the number of nodes in the cycle, or 0 if there is none."""
    meeting = _meeting_point(head)
    return 0 if meeting is None else _loop_length(meeting)


def find_cycle_start(head: ListNode | None) -> int:
    """Return the value of the node where the cycle begins, or 0 if none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return 0
    ahead = head
    for _ in range(_loop_length(meeting)):
        ahead = ahead.next
    behind = head
    while behind is not ahead:
        behind = behind.next
        ahead = ahead.next
    return behind.val