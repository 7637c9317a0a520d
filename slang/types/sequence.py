"""Sequence types for slang: a singly linked List and a dense Vector.

Both satisfy the same contract:

    append(item) -> Sequence   List O(1),  Vector O(1) amortized
    first()      -> value      O(1)
    rest()       -> Sequence   O(n), always a fresh sequence of the same kind
    nth(i)       -> value      List O(n),  Vector O(1)
    length()     -> float      O(1)

Sequences are values: `append` never changes what an existing handle sees.
Both types share structure with the handle they were appended to, and only
copy when that structure has already been extended by another append
(copy-on-write on the tail). `first` and `nth` do no bounds checking; the
`first`/`nth` built-ins do.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from slang import LispValue


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: LispValue):
        self.value = value
        self.next: Optional[_Node] = None


class Sequence:
    """Common behaviour of List and Vector."""

    __slots__ = ()

    open_delim = "("
    close_delim = ")"

    def append(self, item: LispValue) -> Sequence:
        raise NotImplementedError

    def first(self) -> LispValue:
        raise NotImplementedError

    def rest(self) -> Sequence:
        raise NotImplementedError

    def nth(self, n: float) -> LispValue:
        raise NotImplementedError

    def length(self) -> float:
        return float(len(self))

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[LispValue]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        from slang.types.values import is_equal

        return is_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        # Imported lazily: values.py depends on this module.
        from slang.types.values import to_repr

        with StringIO() as buffer:
            buffer.write(self.open_delim)
            buffer.write(" ".join(to_repr(item) for item in self))
            buffer.write(self.close_delim)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class List(Sequence):
    """Persistent singly linked list with a tracked tail and count."""

    __slots__ = ("_head", "_tail", "_count")

    def __init__(self, head: Optional[_Node] = None, tail: Optional[_Node] = None, count: int = 0):
        self._head = head
        self._tail = tail
        self._count = count

    @classmethod
    def of(cls, *items: LispValue) -> List:
        return cls.from_iterable(items)

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue]) -> List:
        head: Optional[_Node] = None
        tail: Optional[_Node] = None
        count = 0
        for item in items:
            node = _Node(item)
            if head is None:
                head = node
            else:
                tail.next = node
            tail = node
            count += 1
        return cls(head, tail, count)

    def append(self, item: LispValue) -> List:
        node = _Node(item)
        if self._count == 0:
            return List(node, node, 1)
        if self._tail.next is None:
            # We own the end of the chain: extend it in place.
            self._tail.next = node
            return List(self._head, node, self._count + 1)
        # Another append already extended our tail; copy our prefix.
        copy = List.from_iterable(self)
        copy._tail.next = node
        return List(copy._head, node, self._count + 1)

    def first(self) -> LispValue:
        return self._head.value

    def rest(self) -> List:
        items = iter(self)
        next(items, None)
        return List.from_iterable(items)

    def nth(self, n: float) -> LispValue:
        node = self._head
        for _ in range(int(n)):
            node = node.next
        return node.value

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[LispValue]:
        node = self._head
        for _ in range(self._count):
            yield node.value
            node = node.next


class Vector(Sequence):
    """Dense array view over a (possibly shared) backing Python list."""

    __slots__ = ("_items", "_count")

    open_delim = "["
    close_delim = "]"

    def __init__(self, items: Optional[list[LispValue]] = None, count: Optional[int] = None):
        self._items: list[LispValue] = items if items is not None else []
        self._count: int = len(self._items) if count is None else count

    @classmethod
    def of(cls, *items: LispValue) -> Vector:
        return cls(list(items))

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue]) -> Vector:
        return cls(list(items))

    def append(self, item: LispValue) -> Vector:
        if len(self._items) == self._count:
            # Amortized O(1): the backing list ends where this view ends.
            self._items.append(item)
            return Vector(self._items, self._count + 1)
        items = self._items[: self._count]
        items.append(item)
        return Vector(items)

    def first(self) -> LispValue:
        return self._items[0]

    def rest(self) -> Vector:
        return Vector(self._items[1 : self._count])

    def nth(self, n: float) -> LispValue:
        return self._items[int(n)]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[LispValue]:
        for i in range(self._count):
            yield self._items[i]
