"""Size-keyed AVL tree answering inclusive range queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from filefinder.models import FileRecord


@dataclass(slots=True, eq=False)
class SizeNode:
    """Bucket of records sharing one size."""

    key: int
    files: List[FileRecord] = field(default_factory=list)
    left: "SizeNode | None" = None
    right: "SizeNode | None" = None
    height: int = 1


def _height(node: SizeNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: SizeNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: SizeNode) -> SizeNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: SizeNode) -> SizeNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: SizeNode) -> SizeNode:
    _update(node)
    balance = _height(node.left) - _height(node.right)
    if balance > 1:
        assert node.left is not None
        if _height(node.left.left) < _height(node.left.right):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if _height(node.right.right) < _height(node.right.left):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class RangeIndex:
    """Balanced binary search tree of file records keyed by size."""

    def __init__(self) -> None:
        self.root: SizeNode | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[FileRecord]:
        for node in self._in_order():
            yield from node.files

    @property
    def height(self) -> int:
        return _height(self.root)

    def insert(self, record: FileRecord) -> None:
        """Add ``record`` to the bucket for its size, rebalancing as needed."""
        key = record.size
        path: List[SizeNode] = []
        node = self.root
        while node is not None:
            if key == node.key:
                node.files.append(record)
                self._count += 1
                return
            path.append(node)
            node = node.left if key < node.key else node.right

        child = SizeNode(key=key, files=[record])
        self._count += 1
        # Rebalance bottom-up along the insertion path.
        while path:
            parent = path.pop()
            if key < parent.key:
                parent.left = child
            else:
                parent.right = child
            child = _rebalance(parent)
        self.root = child

    def query(self, low: int, high: int) -> List[FileRecord]:
        """Return records with ``min(low, high) <= size <= max(low, high)``.

        Results are in ascending size order; records of equal size keep their
        insertion order.
        """
        result: List[FileRecord] = []
        if self.root is None:
            return result
        if low > high:
            low, high = high, low

        for node in self._in_order():
            if node.key > high:
                break
            if node.key >= low:
                result.extend(node.files)
        return result

    def _in_order(self) -> Iterator[SizeNode]:
        stack: List[SizeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right
