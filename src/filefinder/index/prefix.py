"""Case-insensitive prefix index over file names.

Each trie edge is one character of a normalized (case-folded) file name and
the root stands for the empty prefix. A record is stored directly in only two
matching sets: the root's and the set of the node where its name ends. Nodes
in between pick the record up at query time, when the whole subtree under the
node reached by the prefix is collected.

All traversals use explicit worklists so deep tries never hit the recursion
limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Set

from filefinder.models import FileRecord
from filefinder.utils.text import normalize_name


@dataclass(slots=True, eq=False)
class TrieNode:
    """One character position in some indexed name."""

    char: str = ""
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    matching: Set[FileRecord] = field(default_factory=set)


class PrefixIndex:
    """Trie of file names answering case-insensitive prefix queries."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def __len__(self) -> int:
        return len(self.root.matching)

    def __enter__(self) -> "PrefixIndex":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def insert(self, record: FileRecord) -> None:
        """Add ``record`` under its case-folded name."""
        node = self.root
        node.matching.add(record)
        for char in normalize_name(record.name):
            child = node.children.get(char)
            if child is None:
                child = TrieNode(char=char)
                node.children[char] = child
            node = child
        node.matching.add(record)

    def query_prefix(self, prefix: str) -> Set[FileRecord]:
        """Return every record whose name starts with ``prefix``.

        Matching ignores case. An unknown prefix yields an empty set.
        """
        node = self._find(normalize_name(prefix))
        if node is None:
            return set()
        result: Set[FileRecord] = set()
        for current in self._walk(node):
            result.update(current.matching)
        return result

    def node_count(self) -> int:
        """Number of nodes in the trie, root included."""
        return sum(1 for _ in self._walk(self.root))

    def close(self) -> None:
        """Dismantle every node and leave the index empty."""
        pending = [self.root]
        while pending:
            node = pending.pop()
            pending.extend(node.children.values())
            node.children.clear()
            node.matching.clear()
        self.root = TrieNode()

    def _find(self, key: str) -> TrieNode | None:
        node = self.root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    @staticmethod
    def _walk(start: TrieNode) -> Iterator[TrieNode]:
        stack = [start]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())
