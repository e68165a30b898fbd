"""Collected clues kept in alphabetical order and a clue-to-suspect hash table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

TABLE_SIZE = 10
GUILTY_THRESHOLD = 2


@dataclass
class _Node:
    clue: str
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class ClueTree:
    """Binary search tree of clues; duplicates are ignored."""

    def __init__(self, clues: Iterable[str] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for clue in clues:
            self.add(clue)

    def add(self, clue: str) -> bool:
        """Insert ``clue``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(clue)
            self._size += 1
            return True
        node = self._root
        while True:
            if clue < node.clue:
                if node.left is None:
                    node.left = _Node(clue)
                    break
                node = node.left
            elif clue > node.clue:
                if node.right is None:
                    node.right = _Node(clue)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __iter__(self) -> Iterator[str]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self._root
        while node is not None:
            if clue < node.clue:
                node = node.left
            elif clue > node.clue:
                node = node.right
            else:
                return True
        return False


def clue_hash(text: str, size: int = TABLE_SIZE) -> int:
    """Sum of the text's byte values modulo ``size``."""
    if size <= 0:
        raise ValueError("table size must be positive")
    return sum(text.encode("utf-8")) % size


@dataclass
class SuspectTable:
    """Chained hash table mapping clues to the suspect they point at."""

    size: int = TABLE_SIZE
    _buckets: list[list[tuple[str, str]]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("table size must be positive")
        self._buckets = [[] for _ in range(self.size)]

    def add(self, clue: str, suspect: str) -> None:
        """Record that ``clue`` points at ``suspect``; newer entries win."""
        self._buckets[clue_hash(clue, self.size)].insert(0, (clue, suspect))

    def find(self, clue: str) -> Optional[str]:
        """Return the suspect for ``clue``, or None if it is unknown."""
        for key, suspect in self._buckets[clue_hash(clue, self.size)]:
            if key == clue:
                return suspect
        return None


def count_clues_for(clues: Iterable[str], table: SuspectTable, suspect: str) -> int:
    """Count the clues that the table ties to exactly ``suspect``."""
    return sum(1 for clue in clues if table.find(clue) == suspect)


def is_guilty(clues: Iterable[str], table: SuspectTable, suspect: str) -> bool:
    """An accusation holds when at least two clues point at the suspect."""
    return count_clues_for(clues, table, suspect) >= GUILTY_THRESHOLD


def default_suspect_table() -> SuspectTable:
    """The clue-to-suspect relations of the third level."""
    table = SuspectTable()
    for clue, suspect in (
        ("Pegadas de lama fresca", "jardineiro"),
        ("Bilhete amassado", "baba"),
        ("Agenda com pagina faltando", "secretaria"),
        ("Comoda revirada", "mordomo"),
        ("Luvas de couro", "jardineiro"),
        ("Lencos com manchas de sangue", "baba"),
        ("Xicaras quebradas", "secretaria"),
        ("Arma do crime", "Baba"),
    ):
        table.add(clue, suspect)
    return table