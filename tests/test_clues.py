import pytest

from mansionquest.clues import (
    ClueTree,
    SuspectTable,
    clue_hash,
    count_clues_for,
    default_suspect_table,
    is_guilty,
)

MASTER_CLUES = [
    "Pegadas de lama fresca",
    "Bilhete amassado",
    "Agenda com pagina faltando",
    "Comoda revirada",
    "Luvas de couro",
    "Lencos com manchas de sangue",
    "Xicaras quebradas",
    "Arma do crime",
]


def test_tree_iterates_sorted():
    tree = ClueTree()
    for clue in MASTER_CLUES:
        tree.add(clue)
    assert list(tree) == sorted(MASTER_CLUES)
    assert len(tree) == len(MASTER_CLUES)


def test_tree_ignores_duplicates():
    tree = ClueTree(["Bilhete amassado"])
    assert tree.add("Bilhete amassado") is False
    assert tree.add("Arma do crime") is True
    assert len(tree) == 2
    assert list(tree) == ["Arma do crime", "Bilhete amassado"]


def test_tree_orders_by_code_point():
    tree = ClueTree(["apple", "Zebra", "banana"])
    assert list(tree) == ["Zebra", "apple", "banana"]


def test_tree_contains():
    tree = ClueTree(MASTER_CLUES[:3])
    assert "Bilhete amassado" in tree
    assert "Arma do crime" not in tree
    assert 42 not in tree


def test_empty_tree():
    tree = ClueTree()
    assert list(tree) == []
    assert len(tree) == 0


@pytest.mark.parametrize("text", MASTER_CLUES + ["", "x"])
def test_hash_in_range(text):
    assert 0 <= clue_hash(text) < 10
    assert 0 <= clue_hash(text, 3) < 3
    assert clue_hash(text) == clue_hash(str(text))


def test_hash_of_empty_is_zero():
    assert clue_hash("") == 0


def test_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        clue_hash("abc", 0)
    with pytest.raises(ValueError):
        SuspectTable(size=0)


def test_table_find_and_collisions():
    table = SuspectTable()
    table.add("ab", "first")
    table.add("ba", "second")
    assert clue_hash("ab") == clue_hash("ba")
    assert table.find("ab") == "first"
    assert table.find("ba") == "second"
    assert table.find("missing") is None


def test_table_newer_entry_wins():
    table = SuspectTable()
    table.add("clue", "old")
    table.add("clue", "new")
    assert table.find("clue") == "new"


def test_default_table():
    table = default_suspect_table()
    assert table.find("Pegadas de lama fresca") == "jardineiro"
    assert table.find("Arma do crime") == "Baba"
    assert table.find("Camisa com marca de batom") is None
    assert all(table.find(clue) is not None for clue in MASTER_CLUES)


def test_count_and_verdict():
    table = default_suspect_table()
    assert count_clues_for(MASTER_CLUES, table, "baba") == 2
    assert count_clues_for(MASTER_CLUES, table, "Baba") == 1
    assert count_clues_for(MASTER_CLUES, table, "mordomo") == 1
    assert is_guilty(MASTER_CLUES, table, "jardineiro")
    assert not is_guilty(MASTER_CLUES, table, "mordomo")
    assert not is_guilty([], table, "baba")


def test_count_accepts_tree():
    table = default_suspect_table()
    tree = ClueTree(["Luvas de couro", "Pegadas de lama fresca", "Luvas de couro"])
    assert count_clues_for(tree, table, "jardineiro") == len(tree)
    assert is_guilty(tree, table, "jardineiro")