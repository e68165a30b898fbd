# mansionquest

mansionquest is a small console detective game with three levels. The mansion is laid out as a binary tree of rooms, and you walk through it room by room. Along the way you collect clues. In the last level you accuse a suspect.

The game text is in Portuguese.

## Installation

```
pip install .
```

## Playing

Each level has its own command:

```
mansionquest-novice
mansionquest-adventurer
mansionquest-master
```

Each command first prints the mansion map. Then, in every room, it lists the moves you can make:

- `e`: take the left path
- `d`: take the right path
- `v`: go back to the room you came from
- `s`: stop exploring

Only the first character of the line you type counts. Blank lines are skipped. Reaching the end of input has the same effect as `s`.

**Novice** (`mansionquest-novice`). You walk the map, which has no clues. The walk ends when you reach a room with no further paths, or when you choose `s`.

**Adventurer** (`mansionquest-adventurer`). Entering a room that holds a clue collects it. The same clue is only kept once. When you stop, the game lists the clues you found in alphabetical order.

**Master** (`mansionquest-master`). A room's clue is collected the first time you enter it. Two extra actions are available:

- `p`: list the clues collected so far
- `a`: accuse a suspect now

After you stop exploring, the game lists your clues and asks you to name a suspect for the final judgement. The suggested suspects are Mordomo, Secretaria, Jardineiro and Baba.

An accusation holds when at least two of your collected clues point at the name you typed. The name must match exactly, capitalisation included, and the clue table records the suspects mostly in lower case (`jardineiro`, `baba`, `secretaria`, `mordomo`).

## Library use

The building blocks can also be used directly:

```python
from mansionquest.mansion import master_mansion
from mansionquest.clues import ClueTree, default_suspect_table, is_guilty

hall = master_mansion()
clues = ClueTree(room.clue for room in hall.walk() if room.clue)

print(list(clues))
print(is_guilty(clues, default_suspect_table(), "jardineiro"))  # True
```

### `mansionquest.mansion`

- `Room` is a room with a `name`, an optional `clue`, and `left`, `right` and `parent` links.
  - `attach_left(room)` and `attach_right(room)` connect a child room and return it.
  - `walk()` yields the room and every room below it in pre-order.
  - `is_dead_end` is true when the room has no left or right exit.
- `novice_mansion()`, `adventurer_mansion()` and `master_mansion()` build the map for each level and return the entrance hall.

### `mansionquest.clues`

- `ClueTree` is a binary search tree of clues.
  - `add(clue)` returns `False` if the clue was already present.
  - Iterating gives the clues in sorted order.
  - It supports `len()` and `in`.
- `SuspectTable(size=10)` is a chained hash table from clue to suspect.
  - `add(clue, suspect)` records a link; when a clue is added twice, the newer entry wins.
  - `find(clue)` returns the suspect, or `None` if the clue is unknown.
  - A non-positive size raises `ValueError`.
- `clue_hash(text, size=10)` returns the sum of the text's UTF-8 byte values modulo `size`.
- `count_clues_for(clues, table, suspect)` counts the clues tied to exactly that suspect.
- `is_guilty(clues, table, suspect)` is true when that count is at least two.
- `default_suspect_table()` holds the clue-to-suspect links of the master level.

### Level modules

`mansionquest.novice`, `mansionquest.adventurer` and `mansionquest.master` each provide two functions:

- `explore(...)` runs the walk on any pair of text streams.
- `main(argv=None)` starts the game on standard input and output.

`mansionquest.master` also provides `final_judgement(clues, table, stdin, stdout)`, which returns whether the accusation holds.

## What it does not do

- There is no saving or loading of a game.
- The maps and the clue-to-suspect links are fixed in code and cannot be changed from the command line.

## Running the tests

```
pip install .[test]
pytest
```