"""Rooms of the mansion arranged as a binary tree, and the fixed maps of each level."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Room:
    """A room of the mansion with an optional clue and left/right exits."""

    name: str
    clue: str = ""
    left: Optional["Room"] = field(default=None, repr=False)
    right: Optional["Room"] = field(default=None, repr=False)
    parent: Optional["Room"] = field(default=None, repr=False)

    def attach_left(self, room: "Room") -> "Room":
        """Make ``room`` the left exit of this room and return it."""
        self.left = room
        room.parent = self
        return room

    def attach_right(self, room: "Room") -> "Room":
        """Make ``room`` the right exit of this room and return it."""
        self.right = room
        room.parent = self
        return room

    @property
    def is_dead_end(self) -> bool:
        """True when the room has no exit to the left or to the right."""
        return self.left is None and self.right is None

    def walk(self) -> Iterator["Room"]:
        """Yield this room and every room below it, in pre-order."""
        stack = [self]
        while stack:
            room = stack.pop()
            yield room
            if room.right is not None:
                stack.append(room.right)
            if room.left is not None:
                stack.append(room.left)


def novice_mansion() -> Room:
    """Build the map of the first level and return the entrance hall."""
    hall = Room("Hall de Entrada")
    living = hall.attach_left(Room("Sala de Estar"))
    library = hall.attach_right(Room("Biblioteca"))
    living.attach_left(Room("Quarto"))
    living.attach_right(Room("Escritorio"))
    library.attach_right(Room("Cozinha"))
    return hall


def adventurer_mansion() -> Room:
    """Build the map of the second level, with clues, and return the hall."""
    hall = Room("Hall de Entrada", "Pegadas de lama fresca")
    living = hall.attach_left(Room("Sala de Estar", "Bilhete amassado"))
    library = hall.attach_right(Room("Biblioteca", "Agenda com pagina faltando"))
    suite1 = living.attach_left(Room("Suite 1", "Camisa com marca de batom"))
    suite1.attach_left(Room("Sacada"))
    living.attach_right(Room("Suite 2"))
    library.attach_left(Room("Copa", "Xicaras quebradas"))
    office = library.attach_right(Room("Escritorio", "Lencos com manchas de sangue"))
    office.attach_right(Room("Banker", "Fotos denunciando chantagem"))
    return hall


def master_mansion() -> Room:
    """Build the map of the third level, with clues, and return the hall."""
    hall = Room("Hall de Entrada", "Pegadas de lama fresca")
    living = hall.attach_left(Room("Sala de Estar", "Bilhete amassado"))
    library = hall.attach_right(Room("Biblioteca", "Agenda com pagina faltando"))
    suite1 = living.attach_left(Room("Suite 1", "Comoda revirada"))
    suite1.attach_left(Room("Sacada 1"))
    suite2 = living.attach_right(Room("Suite 2"))
    suite2.attach_right(Room("Sacada 2", "Luvas de couro"))
    library.attach_left(Room("Copa", "Xicaras quebradas"))
    office = library.attach_right(Room("Escritorio", "Lencos com manchas de sangue"))
    office.attach_right(Room("Porao", "Arma do crime"))
    return hall