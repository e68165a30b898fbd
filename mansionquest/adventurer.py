"""Second level: walk the mansion and collect clues in alphabetical order."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from mansionquest.clues import ClueTree
from mansionquest.mansion import Room, adventurer_mansion

_RULE = "=" * 63

_MAP = """
            >>> Criacao da seguinte arvore binaria <<<

                        Hall de Entrada
                               |
                  -------------------------
                  |                       |
             Sala de Estar            Biblioteca
                  |                        |
            -------------             ------------
            |           |             |          |
         Suite 1     Suite 2        Copa    Escritorio
            |                                     |
          Sacada                                Banker"""


def _read_choice(stdin: TextIO) -> Optional[str]:
    """Return the first non-blank character of the next non-blank line, or None at end of input."""
    for line in iter(stdin.readline, ""):
        text = line.strip()
        if text:
            return text[0]
    return None


def explore(start: Room, stdin: TextIO, stdout: TextIO) -> ClueTree:
    """Walk from ``start``, collecting each visited room's clue; return the collected clues."""
    clues = ClueTree()
    print("\n>>> Inicio da exploracao <<<", file=stdout)
    current = start
    while True:
        print(f"\n>>> Voce esta: {current.name}", file=stdout)

        if current.clue:
            print(f'>>> Pista encontrada: "{current.clue}"', file=stdout)
            clues.add(current.clue)
        else:
            print(">>> Nenhuma pista neste comodo.", file=stdout)

        print("\n>>> Escolha uma direcao:", file=stdout)
        if current.left is not None:
            print(f"   (e) - Esquerda: {current.left.name}", file=stdout)
        if current.right is not None:
            print(f"   (d) - Direita:  {current.right.name}", file=stdout)
        if current.parent is not None:
            print(f"   (v) - Voltar para: {current.parent.name}", file=stdout)
        print("   (s) - Sair da exploracao", file=stdout)
        print(">>> Opcao: ", end="", file=stdout)

        choice = _read_choice(stdin)
        if choice == "e" and current.left is not None:
            current = current.left
        elif choice == "d" and current.right is not None:
            current = current.right
        elif choice == "v" and current.parent is not None:
            current = current.parent
        elif choice is None or choice == "s":
            print("\n>>> Exploracao encerrada pelo jogador <<<", file=stdout)
            break
        else:
            print(">>> Comando invalido ou caminho inexistente.", file=stdout)
    return clues


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map, run the walk and list the collected clues."""
    parser = argparse.ArgumentParser(description="Explore the mansion and collect clues.")
    parser.parse_args(argv)

    out = sys.stdout
    print(f"\n{_RULE}", file=out)
    print("                      >>> Mapa da Mansao <<<                   ", file=out)
    print(_RULE, file=out)
    print(_MAP, file=out)
    print(f"\n{_RULE}", file=out)
    print("        >>> Estrutura da mansao criada com sucesso <<<         ", file=out)
    print(_RULE, file=out)

    clues = explore(adventurer_mansion(), sys.stdin, out)

    print(f"\n{_RULE}", file=out)
    print("               >>> PISTAS COLETADAS EM ORDEM <<<               ", file=out)
    print(_RULE, file=out)
    if clues:
        for clue in clues:
            print(f"- {clue}", file=out)
    else:
        print(">>> Nenhuma pista foi coletada.", file=out)

    print(f"\n{_RULE}", file=out)
    print("       >>> Fim da investigacao. Boa sorte, detetive! <<<       ", file=out)
    print(_RULE, file=out)
    print(file=out)
    return 0