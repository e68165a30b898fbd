"""First level: walk the mansion map without clues."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from mansionquest.mansion import Room, novice_mansion

_RULE = "=" * 63

_MAP = """
            >>> Criacao da seguinte arvore de ambientes <<<

                          Hall de Entrada
                                 |
                    -------------------------
                    |                       |
              Sala de Estar            Biblioteca
                    |                       |
              -------------             ----------
              |           |             |        |
           Quarto    Escritorio               Cozinha"""


def _read_choice(stdin: TextIO) -> Optional[str]:
    """Return the first non-blank character of the next non-blank line, or None at end of input."""
    for line in iter(stdin.readline, ""):
        text = line.strip()
        if text:
            return text[0]
    return None


def explore(start: Room, stdin: TextIO, stdout: TextIO) -> Room:
    """Let the player walk the map from ``start``; return the room where the walk ended."""
    print("\n>>> Inicio da exploracao interativa da mansao <<<", file=stdout)
    current = start
    while True:
        print(f"\n>>> Voce esta no ambiente: {current.name}", file=stdout)

        if current.is_dead_end:
            print(">>> Este ambiente nao possui mais caminhos!", file=stdout)
            break

        print(">>> Deseja ir para:", file=stdout)
        if current.left is not None:
            print(f"     (e) - Esquerda: {current.left.name}", file=stdout)
        if current.right is not None:
            print(f"     (d) - Direita: {current.right.name}", file=stdout)
        if current.parent is not None:
            print(f"     (v) - Voltar para: {current.parent.name}", file=stdout)
        print("     (s) - Sair da exploracao", file=stdout)
        print(">>> Escolha uma opcao: ", end="", file=stdout)

        choice = _read_choice(stdin)
        if choice is None or choice == "s":
            print("\n>>> Exploracao encerrada pelo jogador <<<", file=stdout)
            break
        if choice == "e":
            if current.left is not None:
                current = current.left
            else:
                print("\n>>> Nao ha ambiente a esquerda!", file=stdout)
        elif choice == "d":
            if current.right is not None:
                current = current.right
            else:
                print("\n>>> Nao ha ambiente a direita!", file=stdout)
        elif choice == "v":
            if current.parent is not None:
                current = current.parent
            else:
                print("\n>>> Voce ja esta no inicio. Nao ha como voltar mais!", file=stdout)
        else:
            print("*** Comando invalido. Use 'e', 'd', 'v' ou 's' ***", file=stdout)

    print("\n>>> Fim da exploracao <<<", file=stdout)
    return current


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map and run the interactive walk on standard input and output."""
    parser = argparse.ArgumentParser(description="Explore the mansion map.")
    parser.parse_args(argv)

    out = sys.stdout
    print(f"\n{_RULE}", file=out)
    print("                   >>> Representacao do Mapa <<<", file=out)
    print(_RULE, file=out)
    print(_MAP, file=out)
    print(_RULE, file=out)
    print("        >>> Estrutura da mansao criada com sucesso <<<         ", file=out)
    print(_RULE, file=out)

    explore(novice_mansion(), sys.stdin, out)
    return 0