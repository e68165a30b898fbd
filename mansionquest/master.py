"""Third level: collect clues, link them to suspects and make an accusation."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from mansionquest.clues import ClueTree, SuspectTable, default_suspect_table, is_guilty
from mansionquest.mansion import Room, master_mansion

_RULE = "=" * 63

_MAP = """
                        Hall de Entrada
                               |
                  -------------------------
                  |                       |
             Sala de Estar           Biblioteca
                  |                       |
            -------------            ------------
            |           |            |          |
         Suite 1     Suite 2       Copa    Escritorio
            |           |                       |
        ---------   ---------               ----------
        |       |  |        |               |        |
     Sacada 1            Sacada 2                  Porao"""


def _read_choice(stdin: TextIO) -> Optional[str]:
    """Return the first non-blank character of the next non-blank line, or None at end of input."""
    for line in iter(stdin.readline, ""):
        text = line.strip()
        if text:
            return text[0]
    return None


def _show_clues(clues: ClueTree, stdout: TextIO) -> None:
    for clue in clues:
        print(f"- {clue}", file=stdout)


def final_judgement(clues: ClueTree, table: SuspectTable, stdin: TextIO, stdout: TextIO) -> bool:
    """Ask for a suspect and judge them; return True when the accusation holds."""
    print(f"\n{_RULE}", file=stdout)
    print("                 >>> JULGAMENTO FINAL <<<                      ", file=stdout)
    print(_RULE, file=stdout)
    print(">>> Acuse um suspeito baseado nas pistas:", file=stdout)
    print(">>> Possiveis suspeitos: Mordomo, Secretaria, Jardineiro, Baba", file=stdout)
    print("\n>>> Digite o nome do suspeito: ", end="", file=stdout)

    suspect = stdin.readline().split("\n", 1)[0]
    guilty = is_guilty(clues, table, suspect)
    if guilty:
        print(f"\n>>> Acusacao consistente! {suspect} foi considerado CULPADO!", file=stdout)
    else:
        print(f"\n>>> Acusacao fraca. {suspect} foi considerado INOCENTE.", file=stdout)
    return guilty


def explore(
    start: Room, clues: ClueTree, table: SuspectTable, stdin: TextIO, stdout: TextIO
) -> None:
    """Walk from ``start``, taking each room's clue into ``clues`` once."""
    print("\n>>> Inicio da exploracao <<<", file=stdout)
    current = start
    while True:
        print(f"\n>>> Voce esta: {current.name}", file=stdout)

        if current.clue:
            print(f'>>> Pista encontrada: "{current.clue}"', file=stdout)
            clues.add(current.clue)
            current.clue = ""
        else:
            print(">>> Nenhuma pista neste comodo.", file=stdout)

        print("\n>>> Escolha uma direcao ou acao:", file=stdout)
        if current.left is not None:
            print(f"   (e) - Esquerda: {current.left.name}", file=stdout)
        if current.right is not None:
            print(f"   (d) - Direita:  {current.right.name}", file=stdout)
        if current.parent is not None:
            print(f"   (v) - Voltar para: {current.parent.name}", file=stdout)
        print("   (p) - Ver pistas coletadas", file=stdout)
        print("   (a) - Acusar um suspeito", file=stdout)
        print("   (s) - Sair da exploracao", file=stdout)
        print("\n>>> Opcao: ", end="", file=stdout)

        choice = _read_choice(stdin)
        if choice == "e" and current.left is not None:
            current = current.left
        elif choice == "d" and current.right is not None:
            current = current.right
        elif choice == "v" and current.parent is not None:
            current = current.parent
        elif choice == "p":
            print("\n>>> Pistas coletadas ate agora:", file=stdout)
            if clues:
                _show_clues(clues, stdout)
            else:
                print(">>> Nenhuma pista coletada ainda.", file=stdout)
        elif choice == "a":
            final_judgement(clues, table, stdin, stdout)
        elif choice is None or choice == "s":
            print("\n>>> Exploracao encerrada pelo jogador <<<", file=stdout)
            break
        else:
            print(">>> Comando invalido ou caminho inexistente.", file=stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the map, run the walk, list the clues and hold the final judgement."""
    parser = argparse.ArgumentParser(description="Solve the mansion mystery.")
    parser.parse_args(argv)

    out = sys.stdout
    print(f"\n{_RULE}", file=out)
    print("                      >>> Mapa da Mansao <<<                   ", file=out)
    print(_RULE, file=out)
    print(_MAP, file=out)
    print(f"\n{_RULE}", file=out)
    print("        >>> Estrutura da mansao criada com sucesso <<<         ", file=out)
    print(_RULE, file=out)

    clues = ClueTree()
    table = default_suspect_table()
    explore(master_mansion(), clues, table, sys.stdin, out)

    print(f"\n{_RULE}", file=out)
    print("               >>> PISTAS COLETADAS EM ORDEM <<<               ", file=out)
    print(_RULE, file=out)
    if clues:
        _show_clues(clues, out)
    else:
        print(">>> Nenhuma pista foi coletada.", file=out)

    final_judgement(clues, table, sys.stdin, out)

    print(f"\n{_RULE}", file=out)
    print("       >>> Fim da investigacao. Boa sorte, detetive! <<<       ", file=out)
    print(_RULE, file=out)
    return 0