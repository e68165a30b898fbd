import io

from mansionquest.clues import ClueTree, default_suspect_table
from mansionquest.mansion import Room, master_mansion
from mansionquest.master import explore, final_judgement, main


def _explore(text, start=None):
    start = start or master_mansion()
    clues = ClueTree()
    out = io.StringIO()
    explore(start, clues, default_suspect_table(), io.StringIO(text), out)
    return start, clues, out.getvalue()


def _judge(clue_list, suspect):
    out = io.StringIO()
    verdict = final_judgement(
        ClueTree(clue_list), default_suspect_table(), io.StringIO(suspect + "\n"), out
    )
    return verdict, out.getvalue()


def test_clues_collected_along_path():
    _, clues, _ = _explore("e\nd\nd\ns\n")
    assert "Luvas de couro" in clues
    assert "Bilhete amassado" in clues
    assert len(clues) == 3
    assert list(clues) == sorted(clues)


def test_clue_is_taken_from_room():
    hall, _, output = _explore("e\nv\ns\n")
    assert hall.clue == ""
    assert output.count("Pista encontrada") == 2
    assert "Nenhuma pista neste comodo." in output


def test_show_clues_option():
    _, _, output = _explore("p\ns\n")
    assert "- Pegadas de lama fresca" in output


def test_show_clues_when_none():
    _, clues, output = _explore("p\ns\n", start=Room("Vazio"))
    assert len(clues) == 0
    assert "Nenhuma pista coletada ainda." in output


def test_accuse_during_exploration():
    _, _, output = _explore("e\nd\nd\na\njardineiro\ns\n")
    assert "jardineiro foi considerado CULPADO!" in output


def test_invalid_option():
    _, _, output = _explore("z\ns\n")
    assert "Comando invalido ou caminho inexistente." in output


def test_judgement_guilty_with_two_clues():
    verdict, output = _judge(["Bilhete amassado", "Lencos com manchas de sangue"], "baba")
    assert verdict is True
    assert "CULPADO" in output


def test_judgement_is_case_sensitive():
    verdict, output = _judge(
        ["Bilhete amassado", "Lencos com manchas de sangue"], "Baba"
    )
    assert verdict is False
    assert "Baba foi considerado INOCENTE." in output


def test_judgement_one_clue_is_weak():
    verdict, _ = _judge(["Comoda revirada"], "mordomo")
    assert verdict is False


def test_judgement_empty_input():
    out = io.StringIO()
    verdict = final_judgement(
        ClueTree(["Pegadas de lama fresca", "Luvas de couro"]),
        default_suspect_table(),
        io.StringIO(""),
        out,
    )
    assert verdict is False
    assert "INOCENTE" in out.getvalue()


def test_main_runs_full_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("e\nd\nd\ns\njardineiro\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "JULGAMENTO FINAL" in output
    assert "jardineiro foi considerado CULPADO!" in output
    assert "- Luvas de couro" in output


def test_main_weak_accusation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\njardineiro\n"))
    assert main([]) == 0
    assert "jardineiro foi considerado INOCENTE." in capsys.readouterr().out