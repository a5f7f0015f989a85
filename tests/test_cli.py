from mazewalk.cli import main

SOLVABLE = """3 4
e x x #
# # x #
# # x s
"""

BLOCKED = """2 3
e x #
# # s
"""


def _write(tmp_path, text):
    path = tmp_path / "maze.txt"
    path.write_text(text)
    return str(path)


def test_no_arguments_is_usage_error(capsys):
    assert main([]) == 1
    assert "arquivo_labirinto" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "none.txt")]) == 1
    assert "Erro ao abrir o arquivo!" in capsys.readouterr().err


def test_missing_start(tmp_path, capsys):
    path = _write(tmp_path, "1 2\nx s\n")
    assert main([path]) == 1
    assert "Posição inicial não encontrada no labirinto." in capsys.readouterr().err


def test_exit_found(tmp_path, capsys):
    assert main([_write(tmp_path, SOLVABLE), "--delay", "0"]) == 0
    assert "Saída encontrada!" in capsys.readouterr().out


def test_exit_not_found(tmp_path, capsys):
    assert main([_write(tmp_path, BLOCKED), "--delay", "0"]) == 0
    assert "Não foi possível encontrar a saída." in capsys.readouterr().out


def test_threaded_exit_found(tmp_path, capsys):
    assert main([_write(tmp_path, SOLVABLE), "--threaded", "--delay", "0"]) == 0
    assert "A saida foi encontrada" in capsys.readouterr().out


def test_threaded_exit_not_found(tmp_path, capsys):
    assert main([_write(tmp_path, BLOCKED), "--threaded", "--delay", "0"]) == 0
    assert "A saida NÃO foi encontrada" in capsys.readouterr().out