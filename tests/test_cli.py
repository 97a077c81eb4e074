import io

from main import main


def test_expressions_from_arguments(capsys):
    assert main(["2+3*4", "(2+3)*4"]) == 0
    assert capsys.readouterr().out == "14\n20\n"


def test_degrees_flag(capsys):
    assert main(["--deg", "sin(90)", "cos(180)"]) == 0
    assert capsys.readouterr().out == "1\n-1\n"


def test_failure_sets_exit_status(capsys):
    assert main(["1/0", "2+2"]) == 1
    assert capsys.readouterr().out == "Error\n4\n"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2^3^2\n(1\n5!\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == "512\nError\n120\n"
