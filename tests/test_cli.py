"""Tests for the poly-calc command line entry point."""

import io

import pytest

from poly_calc.cli import main
from poly_calc.config import Config


@pytest.fixture
def script(tmp_path):
    def write(text):
        path = tmp_path / "input.txt"
        path.write_text(text)
        return str(path)
    return write


def test_runs_file(script, capsys):
    code = main([script("(1,1)\nPOW 2\nPRINT\nDUMP\n")])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "(1,2)\n[a^2]\n"
    assert captured.err == ""


def test_errors_go_to_stderr(script, capsys):
    code = main([script("PRINT\n5\nPRINT\n")])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "5\n"
    assert captured.err == "ERROR 1 STACK UNDERFLOW\n"


def test_exit_code(script, capsys):
    assert main([script("EXIT\n")]) == 1
    assert capsys.readouterr().err == "TERMINATED\n"


def test_dump_format_option(script, capsys):
    main([script("3\n(1,2)\nDUMP\n"), "--dump_format", "card"])
    assert capsys.readouterr().out == "[C(3), P(C(1), 2)]\n"


def test_max_command_length_option(script, capsys):
    main([script("CLEAN\n"), "--max_command_length", "4"])
    assert capsys.readouterr().err == "ERROR 1 WRONG COMMAND\n"


def test_verbose(script, capsys):
    main([script(""), "--verbose"])
    err = capsys.readouterr().err
    assert "max_command_length=25" in err
    assert "dump_format=human" in err


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\nMUL\nPRINT\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "6\n"


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\n5\nPRINT\n")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("5\n", "ERROR 1 1\n")


def test_defaults_follow_config(script, capsys):
    main([script(""), "--verbose"])
    err = capsys.readouterr().err
    assert f"max_command_length={Config.max_command_length}" in err
    assert f"dump_format={Config.dump_format}" in err
