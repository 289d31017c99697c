import io

import pytest

from pokedex.client import Client
from pokedex.commands import Config
from pokedex.repl import PROMPT, clean_input, main, start_repl


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  world  ", ["hello", "world"]),
        ("  HELLO  WORLD  ", ["hello", "world"]),
        ("thisisatest", ["thisisatest"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_clean_input_empty():
    assert clean_input("   \t ") == []


@pytest.fixture
def config():
    with Client(timeout=1.0, cache_interval=600.0) as client:
        yield Config(client=client)


def test_help_runs(config, capsys):
    start_repl(config, ["HELP\n"])
    out = capsys.readouterr().out
    assert out.startswith(PROMPT)
    assert "Welcome to the Pokedex!" in out


def test_unknown_command(config, capsys):
    start_repl(config, ["fly away"])
    assert "Unknown command" in capsys.readouterr().out


def test_blank_lines_only_prompt(config, capsys):
    start_repl(config, ["   ", ""])
    assert capsys.readouterr().out == PROMPT * 3 + "\n"


def test_command_errors_are_printed(config, capsys):
    start_repl(config, ["catch", "mapb", "inspect pidgey"])
    out = capsys.readouterr().out
    assert "you must provide a pokemon" in out
    assert "you're on the first page" in out
    assert "you have not caught that pokemon" in out


def test_exit_stops_the_loop(config, capsys):
    with pytest.raises(SystemExit) as info:
        start_repl(config, ["exit", "help"])
    assert info.value.code == 0
    out = capsys.readouterr().out
    assert "Goodbye!" in out
    assert "Welcome to the Pokedex!" not in out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("pokedex\n"))
    assert main([]) == 0
    assert "Your Pokedex:" in capsys.readouterr().out