"""The interactive pokedex prompt and its entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

import requests

from pokedex.client import Client
from pokedex.commands import CommandError, Config, get_commands

PROMPT = "Pokedex > "
_REPORTED_ERRORS = (CommandError, requests.RequestException, ValueError, TypeError)


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(config: Config, lines: Iterable[str] | None = None) -> None:
    """Read commands from ``lines`` (standard input by default) and run them.

    Errors from a command are printed and the prompt continues; the loop ends
    when the input runs out.
    """
    source = iter(sys.stdin if lines is None else lines)
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        try:
            line = next(source)
        except StopIteration:
            print()
            return

        words = clean_input(line)
        if not words:
            continue

        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, *words[1:])
        except _REPORTED_ERRORS as exc:
            print(exc)


def main(argv: list[str] | None = None) -> int:
    """Start an interactive pokedex session."""
    parser = argparse.ArgumentParser(prog="pokedex", description="An interactive Pokedex.")
    parser.parse_args(argv)
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client))
    return 0


if __name__ == "__main__":
    sys.exit(main())