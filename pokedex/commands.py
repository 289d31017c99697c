"""The commands understood by the pokedex prompt."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

from pokedex.client import Client
from pokedex.models import Pokemon

CATCH_THRESHOLD = 40


class CommandError(Exception):
    """A command could not be carried out as asked."""


@dataclass
class Config:
    """State shared by the commands across one session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A prompt command: its usage, what it does and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def command_help(config: Config, *args: str) -> None:
    """Print the usage of every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(config: Config, *args: str) -> None:
    """Throw a pokeball at a pokemon; weaker pokemon are easier to catch."""
    if not args:
        raise CommandError("you must provide a pokemon")
    pokemon = config.client.get_pokemon(args[0])
    if pokemon.base_experience <= 0:
        raise CommandError(f"{pokemon.name} has no base experience")

    roll = config.rng.randrange(pokemon.base_experience)
    print(f"Throwing a Pokeball at {pokemon.name}...")
    if roll > CATCH_THRESHOLD:
        print(f"{pokemon.name} escaped!")
        return

    print(f"{pokemon.name} was caught!")
    print("You may now inspect it with the inspect command.")
    config.caught_pokemon[pokemon.name] = pokemon


def command_explore(config: Config, *args: str) -> None:
    """List the pokemon that can be found in a location area."""
    if not args:
        raise CommandError("you must provide a location")
    print(f"Exploring {args[0]}...")
    area = config.client.get_location(args[0])
    print("Found Pokemon:")
    for encounter in area.pokemon_encounters:
        print(f" - {encounter.pokemon.name}")


def command_inspect(config: Config, *args: str) -> None:
    """Show the details of a caught pokemon."""
    if not args:
        raise CommandError("you must provide a pokemon")
    pokemon = config.caught_pokemon.get(args[0])
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for entry in pokemon.stats:
        print(f"  - {entry.stat.name}: {entry.base_stat}")
    print("Types:")
    for slot in pokemon.types:
        print(f"  - {slot.type.name}")


def _show_locations(config: Config, page_url: str | None) -> None:
    page = config.client.list_locations(page_url)
    config.next_locations_url = page.next
    config.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(config: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_locations(config, config.next_locations_url)


def command_mapb(config: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if config.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_locations(config, config.prev_locations_url)


def command_pokedex(config: Config, *args: str) -> None:
    """List every pokemon caught so far."""
    print("Your Pokedex:")
    for pokemon in config.caught_pokemon.values():
        print(f" - {pokemon.name}")


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def get_commands() -> dict[str, Command]:
    """Return the commands keyed by the word that starts them."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "Attempt to catch a pokemon", command_catch),
        "explore": Command("explore <location_name>", "Explore a location", command_explore),
        "inspect": Command("inspect <pokemon_name>", "Inspect a pokemon", command_inspect),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "pokedex": Command("pokedex", "List the pokemon in your pokedex", command_pokedex),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }