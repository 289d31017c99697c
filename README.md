# pokedex

An interactive command-line Pokedex. Page through the location areas of the
Pokemon world, see which Pokemon live there, try to catch them and inspect
the ones you caught. Data comes from the public PokeAPI. Raw responses are
kept in memory for five minutes, so paging back and forth stays fast.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the prompt:

```
pokedex
```

The command takes no options other than `--help`. Commands are typed at the
`Pokedex > ` prompt. Input is lower-cased and split on whitespace, so case
and extra spaces do not matter. An unrecognised command prints
`Unknown command`. When a command fails, for example because a name is
missing or a request fails, the error is printed and the prompt carries on.
The session ends with `exit` or at the end of input.

| Command                    | What it does                               |
|----------------------------|--------------------------------------------|
| `help`                     | Show the list of commands                  |
| `map`                      | Show the next page of location areas       |
| `mapb`                     | Show the previous page of location areas   |
| `explore <location_name>`  | List the Pokemon found in a location area  |
| `catch <pokemon_name>`     | Throw a Pokeball and try to catch a Pokemon |
| `inspect <pokemon_name>`   | Show height, weight, stats and types of a caught Pokemon |
| `pokedex`                  | List every Pokemon you have caught         |
| `exit`                     | Leave the Pokedex                          |

A session might look like this:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
 ...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
Height: 9
Weight: 100
Stats:
  - hp: 20
  ...
Types:
  - water
```

`mapb` on the first page prints `you're on the first page`. A catch draws a
random number below the Pokemon's base experience and succeeds when it is 40
or less, so Pokemon with more base experience are harder to catch.

## Using it as a library

The pieces behind the prompt can be used on their own. `pokedex.client.Client`
fetches documents and returns them as dataclasses from `pokedex.models`
(`LocationPage`, `LocationArea`, `Pokemon` and friends). Network failures
surface as `requests` exceptions.

```python
from pokedex.client import Client

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)

    pikachu = client.get_pokemon("pikachu")
    print(pikachu.name, pikachu.base_experience)
```

`pokedex.cache.Cache` is a small thread-safe, time-expiring key/value store.
A background thread removes entries once they are older than the interval
the cache was created with. `get` returns `None` for a missing key.

```python
from pokedex.cache import Cache

with Cache(5.0) as cache:
    cache.add("key", b"value")
    print(cache.get("key"))
```

`pokedex.repl.clean_input` splits a line of input into lower-case words, and
`pokedex.repl.start_repl` runs the command loop over any iterable of lines,
which makes scripted sessions easy:

```python
from pokedex.client import Client
from pokedex.commands import Config
from pokedex.repl import start_repl

with Client() as client:
    start_repl(Config(client=client), ["map", "map", "mapb"])
```

The commands live in `pokedex.commands`. `get_commands()` returns them keyed
by name, and a `Config` holds the session state: the client, the paging URLs,
the caught Pokemon and the random generator used for catching.

## Limitations

Caught Pokemon are held in memory only. The Pokedex is empty at the start of
every session and is not saved when it ends. The response cache is in memory
as well and does not outlive the process.