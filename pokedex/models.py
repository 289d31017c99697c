"""Typed views of the location and pokemon documents served by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string or null, got {value!r}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key} must be an array, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the full resource."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _mapping(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(data, "results")],
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A pokemon that may be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _mapping(data, "encounter")
        return cls(pokemon=NamedResource.from_dict(data.get("pokemon")))


@dataclass(frozen=True)
class LocationArea:
    """A single location area with the pokemon found there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    names: list[str] = field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _mapping(data, "location area")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            names=[
                _str(_mapping(n, "name entry"), "name") for n in _list(data, "names")
            ],
            pokemon_encounters=[
                PokemonEncounter.from_dict(e) for e in _list(data, "pokemon_encounters")
            ],
        )


@dataclass(frozen=True)
class StatEntry:
    """A base stat of a pokemon."""

    stat: NamedResource = field(default_factory=NamedResource)
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> StatEntry:
        data = _mapping(data, "stat")
        return cls(
            stat=NamedResource.from_dict(data.get("stat")),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass(frozen=True)
class TypeSlot:
    """One of a pokemon's types and the slot it fills."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> TypeSlot:
        data = _mapping(data, "type slot")
        return cls(
            slot=_int(data, "slot"),
            type=NamedResource.from_dict(data.get("type")),
        )


@dataclass(frozen=True)
class Pokemon:
    """The parts of a pokemon document the pokedex works with."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    stats: list[StatEntry] = field(default_factory=list)
    types: list[TypeSlot] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data, "pokemon")
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            species=NamedResource.from_dict(data.get("species")),
            abilities=[
                NamedResource.from_dict(_mapping(a, "ability").get("ability"))
                for a in _list(data, "abilities")
            ],
            forms=[NamedResource.from_dict(f) for f in _list(data, "forms")],
            stats=[StatEntry.from_dict(s) for s in _list(data, "stats")],
            types=[TypeSlot.from_dict(t) for t in _list(data, "types")],
        )