import json

import pytest

from pokedex.models import (
    LocationArea,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonEncounter,
    StatEntry,
    TypeSlot,
)

BASE = "https://pokeapi.co/api/v2"


def test_named_resource_from_dict():
    res = NamedResource.from_dict({"name": "pikachu", "url": BASE + "/pokemon/25/"})
    assert res.name == "pikachu"
    assert res.url == BASE + "/pokemon/25/"


def test_named_resource_missing_fields_default_empty():
    res = NamedResource.from_dict({})
    assert res == NamedResource("", "")


def test_named_resource_rejects_non_object():
    with pytest.raises(TypeError):
        NamedResource.from_dict(["pikachu"])


def test_location_page_from_json():
    doc = json.loads(
        json.dumps(
            {
                "count": 2,
                "next": BASE + "/location-area?offset=20&limit=20",
                "previous": None,
                "results": [
                    {"name": "canalave-city-area", "url": BASE + "/location-area/1/"},
                    {"name": "eterna-city-area", "url": BASE + "/location-area/2/"},
                ],
            }
        )
    )
    page = LocationPage.from_dict(doc)
    assert page.count == 2
    assert page.next == BASE + "/location-area?offset=20&limit=20"
    assert page.previous is None
    assert [r.name for r in page.results] == ["canalave-city-area", "eterna-city-area"]


def test_location_page_empty_defaults():
    page = LocationPage.from_dict({})
    assert page == LocationPage(count=0, next=None, previous=None, results=[])


def test_location_page_bad_next_type():
    with pytest.raises(TypeError):
        LocationPage.from_dict({"next": 5})


def test_location_page_bad_count_type():
    with pytest.raises(TypeError):
        LocationPage.from_dict({"count": "many"})


def test_pokemon_encounter_from_dict():
    enc = PokemonEncounter.from_dict(
        {"pokemon": {"name": "tentacool", "url": BASE + "/pokemon/72/"}}
    )
    assert enc.pokemon.name == "tentacool"


def test_location_area_from_dict():
    area = LocationArea.from_dict(
        {
            "id": 1,
            "name": "canalave-city-area",
            "game_index": 1,
            "location": {"name": "canalave-city", "url": BASE + "/location/1/"},
            "names": [{"name": "Canalave City", "language": {"name": "en"}}],
            "pokemon_encounters": [
                {"pokemon": {"name": "tentacool"}, "version_details": []},
                {"pokemon": {"name": "tentacruel"}, "version_details": []},
            ],
            "encounter_method_rates": [],
        }
    )
    assert area.id == 1
    assert area.name == "canalave-city-area"
    assert area.location.name == "canalave-city"
    assert area.names == ["Canalave City"]
    assert [e.pokemon.name for e in area.pokemon_encounters] == [
        "tentacool",
        "tentacruel",
    ]


def test_location_area_encounters_must_be_list():
    with pytest.raises(TypeError):
        LocationArea.from_dict({"pokemon_encounters": {"pokemon": {}}})


def test_stat_entry_from_dict():
    stat = StatEntry.from_dict(
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": BASE + "/stat/1/"}}
    )
    assert stat.stat.name == "hp"
    assert stat.base_stat == 35
    assert stat.effort == 0


def test_type_slot_from_dict():
    slot = TypeSlot.from_dict({"slot": 1, "type": {"name": "electric"}})
    assert slot.slot == 1
    assert slot.type.name == "electric"


def test_pokemon_from_dict():
    doc = {
        "id": 25,
        "name": "pikachu",
        "base_experience": 112,
        "height": 4,
        "weight": 60,
        "order": 35,
        "is_default": True,
        "species": {"name": "pikachu"},
        "abilities": [
            {"ability": {"name": "static"}, "is_hidden": False, "slot": 1},
        ],
        "forms": [{"name": "pikachu"}],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack"}},
        ],
        "types": [{"slot": 1, "type": {"name": "electric"}}],
        "sprites": {"front_default": None},
        "held_items": [],
    }
    mon = Pokemon.from_dict(doc)
    assert mon.name == "pikachu"
    assert mon.base_experience == 112
    assert mon.height == 4
    assert mon.weight == 60
    assert mon.is_default is True
    assert [a.name for a in mon.abilities] == ["static"]
    assert [(s.stat.name, s.base_stat) for s in mon.stats] == [
        ("hp", 35),
        ("attack", 55),
    ]
    assert [t.type.name for t in mon.types] == ["electric"]


def test_pokemon_null_fields_become_zero():
    mon = Pokemon.from_dict({"name": "missingno", "base_experience": None})
    assert mon.base_experience == 0
    assert mon.stats == []
    assert mon.types == []


def test_pokemon_rejects_bool_as_int():
    with pytest.raises(TypeError):
        Pokemon.from_dict({"height": True})


def test_pokemon_rejects_float_as_int():
    with pytest.raises(TypeError):
        Pokemon.from_dict({"weight": 1.5})


def test_models_are_frozen():
    res = NamedResource.from_dict({"name": "a"})
    with pytest.raises(AttributeError):
        res.name = "b"
    assert res.name == "a"
    assert res == NamedResource("a", "")