import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from app import create_app


PIKACHU = {
    "name": "Pikachu",
    "type": ["Electric"],
    "stats": {"hp": 35, "attack": 55, "defense": 40, "speed": 90},
    "damages": {"ground": 2, "flying": 0.5, "electric": 0.5},
    "misc": {"classification": "Mouse Pokemon", "capture_rate": 190},
}

CHARMANDER = {
    "name": "Charmander",
    "type": ["Fire"],
    "stats": {"hp": 39, "attack": 52, "defense": 43, "speed": 65},
    "damages": {"water": 2.0, "fire": 0.5, "ground": 2},
    "misc": {"classification": "Lizard Pokemon", "capture_rate": 45},
}

BULBASAUR = {
    "name": "Bulbasaur",
    "type": ["Grass", "Poison"],
    "stats": {"hp": 45, "attack": 49, "defense": 49, "speed": 45},
    "damages": {"fire": 2, "water": 0.5, "grass": 0.25},
    "misc": {"classification": "Seed Pokemon", "capture_rate": 45},
}


@pytest.fixture
def write_dataset(tmp_path):
    def _write(entries, name="pokemon.json"):
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_app(write_dataset):
    def _make(entries):
        return create_app({
            "TESTING": True,
            "POKEMON_DATA_PATH": str(write_dataset(entries)),
        })
    return _make


@pytest.fixture
def app(make_app):
    return make_app([BULBASAUR, CHARMANDER, PIKACHU])


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pikachu_client(make_app):
    """Single-entry dataset."""
    return make_app([PIKACHU]).test_client()
