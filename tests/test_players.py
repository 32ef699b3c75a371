"""
Tests for the static player store
"""

import dataclasses

import pytest

from bandstand.players import SEED_PLAYERS, Instrument, PlayerRecord, PlayerStore


def test_seed_roster_size(store):
    assert len(store) == 11
    assert len(store.list()) == len(SEED_PLAYERS)


def test_every_key_matches_record_id(store):
    for player in store:
        assert store.get(player.id) is player


def test_list_contains_exactly_the_seed_ids(store):
    assert {p.id for p in store.list()} == {p.id for p in SEED_PLAYERS}


def test_get_known_player(store):
    steve = store.get("1000")

    assert steve == PlayerRecord(id="1000", name="Steve", instrument=Instrument.GUITAR)


def test_get_unknown_player_returns_none(store):
    assert store.get("9999") is None
    assert "9999" not in store
    assert "1000" in store


def test_from_seed_is_deterministic():
    first = PlayerStore.from_seed()
    second = PlayerStore.from_seed()

    assert first.list() == second.list()


def test_duplicate_ids_are_rejected():
    players = [
        PlayerRecord(id="1", name="A", instrument=Instrument.PIANO),
        PlayerRecord(id="1", name="B", instrument=Instrument.GUITAR),
    ]

    with pytest.raises(ValueError, match="Duplicate player id"):
        PlayerStore(players)


def test_records_are_immutable(store):
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.get("1000").name = "Bob"  # type: ignore[misc]


def test_list_returns_a_copy(store):
    players = store.list()
    players.clear()

    assert len(store.list()) == 11
