import pytest

from claim_engine.domain.entities import (
    Faction, FactionFlag, FactionKind, FactionPlayer, INFINITE_POWER, wilderness,
)
from claim_engine.domain.relations import Relation
from claim_engine.domain.value_objects import ClaimLocation


def make_faction(faction_id: str, **kwargs) -> Faction:
    return Faction(id=faction_id, tag=faction_id.capitalize(), **kwargs)


# --- Relation ---

def test_relations_are_ordered_by_closeness():
    assert Relation.ENEMY < Relation.NEUTRAL < Relation.TRUCE < Relation.ALLY < Relation.MEMBER
    assert Relation.ALLY.is_at_least(Relation.TRUCE)
    assert Relation.TRUCE.is_at_least(Relation.TRUCE)
    assert not Relation.NEUTRAL.is_at_least(Relation.TRUCE)
    assert Relation.ENEMY.is_at_most(Relation.NEUTRAL)


def test_relation_between_takes_the_less_close_wish():
    assert Relation.between(Relation.ALLY, Relation.ALLY) == Relation.ALLY
    assert Relation.between(Relation.ALLY, Relation.NEUTRAL) == Relation.NEUTRAL
    assert Relation.between(Relation.ENEMY, Relation.TRUCE) == Relation.ENEMY


def test_relation_from_name():
    assert Relation.from_name(" Ally ") == Relation.ALLY
    with pytest.raises(ValueError, match="Unknown relation"):
        Relation.from_name("frenemy")


# --- Faction relations ---

def test_relation_to_self_is_member():
    red = make_faction("red")
    assert red.relation_to(red) == Relation.MEMBER


def test_relation_needs_both_wishes():
    red = make_faction("red", relation_wishes={"blue": Relation.ALLY})
    blue = make_faction("blue", relation_wishes={"red": Relation.ALLY})
    lonely = make_faction("green", relation_wishes={"red": Relation.ALLY})

    assert red.relation_to(blue) == Relation.ALLY
    assert blue.relation_to(red) == Relation.ALLY
    assert red.relation_to(lonely) == Relation.NEUTRAL


def test_non_normal_factions_are_neutral_to_everyone():
    red = make_faction("red", relation_wishes={"wilderness": Relation.ALLY})
    assert wilderness().relation_to(red) == Relation.NEUTRAL
    assert red.relation_to(wilderness()) == Relation.NEUTRAL


def test_peaceful_factions_are_always_in_truce():
    red = make_faction("red", relation_wishes={"monks": Relation.ENEMY})
    monks = make_faction("monks", flags={FactionFlag.PEACEFUL: True})
    assert red.relation_to(monks) == Relation.TRUCE


# --- Land and power ---

def test_power_rounds_half_up():
    assert make_faction("red", power=2.5).power_rounded() == 3
    assert make_faction("red", power=2.49).power_rounded() == 2


def test_infinite_power_flag():
    faction = make_faction("red", power=1, flags={FactionFlag.INFINITE_POWER: True})
    assert faction.power_rounded() == INFINITE_POWER


def test_land_is_counted_per_world_and_in_total():
    faction = make_faction("red", land_by_world={"world": 4, "nether": 2})
    assert faction.land_rounded() == 6
    assert faction.land_rounded_in_world("nether") == 2
    assert faction.land_rounded_in_world("the_end") == 0


def test_land_inflation_means_more_power_than_land():
    assert make_faction("red", power=7, land_by_world={"world": 5}).has_land_inflation() is True
    assert make_faction("red", power=5, land_by_world={"world": 5}).has_land_inflation() is False
    assert make_faction("red", power=3, land_by_world={"world": 5}).has_land_inflation() is False


def test_classification():
    assert wilderness().is_none()
    assert not wilderness().is_normal()
    assert make_faction("safe", kind=FactionKind.SAFE).is_normal() is False
    assert make_faction("red").is_normal()


def test_describe_to_uses_your_faction_for_members():
    red = make_faction("red")
    alice = FactionPlayer(id="alice", name="Alice", faction_id="red")
    carol = FactionPlayer(id="carol", name="Carol", faction_id="blue")

    assert red.describe_to(alice, True) == "Your faction"
    assert red.describe_to(alice) == "your faction"
    assert red.describe_to(carol, True) == "Red"
    assert red.get_tag(carol) == "Red"


def test_location_neighbours():
    location = ClaimLocation(world_name="world", chunk_x=0, chunk_z=0)
    assert {(n.chunk_x, n.chunk_z) for n in location.neighbours()} == {(0, -1), (1, 0), (0, 1), (-1, 0)}
    assert all(n.world_name == "world" for n in location.neighbours())
    assert str(location) == "world:0,0"
