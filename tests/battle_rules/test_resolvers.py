import pytest

from battle_rules.data.species import SPECIES_DEFINITIONS
from battle_rules.errors import BattleRulesError, UnknownIdentifierError
from battle_rules.resolvers import create_item_resolver, create_move_resolver, create_species_resolver


def test_default_registries():
    assert create_species_resolver()("himori").id == "himori"
    assert create_move_resolver()("ember").name == "Ember"
    assert create_item_resolver()("potion").name == "Potion"
    assert create_item_resolver()("master-ball").effect.catch_rate_modifier == 255


def test_unknown_identifier_error():
    with pytest.raises(UnknownIdentifierError) as exc_info:
        create_species_resolver()("x")
    assert str(exc_info.value) == "unknown species: x"
    assert exc_info.value.kind == "species"
    assert exc_info.value.identifier == "x"


def test_error_hierarchy():
    with pytest.raises(LookupError):
        create_move_resolver()("no-such-move")
    with pytest.raises(BattleRulesError):
        create_item_resolver()("no-such-item")


def test_custom_registry():
    resolve = create_species_resolver({"himori": SPECIES_DEFINITIONS["himori"]})
    assert resolve("himori").name == SPECIES_DEFINITIONS["himori"].name
    with pytest.raises(UnknownIdentifierError):
        resolve("shizukumo")
