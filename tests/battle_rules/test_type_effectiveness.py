import itertools

from battle_rules.enums import Type
from battle_rules.type_effectiveness import TypeEffectiveness


def test_every_pair_is_in_the_effectiveness_domain():
    for attacking, defending in itertools.product(Type, Type):
        assert TypeEffectiveness.get_effectiveness(attacking, defending) in (0.0, 0.5, 1.0, 2.0)


def test_unlisted_pair_is_neutral():
    assert TypeEffectiveness.get_effectiveness(Type.NORMAL, Type.FIRE) == 1.0


def test_chart_is_not_symmetric():
    assert TypeEffectiveness.get_effectiveness(Type.GROUND, Type.FLYING) == 0.0
    assert TypeEffectiveness.get_effectiveness(Type.FLYING, Type.GROUND) == 1.0


def test_dual_type_is_product_and_commutative():
    for attacking, first, second in itertools.product(Type, Type, Type):
        forward = TypeEffectiveness.calculate_effectiveness(attacking, [first, second])
        backward = TypeEffectiveness.calculate_effectiveness(attacking, [second, first])
        expected = TypeEffectiveness.get_effectiveness(attacking, first) * TypeEffectiveness.get_effectiveness(attacking, second)
        assert forward == backward == expected


def test_double_super_effective():
    assert TypeEffectiveness.calculate_effectiveness(Type.ICE, [Type.GRASS, Type.FLYING]) == 4.0


def test_immunity_in_chain_forces_zero():
    assert TypeEffectiveness.calculate_effectiveness(Type.ELECTRIC, [Type.WATER, Type.GROUND]) == 0.0


def test_resist_and_weakness_cancel():
    assert TypeEffectiveness.calculate_effectiveness(Type.FIRE, [Type.GRASS, Type.WATER]) == 1.0


def test_fire_against_grass_poison():
    assert TypeEffectiveness.calculate_effectiveness(Type.FIRE, [Type.GRASS, Type.POISON]) == 2.0


def test_fairy_matchups():
    assert TypeEffectiveness.is_immune(Type.DRAGON, Type.FAIRY)
    assert TypeEffectiveness.is_super_effective(Type.FAIRY, Type.DARK)
    assert TypeEffectiveness.is_not_very_effective(Type.FAIRY, Type.STEEL)


def test_effectiveness_descriptions():
    assert TypeEffectiveness.get_effectiveness_description(0.0) == "It has no effect!"
    assert TypeEffectiveness.get_effectiveness_description(0.25) == "It's not very effective..."
    assert TypeEffectiveness.get_effectiveness_description(4.0) == "It's super effective!"
    assert TypeEffectiveness.get_effectiveness_description(1.0) == ""
