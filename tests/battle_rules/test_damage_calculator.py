import math

from battle_rules.damage_calculator import DamageCalculator, calc_base_damage
from battle_rules.data.moves import MOVE_DEFINITIONS
from battle_rules.enums import Ability, Stat, StatusCondition
from battle_rules.schema.battle_state import BattlerState
from battle_rules.utils.mon_factory import create_battler, create_monster
from battle_rules.utils.rng import sequence_random

NO_CRIT_MIN_ROLL = [0.99, 0.0]  # crit roll misses, variance at 0.85


def make_mon(species_id: str, *, level: int = 50, ability: Ability | None = None, item: str | None = None, status: StatusCondition | None = None) -> BattlerState:
    monster = create_monster(species_id, level=level, ability=ability.value if ability is not None else None, held_item=item)
    monster.status = status
    return create_battler(monster)


def counting_random(value: float):
    draws = []

    def draw() -> float:
        draws.append(value)
        return value

    return draw, draws


def never_called() -> float:
    raise AssertionError("no random draw expected")


def test_base_damage_formula():
    assert calc_base_damage(50, 40, 70, 85) == 16
    assert calc_base_damage(1, 1, 1, 255) == 2


def test_fire_move_against_grass_poison_chain():
    attacker = make_mon("himori")
    defender = make_mon("kusakabi")
    result = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["ember"], sequence_random(NO_CRIT_MIN_ROLL))

    modifiers = dict(result.modifiers)
    assert result.is_stab
    assert modifiers["stab"] == 1.5
    assert modifiers["type_effectiveness"] == 2.0
    assert result.effectiveness == 2.0
    assert not result.is_critical

    base = calc_base_damage(50, 40, attacker.stats.sp_atk, defender.stats.sp_def)
    assert modifiers["base"] == base
    assert result.damage == math.floor(base * 1.5 * 2.0 * 0.85)
    assert "It's super effective!" in result.messages


def test_modifiers_follow_pipeline_order():
    attacker = make_mon("himori", item="charcoal", status=StatusCondition.BURN)
    defender = make_mon("konohana")
    result = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["fire-punch"], sequence_random([0.0, 0.5]))
    names = [name for name, _ in result.modifiers]
    assert names == ["base", "stab", "type_effectiveness", "item:charcoal", "burn", "critical", "variance"]


def test_status_move_deals_nothing_and_draws_nothing():
    result = DamageCalculator().calculate_damage(make_mon("himori"), make_mon("konohana"), MOVE_DEFINITIONS["growl"], never_called)
    assert result.damage == 0


def test_type_immunity_short_circuits():
    result = DamageCalculator().calculate_damage(make_mon("kumaboshi"), make_mon("yurabi"), MOVE_DEFINITIONS["tackle"], never_called)
    assert result.damage == 0
    assert result.effectiveness == 0.0
    assert not result.is_critical


def test_levitate_short_circuits():
    result = DamageCalculator().calculate_damage(make_mon("dogou"), make_mon("yurabi"), MOVE_DEFINITIONS["earthquake"], never_called)
    assert result.damage == 0
    assert result.events


def test_critical_hit_multiplies_by_one_and_a_half():
    attacker = make_mon("kumaboshi")
    defender = make_mon("himori")
    normal = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["tackle"], sequence_random([0.99, 0.0]))
    critical = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["tackle"], sequence_random([0.0, 0.0]))
    assert critical.is_critical
    assert dict(critical.modifiers)["critical"] == 1.5
    assert critical.damage > normal.damage


def test_critical_ignores_attack_drop_and_defense_boost():
    attacker = make_mon("kumaboshi")
    defender = make_mon("himori")
    calculator = DamageCalculator()
    neutral = calculator.calculate_base_damage(attacker, defender, MOVE_DEFINITIONS["tackle"])

    attacker.stages.set(Stat.ATTACK, -2)
    defender.stages.set(Stat.DEFENSE, 2)
    assert calculator.calculate_base_damage(attacker, defender, MOVE_DEFINITIONS["tackle"]) < neutral
    assert calculator.calculate_base_damage(attacker, defender, MOVE_DEFINITIONS["tackle"], critical=True) == neutral


def test_shell_armor_skips_the_critical_roll():
    random, draws = counting_random(0.0)
    result = DamageCalculator().calculate_damage(make_mon("kumaboshi"), make_mon("dogou", ability=Ability.SHELL_ARMOR), MOVE_DEFINITIONS["tackle"], random)
    assert not result.is_critical
    assert len(draws) == 1  # variance only


def test_friendship_raises_critical_chance():
    attacker = make_mon("kumaboshi")
    defender = make_mon("himori")
    roll = sequence_random([0.1, 0.0])
    assert not DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["tackle"], roll).is_critical

    attacker.monster.friendship = 220
    roll = sequence_random([0.1, 0.0])
    assert DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["tackle"], roll).is_critical


def test_burn_halves_physical_damage_unless_guts():
    defender = make_mon("himori")
    healthy = DamageCalculator().calculate_damage(make_mon("kumaboshi"), defender, MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    burned = DamageCalculator().calculate_damage(make_mon("kumaboshi", status=StatusCondition.BURN), defender, MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert dict(burned.modifiers)["burn"] == 0.5
    assert burned.damage < healthy.damage

    guts = DamageCalculator().calculate_damage(make_mon("kumaboshi", ability=Ability.GUTS, status=StatusCondition.BURN), defender, MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert "burn" not in dict(guts.modifiers)


def test_adaptability_stab():
    result = DamageCalculator().calculate_damage(make_mon("himori", ability=Ability.ADAPTABILITY), make_mon("kumaboshi"), MOVE_DEFINITIONS["ember"], sequence_random(NO_CRIT_MIN_ROLL))
    assert dict(result.modifiers)["stab"] == 2.0


def test_flash_fire_boost_applies_to_own_fire_moves():
    attacker = make_mon("hinomori", ability=Ability.FLASH_FIRE)
    attacker.flash_fire_active = True
    result = DamageCalculator().calculate_damage(attacker, make_mon("kumaboshi"), MOVE_DEFINITIONS["ember"], sequence_random(NO_CRIT_MIN_ROLL))
    assert dict(result.modifiers)["ability:flash_fire"] == 1.5


def test_eviolite_reduces_damage_to_unevolved_holder():
    result = DamageCalculator().calculate_damage(make_mon("kumaboshi"), make_mon("himori", item="eviolite"), MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert dict(result.modifiers)["defender_item:eviolite"] == 1 / 1.5

    evolved = DamageCalculator().calculate_damage(make_mon("kumaboshi"), make_mon("enjuu", item="eviolite"), MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert "defender_item:eviolite" not in dict(evolved.modifiers)


def test_sturdy_survives_at_one_hp():
    defender = make_mon("dogou", level=5)
    result = DamageCalculator().calculate_damage(make_mon("shizukumo", level=100), defender, MOVE_DEFINITIONS["bubble-beam"], sequence_random(NO_CRIT_MIN_ROLL))
    assert result.damage == defender.monster.current_hp - 1


def test_focus_sash_survives_and_reports_consumption():
    defender = make_mon("himori", level=5, item="focus_sash")
    result = DamageCalculator().calculate_damage(make_mon("shizukumo", level=100), defender, MOVE_DEFINITIONS["bubble-beam"], sequence_random(NO_CRIT_MIN_ROLL))
    assert result.damage == defender.monster.current_hp - 1
    assert result.consumed_item == "focus_sash"
    # Consuming the sash is left to the move executor
    assert defender.monster.held_item == "focus_sash"


def test_same_inputs_give_the_same_result():
    attacker = make_mon("enjuu", level=100)
    defender = make_mon("konohana", level=5, item="focus_sash")
    before = defender.model_copy(deep=True)

    first = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["flamethrower"], sequence_random(NO_CRIT_MIN_ROLL))
    second = DamageCalculator().calculate_damage(attacker, defender, MOVE_DEFINITIONS["flamethrower"], sequence_random(NO_CRIT_MIN_ROLL))
    assert first == second
    assert defender == before


def test_absorbing_defender_is_left_untouched():
    defender = make_mon("kawadojou", ability=Ability.WATER_ABSORB)
    defender.monster.current_hp = 10
    result = DamageCalculator().calculate_damage(make_mon("shizukumo"), defender, MOVE_DEFINITIONS["water-gun"], never_called)
    assert result.damage == 0
    assert result.defender_heal == defender.max_hp // 4
    assert defender.monster.current_hp == 10


def test_flash_fire_trigger_is_reported():
    defender = make_mon("hinomori", ability=Ability.FLASH_FIRE)
    result = DamageCalculator().calculate_damage(make_mon("himori"), defender, MOVE_DEFINITIONS["ember"], never_called)
    assert result.flash_fire_triggered
    assert not defender.flash_fire_active


def test_choice_items_boost_their_category_only():
    defender = make_mon("himori")
    band = make_mon("kumaboshi", item="choice_band")
    assert dict(DamageCalculator().calculate_damage(band, defender, MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL)).modifiers)["item:choice_band"] == 1.5
    assert "item:choice_band" not in dict(DamageCalculator().calculate_damage(band, defender, MOVE_DEFINITIONS["water-gun"], sequence_random(NO_CRIT_MIN_ROLL)).modifiers)

    specs = make_mon("kumaboshi", item="choice_specs")
    assert dict(DamageCalculator().calculate_damage(specs, defender, MOVE_DEFINITIONS["water-gun"], sequence_random(NO_CRIT_MIN_ROLL)).modifiers)["item:choice_specs"] == 1.5
    assert "item:choice_specs" not in dict(DamageCalculator().calculate_damage(specs, defender, MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL)).modifiers)


def test_move_recoil_and_rock_head():
    defender = make_mon("himori")
    result = DamageCalculator().calculate_damage(make_mon("kumaboshi"), defender, MOVE_DEFINITIONS["take-down"], sequence_random(NO_CRIT_MIN_ROLL))
    assert result.recoil == max(1, int(result.damage * 0.25))

    result = DamageCalculator().calculate_damage(make_mon("dogou", ability=Ability.ROCK_HEAD), defender, MOVE_DEFINITIONS["take-down"], sequence_random(NO_CRIT_MIN_ROLL))
    assert result.recoil == 0


def test_life_orb_boosts_and_recoils():
    attacker = make_mon("kumaboshi", item="life_orb")
    result = DamageCalculator().calculate_damage(attacker, make_mon("himori"), MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert dict(result.modifiers)["item:life_orb"] == 1.3
    assert result.recoil == attacker.max_hp // 10


def test_damage_is_at_least_one():
    result = DamageCalculator().calculate_damage(make_mon("mayumushi", level=1), make_mon("dogou", level=100), MOVE_DEFINITIONS["tackle"], sequence_random(NO_CRIT_MIN_ROLL))
    assert result.damage >= 1
