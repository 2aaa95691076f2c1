from battle_rules.enums import Ability, StatusCondition, Type, Weather
from battle_rules.status import (
    apply_status_damage,
    can_act,
    can_inflict_status,
    cure_status,
    get_speed_multiplier,
    inflict_status,
)
from battle_rules.utils.mon_factory import create_battler, create_monster
from battle_rules.utils.rng import sequence_random


def test_poison_and_burn_turn_damage():
    monster = create_monster("himori")
    monster.status = StatusCondition.POISON
    assert apply_status_damage(monster, 120) == 120 - 15

    monster.status = StatusCondition.BURN
    assert apply_status_damage(monster, 120) == 120 - 7

    # Instance is not modified
    assert monster.current_hp == 120


def test_status_damage_is_at_least_one_and_never_negative():
    monster = create_monster("himori")
    monster.status = StatusCondition.BURN
    monster.current_hp = 1
    assert apply_status_damage(monster, 10) == 0

    monster.status = StatusCondition.PARALYSIS
    assert apply_status_damage(monster, 120) == 1


def test_sleep_wakes_on_low_roll():
    monster = create_monster("himori")
    monster.status = StatusCondition.SLEEP
    assert not can_act(monster, lambda: 0.5)
    assert monster.status == StatusCondition.SLEEP
    assert can_act(monster, lambda: 0.2)
    assert monster.status is None


def test_freeze_thaws_on_low_roll():
    monster = create_monster("himori")
    monster.status = StatusCondition.FREEZE
    assert not can_act(monster, lambda: 0.2)
    assert can_act(monster, lambda: 0.1)
    assert monster.status is None


def test_paralysis_keeps_status():
    monster = create_monster("himori")
    monster.status = StatusCondition.PARALYSIS
    assert not can_act(monster, lambda: 0.1)
    assert can_act(monster, lambda: 0.5)
    assert monster.status == StatusCondition.PARALYSIS


def test_healthy_and_damage_statuses_make_no_draw():
    def never_called() -> float:
        raise AssertionError("no random draw expected")

    monster = create_monster("himori")
    assert can_act(monster, never_called)
    monster.status = StatusCondition.POISON
    assert can_act(monster, never_called)


def test_type_immunities():
    monster = create_monster("himori")
    assert not can_inflict_status(monster, [Type.FIRE], StatusCondition.BURN)
    assert not can_inflict_status(monster, [Type.STEEL], StatusCondition.POISON)
    assert not can_inflict_status(monster, [Type.GRASS, Type.POISON], StatusCondition.POISON)
    assert not can_inflict_status(monster, [Type.ELECTRIC], StatusCondition.PARALYSIS)
    assert not can_inflict_status(monster, [Type.ICE], StatusCondition.FREEZE)
    assert can_inflict_status(monster, [Type.FIRE], StatusCondition.SLEEP)


def test_only_one_status_at_a_time():
    battler = create_battler(create_monster("kumaboshi"))
    first = inflict_status(battler, StatusCondition.POISON, source="toxic-spikes")
    assert first is not None
    assert first.source == "toxic-spikes"
    assert inflict_status(battler, StatusCondition.BURN) is None
    assert battler.monster.status == StatusCondition.POISON


def test_fainted_monsters_cannot_be_afflicted():
    monster = create_monster("kumaboshi")
    monster.current_hp = 0
    assert not can_inflict_status(monster, [Type.NORMAL], StatusCondition.SLEEP)


def test_cure_status():
    monster = create_monster("himori")
    assert cure_status(monster) is None

    monster.status = StatusCondition.BURN
    assert cure_status(monster, StatusCondition.POISON) is None
    assert monster.status == StatusCondition.BURN

    event = cure_status(monster, StatusCondition.BURN, source="item")
    assert event is not None
    assert event.status == StatusCondition.BURN
    assert monster.status is None


def test_speed_multiplier():
    battler = create_battler(create_monster("shizukumo", ability=Ability.SWIFT_SWIM.value))
    assert get_speed_multiplier(battler) == 1.0
    assert get_speed_multiplier(battler, Weather.RAIN) == 2.0
    battler.monster.status = StatusCondition.PARALYSIS
    assert get_speed_multiplier(battler, Weather.RAIN) == 1.0

    scarfed = create_battler(create_monster("himori", held_item="choice_scarf"))
    assert get_speed_multiplier(scarfed) == 1.5
    scarfed.monster.status = StatusCondition.PARALYSIS
    assert get_speed_multiplier(scarfed) == 0.75


def test_sequence_random_drives_recovery():
    monster = create_monster("himori")
    monster.status = StatusCondition.SLEEP
    random = sequence_random([0.9, 0.9, 0.0])
    assert not can_act(monster, random)
    assert not can_act(monster, random)
    assert can_act(monster, random)
