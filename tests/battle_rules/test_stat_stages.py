import pytest

from battle_rules.enums import Nature, Stat
from battle_rules.schema.battle_state import StatStages
from battle_rules.stat_stages import (
    apply_stat_changes,
    apply_stat_stage,
    get_accuracy_multiplier,
    get_stage_multiplier,
)
from battle_rules.stats import calc_hp, calc_stat, get_nature_multiplier
from battle_rules.utils.mon_factory import create_battler, create_monster


def test_stage_multipliers():
    assert get_stage_multiplier(0) == 1.0
    assert get_stage_multiplier(1) == 1.5
    assert get_stage_multiplier(-1) == pytest.approx(2 / 3)
    assert get_stage_multiplier(6) == 4.0
    assert get_stage_multiplier(-6) == 0.25
    assert get_stage_multiplier(9) == 4.0


def test_apply_stat_stage_floors():
    assert apply_stat_stage(100, 0) == 100
    assert apply_stat_stage(100, 2) == 200
    assert apply_stat_stage(101, -1) == 67
    assert apply_stat_stage(1, -6) == 1


def test_accuracy_uses_net_stage():
    assert get_accuracy_multiplier(0, 0) == 1.0
    assert get_accuracy_multiplier(1, 1) == 1.0
    assert get_accuracy_multiplier(0, 1) == 0.75
    assert get_accuracy_multiplier(6, -6) == 3.0


def test_apply_changes_clamps_and_reports():
    stages = StatStages(atk=5)
    messages, events = apply_stat_changes(stages, {Stat.ATTACK: 2, Stat.DEFENSE: -1}, "Himori", "himori-1")
    assert stages.atk == 6
    assert stages.defense == -1
    assert messages == ["Himori's Attack sharply rose!", "Himori's Defense fell!"]
    assert [event.delta for event in events] == [1, -1]
    assert events[0].new_stage == 6

    messages, events = apply_stat_changes(stages, {Stat.ATTACK: 1}, "Himori")
    assert messages == ["Himori's Attack won't go any higher!"]
    assert events == []


def test_change_intensity_wording():
    stages = StatStages()
    messages, _ = apply_stat_changes(stages, {Stat.SPEED: 2, Stat.SP_DEFENSE: -3, Stat.EVASION: 0}, "Kumaboshi")
    assert messages == ["Kumaboshi's Speed sharply rose!", "Kumaboshi's Sp. Def severely fell!"]


def test_stat_formulas():
    assert calc_hp(45, 31, 0, 50) == 120
    assert calc_stat(49, 31, 0, 50) == 69
    assert calc_hp(255, 31, 252, 100) == 714
    assert calc_stat(100, 0, 0, 1) == 7


def test_nature_multiplier():
    assert Nature.ADAMANT.raised_stat == Stat.ATTACK
    assert Nature.ADAMANT.lowered_stat == Stat.SP_ATTACK
    assert Nature.TIMID.raised_stat == Stat.SPEED
    assert Nature.TIMID.lowered_stat == Stat.ATTACK
    assert get_nature_multiplier(Nature.ADAMANT, Stat.ATTACK) == 1.1
    assert get_nature_multiplier(Nature.ADAMANT, Stat.SP_ATTACK) == 0.9
    assert get_nature_multiplier(Nature.ADAMANT, Stat.SPEED) == 1.0
    for neutral in (Nature.HARDY, Nature.DOCILE, Nature.SERIOUS, Nature.BASHFUL, Nature.QUIRKY):
        assert neutral.raised_stat is None and neutral.lowered_stat is None
    assert get_nature_multiplier(None, Stat.ATTACK) == 1.0
    assert calc_stat(49, 31, 0, 50, 1.1) == 75
    assert calc_stat(49, 31, 0, 50, 0.9) == 62


def test_nature_changes_battler_stats():
    plain = create_battler(create_monster("himori"))
    adamant = create_battler(create_monster("himori", nature=Nature.ADAMANT))
    assert adamant.stats.atk == int(plain.stats.atk * 1.1)
    assert adamant.stats.sp_atk == int(plain.stats.sp_atk * 0.9)
    assert adamant.stats.hp == plain.stats.hp
    assert adamant.stats.speed == plain.stats.speed
    hardy = create_battler(create_monster("himori", nature=Nature.HARDY))
    assert hardy.stats == plain.stats
