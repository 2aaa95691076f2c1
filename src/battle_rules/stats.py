from typing import Optional

from battle_rules.constants import NATURE_LOWERED_MULTIPLIER, NATURE_RAISED_MULTIPLIER
from battle_rules.enums import Nature, Stat
from battle_rules.schema.battle_state import StatBlock
from battle_rules.schema.monster_instance import EffortValues, IndividualValues
from battle_rules.schema.species_info import BaseStats


def _compute_stat(base: int, iv: int, ev: int, level: int, is_hp: bool, nature_multiplier: float = 1.0) -> int:
    if is_hp:
        return ((2 * base + iv + ev // 4) * level) // 100 + level + 10
    raw = ((2 * base + iv + ev // 4) * level) // 100 + 5
    return int(raw * nature_multiplier)


def calc_hp(base: int, iv: int, ev: int, level: int) -> int:
    return _compute_stat(base, iv, ev, level, is_hp=True)


def calc_stat(base: int, iv: int, ev: int, level: int, nature_multiplier: float = 1.0) -> int:
    return _compute_stat(base, iv, ev, level, is_hp=False, nature_multiplier=nature_multiplier)


def get_nature_multiplier(nature: Optional[Nature], stat: Stat) -> float:
    """1.1 for the stat a nature raises, 0.9 for the one it lowers, else 1.0 (no nature is neutral)"""
    if nature is None:
        return 1.0
    if stat == nature.raised_stat:
        return NATURE_RAISED_MULTIPLIER
    if stat == nature.lowered_stat:
        return NATURE_LOWERED_MULTIPLIER
    return 1.0


def calc_all_stats(base_stats: BaseStats, ivs: IndividualValues, evs: EffortValues, level: int, nature: Optional[Nature] = None) -> StatBlock:
    def non_hp(stat: Stat) -> int:
        field = stat.value
        return calc_stat(getattr(base_stats, field), getattr(ivs, field), getattr(evs, field), level, get_nature_multiplier(nature, stat))

    return StatBlock(
        hp=calc_hp(base_stats.hp, ivs.hp, evs.hp, level),
        atk=non_hp(Stat.ATTACK),
        defense=non_hp(Stat.DEFENSE),
        sp_atk=non_hp(Stat.SP_ATTACK),
        sp_def=non_hp(Stat.SP_DEFENSE),
        speed=non_hp(Stat.SPEED),
    )
