"""Experience gain and level-up"""

import logging
from typing import Optional

from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import EXP_DIVISOR, MAX_LEVEL, TRAINER_EXP_MULTIPLIER
from battle_rules.enums import FriendshipEvent
from battle_rules.friendship import apply_friendship_event_to_monster, get_friendship
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.results import ExpGainResult
from battle_rules.schema.species_info import MonsterSpecies
from battle_rules.stats import calc_hp

logger = logging.getLogger(__name__)


def get_base_exp_yield(species: MonsterSpecies) -> int:
    """Authored yield, else a quarter of the base stat total"""
    if species.base_exp_yield is not None:
        return species.base_exp_yield
    return species.base_stats.total() // 4


def calc_exp_gain(defeated_species: MonsterSpecies, defeated_level: int, is_trainer_battle: bool) -> int:
    """floor(base yield * level * (1.5 for trainer battles) / 7)"""
    trainer_bonus = TRAINER_EXP_MULTIPLIER if is_trainer_battle else 1.0
    return int(get_base_exp_yield(defeated_species) * defeated_level * trainer_bonus / EXP_DIVISOR)


def exp_for_level(level: int) -> int:
    """Total experience needed to reach a level (medium-fast group)"""
    return level**3


def level_up(monster: MonsterInstance, species: MonsterSpecies, config: RulesConfig = DEFAULT_RULES_CONFIG) -> bool:
    """
    Raise the level by one.

    The max HP gained is added to current HP (fainted monsters stay at 0),
    and the level-up friendship delta is applied. Returns False at the level cap.
    """
    if monster.level >= MAX_LEVEL:
        return False

    old_max_hp = calc_hp(species.base_stats.hp, monster.ivs.hp, monster.evs.hp, monster.level)
    monster.level += 1
    monster.exp = max(monster.exp, exp_for_level(monster.level))
    new_max_hp = calc_hp(species.base_stats.hp, monster.ivs.hp, monster.evs.hp, monster.level)
    if monster.current_hp > 0:
        monster.current_hp += new_max_hp - old_max_hp

    apply_friendship_event_to_monster(monster, FriendshipEvent.LEVEL_UP, species, config)
    logger.debug("%s grew to level %d", monster.uid, monster.level)
    return True


def grant_exp(monster: MonsterInstance, exp_gain: int, species: MonsterSpecies, config: RulesConfig = DEFAULT_RULES_CONFIG) -> ExpGainResult:
    """Add experience and level up as many times as it covers"""
    monster.exp += exp_gain
    levels_gained = 0
    while monster.level < MAX_LEVEL and monster.exp >= exp_for_level(monster.level + 1):
        level_up(monster, species, config)
        levels_gained += 1

    return ExpGainResult(levels_gained=levels_gained, new_level=monster.level, friendship=get_friendship(monster, species, config))


def exp_to_next_level(monster: MonsterInstance) -> Optional[int]:
    if monster.level >= MAX_LEVEL:
        return None
    return max(0, exp_for_level(monster.level + 1) - monster.exp)
