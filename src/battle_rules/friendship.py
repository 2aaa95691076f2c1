"""
Friendship (affinity) tracker

Friendship is a 0-255 counter. Unset values resolve, in order, to the
instance's own value, the species' base_friendship, then the configured
default (70).
"""

from typing import Optional

from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import (
    FRIENDSHIP_BONUS_THRESHOLD,
    FRIENDSHIP_CRITICAL_BONUS,
    FRIENDSHIP_EVOLUTION_THRESHOLD,
    FRIENDSHIP_HIGH_BAND,
    FRIENDSHIP_LOW_BAND,
    FRIENDSHIP_STATUS_RECOVERY_CHANCE,
    MAX_FRIENDSHIP,
    MIN_FRIENDSHIP,
)
from battle_rules.enums import FriendshipEvent, FriendshipLevel
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.species_info import EvolutionEdge, MonsterSpecies

# Deltas per band: (friendship < 100, < 200, >= 200)
FRIENDSHIP_DELTAS: dict[FriendshipEvent, tuple[int, int, int]] = {
    FriendshipEvent.LEVEL_UP: (5, 3, 2),
    FriendshipEvent.BATTLE_WIN: (3, 2, 1),
    FriendshipEvent.HEAL: (1, 1, 1),
    FriendshipEvent.FAINT: (-1, -1, -1),
    FriendshipEvent.ITEM_USE: (3, 2, 1),
    FriendshipEvent.BITTER_MEDICINE: (-3, -2, -1),
}

FRIENDSHIP_DESCRIPTIONS = {
    FriendshipLevel.LOW: "It's still wary of you.",
    FriendshipLevel.NORMAL: "It's getting used to you.",
    FriendshipLevel.HIGH: "It's very friendly toward you!",
    FriendshipLevel.MAX: "It trusts you completely!",
}


def clamp_friendship(value: int) -> int:
    return max(MIN_FRIENDSHIP, min(MAX_FRIENDSHIP, value))


def get_friendship(monster: MonsterInstance, species: Optional[MonsterSpecies] = None, config: RulesConfig = DEFAULT_RULES_CONFIG) -> int:
    """Resolve friendship: instance value, then species base_friendship, then the configured default"""
    if monster.friendship is not None:
        return monster.friendship
    if species is not None and species.base_friendship is not None:
        return species.base_friendship
    return config.default_friendship


def get_friendship_delta(friendship: int, event: FriendshipEvent) -> int:
    low, mid, high = FRIENDSHIP_DELTAS[event]
    if friendship < FRIENDSHIP_LOW_BAND:
        return low
    if friendship < FRIENDSHIP_HIGH_BAND:
        return mid
    return high


def apply_friendship_event(friendship: int, event: FriendshipEvent) -> int:
    return clamp_friendship(friendship + get_friendship_delta(friendship, event))


def apply_friendship_event_to_monster(monster: MonsterInstance, event: FriendshipEvent, species: Optional[MonsterSpecies] = None, config: RulesConfig = DEFAULT_RULES_CONFIG) -> int:
    """Resolve, update and store the monster's friendship. Returns the new value."""
    monster.friendship = apply_friendship_event(get_friendship(monster, species, config), event)
    return monster.friendship


def get_friendship_level(friendship: int) -> FriendshipLevel:
    if friendship >= MAX_FRIENDSHIP:
        return FriendshipLevel.MAX
    if friendship >= 150:
        return FriendshipLevel.HIGH
    if friendship >= 50:
        return FriendshipLevel.NORMAL
    return FriendshipLevel.LOW


def get_friendship_description(friendship: int) -> str:
    return FRIENDSHIP_DESCRIPTIONS[get_friendship_level(friendship)]


def get_critical_rate_bonus(friendship: int) -> float:
    """Extra critical-hit chance: 1/8 at 220 friendship and above, else 0"""
    return FRIENDSHIP_CRITICAL_BONUS if friendship >= FRIENDSHIP_BONUS_THRESHOLD else 0.0


def get_status_recovery_chance(friendship: int) -> float:
    """Per-turn chance to shake off a status, only at maximum friendship"""
    return FRIENDSHIP_STATUS_RECOVERY_CHANCE if friendship >= MAX_FRIENDSHIP else 0.0


def can_evolve_by_friendship(monster: MonsterInstance, species: MonsterSpecies, config: RulesConfig = DEFAULT_RULES_CONFIG) -> Optional[EvolutionEdge]:
    """The first "friendship" evolution edge, when friendship has reached 220"""
    if get_friendship(monster, species, config) < FRIENDSHIP_EVOLUTION_THRESHOLD:
        return None
    for edge in species.evolves_to:
        if edge.condition == "friendship":
            return edge
    return None
