"""
Status condition model

A monster carries at most one of poison, burn, paralysis, sleep or freeze.
Poison and burn chip HP each turn, burn halves physical damage, paralysis
halves speed and sometimes stops the monster from moving, and sleep/freeze
block actions until a per-turn recovery roll succeeds.
"""

import logging
from typing import Iterable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from battle_rules.constants import (
    BURN_ATTACK_MULTIPLIER,
    BURN_DAMAGE_RATIO,
    FREEZE_THAW_CHANCE,
    PARALYSIS_IMMOBILIZE_CHANCE,
    PARALYSIS_SPEED_MULTIPLIER,
    POISON_DAMAGE_RATIO,
    SLEEP_WAKE_CHANCE,
    SWIFT_SWIM_SPEED_MULTIPLIER,
)
from battle_rules.enums import Ability, StatusCondition, Type, Weather
from battle_rules.held_items import get_choice_scarf_multiplier, get_held_item
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import StatusCuredEvent, StatusInflictedEvent
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class StatusEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    turn_damage_ratio: float  # fraction of max HP lost each turn
    immobilize_chance: float  # chance the monster cannot act
    speed_modifier: float
    attack_modifier: float  # applied to physical damage


STATUS_EFFECTS: dict[StatusCondition, StatusEffect] = {
    StatusCondition.POISON: StatusEffect(turn_damage_ratio=POISON_DAMAGE_RATIO, immobilize_chance=0.0, speed_modifier=1.0, attack_modifier=1.0),
    StatusCondition.BURN: StatusEffect(turn_damage_ratio=BURN_DAMAGE_RATIO, immobilize_chance=0.0, speed_modifier=1.0, attack_modifier=BURN_ATTACK_MULTIPLIER),
    StatusCondition.PARALYSIS: StatusEffect(turn_damage_ratio=0.0, immobilize_chance=PARALYSIS_IMMOBILIZE_CHANCE, speed_modifier=PARALYSIS_SPEED_MULTIPLIER, attack_modifier=1.0),
    # Sleep and freeze always immobilize; recovery is rolled separately in can_act
    StatusCondition.SLEEP: StatusEffect(turn_damage_ratio=0.0, immobilize_chance=1.0, speed_modifier=1.0, attack_modifier=1.0),
    StatusCondition.FREEZE: StatusEffect(turn_damage_ratio=0.0, immobilize_chance=1.0, speed_modifier=1.0, attack_modifier=1.0),
}

# Types that can never receive a given status
STATUS_TYPE_IMMUNITIES: dict[StatusCondition, frozenset[Type]] = {
    StatusCondition.POISON: frozenset({Type.POISON, Type.STEEL}),
    StatusCondition.BURN: frozenset({Type.FIRE}),
    StatusCondition.PARALYSIS: frozenset({Type.ELECTRIC}),
    StatusCondition.SLEEP: frozenset(),
    StatusCondition.FREEZE: frozenset({Type.ICE}),
}

STATUS_INFLICTED_MESSAGES = {
    StatusCondition.POISON: "{name} was poisoned!",
    StatusCondition.BURN: "{name} was burned!",
    StatusCondition.PARALYSIS: "{name} is paralyzed! It may be unable to move!",
    StatusCondition.SLEEP: "{name} fell asleep!",
    StatusCondition.FREEZE: "{name} was frozen solid!",
}

STATUS_CURED_MESSAGES = {
    StatusCondition.POISON: "{name} was cured of its poisoning.",
    StatusCondition.BURN: "{name}'s burn was healed.",
    StatusCondition.PARALYSIS: "{name} was cured of paralysis.",
    StatusCondition.SLEEP: "{name} woke up!",
    StatusCondition.FREEZE: "{name} thawed out!",
}

STATUS_BLOCKED_MESSAGES = {
    StatusCondition.PARALYSIS: "{name} is paralyzed! It can't move!",
    StatusCondition.SLEEP: "{name} is fast asleep.",
    StatusCondition.FREEZE: "{name} is frozen solid!",
}


def get_status_effect(status: StatusCondition) -> StatusEffect:
    return STATUS_EFFECTS[status]


def apply_status_damage(monster: MonsterInstance, max_hp: int) -> int:
    """
    Turn damage from poison or burn.

    Returns the monster's HP after the damage (at least 1 damage, never below
    0 HP). The instance itself is not modified.
    """
    if monster.status is None:
        return monster.current_hp
    effect = get_status_effect(monster.status)
    if effect.turn_damage_ratio == 0:
        return monster.current_hp
    damage = max(1, int(max_hp * effect.turn_damage_ratio))
    return max(0, monster.current_hp - damage)


def can_act(monster: MonsterInstance, random: RandomSource) -> bool:
    """
    Whether a monster may use a move this turn.

    Sleep wakes with chance 1/3 and freeze thaws with chance 0.2; a successful
    roll clears the status and lets the monster act. Paralysis keeps its status
    and stops the monster 25% of the time.
    """
    if monster.status is None:
        return True

    if monster.status == StatusCondition.SLEEP:
        if random() < SLEEP_WAKE_CHANCE:
            logger.debug("%s woke up", monster.uid)
            monster.status = None
            return True
        return False

    if monster.status == StatusCondition.FREEZE:
        if random() < FREEZE_THAW_CHANCE:
            logger.debug("%s thawed", monster.uid)
            monster.status = None
            return True
        return False

    effect = get_status_effect(monster.status)
    if effect.immobilize_chance > 0:
        return random() >= effect.immobilize_chance

    return True


def can_inflict_status(monster: MonsterInstance, types: Iterable[Type], status: StatusCondition) -> bool:
    """A status only lands on a healthy, non-fainted monster whose types are not immune to it"""
    if monster.current_hp <= 0 or monster.status is not None:
        return False
    return not any(t in STATUS_TYPE_IMMUNITIES[status] for t in types)


def inflict_status(target: BattlerState, status: StatusCondition, source: Optional[str] = None) -> Optional[StatusInflictedEvent]:
    """Attach a status if allowed. Returns the event, or None when nothing changed."""
    if not can_inflict_status(target.monster, target.types, status):
        return None
    target.monster.status = status
    logger.debug("%s afflicted with %s (source=%s)", target.uid, status.value, source)
    return StatusInflictedEvent(target=target.uid, status=status, source=source)


def cure_status(monster: MonsterInstance, status: Union[StatusCondition, Literal["all"]] = "all", source: Optional[str] = None) -> Optional[StatusCuredEvent]:
    """
    Clear a status. status="all" clears whatever the monster has; a specific
    status only clears that one. Returns None when there was nothing to cure.
    """
    current = monster.status
    if current is None:
        return None
    if status != "all" and status != current:
        return None
    monster.status = None
    return StatusCuredEvent(target=monster.uid, status=current, source=source)


def get_speed_multiplier(battler: BattlerState, weather: Weather = Weather.NONE) -> float:
    """Speed multiplier from status, speed abilities and Choice Scarf (paralysis x0.5, Swift Swim x2 in rain, scarf x1.5)"""
    multiplier = 1.0
    if battler.monster.status is not None:
        multiplier *= get_status_effect(battler.monster.status).speed_modifier
    if battler.has_ability(Ability.SWIFT_SWIM) and weather == Weather.RAIN:
        multiplier *= SWIFT_SWIM_SPEED_MULTIPLIER
    multiplier *= get_choice_scarf_multiplier(get_held_item(battler))
    return multiplier
