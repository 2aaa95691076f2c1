"""
Evolution checks

Each evolution edge has a minimum level and an optional condition tag:

- friendship: friendship of at least 220
- time:day / time:night
- item:<id>: that item was just used on the monster
- trade
- location:<map id>
- move:<move id>: the monster knows the move
- party:<species id>: that species is in the party

Unknown tags never match.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import FRIENDSHIP_EVOLUTION_THRESHOLD
from battle_rules.enums import TimeOfDay
from battle_rules.friendship import get_friendship
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.species_info import MonsterSpecies
from battle_rules.stats import calc_hp

logger = logging.getLogger(__name__)


class EvolutionContext(BaseModel):
    """Circumstances an evolution check is made in"""

    used_item_id: Optional[str] = None
    time_of_day: Optional[TimeOfDay] = None
    friendship: Optional[int] = Field(default=None, ge=0, le=255)
    is_trade: bool = False
    current_map_id: Optional[str] = None
    known_moves: list[str] = Field(default_factory=list)
    party_species_ids: list[str] = Field(default_factory=list)


def check_condition(condition: Optional[str], context: EvolutionContext) -> bool:
    if condition is None:
        return True

    kind, _, value = condition.partition(":")
    match kind:
        case "friendship":
            return (context.friendship or 0) >= FRIENDSHIP_EVOLUTION_THRESHOLD
        case "time":
            return context.time_of_day is not None and context.time_of_day.value == value
        case "item":
            return context.used_item_id == value
        case "trade":
            return context.is_trade
        case "location":
            return context.current_map_id == value
        case "move":
            return value in context.known_moves
        case "party":
            return value in context.party_species_ids
        case _:
            logger.warning("unknown evolution condition %r", condition)
            return False


def check_evolution(
    monster: MonsterInstance,
    species: MonsterSpecies,
    context: Optional[EvolutionContext] = None,
    config: RulesConfig = DEFAULT_RULES_CONFIG,
) -> Optional[str]:
    """
    Target species id of the first edge whose level and condition are met, else None.

    Friendship not given in the context is resolved from the monster, its
    species and then config.default_friendship.
    """
    context = context or EvolutionContext()
    if context.friendship is None:
        context = context.model_copy(update={"friendship": get_friendship(monster, species, config)})
    for edge in species.evolves_to:
        if monster.level >= edge.level and check_condition(edge.condition, context):
            return edge.target_id
    return None


def evolve(monster: MonsterInstance, old_species: MonsterSpecies, new_species: MonsterSpecies) -> None:
    """Switch species in place, adding the max HP gained to current HP (fainted monsters stay at 0)"""
    old_max_hp = calc_hp(old_species.base_stats.hp, monster.ivs.hp, monster.evs.hp, monster.level)
    new_max_hp = calc_hp(new_species.base_stats.hp, monster.ivs.hp, monster.evs.hp, monster.level)

    monster.species_id = new_species.id
    if monster.current_hp > 0:
        monster.current_hp = max(1, min(new_max_hp, monster.current_hp + new_max_hp - old_max_hp))
    logger.debug("%s evolved from %s into %s", monster.uid, old_species.id, new_species.id)
