"""
Bag item use on a party monster.

Every function checks its preconditions first and reports an unmet one as
ItemUseResult(success=False, message=...). On success the monster is
updated in place.
"""

from typing import Literal, Optional, Union

from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import MAX_LEVEL
from battle_rules.enums import StatusCondition
from battle_rules.experience import level_up
from battle_rules.resolvers import MoveResolver
from battle_rules.schema.events import HealedEvent
from battle_rules.schema.item import ItemDefinition, ItemEffect
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.results import ItemUseResult
from battle_rules.schema.species_info import MonsterSpecies
from battle_rules.status import STATUS_CURED_MESSAGES, cure_status

# PP amounts at or above this restore a move completely
FULL_PP_RESTORE = 9999


def _display_name(monster: MonsterInstance) -> str:
    return monster.nickname or monster.species_id.capitalize()


def use_revive(monster: MonsterInstance, hp_percent: int, max_hp: int) -> ItemUseResult:
    if monster.current_hp > 0:
        return ItemUseResult(success=False, message="It can only be used on a fainted monster.")

    restored = min(max_hp, max(1, max_hp * hp_percent // 100))
    monster.current_hp = restored
    monster.status = None

    name = _display_name(monster)
    message = f"{name} was revived and fully restored!" if hp_percent >= 100 else f"{name} was revived!"
    return ItemUseResult(success=True, message=message, events=[HealedEvent(target=monster.uid, amount=restored, source="revive")])


def use_heal_hp(monster: MonsterInstance, amount: int, max_hp: int, percent: int = 0) -> ItemUseResult:
    """Heal a fixed amount, or percent of max HP when percent is given"""
    if monster.current_hp <= 0:
        return ItemUseResult(success=False, message="It can't be used on a fainted monster.")
    if monster.current_hp >= max_hp:
        return ItemUseResult(success=False, message="HP is already full.")

    heal = max(1, max_hp * percent // 100) if percent > 0 else amount
    new_hp = min(max_hp, monster.current_hp + heal)
    healed = new_hp - monster.current_hp
    monster.current_hp = new_hp
    return ItemUseResult(
        success=True,
        message=f"{_display_name(monster)} recovered {healed} HP.",
        events=[HealedEvent(target=monster.uid, amount=healed, source="item")],
    )


def use_heal_status(monster: MonsterInstance, status: Union[StatusCondition, Literal["all"]]) -> ItemUseResult:
    if monster.current_hp <= 0:
        return ItemUseResult(success=False, message="It can't be used on a fainted monster.")
    current = monster.status
    event = cure_status(monster, status, source="item")
    if event is None or current is None:
        return ItemUseResult(success=False, message="It won't have any effect.")
    return ItemUseResult(success=True, message=STATUS_CURED_MESSAGES[current].format(name=_display_name(monster)), events=[event])


def use_full_restore(monster: MonsterInstance, max_hp: int) -> ItemUseResult:
    """Full HP and no status. Fails only when there is nothing to fix."""
    if monster.current_hp <= 0:
        return ItemUseResult(success=False, message="It can't be used on a fainted monster.")
    if monster.current_hp >= max_hp and monster.status is None:
        return ItemUseResult(success=False, message="It won't have any effect.")

    events = []
    healed = max_hp - monster.current_hp
    if healed > 0:
        monster.current_hp = max_hp
        events.append(HealedEvent(target=monster.uid, amount=healed, source="item"))
    cured = cure_status(monster, "all", source="item")
    if cured is not None:
        events.append(cured)
    return ItemUseResult(success=True, message=f"{_display_name(monster)} was fully restored!", events=events)


def use_heal_pp(monster: MonsterInstance, move_index: int, amount: Union[int, Literal["all"]], move_resolver: MoveResolver, all_moves: bool = False) -> ItemUseResult:
    """
    Restore PP to one move (move_index) or to every move (all_moves).

    amount "all" or >= 9999 restores to the move's max PP.
    """
    if monster.current_hp <= 0:
        return ItemUseResult(success=False, message="It can't be used on a fainted monster.")

    def restore(index: int) -> int:
        slot = monster.moves[index]
        max_pp = move_resolver(slot.move_id).pp
        if amount == "all" or amount >= FULL_PP_RESTORE:
            new_pp = max_pp
        else:
            new_pp = min(max_pp, slot.current_pp + amount)
        restored = max(0, new_pp - slot.current_pp)
        slot.current_pp = max(slot.current_pp, new_pp)
        return restored

    if all_moves:
        restored = sum(restore(index) for index in range(len(monster.moves)))
        if restored == 0:
            return ItemUseResult(success=False, message="PP is already full for every move.")
        return ItemUseResult(success=True, message="PP was restored for every move.")

    if move_index < 0 or move_index >= len(monster.moves):
        return ItemUseResult(success=False, message="There is no move in that slot.")

    move_id = monster.moves[move_index].move_id
    restored = restore(move_index)
    if restored == 0:
        return ItemUseResult(success=False, message=f"{move_resolver(move_id).name}'s PP is already full.")
    return ItemUseResult(success=True, message=f"{restored} PP was restored.")


def can_use_level_up(monster: MonsterInstance, max_level: int = MAX_LEVEL) -> bool:
    return monster.current_hp > 0 and monster.level < max_level


def use_level_up(monster: MonsterInstance, species: MonsterSpecies, config: RulesConfig = DEFAULT_RULES_CONFIG) -> ItemUseResult:
    if not can_use_level_up(monster):
        return ItemUseResult(success=False, message="It won't have any effect.")
    level_up(monster, species, config)
    return ItemUseResult(success=True, message=f"{_display_name(monster)} grew to level {monster.level}!")


def can_use_item(effect: ItemEffect, monster: MonsterInstance, max_hp: int, move_resolver: Optional[MoveResolver] = None) -> bool:
    """Whether using the effect on this monster would do anything"""
    match effect.type:
        case "revive":
            return monster.current_hp <= 0
        case "heal_hp":
            return 0 < monster.current_hp < max_hp
        case "heal_status":
            if monster.current_hp <= 0 or monster.status is None:
                return False
            return effect.status == "all" or effect.status == monster.status
        case "full_restore":
            return monster.current_hp > 0 and (monster.current_hp < max_hp or monster.status is not None)
        case "heal_pp":
            if monster.current_hp <= 0 or move_resolver is None:
                return False
            return any(slot.current_pp < move_resolver(slot.move_id).pp for slot in monster.moves)
        case "level_up":
            return can_use_level_up(monster)
        case _:
            return False


def use_item(
    item: ItemDefinition,
    monster: MonsterInstance,
    max_hp: int,
    move_resolver: Optional[MoveResolver] = None,
    species: Optional[MonsterSpecies] = None,
    move_index: int = -1,
    config: RulesConfig = DEFAULT_RULES_CONFIG,
) -> ItemUseResult:
    """Apply a bag item's effect to a party monster"""
    effect = item.effect
    match effect.type:
        case "revive":
            return use_revive(monster, effect.hp_percent, max_hp)
        case "heal_hp":
            return use_heal_hp(monster, effect.amount, max_hp, effect.percent)
        case "heal_status":
            return use_heal_status(monster, effect.status)
        case "full_restore":
            return use_full_restore(monster, max_hp)
        case "heal_pp":
            if move_resolver is None:
                return ItemUseResult(success=False, message="It won't have any effect.")
            return use_heal_pp(monster, move_index, effect.amount, move_resolver, effect.all_moves)
        case "level_up":
            if species is None:
                return ItemUseResult(success=False, message="It won't have any effect.")
            return use_level_up(monster, species, config)
        case _:
            return ItemUseResult(success=False, message=f"{item.name} can't be used here.")
