"""
Battle effects of held items.

Every check takes the holder's resolved HeldItemDefinition (or None) and
returns a multiplier or an amount; consuming the item is left to the caller
through consume_held_item.
"""

from typing import Optional

from battle_rules.constants import (
    CHOICE_ITEM_MULTIPLIER,
    EVIOLITE_MULTIPLIER,
    LEFTOVERS_HEAL_DIVISOR,
    LIFE_ORB_MULTIPLIER,
    LIFE_ORB_RECOIL_DIVISOR,
    PINCH_HEAL_DIVISOR,
    TYPE_BOOST_MULTIPLIER,
)
from battle_rules.data.items import get_held_item_by_id
from battle_rules.enums import HeldItemEffect, MoveCategory
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import ItemConsumedEvent
from battle_rules.schema.item import HeldItemDefinition
from battle_rules.schema.move import MoveDefinition
from battle_rules.schema.species_info import MonsterSpecies


def get_held_item(battler: BattlerState) -> Optional[HeldItemDefinition]:
    """Unknown held item ids behave like holding nothing"""
    return get_held_item_by_id(battler.monster.held_item)


def get_damage_multiplier(held_item: Optional[HeldItemDefinition], move: MoveDefinition) -> float:
    """Attacker-side item boost for a damaging move"""
    if held_item is None:
        return 1.0

    match held_item.effect_type:
        case HeldItemEffect.TYPE_BOOST if held_item.boost_type == move.type:
            return TYPE_BOOST_MULTIPLIER
        case HeldItemEffect.CHOICE_ATK if move.category == MoveCategory.PHYSICAL:
            return CHOICE_ITEM_MULTIPLIER
        case HeldItemEffect.CHOICE_SPATK if move.category == MoveCategory.SPECIAL:
            return CHOICE_ITEM_MULTIPLIER
        case HeldItemEffect.LIFE_ORB if move.is_damaging():
            return LIFE_ORB_MULTIPLIER
        case _:
            return 1.0


def get_eviolite_multiplier(held_item: Optional[HeldItemDefinition], species: MonsterSpecies) -> float:
    """Defensive boost for a holder whose species can still evolve"""
    if held_item is None or held_item.effect_type != HeldItemEffect.EVIOLITE:
        return 1.0
    return EVIOLITE_MULTIPLIER if species.can_evolve() else 1.0


def get_choice_scarf_multiplier(held_item: Optional[HeldItemDefinition]) -> float:
    if held_item is None or held_item.effect_type != HeldItemEffect.CHOICE_SPEED:
        return 1.0
    return CHOICE_ITEM_MULTIPLIER


def get_life_orb_recoil(held_item: Optional[HeldItemDefinition], max_hp: int, move: MoveDefinition) -> int:
    """1/10 of max HP (at least 1) after a damaging move, else 0"""
    if held_item is None or held_item.effect_type != HeldItemEffect.LIFE_ORB:
        return 0
    if not move.is_damaging():
        return 0
    return max(1, max_hp // LIFE_ORB_RECOIL_DIVISOR)


def focus_sash_check(held_item: Optional[HeldItemDefinition], current_hp: int, max_hp: int, damage: int) -> tuple[int, bool]:
    """
    Returns (damage, consumed). From full HP a knockout blow is reduced so the
    holder is left at 1 HP.
    """
    if held_item is None or held_item.effect_type != HeldItemEffect.FOCUS_SASH:
        return damage, False
    if current_hp == max_hp and damage >= current_hp:
        return current_hp - 1, True
    return damage, False


def pinch_heal_check(held_item: Optional[HeldItemDefinition], current_hp: int, max_hp: int) -> tuple[int, bool]:
    """Returns (heal amount, consumed). Triggers at or below half HP while still standing."""
    if held_item is None or held_item.effect_type != HeldItemEffect.PINCH_HEAL:
        return 0, False
    if 0 < current_hp <= max_hp // 2:
        return max(1, max_hp // PINCH_HEAL_DIVISOR), True
    return 0, False


def status_cure_check(held_item: Optional[HeldItemDefinition], battler: BattlerState) -> bool:
    if held_item is None or held_item.effect_type != HeldItemEffect.STATUS_CURE:
        return False
    return battler.monster.status is not None


def leftovers_heal(held_item: Optional[HeldItemDefinition], current_hp: int, max_hp: int) -> int:
    if held_item is None or held_item.effect_type != HeldItemEffect.LEFTOVERS:
        return 0
    if current_hp <= 0 or current_hp >= max_hp:
        return 0
    return max(1, max_hp // LEFTOVERS_HEAL_DIVISOR)


def consume_held_item(battler: BattlerState) -> Optional[ItemConsumedEvent]:
    item_id = battler.monster.held_item
    if item_id is None:
        return None
    battler.monster.held_item = None
    return ItemConsumedEvent(holder=battler.uid, item_id=item_id)


def get_held_item_message(effect_type: HeldItemEffect, monster_name: str, item_name: str) -> str:
    match effect_type:
        case HeldItemEffect.PINCH_HEAL:
            return f"{monster_name} restored its health using its {item_name}!"
        case HeldItemEffect.STATUS_CURE:
            return f"{monster_name}'s {item_name} cured its status!"
        case HeldItemEffect.FOCUS_SASH:
            return f"{monster_name} hung on using its {item_name}!"
        case HeldItemEffect.LIFE_ORB:
            return f"{monster_name} lost some of its HP!"
        case HeldItemEffect.LEFTOVERS:
            return f"{monster_name} restored a little HP using its {item_name}!"
        case _:
            return ""
