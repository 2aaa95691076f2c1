"""
End-of-turn effects

EndTurnEffectsProcessor runs the per-battler effects listed in
EndTurnBattlerEffect, in that order, for every battler that is still
standing. Turn order between battlers is the caller's business; battlers
are processed in the order they are given.
"""

import logging

from battle_rules.abilities import trigger_passive
from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.enums import EndTurnBattlerEffect, HeldItemEffect, PassiveEvent, StatusCondition
from battle_rules.friendship import get_friendship, get_status_recovery_chance
from battle_rules.held_items import (
    consume_held_item,
    get_held_item,
    get_held_item_message,
    leftovers_heal,
    pinch_heal_check,
    status_cure_check,
)
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import DamageDealtEvent, FaintedEvent, HealedEvent
from battle_rules.schema.results import EndTurnResult
from battle_rules.status import STATUS_CURED_MESSAGES, apply_status_damage, cure_status
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)

STATUS_DAMAGE_MESSAGES = {
    StatusCondition.POISON: "{name} is hurt by poison!",
    StatusCondition.BURN: "{name} is hurt by its burn!",
}


class EndTurnEffectsProcessor:
    """
    Applies end-of-turn effects to a set of active battlers.

    Battlers are updated in place; events and battle-log messages are
    collected into the returned EndTurnResult.
    """

    def __init__(self, battlers: list[BattlerState], random: RandomSource, config: RulesConfig = DEFAULT_RULES_CONFIG):
        self.battlers = battlers
        self.random = random
        self.config = config
        self.result = EndTurnResult()

    def process_all_end_turn_effects(self) -> EndTurnResult:
        self.result = EndTurnResult()
        for battler in self.battlers:
            self._process_battler(battler)
        return self.result

    def _process_battler(self, battler: BattlerState) -> None:
        tracker = EndTurnBattlerEffect.STATUS_DAMAGE
        while tracker < EndTurnBattlerEffect.BATTLER_COUNT:
            if battler.is_fainted():
                return

            match tracker:
                case EndTurnBattlerEffect.STATUS_DAMAGE:
                    self._process_status_damage(battler)
                case EndTurnBattlerEffect.FRIENDSHIP_RECOVERY:
                    self._process_friendship_recovery(battler)
                case EndTurnBattlerEffect.ABILITIES:
                    self._process_abilities(battler)
                case EndTurnBattlerEffect.ITEMS:
                    self._process_items(battler)

            tracker = EndTurnBattlerEffect(tracker + 1)

    def _opponent_of(self, battler: BattlerState):
        for other in self.battlers:
            if other is not battler:
                return other
        return None

    def _process_status_damage(self, battler: BattlerState) -> None:
        monster = battler.monster
        if monster.status is None or not monster.status.deals_turn_damage():
            return

        new_hp = apply_status_damage(monster, battler.max_hp)
        amount = monster.current_hp - new_hp
        monster.current_hp = new_hp
        self.result.events.append(DamageDealtEvent(target=battler.uid, amount=amount))
        self.result.messages.append(STATUS_DAMAGE_MESSAGES[monster.status].format(name=battler.name))
        logger.debug("%s took %d %s damage", battler.uid, amount, monster.status.value)

        if battler.is_fainted():
            self.result.events.append(FaintedEvent(target=battler.uid))
            self.result.messages.append(f"{battler.name} fainted!")

    def _process_friendship_recovery(self, battler: BattlerState) -> None:
        status = battler.monster.status
        if status is None:
            return
        chance = get_status_recovery_chance(get_friendship(battler.monster, battler.species, self.config))
        if chance <= 0 or self.random() >= chance:
            return

        event = cure_status(battler.monster, "all", source="friendship")
        if event is not None:
            self.result.events.append(event)
            self.result.messages.append(STATUS_CURED_MESSAGES[status].format(name=battler.name))

    def _process_abilities(self, battler: BattlerState) -> None:
        outcome = trigger_passive(battler, PassiveEvent.END_OF_TURN, self._opponent_of(battler), self.random)
        self.result.events.extend(outcome.events)
        self.result.messages.extend(outcome.messages)

    def _process_items(self, battler: BattlerState) -> None:
        held_item = get_held_item(battler)
        if held_item is None:
            return

        monster = battler.monster
        match held_item.effect_type:
            case HeldItemEffect.LEFTOVERS:
                heal = leftovers_heal(held_item, monster.current_hp, battler.max_hp)
                if heal > 0:
                    self._heal(battler, heal, held_item.id)
                    self.result.messages.append(get_held_item_message(held_item.effect_type, battler.name, held_item.name))

            case HeldItemEffect.STATUS_CURE if status_cure_check(held_item, battler):
                cured = cure_status(monster, "all", source=held_item.id)
                if cured is not None:
                    self.result.events.append(cured)
                    self.result.messages.append(get_held_item_message(held_item.effect_type, battler.name, held_item.name))
                    self._consume(battler)

            case HeldItemEffect.PINCH_HEAL:
                heal, consumed = pinch_heal_check(held_item, monster.current_hp, battler.max_hp)
                if consumed:
                    self._heal(battler, heal, held_item.id)
                    self.result.messages.append(get_held_item_message(held_item.effect_type, battler.name, held_item.name))
                    self._consume(battler)

    def _heal(self, battler: BattlerState, amount: int, source: str) -> None:
        monster = battler.monster
        healed = min(battler.max_hp, monster.current_hp + amount) - monster.current_hp
        if healed <= 0:
            return
        monster.current_hp += healed
        self.result.events.append(HealedEvent(target=battler.uid, amount=healed, source=source))

    def _consume(self, battler: BattlerState) -> None:
        event = consume_held_item(battler)
        if event is not None:
            self.result.events.append(event)
