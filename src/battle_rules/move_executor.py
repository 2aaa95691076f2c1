"""
Single move execution

execute_move runs one attack attempt end to end:

1. status gate (sleep, freeze, paralysis)
2. PP check and consumption
3. accuracy check (one roll, scaled by accuracy/evasion stages)
4. status moves: inflict status and/or change stats
5. damaging moves: damage pipeline, HP update, secondary effects,
   contact abilities, recoil, faint events

HP, status, PP and stat stages on the two BattlerStates are updated in place.
"""

import logging
from typing import Optional

from battle_rules.abilities import apply_opponent_stat_changes, can_flinch, trigger_passive
from battle_rules.constants import MSG_BUT_FAILED, MSG_MISSED, MSG_NO_PP, STRUGGLE_RECOIL_DIVISOR
from battle_rules.damage_calculator import DamageCalculator
from battle_rules.data.moves import STRUGGLE
from battle_rules.enums import PassiveEvent, StatusCondition
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import DamageDealtEvent, FaintedEvent, RecoilEvent, StatusCuredEvent
from battle_rules.schema.move import MoveDefinition, SecondaryEffect
from battle_rules.schema.results import DamageResult, MoveOutcome
from battle_rules.stat_stages import apply_stat_changes, get_accuracy_multiplier
from battle_rules.status import STATUS_BLOCKED_MESSAGES, STATUS_CURED_MESSAGES, STATUS_INFLICTED_MESSAGES, can_act, can_inflict_status, inflict_status
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)

_DEFAULT_CALCULATOR = DamageCalculator()


def _status_gate(attacker: BattlerState, outcome: MoveOutcome, random: RandomSource) -> bool:
    """Roll can_act and report what happened. Returns True when the attacker may move."""
    status_before = attacker.monster.status
    if can_act(attacker.monster, random):
        if status_before is not None and attacker.monster.status is None:
            outcome.events.append(StatusCuredEvent(target=attacker.uid, status=status_before, source="recovery"))
            outcome.messages.append(STATUS_CURED_MESSAGES[status_before].format(name=attacker.name))
        return True

    message = STATUS_BLOCKED_MESSAGES.get(status_before)
    if message:
        outcome.messages.append(message.format(name=attacker.name))
    logger.debug("%s cannot act (%s)", attacker.uid, status_before)
    return False


def _roll_status(attacker: BattlerState, defender: BattlerState, effect: SecondaryEffect, source: str, outcome: MoveOutcome, random: RandomSource) -> Optional[StatusCondition]:
    """Try to land effect.status on the defender, then let Synchronize answer"""
    status = effect.status
    if status is None or not can_inflict_status(defender.monster, defender.types, status):
        return None
    chance = effect.status_chance if effect.status_chance is not None else 100
    if random() * 100 >= chance:
        return None

    event = inflict_status(defender, status, source=source)
    if event is None:
        return None
    outcome.events.append(event)
    outcome.messages.append(STATUS_INFLICTED_MESSAGES[status].format(name=defender.name))

    reaction = trigger_passive(defender, PassiveEvent.STATUS_INFLICTED, attacker, random, status=status)
    outcome.events.extend(reaction.events)
    outcome.messages.extend(reaction.messages)
    return status


def _apply_stat_effect(attacker: BattlerState, defender: BattlerState, effect: SecondaryEffect, outcome: MoveOutcome) -> bool:
    if not effect.stat_changes:
        return False
    if effect.resolved_stat_target() == "opponent":
        messages, events = apply_opponent_stat_changes(defender, effect.stat_changes)
    else:
        messages, events = apply_stat_changes(attacker.stages, effect.stat_changes, attacker.name, attacker.uid)
    outcome.messages.extend(messages)
    outcome.events.extend(events)
    return True


def _check_faint(battler: BattlerState, outcome: MoveOutcome) -> None:
    if battler.is_fainted():
        outcome.events.append(FaintedEvent(target=battler.uid))
        outcome.messages.append(f"{battler.name} fainted!")


def _apply_damage(defender: BattlerState, damage: DamageResult, outcome: MoveOutcome) -> None:
    """Apply the calculated hit and the defender-side effects it reported"""
    monster = defender.monster
    monster.current_hp = max(0, monster.current_hp - damage.damage)
    if damage.defender_heal > 0:
        monster.current_hp = min(defender.max_hp, monster.current_hp + damage.defender_heal)
    if damage.flash_fire_triggered:
        defender.flash_fire_active = True
    if damage.consumed_item is not None and monster.held_item == damage.consumed_item:
        monster.held_item = None
    if damage.damage > 0:
        outcome.events.append(
            DamageDealtEvent(target=defender.uid, amount=damage.damage, effectiveness=damage.effectiveness, is_critical=damage.is_critical)
        )


def _apply_recoil(attacker: BattlerState, amount: int, source: str, outcome: MoveOutcome) -> None:
    if amount <= 0:
        return
    monster = attacker.monster
    monster.current_hp = max(0, monster.current_hp - amount)
    outcome.events.append(RecoilEvent(target=attacker.uid, amount=amount, source=source))
    outcome.messages.append(f"{attacker.name} is damaged by recoil!")


def execute_move(
    attacker: BattlerState,
    defender: BattlerState,
    move: MoveDefinition,
    random: RandomSource,
    calculator: Optional[DamageCalculator] = None,
) -> MoveOutcome:
    """Execute one move. A move the attacker does not know is used without spending PP."""
    calculator = calculator or _DEFAULT_CALCULATOR
    outcome = MoveOutcome(hit=False, defender_hp_after=defender.monster.current_hp)

    if not _status_gate(attacker, outcome, random):
        return outcome

    slot = attacker.monster.find_move(move.id)
    if slot is not None:
        if slot.current_pp <= 0:
            outcome.messages.append(MSG_NO_PP)
            return outcome
        slot.current_pp -= 1

    outcome.messages.append(f"{attacker.name} used {move.name}!")

    # Accuracy
    accuracy = move.accuracy * get_accuracy_multiplier(attacker.stages.accuracy, defender.stages.evasion)
    if random() * 100 >= accuracy:
        outcome.messages.append(MSG_MISSED)
        logger.debug("%s missed with %s", attacker.uid, move.id)
        return outcome

    outcome.hit = True

    if not move.is_damaging():
        return _execute_status_move(attacker, defender, move, outcome, random)

    damage = calculator.calculate_damage(attacker, defender, move, random)
    outcome.damage = damage
    outcome.messages.extend(damage.messages)
    outcome.events.extend(damage.events)
    _apply_damage(defender, damage, outcome)
    outcome.defender_hp_after = defender.monster.current_hp

    if damage.damage == 0:
        return outcome

    effect = move.effect
    if effect is not None and not defender.is_fainted():
        if effect.status_chance is not None:
            outcome.status_applied = _roll_status(attacker, defender, effect, move.id, outcome, random)
        _apply_stat_effect(attacker, defender, effect, outcome)
        if effect.flinch_chance > 0 and random() * 100 < effect.flinch_chance:
            outcome.flinched = can_flinch(defender)

    if move.flags.makes_contact():
        for holder, event, other in ((defender, PassiveEvent.HIT_BY_CONTACT, attacker), (attacker, PassiveEvent.DEALT_CONTACT, defender)):
            reaction = trigger_passive(holder, event, other, random)
            outcome.events.extend(reaction.events)
            outcome.messages.extend(reaction.messages)

    _apply_recoil(attacker, damage.recoil, move.id, outcome)

    _check_faint(defender, outcome)
    _check_faint(attacker, outcome)
    outcome.defender_hp_after = defender.monster.current_hp
    return outcome


def _execute_status_move(attacker: BattlerState, defender: BattlerState, move: MoveDefinition, outcome: MoveOutcome, random: RandomSource) -> MoveOutcome:
    had_effect = False
    effect = move.effect
    if effect is not None:
        outcome.status_applied = _roll_status(attacker, defender, effect, move.id, outcome, random)
        had_effect = outcome.status_applied is not None
        had_effect = _apply_stat_effect(attacker, defender, effect, outcome) or had_effect

    if not had_effect:
        outcome.messages.append(MSG_BUT_FAILED)
    outcome.defender_hp_after = defender.monster.current_hp
    return outcome


def execute_struggle(attacker: BattlerState, defender: BattlerState, random: RandomSource) -> MoveOutcome:
    """
    Attack used when every move is out of PP: typeless damage of level x 2
    and a quarter of the user's max HP as recoil.
    """
    outcome = MoveOutcome(hit=False, defender_hp_after=defender.monster.current_hp)
    if not _status_gate(attacker, outcome, random):
        return outcome

    outcome.hit = True
    outcome.messages.append(f"{attacker.name} used {STRUGGLE.name}!")

    damage = DamageResult(damage=max(1, attacker.monster.level * 2), recoil=max(1, attacker.max_hp // STRUGGLE_RECOIL_DIVISOR))
    outcome.damage = damage
    _apply_damage(defender, damage, outcome)
    _apply_recoil(attacker, damage.recoil, STRUGGLE.id, outcome)

    _check_faint(defender, outcome)
    _check_faint(attacker, outcome)
    outcome.defender_hp_after = defender.monster.current_hp
    return outcome
