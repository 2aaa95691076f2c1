"""
Ability trigger registry

Ability definitions are plain data (battle_rules.data.abilities). Their effects
live here as one handler table per trigger phase, keyed by ability:

- ON_ENTER_HANDLERS: run once when the holder is sent into battle
- ON_DAMAGE_CALC_HANDLERS: contribute a DamageModifier to the damage pipeline
- ON_TYPE_EFFECTIVENESS_HANDLERS: may replace the type lookup (immunities)
- PASSIVE_HANDLERS: react to PassiveEvent notifications outside the pipeline

An ability id that this build does not know parses to None and every entry
point treats it as having no effect.
"""

import logging
from typing import Callable, Literal, Optional

from pydantic import BaseModel

from battle_rules.constants import (
    ABSORB_HEAL_DIVISOR,
    ADAPTABILITY_STAB_MULTIPLIER,
    CONTACT_STATUS_CHANCE,
    PINCH_ABILITY_MULTIPLIER,
    SHED_SKIN_CHANCE,
    TECHNICIAN_POWER_THRESHOLD,
    TYPE_MUL_NO_EFFECT,
)
from battle_rules.data.abilities import ABILITY_DEFINITIONS
from battle_rules.enums import Ability, AbilityTrigger, MoveCategory, PassiveEvent, Stat, StatusCondition, Type, Weather
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import AbilityActivatedEvent, HealedEvent, WeatherSetEvent
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.move import MoveDefinition
from battle_rules.schema.results import AbilityOutcome
from battle_rules.schema.species_info import MonsterSpecies
from battle_rules.stat_stages import apply_stat_changes
from battle_rules.status import cure_status, inflict_status, STATUS_CURED_MESSAGES, STATUS_INFLICTED_MESSAGES
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)

Role = Literal["attacker", "defender"]


class DamageModifier(BaseModel):
    """Contribution of one ability to a single damage calculation"""

    multiplier: float = 1.0
    stab_multiplier: Optional[float] = None  # replaces the 1.5 STAB bonus
    ignores_burn: bool = False
    prevents_recoil: bool = False
    prevents_critical: bool = False
    endures_hit: bool = False  # survive a knockout from full HP at 1 HP


NEUTRAL_MODIFIER = DamageModifier()


def get_monster_ability(monster: MonsterInstance, species: MonsterSpecies) -> Optional[Ability]:
    """The instance's ability override, else the species' first ability, else none"""
    if monster.ability is not None:
        return Ability.parse(monster.ability)
    if species.abilities:
        return Ability.parse(species.abilities[0])
    return None


def _activated(holder: BattlerState, ability: Ability) -> AbilityActivatedEvent:
    logger.debug("%s activated %s", holder.uid, ability.value)
    return AbilityActivatedEvent(holder=holder.uid, ability=ability.value)


def _ability_name(ability: Ability) -> str:
    return ABILITY_DEFINITIONS[ability].name


# =============================================================================
# ON ENTER
# =============================================================================
def _intimidate(holder: BattlerState, opponent: BattlerState) -> AbilityOutcome:
    outcome = AbilityOutcome(activated=True, events=[_activated(holder, Ability.INTIMIDATE)])
    messages, events = apply_opponent_stat_changes(opponent, {Stat.ATTACK: -1})
    outcome.messages.extend(messages)
    outcome.events.extend(events)
    return outcome


def _set_weather(weather: Weather, ability: Ability, message: str) -> Callable[[BattlerState, BattlerState], AbilityOutcome]:
    def handler(holder: BattlerState, opponent: BattlerState) -> AbilityOutcome:
        return AbilityOutcome(
            activated=True,
            events=[_activated(holder, ability), WeatherSetEvent(weather=weather, source=ability.value)],
            messages=[message.format(name=holder.name)],
        )

    return handler


def _shadow_tag(holder: BattlerState, opponent: BattlerState) -> AbilityOutcome:
    opponent.trapped = True
    return AbilityOutcome(
        activated=True,
        events=[_activated(holder, Ability.SHADOW_TAG)],
        messages=[f"{opponent.name} can't escape from {holder.name}'s Shadow Tag!"],
    )


ON_ENTER_HANDLERS: dict[Ability, Callable[[BattlerState, BattlerState], AbilityOutcome]] = {
    Ability.INTIMIDATE: _intimidate,
    Ability.DRIZZLE: _set_weather(Weather.RAIN, Ability.DRIZZLE, "{name}'s Drizzle made it rain!"),
    Ability.DROUGHT: _set_weather(Weather.SUN, Ability.DROUGHT, "{name}'s Drought intensified the sun's rays!"),
    Ability.SHADOW_TAG: _shadow_tag,
}


def trigger_on_enter(entering: BattlerState, opponent: BattlerState) -> AbilityOutcome:
    handler = ON_ENTER_HANDLERS.get(entering.ability) if entering.ability is not None else None
    if handler is None:
        return AbilityOutcome()
    return handler(entering, opponent)


# =============================================================================
# ON DAMAGE CALC
# =============================================================================
DamageCalcHandler = Callable[[BattlerState, BattlerState, MoveDefinition, Role], DamageModifier]


def _pinch_boost(boosted_type: Type) -> DamageCalcHandler:
    def handler(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
        if role != "attacker" or move.type != boosted_type:
            return NEUTRAL_MODIFIER
        if holder.monster.current_hp <= holder.max_hp // 3:
            return DamageModifier(multiplier=PINCH_ABILITY_MULTIPLIER)
        return NEUTRAL_MODIFIER

    return handler


def _huge_power(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "attacker" and move.category == MoveCategory.PHYSICAL:
        return DamageModifier(multiplier=2.0)
    return NEUTRAL_MODIFIER


def _guts(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role != "attacker" or holder.monster.status is None:
        return NEUTRAL_MODIFIER
    if move.category == MoveCategory.PHYSICAL:
        return DamageModifier(multiplier=1.5, ignores_burn=True)
    return DamageModifier(ignores_burn=True)


def _technician(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "attacker" and move.power is not None and move.power <= TECHNICIAN_POWER_THRESHOLD:
        return DamageModifier(multiplier=1.5)
    return NEUTRAL_MODIFIER


def _iron_fist(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "attacker" and move.flags.is_punch():
        return DamageModifier(multiplier=1.2)
    return NEUTRAL_MODIFIER


def _adaptability(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "attacker":
        return DamageModifier(stab_multiplier=ADAPTABILITY_STAB_MULTIPLIER)
    return NEUTRAL_MODIFIER


def _rock_head(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "attacker":
        return DamageModifier(prevents_recoil=True)
    return NEUTRAL_MODIFIER


def _thick_fat(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "defender" and move.type in (Type.FIRE, Type.ICE):
        return DamageModifier(multiplier=0.5)
    return NEUTRAL_MODIFIER


def _ice_scales(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "defender" and move.category == MoveCategory.SPECIAL:
        return DamageModifier(multiplier=0.5)
    return NEUTRAL_MODIFIER


def _marvel_scale(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    # Defense x1.5 while statused, expressed as physical damage / 1.5
    if role == "defender" and holder.monster.status is not None and move.category == MoveCategory.PHYSICAL:
        return DamageModifier(multiplier=1 / 1.5)
    return NEUTRAL_MODIFIER


def _shell_armor(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "defender":
        return DamageModifier(prevents_critical=True)
    return NEUTRAL_MODIFIER


def _sturdy(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    if role == "defender" and holder.monster.current_hp == holder.max_hp:
        return DamageModifier(endures_hit=True)
    return NEUTRAL_MODIFIER


ON_DAMAGE_CALC_HANDLERS: dict[Ability, DamageCalcHandler] = {
    # Attacker side
    Ability.BLAZE: _pinch_boost(Type.FIRE),
    Ability.TORRENT: _pinch_boost(Type.WATER),
    Ability.OVERGROW: _pinch_boost(Type.GRASS),
    Ability.SWARM: _pinch_boost(Type.BUG),
    Ability.HUGE_POWER: _huge_power,
    Ability.GUTS: _guts,
    Ability.TECHNICIAN: _technician,
    Ability.IRON_FIST: _iron_fist,
    Ability.ADAPTABILITY: _adaptability,
    Ability.ROCK_HEAD: _rock_head,
    # Defender side
    Ability.THICK_FAT: _thick_fat,
    Ability.ICE_SCALES: _ice_scales,
    Ability.MARVEL_SCALE: _marvel_scale,
    Ability.SHELL_ARMOR: _shell_armor,
    Ability.STURDY: _sturdy,
}


def get_damage_calc_modifier(holder: BattlerState, other: BattlerState, move: MoveDefinition, role: Role) -> DamageModifier:
    """Damage-pipeline contribution of holder's ability while it attacks or defends"""
    handler = ON_DAMAGE_CALC_HANDLERS.get(holder.ability) if holder.ability is not None else None
    if handler is None:
        return NEUTRAL_MODIFIER
    return handler(holder, other, move, role)


# =============================================================================
# ON TYPE EFFECTIVENESS
# =============================================================================
TypeEffectivenessHandler = Callable[[BattlerState, MoveDefinition], AbilityOutcome]


def _immunity(immune_type: Type, ability: Ability) -> TypeEffectivenessHandler:
    def handler(holder: BattlerState, move: MoveDefinition) -> AbilityOutcome:
        if move.type != immune_type:
            return AbilityOutcome()
        return AbilityOutcome(
            activated=True,
            effectiveness=TYPE_MUL_NO_EFFECT,
            events=[_activated(holder, ability)],
            messages=[f"{holder.name}'s {_ability_name(ability)} made the move miss!"],
        )

    return handler


def _flash_fire(holder: BattlerState, move: MoveDefinition) -> AbilityOutcome:
    if move.type != Type.FIRE:
        return AbilityOutcome()
    return AbilityOutcome(
        activated=True,
        effectiveness=TYPE_MUL_NO_EFFECT,
        flash_fire_triggered=True,
        events=[_activated(holder, Ability.FLASH_FIRE)],
        messages=[f"{holder.name}'s Flash Fire raised the power of its Fire-type moves!"],
    )


def _absorb(absorbed_type: Type, ability: Ability) -> TypeEffectivenessHandler:
    def handler(holder: BattlerState, move: MoveDefinition) -> AbilityOutcome:
        if move.type != absorbed_type:
            return AbilityOutcome()
        outcome = AbilityOutcome(activated=True, effectiveness=TYPE_MUL_NO_EFFECT, events=[_activated(holder, ability)])
        monster = holder.monster
        healed = min(holder.max_hp, monster.current_hp + holder.max_hp // ABSORB_HEAL_DIVISOR) - monster.current_hp
        if healed > 0:
            outcome.heal = healed
            outcome.events.append(HealedEvent(target=holder.uid, amount=healed, source=ability.value))
            outcome.messages.append(f"{holder.name} restored HP using its {_ability_name(ability)}!")
        else:
            outcome.messages.append(f"{holder.name}'s {_ability_name(ability)} made the move useless!")
        return outcome

    return handler


ON_TYPE_EFFECTIVENESS_HANDLERS: dict[Ability, TypeEffectivenessHandler] = {
    Ability.LEVITATE: _immunity(Type.GROUND, Ability.LEVITATE),
    Ability.FLASH_FIRE: _flash_fire,
    Ability.WATER_ABSORB: _absorb(Type.WATER, Ability.WATER_ABSORB),
    Ability.VOLT_ABSORB: _absorb(Type.ELECTRIC, Ability.VOLT_ABSORB),
}


def resolve_type_effectiveness_override(defender: BattlerState, move: MoveDefinition) -> AbilityOutcome:
    """
    Run the defender's type-effectiveness ability before the chart lookup.

    outcome.effectiveness is set when the ability replaces the lookup (0 for
    immunities); None means the normal chart applies. The holder is not
    changed: outcome.heal and outcome.flash_fire_triggered are applied by
    the caller once the move lands.
    """
    handler = ON_TYPE_EFFECTIVENESS_HANDLERS.get(defender.ability) if defender.ability is not None else None
    if handler is None:
        return AbilityOutcome()
    return handler(defender, move)


# =============================================================================
# PASSIVE
# =============================================================================
class PassiveContext(BaseModel):
    """What happened, for passive handlers that care about the details"""

    status: Optional[StatusCondition] = None  # STATUS_INFLICTED
    stat: Optional[Stat] = None  # STAT_LOWERED


PassiveHandler = Callable[[BattlerState, PassiveEvent, Optional[BattlerState], RandomSource, PassiveContext], AbilityOutcome]


def _speed_boost(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    if event != PassiveEvent.END_OF_TURN or holder.is_fainted():
        return AbilityOutcome()
    messages, events = apply_stat_changes(holder.stages, {Stat.SPEED: 1}, holder.name, holder.uid)
    if not events:
        return AbilityOutcome()
    return AbilityOutcome(activated=True, events=[_activated(holder, Ability.SPEED_BOOST), *events], messages=messages)


def _swift_swim(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    # Applied through status.get_speed_multiplier; no event reaction
    return AbilityOutcome()


def _cure_self(holder: BattlerState, ability: Ability) -> AbilityOutcome:
    status = holder.monster.status
    cured = cure_status(holder.monster, "all", source=ability.value)
    if cured is None or status is None:
        return AbilityOutcome()
    return AbilityOutcome(
        activated=True,
        events=[_activated(holder, ability), cured],
        messages=[STATUS_CURED_MESSAGES[status].format(name=holder.name)],
    )


def _natural_cure(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    if event != PassiveEvent.SWITCH_OUT or holder.monster.status is None:
        return AbilityOutcome()
    return _cure_self(holder, Ability.NATURAL_CURE)


def _shed_skin(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    if event != PassiveEvent.END_OF_TURN or holder.monster.status is None or holder.is_fainted():
        return AbilityOutcome()
    if random() >= SHED_SKIN_CHANCE:
        return AbilityOutcome()
    return _cure_self(holder, Ability.SHED_SKIN)


def _give_status(holder: BattlerState, target: BattlerState, status: StatusCondition, ability: Ability) -> AbilityOutcome:
    inflicted = inflict_status(target, status, source=ability.value)
    if inflicted is None:
        return AbilityOutcome()
    return AbilityOutcome(
        activated=True,
        events=[_activated(holder, ability), inflicted],
        messages=[f"{holder.name}'s {_ability_name(ability)}!", STATUS_INFLICTED_MESSAGES[status].format(name=target.name)],
    )


def _synchronize(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    if event != PassiveEvent.STATUS_INFLICTED or opponent is None:
        return AbilityOutcome()
    if context.status not in (StatusCondition.POISON, StatusCondition.BURN, StatusCondition.PARALYSIS):
        return AbilityOutcome()
    return _give_status(holder, opponent, context.status, Ability.SYNCHRONIZE)


def _contact_status(trigger: PassiveEvent, status: StatusCondition, ability: Ability) -> PassiveHandler:
    def handler(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
        if event != trigger or opponent is None or opponent.is_fainted():
            return AbilityOutcome()
        if random() >= CONTACT_STATUS_CHANCE:
            return AbilityOutcome()
        return _give_status(holder, opponent, status, ability)

    return handler


def _blocks_stat_drop(ability: Ability, only: Optional[Stat] = None) -> PassiveHandler:
    def handler(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
        if event != PassiveEvent.STAT_LOWERED:
            return AbilityOutcome()
        if only is not None and context.stat != only:
            return AbilityOutcome()
        return AbilityOutcome(
            activated=True,
            events=[_activated(holder, ability)],
            messages=[f"{holder.name}'s {_ability_name(ability)} prevents stat loss!"],
        )

    return handler


def _inner_focus(holder: BattlerState, event: PassiveEvent, opponent: Optional[BattlerState], random: RandomSource, context: PassiveContext) -> AbilityOutcome:
    if event != PassiveEvent.FLINCH:
        return AbilityOutcome()
    return AbilityOutcome(activated=True, events=[_activated(holder, Ability.INNER_FOCUS)])


PASSIVE_HANDLERS: dict[Ability, PassiveHandler] = {
    Ability.SPEED_BOOST: _speed_boost,
    Ability.SWIFT_SWIM: _swift_swim,
    Ability.NATURAL_CURE: _natural_cure,
    Ability.SHED_SKIN: _shed_skin,
    Ability.SYNCHRONIZE: _synchronize,
    Ability.POISON_TOUCH: _contact_status(PassiveEvent.DEALT_CONTACT, StatusCondition.POISON, Ability.POISON_TOUCH),
    Ability.STATIC: _contact_status(PassiveEvent.HIT_BY_CONTACT, StatusCondition.PARALYSIS, Ability.STATIC),
    Ability.FLAME_BODY: _contact_status(PassiveEvent.HIT_BY_CONTACT, StatusCondition.BURN, Ability.FLAME_BODY),
    Ability.CLEAR_BODY: _blocks_stat_drop(Ability.CLEAR_BODY),
    Ability.KEEN_EYE: _blocks_stat_drop(Ability.KEEN_EYE, only=Stat.ACCURACY),
    Ability.INNER_FOCUS: _inner_focus,
}


def trigger_passive(
    holder: BattlerState,
    event: PassiveEvent,
    opponent: Optional[BattlerState],
    random: RandomSource,
    status: Optional[StatusCondition] = None,
    stat: Optional[Stat] = None,
) -> AbilityOutcome:
    handler = PASSIVE_HANDLERS.get(holder.ability) if holder.ability is not None else None
    if handler is None:
        return AbilityOutcome()
    return handler(holder, event, opponent, random, PassiveContext(status=status, stat=stat))


def _never_called() -> float:
    raise RuntimeError("blocking handlers do not draw random numbers")


def apply_opponent_stat_changes(target: BattlerState, changes: dict[Stat, int]) -> tuple[list, list]:
    """
    Apply stat changes caused by the opponent (moves, Intimidate).

    Drops pass through the target's STAT_LOWERED handler first, so Clear Body
    and Keen Eye can block them. Raises are never blocked.
    """
    messages: list[str] = []
    events: list = []
    allowed: dict[Stat, int] = {}
    for stat, delta in changes.items():
        if delta < 0:
            blocked = trigger_passive(target, PassiveEvent.STAT_LOWERED, None, _never_called, stat=stat)
            if blocked.activated:
                messages.extend(blocked.messages)
                events.extend(blocked.events)
                continue
        allowed[stat] = delta

    stage_messages, stage_events = apply_stat_changes(target.stages, allowed, target.name, target.uid)
    messages.extend(stage_messages)
    events.extend(stage_events)
    return messages, events


def can_flinch(target: BattlerState) -> bool:
    return not trigger_passive(target, PassiveEvent.FLINCH, None, _never_called).activated


# =============================================================================
# REGISTRY
# =============================================================================
HANDLER_TABLES: dict[AbilityTrigger, dict] = {
    AbilityTrigger.ON_ENTER: ON_ENTER_HANDLERS,
    AbilityTrigger.ON_DAMAGE_CALC: ON_DAMAGE_CALC_HANDLERS,
    AbilityTrigger.ON_TYPE_EFFECTIVENESS: ON_TYPE_EFFECTIVENESS_HANDLERS,
    AbilityTrigger.PASSIVE: PASSIVE_HANDLERS,
}


def get_handler_table(ability: Ability) -> dict:
    """Handler table for the phase the ability is declared under"""
    return HANDLER_TABLES[ABILITY_DEFINITIONS[ability].trigger]
