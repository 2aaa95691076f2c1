"""
Damage calculation pipeline

Stages are applied in a fixed order and recorded in DamageResult.modifiers:

1. base damage from level, power and the stage-adjusted offensive/defensive stats
2. STAB
3. type effectiveness (defender's type-effectiveness ability first)
4. ability modifiers (attacker, defender, Flash Fire boost)
5. held item modifiers (attacker boost, defender Eviolite)
6. burn
7. critical hit
8. random variance, floor, minimum 1

After the pipeline Sturdy / Focus Sash may clamp the damage, and recoil
(move recoil and Life Orb) is computed for the attacker. Neither battler is
changed here: HP, absorb heals, the Flash Fire flag and a spent Focus Sash
are reported on DamageResult and applied by move_executor.
"""

import logging
import math

from battle_rules.abilities import DamageModifier, get_damage_calc_modifier, resolve_type_effectiveness_override
from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import (
    DAMAGE_VARIANCE_RANGE,
    MIN_DAMAGE_VARIANCE,
    MSG_CRITICAL_HIT,
    STAB_MULTIPLIER,
    TYPE_MUL_NO_EFFECT,
)
from battle_rules.enums import MoveCategory, Stat, StatusCondition, Type
from battle_rules.friendship import get_critical_rate_bonus, get_friendship
from battle_rules.held_items import (
    focus_sash_check,
    get_damage_multiplier,
    get_eviolite_multiplier,
    get_held_item,
    get_held_item_message,
    get_life_orb_recoil,
)
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import ItemConsumedEvent
from battle_rules.schema.move import MoveDefinition
from battle_rules.schema.results import DamageResult
from battle_rules.stat_stages import apply_stat_stage
from battle_rules.status import get_status_effect
from battle_rules.type_effectiveness import TypeEffectiveness
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)

FLASH_FIRE_MULTIPLIER = 1.5


def calc_base_damage(level: int, power: int, attack: int, defense: int) -> int:
    """floor(floor(floor(2L/5 + 2) * power * A / D) / 50) + 2"""
    level_factor = (2 * level) // 5 + 2
    return (level_factor * power * attack // defense) // 50 + 2


def get_offensive_stats(category: MoveCategory) -> tuple[Stat, Stat]:
    """(attacking stat, defending stat) used by a move category"""
    if category == MoveCategory.PHYSICAL:
        return Stat.ATTACK, Stat.DEFENSE
    return Stat.SP_ATTACK, Stat.SP_DEFENSE


class DamageCalculator:
    """
    Runs the damage pipeline for one attacker/defender/move triple.

    The calculator keeps no battle state of its own; the random source is
    passed per call so the same instance can serve any number of battles.
    """

    def __init__(self, config: RulesConfig = DEFAULT_RULES_CONFIG):
        self.config = config

    def calculate_base_damage(self, attacker: BattlerState, defender: BattlerState, move: MoveDefinition, critical: bool = False) -> int:
        """
        Stage 1. On a critical hit the attacker's negative offensive stage and
        the defender's positive defensive stage are ignored.
        """
        attack_stat, defense_stat = get_offensive_stats(move.category)
        attack_stage = attacker.stages.get(attack_stat)
        defense_stage = defender.stages.get(defense_stat)
        if critical:
            attack_stage = max(0, attack_stage)
            defense_stage = min(0, defense_stage)

        attack = apply_stat_stage(attacker.stats.get(attack_stat), attack_stage)
        defense = apply_stat_stage(defender.stats.get(defense_stat), defense_stage)
        return calc_base_damage(attacker.monster.level, move.power or 0, attack, defense)

    def calculate_damage(self, attacker: BattlerState, defender: BattlerState, move: MoveDefinition, random: RandomSource) -> DamageResult:
        """
        Run the full pipeline.

        Status moves and immunities return zero damage without drawing from
        the random source. Otherwise one draw is made for the critical check
        (unless the defender blocks criticals) and one for variance.
        """
        if not move.is_damaging():
            return DamageResult(damage=0)

        modifiers: list[tuple[str, float]] = []
        messages: list[str] = []

        # 1. Base damage
        base = self.calculate_base_damage(attacker, defender, move)
        modifiers.append(("base", float(base)))

        attacker_mod = get_damage_calc_modifier(attacker, defender, move, "attacker")
        defender_mod = get_damage_calc_modifier(defender, attacker, move, "defender")

        # 2. STAB
        is_stab = move.type in attacker.types
        stab = 1.0
        if is_stab:
            stab = attacker_mod.stab_multiplier if attacker_mod.stab_multiplier is not None else STAB_MULTIPLIER
            modifiers.append(("stab", stab))

        # 3. Type effectiveness
        override = resolve_type_effectiveness_override(defender, move)
        events = list(override.events)
        messages.extend(override.messages)
        if override.effectiveness is not None:
            effectiveness = override.effectiveness
        else:
            effectiveness = TypeEffectiveness.calculate_effectiveness(move.type, defender.types)
        modifiers.append(("type_effectiveness", effectiveness))

        if effectiveness == TYPE_MUL_NO_EFFECT:
            if not override.activated:
                messages.append(f"It doesn't affect {defender.name}...")
            logger.debug("%s is immune to %s", defender.uid, move.id)
            return DamageResult(
                damage=0,
                effectiveness=effectiveness,
                is_stab=is_stab,
                modifiers=modifiers,
                defender_heal=override.heal,
                flash_fire_triggered=override.flash_fire_triggered,
                events=events,
                messages=messages,
            )

        # 4. Abilities
        ability_multiplier = self._ability_multiplier(attacker, move, attacker_mod, defender_mod, modifiers)

        # 5. Held items
        item_multiplier = self._item_multiplier(attacker, defender, move, modifiers)

        # 6. Status
        burn_multiplier = 1.0
        if attacker.monster.status == StatusCondition.BURN and move.category == MoveCategory.PHYSICAL and not attacker_mod.ignores_burn:
            burn_multiplier = get_status_effect(StatusCondition.BURN).attack_modifier
            modifiers.append(("burn", burn_multiplier))

        # 7. Critical hit
        is_critical = False
        if not defender_mod.prevents_critical:
            chance = self.get_critical_chance(attacker)
            is_critical = random() < chance
        if is_critical:
            base = self.calculate_base_damage(attacker, defender, move, critical=True)
            modifiers.append(("critical", self.config.critical_multiplier))
            messages.append(MSG_CRITICAL_HIT)

        multiplier = stab * effectiveness * ability_multiplier * item_multiplier * burn_multiplier
        if is_critical:
            multiplier *= self.config.critical_multiplier

        # 8. Variance
        variance = MIN_DAMAGE_VARIANCE + random() * DAMAGE_VARIANCE_RANGE
        modifiers.append(("variance", variance))
        damage = max(1, math.floor(base * multiplier * variance))

        description = TypeEffectiveness.get_effectiveness_description(effectiveness)
        if description:
            messages.append(description)

        logger.debug("%s -> %s with %s: base=%d mult=%.3f crit=%s damage=%d", attacker.uid, defender.uid, move.id, base, multiplier, is_critical, damage)

        result = DamageResult(
            damage=damage,
            effectiveness=effectiveness,
            is_critical=is_critical,
            is_stab=is_stab,
            modifiers=modifiers,
            events=events,
            messages=messages,
        )
        self._apply_survival_clamp(defender, defender_mod, result)
        result.recoil = self.calculate_recoil(attacker, move, attacker_mod, result.damage)
        return result

    def get_critical_chance(self, attacker: BattlerState) -> float:
        friendship = get_friendship(attacker.monster, attacker.species, self.config)
        return self.config.critical_chance + get_critical_rate_bonus(friendship)

    def _ability_multiplier(
        self,
        attacker: BattlerState,
        move: MoveDefinition,
        attacker_mod: DamageModifier,
        defender_mod: DamageModifier,
        modifiers: list[tuple[str, float]],
    ) -> float:
        multiplier = 1.0
        if attacker_mod.multiplier != 1.0:
            multiplier *= attacker_mod.multiplier
            modifiers.append((f"ability:{attacker.ability.value}", attacker_mod.multiplier))
        if attacker.flash_fire_active and move.type == Type.FIRE:
            multiplier *= FLASH_FIRE_MULTIPLIER
            modifiers.append(("ability:flash_fire", FLASH_FIRE_MULTIPLIER))
        if defender_mod.multiplier != 1.0:
            multiplier *= defender_mod.multiplier
            modifiers.append(("defender_ability", defender_mod.multiplier))
        return multiplier

    def _item_multiplier(self, attacker: BattlerState, defender: BattlerState, move: MoveDefinition, modifiers: list[tuple[str, float]]) -> float:
        multiplier = 1.0
        attacker_item = get_held_item(attacker)
        boost = get_damage_multiplier(attacker_item, move)
        if boost != 1.0:
            multiplier *= boost
            modifiers.append((f"item:{attacker_item.id}", boost))

        eviolite = get_eviolite_multiplier(get_held_item(defender), defender.species)
        if eviolite != 1.0:
            multiplier /= eviolite
            modifiers.append(("defender_item:eviolite", 1 / eviolite))
        return multiplier

    def _apply_survival_clamp(self, defender: BattlerState, defender_mod: DamageModifier, result: DamageResult) -> None:
        """Sturdy first, then Focus Sash; both only from full HP"""
        current_hp = defender.monster.current_hp
        if result.damage < current_hp:
            return

        if defender_mod.endures_hit:
            result.damage = current_hp - 1
            result.messages.append(f"{defender.name} endured the hit!")
            return

        held_item = get_held_item(defender)
        damage, consumed = focus_sash_check(held_item, current_hp, defender.max_hp, result.damage)
        if consumed:
            result.damage = damage
            result.messages.append(get_held_item_message(held_item.effect_type, defender.name, held_item.name))
            result.consumed_item = defender.monster.held_item
            result.events.append(ItemConsumedEvent(holder=defender.uid, item_id=defender.monster.held_item))

    def calculate_recoil(self, attacker: BattlerState, move: MoveDefinition, attacker_mod: DamageModifier, damage: int) -> int:
        """Move recoil (negated by Rock Head) plus Life Orb recoil"""
        recoil = 0
        if move.recoil > 0 and damage > 0 and not attacker_mod.prevents_recoil:
            recoil += max(1, int(damage * move.recoil))
        if damage > 0:
            recoil += get_life_orb_recoil(get_held_item(attacker), attacker.max_hp, move)
        return recoil
