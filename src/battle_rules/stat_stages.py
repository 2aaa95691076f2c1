"""
Stat stage handling.

Stages run from -6 to +6. Battle stats use the 2/8 .. 8/2 ratio table;
accuracy and evasion use the narrower 3/9 .. 9/3 table.
"""

import logging
from fractions import Fraction

from battle_rules.constants import MIN_STAT_STAGE, MAX_STAT_STAGE
from battle_rules.enums import Stat
from battle_rules.schema.battle_state import StatStages
from battle_rules.schema.events import StatStageChangedEvent

logger = logging.getLogger(__name__)

# Stage multipliers, index 0 is stage -6
STAT_STAGE_RATIOS = [
    Fraction(2, 8),  # -6
    Fraction(2, 7),  # -5
    Fraction(2, 6),  # -4
    Fraction(2, 5),  # -3
    Fraction(2, 4),  # -2
    Fraction(2, 3),  # -1
    Fraction(2, 2),  #  0
    Fraction(3, 2),  # +1
    Fraction(4, 2),  # +2
    Fraction(5, 2),  # +3
    Fraction(6, 2),  # +4
    Fraction(7, 2),  # +5
    Fraction(8, 2),  # +6
]

ACCURACY_STAGE_RATIOS = [
    Fraction(3, 9),
    Fraction(3, 8),
    Fraction(3, 7),
    Fraction(3, 6),
    Fraction(3, 5),
    Fraction(3, 4),
    Fraction(3, 3),
    Fraction(4, 3),
    Fraction(5, 3),
    Fraction(6, 3),
    Fraction(7, 3),
    Fraction(8, 3),
    Fraction(9, 3),
]


def clamp_stage(stage: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, stage))


def get_stage_multiplier(stage: int) -> float:
    return float(STAT_STAGE_RATIOS[clamp_stage(stage) - MIN_STAT_STAGE])


def apply_stat_stage(base_stat: int, stage: int) -> int:
    """Scale a real stat by its stage, flooring like the stat formulas do."""
    ratio = STAT_STAGE_RATIOS[clamp_stage(stage) - MIN_STAT_STAGE]
    return max(1, (base_stat * ratio.numerator) // ratio.denominator)


def get_accuracy_multiplier(accuracy_stage: int, evasion_stage: int) -> float:
    """Hit-chance multiplier from the attacker's accuracy against the defender's evasion."""
    net = clamp_stage(accuracy_stage - evasion_stage)
    return float(ACCURACY_STAGE_RATIOS[net - MIN_STAT_STAGE])


def apply_stat_changes(stages: StatStages, changes: dict[Stat, int], target_name: str, target_uid: str = "") -> tuple[list[str], list[StatStageChangedEvent]]:
    """
    Apply stage deltas in place, clamped to -6..+6.

    Returns:
        (battle-log messages, stage change events). A change that is already
        at the limit produces a "won't go any higher/lower" message and no event.
    """
    messages: list[str] = []
    events: list[StatStageChangedEvent] = []

    for stat, delta in changes.items():
        if delta == 0:
            continue

        current = stages.get(stat)
        new_value = clamp_stage(current + delta)

        if new_value == current:
            direction = "higher" if delta > 0 else "lower"
            messages.append(f"{target_name}'s {stat.display_name} won't go any {direction}!")
            continue

        stages.set(stat, new_value)
        events.append(StatStageChangedEvent(target=target_uid, stat=stat, delta=new_value - current, new_stage=new_value))
        logger.debug("%s %s stage %d -> %d", target_name, stat.value, current, new_value)

        magnitude = abs(delta)
        if delta > 0:
            intensity = " drastically" if magnitude >= 3 else " sharply" if magnitude == 2 else ""
            messages.append(f"{target_name}'s {stat.display_name}{intensity} rose!")
        else:
            intensity = " severely" if magnitude >= 3 else " harshly" if magnitude == 2 else ""
            messages.append(f"{target_name}'s {stat.display_name}{intensity} fell!")

    return messages, events
