"""Trainer battle prize money"""

from battle_rules.config import DEFAULT_RULES_CONFIG, RulesConfig
from battle_rules.constants import LOSS_PENALTY_FLOOR
from battle_rules.enums import TrainerClass

# Prize per level of the trainer's ace
PRIZE_MULTIPLIERS: dict[TrainerClass, int] = {
    TrainerClass.NORMAL: 40,
    TrainerClass.GYM_LEADER: 200,
    TrainerClass.ELITE_FOUR: 300,
    TrainerClass.CHAMPION: 500,
}


def resolve_trainer_class(trainer_name: str, config: RulesConfig = DEFAULT_RULES_CONFIG) -> TrainerClass:
    if config.champion_keyword in trainer_name:
        return TrainerClass.CHAMPION
    if config.elite_four_keyword in trainer_name:
        return TrainerClass.ELITE_FOUR
    if trainer_name in config.gym_leader_names:
        return TrainerClass.GYM_LEADER
    return TrainerClass.NORMAL


def calculate_prize_money(ace_level: int, trainer_class: TrainerClass) -> int:
    return ace_level * PRIZE_MULTIPLIERS[trainer_class]


def get_ace_level(party_levels: list[int]) -> int:
    """Highest level in the party; raises ValueError for an empty party"""
    return max(party_levels)


def calculate_loss_penalty(current_money: int) -> int:
    """Money lost on a defeat: half, or nothing at 100 or less"""
    if current_money <= LOSS_PENALTY_FLOOR:
        return 0
    return current_money // 2
