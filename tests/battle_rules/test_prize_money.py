import pytest

from battle_rules.config import RulesConfig
from battle_rules.enums import TrainerClass
from battle_rules.prize_money import calculate_loss_penalty, calculate_prize_money, get_ace_level, resolve_trainer_class


def test_trainer_classes():
    config = RulesConfig(gym_leader_names=frozenset({"Brock", "Misty"}))
    assert resolve_trainer_class("Champion Lance", config) == TrainerClass.CHAMPION
    assert resolve_trainer_class("Elite Four Bruno", config) == TrainerClass.ELITE_FOUR
    assert resolve_trainer_class("Misty", config) == TrainerClass.GYM_LEADER
    assert resolve_trainer_class("Youngster Joey", config) == TrainerClass.NORMAL
    # Gym leaders are only known through configuration
    assert resolve_trainer_class("Misty") == TrainerClass.NORMAL


def test_prize_money():
    assert calculate_prize_money(10, TrainerClass.NORMAL) == 400
    assert calculate_prize_money(14, TrainerClass.GYM_LEADER) == 2800
    assert calculate_prize_money(60, TrainerClass.ELITE_FOUR) == 18000
    assert calculate_prize_money(65, TrainerClass.CHAMPION) == 32500


def test_ace_level():
    assert get_ace_level([12, 15, 9]) == 15
    with pytest.raises(ValueError):
        get_ace_level([])


def test_loss_penalty():
    assert calculate_loss_penalty(0) == 0
    assert calculate_loss_penalty(100) == 0
    assert calculate_loss_penalty(101) == 50
    assert calculate_loss_penalty(3000) == 1500
