import pytest

from battle_rules.capture import (
    attempt_catch,
    calc_catch_value,
    calc_premier_ball_bonus,
    calc_shake_threshold,
    execute_capture_flow,
    get_available_balls,
    resolve_ball_modifier,
)
from battle_rules.enums import StatusCondition, Type
from battle_rules.schema.battle_state import BallCatchContext
from battle_rules.schema.events import CaptureAttemptedEvent


def test_fixed_ball_modifiers():
    assert resolve_ball_modifier("monster-ball") == 1.0
    assert resolve_ball_modifier("super-ball") == 1.5
    assert resolve_ball_modifier("hyper-ball") == 2.0
    assert resolve_ball_modifier("master-ball") == 255
    assert resolve_ball_modifier("master-ball", BallCatchContext(turn_count=5)) == 255


def test_unknown_ball_is_neutral():
    assert resolve_ball_modifier("mystery-ball") == 1.0
    assert resolve_ball_modifier("mystery-ball", BallCatchContext()) == 1.0


def test_conditional_balls_without_context_use_stored_value():
    for ball_id in ("net-ball", "dark-ball", "timer-ball", "quick-ball", "repeat-ball", "premier-ball"):
        assert resolve_ball_modifier(ball_id) == 1.0


def test_net_ball_matches_either_type():
    assert resolve_ball_modifier("net-ball", BallCatchContext(target_types=[Type.WATER, Type.FLYING])) == 3.0
    assert resolve_ball_modifier("net-ball", BallCatchContext(target_types=[Type.BUG])) == 3.0
    assert resolve_ball_modifier("net-ball", BallCatchContext(target_types=[Type.FIRE])) == 1.0


def test_dark_ball_at_night_or_in_caves():
    assert resolve_ball_modifier("dark-ball", BallCatchContext(is_night=True)) == 3.0
    assert resolve_ball_modifier("dark-ball", BallCatchContext(is_cave=True)) == 3.0
    assert resolve_ball_modifier("dark-ball", BallCatchContext()) == 1.0


def test_timer_ball_grows_and_caps():
    assert resolve_ball_modifier("timer-ball", BallCatchContext(turn_count=1)) == pytest.approx(1.3)
    assert resolve_ball_modifier("timer-ball", BallCatchContext(turn_count=10)) == 4.0
    assert resolve_ball_modifier("timer-ball", BallCatchContext(turn_count=30)) == 4.0


def test_quick_ball_only_on_first_turn():
    assert resolve_ball_modifier("quick-ball", BallCatchContext(turn_count=1)) == 4.0
    assert resolve_ball_modifier("quick-ball", BallCatchContext(turn_count=2)) == 1.0


def test_repeat_and_premier_balls():
    assert resolve_ball_modifier("repeat-ball", BallCatchContext(is_registered=True)) == 3.0
    assert resolve_ball_modifier("repeat-ball", BallCatchContext()) == 1.0
    assert resolve_ball_modifier("premier-ball", BallCatchContext(turn_count=1, is_night=True, is_registered=True)) == 1.0


def test_available_balls_are_monotonic():
    previous: set[str] = set()
    for badges in range(0, 9):
        current = set(get_available_balls(badges))
        assert previous <= current
        previous = current
    assert get_available_balls(0) == ["monster-ball"]
    assert set(get_available_balls(3)) == {"monster-ball", "super-ball", "hyper-ball", "net-ball"}
    assert "quick-ball" in get_available_balls(6)


def test_premier_ball_bonus():
    assert calc_premier_ball_bonus(9) == 0
    assert calc_premier_ball_bonus(10) == 1
    assert calc_premier_ball_bonus(25) == 2


def test_catch_value_scales_with_hp_and_status():
    full = calc_catch_value(100, 100, 45, 1.0)
    low = calc_catch_value(100, 1, 45, 1.0)
    asleep = calc_catch_value(100, 100, 45, 1.0, StatusCondition.SLEEP)
    assert full == 15
    assert low > full
    assert asleep == 30
    assert calc_catch_value(100, 100, 255, 2.0, StatusCondition.SLEEP) == 255
    assert calc_catch_value(100, 100, 1, 1.0) == 1


def test_shake_threshold():
    assert calc_shake_threshold(255) == 65536
    assert calc_shake_threshold(1) < calc_shake_threshold(100) < 65536


def test_master_ball_always_catches():
    result = attempt_catch(100, 100, 3, 255, None, lambda: 0.999)
    assert result.caught
    assert result.shake_count == 3


def test_shakes_stop_at_first_failure():
    draws = iter([0.0, 0.0, 0.999])
    result = attempt_catch(100, 50, 45, 1.0, None, lambda: next(draws))
    assert not result.caught
    assert result.shake_count == 2


def test_low_rolls_catch():
    result = attempt_catch(100, 50, 45, 1.0, None, lambda: 0.0)
    assert result.caught
    assert result.shake_count == 3


def test_capture_flow_messages():
    caught = execute_capture_flow("super-ball", "Tobibato", 100, 10, 255, None, lambda: 0.0)
    assert caught.catch_result.caught
    assert caught.ball_modifier == 1.5
    assert caught.messages[0] == "You threw a Super Ball!"
    assert caught.messages[-1] == "Gotcha! Tobibato was caught!"
    assert isinstance(caught.events[0], CaptureAttemptedEvent)

    escaped = execute_capture_flow("monster-ball", "Enjuu", 100, 100, 3, None, lambda: 0.999)
    assert escaped.catch_result.shake_count == 0
    assert escaped.messages[-1] == "Oh no! Enjuu broke free!"


def test_capture_flow_resolves_conditional_ball():
    result = execute_capture_flow(
        "net-ball", "Umitsubame", 100, 100, 120, None, lambda: 0.999, BallCatchContext(target_types=[Type.WATER, Type.FLYING])
    )
    assert result.ball_modifier == 3.0
