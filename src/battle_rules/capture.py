"""
Capture probability engine

Ball modifiers are resolved from the catch situation, then fed into the
shake check:

    a = clamp(floor((3M - 2H) * rate * ball * status / 3M), 1, 255)
    threshold = floor(1048560 / sqrt(sqrt(16711680 / a)))

Three rolls in 0..65535 below the threshold catch the target. A ball
modifier of 255 or more always catches.
"""

import logging
import math
from typing import Optional

from battle_rules.constants import (
    DARK_BALL_MODIFIER,
    GUARANTEED_CATCH_MODIFIER,
    MAX_CATCH_VALUE,
    NET_BALL_MODIFIER,
    OTHER_STATUS_CATCH_BONUS,
    PREMIER_BALL_PURCHASE_STEP,
    QUICK_BALL_MODIFIER,
    REPEAT_BALL_MODIFIER,
    SHAKE_CHECKS,
    SHAKE_DENOMINATOR,
    SHAKE_NUMERATOR,
    SHAKE_ROLL_RANGE,
    SLEEP_FREEZE_CATCH_BONUS,
    TIMER_BALL_MAX_MODIFIER,
    TIMER_BALL_TURN_STEP,
)
from battle_rules.data.items import BALL_DEFINITIONS, get_ball_definition
from battle_rules.enums import BallId, StatusCondition, Type
from battle_rules.schema.battle_state import BallCatchContext
from battle_rules.schema.events import CaptureAttemptedEvent
from battle_rules.schema.results import CaptureFlowResult, CatchResult
from battle_rules.utils.rng import RandomSource

logger = logging.getLogger(__name__)

# Badge count at which each ball goes on sale
BALL_UNLOCK_BADGES: list[tuple[int, BallId]] = [
    (0, BallId.MONSTER_BALL),
    (1, BallId.SUPER_BALL),
    (3, BallId.HYPER_BALL),
    (3, BallId.NET_BALL),
    (4, BallId.DARK_BALL),
    (5, BallId.TIMER_BALL),
    (5, BallId.REPEAT_BALL),
    (6, BallId.QUICK_BALL),
]

_NET_BALL_TYPES = frozenset({Type.WATER, Type.BUG})


def resolve_ball_modifier(ball_id: str, context: Optional[BallCatchContext] = None) -> float:
    """
    Effective catch-rate modifier of a ball.

    Fixed balls return their stored modifier, unknown ids return 1.0, and
    conditional balls are resolved from the context. Without a context every
    ball falls back to its stored value. Pure.
    """
    ball = get_ball_definition(ball_id)
    if ball is None:
        return 1.0
    stored = ball.effect.catch_rate_modifier
    if context is None:
        return stored

    match BallId(ball_id):
        case BallId.NET_BALL:
            return NET_BALL_MODIFIER if any(t in _NET_BALL_TYPES for t in context.target_types) else 1.0
        case BallId.DARK_BALL:
            return DARK_BALL_MODIFIER if context.is_night or context.is_cave else 1.0
        case BallId.TIMER_BALL:
            return min(TIMER_BALL_MAX_MODIFIER, 1 + context.turn_count * TIMER_BALL_TURN_STEP)
        case BallId.QUICK_BALL:
            return QUICK_BALL_MODIFIER if context.turn_count <= 1 else 1.0
        case BallId.REPEAT_BALL:
            return REPEAT_BALL_MODIFIER if context.is_registered else 1.0
        case BallId.PREMIER_BALL:
            return 1.0
        case _:
            return stored


def get_available_balls(badge_count: int) -> list[str]:
    """Every ball unlocked at or below the badge count, in unlock order"""
    return [ball.value for threshold, ball in BALL_UNLOCK_BADGES if threshold <= badge_count]


def calc_premier_ball_bonus(purchased_count: int) -> int:
    """Free Premier Balls handed out for a bulk purchase"""
    return purchased_count // PREMIER_BALL_PURCHASE_STEP


def get_status_catch_bonus(status: Optional[StatusCondition]) -> float:
    match status:
        case StatusCondition.SLEEP | StatusCondition.FREEZE:
            return SLEEP_FREEZE_CATCH_BONUS
        case StatusCondition.POISON | StatusCondition.BURN | StatusCondition.PARALYSIS:
            return OTHER_STATUS_CATCH_BONUS
        case _:
            return 1.0


def calc_catch_value(max_hp: int, current_hp: int, catch_rate: int, ball_modifier: float, status: Optional[StatusCondition] = None) -> int:
    """The modified catch rate "a", clamped to 1..255"""
    status_bonus = get_status_catch_bonus(status)
    a = (3 * max_hp - 2 * current_hp) * catch_rate * ball_modifier * status_bonus / (3 * max_hp)
    return min(MAX_CATCH_VALUE, max(1, math.floor(a)))


def calc_shake_threshold(catch_value: int) -> int:
    if catch_value >= MAX_CATCH_VALUE:
        return SHAKE_ROLL_RANGE
    return math.floor(SHAKE_NUMERATOR / math.sqrt(math.sqrt(SHAKE_DENOMINATOR / catch_value)))


def attempt_catch(
    max_hp: int,
    current_hp: int,
    catch_rate: int,
    ball_modifier: float,
    status: Optional[StatusCondition],
    random: RandomSource,
) -> CatchResult:
    """
    Roll the shake checks. Stops at the first failed shake, so
    shake_count is 0..3 and caught is shake_count == 3.
    """
    if ball_modifier >= GUARANTEED_CATCH_MODIFIER:
        return CatchResult(caught=True, shake_count=SHAKE_CHECKS)

    catch_value = calc_catch_value(max_hp, current_hp, catch_rate, ball_modifier, status)
    threshold = calc_shake_threshold(catch_value)

    shake_count = 0
    for _ in range(SHAKE_CHECKS):
        if int(random() * SHAKE_ROLL_RANGE) >= threshold:
            break
        shake_count += 1

    logger.debug("catch a=%d threshold=%d shakes=%d", catch_value, threshold, shake_count)
    return CatchResult(caught=shake_count == SHAKE_CHECKS, shake_count=shake_count)


def get_capture_messages(ball_name: str, shake_count: int, caught: bool, target_name: str) -> list[str]:
    messages = [f"You threw a {ball_name}!"]
    messages.extend(["Wobble..."] * shake_count)
    if caught:
        messages.append(f"Gotcha! {target_name} was caught!")
    elif shake_count == 0:
        messages.append(f"Oh no! {target_name} broke free!")
    else:
        messages.append("Aargh! Almost had it!")
    return messages


def execute_capture_flow(
    ball_id: str,
    target_name: str,
    max_hp: int,
    current_hp: int,
    catch_rate: int,
    status: Optional[StatusCondition],
    random: RandomSource,
    context: Optional[BallCatchContext] = None,
) -> CaptureFlowResult:
    """Throw a ball: resolve its modifier, roll the shakes and narrate the result"""
    ball_modifier = resolve_ball_modifier(ball_id, context)
    catch_result = attempt_catch(max_hp, current_hp, catch_rate, ball_modifier, status, random)

    ball = BALL_DEFINITIONS.get(ball_id)
    ball_name = ball.name if ball is not None else ball_id
    return CaptureFlowResult(
        catch_result=catch_result,
        ball_modifier=ball_modifier,
        events=[CaptureAttemptedEvent(ball_id=ball_id, shake_count=catch_result.shake_count, caught=catch_result.caught)],
        messages=get_capture_messages(ball_name, catch_result.shake_count, catch_result.caught, target_name),
    )
