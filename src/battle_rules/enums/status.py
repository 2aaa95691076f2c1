from enum import Enum


class StatusCondition(str, Enum):
    """Non-volatile status conditions. A monster carries at most one."""

    POISON = "poison"
    BURN = "burn"
    PARALYSIS = "paralysis"
    SLEEP = "sleep"
    FREEZE = "freeze"

    def blocks_action(self) -> bool:
        """Sleep and freeze stop move selection until the monster recovers"""
        return self in (StatusCondition.SLEEP, StatusCondition.FREEZE)

    def deals_turn_damage(self) -> bool:
        return self in (StatusCondition.POISON, StatusCondition.BURN)
