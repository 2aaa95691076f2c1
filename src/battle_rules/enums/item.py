from enum import Enum


class ItemCategory(str, Enum):
    BALL = "ball"
    MEDICINE = "medicine"
    BATTLE = "battle"
    KEY = "key"


class BallId(str, Enum):
    """Capture devices. Values match item ids."""

    MONSTER_BALL = "monster-ball"
    SUPER_BALL = "super-ball"
    HYPER_BALL = "hyper-ball"
    MASTER_BALL = "master-ball"
    NET_BALL = "net-ball"
    DARK_BALL = "dark-ball"
    TIMER_BALL = "timer-ball"
    QUICK_BALL = "quick-ball"
    REPEAT_BALL = "repeat-ball"
    PREMIER_BALL = "premier-ball"


class HeldItemEffect(str, Enum):
    """Battle effect of a held item"""

    NONE = "none"
    TYPE_BOOST = "type_boost"  # x1.2 to moves of one type
    PINCH_HEAL = "pinch_heal"  # heal 1/4 max HP at or below half HP
    STATUS_CURE = "status_cure"  # cure any status once
    CHOICE_ATK = "choice_atk"  # x1.5 physical
    CHOICE_SPATK = "choice_spatk"  # x1.5 special
    CHOICE_SPEED = "choice_speed"  # x1.5 speed
    LIFE_ORB = "life_orb"  # x1.3 damage, 1/10 max HP recoil
    FOCUS_SASH = "focus_sash"  # survive a KO from full HP
    LEFTOVERS = "leftovers"  # heal 1/16 max HP each turn
    EVIOLITE = "eviolite"  # x1.5 defenses for monsters that can still evolve
