from enum import Enum
from typing import Optional


class Stat(str, Enum):
    """Stats that carry a battle stage"""

    ATTACK = "atk"
    DEFENSE = "defense"
    SP_ATTACK = "sp_atk"
    SP_DEFENSE = "sp_def"
    SPEED = "speed"
    ACCURACY = "accuracy"
    EVASION = "evasion"

    @property
    def display_name(self) -> str:
        return _STAT_NAMES[self]


_STAT_NAMES = {
    Stat.ATTACK: "Attack",
    Stat.DEFENSE: "Defense",
    Stat.SP_ATTACK: "Sp. Atk",
    Stat.SP_DEFENSE: "Sp. Def",
    Stat.SPEED: "Speed",
    Stat.ACCURACY: "accuracy",
    Stat.EVASION: "evasiveness",
}


class Weather(str, Enum):
    """Current weather, supplied by the caller. Duration tracking lives outside this package."""

    NONE = "none"
    RAIN = "rain"
    SUN = "sun"


class FriendshipEvent(str, Enum):
    LEVEL_UP = "level_up"
    BATTLE_WIN = "battle_win"
    HEAL = "heal"
    FAINT = "faint"
    ITEM_USE = "item_use"
    BITTER_MEDICINE = "bitter_medicine"


class FriendshipLevel(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    MAX = "max"


class TrainerClass(str, Enum):
    NORMAL = "normal"
    GYM_LEADER = "gym_leader"
    ELITE_FOUR = "elite_four"
    CHAMPION = "champion"


class TimeOfDay(str, Enum):
    DAY = "day"
    NIGHT = "night"


class Nature(str, Enum):
    """Raises one non-HP stat by 10% and lowers another by 10%; the five neutral natures change nothing"""

    HARDY = "hardy"
    LONELY = "lonely"
    BRAVE = "brave"
    ADAMANT = "adamant"
    NAUGHTY = "naughty"
    BOLD = "bold"
    DOCILE = "docile"
    RELAXED = "relaxed"
    IMPISH = "impish"
    LAX = "lax"
    TIMID = "timid"
    HASTY = "hasty"
    SERIOUS = "serious"
    JOLLY = "jolly"
    NAIVE = "naive"
    MODEST = "modest"
    MILD = "mild"
    QUIET = "quiet"
    BASHFUL = "bashful"
    RASH = "rash"
    CALM = "calm"
    GENTLE = "gentle"
    SASSY = "sassy"
    CAREFUL = "careful"
    QUIRKY = "quirky"

    @property
    def raised_stat(self) -> Optional[Stat]:
        return _NATURE_STATS[self][0]

    @property
    def lowered_stat(self) -> Optional[Stat]:
        return _NATURE_STATS[self][1]


# Rows are the raised stat, columns the lowered one, in atk/defense/speed/sp_atk/sp_def order
_NATURE_GRID = (Stat.ATTACK, Stat.DEFENSE, Stat.SPEED, Stat.SP_ATTACK, Stat.SP_DEFENSE)

_NATURE_STATS: dict[Nature, tuple[Optional[Stat], Optional[Stat]]] = {
    nature: (None, None) if index // 5 == index % 5 else (_NATURE_GRID[index // 5], _NATURE_GRID[index % 5])
    for index, nature in enumerate(Nature)
}
