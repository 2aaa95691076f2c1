from enum import Enum
from typing import Optional


class AbilityTrigger(str, Enum):
    """Phase at which an ability's effect is invoked"""

    ON_DAMAGE_CALC = "on_damage_calc"
    ON_ENTER = "on_enter"
    ON_TYPE_EFFECTIVENESS = "on_type_effectiveness"
    PASSIVE = "passive"


class PassiveEvent(str, Enum):
    """Game events outside the damage pipeline that passive abilities listen to"""

    END_OF_TURN = "end_of_turn"
    SWITCH_OUT = "switch_out"
    HIT_BY_CONTACT = "hit_by_contact"  # holder was struck by a contact move
    DEALT_CONTACT = "dealt_contact"  # holder struck the opponent with a contact move
    STATUS_INFLICTED = "status_inflicted"  # opponent gave the holder a status
    STAT_LOWERED = "stat_lowered"  # opponent tries to lower one of the holder's stats
    FLINCH = "flinch"


class Ability(str, Enum):
    """Closed set of ability ids. Values match the content ids in species data."""

    # Pinch boosts
    BLAZE = "blaze"
    TORRENT = "torrent"
    OVERGROW = "overgrow"
    SWARM = "swarm"

    # Entry effects
    INTIMIDATE = "intimidate"
    DRIZZLE = "drizzle"
    DROUGHT = "drought"
    SHADOW_TAG = "shadow_tag"

    # Type immunities
    LEVITATE = "levitate"
    FLASH_FIRE = "flash_fire"
    WATER_ABSORB = "water_absorb"
    VOLT_ABSORB = "volt_absorb"

    # Damage modifiers
    THICK_FAT = "thick_fat"
    ADAPTABILITY = "adaptability"
    HUGE_POWER = "huge_power"
    GUTS = "guts"
    TECHNICIAN = "technician"
    IRON_FIST = "iron_fist"
    ROCK_HEAD = "rock_head"
    ICE_SCALES = "ice_scales"
    MARVEL_SCALE = "marvel_scale"
    SHELL_ARMOR = "shell_armor"
    STURDY = "sturdy"

    # Passive
    SPEED_BOOST = "speed_boost"
    SWIFT_SWIM = "swift_swim"
    NATURAL_CURE = "natural_cure"
    SHED_SKIN = "shed_skin"
    SYNCHRONIZE = "synchronize"
    POISON_TOUCH = "poison_touch"
    STATIC = "static"
    FLAME_BODY = "flame_body"
    CLEAR_BODY = "clear_body"
    KEEN_EYE = "keen_eye"
    INNER_FOCUS = "inner_focus"

    @classmethod
    def parse(cls, ability_id: Optional[str]) -> Optional["Ability"]:
        """Map a content id to an Ability; ids added after this build parse to None"""
        if ability_id is None:
            return None
        try:
            return cls(ability_id)
        except ValueError:
            return None
