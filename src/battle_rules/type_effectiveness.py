from typing import Iterable

from battle_rules.enums import Type
from battle_rules.constants import TYPE_MUL_NO_EFFECT, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_NORMAL, TYPE_MUL_SUPER_EFFECTIVE, MSG_NO_EFFECT, MSG_NOT_VERY_EFFECTIVE, MSG_SUPER_EFFECTIVE

# Authored (attacking, defending, multiplier) triplets. Pairs that are not listed
# are neutral. The chart is not symmetric.
TYPE_EFFECTIVENESS_CHART = [
    # Normal
    (Type.NORMAL, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.NORMAL, Type.GHOST, TYPE_MUL_NO_EFFECT),
    (Type.NORMAL, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Fire
    (Type.FIRE, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIRE, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIRE, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    # Water
    (Type.WATER, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.WATER, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.WATER, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.WATER, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    # Grass
    (Type.GRASS, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.WATER, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GRASS, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GRASS, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Electric
    (Type.ELECTRIC, Type.WATER, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ELECTRIC, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ELECTRIC, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ELECTRIC, Type.GROUND, TYPE_MUL_NO_EFFECT),
    (Type.ELECTRIC, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ELECTRIC, Type.DRAGON, TYPE_MUL_NOT_EFFECTIVE),
    # Ice
    (Type.ICE, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.ICE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ICE, Type.GROUND, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ICE, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Fighting
    (Type.FIGHTING, Type.NORMAL, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.PSYCHIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FIGHTING, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.GHOST, TYPE_MUL_NO_EFFECT),
    (Type.FIGHTING, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FIGHTING, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Poison
    (Type.POISON, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.POISON, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.GROUND, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.GHOST, TYPE_MUL_NOT_EFFECTIVE),
    (Type.POISON, Type.STEEL, TYPE_MUL_NO_EFFECT),
    (Type.POISON, Type.FAIRY, TYPE_MUL_SUPER_EFFECTIVE),
    # Ground
    (Type.GROUND, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.GRASS, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GROUND, Type.ELECTRIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.POISON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.FLYING, TYPE_MUL_NO_EFFECT),
    (Type.GROUND, Type.BUG, TYPE_MUL_NOT_EFFECTIVE),
    (Type.GROUND, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GROUND, Type.STEEL, TYPE_MUL_SUPER_EFFECTIVE),
    # Flying
    (Type.FLYING, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FLYING, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FLYING, Type.ROCK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FLYING, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Psychic
    (Type.PSYCHIC, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.PSYCHIC, Type.POISON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.PSYCHIC, Type.PSYCHIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.PSYCHIC, Type.DARK, TYPE_MUL_NO_EFFECT),
    (Type.PSYCHIC, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Bug
    (Type.BUG, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.GRASS, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.FLYING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.GHOST, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.BUG, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.BUG, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Rock
    (Type.ROCK, Type.FIRE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ROCK, Type.GROUND, TYPE_MUL_NOT_EFFECTIVE),
    (Type.ROCK, Type.FLYING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.BUG, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.ROCK, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    # Ghost
    (Type.GHOST, Type.NORMAL, TYPE_MUL_NO_EFFECT),
    (Type.GHOST, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GHOST, Type.GHOST, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.GHOST, Type.DARK, TYPE_MUL_NOT_EFFECTIVE),
    # Dragon
    (Type.DRAGON, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DRAGON, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DRAGON, Type.FAIRY, TYPE_MUL_NO_EFFECT),
    # Dark
    (Type.DARK, Type.FIGHTING, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DARK, Type.PSYCHIC, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DARK, Type.GHOST, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.DARK, Type.DARK, TYPE_MUL_NOT_EFFECTIVE),
    (Type.DARK, Type.FAIRY, TYPE_MUL_NOT_EFFECTIVE),
    # Steel
    (Type.STEEL, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.WATER, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.ELECTRIC, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.ICE, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.STEEL, Type.ROCK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.STEEL, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
    (Type.STEEL, Type.FAIRY, TYPE_MUL_SUPER_EFFECTIVE),
    # Fairy
    (Type.FAIRY, Type.FIRE, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FAIRY, Type.POISON, TYPE_MUL_NOT_EFFECTIVE),
    (Type.FAIRY, Type.FIGHTING, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.DRAGON, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.DARK, TYPE_MUL_SUPER_EFFECTIVE),
    (Type.FAIRY, Type.STEEL, TYPE_MUL_NOT_EFFECTIVE),
]

_EFFECTIVENESS_LOOKUP: dict[tuple[Type, Type], float] = {(atk, dfn): mul for atk, dfn, mul in TYPE_EFFECTIVENESS_CHART}


class TypeEffectiveness:
    """
    Type effectiveness resolver

    Pure lookup over the authored chart plus multiplicative composition for
    dual-type defenders.
    """

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> float:
        """
        Get type effectiveness multiplier between attacking and defending types.

        Args:
            attacking_type: The type of the attacking move
            defending_type: One of the defender's types

        Returns:
            0.0 (immune), 0.5 (not very effective), 1.0 (neutral) or 2.0 (super effective).
            Pairs absent from the chart are neutral; this never raises.
        """
        return _EFFECTIVENESS_LOOKUP.get((attacking_type, defending_type), TYPE_MUL_NORMAL)

    @staticmethod
    def calculate_effectiveness(attacking_type: Type, defending_types: Iterable[Type]) -> float:
        """
        Combined effectiveness against a single or dual-type defender.

        The product of the pairwise lookups: 2 x 2 = 4, 0.5 x 2 = 1, and any
        immunity in the chain forces 0. Order of the defending types does not matter.
        """
        multiplier = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            multiplier *= TypeEffectiveness.get_effectiveness(attacking_type, defending_type)
        return multiplier

    @staticmethod
    def is_immune(attacking_type: Type, defending_type: Type) -> bool:
        """Check if defending type is immune to attacking type"""
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(attacking_type: Type, defending_type: Type) -> bool:
        """Check if attacking type is super effective against defending type"""
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == TYPE_MUL_SUPER_EFFECTIVE

    @staticmethod
    def is_not_very_effective(attacking_type: Type, defending_type: Type) -> bool:
        """Check if attacking type is not very effective against defending type"""
        return TypeEffectiveness.get_effectiveness(attacking_type, defending_type) == TYPE_MUL_NOT_EFFECTIVE

    @staticmethod
    def get_effectiveness_description(multiplier: float) -> str:
        """Battle-log message for a combined multiplier (empty for neutral hits)"""
        if multiplier == 0.0:
            return MSG_NO_EFFECT
        elif multiplier < 1.0:
            return MSG_NOT_VERY_EFFECTIVE
        elif multiplier > 1.0:
            return MSG_SUPER_EFFECTIVE
        else:
            return ""  # Normal effectiveness - no message
