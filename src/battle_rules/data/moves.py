from types import MappingProxyType

from battle_rules.enums import MoveCategory, MoveFlag, Stat, StatusCondition, Type
from battle_rules.schema.move import MoveDefinition, SecondaryEffect

_PHYSICAL = MoveCategory.PHYSICAL
_SPECIAL = MoveCategory.SPECIAL
_STATUS = MoveCategory.STATUS
_CONTACT = MoveFlag.MAKES_CONTACT
_PUNCH = MoveFlag.MAKES_CONTACT | MoveFlag.PUNCH

_MOVES = [
    # Normal
    MoveDefinition(id="tackle", name="Tackle", type=Type.NORMAL, category=_PHYSICAL, power=40, accuracy=100, pp=35, flags=_CONTACT),
    MoveDefinition(id="scratch", name="Scratch", type=Type.NORMAL, category=_PHYSICAL, power=40, accuracy=100, pp=35, flags=_CONTACT),
    MoveDefinition(id="quick-attack", name="Quick Attack", type=Type.NORMAL, category=_PHYSICAL, power=40, accuracy=100, pp=30, priority=1, flags=_CONTACT),
    MoveDefinition(id="take-down", name="Take Down", type=Type.NORMAL, category=_PHYSICAL, power=90, accuracy=85, pp=20, flags=_CONTACT, recoil=0.25),
    MoveDefinition(id="double-edge", name="Double-Edge", type=Type.NORMAL, category=_PHYSICAL, power=120, accuracy=100, pp=15, flags=_CONTACT, recoil=1 / 3),
    MoveDefinition(id="growl", name="Growl", type=Type.NORMAL, category=_STATUS, accuracy=100, pp=40, flags=MoveFlag.SOUND, effect=SecondaryEffect(stat_changes={Stat.ATTACK: -1})),
    MoveDefinition(id="tail-whip", name="Tail Whip", type=Type.NORMAL, category=_STATUS, accuracy=100, pp=30, effect=SecondaryEffect(stat_changes={Stat.DEFENSE: -1})),
    MoveDefinition(id="swords-dance", name="Swords Dance", type=Type.NORMAL, category=_STATUS, accuracy=100, pp=20, effect=SecondaryEffect(stat_changes={Stat.ATTACK: 2})),
    MoveDefinition(id="headbutt", name="Headbutt", type=Type.NORMAL, category=_PHYSICAL, power=70, accuracy=100, pp=15, flags=_CONTACT, effect=SecondaryEffect(flinch_chance=30)),
    # Fire
    MoveDefinition(id="ember", name="Ember", type=Type.FIRE, category=_SPECIAL, power=40, accuracy=100, pp=25, effect=SecondaryEffect(status=StatusCondition.BURN, status_chance=10)),
    MoveDefinition(id="flamethrower", name="Flamethrower", type=Type.FIRE, category=_SPECIAL, power=90, accuracy=100, pp=15, effect=SecondaryEffect(status=StatusCondition.BURN, status_chance=10)),
    MoveDefinition(id="fire-punch", name="Fire Punch", type=Type.FIRE, category=_PHYSICAL, power=75, accuracy=100, pp=15, flags=_PUNCH, effect=SecondaryEffect(status=StatusCondition.BURN, status_chance=10)),
    MoveDefinition(id="will-o-wisp", name="Will-O-Wisp", type=Type.FIRE, category=_STATUS, accuracy=85, pp=15, effect=SecondaryEffect(status=StatusCondition.BURN)),
    # Water
    MoveDefinition(id="water-gun", name="Water Gun", type=Type.WATER, category=_SPECIAL, power=40, accuracy=100, pp=25),
    MoveDefinition(id="bubble-beam", name="Bubble Beam", type=Type.WATER, category=_SPECIAL, power=65, accuracy=100, pp=20),
    MoveDefinition(id="aqua-tail", name="Aqua Tail", type=Type.WATER, category=_PHYSICAL, power=90, accuracy=90, pp=10, flags=_CONTACT),
    # Grass
    MoveDefinition(id="vine-whip", name="Vine Whip", type=Type.GRASS, category=_PHYSICAL, power=45, accuracy=100, pp=25, flags=_CONTACT),
    MoveDefinition(id="razor-leaf", name="Razor Leaf", type=Type.GRASS, category=_PHYSICAL, power=55, accuracy=95, pp=25),
    MoveDefinition(id="energy-ball", name="Energy Ball", type=Type.GRASS, category=_SPECIAL, power=90, accuracy=100, pp=10),
    MoveDefinition(id="sleep-powder", name="Sleep Powder", type=Type.GRASS, category=_STATUS, accuracy=75, pp=15, effect=SecondaryEffect(status=StatusCondition.SLEEP)),
    # Electric
    MoveDefinition(id="thunder-shock", name="Thunder Shock", type=Type.ELECTRIC, category=_SPECIAL, power=40, accuracy=100, pp=30, effect=SecondaryEffect(status=StatusCondition.PARALYSIS, status_chance=10)),
    MoveDefinition(id="thunderbolt", name="Thunderbolt", type=Type.ELECTRIC, category=_SPECIAL, power=90, accuracy=100, pp=15, effect=SecondaryEffect(status=StatusCondition.PARALYSIS, status_chance=10)),
    MoveDefinition(id="thunder-wave", name="Thunder Wave", type=Type.ELECTRIC, category=_STATUS, accuracy=90, pp=20, effect=SecondaryEffect(status=StatusCondition.PARALYSIS)),
    # Ice
    MoveDefinition(id="ice-beam", name="Ice Beam", type=Type.ICE, category=_SPECIAL, power=90, accuracy=100, pp=10, effect=SecondaryEffect(status=StatusCondition.FREEZE, status_chance=10)),
    MoveDefinition(id="ice-punch", name="Ice Punch", type=Type.ICE, category=_PHYSICAL, power=75, accuracy=100, pp=15, flags=_PUNCH, effect=SecondaryEffect(status=StatusCondition.FREEZE, status_chance=10)),
    # Fighting
    MoveDefinition(id="mach-punch", name="Mach Punch", type=Type.FIGHTING, category=_PHYSICAL, power=40, accuracy=100, pp=30, priority=1, flags=_PUNCH),
    MoveDefinition(id="brick-break", name="Brick Break", type=Type.FIGHTING, category=_PHYSICAL, power=75, accuracy=100, pp=15, flags=_CONTACT),
    # Poison
    MoveDefinition(id="poison-sting", name="Poison Sting", type=Type.POISON, category=_PHYSICAL, power=15, accuracy=100, pp=35, effect=SecondaryEffect(status=StatusCondition.POISON, status_chance=30)),
    MoveDefinition(id="sludge-bomb", name="Sludge Bomb", type=Type.POISON, category=_SPECIAL, power=90, accuracy=100, pp=10, effect=SecondaryEffect(status=StatusCondition.POISON, status_chance=30)),
    MoveDefinition(id="poison-powder", name="Poison Powder", type=Type.POISON, category=_STATUS, accuracy=75, pp=35, effect=SecondaryEffect(status=StatusCondition.POISON)),
    # Ground
    MoveDefinition(id="mud-slap", name="Mud-Slap", type=Type.GROUND, category=_SPECIAL, power=20, accuracy=100, pp=10, effect=SecondaryEffect(stat_changes={Stat.ACCURACY: -1})),
    MoveDefinition(id="earthquake", name="Earthquake", type=Type.GROUND, category=_PHYSICAL, power=100, accuracy=100, pp=10),
    MoveDefinition(id="sand-attack", name="Sand Attack", type=Type.GROUND, category=_STATUS, accuracy=100, pp=15, effect=SecondaryEffect(stat_changes={Stat.ACCURACY: -1})),
    # Flying
    MoveDefinition(id="gust", name="Gust", type=Type.FLYING, category=_SPECIAL, power=40, accuracy=100, pp=35),
    MoveDefinition(id="wing-attack", name="Wing Attack", type=Type.FLYING, category=_PHYSICAL, power=60, accuracy=100, pp=35, flags=_CONTACT),
    # Psychic
    MoveDefinition(id="confusion", name="Confusion", type=Type.PSYCHIC, category=_SPECIAL, power=50, accuracy=100, pp=25),
    MoveDefinition(id="hypnosis", name="Hypnosis", type=Type.PSYCHIC, category=_STATUS, accuracy=60, pp=20, effect=SecondaryEffect(status=StatusCondition.SLEEP)),
    # Bug
    MoveDefinition(id="bug-bite", name="Bug Bite", type=Type.BUG, category=_PHYSICAL, power=60, accuracy=100, pp=20, flags=_CONTACT),
    MoveDefinition(id="string-shot", name="String Shot", type=Type.BUG, category=_STATUS, accuracy=95, pp=40, effect=SecondaryEffect(stat_changes={Stat.SPEED: -2})),
    # Rock
    MoveDefinition(id="rock-throw", name="Rock Throw", type=Type.ROCK, category=_PHYSICAL, power=50, accuracy=90, pp=15),
    # Ghost
    MoveDefinition(id="lick", name="Lick", type=Type.GHOST, category=_PHYSICAL, power=30, accuracy=100, pp=30, flags=_CONTACT, effect=SecondaryEffect(status=StatusCondition.PARALYSIS, status_chance=30)),
    MoveDefinition(id="shadow-ball", name="Shadow Ball", type=Type.GHOST, category=_SPECIAL, power=80, accuracy=100, pp=15, effect=SecondaryEffect(stat_changes={Stat.SP_DEFENSE: -1}, stat_target="opponent")),
    # Dragon
    MoveDefinition(id="dragon-claw", name="Dragon Claw", type=Type.DRAGON, category=_PHYSICAL, power=80, accuracy=100, pp=15, flags=_CONTACT),
    # Dark
    MoveDefinition(id="bite", name="Bite", type=Type.DARK, category=_PHYSICAL, power=60, accuracy=100, pp=25, flags=_CONTACT, effect=SecondaryEffect(flinch_chance=30)),
    # Steel
    MoveDefinition(id="iron-head", name="Iron Head", type=Type.STEEL, category=_PHYSICAL, power=80, accuracy=100, pp=15, flags=_CONTACT, effect=SecondaryEffect(flinch_chance=30)),
    MoveDefinition(id="iron-defense", name="Iron Defense", type=Type.STEEL, category=_STATUS, accuracy=100, pp=15, effect=SecondaryEffect(stat_changes={Stat.DEFENSE: 2})),
    # Fairy
    MoveDefinition(id="dazzling-gleam", name="Dazzling Gleam", type=Type.FAIRY, category=_SPECIAL, power=80, accuracy=100, pp=10),
]

MOVE_DEFINITIONS: MappingProxyType[str, MoveDefinition] = MappingProxyType({move.id: move for move in _MOVES})

# Typeless fallback used when every move is out of PP
STRUGGLE = MoveDefinition(id="struggle", name="Struggle", type=Type.NORMAL, category=_PHYSICAL, power=50, accuracy=100, pp=1, flags=_CONTACT)
