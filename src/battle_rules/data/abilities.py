from types import MappingProxyType

from battle_rules.enums import Ability, AbilityTrigger
from battle_rules.schema.ability import AbilityDefinition

_ON_DAMAGE_CALC = AbilityTrigger.ON_DAMAGE_CALC
_ON_ENTER = AbilityTrigger.ON_ENTER
_ON_TYPE = AbilityTrigger.ON_TYPE_EFFECTIVENESS
_PASSIVE = AbilityTrigger.PASSIVE

_ABILITIES = [
    # Pinch boosts
    AbilityDefinition(id=Ability.BLAZE, name="Blaze", description="Powers up Fire-type moves by 50% when HP is at or below 1/3.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.TORRENT, name="Torrent", description="Powers up Water-type moves by 50% when HP is at or below 1/3.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.OVERGROW, name="Overgrow", description="Powers up Grass-type moves by 50% when HP is at or below 1/3.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.SWARM, name="Swarm", description="Powers up Bug-type moves by 50% when HP is at or below 1/3.", trigger=_ON_DAMAGE_CALC),
    # Entry effects
    AbilityDefinition(id=Ability.INTIMIDATE, name="Intimidate", description="Lowers the opponent's Attack by one stage on entering battle.", trigger=_ON_ENTER),
    AbilityDefinition(id=Ability.DRIZZLE, name="Drizzle", description="Makes it rain on entering battle.", trigger=_ON_ENTER),
    AbilityDefinition(id=Ability.DROUGHT, name="Drought", description="Turns the sunlight harsh on entering battle.", trigger=_ON_ENTER),
    AbilityDefinition(id=Ability.SHADOW_TAG, name="Shadow Tag", description="Prevents the opponent from fleeing or switching out.", trigger=_ON_ENTER),
    # Type immunities
    AbilityDefinition(id=Ability.LEVITATE, name="Levitate", description="Gives full immunity to Ground-type moves.", trigger=_ON_TYPE),
    AbilityDefinition(id=Ability.FLASH_FIRE, name="Flash Fire", description="Absorbs Fire-type moves and powers up its own Fire-type moves by 50%.", trigger=_ON_TYPE),
    AbilityDefinition(id=Ability.WATER_ABSORB, name="Water Absorb", description="Restores 1/4 of max HP when hit by a Water-type move instead of taking damage.", trigger=_ON_TYPE),
    AbilityDefinition(id=Ability.VOLT_ABSORB, name="Volt Absorb", description="Restores 1/4 of max HP when hit by an Electric-type move instead of taking damage.", trigger=_ON_TYPE),
    # Damage modifiers
    AbilityDefinition(id=Ability.THICK_FAT, name="Thick Fat", description="Halves damage from Fire- and Ice-type moves.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.ADAPTABILITY, name="Adaptability", description="Raises the same-type attack bonus from 1.5x to 2x.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.HUGE_POWER, name="Huge Power", description="Doubles the power of physical moves.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.GUTS, name="Guts", description="Boosts physical moves by 50% while statused and ignores the burn penalty.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.TECHNICIAN, name="Technician", description="Powers up moves with 60 power or less by 50%.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.IRON_FIST, name="Iron Fist", description="Powers up punching moves by 20%.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.ROCK_HEAD, name="Rock Head", description="Protects from recoil damage.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.ICE_SCALES, name="Ice Scales", description="Halves damage from special moves.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.MARVEL_SCALE, name="Marvel Scale", description="Raises Defense by 50% while statused.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.SHELL_ARMOR, name="Shell Armor", description="Protects from critical hits.", trigger=_ON_DAMAGE_CALC),
    AbilityDefinition(id=Ability.STURDY, name="Sturdy", description="Survives a one-hit knockout from full HP with 1 HP left.", trigger=_ON_DAMAGE_CALC),
    # Passive
    AbilityDefinition(id=Ability.SPEED_BOOST, name="Speed Boost", description="Raises Speed by one stage at the end of every turn.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.SWIFT_SWIM, name="Swift Swim", description="Doubles Speed in rain.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.NATURAL_CURE, name="Natural Cure", description="Cures status conditions on switching out.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.SHED_SKIN, name="Shed Skin", description="Has a 1/3 chance each turn to cure its own status condition.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.SYNCHRONIZE, name="Synchronize", description="Passes poison, burn or paralysis back to the opponent that inflicted it.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.POISON_TOUCH, name="Poison Touch", description="Contact moves have a 30% chance to poison the target.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.STATIC, name="Static", description="Contact with this monster has a 30% chance to cause paralysis.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.FLAME_BODY, name="Flame Body", description="Contact with this monster has a 30% chance to cause a burn.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.CLEAR_BODY, name="Clear Body", description="Prevents other monsters from lowering its stats.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.KEEN_EYE, name="Keen Eye", description="Prevents other monsters from lowering its accuracy.", trigger=_PASSIVE),
    AbilityDefinition(id=Ability.INNER_FOCUS, name="Inner Focus", description="Prevents flinching.", trigger=_PASSIVE),
]

# Immutable catalogue keyed by ability
ABILITY_DEFINITIONS: MappingProxyType[Ability, AbilityDefinition] = MappingProxyType({a.id: a for a in _ABILITIES})
