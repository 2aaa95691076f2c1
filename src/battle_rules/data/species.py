from types import MappingProxyType

from battle_rules.enums import Type
from battle_rules.schema.species_info import BaseStats, EvolutionEdge, LearnsetEntry, MonsterSpecies


def _learnset(*entries: tuple[int, str]) -> list[LearnsetEntry]:
    return [LearnsetEntry(level=level, move_id=move_id) for level, move_id in entries]


_SPECIES = [
    # Fire starter line
    MonsterSpecies(
        id="himori",
        name="Himori",
        types=[Type.FIRE],
        base_stats=BaseStats(hp=45, atk=60, defense=40, sp_atk=50, sp_def=40, speed=65),
        learnset=_learnset((1, "tackle"), (1, "growl"), (5, "ember"), (9, "quick-attack"), (13, "bite")),
        evolves_to=[EvolutionEdge(target_id="hinomori", level=16)],
        catch_rate=45,
        abilities=["blaze"],
        base_exp_yield=62,
    ),
    MonsterSpecies(
        id="hinomori",
        name="Hinomori",
        types=[Type.FIRE],
        base_stats=BaseStats(hp=60, atk=80, defense=55, sp_atk=65, sp_def=55, speed=80),
        learnset=_learnset((1, "tackle"), (1, "growl"), (1, "ember"), (9, "quick-attack"), (13, "bite"), (24, "fire-punch")),
        evolves_to=[EvolutionEdge(target_id="enjuu", level=36)],
        catch_rate=45,
        abilities=["blaze", "flash_fire"],
        base_exp_yield=142,
    ),
    MonsterSpecies(
        id="enjuu",
        name="Enjuu",
        types=[Type.FIRE, Type.FIGHTING],
        base_stats=BaseStats(hp=76, atk=104, defense=71, sp_atk=80, sp_def=71, speed=108),
        learnset=_learnset((1, "tackle"), (1, "ember"), (1, "quick-attack"), (36, "mach-punch"), (42, "flamethrower")),
        catch_rate=45,
        abilities=["blaze", "iron_fist"],
        base_exp_yield=240,
    ),
    # Water starter
    MonsterSpecies(
        id="shizukumo",
        name="Shizukumo",
        types=[Type.WATER],
        base_stats=BaseStats(hp=50, atk=40, defense=45, sp_atk=60, sp_def=50, speed=55),
        learnset=_learnset((1, "tackle"), (1, "tail-whip"), (5, "water-gun"), (12, "bubble-beam")),
        catch_rate=45,
        abilities=["torrent"],
        base_exp_yield=63,
    ),
    # Grass starter
    MonsterSpecies(
        id="konohana",
        name="Konohana",
        types=[Type.GRASS],
        base_stats=BaseStats(hp=55, atk=50, defense=55, sp_atk=50, sp_def=55, speed=45),
        learnset=_learnset((1, "tackle"), (1, "growl"), (5, "vine-whip"), (11, "razor-leaf"), (17, "sleep-powder")),
        catch_rate=45,
        abilities=["overgrow"],
        base_exp_yield=64,
    ),
    MonsterSpecies(
        id="kusakabi",
        name="Kusakabi",
        types=[Type.GRASS, Type.POISON],
        base_stats=BaseStats(hp=60, atk=55, defense=60, sp_atk=70, sp_def=65, speed=40),
        learnset=_learnset((1, "vine-whip"), (1, "poison-sting"), (9, "poison-powder"), (20, "sludge-bomb")),
        catch_rate=120,
        abilities=["overgrow", "poison_touch"],
    ),
    MonsterSpecies(
        id="kawadojou",
        name="Kawadojou",
        types=[Type.WATER, Type.GROUND],
        base_stats=BaseStats(hp=80, atk=65, defense=60, sp_atk=50, sp_def=55, speed=35),
        learnset=_learnset((1, "water-gun"), (1, "mud-slap"), (25, "earthquake")),
        catch_rate=90,
        abilities=["swift_swim", "water_absorb"],
    ),
    MonsterSpecies(
        id="hikarineko",
        name="Hikarineko",
        types=[Type.ELECTRIC],
        base_stats=BaseStats(hp=45, atk=55, defense=40, sp_atk=70, sp_def=50, speed=90),
        learnset=_learnset((1, "scratch"), (1, "thunder-shock"), (10, "thunder-wave"), (26, "thunderbolt")),
        evolves_to=[EvolutionEdge(target_id="raikoneko", level=1, condition="friendship")],
        base_friendship=90,
        catch_rate=120,
        abilities=["static", "volt_absorb"],
    ),
    MonsterSpecies(
        id="raikoneko",
        name="Raikoneko",
        types=[Type.ELECTRIC, Type.FAIRY],
        base_stats=BaseStats(hp=70, atk=75, defense=60, sp_atk=100, sp_def=75, speed=110),
        learnset=_learnset((1, "thunder-shock"), (1, "dazzling-gleam"), (30, "thunderbolt")),
        catch_rate=45,
        abilities=["static"],
    ),
    MonsterSpecies(
        id="yurabi",
        name="Yurabi",
        types=[Type.GHOST],
        base_stats=BaseStats(hp=40, atk=35, defense=45, sp_atk=80, sp_def=60, speed=70),
        learnset=_learnset((1, "lick"), (1, "hypnosis"), (21, "shadow-ball")),
        evolves_to=[EvolutionEdge(target_id="yuragami", level=25, condition="time:night")],
        catch_rate=90,
        abilities=["levitate", "shadow_tag"],
    ),
    MonsterSpecies(
        id="yuragami",
        name="Yuragami",
        types=[Type.GHOST, Type.DARK],
        base_stats=BaseStats(hp=60, atk=60, defense=65, sp_atk=105, sp_def=85, speed=90),
        learnset=_learnset((1, "lick"), (1, "shadow-ball"), (1, "bite")),
        catch_rate=45,
        abilities=["levitate"],
    ),
    MonsterSpecies(
        id="tobibato",
        name="Tobibato",
        types=[Type.NORMAL, Type.FLYING],
        base_stats=BaseStats(hp=40, atk=45, defense=40, sp_atk=35, sp_def=35, speed=56),
        learnset=_learnset((1, "tackle"), (1, "sand-attack"), (9, "gust"), (15, "wing-attack")),
        catch_rate=255,
        abilities=["keen_eye", "inner_focus"],
        base_exp_yield=50,
    ),
    MonsterSpecies(
        id="mayumushi",
        name="Mayumushi",
        types=[Type.BUG],
        base_stats=BaseStats(hp=45, atk=30, defense=35, sp_atk=20, sp_def=20, speed=45),
        learnset=_learnset((1, "tackle"), (1, "string-shot"), (7, "bug-bite")),
        evolves_to=[EvolutionEdge(target_id="hanamushi", level=10)],
        catch_rate=255,
        abilities=["shed_skin", "swarm"],
    ),
    MonsterSpecies(
        id="hanamushi",
        name="Hanamushi",
        types=[Type.BUG, Type.FLYING],
        base_stats=BaseStats(hp=60, atk=45, defense=50, sp_atk=90, sp_def=80, speed=70),
        learnset=_learnset((1, "gust"), (1, "confusion"), (10, "sleep-powder")),
        catch_rate=45,
        abilities=["swarm"],
    ),
    MonsterSpecies(
        id="dogou",
        name="Dogou",
        types=[Type.GROUND, Type.STEEL],
        base_stats=BaseStats(hp=70, atk=85, defense=120, sp_atk=40, sp_def=60, speed=30),
        learnset=_learnset((1, "tackle"), (1, "iron-defense"), (20, "iron-head"), (30, "earthquake")),
        catch_rate=60,
        abilities=["sturdy", "rock_head"],
    ),
    MonsterSpecies(
        id="umitsubame",
        name="Umitsubame",
        types=[Type.WATER, Type.FLYING],
        base_stats=BaseStats(hp=55, atk=60, defense=50, sp_atk=55, sp_def=50, speed=85),
        learnset=_learnset((1, "water-gun"), (1, "gust"), (18, "wing-attack"), (28, "aqua-tail")),
        catch_rate=120,
        abilities=["swift_swim", "keen_eye"],
    ),
    MonsterSpecies(
        id="kumaboshi",
        name="Kumaboshi",
        types=[Type.NORMAL],
        base_stats=BaseStats(hp=90, atk=70, defense=70, sp_atk=40, sp_def=60, speed=40),
        learnset=_learnset((1, "scratch"), (1, "growl"), (14, "headbutt"), (22, "take-down"), (34, "double-edge")),
        evolves_to=[EvolutionEdge(target_id="oogumaboshi", level=30, condition="item:moon-stone")],
        catch_rate=75,
        abilities=["thick_fat", "huge_power"],
    ),
    MonsterSpecies(
        id="oogumaboshi",
        name="Oogumaboshi",
        types=[Type.NORMAL, Type.ICE],
        base_stats=BaseStats(hp=110, atk=100, defense=85, sp_atk=55, sp_def=75, speed=50),
        learnset=_learnset((1, "ice-punch"), (1, "double-edge")),
        catch_rate=45,
        abilities=["thick_fat"],
    ),
]

# Shared read-only species registry, keyed by id
SPECIES_DEFINITIONS: MappingProxyType[str, MonsterSpecies] = MappingProxyType({species.id: species for species in _SPECIES})
