import itertools
from typing import Iterable, Optional

from battle_rules.abilities import get_monster_ability
from battle_rules.enums import Nature
from battle_rules.experience import exp_for_level
from battle_rules.move_learning import get_initial_moves
from battle_rules.resolvers import MoveResolver, SpeciesResolver, create_move_resolver, create_species_resolver
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.monster_instance import IndividualValues, MonsterInstance, MoveInstance
from battle_rules.stats import calc_all_stats

_uid_counter = itertools.count(1)


def create_monster(
    species_id: str,
    level: int = 50,
    moves: Optional[Iterable[str]] = None,
    iv: int = 31,
    ability: Optional[str] = None,
    held_item: Optional[str] = None,
    nature: Optional[Nature] = None,
    nickname: Optional[str] = None,
    uid: Optional[str] = None,
    species_resolver: Optional[SpeciesResolver] = None,
    move_resolver: Optional[MoveResolver] = None,
) -> MonsterInstance:
    """
    Build a full-HP monster. Without explicit moves it knows the latest
    four moves of its learnset. EVs are 0; friendship stays unset so the
    species default applies.
    """
    species = (species_resolver or create_species_resolver())(species_id)
    move_resolver = move_resolver or create_move_resolver()
    ivs = IndividualValues(hp=iv, atk=iv, defense=iv, sp_atk=iv, sp_def=iv, speed=iv)

    move_ids = list(moves) if moves is not None else get_initial_moves(species, level)
    monster = MonsterInstance(
        uid=uid or f"{species_id}-{next(_uid_counter)}",
        species_id=species_id,
        level=level,
        exp=exp_for_level(level),
        ivs=ivs,
        current_hp=1,
        moves=[MoveInstance(move_id=move_id, current_pp=move_resolver(move_id).pp) for move_id in move_ids[:4]],
        ability=ability,
        held_item=held_item,
        nature=nature,
        nickname=nickname,
    )
    monster.current_hp = calc_all_stats(species.base_stats, monster.ivs, monster.evs, level, monster.nature).hp
    return monster


def create_battler(monster: MonsterInstance, species_resolver: Optional[SpeciesResolver] = None) -> BattlerState:
    """Wrap a monster for battle: resolve its species, stats and ability"""
    species = (species_resolver or create_species_resolver())(monster.species_id)
    return BattlerState(
        monster=monster,
        species=species,
        stats=calc_all_stats(species.base_stats, monster.ivs, monster.evs, monster.level, monster.nature),
        ability=get_monster_ability(monster, species),
    )
