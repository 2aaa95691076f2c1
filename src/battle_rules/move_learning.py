"""Learning and forgetting moves"""

import logging
from typing import Literal

from battle_rules.constants import MAX_MON_MOVES
from battle_rules.errors import InvalidSlotError
from battle_rules.schema.monster_instance import MonsterInstance, MoveInstance
from battle_rules.schema.move import MoveDefinition
from battle_rules.schema.species_info import LearnsetEntry, MonsterSpecies

logger = logging.getLogger(__name__)


def get_learnable_moves(species: MonsterSpecies, old_level: int, new_level: int) -> list[LearnsetEntry]:
    """Learnset entries unlocked by going from old_level to new_level (old exclusive, new inclusive)"""
    return [entry for entry in species.learnset if old_level < entry.level <= new_level]


def get_initial_moves(species: MonsterSpecies, level: int) -> list[str]:
    """The last four distinct moves learnable at or below a level, in learnset order"""
    move_ids: list[str] = []
    for entry in species.learnset:
        if entry.level > level:
            continue
        if entry.move_id in move_ids:
            move_ids.remove(entry.move_id)
        move_ids.append(entry.move_id)
    return move_ids[-MAX_MON_MOVES:]


def learn_move(monster: MonsterInstance, move: MoveDefinition) -> Literal["learned", "full"]:
    """
    Add a move with full PP when a slot is free.

    A move the monster already knows counts as learned and changes nothing.
    "full" means the caller has to pick a slot for replace_move.
    """
    if monster.find_move(move.id) is not None:
        return "learned"
    if len(monster.moves) >= MAX_MON_MOVES:
        return "full"
    monster.moves.append(MoveInstance(move_id=move.id, current_pp=move.pp))
    logger.debug("%s learned %s", monster.uid, move.id)
    return "learned"


def replace_move(monster: MonsterInstance, slot: int, move: MoveDefinition) -> str:
    """Forget the move in slot and learn the new one. Returns the forgotten move id."""
    if slot < 0 or slot >= len(monster.moves):
        raise InvalidSlotError(slot, len(monster.moves))
    forgotten = monster.moves[slot].move_id
    monster.moves[slot] = MoveInstance(move_id=move.id, current_pp=move.pp)
    logger.debug("%s forgot %s for %s", monster.uid, forgotten, move.id)
    return forgotten
