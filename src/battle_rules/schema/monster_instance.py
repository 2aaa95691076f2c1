from typing import Optional

from pydantic import BaseModel, Field

from battle_rules.constants import MAX_MON_MOVES
from battle_rules.enums import Nature, StatusCondition


class IndividualValues(BaseModel):
    hp: int = Field(default=31, ge=0, le=31)
    atk: int = Field(default=31, ge=0, le=31)
    defense: int = Field(default=31, ge=0, le=31)
    sp_atk: int = Field(default=31, ge=0, le=31)
    sp_def: int = Field(default=31, ge=0, le=31)
    speed: int = Field(default=31, ge=0, le=31)


class EffortValues(BaseModel):
    hp: int = Field(default=0, ge=0, le=255)
    atk: int = Field(default=0, ge=0, le=255)
    defense: int = Field(default=0, ge=0, le=255)
    sp_atk: int = Field(default=0, ge=0, le=255)
    sp_def: int = Field(default=0, ge=0, le=255)
    speed: int = Field(default=0, ge=0, le=255)


class MoveInstance(BaseModel):
    """A known move and its remaining PP"""

    move_id: str
    current_pp: int = Field(ge=0)


class MonsterInstance(BaseModel):
    """A live individual monster.

    Holds only the species id; the species itself is looked up through a
    SpeciesResolver. The instance owns its move list and status slot.
    """

    uid: str
    species_id: str
    level: int = Field(ge=1, le=100)
    exp: int = Field(default=0, ge=0)
    ivs: IndividualValues = Field(default_factory=IndividualValues)
    evs: EffortValues = Field(default_factory=EffortValues)
    current_hp: int = Field(ge=0)
    moves: list[MoveInstance] = Field(default_factory=list, max_length=MAX_MON_MOVES)
    status: Optional[StatusCondition] = None
    friendship: Optional[int] = Field(default=None, ge=0, le=255)
    ability: Optional[str] = None  # overrides the species' default ability
    held_item: Optional[str] = None
    nature: Optional[Nature] = None  # None behaves as a neutral nature
    nickname: Optional[str] = None

    def is_fainted(self) -> bool:
        return self.current_hp <= 0

    def find_move(self, move_id: str) -> Optional[MoveInstance]:
        for move in self.moves:
            if move.move_id == move_id:
                return move
        return None
