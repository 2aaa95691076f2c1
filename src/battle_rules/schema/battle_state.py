from typing import Optional

from pydantic import BaseModel, Field

from battle_rules.enums import Ability, Stat, Type
from battle_rules.schema.monster_instance import MonsterInstance
from battle_rules.schema.species_info import MonsterSpecies


class StatBlock(BaseModel):
    """Computed (real) stats of a monster at its current level"""

    hp: int = Field(ge=1)
    atk: int = Field(ge=1)
    defense: int = Field(ge=1)
    sp_atk: int = Field(ge=1)
    sp_def: int = Field(ge=1)
    speed: int = Field(ge=1)

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)


class StatStages(BaseModel):
    """In-battle stat stages, each in -6..+6"""

    atk: int = Field(default=0, ge=-6, le=6)
    defense: int = Field(default=0, ge=-6, le=6)
    sp_atk: int = Field(default=0, ge=-6, le=6)
    sp_def: int = Field(default=0, ge=-6, le=6)
    speed: int = Field(default=0, ge=-6, le=6)
    accuracy: int = Field(default=0, ge=-6, le=6)
    evasion: int = Field(default=0, ge=-6, le=6)

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def set(self, stat: Stat, stage: int) -> None:
        setattr(self, stat.value, stage)


class BattlerState(BaseModel):
    """Transient wrapper around a monster that is active in battle.

    Carries the resolved species and ability plus everything that only lives
    for the duration of a battle. The wrapped instance is mutated in place.
    """

    monster: MonsterInstance
    species: MonsterSpecies
    stats: StatBlock
    ability: Optional[Ability] = None
    stages: StatStages = Field(default_factory=StatStages)
    flash_fire_active: bool = False
    trapped: bool = False

    @property
    def uid(self) -> str:
        return self.monster.uid

    @property
    def name(self) -> str:
        return self.monster.nickname or self.species.name

    @property
    def max_hp(self) -> int:
        return self.stats.hp

    @property
    def types(self) -> list[Type]:
        return self.species.types

    def has_ability(self, ability: Ability) -> bool:
        return self.ability == ability

    def is_fainted(self) -> bool:
        return self.monster.current_hp <= 0


class BallCatchContext(BaseModel):
    """Situation of a single capture attempt"""

    target_types: list[Type] = Field(default_factory=list, max_length=2)
    turn_count: int = Field(default=0, ge=0)
    is_night: bool = False
    is_cave: bool = False
    is_registered: bool = False
