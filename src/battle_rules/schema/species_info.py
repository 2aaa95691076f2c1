from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from battle_rules.constants import DEFAULT_CATCH_RATE
from battle_rules.enums import Type


class BaseStats(BaseModel):
    """Base stat block shared by every individual of a species"""

    model_config = ConfigDict(frozen=True)

    hp: int = Field(ge=1, le=255)
    atk: int = Field(ge=1, le=255)
    defense: int = Field(ge=1, le=255)
    sp_atk: int = Field(ge=1, le=255)
    sp_def: int = Field(ge=1, le=255)
    speed: int = Field(ge=1, le=255)

    def total(self) -> int:
        return self.hp + self.atk + self.defense + self.sp_atk + self.sp_def + self.speed


class LearnsetEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=100)
    move_id: str


class EvolutionEdge(BaseModel):
    """One evolution target.

    condition is an optional tag: "friendship", "time:day", "time:night",
    "item:<id>", "trade", "location:<map>", "move:<id>" or "party:<species>".
    """

    model_config = ConfigDict(frozen=True)

    target_id: str
    level: int = Field(default=1, ge=1, le=100)
    condition: Optional[str] = None


class MonsterSpecies(BaseModel):
    """Static species template, owned by the species registry"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    types: list[Type] = Field(min_length=1, max_length=2)
    base_stats: BaseStats
    learnset: list[LearnsetEntry] = Field(default_factory=list)
    evolves_to: list[EvolutionEdge] = Field(default_factory=list)
    base_friendship: Optional[int] = Field(default=None, ge=0, le=255)
    catch_rate: int = Field(default=DEFAULT_CATCH_RATE, ge=1, le=255)
    abilities: list[str] = Field(default_factory=list)  # ability ids, first is the default
    base_exp_yield: Optional[int] = Field(default=None, ge=1)

    def can_evolve(self) -> bool:
        return len(self.evolves_to) > 0
