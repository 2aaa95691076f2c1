from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from battle_rules.enums import MoveCategory, MoveFlag, Stat, StatusCondition, Type


class SecondaryEffect(BaseModel):
    """Extra effect carried by a move.

    status_chance is a percentage; None means the status always lands (status moves).
    stat_target None picks the opponent for drops and the user for raises.
    """

    model_config = ConfigDict(frozen=True)

    status: Optional[StatusCondition] = None
    status_chance: Optional[int] = Field(default=None, ge=1, le=100)
    stat_changes: dict[Stat, int] = Field(default_factory=dict)
    stat_target: Optional[Literal["self", "opponent"]] = None
    flinch_chance: int = Field(default=0, ge=0, le=100)

    def resolved_stat_target(self) -> Literal["self", "opponent"]:
        if self.stat_target is not None:
            return self.stat_target
        is_debuff = any(delta < 0 for delta in self.stat_changes.values())
        return "opponent" if is_debuff else "self"


class MoveDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: Type
    category: MoveCategory
    power: Optional[int] = Field(default=None, ge=1)  # None for status moves
    accuracy: int = Field(default=100, ge=1, le=100)
    pp: int = Field(ge=1, le=64)
    priority: int = Field(default=0, ge=-7, le=7)
    flags: MoveFlag = MoveFlag.NONE
    effect: Optional[SecondaryEffect] = None
    recoil: float = Field(default=0.0, ge=0.0, le=1.0)  # fraction of damage dealt

    def is_damaging(self) -> bool:
        return self.category != MoveCategory.STATUS and self.power is not None
