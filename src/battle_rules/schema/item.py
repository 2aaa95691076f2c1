from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from battle_rules.enums import HeldItemEffect, ItemCategory, StatusCondition, Type


class BallEffect(BaseModel):
    """Conditional balls store the neutral 1 and resolve the real value per throw"""

    model_config = ConfigDict(frozen=True)

    type: Literal["ball"] = "ball"
    catch_rate_modifier: float = Field(gt=0)


class HealHpEffect(BaseModel):
    """Restores a fixed amount, or a percentage of max HP when amount is 0"""

    model_config = ConfigDict(frozen=True)

    type: Literal["heal_hp"] = "heal_hp"
    amount: int = Field(default=0, ge=0)
    percent: int = Field(default=0, ge=0, le=100)


class HealStatusEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["heal_status"] = "heal_status"
    status: Union[StatusCondition, Literal["all"]]


class ReviveEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["revive"] = "revive"
    hp_percent: int = Field(ge=1, le=100)


class HealPpEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["heal_pp"] = "heal_pp"
    amount: Union[int, Literal["all"]]
    all_moves: bool = False


class LevelUpEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["level_up"] = "level_up"


class FullRestoreEffect(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["full_restore"] = "full_restore"


ItemEffect = Annotated[
    Union[BallEffect, HealHpEffect, HealStatusEffect, ReviveEffect, HealPpEffect, LevelUpEffect, FullRestoreEffect],
    Field(discriminator="type"),
]


class ItemDefinition(BaseModel):
    """Bag item, owned by the item registry"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    category: ItemCategory
    price: int = Field(default=0, ge=0)
    usable_in_battle: bool = True
    effect: ItemEffect


class HeldItemDefinition(BaseModel):
    """Item a monster carries into battle"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    effect_type: HeldItemEffect
    boost_type: Optional[Type] = None  # type_boost only
    consumable: bool = False
