"""
Structured outcome events.

The rules core emits these for a presentation layer (battle log text, sound
effect selection) and never renders them itself. Monsters are referenced by uid.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from battle_rules.enums import Stat, StatusCondition, Weather


class DamageDealtEvent(BaseModel):
    kind: Literal["damage_dealt"] = "damage_dealt"
    target: str
    amount: int
    effectiveness: float = 1.0
    is_critical: bool = False


class StatusInflictedEvent(BaseModel):
    kind: Literal["status_inflicted"] = "status_inflicted"
    target: str
    status: StatusCondition
    source: Optional[str] = None  # move, ability or item id


class StatusCuredEvent(BaseModel):
    kind: Literal["status_cured"] = "status_cured"
    target: str
    status: StatusCondition
    source: Optional[str] = None


class StatStageChangedEvent(BaseModel):
    kind: Literal["stat_stage_changed"] = "stat_stage_changed"
    target: str
    stat: Stat
    delta: int
    new_stage: int


class HealedEvent(BaseModel):
    kind: Literal["healed"] = "healed"
    target: str
    amount: int
    source: Optional[str] = None


class RecoilEvent(BaseModel):
    kind: Literal["recoil"] = "recoil"
    target: str
    amount: int
    source: Optional[str] = None


class WeatherSetEvent(BaseModel):
    kind: Literal["weather_set"] = "weather_set"
    weather: Weather
    source: Optional[str] = None


class AbilityActivatedEvent(BaseModel):
    kind: Literal["ability_activated"] = "ability_activated"
    holder: str
    ability: str


class ItemConsumedEvent(BaseModel):
    kind: Literal["item_consumed"] = "item_consumed"
    holder: str
    item_id: str


class FaintedEvent(BaseModel):
    kind: Literal["fainted"] = "fainted"
    target: str


class CaptureAttemptedEvent(BaseModel):
    kind: Literal["capture_attempted"] = "capture_attempted"
    ball_id: str
    shake_count: int = Field(ge=0, le=3)
    caught: bool


BattleEvent = Annotated[
    Union[
        DamageDealtEvent,
        StatusInflictedEvent,
        StatusCuredEvent,
        StatStageChangedEvent,
        HealedEvent,
        RecoilEvent,
        WeatherSetEvent,
        AbilityActivatedEvent,
        ItemConsumedEvent,
        FaintedEvent,
        CaptureAttemptedEvent,
    ],
    Field(discriminator="kind"),
]
