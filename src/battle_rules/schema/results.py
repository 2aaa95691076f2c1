from typing import Optional

from pydantic import BaseModel, Field

from battle_rules.enums import StatusCondition
from battle_rules.schema.events import BattleEvent


class DamageResult(BaseModel):
    damage: int = Field(ge=0)
    effectiveness: float = 1.0
    is_critical: bool = False
    is_stab: bool = False
    modifiers: list[tuple[str, float]] = Field(default_factory=list)  # pipeline stages in application order
    recoil: int = 0
    # Defender-side effects for the caller to apply
    defender_heal: int = 0
    flash_fire_triggered: bool = False
    consumed_item: Optional[str] = None
    events: list[BattleEvent] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)


class MoveOutcome(BaseModel):
    """Result of one attack attempt"""

    hit: bool
    damage: Optional[DamageResult] = None
    defender_hp_after: int
    status_applied: Optional[StatusCondition] = None
    flinched: bool = False
    events: list[BattleEvent] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)


class AbilityOutcome(BaseModel):
    """What an ability handler did. effectiveness is set only by type-effectiveness handlers that override the lookup."""

    activated: bool = False
    effectiveness: Optional[float] = None
    heal: int = 0
    flash_fire_triggered: bool = False
    events: list[BattleEvent] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)


class CatchResult(BaseModel):
    caught: bool
    shake_count: int = Field(ge=0, le=3)


class CaptureFlowResult(BaseModel):
    catch_result: CatchResult
    ball_modifier: float
    events: list[BattleEvent] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)


class ItemUseResult(BaseModel):
    """Expected failures (wrong target, nothing to heal) come back as success=False, never as exceptions"""

    success: bool
    message: str
    events: list[BattleEvent] = Field(default_factory=list)


class ExpGainResult(BaseModel):
    levels_gained: int
    new_level: int
    friendship: int


class EndTurnResult(BaseModel):
    events: list[BattleEvent] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)
