from pydantic import BaseModel, ConfigDict, Field

from battle_rules.constants import BASE_CRITICAL_CHANCE, CRITICAL_MULTIPLIER, DEFAULT_FRIENDSHIP


class RulesConfig(BaseModel):
    """Startup configuration for the rules core.

    Built once and passed to the functions that read it. Frozen, so concurrent
    callers can share an instance.
    """

    model_config = ConfigDict(frozen=True)

    gym_leader_names: frozenset[str] = Field(default_factory=frozenset)
    champion_keyword: str = "Champion"
    elite_four_keyword: str = "Elite Four"
    default_friendship: int = Field(default=DEFAULT_FRIENDSHIP, ge=0, le=255)
    critical_chance: float = Field(default=BASE_CRITICAL_CHANCE, ge=0.0, le=1.0)
    critical_multiplier: float = Field(default=CRITICAL_MULTIPLIER, ge=1.0)


DEFAULT_RULES_CONFIG = RulesConfig()
