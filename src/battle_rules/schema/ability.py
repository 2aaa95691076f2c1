from pydantic import BaseModel, ConfigDict

from battle_rules.enums import Ability, AbilityTrigger


class AbilityDefinition(BaseModel):
    """Catalogue entry for an ability. The effect itself lives in the handler tables of battle_rules.abilities."""

    model_config = ConfigDict(frozen=True)

    id: Ability
    name: str
    description: str
    trigger: AbilityTrigger
