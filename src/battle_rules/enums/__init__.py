from battle_rules.enums.type import Type
from battle_rules.enums.ability import Ability, AbilityTrigger, PassiveEvent
from battle_rules.enums.status import StatusCondition
from battle_rules.enums.move import MoveCategory, MoveFlag
from battle_rules.enums.item import BallId, HeldItemEffect, ItemCategory
from battle_rules.enums.other import Stat, Weather, FriendshipEvent, FriendshipLevel, Nature, TrainerClass, TimeOfDay
from battle_rules.enums.end_turn_effects import EndTurnBattlerEffect
