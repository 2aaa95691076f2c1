"""
Resolver contracts between the rules core and content storage.

Each resolver maps an id to its definition and raises UnknownIdentifierError
("unknown <kind>: <id>") on a miss. Callers let that error propagate.
"""

from typing import Callable, Mapping, Optional, TypeVar

from battle_rules.data.items import ALL_ITEMS
from battle_rules.data.moves import MOVE_DEFINITIONS
from battle_rules.data.species import SPECIES_DEFINITIONS
from battle_rules.errors import UnknownIdentifierError
from battle_rules.schema.item import ItemDefinition
from battle_rules.schema.move import MoveDefinition
from battle_rules.schema.species_info import MonsterSpecies

T = TypeVar("T")

SpeciesResolver = Callable[[str], MonsterSpecies]
MoveResolver = Callable[[str], MoveDefinition]
ItemResolver = Callable[[str], ItemDefinition]


def _make_resolver(kind: str, registry: Mapping[str, T]) -> Callable[[str], T]:
    def resolve(identifier: str) -> T:
        try:
            return registry[identifier]
        except KeyError:
            raise UnknownIdentifierError(kind, identifier) from None

    return resolve


def create_species_resolver(registry: Optional[Mapping[str, MonsterSpecies]] = None) -> SpeciesResolver:
    return _make_resolver("species", SPECIES_DEFINITIONS if registry is None else registry)


def create_move_resolver(registry: Optional[Mapping[str, MoveDefinition]] = None) -> MoveResolver:
    return _make_resolver("move", MOVE_DEFINITIONS if registry is None else registry)


def create_item_resolver(registry: Optional[Mapping[str, ItemDefinition]] = None) -> ItemResolver:
    return _make_resolver("item", ALL_ITEMS if registry is None else registry)
