class BattleRulesError(Exception):
    """Base for rules-core errors."""


class UnknownIdentifierError(BattleRulesError, LookupError):
    """A resolver was asked for an id its registry does not hold."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"unknown {kind}: {identifier}")
        self.kind = kind
        self.identifier = identifier


class InvalidSlotError(BattleRulesError, IndexError):
    def __init__(self, slot: int, size: int):
        super().__init__(f"invalid move slot {slot} (monster knows {size} moves)")
        self.slot = slot
        self.size = size
