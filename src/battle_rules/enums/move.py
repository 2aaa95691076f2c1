from enum import Enum, IntFlag


class MoveCategory(str, Enum):
    """Damage category; selects which attack/defense stat pair a move uses"""

    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"


class MoveFlag(IntFlag):
    """Move property flags"""

    NONE = 0
    MAKES_CONTACT = 1 << 0  # Physical contact move
    PUNCH = 1 << 1  # Punching move (Iron Fist)
    SOUND = 1 << 2  # Sound-based move

    def makes_contact(self) -> bool:
        """Check if move makes physical contact (triggers contact abilities)"""
        return bool(self & self.MAKES_CONTACT)

    def is_punch(self) -> bool:
        return bool(self & self.PUNCH)
