from enum import IntEnum


class EndTurnBattlerEffect(IntEnum):
    """
    Per-battler end-of-turn effects, in processing order.

    EndTurnEffectsProcessor walks these in sequence for each active battler.
    """

    STATUS_DAMAGE = 0  # poison / burn chip damage
    FRIENDSHIP_RECOVERY = 1  # 10% status recovery at max friendship
    ABILITIES = 2  # passive end-of-turn abilities (Speed Boost, Shed Skin)
    ITEMS = 3  # Leftovers, Lum Berry, Oran Berry
    BATTLER_COUNT = 4  # Sentinel value
