from types import MappingProxyType
from typing import Optional

from battle_rules.enums import BallId, HeldItemEffect, ItemCategory, StatusCondition, Type
from battle_rules.schema.item import (
    BallEffect,
    FullRestoreEffect,
    HealHpEffect,
    HealPpEffect,
    HealStatusEffect,
    HeldItemDefinition,
    ItemDefinition,
    LevelUpEffect,
    ReviveEffect,
)


def _ball(ball_id: BallId, name: str, description: str, price: int, modifier: float = 1.0) -> ItemDefinition:
    return ItemDefinition(
        id=ball_id.value,
        name=name,
        description=description,
        category=ItemCategory.BALL,
        price=price,
        usable_in_battle=True,
        effect=BallEffect(catch_rate_modifier=modifier),
    )


# =============================================================================
# CAPTURE BALLS
# =============================================================================
# Conditional balls keep the neutral 1 here; capture.resolve_ball_modifier works out the real value.
BALL_DEFINITIONS: MappingProxyType[str, ItemDefinition] = MappingProxyType(
    {
        ball.id: ball
        for ball in (
            _ball(BallId.MONSTER_BALL, "Monster Ball", "A ball for catching wild monsters.", 200, 1.0),
            _ball(BallId.SUPER_BALL, "Super Ball", "A better ball than the Monster Ball.", 600, 1.5),
            _ball(BallId.HYPER_BALL, "Hyper Ball", "A better ball than the Super Ball.", 1200, 2.0),
            _ball(BallId.MASTER_BALL, "Master Ball", "Catches any wild monster without fail.", 0, 255.0),
            _ball(BallId.NET_BALL, "Net Ball", "Works well on Water- and Bug-type monsters.", 1000),
            _ball(BallId.DARK_BALL, "Dark Ball", "Works well at night and in caves.", 1000),
            _ball(BallId.TIMER_BALL, "Timer Ball", "Works better the more turns have passed in battle.", 1000),
            _ball(BallId.QUICK_BALL, "Quick Ball", "Works well when thrown at the very start of a battle.", 1000),
            _ball(BallId.REPEAT_BALL, "Repeat Ball", "Works well on species caught before.", 1000),
            _ball(BallId.PREMIER_BALL, "Premier Ball", "A rare ball made to commemorate an event.", 0),
        )
    }
)

# =============================================================================
# MEDICINE
# =============================================================================
MEDICINE_DEFINITIONS: MappingProxyType[str, ItemDefinition] = MappingProxyType(
    {
        item.id: item
        for item in (
            ItemDefinition(id="potion", name="Potion", description="Restores 20 HP.", category=ItemCategory.MEDICINE, price=300, effect=HealHpEffect(amount=20)),
            ItemDefinition(id="super-potion", name="Super Potion", description="Restores 60 HP.", category=ItemCategory.MEDICINE, price=700, effect=HealHpEffect(amount=60)),
            ItemDefinition(id="hyper-potion", name="Hyper Potion", description="Restores 120 HP.", category=ItemCategory.MEDICINE, price=1200, effect=HealHpEffect(amount=120)),
            ItemDefinition(id="max-potion", name="Max Potion", description="Fully restores HP.", category=ItemCategory.MEDICINE, price=2500, effect=HealHpEffect(percent=100)),
            ItemDefinition(id="full-restore", name="Full Restore", description="Fully restores HP and cures any status.", category=ItemCategory.MEDICINE, price=3000, effect=FullRestoreEffect()),
            ItemDefinition(id="antidote", name="Antidote", description="Cures poison.", category=ItemCategory.MEDICINE, price=100, effect=HealStatusEffect(status=StatusCondition.POISON)),
            ItemDefinition(id="burn-heal", name="Burn Heal", description="Heals a burn.", category=ItemCategory.MEDICINE, price=250, effect=HealStatusEffect(status=StatusCondition.BURN)),
            ItemDefinition(id="paralyze-heal", name="Paralyze Heal", description="Cures paralysis.", category=ItemCategory.MEDICINE, price=200, effect=HealStatusEffect(status=StatusCondition.PARALYSIS)),
            ItemDefinition(id="awakening", name="Awakening", description="Wakes a sleeping monster.", category=ItemCategory.MEDICINE, price=250, effect=HealStatusEffect(status=StatusCondition.SLEEP)),
            ItemDefinition(id="ice-heal", name="Ice Heal", description="Thaws a frozen monster.", category=ItemCategory.MEDICINE, price=250, effect=HealStatusEffect(status=StatusCondition.FREEZE)),
            ItemDefinition(id="full-heal", name="Full Heal", description="Cures any status condition.", category=ItemCategory.MEDICINE, price=600, effect=HealStatusEffect(status="all")),
            ItemDefinition(id="revive", name="Revive", description="Revives a fainted monster with half its HP.", category=ItemCategory.MEDICINE, price=1500, effect=ReviveEffect(hp_percent=50)),
            ItemDefinition(id="max-revive", name="Max Revive", description="Revives a fainted monster with full HP.", category=ItemCategory.MEDICINE, price=0, effect=ReviveEffect(hp_percent=100)),
            ItemDefinition(id="ether", name="Ether", description="Restores 10 PP of one move.", category=ItemCategory.MEDICINE, price=1200, effect=HealPpEffect(amount=10)),
            ItemDefinition(id="max-ether", name="Max Ether", description="Fully restores the PP of one move.", category=ItemCategory.MEDICINE, price=2000, effect=HealPpEffect(amount="all")),
            ItemDefinition(id="elixir", name="Elixir", description="Restores 10 PP of every move.", category=ItemCategory.MEDICINE, price=3000, effect=HealPpEffect(amount=10, all_moves=True)),
            ItemDefinition(id="max-elixir", name="Max Elixir", description="Fully restores the PP of every move.", category=ItemCategory.MEDICINE, price=4500, effect=HealPpEffect(amount="all", all_moves=True)),
            ItemDefinition(id="rare-candy", name="Rare Candy", description="Raises a monster's level by one.", category=ItemCategory.MEDICINE, price=4800, usable_in_battle=False, effect=LevelUpEffect()),
        )
    }
)

ALL_ITEMS: MappingProxyType[str, ItemDefinition] = MappingProxyType({**BALL_DEFINITIONS, **MEDICINE_DEFINITIONS})

# =============================================================================
# HELD ITEMS
# =============================================================================
_TYPE_BOOST_ITEMS = [
    ("charcoal", "Charcoal", Type.FIRE),
    ("mystic_water", "Mystic Water", Type.WATER),
    ("miracle_seed", "Miracle Seed", Type.GRASS),
    ("magnet", "Magnet", Type.ELECTRIC),
    ("never_melt_ice", "Never-Melt Ice", Type.ICE),
    ("black_belt", "Black Belt", Type.FIGHTING),
    ("dragon_fang", "Dragon Fang", Type.DRAGON),
    ("spell_tag", "Spell Tag", Type.GHOST),
    ("metal_coat", "Metal Coat", Type.STEEL),
]

HELD_ITEM_DEFINITIONS: MappingProxyType[str, HeldItemDefinition] = MappingProxyType(
    {
        item.id: item
        for item in [
            # Berries and one-shot items
            HeldItemDefinition(id="oran_berry", name="Oran Berry", description="Restores 1/4 of max HP at half HP or less.", effect_type=HeldItemEffect.PINCH_HEAL, consumable=True),
            HeldItemDefinition(id="lum_berry", name="Lum Berry", description="Cures any status condition.", effect_type=HeldItemEffect.STATUS_CURE, consumable=True),
            HeldItemDefinition(id="focus_sash", name="Focus Sash", description="Survives a knockout hit from full HP with 1 HP.", effect_type=HeldItemEffect.FOCUS_SASH, consumable=True),
            # Boosters
            HeldItemDefinition(id="choice_band", name="Choice Band", description="Boosts physical moves by 50%.", effect_type=HeldItemEffect.CHOICE_ATK),
            HeldItemDefinition(id="choice_specs", name="Choice Specs", description="Boosts special moves by 50%.", effect_type=HeldItemEffect.CHOICE_SPATK),
            HeldItemDefinition(id="choice_scarf", name="Choice Scarf", description="Boosts Speed by 50%.", effect_type=HeldItemEffect.CHOICE_SPEED),
            HeldItemDefinition(id="life_orb", name="Life Orb", description="Boosts damage by 30% at the cost of 1/10 max HP per hit.", effect_type=HeldItemEffect.LIFE_ORB),
            HeldItemDefinition(id="leftovers", name="Leftovers", description="Restores 1/16 of max HP every turn.", effect_type=HeldItemEffect.LEFTOVERS),
            HeldItemDefinition(id="eviolite", name="Eviolite", description="Raises both defenses by 50% if the holder can still evolve.", effect_type=HeldItemEffect.EVIOLITE),
        ]
        + [
            HeldItemDefinition(id=item_id, name=name, description=f"Boosts {boost.value.capitalize()}-type moves by 20%.", effect_type=HeldItemEffect.TYPE_BOOST, boost_type=boost)
            for item_id, name, boost in _TYPE_BOOST_ITEMS
        ]
    }
)


def get_ball_definition(ball_id: str) -> Optional[ItemDefinition]:
    return BALL_DEFINITIONS.get(ball_id)


def get_held_item_by_id(item_id: Optional[str]) -> Optional[HeldItemDefinition]:
    if item_id is None:
        return None
    return HELD_ITEM_DEFINITIONS.get(item_id)
