from battle_rules.end_turn_effects import EndTurnEffectsProcessor
from battle_rules.enums import Ability, StatusCondition
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import DamageDealtEvent, FaintedEvent, HealedEvent, ItemConsumedEvent, StatusCuredEvent
from battle_rules.utils.mon_factory import create_battler, create_monster


def make_mon(species_id: str, *, hp: int | None = None, status: StatusCondition | None = None, held_item: str | None = None, ability: Ability | None = None) -> BattlerState:
    monster = create_monster(species_id, held_item=held_item, ability=ability.value if ability is not None else None)
    if hp is not None:
        monster.current_hp = hp
    monster.status = status
    return create_battler(monster)


def never_called() -> float:
    raise AssertionError("no random draw expected")


def test_poison_damage_then_leftovers():
    himori = make_mon("himori", status=StatusCondition.POISON, held_item="leftovers")
    result = EndTurnEffectsProcessor([himori], never_called).process_all_end_turn_effects()

    assert himori.monster.current_hp == 120 - 15 + 7
    damage, heal = result.events
    assert isinstance(damage, DamageDealtEvent) and damage.amount == 15
    assert isinstance(heal, HealedEvent) and heal.amount == 7
    assert result.messages[0] == "Himori is hurt by poison!"
    assert result.messages[1] == "Himori restored a little HP using its Leftovers!"


def test_fainting_stops_the_remaining_effects():
    himori = make_mon("himori", hp=10, status=StatusCondition.POISON, held_item="leftovers")
    result = EndTurnEffectsProcessor([himori], never_called).process_all_end_turn_effects()

    assert himori.monster.current_hp == 0
    assert isinstance(result.events[-1], FaintedEvent)
    assert not any(isinstance(event, HealedEvent) for event in result.events)
    assert himori.monster.held_item == "leftovers"


def test_max_friendship_can_shake_off_status():
    himori = make_mon("himori", status=StatusCondition.BURN)
    himori.monster.friendship = 255
    result = EndTurnEffectsProcessor([himori], lambda: 0.05).process_all_end_turn_effects()

    assert himori.monster.status is None
    # Burn damage still lands before the recovery roll
    assert himori.monster.current_hp == 120 - 7
    cured = [event for event in result.events if isinstance(event, StatusCuredEvent)]
    assert cured[0].source == "friendship"


def test_max_friendship_recovery_can_fail():
    himori = make_mon("himori", status=StatusCondition.PARALYSIS)
    himori.monster.friendship = 255
    EndTurnEffectsProcessor([himori], lambda: 0.5).process_all_end_turn_effects()
    assert himori.monster.status == StatusCondition.PARALYSIS


def test_lum_berry_cures_and_is_consumed():
    kumaboshi = make_mon("kumaboshi", status=StatusCondition.PARALYSIS, held_item="lum_berry")
    result = EndTurnEffectsProcessor([kumaboshi], never_called).process_all_end_turn_effects()

    assert kumaboshi.monster.status is None
    assert kumaboshi.monster.held_item is None
    assert isinstance(result.events[-1], ItemConsumedEvent)
    assert result.messages == ["Kumaboshi's Lum Berry cured its status!"]


def test_oran_berry_heals_in_a_pinch():
    himori = make_mon("himori", hp=50, held_item="oran_berry")
    EndTurnEffectsProcessor([himori], never_called).process_all_end_turn_effects()
    assert himori.monster.current_hp == 80
    assert himori.monster.held_item is None

    healthy = make_mon("himori", hp=100, held_item="oran_berry")
    EndTurnEffectsProcessor([healthy], never_called).process_all_end_turn_effects()
    assert healthy.monster.held_item == "oran_berry"


def test_end_of_turn_abilities_run_for_every_battler():
    fast = make_mon("tobibato", ability=Ability.SPEED_BOOST)
    other = make_mon("himori", status=StatusCondition.BURN)
    result = EndTurnEffectsProcessor([fast, other], never_called).process_all_end_turn_effects()

    assert fast.stages.speed == 1
    assert other.monster.current_hp == 120 - 7
    assert "Himori is hurt by its burn!" in result.messages


def test_nothing_happens_to_healthy_battlers():
    result = EndTurnEffectsProcessor([make_mon("himori"), make_mon("kumaboshi")], never_called).process_all_end_turn_effects()
    assert result.events == []
    assert result.messages == []
