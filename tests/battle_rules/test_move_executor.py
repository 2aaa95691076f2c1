from battle_rules.data.moves import MOVE_DEFINITIONS
from battle_rules.enums import Ability, StatusCondition
from battle_rules.move_executor import execute_move, execute_struggle
from battle_rules.schema.battle_state import BattlerState
from battle_rules.schema.events import FaintedEvent, HealedEvent, ItemConsumedEvent, RecoilEvent
from battle_rules.utils.mon_factory import create_battler, create_monster
from battle_rules.utils.rng import sequence_random


def make_mon(species_id: str, *, level: int = 50, moves: list[str] | None = None, ability: Ability | None = None, status: StatusCondition | None = None, item: str | None = None) -> BattlerState:
    monster = create_monster(species_id, level=level, moves=moves, ability=ability.value if ability is not None else None, held_item=item)
    monster.status = status
    return create_battler(monster)


def test_damaging_move_spends_pp_and_updates_hp():
    attacker = make_mon("kumaboshi", moves=["tackle"])
    defender = make_mon("himori")
    # accuracy, crit, variance
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["tackle"], sequence_random([0.0, 0.99, 0.0]))

    assert outcome.hit
    assert attacker.monster.moves[0].current_pp == MOVE_DEFINITIONS["tackle"].pp - 1
    assert outcome.defender_hp_after == defender.max_hp - outcome.damage.damage
    assert defender.monster.current_hp == outcome.defender_hp_after


def test_miss_when_roll_exceeds_accuracy():
    attacker = make_mon("kumaboshi", moves=["take-down"])
    defender = make_mon("himori")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["take-down"], sequence_random([0.9]))
    assert not outcome.hit
    assert "The attack missed!" in outcome.messages
    assert defender.monster.current_hp == defender.max_hp
    assert attacker.monster.moves[0].current_pp == MOVE_DEFINITIONS["take-down"].pp - 1


def test_no_pp_left():
    attacker = make_mon("kumaboshi", moves=["tackle"])
    attacker.monster.moves[0].current_pp = 0
    outcome = execute_move(attacker, make_mon("himori"), MOVE_DEFINITIONS["tackle"], sequence_random([0.0]))
    assert not outcome.hit
    assert outcome.messages == ["But there's no PP left for this move!"]


def test_sleeping_attacker_cannot_move():
    attacker = make_mon("kumaboshi", moves=["tackle"], status=StatusCondition.SLEEP)
    outcome = execute_move(attacker, make_mon("himori"), MOVE_DEFINITIONS["tackle"], sequence_random([0.9]))
    assert not outcome.hit
    assert attacker.monster.moves[0].current_pp == MOVE_DEFINITIONS["tackle"].pp
    assert attacker.monster.status == StatusCondition.SLEEP


def test_waking_up_allows_the_move():
    attacker = make_mon("kumaboshi", moves=["tackle"], status=StatusCondition.SLEEP)
    outcome = execute_move(attacker, make_mon("himori"), MOVE_DEFINITIONS["tackle"], sequence_random([0.1, 0.0, 0.99, 0.0]))
    assert outcome.hit
    assert attacker.monster.status is None


def test_status_move_inflicts_status():
    attacker = make_mon("hikarineko", moves=["thunder-wave"])
    defender = make_mon("kumaboshi")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["thunder-wave"], sequence_random([0.0]))
    assert outcome.hit
    assert outcome.status_applied == StatusCondition.PARALYSIS
    assert defender.monster.status == StatusCondition.PARALYSIS
    assert outcome.damage is None


def test_status_move_fails_on_immune_target():
    attacker = make_mon("hikarineko", moves=["thunder-wave"])
    defender = make_mon("raikoneko")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["thunder-wave"], sequence_random([0.0]))
    assert outcome.status_applied is None
    assert "But it failed!" in outcome.messages


def test_stat_moves_pick_their_target():
    attacker = make_mon("kumaboshi", moves=["growl", "swords-dance"])
    defender = make_mon("himori")
    execute_move(attacker, defender, MOVE_DEFINITIONS["growl"], sequence_random([0.0]))
    execute_move(attacker, defender, MOVE_DEFINITIONS["swords-dance"], sequence_random([0.0]))
    assert defender.stages.atk == -1
    assert attacker.stages.atk == 2


def test_synchronize_answers_a_status_move():
    attacker = make_mon("hikarineko", moves=["poison-powder"])
    defender = make_mon("kumaboshi", ability=Ability.SYNCHRONIZE)
    execute_move(attacker, defender, MOVE_DEFINITIONS["poison-powder"], sequence_random([0.0]))
    assert defender.monster.status == StatusCondition.POISON
    assert attacker.monster.status == StatusCondition.POISON


def test_secondary_status_roll():
    attacker = make_mon("himori", moves=["ember"])
    defender = make_mon("kumaboshi")
    # accuracy, crit, variance, burn chance
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["ember"], sequence_random([0.0, 0.99, 0.0, 0.05]))
    assert outcome.status_applied == StatusCondition.BURN


def test_flinch_blocked_by_inner_focus():
    attacker = make_mon("kumaboshi", moves=["headbutt"])
    defender = make_mon("tobibato", ability=Ability.INNER_FOCUS)
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["headbutt"], sequence_random([0.0, 0.99, 0.0, 0.0]))
    assert not outcome.flinched

    defender = make_mon("tobibato")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["headbutt"], sequence_random([0.0, 0.99, 0.0, 0.0]))
    assert outcome.flinched


def test_static_on_contact():
    attacker = make_mon("kumaboshi", moves=["tackle"])
    defender = make_mon("hikarineko")
    # accuracy, crit, variance, static
    execute_move(attacker, defender, MOVE_DEFINITIONS["tackle"], sequence_random([0.0, 0.99, 0.0, 0.1]))
    assert attacker.monster.status == StatusCondition.PARALYSIS


def test_focus_sash_is_spent_when_the_hit_lands():
    attacker = make_mon("shizukumo", level=100, moves=["bubble-beam"])
    defender = make_mon("himori", level=5, item="focus_sash")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["bubble-beam"], sequence_random([0.0, 0.99, 0.0]))
    assert defender.monster.current_hp == 1
    assert defender.monster.held_item is None
    assert any(isinstance(event, ItemConsumedEvent) for event in outcome.events)
    assert not any(isinstance(event, FaintedEvent) for event in outcome.events)


def test_absorbed_move_heals_the_defender():
    attacker = make_mon("shizukumo", moves=["water-gun"])
    defender = make_mon("kawadojou", ability=Ability.WATER_ABSORB)
    defender.monster.current_hp = 10
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["water-gun"], sequence_random([0.0]))
    assert defender.monster.current_hp == 10 + defender.max_hp // 4
    assert outcome.defender_hp_after == defender.monster.current_hp
    assert any(isinstance(event, HealedEvent) for event in outcome.events)


def test_flash_fire_is_switched_on_by_a_fire_hit():
    attacker = make_mon("himori", moves=["ember"])
    defender = make_mon("hinomori", ability=Ability.FLASH_FIRE)
    execute_move(attacker, defender, MOVE_DEFINITIONS["ember"], sequence_random([0.0]))
    assert defender.flash_fire_active
    assert defender.monster.current_hp == defender.max_hp


def test_recoil_is_applied_to_attacker():
    attacker = make_mon("kumaboshi", moves=["double-edge"])
    defender = make_mon("himori")
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["double-edge"], sequence_random([0.0, 0.99, 0.0]))
    recoil = [event for event in outcome.events if isinstance(event, RecoilEvent)]
    assert len(recoil) == 1
    assert attacker.monster.current_hp == attacker.max_hp - recoil[0].amount


def test_knockout_emits_fainted_event():
    attacker = make_mon("shizukumo", level=100, moves=["bubble-beam"])
    defender = make_mon("himori", level=5)
    outcome = execute_move(attacker, defender, MOVE_DEFINITIONS["bubble-beam"], sequence_random([0.0, 0.99, 0.0]))
    assert outcome.defender_hp_after == 0
    assert any(isinstance(event, FaintedEvent) and event.target == defender.uid for event in outcome.events)


def test_struggle_damage_and_recoil():
    attacker = make_mon("kumaboshi", level=20)
    defender = make_mon("himori")
    outcome = execute_struggle(attacker, defender, lambda: 0.5)
    assert outcome.hit
    assert outcome.damage.damage == 40
    assert defender.monster.current_hp == defender.max_hp - 40
    assert attacker.monster.current_hp == attacker.max_hp - attacker.max_hp // 4
