from battle_rules.utils.rng import LcgRandom, sequence_random, system_random


def test_lcg_first_draw():
    rng = LcgRandom(0)
    assert rng.rand16() == 0x3C6E
    assert rng.seed == 0x3C6EF35F


def test_lcg_is_reproducible():
    first = LcgRandom(1234)
    second = LcgRandom(1234)
    draws = [first() for _ in range(50)]
    assert draws == [second() for _ in range(50)]
    assert all(0.0 <= draw < 1.0 for draw in draws)


def test_sequence_random_repeats_last_value():
    random = sequence_random([0.1, 0.2])
    assert [random(), random(), random()] == [0.1, 0.2, 0.2]


def test_system_random_range():
    random = system_random()
    assert 0.0 <= random() < 1.0
