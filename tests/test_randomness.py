import random

import numpy as np
import pytest

from pdbqtdock.randomness import (
    auto_seed,
    random_fl,
    random_in_box,
    random_inside_sphere,
    random_int,
    random_normal,
    random_sz,
)


def test_random_fl_in_range_and_reproducible():
    g1, g2 = random.Random(42), random.Random(42)
    values = [random_fl(-2.0, 3.0, g1) for _ in range(200)]
    assert all(-2.0 <= v <= 3.0 for v in values)
    assert values == [random_fl(-2.0, 3.0, g2) for _ in range(200)]


def test_random_fl_empty_range():
    with pytest.raises(ValueError):
        random_fl(1.0, 1.0, random.Random(0))


def test_random_normal():
    g = random.Random(1)
    values = [random_normal(5.0, 0.5, g) for _ in range(2000)]
    assert abs(sum(values) / len(values) - 5.0) < 0.1
    with pytest.raises(ValueError):
        random_normal(0.0, -1.0, g)


def test_random_normal_zero_sigma():
    assert random_normal(2.5, 0.0, random.Random(3)) == 2.5


def test_random_int_bounds():
    g = random.Random(7)
    values = {random_int(-3, 3, g) for _ in range(500)}
    assert values == set(range(-3, 4))
    with pytest.raises(ValueError):
        random_int(4, 3, g)


def test_random_sz():
    g = random.Random(9)
    assert all(0 <= random_sz(0, 5, g) <= 5 for _ in range(100))
    with pytest.raises(ValueError):
        random_sz(-1, 5, g)


def test_random_inside_sphere():
    g = random.Random(11)
    for _ in range(200):
        p = random_inside_sphere(g)
        assert p.shape == (3,)
        assert float(np.dot(p, p)) < 1


def test_random_in_box():
    g = random.Random(13)
    lo, hi = (-1.0, 2.0, 10.0), (1.0, 3.0, 20.0)
    for _ in range(100):
        p = random_in_box(lo, hi, g)
        assert all(a <= x <= b for a, x, b in zip(lo, p, hi))


def test_auto_seed_range():
    seeds = [auto_seed() for _ in range(50)]
    assert all(-(2**31) <= s < 2**31 for s in seeds)
    assert len(set(seeds)) > 1