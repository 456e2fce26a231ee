from __future__ import annotations

import random

import pytest

from parsebench.generator import MAX_DRAW, generate, is_malformed, iter_records

CONVERGENCE_COUNT = 10_000
CONVERGENCE_TOLERANCE = 0.05


def test_generate_is_deterministic():
    first = generate(seed=7, count=500, error_rate=0.3)
    second = generate(seed=7, count=500, error_rate=0.3)

    assert first == second
    assert [r.payload for r in first] == [r.payload for r in second]


def test_different_seeds_produce_different_sequences():
    assert generate(seed=1, count=50, error_rate=0.3) != generate(seed=2, count=50, error_rate=0.3)


def test_records_are_indexed_in_order():
    records = generate(seed=1, count=25, error_rate=0.5)
    assert [r.index for r in records] == list(range(25))


def test_zero_error_rate_yields_only_well_formed_records():
    records = generate(seed=1, count=2_000, error_rate=0.0)

    assert not any(is_malformed(r) for r in records)
    for record in records:
        assert record.payload.isdigit()
        assert 0 <= int(record.payload) < MAX_DRAW


def test_full_error_rate_marks_every_record():
    records = generate(seed=1, count=10, error_rate=1.0)

    assert len(records) == 10
    assert all(r.payload.startswith("X") for r in records)


def test_zero_count_yields_empty_sequence():
    assert generate(seed=1, count=0, error_rate=0.5) == []


def test_corruption_only_prefixes_the_same_draw():
    clean = generate(seed=11, count=300, error_rate=0.0)
    corrupt = generate(seed=11, count=300, error_rate=1.0)

    assert [r.payload for r in corrupt] == ["X" + r.payload for r in clean]


def test_custom_bad_prefix():
    records = generate(seed=4, count=20, error_rate=1.0, bad_prefix="#")
    assert all(r.payload.startswith("#") for r in records)
    assert all(is_malformed(r, "#") for r in records)


def test_iter_records_with_explicit_handle_matches_generate():
    streamed = list(iter_records(random.Random(9), count=100, error_rate=0.4))
    assert streamed == generate(seed=9, count=100, error_rate=0.4)


def test_iter_records_does_not_touch_module_random_state():
    random.seed(1234)
    expected = random.random()

    random.seed(1234)
    generate(seed=5, count=100, error_rate=0.5)
    assert random.random() == expected


@pytest.mark.parametrize("error_rate", [0.1, 0.5, 0.9])
def test_malformed_fraction_converges_to_error_rate(error_rate):
    records = generate(seed=1, count=CONVERGENCE_COUNT, error_rate=error_rate)
    fraction = sum(1 for r in records if is_malformed(r)) / CONVERGENCE_COUNT

    assert abs(fraction - error_rate) < CONVERGENCE_TOLERANCE


@pytest.mark.parametrize(
    ("count", "error_rate", "bad_prefix"),
    [
        (-1, 0.5, "X"),
        (10, -0.1, "X"),
        (10, 1.5, "X"),
        (10, 0.5, ""),
        (10, 0.5, "7"),
        (10, 0.5, "-"),
        (10, 0.5, " X"),
    ],
)
def test_generate_rejects_invalid_parameters(count, error_rate, bad_prefix):
    with pytest.raises(ValueError):
        generate(seed=1, count=count, error_rate=error_rate, bad_prefix=bad_prefix)
